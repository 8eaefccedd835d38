"""Data models for the starship combat core."""

from .entity import Entity, same_fleet
from .fleet import Fleet
from .game import Game, new_player, new_sector
from .player import Player
from .sector import Sector
from .starbase import Starbase
from .starship import Starship

__all__ = [
    "Entity",
    "Fleet",
    "Game",
    "Player",
    "Sector",
    "Starbase",
    "Starship",
    "new_player",
    "new_sector",
    "same_fleet",
]
