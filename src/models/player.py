"""Player identity model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """Identity of a player who owns fleets.

    Wraps the player number so ownership can later carry more than a bare
    integer.
    """

    player_no: int  # Non-negative player number

    def __post_init__(self):
        """Validate player data after initialization."""
        if self.player_no < 0:
            raise ValueError(f"Invalid player_no: {self.player_no} (must be >= 0)")

    def __str__(self) -> str:
        return f"Player {self.player_no}"
