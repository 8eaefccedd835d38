"""Game configuration constants."""

# Starship maxima
STARSHIP_MAX_HEALTH = 100.0
STARSHIP_MAX_DEFENCE = 10.0
STARSHIP_MAX_ATTACK = 30.0
STARSHIP_MAX_CREW = 10

# Starbase maxima
STARBASE_MAX_HEALTH = 500.0
STARBASE_MAX_DEFENCE = 20.0

# Combat
DAMAGE_FLOOR = 5.0  # Minimum damage that always gets through defence
MIN_CREW = 1  # Skeleton crew kept until the hull is destroyed

# Repair ticks, as fractions of max health
REPAIR_QUARTILES = (0.25, 0.5, 0.75, 1.0)

# Demo
DEMO_ATTACK_ROUND_LIMIT = 200  # Safety cap on the siege loop
