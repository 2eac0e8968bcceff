class PlayerDied(Exception):
    """Raised by the world step when the player's hitbox touches an obstacle."""


class LevelCompleted(Exception):
    """Raised when the last obstacle of a finite level has left the screen."""
