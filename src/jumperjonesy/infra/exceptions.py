class SpriteLoadError(Exception):
    """Raised when the player sprite cannot be opened (missing, unreadable or not an image)."""
