from __future__ import annotations

from collections.abc import Iterable

from jumperjonesy.domain.geometry import Box, Rect, overlaps
from jumperjonesy.domain.player import Player
from jumperjonesy.domain.tuning import Tuning


def player_hitbox(player: Player, tuning: Tuning) -> Rect:
    # Smaller than the sprite so near misses feel fair.
    return Rect(
        x=player.x + player.width * tuning.hitbox_offset_x,
        y=player.y + player.height * tuning.hitbox_offset_y,
        width=player.width * tuning.hitbox_width_scale,
        height=player.height * tuning.hitbox_height_scale,
    )


def check(hitbox: Box, obstacles: Iterable[Box]) -> bool:
    """True if the hitbox overlaps any obstacle, in any order. Stops at the first hit."""
    return any(overlaps(hitbox, o) for o in obstacles)


def check_sorted(hitbox: Box, obstacles: Iterable[Box]) -> bool:
    """
    Same answer as `check`, for obstacles ordered by x (as the generator lays
    them out and scrolling keeps them).

    Stops at the first obstacle that starts past the hitbox's right edge, so
    the cost depends on the obstacles near the player rather than on the
    length of the run.
    """
    right = hitbox.x + hitbox.width
    for o in obstacles:
        if o.x >= right:
            return False
        if overlaps(hitbox, o):
            return True
    return False
