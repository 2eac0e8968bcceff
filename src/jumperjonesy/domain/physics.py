from __future__ import annotations

import math
from dataclasses import dataclass

from jumperjonesy.domain.geometry import Viewport
from jumperjonesy.domain.player import Player
from jumperjonesy.domain.tuning import Tuning


@dataclass(frozen=True)
class PhysicsConstants:
    gravity: float            # px/s², positive = down
    jump_impulse: float       # px/s, negative = up
    min_jump_impulse: float   # px/s, magnitude
    terminal_velocity: float  # px/s
    ceiling_y: float
    floor_y: float
    ground_height: float
    player_x: float
    player_size: float
    jump_safety_margin: float
    position_precision: int


def derive_physics(viewport: Viewport, tuning: Tuning) -> PhysicsConstants:
    """
    Derive every scale-dependent constant from the viewport.

    Pure: the same viewport and tuning always give equal constants, so a
    repeated resize to the same size changes nothing.
    """
    h = viewport.height
    ground_height = max(tuning.min_ground_height, h * tuning.ground_height_h)
    return PhysicsConstants(
        gravity=h * tuning.gravity_h,
        jump_impulse=-h * tuning.jump_impulse_h,
        min_jump_impulse=h * tuning.min_jump_impulse_h,
        terminal_velocity=h * tuning.terminal_velocity_h,
        ceiling_y=h * tuning.ceiling_h,
        floor_y=h - ground_height,
        ground_height=ground_height,
        player_x=viewport.width * tuning.player_x_w,
        player_size=h * tuning.player_size_h,
        jump_safety_margin=tuning.jump_safety_margin,
        position_precision=tuning.position_precision,
    )


def new_player(constants: PhysicsConstants) -> Player:
    size = constants.player_size
    return Player(x=constants.player_x, y=constants.floor_y - size, vy=0.0, width=size, height=size)


def place_on_ground(player: Player, constants: PhysicsConstants) -> None:
    player.width = constants.player_size
    player.height = constants.player_size
    player.x = constants.player_x
    player.y = constants.floor_y - player.height
    player.vy = 0.0
    player.grounded = True


def step(player: Player, constants: PhysicsConstants, dt: float) -> None:
    if not player.grounded:
        vy = player.vy + constants.gravity * dt
        if vy > constants.terminal_velocity:
            vy = constants.terminal_velocity
        player.vy = vy
        player.y = round(player.y + vy * dt, constants.position_precision)

    # Ground
    if player.y + player.height > constants.floor_y:
        player.y = constants.floor_y - player.height
        player.vy = 0.0
        player.grounded = True

    # Ceiling: stops upward motion but is not something to stand on.
    if player.y < constants.ceiling_y:
        player.y = constants.ceiling_y
        if player.vy < 0.0:
            player.vy = 0.0


def jump(player: Player, constants: PhysicsConstants) -> bool:
    """Returns False (and does nothing) while airborne."""
    if not player.grounded:
        return False

    impulse = constants.jump_impulse
    space_above = max(0.0, player.y - constants.ceiling_y)
    allowed_rise = space_above * constants.jump_safety_margin

    if constants.gravity > 0.0 and jump_rise(impulse, constants.gravity) > allowed_rise:
        # Impulse whose apex stays inside the allowed rise.
        reduced = math.sqrt(2.0 * constants.gravity * allowed_rise)
        impulse = -min(-impulse, max(constants.min_jump_impulse, reduced))

    player.vy = impulse
    player.grounded = False
    return True


def jump_rise(impulse: float, gravity: float) -> float:
    return (impulse * impulse) / (2.0 * gravity)
