from __future__ import annotations

import math
from dataclasses import dataclass

from jumperjonesy.domain import physics
from jumperjonesy.domain.collision import check_sorted, player_hitbox
from jumperjonesy.domain.exceptions import LevelCompleted, PlayerDied
from jumperjonesy.domain.game_state import GameContext, PlayingInfinite, PlayingLevel
from jumperjonesy.domain.obstacles import GenerationMode
from jumperjonesy.domain.tuning import Tuning


@dataclass(frozen=True)
class AdvanceResult:
    collided: bool
    level_completed: bool


def scroll_speed(mode: GenerationMode, score: float, tuning: Tuning) -> float:
    if mode is GenerationMode.LEVEL:
        return tuning.level_scroll_speed
    bonus = math.floor(score / tuning.speed_step_score) * tuning.speed_step
    return tuning.endless_scroll_speed + bonus


def advance(ctx: GameContext, dt: float) -> AdvanceResult:
    state = ctx.state
    if not isinstance(state, (PlayingLevel, PlayingInfinite)):
        return AdvanceResult(collided=False, level_completed=False)

    # ----- Scroll (move obstacles left) -----
    dx = scroll_speed(state.mode, ctx.run.score, ctx.tuning) * dt
    obstacles = ctx.obstacles
    for o in obstacles:
        o.x -= dx

    # ----- Hazard collision -----
    if check_sorted(player_hitbox(ctx.player, ctx.tuning), obstacles):
        return AdvanceResult(collided=True, level_completed=False)

    # ----- Win condition: the last-spawned obstacle is fully off-screen -----
    level_completed = False
    if isinstance(state, PlayingLevel):
        level_completed = not obstacles or obstacles[-1].right < 0.0

    # ----- Cleanup far off-screen obstacles (never the last one) -----
    limit = -ctx.tuning.cleanup_margin
    drop = 0
    while drop < len(obstacles) - 1 and obstacles[drop].right < limit:
        drop += 1
    if drop:
        del obstacles[:drop]

    return AdvanceResult(collided=False, level_completed=level_completed)


class World:
    def step(self, ctx: GameContext, dt: float) -> None:
        """
        One fixed simulation step: integrate the player, scroll obstacles and
        accumulate endless-mode score.

        Raises PlayerDied / LevelCompleted; the caller turns those into state
        machine events.
        """
        physics.step(ctx.player, ctx.physics, dt)

        result = advance(ctx, dt)
        if result.collided:
            raise PlayerDied()
        if result.level_completed:
            raise LevelCompleted()

        if isinstance(ctx.state, PlayingInfinite):
            ctx.run.score += ctx.tuning.score_rate * dt
