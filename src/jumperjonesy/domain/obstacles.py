from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from jumperjonesy.domain.geometry import Viewport
from jumperjonesy.domain.physics import PhysicsConstants
from jumperjonesy.domain.rng import RandomSource
from jumperjonesy.domain.tuning import Tuning


class GenerationMode(enum.Enum):
    LEVEL = "level"
    ENDLESS = "endless"


@dataclass
class Obstacle:
    """Shape is fixed at creation; only `x` changes afterwards, as the world scrolls."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass(frozen=True)
class ObstacleLimits:
    min_gap: float
    max_width: float
    max_height: float
    base_height: float
    tall_height: float


def difficulty_factor(mode: GenerationMode, level_or_score: float, tuning: Tuning) -> float:
    if mode is GenerationMode.LEVEL:
        return 1.0 + (level_or_score - 1) * tuning.level_difficulty_step
    return 1.0 + math.floor(level_or_score / tuning.score_bucket) * tuning.score_difficulty_step


def target_span(mode: GenerationMode, level_or_score: float, tuning: Tuning) -> float:
    if mode is GenerationMode.LEVEL:
        return tuning.level_base_distance + level_or_score * tuning.level_distance_per_level
    return tuning.endless_distance


def obstacle_limits(
    difficulty: float, constants: PhysicsConstants, viewport: Viewport, tuning: Tuning
) -> ObstacleLimits:
    size = constants.player_size
    max_height = max(tuning.min_obstacle_size, viewport.height * tuning.max_obstacle_height_h)
    base_height = min(max_height, size * tuning.base_height_ph)
    tall_height = min(max_height, size * tuning.tall_height_ph + difficulty * tuning.tall_height_difficulty)
    return ObstacleLimits(
        min_gap=max(size * tuning.min_gap_pw, tuning.min_gap),
        max_width=max(tuning.min_obstacle_size, size * tuning.max_width_pw),
        max_height=max_height,
        base_height=max(tuning.min_obstacle_size, base_height),
        tall_height=max(tuning.min_obstacle_size, tall_height),
    )


def generate(
    mode: GenerationMode,
    level_or_score: float,
    *,
    constants: PhysicsConstants,
    viewport: Viewport,
    rng: RandomSource,
    tuning: Tuning,
) -> list[Obstacle]:
    """
    Lay out a run's obstacles left to right, starting ahead of the player.

    `level_or_score` is the level number in LEVEL mode and the current score
    in ENDLESS mode. Every obstacle rests on the floor; consecutive obstacles
    are separated by at least `min_gap`, so the list is sorted by x and never
    overlaps.
    """
    difficulty = difficulty_factor(mode, level_or_score, tuning)
    target = target_span(mode, level_or_score, tuning)
    limits = obstacle_limits(difficulty, constants, viewport, tuning)

    start_x = viewport.width * tuning.spawn_offset_w
    cursor = start_x
    span = 0.0
    obstacles: list[Obstacle] = []

    while span < target:
        gap = max(
            limits.min_gap,
            tuning.base_gap - difficulty * tuning.gap_shrink + rng.uniform(0.0, tuning.gap_jitter),
        )
        cursor += gap

        width = min(
            limits.max_width,
            limits.base_height * tuning.width_base_ratio
            + difficulty * tuning.width_difficulty
            + rng.uniform(0.0, tuning.width_jitter),
        )
        width = max(tuning.min_obstacle_size, width)

        if rng.random() < tuning.tall_probability:
            height = limits.tall_height
        else:
            height = limits.base_height

        obstacles.append(Obstacle(x=cursor, y=constants.floor_y - height, width=width, height=height))

        cursor += width
        span = cursor - start_x

    return obstacles
