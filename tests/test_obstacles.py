from __future__ import annotations

import dataclasses
import random

import pytest

from conftest import StubRng
from jumperjonesy.domain.geometry import Viewport
from jumperjonesy.domain.obstacles import (
    GenerationMode,
    difficulty_factor,
    generate,
    obstacle_limits,
    target_span,
)
from jumperjonesy.domain.physics import derive_physics


def _generate(mode, level_or_score, constants, viewport, tuning, rng):
    return generate(mode, level_or_score, constants=constants, viewport=viewport, rng=rng, tuning=tuning)


def _assert_well_formed(obstacles, mode, level_or_score, constants, viewport, tuning):
    d = difficulty_factor(mode, level_or_score, tuning)
    limits = obstacle_limits(d, constants, viewport, tuning)

    assert obstacles
    for o in obstacles:
        assert o.width > 0 and o.height > 0
        assert o.width <= limits.max_width
        assert o.height <= limits.max_height
        assert o.y + o.height == pytest.approx(constants.floor_y)

    for a, b in zip(obstacles, obstacles[1:]):
        assert a.x + a.width <= b.x
        assert b.x - a.right >= limits.min_gap - 1e-9


def test_difficulty_factor(tuning):
    assert difficulty_factor(GenerationMode.LEVEL, 1, tuning) == pytest.approx(1.0)
    assert difficulty_factor(GenerationMode.LEVEL, 3, tuning) == pytest.approx(1.3)
    assert difficulty_factor(GenerationMode.ENDLESS, 0, tuning) == pytest.approx(1.0)
    assert difficulty_factor(GenerationMode.ENDLESS, 999, tuning) == pytest.approx(1.2)
    assert difficulty_factor(GenerationMode.ENDLESS, 1000, tuning) == pytest.approx(1.4)


def test_target_span(tuning):
    assert target_span(GenerationMode.LEVEL, 1, tuning) == 900
    assert target_span(GenerationMode.LEVEL, 10, tuning) == 1800
    assert target_span(GenerationMode.ENDLESS, 0, tuning) == tuning.endless_distance


@pytest.mark.parametrize("seed", [0, 1, 7, 42, 2024])
@pytest.mark.parametrize("level", [1, 5, 25, 50])
def test_level_generation_is_well_formed(seed, level, constants, viewport, tuning):
    obstacles = _generate(GenerationMode.LEVEL, level, constants, viewport, tuning, random.Random(seed))
    _assert_well_formed(obstacles, GenerationMode.LEVEL, level, constants, viewport, tuning)


@pytest.mark.parametrize("score", [0, 2500, 40_000])
def test_endless_generation_is_well_formed(score, constants, viewport, tuning):
    obstacles = _generate(GenerationMode.ENDLESS, score, constants, viewport, tuning, random.Random(score))
    _assert_well_formed(obstacles, GenerationMode.ENDLESS, score, constants, viewport, tuning)
    assert obstacles[-1].right - viewport.width * tuning.spawn_offset_w >= tuning.endless_distance


def test_generation_starts_ahead_of_the_player(constants, viewport, tuning):
    obstacles = _generate(GenerationMode.LEVEL, 1, constants, viewport, tuning, random.Random(3))
    assert obstacles[0].x >= viewport.width * tuning.spawn_offset_w
    assert obstacles[0].x > constants.player_x + constants.player_size


def test_span_stops_at_target(constants, viewport, tuning):
    obstacles = _generate(GenerationMode.LEVEL, 4, constants, viewport, tuning, StubRng())
    start = viewport.width * tuning.spawn_offset_w
    target = target_span(GenerationMode.LEVEL, 4, tuning)

    assert obstacles[-1].right - start >= target
    if len(obstacles) > 1:
        assert obstacles[-2].right - start < target


def test_tall_variant_follows_roll(constants, viewport, tuning):
    limits = obstacle_limits(1.0, constants, viewport, tuning)

    tall = _generate(GenerationMode.LEVEL, 1, constants, viewport, tuning, StubRng(roll=0.1))
    short = _generate(GenerationMode.LEVEL, 1, constants, viewport, tuning, StubRng(roll=0.9))

    assert {o.height for o in tall} == {limits.tall_height}
    assert {o.height for o in short} == {limits.base_height}
    assert limits.tall_height > limits.base_height


def test_tall_share_is_roughly_a_quarter(constants, viewport, tuning):
    obstacles = _generate(GenerationMode.ENDLESS, 0, constants, viewport, tuning, random.Random(99))
    limits = obstacle_limits(1.0, constants, viewport, tuning)
    share = sum(1 for o in obstacles if o.height == limits.tall_height) / len(obstacles)
    assert 0.18 < share < 0.32


def test_tiny_viewport_is_clamped_not_degenerate(tuning):
    viewport = Viewport(width=20, height=10)
    constants = derive_physics(viewport, tuning)
    obstacles = _generate(GenerationMode.LEVEL, 50, constants, viewport, tuning, random.Random(5))
    _assert_well_formed(obstacles, GenerationMode.LEVEL, 50, constants, viewport, tuning)


def test_height_cap_applies_at_high_difficulty(constants, viewport, tuning):
    steep = dataclasses.replace(tuning, tall_height_difficulty=10_000.0)
    obstacles = _generate(GenerationMode.LEVEL, 50, constants, viewport, steep, StubRng(roll=0.0))
    assert max(o.height for o in obstacles) == pytest.approx(viewport.height * steep.max_obstacle_height_h)
