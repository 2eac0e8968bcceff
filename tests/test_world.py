from __future__ import annotations

import pytest

from jumperjonesy.domain.exceptions import LevelCompleted, PlayerDied
from jumperjonesy.domain.game_state import Menu, PlayingInfinite, PlayingLevel
from jumperjonesy.domain.obstacles import GenerationMode, Obstacle
from jumperjonesy.domain.world import World, advance, scroll_speed


def _far_away(x: float, floor_y: float, width: float = 20.0) -> Obstacle:
    return Obstacle(x=x, y=floor_y - 10, width=width, height=10)


def test_scroll_speed(tuning):
    assert scroll_speed(GenerationMode.LEVEL, 0, tuning) == 250
    assert scroll_speed(GenerationMode.LEVEL, 10_000, tuning) == 250
    assert scroll_speed(GenerationMode.ENDLESS, 0, tuning) == 300
    assert scroll_speed(GenerationMode.ENDLESS, 99, tuning) == 300
    assert scroll_speed(GenerationMode.ENDLESS, 250, tuning) == 310


def test_advance_scrolls_every_obstacle(ctx):
    ctx.state = PlayingLevel(level=1)
    floor = ctx.physics.floor_y
    ctx.obstacles = [_far_away(600, floor), _far_away(700, floor)]

    result = advance(ctx, 0.1)

    assert not result.collided and not result.level_completed
    assert [o.x for o in ctx.obstacles] == pytest.approx([575, 675])


def test_advance_does_nothing_outside_play(ctx):
    ctx.state = Menu()
    floor = ctx.physics.floor_y
    ctx.obstacles = [_far_away(600, floor)]

    advance(ctx, 1.0)
    assert ctx.obstacles[0].x == 600


def test_collision_reported(ctx):
    ctx.state = PlayingInfinite()
    p = ctx.player
    ctx.obstacles = [Obstacle(x=p.x, y=p.y, width=p.width, height=p.height)]

    assert advance(ctx, 0.0).collided


def test_level_completes_when_last_obstacle_leaves(ctx):
    ctx.state = PlayingLevel(level=1)
    floor = ctx.physics.floor_y
    ctx.obstacles = [_far_away(-200, floor), _far_away(-10, floor, width=20)]

    # Last obstacle's right edge: 10 -> 5 (still visible) -> -5.
    assert not advance(ctx, 0.02).level_completed
    assert advance(ctx, 0.04).level_completed


def test_earlier_obstacles_leaving_does_not_complete(ctx):
    ctx.state = PlayingLevel(level=1)
    floor = ctx.physics.floor_y
    ctx.obstacles = [_far_away(-500, floor), _far_away(900, floor)]

    assert not advance(ctx, 0.01).level_completed


def test_endless_mode_never_completes(ctx):
    ctx.state = PlayingInfinite()
    floor = ctx.physics.floor_y
    ctx.obstacles = [_far_away(-500, floor)]

    assert not advance(ctx, 0.01).level_completed


def test_cleanup_drops_far_obstacles_but_keeps_the_last(ctx):
    ctx.state = PlayingInfinite()
    floor = ctx.physics.floor_y
    ctx.obstacles = [_far_away(-3000, floor), _far_away(-2000, floor), _far_away(-1500, floor)]

    advance(ctx, 0.0)

    assert len(ctx.obstacles) == 1
    assert ctx.obstacles[0].x == -1500


def test_cleanup_leaves_near_obstacles(ctx):
    ctx.state = PlayingInfinite()
    floor = ctx.physics.floor_y
    ctx.obstacles = [_far_away(-900, floor), _far_away(900, floor)]

    advance(ctx, 0.0)
    assert len(ctx.obstacles) == 2


def test_world_step_raises_on_collision(ctx):
    ctx.state = PlayingInfinite()
    p = ctx.player
    ctx.obstacles = [Obstacle(x=p.x, y=p.y, width=p.width, height=p.height)]

    with pytest.raises(PlayerDied):
        World().step(ctx, 1 / 120)


def test_world_step_raises_on_completion(ctx):
    ctx.state = PlayingLevel(level=2)
    ctx.obstacles = [_far_away(-100, ctx.physics.floor_y)]

    with pytest.raises(LevelCompleted):
        World().step(ctx, 1 / 120)


def test_world_step_scores_only_in_endless(ctx):
    floor = ctx.physics.floor_y

    ctx.state = PlayingInfinite()
    ctx.obstacles = [_far_away(2000, floor)]
    World().step(ctx, 0.5)
    assert ctx.run.score == pytest.approx(125)

    ctx.state = PlayingLevel(level=1)
    World().step(ctx, 0.5)
    assert ctx.run.score == pytest.approx(125)


def test_advance_moves_obstacles_in_place(ctx):
    ctx.state = PlayingInfinite()
    floor = ctx.physics.floor_y
    obstacles = [_far_away(600, floor), _far_away(700, floor)]
    first = obstacles[0]
    ctx.obstacles = obstacles

    advance(ctx, 0.1)

    assert ctx.obstacles is obstacles
    assert ctx.obstacles[0] is first
    assert first.x == pytest.approx(570)
    assert (first.width, first.height) == (20, 10)


def test_endless_scroll_distance_matches_speed(ctx):
    ctx.state = PlayingInfinite()
    floor = ctx.physics.floor_y
    ctx.obstacles = [_far_away(2000 + 500 * i, floor) for i in range(2000)]

    for _ in range(120):
        advance(ctx, 1 / 120)

    assert ctx.obstacles[-1].x == pytest.approx(2000 + 500 * 1999 - 300)
