from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import ClassVar, Optional, Union

from jumperjonesy.domain.collision import player_hitbox
from jumperjonesy.domain.geometry import Rect, Viewport
from jumperjonesy.domain.obstacles import GenerationMode, Obstacle
from jumperjonesy.domain.physics import PhysicsConstants, derive_physics, new_player, place_on_ground
from jumperjonesy.domain.player import Player
from jumperjonesy.domain.rng import RandomSource
from jumperjonesy.domain.tuning import Tuning


# ----- Screens -----

@dataclass(frozen=True)
class Menu:
    tag: ClassVar[str] = "menu"
    simulating: ClassVar[bool] = False


@dataclass(frozen=True)
class LevelSelect:
    tag: ClassVar[str] = "level_select"
    simulating: ClassVar[bool] = False


@dataclass(frozen=True)
class PlayingLevel:
    level: int
    tag: ClassVar[str] = "playing_level"
    simulating: ClassVar[bool] = True
    mode: ClassVar[GenerationMode] = GenerationMode.LEVEL


@dataclass(frozen=True)
class PlayingInfinite:
    tag: ClassVar[str] = "playing_infinite"
    simulating: ClassVar[bool] = True
    mode: ClassVar[GenerationMode] = GenerationMode.ENDLESS


Playing = Union[PlayingLevel, PlayingInfinite]


@dataclass(frozen=True)
class GameOver:
    previous: Playing
    tag: ClassVar[str] = "game_over"
    simulating: ClassVar[bool] = False


@dataclass(frozen=True)
class LevelComplete:
    tag: ClassVar[str] = "level_complete"
    simulating: ClassVar[bool] = False


GameState = Union[Menu, LevelSelect, PlayingLevel, PlayingInfinite, GameOver, LevelComplete]


# ----- Run + context -----

@dataclass
class RunContext:
    level: int = 1
    score: float = 0.0


@dataclass
class GameContext:
    """Everything one game owns. Passed explicitly to each subsystem."""

    viewport: Viewport
    tuning: Tuning
    physics: PhysicsConstants
    player: Player
    rng: RandomSource
    obstacles: list[Obstacle] = field(default_factory=list)
    state: GameState = field(default_factory=Menu)
    run: RunContext = field(default_factory=RunContext)

    @classmethod
    def create(
        cls,
        viewport: Viewport,
        *,
        tuning: Optional[Tuning] = None,
        rng: Optional[RandomSource] = None,
    ) -> GameContext:
        tuning = tuning or Tuning()
        physics = derive_physics(viewport, tuning)
        return cls(
            viewport=viewport,
            tuning=tuning,
            physics=physics,
            player=new_player(physics),
            rng=rng if rng is not None else random.Random(),
        )

    def resize(self, width: float, height: float) -> bool:
        """
        Recompute scale-dependent constants. Returns False when the size is
        unchanged (nothing is touched in that case).
        """
        viewport = Viewport(width=width, height=height)
        if viewport == self.viewport:
            return False

        self.viewport = viewport
        self.physics = derive_physics(viewport, self.tuning)
        place_on_ground(self.player, self.physics)

        # Keep existing obstacles standing on the new floor line.
        floor_y = self.physics.floor_y
        for o in self.obstacles:
            o.y = floor_y - o.height
        return True

    def reset_run(self) -> None:
        place_on_ground(self.player, self.physics)
        self.obstacles = []


# ----- Read-only view for the renderer -----

@dataclass(frozen=True)
class RenderSnapshot:
    state: GameState
    tag: str
    viewport: Viewport
    floor_y: float
    player: Rect
    hitbox: Rect
    obstacles: tuple[Rect, ...]
    score: float
    level: int


def take_snapshot(ctx: GameContext) -> RenderSnapshot:
    return RenderSnapshot(
        state=ctx.state,
        tag=ctx.state.tag,
        viewport=ctx.viewport,
        floor_y=ctx.physics.floor_y,
        player=ctx.player.rect,
        hitbox=player_hitbox(ctx.player, ctx.tuning),
        obstacles=visible_obstacles(ctx),
        score=ctx.run.score,
        level=ctx.run.level,
    )


def visible_obstacles(ctx: GameContext) -> tuple[Rect, ...]:
    """Obstacles overlapping the viewport horizontally; relies on x order."""
    width = ctx.viewport.width
    out: list[Rect] = []
    for o in ctx.obstacles:
        if o.x >= width:
            break
        if o.x + o.width > 0.0:
            out.append(Rect(x=o.x, y=o.y, width=o.width, height=o.height))
    return tuple(out)
