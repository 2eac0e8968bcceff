from __future__ import annotations

import logging

from jumperjonesy.domain import physics
from jumperjonesy.domain.exceptions import LevelCompleted, PlayerDied
from jumperjonesy.domain.game_state import GameContext, GameState
from jumperjonesy.domain.obstacles import GenerationMode, generate
from jumperjonesy.domain.state_machine import (
    AdvanceLevel,
    Collided,
    Command,
    Event,
    HaltPlayer,
    Jump,
    LevelCleared,
    Regenerate,
    ResetRun,
    ResetScore,
    SetLevel,
    transition,
)
from jumperjonesy.domain.world import World

logger = logging.getLogger(__name__)


class GameController:
    """Feeds events through the state machine and runs the fixed-step simulation."""

    def __init__(self, ctx: GameContext, *, world: World | None = None) -> None:
        self.ctx = ctx
        self.world = world or World()
        self._accum = 0.0

    @property
    def state(self) -> GameState:
        return self.ctx.state

    def dispatch(self, event: Event) -> GameState:
        t = transition(self.ctx.state, event, level_count=self.ctx.tuning.level_count)
        if t.state != self.ctx.state:
            logger.info("state %s -> %s (%s)", self.ctx.state.tag, t.state.tag, type(event).__name__)
        self.ctx.state = t.state
        for cmd in t.commands:
            self._apply(cmd)
        return self.ctx.state

    def update(self, dt: float) -> None:
        if not self.ctx.state.simulating:
            self._accum = 0.0
            return

        fixed_dt = self.ctx.tuning.fixed_dt
        max_steps = self.ctx.tuning.max_steps_per_frame

        self._accum += dt
        steps = 0
        while self._accum >= fixed_dt and steps < max_steps:
            try:
                self.world.step(self.ctx, fixed_dt)
            except PlayerDied:
                self.dispatch(Collided())
                self._accum = 0.0
                return
            except LevelCompleted:
                self.dispatch(LevelCleared())
                self._accum = 0.0
                return

            self._accum -= fixed_dt
            steps += 1

        # Fell behind: drop the backlog rather than spiral.
        if steps == max_steps:
            self._accum = min(self._accum, fixed_dt)

    # ---------- Commands ----------

    def _apply(self, cmd: Command) -> None:
        ctx = self.ctx
        if isinstance(cmd, ResetRun):
            ctx.reset_run()
            self._accum = 0.0
        elif isinstance(cmd, ResetScore):
            ctx.run.score = 0.0
        elif isinstance(cmd, SetLevel):
            ctx.run.level = cmd.level
        elif isinstance(cmd, AdvanceLevel):
            ctx.run.level += 1
            logger.info("level cleared, next level %d", ctx.run.level)
        elif isinstance(cmd, Regenerate):
            self._regenerate(cmd.mode)
        elif isinstance(cmd, HaltPlayer):
            ctx.player.vy = 0.0
            ctx.player.grounded = True
        elif isinstance(cmd, Jump):
            physics.jump(ctx.player, ctx.physics)
        else:
            raise TypeError(f"Unknown command: {cmd!r}")

    def _regenerate(self, mode: GenerationMode) -> None:
        ctx = self.ctx
        level_or_score = ctx.run.level if mode is GenerationMode.LEVEL else ctx.run.score
        ctx.obstacles = generate(
            mode,
            level_or_score,
            constants=ctx.physics,
            viewport=ctx.viewport,
            rng=ctx.rng,
            tuning=ctx.tuning,
        )
        logger.debug("generated %d obstacles (%s, %s)", len(ctx.obstacles), mode.value, level_or_score)
