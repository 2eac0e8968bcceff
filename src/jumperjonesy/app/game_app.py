from __future__ import annotations

import logging
import random
import tkinter as tk
from concurrent.futures import Future
from typing import Any

from jumperjonesy.app.config import AppConfig
from jumperjonesy.app.game_controller import GameController
from jumperjonesy.app.game_loop import GameLoop
from jumperjonesy.domain.game_state import GameContext, take_snapshot
from jumperjonesy.domain.geometry import Viewport
from jumperjonesy.domain.state_machine import JumpPressed
from jumperjonesy.infra.sprite_loader import SpriteLoader
from jumperjonesy.ui.input_mapper import TkInputMapper
from jumperjonesy.ui.menu_layout import MenuLayout
from jumperjonesy.ui.tk_canvas_view import GAME_TITLE, TkCanvasView

logger = logging.getLogger(__name__)


class GameApp:
    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or AppConfig()
        cfg = self.config

        self.root = tk.Tk()
        self.root.title(GAME_TITLE)

        viewport = Viewport(width=float(cfg.width), height=float(cfg.height))
        self.ctx = GameContext.create(viewport, tuning=cfg.tuning, rng=random.Random(cfg.seed))
        self.controller = GameController(self.ctx)
        self.layout = MenuLayout(viewport, level_count=cfg.tuning.level_count)

        self.view = TkCanvasView(self.root, width=cfg.width, height=cfg.height, debug_hitbox=cfg.debug_hitbox)
        self.view.canvas.bind("<Configure>", self._on_resize)
        self.input = TkInputMapper(self.root, pointer_target=self.view.canvas)

        self.sprites = SpriteLoader(self.root, cfg.sprite_path, retry_ms=cfg.sprite_retry_ms)

        self.loop = GameLoop(
            root=self.root,
            render_fn=self._render,
            update_fn=self._update,
            fps=cfg.fps,
            max_dt=cfg.tuning.max_frame_dt,
        )
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def run(self) -> None:
        ready = self.sprites.load()
        ready.add_done_callback(self._on_sprite_ready)
        self.loop.start(ready=ready)
        self.root.mainloop()

    def _on_sprite_ready(self, future: Future[Any]) -> None:
        self.view.set_sprite(future.result())

    # ---------- Tk callbacks ----------

    def _on_resize(self, evt: tk.Event) -> None:
        if evt.width <= 1 or evt.height <= 1:
            return
        if self.ctx.resize(float(evt.width), float(evt.height)):
            self.layout.relayout(self.ctx.viewport)
            logger.debug("resized to %dx%d", evt.width, evt.height)

    def _on_close(self) -> None:
        self.loop.stop()
        self.root.destroy()

    # ---------- Game loop ----------

    def _update(self, dt: float) -> None:
        # Queued input is applied before this frame's simulation steps.
        inp = self.input.sample()
        for x, y in inp.clicks:
            event = self.layout.resolve_click(self.ctx.state, x, y)
            if event is not None:
                self.controller.dispatch(event)
        if inp.jump_pressed:
            self.controller.dispatch(JumpPressed())

        self.controller.update(dt)

    def _render(self) -> None:
        snap = take_snapshot(self.ctx)
        self.view.render(snap, self.layout.buttons_for(self.ctx.state))
