from __future__ import annotations

import logging
import time
import tkinter as tk
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any

logger = logging.getLogger(__name__)


class GameLoop:
    def __init__(
        self,
        *,
        root: tk.Misc,
        update_fn: Callable[[float], None],
        render_fn: Callable[[], None],
        fps: int = 60,
        max_dt: float = 0.1,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._root = root
        self._update_fn = update_fn
        self._render_fn = render_fn
        self._target_ms = max(1, int(1000 / max(1, fps)))
        self._max_dt = max_dt
        self._clock = clock

        self._running = False
        self._after_id: str | None = None
        self._last_t: float | None = None

    @property
    def running(self) -> bool:
        return self._running

    def start(self, ready: Future[Any] | None = None) -> None:
        """
        Begin ticking. With `ready`, wait once for it to resolve first; the
        callback may fire on the thread that completes the future, so the
        actual start is handed back to Tk with `after`.
        """
        if self._running:
            return
        if ready is None or ready.done():
            self._begin()
            return
        ready.add_done_callback(lambda _f: self._root.after(0, self._begin))

    def stop(self) -> None:
        self._running = False
        if self._after_id is not None:
            try:
                self._root.after_cancel(self._after_id)
            except tk.TclError:
                # Root may already be destroyed; ignore during shutdown.
                pass
            finally:
                self._after_id = None

    def _begin(self) -> None:
        if self._running:
            return
        self._running = True
        self._last_t = None
        self._tick()

    def _schedule_next(self) -> None:
        self._after_id = self._root.after(self._target_ms, self._tick)

    def _tick(self) -> None:
        if not self._running:
            return

        now = self._clock()
        # No previous timestamp on the first frame.
        dt = 0.0 if self._last_t is None else now - self._last_t
        self._last_t = now

        # Clamp to avoid huge dt after pauses/minimize.
        dt = min(max(dt, 0.0), self._max_dt)

        try:
            self._update_fn(dt)
            self._render_fn()
        except Exception:
            logger.exception("frame failed; stopping loop")
            self.stop()
            raise

        self._schedule_next()
