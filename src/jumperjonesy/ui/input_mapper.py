from __future__ import annotations
import tkinter as tk
from jumperjonesy.domain.input_state import InputState


class TkInputMapper:
    def __init__(self, root: tk.Misc, *, pointer_target: tk.Misc | None = None) -> None:
        self._jump_down = False
        self._jump_pressed_edge = False
        self._clicks: list[tuple[float, float]] = []

        for key in ("space", "Up"):
            root.bind(f"<KeyPress-{key}>", self._on_jump_down)
            root.bind(f"<KeyRelease-{key}>", self._on_jump_up)

        (pointer_target or root).bind("<Button-1>", self._on_click)

        # Helps ensure root gets key events.
        root.focus_set()

    def _on_jump_down(self, _evt: tk.Event) -> None:
        if not self._jump_down:
            self._jump_pressed_edge = True
        self._jump_down = True

    def _on_jump_up(self, _evt: tk.Event) -> None:
        self._jump_down = False

    def _on_click(self, evt: tk.Event) -> None:
        self._clicks.append((float(evt.x), float(evt.y)))

    def sample(self) -> InputState:
        # “Pressed this frame” semantics.
        pressed = self._jump_pressed_edge
        self._jump_pressed_edge = False
        clicks = tuple(self._clicks)
        self._clicks.clear()
        return InputState(jump_pressed=pressed, clicks=clicks)
