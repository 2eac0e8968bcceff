from __future__ import annotations

import tkinter as tk

from PIL import Image

from jumperjonesy.domain.game_state import (
    GameOver,
    LevelComplete,
    LevelSelect,
    Menu,
    PlayingInfinite,
    PlayingLevel,
    RenderSnapshot,
)
from jumperjonesy.ui.menu_layout import MenuButton
from jumperjonesy.ui.sprite import ScaledSprite

GAME_TITLE = "JumperJonesy"

_GROUND = "#4f3922"
_OBSTACLE = "#ff0000"
_PLAYER = "#66f"
_BUTTON = "#4CAF50"
_LOCKED = "#888"
_HITBOX = "#00FFFF"


class TkCanvasView:
    def __init__(self, root: tk.Misc, *, width: int, height: int, debug_hitbox: bool = False) -> None:
        self._debug_hitbox = debug_hitbox
        self._sprite: ScaledSprite | None = None

        self.canvas = tk.Canvas(root, width=width, height=height, highlightthickness=0, bg="white")
        self.canvas.pack(fill="both", expand=True)

        self._ground_id = self.canvas.create_rectangle(0, 0, width, 0, outline="", fill=_GROUND)

    def set_sprite(self, source: Image.Image | None) -> None:
        self._sprite = ScaledSprite(source) if source is not None else None

    def render(self, snap: RenderSnapshot, buttons: tuple[MenuButton, ...]) -> None:
        c = self.canvas
        w, h = snap.viewport.width, snap.viewport.height

        # Everything but the ground is rebuilt per frame (simple + fine at this scale).
        c.delete("frame")
        c.coords(self._ground_id, 0, snap.floor_y, w, h)

        state = snap.state
        if isinstance(state, Menu):
            c.create_text(
                w / 2, h / 2 - 50, text=GAME_TITLE, font=("TkDefaultFont", max(12, int(h * 0.12))),
                fill="#000", tags=("frame",),
            )
            self._draw_buttons(buttons)
            return

        if isinstance(state, LevelSelect):
            c.create_text(w / 2, 80, text="Select a Level", font=("TkDefaultFont", 30), fill="#000", tags=("frame",))
            self._draw_buttons(buttons, unlocked_through=snap.level)
            return

        self._draw_world(snap)

        if isinstance(state, PlayingLevel):
            self._hud(10, 30, f"Level: {snap.level}", anchor="w")
        elif isinstance(state, PlayingInfinite):
            self._hud(w - 10, 30, f"Score: {snap.score:.0f}", anchor="e")
        elif isinstance(state, GameOver):
            if isinstance(state.previous, PlayingInfinite):
                detail = f"Final Score: {snap.score:.0f}"
            else:
                detail = f"Level {snap.level} Failed"
            self._overlay(w, h, "CRASHED!", detail, stipple="gray75")
            self._draw_buttons(buttons)
        elif isinstance(state, LevelComplete):
            self._overlay(w, h, "LEVEL COMPLETE!", f"You Cleared Level {snap.level - 1}!", stipple="gray50")
            self._draw_buttons(buttons)

    def _draw_world(self, snap: RenderSnapshot) -> None:
        c = self.canvas
        p = snap.player
        if self._sprite is not None:
            photo = self._sprite.for_size(p.width, p.height)
            c.create_image(p.x, p.y, image=photo, anchor="nw", tags=("frame",))
        else:
            c.create_rectangle(p.x, p.y, p.right, p.bottom, outline="", fill=_PLAYER, tags=("frame",))

        for o in snap.obstacles:
            c.create_rectangle(o.x, o.y, o.right, o.bottom, outline="", fill=_OBSTACLE, tags=("frame",))

        if self._debug_hitbox:
            hb = snap.hitbox
            c.create_rectangle(hb.x, hb.y, hb.right, hb.bottom, outline=_HITBOX, width=2, tags=("frame",))

    def _draw_buttons(self, buttons: tuple[MenuButton, ...], *, unlocked_through: int | None = None) -> None:
        c = self.canvas
        for b in buttons:
            r = b.rect
            fill = _BUTTON
            if unlocked_through is not None and b.text.isdigit() and int(b.text) > unlocked_through:
                fill = _LOCKED
            c.create_rectangle(r.x, r.y, r.right, r.bottom, outline="", fill=fill, tags=("frame",))
            c.create_text(
                r.x + r.width / 2, r.y + r.height / 2, text=b.text, fill="#fff",
                font=("TkDefaultFont", 14), tags=("frame",),
            )

    def _hud(self, x: float, y: float, text: str, *, anchor: str) -> None:
        self.canvas.create_text(x, y, text=text, anchor=anchor, fill="#000", font=("TkDefaultFont", 16), tags=("frame",))

    def _overlay(self, w: float, h: float, title: str, detail: str, *, stipple: str) -> None:
        # Tk has no alpha; a stippled fill stands in for the dimmed backdrop.
        c = self.canvas
        c.create_rectangle(0, 0, w, h, outline="", fill="#000", stipple=stipple, tags=("frame",))
        c.create_text(w / 2, h / 2 - 80, text=title, fill="#fff", font=("TkDefaultFont", 32), tags=("frame",))
        c.create_text(w / 2, h / 2 - 30, text=detail, fill="#fff", font=("TkDefaultFont", 20), tags=("frame",))
