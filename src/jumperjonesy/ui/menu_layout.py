from __future__ import annotations

from dataclasses import dataclass

from jumperjonesy.domain.game_state import GameOver, GameState, LevelComplete, LevelSelect, Menu
from jumperjonesy.domain.geometry import Rect, Viewport, contains_point
from jumperjonesy.domain.state_machine import Button, ButtonClicked, Event, LevelChosen


@dataclass(frozen=True)
class MenuButton:
    rect: Rect
    text: str
    event: Event


class MenuLayout:
    """
    Screen-space buttons for every non-playing screen, recomputed on resize.
    """

    LEVEL_COLS = 10
    LEVEL_BTN_W = 50.0
    LEVEL_BTN_H = 30.0
    LEVEL_PADDING = 15.0

    def __init__(self, viewport: Viewport, *, level_count: int = 50) -> None:
        self._level_count = level_count
        self.relayout(viewport)

    def relayout(self, viewport: Viewport) -> None:
        w, h = viewport.width, viewport.height

        self.menu = (
            MenuButton(Rect(w / 2 - 150, h / 2 + 30, 140, 40), "Levels", ButtonClicked(Button.LEVELS)),
            MenuButton(Rect(w / 2 + 10, h / 2 + 30, 140, 40), "Infinite", ButtonClicked(Button.INFINITE)),
        )

        back = MenuButton(Rect(20, 20, 100, 30), "Back", ButtonClicked(Button.BACK))
        self.level_select = (back,) + tuple(self._level_buttons(w, h))

        btn_w, btn_h, margin = 200.0, 50.0, 20.0
        btn_y = h / 2 + 20
        left = Rect(w / 2 - btn_w - margin / 2, btn_y, btn_w, btn_h)
        right = Rect(w / 2 + margin / 2, btn_y, btn_w, btn_h)

        self.game_over = (
            MenuButton(left, "Return to Menu", ButtonClicked(Button.RETURN_TO_MENU)),
            MenuButton(right, "Retry Level", ButtonClicked(Button.RETRY)),
        )
        self.level_complete = (
            MenuButton(left, "Return to Menu", ButtonClicked(Button.RETURN_TO_MENU)),
            MenuButton(right, "Select Level", ButtonClicked(Button.SELECT_LEVEL)),
        )

    def _level_buttons(self, w: float, h: float) -> list[MenuButton]:
        start_x = w * 0.1
        start_y = h * 0.25
        out: list[MenuButton] = []
        for n in range(1, self._level_count + 1):
            col = (n - 1) % self.LEVEL_COLS
            row = (n - 1) // self.LEVEL_COLS
            x = start_x + col * (self.LEVEL_BTN_W + self.LEVEL_PADDING)
            y = start_y + row * (self.LEVEL_BTN_H + self.LEVEL_PADDING)
            out.append(MenuButton(Rect(x, y, self.LEVEL_BTN_W, self.LEVEL_BTN_H), str(n), LevelChosen(n)))
        return out

    def buttons_for(self, state: GameState) -> tuple[MenuButton, ...]:
        if isinstance(state, Menu):
            return self.menu
        if isinstance(state, LevelSelect):
            return self.level_select
        if isinstance(state, GameOver):
            return self.game_over
        if isinstance(state, LevelComplete):
            return self.level_complete
        return ()

    def resolve_click(self, state: GameState, x: float, y: float) -> Event | None:
        for b in self.buttons_for(state):
            if contains_point(b.rect, x, y):
                return b.event
        return None
