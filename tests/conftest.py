from __future__ import annotations

import random

import pytest

from jumperjonesy.domain.game_state import GameContext
from jumperjonesy.domain.geometry import Viewport
from jumperjonesy.domain.physics import derive_physics
from jumperjonesy.domain.tuning import Tuning


class StubRng:
    """Fixed draws: `uniform` returns `a + frac * (b - a)`, `random` returns `roll`."""

    def __init__(self, *, roll: float = 0.5, frac: float = 0.0) -> None:
        self.roll = roll
        self.frac = frac

    def random(self) -> float:
        return self.roll

    def uniform(self, a: float, b: float) -> float:
        return a + self.frac * (b - a)


class FakeRoot:
    """Stands in for a Tk root: records `after` calls instead of running them."""

    def __init__(self) -> None:
        self.scheduled: list[tuple[int, object]] = []
        self.cancelled: list[str] = []
        self.bindings: dict[str, object] = {}
        self.focused = False

    def after(self, ms, fn):
        self.scheduled.append((ms, fn))
        return f"after#{len(self.scheduled)}"

    def after_cancel(self, after_id) -> None:
        self.cancelled.append(after_id)

    def run_next(self) -> None:
        _ms, fn = self.scheduled.pop(0)
        fn()

    def bind(self, sequence, fn) -> None:
        self.bindings[sequence] = fn

    def focus_set(self) -> None:
        self.focused = True


@pytest.fixture
def viewport() -> Viewport:
    return Viewport(width=800.0, height=450.0)


@pytest.fixture
def tuning() -> Tuning:
    return Tuning()


@pytest.fixture
def constants(viewport, tuning):
    return derive_physics(viewport, tuning)


@pytest.fixture
def ctx(viewport, tuning) -> GameContext:
    return GameContext.create(viewport, tuning=tuning, rng=random.Random(1234))
