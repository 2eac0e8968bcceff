from __future__ import annotations

from dataclasses import dataclass

from jumperjonesy.domain.geometry import Rect


@dataclass
class Player:
    """Mutable; the physics engine integrates it in place every step."""

    x: float
    y: float
    vy: float
    width: float
    height: float
    grounded: bool = True

    @property
    def rect(self) -> Rect:
        return Rect(x=self.x, y=self.y, width=self.width, height=self.height)
