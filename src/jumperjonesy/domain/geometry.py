from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class Box(Protocol):
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


def overlaps(a: Box, b: Box) -> bool:
    # Strict: touching edges do not count.
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def contains_point(box: Box, px: float, py: float) -> bool:
    # Inclusive on all edges, matching how buttons are hit-tested.
    return box.x <= px <= box.x + box.width and box.y <= py <= box.y + box.height


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float
