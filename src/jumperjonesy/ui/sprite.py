from __future__ import annotations

from collections.abc import Callable
from typing import Any

from PIL import Image, ImageTk


def sprite_size(width: float, height: float) -> tuple[int, int]:
    return max(1, round(width)), max(1, round(height))


def fit_sprite(source: Image.Image, width: float, height: float) -> Image.Image:
    """The source image stretched to the player's box."""
    return source.resize(sprite_size(width, height), Image.LANCZOS)


class ScaledSprite:
    """
    Keeps one Tk image of the source sprite at the player's current size.

    Rescales only when that size changes (i.e. after a resize); Tk images must
    stay referenced while on the canvas, so the current one is held here.
    """

    def __init__(
        self,
        source: Image.Image,
        *,
        photo_factory: Callable[[Image.Image], Any] = ImageTk.PhotoImage,
    ) -> None:
        self._source = source
        self._photo_factory = photo_factory
        self._size: tuple[int, int] | None = None
        self._photo: Any = None

    @property
    def size(self) -> tuple[int, int] | None:
        return self._size

    def for_size(self, width: float, height: float) -> Any:
        size = sprite_size(width, height)
        if size != self._size:
            self._photo = self._photo_factory(fit_sprite(self._source, width, height))
            self._size = size
        return self._photo
