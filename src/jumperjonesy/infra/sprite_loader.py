from __future__ import annotations

import logging
import tkinter as tk
from collections.abc import Callable
from concurrent.futures import Future
from pathlib import Path

from PIL import Image

from jumperjonesy.infra.exceptions import SpriteLoadError

logger = logging.getLogger(__name__)


def read_image(path: Path) -> Image.Image:
    img = Image.open(path)
    # Decode now; Image.open is lazy and a truncated file would fail later.
    img.load()
    return img.convert("RGBA")


def open_sprite(path: Path, *, image_opener: Callable[[Path], Image.Image] = read_image) -> Image.Image:
    try:
        return image_opener(path)
    except OSError as e:
        raise SpriteLoadError(f"Failed to load sprite from {path}: {e}") from e


class SpriteLoader:
    """
    Loads the player sprite source image and exposes readiness as a Future.

    A missing or unreadable file is not fatal: the attempt is rescheduled on
    the Tk event loop until it succeeds. Without a path the future resolves
    straight away with None (draw a plain rectangle instead). Scaling to the
    player's size is the view's job, since that size changes on resize.
    """

    def __init__(
        self,
        root: tk.Misc,
        path: Path | None,
        *,
        retry_ms: int = 500,
        image_opener: Callable[[Path], Image.Image] = read_image,
    ) -> None:
        self._root = root
        self._path = path
        self._retry_ms = retry_ms
        self._image_opener = image_opener
        self._future: Future[Image.Image | None] = Future()
        self._started = False
        self.attempts = 0

    def load(self) -> Future[Image.Image | None]:
        if not self._started:
            self._started = True
            if self._path is None:
                self._future.set_result(None)
            else:
                self._attempt(self._path)
        return self._future

    def _attempt(self, path: Path) -> None:
        self.attempts += 1
        try:
            image = open_sprite(path, image_opener=self._image_opener)
        except SpriteLoadError as e:
            logger.warning("%s (attempt %d, retrying in %d ms)", e, self.attempts, self._retry_ms)
            self._root.after(self._retry_ms, lambda: self._attempt(path))
            return

        logger.info("sprite loaded from %s (%dx%d)", path, image.width, image.height)
        self._future.set_result(image)
