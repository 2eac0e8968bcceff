from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from jumperjonesy.domain.tuning import Tuning


@dataclass(frozen=True)
class AppConfig:
    width: int = 800
    height: int = 450
    fps: int = 60
    sprite_path: Path | None = None
    seed: int | None = None
    debug_hitbox: bool = False
    sprite_retry_ms: int = 500
    tuning: Tuning = field(default_factory=Tuning)
