from __future__ import annotations

import argparse
import logging
from pathlib import Path

from jumperjonesy.app.config import AppConfig


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="jumperjonesy", description="Side-scrolling obstacle jumper.")
    p.add_argument("--width", type=int, default=800)
    p.add_argument("--height", type=int, default=450)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--sprite", type=Path, default=None, help="player sprite (PNG/GIF)")
    p.add_argument("--seed", type=int, default=None, help="seed for obstacle generation")
    p.add_argument("--debug-hitbox", action="store_true", help="outline the player's hitbox")
    p.add_argument("--log-level", default="WARNING", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    return p


def config_from_args(args: argparse.Namespace) -> AppConfig:
    return AppConfig(
        width=args.width,
        height=args.height,
        fps=args.fps,
        sprite_path=args.sprite,
        seed=args.seed,
        debug_hitbox=args.debug_hitbox,
    )


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Imported late so --help works on interpreters built without Tk.
    from jumperjonesy.app.game_app import GameApp

    GameApp(config_from_args(args)).run()


if __name__ == "__main__":
    main()
