from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from naval_aoe.board import EXAMPLE_CONFIG, AoeScene, BoardError, format_mask, print_grid


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="naval-aoe", description="Print the naval board with AOE overlays.")
    p.add_argument("--show-masks", action="store_true", help="also print each shape mask")
    p.add_argument("--strict", action="store_true", help="fail when a stamp lands entirely off the board")
    p.add_argument("--gui", action="store_true", help="show the board in a pygame window")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), stream=sys.stderr)

    config = dataclasses.replace(EXAMPLE_CONFIG, strict=args.strict)
    try:
        scene = AoeScene(config)
        scene.apply_stamps()
        state = scene.get_state()
    except BoardError as exc:
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 2

    if args.gui:
        try:
            from naval_aoe.visualization.viewer import run
        except ImportError:
            parser.error("--gui needs pygame (pip install 'naval-aoe[gui]')")

        run(state, config.markers)
        return 0

    print_grid(state)
    if args.show_masks:
        for kind, mask in scene.masks.items():
            print(f"\nMask {kind.name}:")
            print(format_mask(mask))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
