"""Command line entrypoint.

Lays out the built-in placeholder keyboard for a given container width and
prints the resulting rectangles. Mostly useful to sanity-check config values
and to produce preview images while tuning margins.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, TextIO

from keyflay import __version__
from keyflay.core.config import Config
from keyflay.core.keyboard.keyboard import TextKeyboard
from keyflay.core.layout.desired_key import DesiredKey
from keyflay.core.resources.arrangements import LOADING_KEYBOARD
from keyflay.core.utils.exceptions import KeyflayError

from .bootstrap import configure_logging


logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="keyflay", description="Compute keyboard key bounds for a container width")
    parser.add_argument("--width", type=int, help="Container width in pixels")
    parser.add_argument("--key-width", type=int, help="Desired key touch width in pixels")
    parser.add_argument("--key-height", type=int, help="Desired key touch height in pixels")
    parser.add_argument("--margin-h", type=int, help="Horizontal margin between touch and visible bounds")
    parser.add_argument("--margin-v", type=int, help="Vertical margin between touch and visible bounds")
    parser.add_argument("--hit", nargs=2, type=int, metavar=("X", "Y"), help="Report the key under a point")
    parser.add_argument("--preview", metavar="PATH", help="Write a PNG preview of the layout")
    parser.add_argument("--version", action="version", version=f"keyflay {__version__}")
    return parser


def _desired_key_from_args(args: argparse.Namespace, cfg: Config) -> DesiredKey:
    # Flags override config values; both get the same margin capping.
    return cfg.desired_key(
        width=args.key_width,
        height=args.key_height,
        margin_h=args.margin_h,
        margin_v=args.margin_v,
    )


def _fmt(rect) -> str:
    return f"({rect.left},{rect.top},{rect.right},{rect.bottom})"


def print_bounds(keyboard: TextKeyboard, *, out: TextIO) -> None:
    out.write(f"{'row':>3} {'col':>3}  {'label':<14} {'touch':<22} {'visible':<22} {'label box':<22}\n")
    for key in keyboard.keys():
        label = key.data.label or ""
        out.write(
            f"{key.row:>3} {key.col:>3}  {label:<14} {_fmt(key.touch_bounds):<22} "
            f"{_fmt(key.visible_bounds):<22} {_fmt(key.visible_label_bounds):<22}\n"
        )


def run(args: argparse.Namespace, *, out: TextIO) -> int:
    cfg = Config()
    desired = _desired_key_from_args(args, cfg)
    container_width = args.width if args.width is not None else cfg.container_width

    keyboard = LOADING_KEYBOARD.to_keyboard()
    keyboard.layout(container_width, desired, foreground=cfg.foreground_factors())
    print_bounds(keyboard, out=out)

    if args.hit is not None:
        x, y = args.hit
        key = keyboard.get_key_for_pos(x, y)
        if key is None:
            out.write(f"hit ({x},{y}): no key\n")
        else:
            out.write(f"hit ({x},{y}): row={key.row} col={key.col} label={key.data.label or ''}\n")

    if args.preview:
        from keyflay.preview.render import save_preview

        save_preview(keyboard, args.preview)

    return 0


def main(argv: Iterable[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        configure_logging()
        return run(args, out=sys.stdout)
    except KeyflayError as exc:
        logger.error("%s", exc)
        return 2
    except KeyboardInterrupt:
        return 0
    except Exception as exc:
        logger.exception("Unhandled error: %s", exc)
        return 1
