from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn

from backlight_ctl import __version__
from backlight_ctl.config import build, load, load_default
from backlight_ctl.controller import Controller
from backlight_ctl.errors import BacklightError
from backlight_ctl.paths import DEFAULT_DEVICE

log = logging.getLogger(__name__)

EXAMPLE = """Examples :
\tbacklight-ctl -v intel_backlight -g
\tbacklight-ctl -v intel_backlight -i 5
\tbacklight-ctl -v intel_backlight -d 5
\tbacklight-ctl -v intel_backlight -s 25
"""


def _report(message: str) -> None:
    print(f"An error occurred : {message}", file=sys.stderr)
    print(EXAMPLE, file=sys.stderr)


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        _report(message)
        raise SystemExit(1)


def _percent(text: str) -> int:
    try:
        value = int(text, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid value: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"value must not be negative: {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    ap = _Parser(
        prog="backlight-ctl",
        description="Read or adjust the brightness of a sysfs backlight device.",
        epilog=EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("--version", action="version", version=__version__)
    ap.add_argument(
        "-v",
        "--device",
        help=f"brightness device (default: {DEFAULT_DEVICE})",
    )
    ap.add_argument(
        "-i",
        "--inc",
        type=_percent,
        default=0,
        help="increment brightness by a percentage between 1 and 10",
    )
    ap.add_argument(
        "-d",
        "--dec",
        type=_percent,
        default=0,
        help="decrement brightness by a percentage between 1 and 10",
    )
    ap.add_argument(
        "-s",
        "--set",
        type=_percent,
        default=0,
        help="set brightness to a percentage between 1 and 100",
    )
    ap.add_argument(
        "-g", "--get", action="store_true", help="print actual brightness percentage"
    )
    ap.add_argument("-c", "--config", help="YAML file with default settings")
    ap.add_argument("--sysfs-root", help="backlight class directory")
    ap.add_argument("--log-level", help="logging level (default: WARNING)")
    return ap


def _setup_logging(level: str) -> None:
    logging.basicConfig(format="[%(levelname)s] %(message)s")
    logging.getLogger().setLevel(level.upper())


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        file_cfg = load(args.config) if args.config else load_default()
        _setup_logging(args.log_level or file_cfg.get("log_level", "WARNING"))

        cfg = build(
            file_cfg,
            device=args.device,
            sysfs_root=args.sysfs_root,
            increment=args.inc,
            decrement=args.dec,
            set_percent=args.set,
            get=args.get,
        )
        ctl = Controller(cfg)
        ctl.init()
        out = ctl.run()
    except BacklightError as e:
        log.debug("%s failed: %s", e.kind.value, e, exc_info=True)
        _report(str(e))
        return 1
    except ValueError as e:
        # Unknown --log-level names.
        _report(str(e))
        return 1

    if out:
        print(out)
    return 0
