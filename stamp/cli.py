"""
Command line surface: ``pdfstamp <source> <stamp> <output> [options...]``.

All errors bubble up to :func:`main`, which prints a single ``ERROR:`` line
and returns 1. Fewer than three positional arguments prints the usage and
returns 0.
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from core.config.config_service import ConfigService
from core.logging.logic.logger import configure_logging

from .exceptions.errors import StampError
from .logic.stamp_service import StampService
from .models.stamp_spec import StampSpec

USAGE = (
    "pdfstamp <source> <stamp> <output> [options...]\n"
    "<source> and <output> should be path to a PDF file and <stamp> can be a path of an image.\n"
    "Available Options: "
)


class UsageError(Exception):
    """Malformed option value."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def build_parser(config: ConfigService) -> argparse.ArgumentParser:
    d = config.stamp
    # -h belongs to --img-h, so the automatic help flag is replaced by --help
    p = _Parser(prog="pdfstamp", usage=argparse.SUPPRESS, add_help=False)
    p.add_argument("paths", nargs="*", metavar="<source> <stamp> <output>")
    p.add_argument("-p", "--img-pos", dest="anchor", type=int, default=d.anchor,
                   help="Image position: 1-9 (just like the phone's keyboard layout).")
    p.add_argument("-x", "--offset-x", dest="offset_x", type=float, default=d.offset_x,
                   help="Horizontal shift [mm] depending on the image position.")
    p.add_argument("-y", "--offset-y", dest="offset_y", type=float, default=d.offset_y,
                   help="Vertical shift [mm] depending on the image position.")
    p.add_argument("-w", "--img-w", dest="width", type=float, default=d.width,
                   help="Target image width [mm] (can be omitted if height is).")
    p.add_argument("-h", "--img-h", dest="height", type=float, default=d.height,
                   help="Target image height [mm] (can be omitted if width is).")
    p.add_argument("-o", "--opacity", dest="opacity", type=float, default=d.opacity,
                   help="Opacity of stamp. Float between 0 to 1")
    p.add_argument("-v", "--verbose", action="store_true", help="Display debug information.")
    p.add_argument("--help", dest="show_help", action="store_true", help="Show this message.")
    return p


def print_usage(parser: argparse.ArgumentParser) -> None:
    print(USAGE)
    print(parser.format_help().strip("\n"))


def spec_from_args(args: argparse.Namespace) -> StampSpec:
    return StampSpec(
        anchor=args.anchor,
        offset_x_mm=args.offset_x,
        offset_y_mm=args.offset_y,
        width_mm=args.width,
        height_mm=args.height,
        opacity=args.opacity,
    )


def main(argv: Optional[Sequence[str]] = None, *, config: Optional[ConfigService] = None) -> int:
    config = config or ConfigService()
    parser = build_parser(config)
    try:
        args = parser.parse_intermixed_args(list(sys.argv[1:] if argv is None else argv))
    except UsageError as exc:
        print(f"ERROR: {exc} ")
        return 1

    configure_logging(verbose=args.verbose, level=config.general.log_level)

    paths: List[str] = args.paths
    if args.show_help or len(paths) < 3:
        print_usage(parser)
        return 0

    source, stamp, output = paths[:3]
    try:
        spec = spec_from_args(args)
        result = StampService().stamp_document(source, stamp, output, spec)
    except StampError as exc:
        print(f"ERROR: {exc} ")
        return 1

    print(f"SUCCESS: Output generated at : {result.output_path} ")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
