# hex_display/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .__about__ import APP_TITLE, __version__
from .logic import Hex

_logger = logging.getLogger(__name__)


# ---------- helpers ----------
def _read_input(args: argparse.Namespace) -> bytes:
    if args.text is not None:
        return args.text.encode(args.encoding)
    if args.file is None or args.file == "-":
        return sys.stdin.buffer.read()
    with open(args.file, "rb") as fh:
        return fh.read()

def _error(prog: str, exc: BaseException) -> int:
    print(f"{prog}: error: {exc}", file=sys.stderr)
    return 1


# ---------- command ----------
def cmd_dump(args: argparse.Namespace, prog: str) -> int:
    try:
        data = _read_input(args)
    except (OSError, UnicodeEncodeError, LookupError) as exc:
        _logger.debug("failed to read input", exc_info=True)
        return _error(prog, exc)

    view = Hex(data, upper=args.upper)
    _logger.debug("rendering %d bytes (%s)", len(data), "upper" if args.upper else "lower")

    out = sys.stdout
    try:
        view.write_to(out)
        out.write("\n")
        out.flush()
    except OSError as exc:
        _logger.debug("failed to write output", exc_info=True)
        return _error(prog, exc)
    return 0


# ---------- parser ----------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hex-display",
        description=f"{APP_TITLE} (CLI)",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    src = p.add_mutually_exclusive_group()
    src.add_argument(
        "file", nargs="?",
        help="file to dump ('-' or omitted reads stdin)",
    )
    src.add_argument("-t", "--text", help="dump the encoded bytes of TEXT instead of a file")

    p.add_argument(
        "--encoding", default="utf-8",
        help="encoding used with --text (default: utf-8)",
    )
    p.add_argument("-u", "--upper", action="store_true", help="use A-F instead of a-f")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug details to stderr")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )
    return cmd_dump(args, parser.prog)


if __name__ == "__main__":
    raise SystemExit(main())
