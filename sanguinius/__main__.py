from __future__ import annotations

import argparse
import logging
import sys

from sanguinius import __version__
from sanguinius.config import get_log_level, get_recursion_limit
from sanguinius.errors import SanguiniusError
from sanguinius.interpreter import BANNER, Interpreter

logger = logging.getLogger("sanguinius")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sanguinius", description="A small Scheme interpreter.")
    parser.add_argument("files", nargs="*", help="source files to load before the REPL starts")
    parser.add_argument("--no-repl", action="store_true", help="exit after loading files")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    sys.setrecursionlimit(max(sys.getrecursionlimit(), get_recursion_limit()))

    interp = Interpreter()
    for path in args.files:
        try:
            interp.load(path)
        except (OSError, SanguiniusError) as e:
            logger.error("failed to load %s: %s", path, e)
            return 1

    if args.no_repl:
        return 0

    print(BANNER)
    try:
        interp.repl(sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
