"""
Command line entry point: grind numbers and print their parse results.

    $ python -m numstream 100.0 1E+3
    100.0->100.0e0
    1E+3->1e3
"""

import argparse
import logging
import sys
from typing import List, Optional

from .explain import explain
from .splits import grind

logger = logging.getLogger("numstream")

DEFAULT_VALUE = "100.0"


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numstream",
        description="Parse JSON numbers, checking every chunk split gives the same result.",
    )
    parser.add_argument(
        "values",
        nargs="*",
        metavar="VALUE",
        help=f"number text to grind (default: {DEFAULT_VALUE})",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="log parser failures and grind splits",
    )
    return parser


def run(values: List[str]) -> int:
    status = 0
    for value in values:
        result = grind(value)
        print(f"{value}->{result}")
        if result.error:
            status = 1
    return status


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return run(args.values or [DEFAULT_VALUE])
    except Exception as e:
        logger.debug("grind aborted", exc_info=True)
        print(explain(e), file=sys.stderr)
        return 127


if __name__ == "__main__":
    sys.exit(main())
