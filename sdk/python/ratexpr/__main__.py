"""CLI: python -m ratexpr <numerator> [denominator]"""

import logging
import os
import sys

from .errors import ExprError
from .ratio import format_rat, ratio
from .types import DEFAULT_MAX_DEPTH, Limits


def limits_from_env() -> Limits:
    max_exp = os.environ.get("RATEXPR_MAX_EXPONENT")
    return Limits(
        max_depth=int(os.environ.get("RATEXPR_MAX_DEPTH", DEFAULT_MAX_DEPTH)),
        max_exponent=int(max_exp) if max_exp else None,
    )


def log_level_from_env() -> int:
    name = os.environ.get("RATEXPR_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"unknown log level {name!r}")
    return level


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not 1 <= len(args) <= 2:
        print("Usage: python -m ratexpr <numerator> [denominator]", file=sys.stderr)
        return 1

    try:
        logging.basicConfig(
            level=log_level_from_env(),
            format="%(levelname)s %(name)s: %(message)s",
        )
        limits = limits_from_env()
    except ValueError as err:
        print(f"error: invalid configuration: {err}", file=sys.stderr)
        return 1

    try:
        value = ratio(args[0], args[1] if len(args) == 2 else "", limits)
    except ExprError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    print(format_rat(value))
    return 0


if __name__ == "__main__":
    sys.exit(main())
