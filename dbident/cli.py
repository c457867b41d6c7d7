"""Check database identifiers from the command line.

  python -m dbident "Customer Orders" 1bad

Prints the canonical form of every valid name. Exit status is 1 when any
name is invalid.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence

from .config import settings
from .logging_setup import setup_logging
from .naming import Identifier, check_identifier

logger = logging.getLogger(__name__)


def check_names(names: Sequence[str]) -> List[Dict[str, Any]]:
    results: List[Dict[str, Any]] = []
    for raw in names:
        err = check_identifier(raw)
        ident = Identifier.new(raw) if err is None else None
        results.append(
            {
                "raw": raw,
                "valid": ident is not None,
                "identifier": ident.value if ident is not None else None,
                "reason": err.reason if err is not None else None,
                "position": err.position if err is not None else None,
            }
        )
    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dbident",
        description="Validate database object names and print their canonical lower-case form.",
    )
    parser.add_argument("names", nargs="+", metavar="NAME", help="Raw identifier(s) to check.")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON report instead of one canonical name per line.",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: DBIDENT_LOG_LEVEL or WARNING).",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(log_level=args.log_level, log_format=settings.log_format)

    results = check_names(args.names)
    ok = all(r["valid"] for r in results)

    for r in results:
        if not r["valid"]:
            logger.warning(
                "Invalid identifier %r (%s)",
                r["raw"],
                r["reason"],
                extra={"identifier": r["raw"], "reason": r["reason"], "position": r["position"]},
            )

    if args.json:
        print(json.dumps({"ok": ok, "results": results}, indent=2))
    else:
        for r in results:
            if r["valid"]:
                print(r["identifier"])

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
