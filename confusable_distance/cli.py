from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .confusables import normalize_confusables
from .distance import confusable_similarity, get_confusable_distance
from .errors import ConfusablesError
from .logs import configure_logging
from .settings import get_settings
from .update import update_confusables

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="confusable-distance",
        description="Edit distance between strings after folding look-alike characters.",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL.")
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=None,
        help="Emit logs as JSON lines (LOG_JSON).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_distance = sub.add_parser("distance", help="Print the confusable distance of A and B.")
    p_distance.add_argument("a")
    p_distance.add_argument("b")

    p_normalize = sub.add_parser("normalize", help="Print TEXT with confusables folded.")
    p_normalize.add_argument("text")

    p_similarity = sub.add_parser("similarity", help="Print a 0..1 similarity score.")
    p_similarity.add_argument("a")
    p_similarity.add_argument("b")

    p_update = sub.add_parser("update", help="Refresh the table from the Unicode source.")
    p_update.add_argument("--url", default=None, help="Override CONFUSABLES_URL.")
    p_update.add_argument("--output", default=None)
    p_update.add_argument("--format", dest="fmt", choices=("python", "json"), default="python")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(
        args.log_level or settings.log_level,
        json_logs=settings.log_json if args.json_logs is None else args.json_logs,
    )

    if args.command == "update" and args.fmt == "json" and not args.output:
        parser.error("--format json requires --output")

    try:
        if args.command == "distance":
            print(get_confusable_distance(args.a, args.b))
        elif args.command == "normalize":
            print(normalize_confusables(args.text))
        elif args.command == "similarity":
            print(f"{confusable_similarity(args.a, args.b):.4f}")
        elif args.command == "update":
            path = update_confusables(
                url=args.url, output=args.output, fmt=args.fmt, settings=settings
            )
            print(path)
    except ConfusablesError as exc:
        log.error("%s failed: %s", args.command, exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
