"""Build every dynasty leaderboard for a display mode and write them as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dynasty_records.backend import LeaderboardService  # noqa: E402
from dynasty_records.config import LeaderboardConfig  # noqa: E402
from dynasty_records.core.models import DisplayMode  # noqa: E402
from dynasty_records.data.dynasty_file import load_dynasty  # noqa: E402


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--dynasty",
        type=Path,
        required=True,
        help="Path to the dynasty JSON export.",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in DisplayMode],
        default=DisplayMode.CAREER.value,
        help="Rank career totals or individual seasons.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Optional leaderboard config JSON with threshold and top-N overrides.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write leaderboards to this file instead of stdout.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging for troubleshooting.",
    )
    return parser.parse_args(argv)


def _serialise(leaderboards: dict[str, dict[str, list[Any]]]) -> dict[str, Any]:
    return {
        category: {stat: [entry.to_dict() for entry in entries] for stat, entries in stats.items()}
        for category, stats in leaderboards.items()
    }


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    _configure_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        document = load_dynasty(args.dynasty)
        config = LeaderboardConfig.load(args.config) if args.config else LeaderboardConfig()
        leaderboards = LeaderboardService(document, config).build(args.mode)
    except Exception as exc:  # pragma: no cover - CLI surface
        logger.exception("Failed to build leaderboards: %s", exc)
        return 1

    payload = json.dumps(
        {"mode": args.mode, "leaderboards": _serialise(leaderboards)},
        indent=2,
    )
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(payload, encoding="utf-8")
        logger.info("Wrote %s leaderboards to %s", args.mode, args.output)
    else:
        sys.stdout.write(payload + "\n")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
