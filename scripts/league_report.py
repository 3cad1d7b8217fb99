"""Load league parquet files, record an optional season upload and print the record book."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from league_records.backend import LeagueRecordsService  # noqa: E402
from league_records.config import DEFAULT_TOP_N, HISTORY_PATH  # noqa: E402
from league_records.core.ratios import with_ratio_columns  # noqa: E402
from league_records.data import SeasonHistoryStore, career_frame, load_league_directory  # noqa: E402
from league_records.report import render_league_report  # noqa: E402


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--career",
        type=Path,
        required=True,
        help="Directory holding <category>.parquet career aggregates.",
    )
    parser.add_argument(
        "--season",
        type=Path,
        help="Directory holding the just-finished season, laid out like --career.",
    )
    parser.add_argument(
        "--season-label",
        help="Label for the uploaded season (defaults to Y<n> parsed from the directory name).",
    )
    parser.add_argument(
        "--history",
        type=Path,
        default=HISTORY_PATH,
        help="Season history parquet to read and update.",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=DEFAULT_TOP_N,
        help="Number of entries per leaderboard.",
    )
    parser.add_argument(
        "--export",
        type=Path,
        help="Write the career table with ratio columns to this parquet path.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging for troubleshooting.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    _configure_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        store = SeasonHistoryStore.load(args.history)
        service = LeagueRecordsService(store, persist=True, top_n=args.top)
        career = load_league_directory(args.career)
        service.load_career(career)
        if args.season is not None:
            service.upload_season(
                load_league_directory(args.season),
                args.season_label,
                filename=args.season.name,
            )
        if args.export is not None:
            frame = with_ratio_columns(career_frame(career))
            args.export.parent.mkdir(parents=True, exist_ok=True)
            frame.write_parquet(args.export, compression="zstd")
            logger.info("Exported %s career rows to %s", frame.height, args.export)
    except Exception as exc:  # pragma: no cover - CLI surface
        logger.exception("Failed to build league report: %s", exc)
        return 1

    render_league_report(service)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
