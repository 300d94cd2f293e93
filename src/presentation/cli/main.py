"""CLI interface for harvest timing and worker time tracking."""

import argparse
import logging
import sys
from datetime import date, datetime

from ...application.services.harvest_timing_service import HarvestTimingService
from ...application.services.time_clock_service import TimeClockService
from ...domain.exceptions import TimeClockError
from ...infrastructure.repositories.factory import create_time_block_repository

from config.settings import (
    HARVEST_CALENDAR_SETTINGS,
    HOUR_BAND_THRESHOLDS,
    LOG_SETTINGS,
    TIME_BLOCK_DATA_FILE,
    TIME_BLOCK_STORAGE,
    WEEKLY_OVERTIME_HOURS,
)

logger = logging.getLogger(__name__)

QUALITY_SYMBOLS = {
    "best": "#",
    "good": "+",
    "fair": ".",
    "off_season": " ",
}


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date (expected YYYY-MM-DD): {value}")


def _parse_datetime(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid timestamp (expected ISO 8601): {value}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Farm harvest timing and time clock")
    parser.add_argument("--storage", type=str, default=TIME_BLOCK_STORAGE, choices=["csv", "memory"])
    parser.add_argument("--data-file", type=str, default=str(TIME_BLOCK_DATA_FILE))
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === estimate / calendar: harvest timing ===
    for name, help_text in (
        ("estimate", "Estimate the harvest window for a planting"),
        ("calendar", "Print the 52-week harvest heat map for a planting"),
    ):
        harvest_parser = subparsers.add_parser(name, help=help_text)
        harvest_parser.add_argument("--growing-days", type=str, default="", help="e.g. '75-85'")
        harvest_parser.add_argument("--planted", type=_parse_date, required=True, help="YYYY-MM-DD")
        harvest_parser.add_argument("--today", type=_parse_date, default=None, help="Reference date")
        harvest_parser.add_argument("--usda-zone", type=str, default=None)

    # === clock-in / clock-out ===
    for name in ("clock-in", "clock-out"):
        clock_parser = subparsers.add_parser(name, help=f"{name.replace('-', ' ').title()} a worker")
        clock_parser.add_argument("--worker", type=str, required=True, help="Worker identifier")
        clock_parser.add_argument("--at", type=_parse_datetime, default=None, help="ISO timestamp")

    # === hours / weekly: reporting ===
    hours_parser = subparsers.add_parser("hours", help="Hours worked on a day")
    hours_parser.add_argument("--worker", type=str, required=True)
    hours_parser.add_argument("--date", type=_parse_date, default=None)

    weekly_parser = subparsers.add_parser("weekly", help="Weekly hours and overtime")
    weekly_parser.add_argument("--worker", type=str, required=True)
    weekly_parser.add_argument("--date", type=_parse_date, default=None)

    return parser


def _time_clock_service(args: argparse.Namespace) -> TimeClockService:
    repository = create_time_block_repository(args.storage, args.data_file)
    return TimeClockService(
        repository,
        hour_band_thresholds=HOUR_BAND_THRESHOLDS,
        weekly_overtime_hours=WEEKLY_OVERTIME_HOURS,
    )


def _print_estimate(service: HarvestTimingService, args: argparse.Namespace) -> None:
    report = service.harvest_report(args.growing_days, args.planted, args.today, args.usda_zone)
    estimate = report["estimate"]
    print("\n" + "=" * 50)
    print(" HARVEST ESTIMATE ")
    print("=" * 50)
    print(f" Growing days: {report['growing_days']['early']}-{report['growing_days']['late']}")
    print(f" Planted:      {args.planted.isoformat()}")
    print(f" Early:        {estimate['early_date']} ({estimate['early_label']})")
    print(f" Late:         {estimate['late_date']} ({estimate['late_label']})")
    print(f" Window:       {estimate['range_text']}")
    print(f" Days to go:   {report['days_until_harvest']}")
    print("=" * 50)


def _print_calendar(service: HarvestTimingService, args: argparse.Namespace) -> None:
    calendar = service.calendar(args.growing_days, args.planted, args.usda_zone)
    frame = calendar.to_frame()
    cells = "".join(QUALITY_SYMBOLS[q] for q in frame["quality"])
    print("Weeks 1-52  (# best, + good, . fair, blank off season)")
    for row_start in range(0, len(cells), 13):
        print(f" W{row_start + 1:02d} |{cells[row_start:row_start + 13]}|")
    print(f"Best weeks: {list(calendar.best_weeks)}")
    print(f"Good weeks: {list(calendar.good_weeks)}")


def main(argv=None):
    logging.basicConfig(
        level=LOG_SETTINGS["level"],
        format=LOG_SETTINGS["format"],
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    args = build_parser().parse_args(argv)

    # === Harvest commands ===
    if args.command in ("estimate", "calendar"):
        service = HarvestTimingService(HARVEST_CALENDAR_SETTINGS)
        if args.command == "estimate":
            _print_estimate(service, args)
        else:
            _print_calendar(service, args)
        return 0

    # === Time clock commands ===
    try:
        clock_service = _time_clock_service(args)
    except Exception as e:
        logger.error(f"Failed to initialize time clock: {e}")
        return 1

    try:
        if args.command == "clock-in":
            block = clock_service.clock_in(args.worker, args.at)
            print(f"Clocked in {block.worker_id}: {block.formatted_block}")

        elif args.command == "clock-out":
            block = clock_service.clock_out(args.worker, args.at)
            print(f"Clocked out {block.worker_id}: {block.formatted_block} ({block.hours_worked:.1f} hours)")

        elif args.command == "hours":
            day = args.date or date.today()
            now = datetime.now()
            for block in clock_service.time_blocks(args.worker, day):
                print(f"  {block.formatted_block}  {block.formatted_duration(now)}")
            accrual = clock_service.accrual_for_day(args.worker, day, now)
            print(f"Total {day.isoformat()}: {accrual.hours:.1f} hours ({accrual.band.value})")

        elif args.command == "weekly":
            summary = clock_service.weekly_summary(args.worker, args.date)
            print(f"Week {summary.year}-W{summary.week_number:02d} for {summary.worker_id}")
            print(f"  Total:    {summary.total_hours:.1f}h")
            print(f"  Regular:  {summary.regular_hours:.1f}h")
            if summary.is_overtime:
                print(f"  Overtime: +{summary.overtime_hours:.1f}h OT")

    except TimeClockError as e:
        logger.error(f"{args.command} failed for worker {args.worker}: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
