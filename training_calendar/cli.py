"""
Training Calendar · Terminal front-end
Month calendar, day list and workout detail in the terminal.

Usage:
    training-calendar month --month 2025-11
    training-calendar day 2025-11-25
    training-calendar show 7823456789012345 --locale en
    python3 -m training_calendar.cli month --fit-folder ~/Garmin/Activities
"""

import argparse
import logging
import sys
from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from . import formatting as fmt
from .aggregator import CalendarAggregator, GregorianCalendar
from .models import DiagramSample
from .repository import DEFAULT_IDENTITY, WorkoutRepository
from .series import HEART_RATE_RANGE, SeriesNormalizer
from .sources import FallbackResourceSource, FitFolderSource, default_source

DEFAULT_SINCE = "2020-01-01"
CHART_ROWS = 8
CHART_COLS = 42

# ── Terminal colors ───────────────────────────────────────────────────────────
R = "\033[0m"       # reset
BOLD = "\033[1m"
DIM = "\033[2m"
CYAN = "\033[96m"
GREEN = "\033[92m"
RED = "\033[91m"
BLUE = "\033[94m"
WHITE = "\033[97m"


# ── Argument parsing ──────────────────────────────────────────────────────────

def _month_arg(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM, got '{value}'")


def _day_arg(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got '{value}'")


def _since_arg(value: str) -> datetime:
    return datetime.combine(_day_arg(value), datetime.min.time(), tzinfo=timezone.utc)


def _tz_arg(value: str):
    try:
        return ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError):
        raise argparse.ArgumentTypeError(f"unknown timezone '{value}'. Use an IANA name like 'Europe/Moscow'")


def create_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--identity", default=DEFAULT_IDENTITY,
                        help=f"Account whose workouts to show (default: {DEFAULT_IDENTITY})")
    common.add_argument("--since", type=_since_arg, default=_since_arg(DEFAULT_SINCE),
                        help=f"Only workouts from this date on, YYYY-MM-DD (default: {DEFAULT_SINCE})")
    common.add_argument("--locale", choices=sorted(fmt.WEEKDAYS_SHORT), default=fmt.DEFAULT_LOCALE,
                        help=f"Display language (default: {fmt.DEFAULT_LOCALE})")
    common.add_argument("--tz", type=_tz_arg, default=None,
                        help="IANA timezone for calendar days (default: system local time)")
    common.add_argument("--resources", default=None,
                        help="Folder with list_workouts.json, workout_metadata.json, diagram_data.json")
    common.add_argument("--fit-folder", default=None,
                        help="Read workouts from a folder of Garmin .fit files instead")
    common.add_argument("--verbose", action="store_true", help="Show debug logging")

    parser = argparse.ArgumentParser(
        prog="training-calendar",
        description="Browse workout history: month calendar, day list and workout detail.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    month = sub.add_parser("month", parents=[common], help="Show a month calendar")
    month.add_argument("--month", type=_month_arg, default=None,
                       help="Month to show, YYYY-MM (default: current month)")

    day = sub.add_parser("day", parents=[common], help="List the workouts of one day")
    day.add_argument("day", type=_day_arg, help="Day, YYYY-MM-DD")

    show = sub.add_parser("show", parents=[common], help="Show one workout in detail")
    show.add_argument("workout_key", help="Workout key")

    return parser


def build_repository(args) -> WorkoutRepository:
    if args.fit_folder:
        return WorkoutRepository(FallbackResourceSource(FitFolderSource(args.fit_folder)))
    return WorkoutRepository(default_source(args.resources))


# ── Month ─────────────────────────────────────────────────────────────────────

def print_month(repo: WorkoutRepository, agg: CalendarAggregator, reference: date, args) -> None:
    buckets = agg.bucket_by_day(repo.list_workouts(args.identity, args.since))
    first_weekday = getattr(agg.calendar, "first_weekday", 0)

    print()
    print(f"{BOLD}{CYAN}  {fmt.month_title(reference, args.locale)}{R}")
    print("  " + " ".join(f"{DIM}{h:>3}{R}" for h in fmt.weekday_headers(args.locale, first_weekday)))

    in_month = 0
    for week in agg.weeks(reference):
        cells = []
        for day in week:
            if day is None:
                cells.append("   ")
                continue
            label = f"{day.day:>3}"
            if agg.has_workouts(day, buckets):
                in_month += len(agg.workouts_on(day, buckets))
                label = f"{BOLD}{GREEN}{label}{R}"
            elif agg.is_today(day):
                label = f"{BOLD}{CYAN}{label}{R}"
            cells.append(label)
        print("  " + " ".join(cells))
    print()
    print(f"{DIM}  {in_month} workout(s) this month{R}")
    print()


# ── Day ───────────────────────────────────────────────────────────────────────

def print_day(repo: WorkoutRepository, agg: CalendarAggregator, day: date, args) -> None:
    buckets = agg.bucket_by_day(repo.list_workouts(args.identity, args.since))
    workouts = agg.workouts_on(day, buckets)

    print()
    print(f"{BOLD}{CYAN}  {fmt.weekday_name(day, args.locale)}, {day.isoformat()}{R}")
    if not workouts:
        print(f"{DIM}  No workouts{R}")
        print()
        return

    metadata = repo.get_all_metadata(args.identity)
    tz = getattr(agg.calendar, "tz", None)
    for workout in workouts:
        line = (f"  {fmt.format_time_of_day(workout.start, tz)}  "
                f"{BOLD}{WHITE}{fmt.activity_name(workout.activity_type, args.locale):<16}{R}")
        meta = metadata.get(workout.workout_key)
        if meta is not None:
            line += (f"{fmt.format_distance(meta.distance, args.locale):>9}  "
                     f"{fmt.format_duration(meta.duration, args.locale):>10}")
        print(line + f"  {DIM}{workout.workout_key}{R}")
    print()


# ── Detail ────────────────────────────────────────────────────────────────────

def render_chart(samples: list[DiagramSample], selector, normalizer: SeriesNormalizer,
                 rows: int = CHART_ROWS, cols: int = CHART_COLS) -> list[str]:
    """Plot a series onto a rows x cols character grid."""
    grid = [[" "] * cols for _ in range(rows)]
    for x, y in normalizer.normalize(samples, selector, cols - 1, rows - 1):
        grid[round(y)][round(x)] = "•"
    return ["".join(row) for row in grid]


def _print_chart(title: str, samples, selector, normalizer, args, color: str,
                 default_range=(0.0, 0.0), unit: str = "") -> None:
    low, high = normalizer.value_range(samples, selector, default_range)
    print(f"{BOLD}{color}  {title}{R}  {DIM}(min {low:g} · max {high:g}{unit}){R}")
    for line in render_chart(samples, selector, normalizer):
        print(f"  {color}{line}{R}")
    labels = normalizer.thinned_labels(
        samples, lambda s: fmt.format_sample_time(s.time_minutes, args.locale)
    )
    print(f"  {DIM}{' · '.join(labels)}{R}")
    print()


def _print_samples(samples: list[DiagramSample], normalizer: SeriesNormalizer, args) -> None:
    print(f"{BOLD}{CYAN}  Samples{R}")
    for i, s in enumerate(samples):
        if i % normalizer.stride:
            continue
        print(f"      {fmt.format_sample_time(s.time_minutes, args.locale):>7}  "
              f"{RED}{s.heart_rate:>3} bpm{R}  "
              f"{fmt.format_speed(s.speed_kmh, args.locale):>10}  "
              f"{fmt.format_meters(s.distance_meters, args.locale):>8}  "
              f"{DIM}{fmt.format_elevation(s.elevation, args.locale):>7}{R}")
    print()


def print_workout(repo: WorkoutRepository, key: str, args) -> int:
    meta = repo.get_metadata(key, args.identity)
    if meta is None:
        print(f"{RED}No workout '{key}'{R}")
        return 1
    samples = repo.get_diagram_samples(key, args.identity)
    normalizer = SeriesNormalizer()

    print()
    print(f"{BOLD}{CYAN}  {fmt.activity_name(meta.activity_type, args.locale)}{R}  "
          f"{DIM}{meta.start:%Y-%m-%d %H:%M} UTC{R}")
    print(f"      Distance:     {BOLD}{WHITE}{fmt.format_distance(meta.distance, args.locale)}{R}")
    print(f"      Duration:     {BOLD}{WHITE}{fmt.format_duration(meta.duration, args.locale)}{R}")
    print(f"      Temperature:  {fmt.format_temperature(meta.avg_temp)}")
    print(f"      Humidity:     {fmt.format_humidity(meta.avg_humidity)}")
    print(f"      Layer:        {meta.max_layer}.{meta.max_sub_layer}")
    if meta.comment:
        print(f"      {DIM}“{meta.comment}”{R}")
    print()

    if not samples:
        print(f"{DIM}  No diagram data{R}")
        print()
        return 0

    _print_chart("Heart rate", samples, lambda s: s.heart_rate, normalizer, args, RED,
                 HEART_RATE_RANGE, " bpm")
    _print_chart("Speed", samples, lambda s: s.speed_kmh, normalizer, args, BLUE,
                 unit=" km/h")
    _print_samples(samples, normalizer, args)

    route = normalizer.route_coordinates(samples)
    region = normalizer.route_region(samples)
    print(f"{BOLD}{GREEN}  Route{R}  {DIM}({len(route)} GPS points){R}")
    print(f"      Center:  {region.center[0]:.4f}, {region.center[1]:.4f}")
    print(f"      Span:    {region.span[0]:.4f} × {region.span[1]:.4f}")
    print()
    return 0


# ── Entry point ───────────────────────────────────────────────────────────────

def main(argv: Optional[list[str]] = None) -> int:
    args = create_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    repo = build_repository(args)
    agg = CalendarAggregator(GregorianCalendar(args.tz))

    if args.command == "month":
        print_month(repo, agg, args.month or agg.calendar.day_of(agg.clock()), args)
    elif args.command == "day":
        print_day(repo, agg, args.day, args)
    elif args.command == "show":
        return print_workout(repo, args.workout_key, args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
