"""
Training Calendar · Calendar Aggregator
Month day enumeration, per-day bucketing of workouts and month navigation.

All calendar arithmetic goes through a CalendarArithmetic object so the
timezone (and the first day of the week) is a choice of the caller rather
than of the host. Days are represented as `datetime.date` in that calendar's
local time.
"""

from collections import defaultdict
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Callable, Iterable, Optional, Protocol, Union

from .models import Workout

DayLike = Union[date, datetime]


class CalendarArithmetic(Protocol):
    def start_of_day(self, value: DayLike) -> datetime: ...
    def month_interval(self, value: DayLike) -> tuple[datetime, datetime]: ...
    def add_months(self, value: DayLike, months: int) -> DayLike: ...
    def component(self, value: DayLike, name: str) -> int: ...
    def day_of(self, value: DayLike) -> date: ...


class GregorianCalendar:
    """
    Proleptic Gregorian calendar in a fixed timezone.

    tz=None uses the host's local timezone. first_weekday follows
    date.weekday(): 0 is Monday, 6 is Sunday.
    """

    COMPONENTS = ("day", "month", "year")

    def __init__(self, tz: Optional[tzinfo] = None, first_weekday: int = 0):
        if not 0 <= first_weekday <= 6:
            raise ValueError(f"first_weekday must be 0..6, got {first_weekday}")
        self.tz = tz
        self.first_weekday = first_weekday

    def _local(self, value: DayLike) -> datetime:
        if not isinstance(value, datetime):
            value = datetime.combine(value, time())
        if value.tzinfo is None:
            # naive values are already local wall-clock time
            return value.replace(tzinfo=self.tz) if self.tz else value.astimezone()
        return value.astimezone(self.tz)

    def _midnight(self, day: date) -> datetime:
        return self._local(datetime.combine(day, time()))

    def day_of(self, value: DayLike) -> date:
        if not isinstance(value, datetime):
            return value
        return self._local(value).date()

    def start_of_day(self, value: DayLike) -> datetime:
        return self._midnight(self.day_of(value))

    def month_interval(self, value: DayLike) -> tuple[datetime, datetime]:
        """[first midnight of the month, first midnight of the next month)."""
        day = self.day_of(value)
        first = day.replace(day=1)
        if first.month == 12:
            following = first.replace(year=first.year + 1, month=1)
        else:
            following = first.replace(month=first.month + 1)
        return self._midnight(first), self._midnight(following)

    def month_length(self, value: DayLike) -> int:
        start, end = self.month_interval(value)
        return (end.date() - start.date()).days

    def add_months(self, value: DayLike, months: int) -> DayLike:
        """Shift by whole months, clamping the day to the target month's length."""
        if isinstance(value, datetime):
            value = self._local(value)
        index = value.year * 12 + (value.month - 1) + months
        year, month = divmod(index, 12)
        month += 1
        last = self.month_length(date(year, month, 1))
        return value.replace(year=year, month=month, day=min(value.day, last))

    def component(self, value: DayLike, name: str) -> int:
        if name not in self.COMPONENTS:
            raise ValueError(f"Unknown component '{name}'. Use one of: {', '.join(self.COMPONENTS)}")
        return getattr(self.day_of(value), name)


class CalendarAggregator:
    def __init__(self, calendar: Optional[CalendarArithmetic] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        self.calendar = calendar or GregorianCalendar()
        self.clock = clock or (lambda: datetime.now().astimezone())

    # ── Month enumeration ─────────────────────────────────────────────────────

    def days_in_month(self, reference: DayLike) -> list[date]:
        """Every day of the month containing `reference`, ascending."""
        start, end = self.calendar.month_interval(reference)
        day, stop = start.date(), end.date()
        days = []
        while day < stop:
            days.append(day)
            day += timedelta(days=1)
        return days

    def leading_blanks(self, reference: DayLike) -> int:
        """Empty grid cells before the 1st, given the calendar's first weekday."""
        first = self.calendar.month_interval(reference)[0].date()
        first_weekday = getattr(self.calendar, "first_weekday", 0)
        return (first.weekday() - first_weekday) % 7

    def weeks(self, reference: DayLike) -> list[list[Optional[date]]]:
        """The month as week rows of 7 cells, padded with None."""
        cells: list[Optional[date]] = [None] * self.leading_blanks(reference)
        cells.extend(self.days_in_month(reference))
        cells.extend([None] * (-len(cells) % 7))
        return [cells[i:i + 7] for i in range(0, len(cells), 7)]

    # ── Bucketing ─────────────────────────────────────────────────────────────

    def bucket_by_day(self, workouts: Iterable[Workout]) -> dict[date, list[Workout]]:
        """Group workouts by local start day, keeping input order inside a bucket."""
        buckets: dict[date, list[Workout]] = defaultdict(list)
        for workout in workouts:
            buckets[self.calendar.day_of(workout.start)].append(workout)
        return dict(buckets)

    def workouts_on(self, day: DayLike, buckets: dict[date, list[Workout]]) -> list[Workout]:
        return list(buckets.get(self.calendar.day_of(day), []))

    def has_workouts(self, day: DayLike, buckets: dict[date, list[Workout]]) -> bool:
        return bool(buckets.get(self.calendar.day_of(day)))

    # ── Day queries ───────────────────────────────────────────────────────────

    def is_same_day(self, a: DayLike, b: DayLike) -> bool:
        return self.calendar.day_of(a) == self.calendar.day_of(b)

    def is_same_month(self, day: DayLike, reference: DayLike) -> bool:
        a, b = self.calendar.day_of(day), self.calendar.day_of(reference)
        return (a.year, a.month) == (b.year, b.month)

    def is_today(self, day: DayLike, now: Optional[datetime] = None) -> bool:
        return self.is_same_day(day, now or self.clock())

    def is_selected(self, day: DayLike, selected: Optional[DayLike]) -> bool:
        if selected is None:
            return False
        return self.is_same_day(day, selected)

    # ── Navigation ────────────────────────────────────────────────────────────

    def previous_month(self, current: DayLike) -> DayLike:
        return self.calendar.add_months(current, -1)

    def next_month(self, current: DayLike) -> DayLike:
        return self.calendar.add_months(current, 1)
