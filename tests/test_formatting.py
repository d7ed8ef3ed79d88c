"""
Training Calendar · Formatting tests
Run with: pytest tests/
"""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from training_calendar import formatting as fmt
from training_calendar.models import ActivityType
from training_calendar.repository import WorkoutRepository
from training_calendar.sources import EmbeddedResourceSource


class TestWorkoutValues:
    def test_fixture_metadata_summary(self):
        meta = WorkoutRepository(EmbeddedResourceSource()).get_metadata("7823456789012345")
        assert fmt.format_distance(meta.distance) == "5.2 км"
        assert fmt.format_duration(meta.duration) == "45 мин"

    def test_zero_distance(self):
        assert fmt.format_distance(0) == "0 км"
        assert fmt.format_distance(0, "en") == "0 km"

    @pytest.mark.parametrize("seconds, expected", [
        (0, "0 мин"),
        (59, "0 мин"),
        (3600, "1ч 0мин"),
        (4200, "1ч 10мин"),
        (5400.0, "1ч 30мин"),
    ])
    def test_duration(self, seconds, expected):
        assert fmt.format_duration(seconds) == expected

    def test_duration_english(self):
        assert fmt.format_duration(4200, "en") == "1h 10min"

    def test_temperature_and_humidity(self):
        assert fmt.format_temperature(12.5) == "12.5°C"
        assert fmt.format_humidity(65.0) == "65%"

    def test_time_of_day_in_timezone(self):
        start = datetime(2025, 11, 25, 9, 30, tzinfo=timezone.utc)
        assert fmt.format_time_of_day(start, ZoneInfo("Europe/Moscow")) == "12:30"


class TestSampleValues:
    @pytest.mark.parametrize("minutes, expected", [(0, "0 мин"), (45, "45 мин"), (65, "1:05"), (120, "2:00")])
    def test_sample_time(self, minutes, expected):
        assert fmt.format_sample_time(minutes) == expected

    def test_speed_distance_elevation(self):
        assert fmt.format_speed(9.54) == "9.5 км/ч"
        assert fmt.format_meters(1555) == "1555 м"
        assert fmt.format_elevation(49.5, "en") == "49.5 m"


class TestCalendarLabels:
    def test_weekday(self):
        assert fmt.weekday_name(date(2025, 11, 25)) == "Вт"
        assert fmt.weekday_name(date(2025, 11, 25), "en") == "Tue"

    def test_headers_rotate_with_first_weekday(self):
        assert fmt.weekday_headers("en", first_weekday=6)[:2] == ["Sun", "Mon"]
        assert fmt.weekday_headers()[0] == "Пн"

    def test_month_title(self):
        assert fmt.month_title(date(2025, 11, 1)) == "Ноябрь 2025"
        assert fmt.month_title(date(2025, 11, 1), "en") == "November 2025"

    def test_unknown_locale_falls_back(self):
        assert fmt.month_title(date(2025, 1, 1), "xx") == "Январь 2025"

    def test_activity_names(self):
        assert fmt.activity_name(ActivityType.WATER) == "Вода"
        assert all(fmt.activity_name(a, "en") == a.value for a in ActivityType)
