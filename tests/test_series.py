"""
Training Calendar · Series normalization tests
Run with: pytest tests/
"""

import math
from datetime import datetime, timezone

import pytest

from training_calendar.formatting import format_sample_time
from training_calendar.models import DiagramSample
from training_calendar.repository import WorkoutRepository
from training_calendar.series import (
    DEFAULT_CENTER,
    HEART_RATE_RANGE,
    MapRegion,
    SeriesNormalizer,
)
from training_calendar.sources import EmbeddedResourceSource


def sample(minute: int, hr: int = 100, lat: float = 55.75, lon: float = 37.61) -> DiagramSample:
    return DiagramSample(
        time_minutes=minute, heart_rate=hr, speed_kmh=8.0, distance_meters=0, steps=0,
        elevation=0.0, latitude=lat, longitude=lon, temperature_celsius=10.0,
        layer=0, sub_layer=0, timestamp=datetime(2025, 11, 25, 9, minute, tzinfo=timezone.utc),
    )


def fixture_samples():
    return WorkoutRepository(EmbeddedResourceSource()).get_diagram_samples("7823456789012345")


# ── normalize ─────────────────────────────────────────────────────────────────

class TestNormalize:
    def test_empty(self):
        assert SeriesNormalizer().normalize([], lambda s: s.heart_rate, 100, 50) == []

    def test_single_sample_sits_at_origin_x(self):
        points = SeriesNormalizer().normalize([sample(0, 120)], lambda s: s.heart_rate, 300, 200)
        assert points == [(0.0, 200.0)]

    def test_constant_series_is_defined(self):
        series = [sample(i, 90) for i in range(5)]
        points = SeriesNormalizer().normalize(series, lambda s: s.heart_rate, 100, 40)
        assert all(not math.isnan(y) for _, y in points)
        assert all(y == 40 for _, y in points)

    def test_linear_mapping(self):
        series = [sample(0, 100), sample(1, 150), sample(2, 200)]
        points = SeriesNormalizer().normalize(series, lambda s: s.heart_rate, 200, 100)
        assert points == [(0.0, 100.0), (100.0, 50.0), (200.0, 0.0)]

    def test_larger_values_plot_higher(self):
        points = SeriesNormalizer().normalize(fixture_samples(), lambda s: s.heart_rate, 320, 200)
        peak = max(range(21), key=lambda i: fixture_samples()[i].heart_rate)
        assert points[peak][1] == 0.0
        assert points[0][1] == 200.0  # 72 bpm is the minimum
        assert points[-1][0] == 320.0

    def test_works_on_plain_numbers(self):
        points = SeriesNormalizer().normalize([3, 1, 2], float, 2, 10)
        assert points == [(0.0, 0.0), (1.0, 10.0), (2.0, 5.0)]


# ── labels ────────────────────────────────────────────────────────────────────

class TestThinnedLabels:
    def test_fixture_every_fifth(self):
        samples = fixture_samples()
        labels = SeriesNormalizer().thinned_labels(samples, lambda s: format_sample_time(s.time_minutes))
        assert labels == ["0 мин", "5 мин", "10 мин", "15 мин", "20 мин"]

    def test_stride_one_keeps_everything(self):
        assert SeriesNormalizer().thinned_labels(["a", "b", "c"], str, stride=1) == ["a", "b", "c"]

    def test_empty(self):
        assert SeriesNormalizer().thinned_labels([], str) == []

    @pytest.mark.parametrize("stride", [0, -3])
    def test_bad_stride(self, stride):
        with pytest.raises(ValueError):
            SeriesNormalizer().thinned_labels(["a"], str, stride=stride)
        with pytest.raises(ValueError):
            SeriesNormalizer(stride=stride)


# ── value range ───────────────────────────────────────────────────────────────

class TestValueRange:
    def test_observed(self):
        assert SeriesNormalizer.value_range(fixture_samples(), lambda s: s.heart_rate) == (72, 145)

    def test_default_when_empty(self):
        assert SeriesNormalizer.value_range([], lambda s: s.heart_rate, HEART_RATE_RANGE) == (60.0, 200.0)


# ── route ─────────────────────────────────────────────────────────────────────

class TestRoute:
    def test_coordinates_skip_missing_fix(self):
        series = [sample(0, lat=0, lon=0), sample(1, lat=55.1, lon=37.1), sample(2, lat=0, lon=0)]
        assert SeriesNormalizer.route_coordinates(series) == [(55.1, 37.1)]

    def test_default_region_without_fix(self):
        region = SeriesNormalizer().route_region([sample(0, lat=0, lon=0)])
        assert region == MapRegion(DEFAULT_CENTER, (0.1, 0.1))

    def test_region_frames_route(self):
        region = SeriesNormalizer().route_region(fixture_samples())
        lat, lon = region.center
        assert lat == pytest.approx((55.7558 + 55.7754) / 2)
        assert lon == pytest.approx((37.6173 + 37.6427) / 2)
        assert region.span[0] == pytest.approx((55.7754 - 55.7558) * 1.5)

    def test_single_point_gets_minimum_span(self):
        region = SeriesNormalizer().route_region([sample(0, lat=50.0, lon=30.0)])
        assert region.center == (50.0, 30.0)
        assert region.span == (0.005, 0.005)
