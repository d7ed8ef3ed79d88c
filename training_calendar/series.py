"""
Training Calendar · Series Normalizer
Chart coordinates, axis labels and GPS route geometry for a workout's samples.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, TypeVar

from .models import DiagramSample

T = TypeVar("T")

LABEL_STRIDE = 5  # label every 5th sample

# Used when a series has no values to take the range from
HEART_RATE_RANGE = (60.0, 200.0)

# Map defaults when no sample has a GPS fix
DEFAULT_CENTER = (55.7558, 37.6173)  # Moscow
DEFAULT_SPAN = 0.1
MIN_SPAN = 0.005
SPAN_PADDING = 1.5


@dataclass(frozen=True)
class MapRegion:
    center: tuple[float, float]
    span: tuple[float, float]  # (latitude delta, longitude delta)


class SeriesNormalizer:
    def __init__(self, stride: int = LABEL_STRIDE):
        if stride < 1:
            raise ValueError(f"stride must be >= 1, got {stride}")
        self.stride = stride

    @staticmethod
    def value_range(series: Sequence[T], selector: Callable[[T], float],
                    default: tuple[float, float] = (0.0, 0.0)) -> tuple[float, float]:
        if not series:
            return default
        values = [float(selector(item)) for item in series]
        return min(values), max(values)

    def normalize(self, series: Sequence[T], selector: Callable[[T], float],
                  width: float, height: float) -> list[tuple[float, float]]:
        """
        Map sample i of n to x = width * i / max(1, n - 1) and its value to
        y = height * (1 - (v - min) / (max - min)), so larger values plot
        higher. A constant series has no spread; its fraction is 0 and every
        point sits on the bottom edge (y = height).
        """
        n = len(series)
        if n == 0:
            return []
        low, high = self.value_range(series, selector)
        spread = high - low
        denominator = max(1, n - 1)

        points = []
        for i, item in enumerate(series):
            fraction = (float(selector(item)) - low) / spread if spread else 0.0
            points.append((width * i / denominator, height * (1 - fraction)))
        return points

    def thinned_labels(self, series: Sequence[T], selector: Callable[[T], str],
                       stride: Optional[int] = None) -> list[str]:
        stride = self.stride if stride is None else stride
        if stride < 1:
            raise ValueError(f"stride must be >= 1, got {stride}")
        return [selector(item) for i, item in enumerate(series) if i % stride == 0]

    # ── Route ─────────────────────────────────────────────────────────────────

    @staticmethod
    def route_coordinates(series: Sequence[DiagramSample]) -> list[tuple[float, float]]:
        """(latitude, longitude) of every sample with a GPS fix, in order."""
        return [(s.latitude, s.longitude) for s in series if s.has_fix]

    def route_region(self, series: Sequence[DiagramSample]) -> MapRegion:
        """Region that frames the route, or the default region when there is none."""
        coords = self.route_coordinates(series)
        if not coords:
            return MapRegion(DEFAULT_CENTER, (DEFAULT_SPAN, DEFAULT_SPAN))

        lats = [lat for lat, _ in coords]
        lons = [lon for _, lon in coords]
        center = ((min(lats) + max(lats)) / 2, (min(lons) + max(lons)) / 2)
        span = (
            max((max(lats) - min(lats)) * SPAN_PADDING, MIN_SPAN),
            max((max(lons) - min(lons)) * SPAN_PADDING, MIN_SPAN),
        )
        return MapRegion(center, span)
