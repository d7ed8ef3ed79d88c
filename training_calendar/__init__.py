"""
Training Calendar
Workout history browsing: repository, calendar aggregation, chart series.
"""

from .models import ActivityType, DiagramSample, DiagramSeries, Workout, WorkoutMetadata
from .repository import WorkoutRepository
from .aggregator import CalendarAggregator, GregorianCalendar
from .series import SeriesNormalizer

__all__ = [
    "ActivityType",
    "CalendarAggregator",
    "DiagramSample",
    "DiagramSeries",
    "GregorianCalendar",
    "SeriesNormalizer",
    "Workout",
    "WorkoutMetadata",
    "WorkoutRepository",
]
