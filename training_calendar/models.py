"""
Training Calendar · Models
Immutable records produced by the repository.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class ActivityType(str, Enum):
    WALKING_RUNNING = "Walking/Running"
    YOGA = "Yoga"
    WATER = "Water"
    CYCLING = "Cycling"
    STRENGTH = "Strength"

    @classmethod
    def default(cls) -> "ActivityType":
        return cls.WALKING_RUNNING


@dataclass(frozen=True)
class Workout:
    """One entry of the workout list."""
    workout_key: str
    activity_type: ActivityType
    start: datetime  # UTC


@dataclass(frozen=True)
class WorkoutMetadata:
    """Per-workout summary, keyed by the same workout_key as Workout."""
    workout_key: str
    activity_type: ActivityType
    start: datetime
    distance: float = 0.0       # meters
    duration: float = 0.0       # seconds
    max_layer: int = 0
    max_sub_layer: int = 0
    avg_humidity: float = 0.0
    avg_temp: float = 0.0
    comment: Optional[str] = None
    photo_before: Optional[str] = None
    photo_after: Optional[str] = None
    heart_rate_graph: Optional[str] = None
    activity_graph: Optional[str] = None
    map: Optional[str] = None

    def to_dict(self) -> dict:
        """Encode back into the workout_metadata wire shape."""
        data = {
            "workoutKey": self.workout_key,
            "workoutActivityType": self.activity_type.value,
            "workoutStartDate": _iso_z(self.start),
            "distance": str(self.distance),
            "duration": str(self.duration),
            "maxLayer": self.max_layer,
            "maxSubLayer": self.max_sub_layer,
            "avg_humidity": str(self.avg_humidity),
            "avg_temp": str(self.avg_temp),
        }
        optional = {
            "comment": self.comment,
            "photoBefore": self.photo_before,
            "photoAfter": self.photo_after,
            "heartRateGraph": self.heart_rate_graph,
            "activityGraph": self.activity_graph,
            "map": self.map,
        }
        data.update({k: v for k, v in optional.items() if v is not None})
        return data


@dataclass(frozen=True)
class DiagramSample:
    """One row of a workout's time series."""
    time_minutes: int
    heart_rate: int
    speed_kmh: float
    distance_meters: int
    steps: int
    elevation: float
    latitude: float
    longitude: float
    temperature_celsius: float
    layer: int
    sub_layer: int
    timestamp: datetime

    @property
    def has_fix(self) -> bool:
        # 0,0 marks a sample recorded without GPS
        return self.latitude != 0 and self.longitude != 0


@dataclass(frozen=True)
class DiagramSeries:
    description: str
    samples: tuple[DiagramSample, ...] = ()
    states: tuple[str, ...] = ()


@dataclass(frozen=True)
class Diagnostic:
    """A decode problem that was recovered from or caused a record to be skipped."""
    resource: str
    key: str
    message: str

    def __str__(self) -> str:
        return f"{self.resource}[{self.key}]: {self.message}"


@dataclass(frozen=True)
class DecodeResult:
    value: object
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)


def _iso_z(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
