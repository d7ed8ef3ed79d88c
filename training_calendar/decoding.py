"""
Training Calendar · Decoding
Turns loosely typed JSON payloads into model records.

Two kinds of failure are distinguished:
  - recoverable field problems (an unparseable decimal, an unknown activity
    label) produce a default value plus a warning string;
  - structural problems (missing keys, bad timestamps, wrong types) raise
    DecodeError for the record being decoded.
Keyed resources decode each entry on its own, so one bad entry is skipped
and reported without affecting the others.
"""

import math
from datetime import datetime, timezone
from typing import Callable, Optional

from .errors import DecodeError, ResourceUnavailable
from .models import (
    ActivityType,
    DecodeResult,
    Diagnostic,
    DiagramSample,
    DiagramSeries,
    Workout,
    WorkoutMetadata,
)

CUSTOM_FORMAT = "%Y-%m-%d %H:%M:%S"

LIST_WORKOUTS = "list_workouts"
WORKOUT_METADATA = "workout_metadata"
DIAGRAM_DATA = "diagram_data"
RESOURCE_NAMES = (LIST_WORKOUTS, WORKOUT_METADATA, DIAGRAM_DATA)


# ── Field helpers ─────────────────────────────────────────────────────────────

def parse_timestamp(value) -> datetime:
    """
    Parse a timestamp into an aware UTC datetime.

    Tries ISO-8601 first ("2025-11-25T09:30:00Z", fractional seconds and
    offsets allowed, naive values read as UTC), then "YYYY-MM-DD HH:MM:SS"
    read as UTC.

    Raises:
        DecodeError: if neither format matches
    """
    if not isinstance(value, str) or not value.strip():
        raise DecodeError(f"Cannot decode date string: {value!r}")
    text = value.strip()

    if "T" in text:
        try:
            dt = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            dt = None
        if dt is not None:
            if dt.tzinfo is None:
                return dt.replace(tzinfo=timezone.utc)
            return dt.astimezone(timezone.utc)

    try:
        return datetime.strptime(text, CUSTOM_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        raise DecodeError(f"Cannot decode date string: {value!r}")


def recover_decimal(value) -> tuple[float, Optional[str]]:
    """Parse a decimal carried as text. Returns (0.0, warning) when it doesn't parse."""
    if isinstance(value, bool):
        return 0.0, f"expected a decimal, got {value!r}"
    try:
        number = float(value) if isinstance(value, (int, float)) else float(str(value).strip())
    except (TypeError, ValueError, OverflowError):
        return 0.0, f"invalid decimal {value!r}, using 0"
    if not math.isfinite(number):
        return 0.0, f"non-finite decimal {value!r}, using 0"
    return number, None


def recover_activity(value) -> tuple[ActivityType, Optional[str]]:
    """Map an activity label to ActivityType, defaulting to walking/running."""
    try:
        return ActivityType(value), None
    except ValueError:
        fallback = ActivityType.default()
        return fallback, f"unknown activity type {value!r}, using {fallback.value!r}"


def _require(entry: dict, key: str):
    if not isinstance(entry, dict):
        raise DecodeError(f"expected an object, got {type(entry).__name__}")
    if key not in entry:
        raise DecodeError(f"missing required field '{key}'")
    return entry[key]


def _int(entry: dict, key: str) -> int:
    raw = _require(entry, key)
    if isinstance(raw, bool):
        raise DecodeError(f"'{key}' must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    raise DecodeError(f"'{key}' must be an integer, got {raw!r}")


def _float(entry: dict, key: str) -> float:
    raw = _require(entry, key)
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise DecodeError(f"'{key}' must be a number, got {raw!r}")
    return float(raw)


def _str(entry: dict, key: str) -> str:
    raw = _require(entry, key)
    if not isinstance(raw, str):
        raise DecodeError(f"'{key}' must be a string, got {raw!r}")
    return raw


def _optional_str(entry: dict, key: str) -> Optional[str]:
    raw = entry.get(key)
    if raw is None or isinstance(raw, str):
        return raw
    raise DecodeError(f"'{key}' must be a string or null, got {raw!r}")


# ── Record decoders ───────────────────────────────────────────────────────────

def decode_workout(entry: dict) -> DecodeResult:
    activity, warning = recover_activity(_require(entry, "workoutActivityType"))
    workout = Workout(
        workout_key=_str(entry, "workoutKey"),
        activity_type=activity,
        start=parse_timestamp(_require(entry, "workoutStartDate")),
    )
    diagnostics = ()
    if warning:
        diagnostics = (Diagnostic(LIST_WORKOUTS, workout.workout_key, warning),)
    return DecodeResult(workout, diagnostics)


def decode_metadata(entry: dict) -> DecodeResult:
    key = _str(entry, "workoutKey")
    warnings = []

    activity, warning = recover_activity(_require(entry, "workoutActivityType"))
    if warning:
        warnings.append(warning)

    decimals = {}
    for field_name, wire_name in (
        ("distance", "distance"),
        ("duration", "duration"),
        ("avg_humidity", "avg_humidity"),
        ("avg_temp", "avg_temp"),
    ):
        value, warning = recover_decimal(_require(entry, wire_name))
        if warning:
            warnings.append(f"{wire_name}: {warning}")
        decimals[field_name] = value

    metadata = WorkoutMetadata(
        workout_key=key,
        activity_type=activity,
        start=parse_timestamp(_require(entry, "workoutStartDate")),
        max_layer=_int(entry, "maxLayer"),
        max_sub_layer=_int(entry, "maxSubLayer"),
        comment=_optional_str(entry, "comment"),
        photo_before=_optional_str(entry, "photoBefore"),
        photo_after=_optional_str(entry, "photoAfter"),
        heart_rate_graph=_optional_str(entry, "heartRateGraph"),
        activity_graph=_optional_str(entry, "activityGraph"),
        map=_optional_str(entry, "map"),
        **decimals,
    )
    return DecodeResult(
        metadata,
        tuple(Diagnostic(WORKOUT_METADATA, key, w) for w in warnings),
    )


def decode_sample(entry: dict) -> DiagramSample:
    return DiagramSample(
        time_minutes=_int(entry, "time_numeric"),
        heart_rate=_int(entry, "heartRate"),
        speed_kmh=_float(entry, "speed_kmh"),
        distance_meters=_int(entry, "distanceMeters"),
        steps=_int(entry, "steps"),
        elevation=_float(entry, "elevation"),
        latitude=_float(entry, "latitude"),
        longitude=_float(entry, "longitude"),
        temperature_celsius=_float(entry, "temperatureCelsius"),
        layer=_int(entry, "currentLayer"),
        sub_layer=_int(entry, "currentSubLayer"),
        timestamp=parse_timestamp(_require(entry, "currentTimestamp")),
    )


def decode_series(entry: dict) -> DecodeResult:
    rows = _require(entry, "data")
    states = _require(entry, "states")
    if not isinstance(rows, list):
        raise DecodeError(f"'data' must be a list, got {type(rows).__name__}")
    if not isinstance(states, list) or not all(isinstance(s, str) for s in states):
        raise DecodeError("'states' must be a list of strings")

    samples = tuple(decode_sample(row) for row in rows)
    for prev, cur in zip(samples, samples[1:]):
        if cur.time_minutes < prev.time_minutes:
            raise DecodeError(
                f"time_numeric goes backwards ({prev.time_minutes} -> {cur.time_minutes})"
            )
    series = DiagramSeries(
        description=_str(entry, "description"),
        samples=samples,
        states=tuple(states),
    )
    return DecodeResult(series)


# ── Resource decoders ─────────────────────────────────────────────────────────

def decode_workout_list(payload: dict) -> DecodeResult:
    """
    Decode a list_workouts payload.

    The list is all-or-nothing: any bad item makes the resource unavailable.

    Raises:
        ResourceUnavailable: on a wrong top-level shape or an undecodable item
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
        raise ResourceUnavailable(LIST_WORKOUTS, "expected an object with a 'data' list")

    workouts = []
    diagnostics: list[Diagnostic] = []
    for idx, item in enumerate(payload["data"]):
        try:
            result = decode_workout(item)
        except DecodeError as e:
            raise ResourceUnavailable(LIST_WORKOUTS, f"item {idx}: {e}") from e
        workouts.append(result.value)
        diagnostics.extend(result.diagnostics)
    return DecodeResult(workouts, tuple(diagnostics))


def decode_keyed(
    payload: dict,
    resource: str,
    decoder: Callable[[dict], DecodeResult],
    only: Optional[str] = None,
) -> DecodeResult:
    """
    Decode a {"workouts": {key: entry}} payload entry by entry.

    Entries that fail are skipped and reported as diagnostics. When `only`
    is given, just that key is decoded.

    Raises:
        ResourceUnavailable: if 'workouts' is missing or not an object
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("workouts"), dict):
        raise ResourceUnavailable(resource, "expected an object with a 'workouts' map")

    entries = payload["workouts"]
    if only is not None:
        entries = {only: entries[only]} if only in entries else {}

    decoded = {}
    diagnostics: list[Diagnostic] = []
    for key, entry in entries.items():
        try:
            result = decoder(entry)
        except DecodeError as e:
            diagnostics.append(Diagnostic(resource, key, f"skipped: {e}"))
            continue
        decoded[key] = result.value
        diagnostics.extend(result.diagnostics)
    return DecodeResult(decoded, tuple(diagnostics))
