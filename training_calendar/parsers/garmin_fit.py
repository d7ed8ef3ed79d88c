"""
Training Calendar · Garmin FIT Parser
Parses Garmin .fit activity files into the three resource shapes
(list_workouts item, workout_metadata entry, diagram_data entry) so a folder
of FIT files can stand in for the JSON fixtures.

FIT activity files typically contain:
  - session: workout summary (sport, start, elapsed time, distance)
  - record: timestamped samples (heart rate, speed, position, altitude, temperature)
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from fitparse import FitFile, FitParseError

from ..models import ActivityType

logger = logging.getLogger(__name__)

SEMICIRCLES_TO_DEGREES = 180.0 / 2 ** 31
SAMPLE_INTERVAL_MIN = 1  # one diagram row per minute of activity


# ── Helpers ───────────────────────────────────────────────────────────────────

def _utc(dt: Optional[datetime]) -> Optional[datetime]:
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _iso(dt: datetime) -> str:
    return _utc(dt).strftime("%Y-%m-%dT%H:%M:%SZ")


def _degrees(semicircles) -> float:
    """FIT positions are stored in semicircles; 0 means no fix."""
    if semicircles is None:
        return 0.0
    return round(float(semicircles) * SEMICIRCLES_TO_DEGREES, 6)


def _first(msg, *names):
    for name in names:
        value = msg.get_value(name)
        if value is not None:
            return value
    return None


# ── Sport mapping (FIT sport / sub_sport → activity label) ────────────────────

_SPORT_MAP = {
    "running": ActivityType.WALKING_RUNNING,
    "walking": ActivityType.WALKING_RUNNING,
    "hiking": ActivityType.WALKING_RUNNING,
    "cycling": ActivityType.CYCLING,
    "indoor_cycling": ActivityType.CYCLING,
    "swimming": ActivityType.WATER,
    "lap_swimming": ActivityType.WATER,
    "open_water": ActivityType.WATER,
    "rowing": ActivityType.WATER,
    "stand_up_paddleboarding": ActivityType.WATER,
    "strength_training": ActivityType.STRENGTH,
    "training": ActivityType.STRENGTH,
    "yoga": ActivityType.YOGA,
    "pilates": ActivityType.YOGA,
}


def _normalize_sport(sport: Optional[str], subsport: Optional[str] = None) -> ActivityType:
    """Map FIT sport/sub_sport to an activity type. Sub-sport wins when it is specific."""
    s = (sport or "").lower().strip().replace(" ", "_")
    sub = (subsport or "").lower().strip().replace(" ", "_")
    if sub in _SPORT_MAP:
        return _SPORT_MAP[sub]
    if s in _SPORT_MAP:
        return _SPORT_MAP[s]
    return ActivityType.default()


# ── Extractors ────────────────────────────────────────────────────────────────

def _parse_samples(messages, start: datetime) -> list[dict]:
    """Downsample record messages to one diagram row per SAMPLE_INTERVAL_MIN."""
    rows = []
    last_minute = None
    for msg in messages:
        ts = _utc(msg.get_value("timestamp"))
        if ts is None:
            continue
        minute = int((ts - start).total_seconds() // 60)
        if minute < 0:
            continue
        if last_minute is not None and minute - last_minute < SAMPLE_INTERVAL_MIN:
            continue

        hr = msg.get_value("heart_rate")
        speed = _first(msg, "enhanced_speed", "speed")  # m/s
        distance = msg.get_value("distance")  # m
        altitude = _first(msg, "enhanced_altitude", "altitude")
        temperature = msg.get_value("temperature")
        steps = _first(msg, "total_cycles", "cycles")

        rows.append({
            "time_numeric": minute,
            "heartRate": int(hr) if hr is not None else 0,
            "speed_kmh": round(float(speed) * 3.6, 2) if speed is not None else 0.0,
            "distanceMeters": int(distance) if distance is not None else 0,
            "steps": int(steps) if steps is not None else 0,
            "elevation": round(float(altitude), 1) if altitude is not None else 0.0,
            "latitude": _degrees(msg.get_value("position_lat")),
            "longitude": _degrees(msg.get_value("position_long")),
            "temperatureCelsius": float(temperature) if temperature is not None else 0.0,
            "currentLayer": 0,
            "currentSubLayer": 0,
            "currentTimestamp": _iso(ts),
        })
        last_minute = minute
    return rows


def _session_summary(fitfile) -> Optional[dict]:
    """First session message, or None when the file has no usable session."""
    for msg in fitfile.get_messages("session"):
        start = _utc(_first(msg, "start_time", "timestamp"))
        if start is None:
            continue
        sport = msg.get_value("sport")
        subsport = msg.get_value("sub_sport")
        return {
            "start": start,
            "activity": _normalize_sport(
                str(sport) if sport is not None else None,
                str(subsport) if subsport is not None else None,
            ),
            "elapsed": _first(msg, "total_elapsed_time", "total_timer_time"),
            "distance": msg.get_value("total_distance"),
            "avg_temp": msg.get_value("avg_temperature"),
        }
    return None


# ── Public API ────────────────────────────────────────────────────────────────

def parse(fit_path: str, identity: Optional[str] = None) -> Optional[dict]:
    """
    Parse a single .fit file.

    Args:
        fit_path: Path to .fit file
        identity: Owner of the workout, stored in the diagram description

    Returns:
        Dict with keys: workout, metadata, diagram (wire-shaped dicts),
        or None if the file has no session.

    Raises:
        FitParseError: on corrupt/invalid FIT data
    """
    fitfile = FitFile(fit_path)
    fitfile.parse()

    summary = _session_summary(fitfile)
    if summary is None:
        return None

    start = summary["start"]
    key = str(int(start.timestamp()))
    activity = summary["activity"].value
    samples = _parse_samples(fitfile.get_messages("record"), start)
    temps = [row["temperatureCelsius"] for row in samples if row["temperatureCelsius"]]

    avg_temp = summary["avg_temp"]
    if avg_temp is None and temps:
        avg_temp = round(sum(temps) / len(temps), 1)

    workout = {
        "workoutKey": key,
        "workoutActivityType": activity,
        "workoutStartDate": _iso(start),
    }
    metadata = dict(workout)
    metadata.update({
        "distance": f"{float(summary['distance'] or 0):.2f}",
        "duration": f"{float(summary['elapsed'] or 0):.2f}",
        "maxLayer": 0,
        "maxSubLayer": 0,
        "avg_humidity": "0.00",
        "avg_temp": f"{float(avg_temp or 0):.2f}",
        "comment": Path(fit_path).stem,
    })
    owner = f" ({identity})" if identity else ""
    diagram = {
        "description": f"{activity} - {start:%Y-%m-%d %H:%M}{owner}",
        "data": samples,
        "states": [],
    }
    return {"workout": workout, "metadata": metadata, "diagram": diagram}


def parse_folder(folder: str, identity: Optional[str] = None) -> dict:
    """
    Parse all .fit files in a folder into the three resource payloads.
    Unreadable files are skipped with a warning.

    Returns:
        Dict keyed by resource name: list_workouts, workout_metadata, diagram_data
    """
    workouts = []
    metadata = {}
    diagrams = {}

    folder_path = Path(folder)
    for path in sorted(folder_path.glob("*.fit")) if folder_path.is_dir() else []:
        try:
            data = parse(str(path), identity=identity)
        except (FitParseError, OSError) as e:
            logger.warning("Skipping %s: %s", path.name, e)
            continue
        if data is None:
            logger.warning("Skipping %s: no session message", path.name)
            continue
        key = data["workout"]["workoutKey"]
        workouts.append(data["workout"])
        metadata[key] = data["metadata"]
        diagrams[key] = data["diagram"]

    source = f"fit:{folder_path}"
    return {
        "list_workouts": {"description": source, "data": workouts},
        "workout_metadata": {"description": source, "workouts": metadata},
        "diagram_data": {"description": source, "workouts": diagrams},
    }
