"""
Training Calendar · Garmin FIT parser tests
FitFile is replaced with an in-memory fake so no binary fixtures are needed.
Run with: pytest tests/
"""

from datetime import datetime, timedelta, timezone

import pytest
from fitparse import FitParseError

from training_calendar.models import ActivityType
from training_calendar.parsers import garmin_fit
from training_calendar.repository import WorkoutRepository
from training_calendar.sources import FitFolderSource

START = datetime(2025, 11, 20, 7, 0)  # fitparse yields naive UTC datetimes


# ── Fakes ─────────────────────────────────────────────────────────────────────

class FakeMessage:
    def __init__(self, **values):
        self.values = values

    def get_value(self, name):
        return self.values.get(name)


def records(minutes: int, step_seconds: int = 20) -> list[FakeMessage]:
    out = []
    for i in range(minutes * 60 // step_seconds + 1):
        out.append(FakeMessage(
            timestamp=START + timedelta(seconds=i * step_seconds),
            heart_rate=90 + i,
            enhanced_speed=2.5,
            distance=i * 50.0,
            enhanced_altitude=120.0,
            position_lat=int(55.75 / garmin_fit.SEMICIRCLES_TO_DEGREES),
            position_long=int(37.61 / garmin_fit.SEMICIRCLES_TO_DEGREES),
            temperature=11,
        ))
    return out


FILES = {
    "run.fit": {
        "session": [FakeMessage(start_time=START, sport="running", sub_sport="generic",
                                total_elapsed_time=600.0, total_distance=1500.0)],
        "record": records(10),
    },
    "swim.fit": {
        "session": [FakeMessage(start_time=START + timedelta(days=3), sport="swimming",
                                sub_sport="open_water", total_elapsed_time=1200.0,
                                total_distance=800.0, avg_temperature=9)],
        "record": [],
    },
    "empty.fit": {"session": [], "record": []},
}


class FakeFitFile:
    def __init__(self, path):
        name = path.rsplit("/", 1)[-1]
        if name not in FILES:
            raise FitParseError(f"corrupt file {name}")
        self.messages = FILES[name]

    def parse(self):
        pass

    def get_messages(self, name):
        return iter(self.messages.get(name, []))


@pytest.fixture
def fit_folder(tmp_path, monkeypatch):
    monkeypatch.setattr(garmin_fit, "FitFile", FakeFitFile)
    for name in ("run.fit", "swim.fit", "empty.fit", "broken.fit"):
        (tmp_path / name).write_bytes(b"\x0e\x10")
    (tmp_path / "notes.txt").write_text("ignored")
    return tmp_path


# ── Helpers ───────────────────────────────────────────────────────────────────

class TestHelpers:
    @pytest.mark.parametrize("sport, sub, expected", [
        ("running", "generic", ActivityType.WALKING_RUNNING),
        ("cycling", "indoor_cycling", ActivityType.CYCLING),
        ("swimming", "lap_swimming", ActivityType.WATER),
        ("training", "strength_training", ActivityType.STRENGTH),
        ("training", "yoga", ActivityType.YOGA),
        ("golf", None, ActivityType.WALKING_RUNNING),
        (None, None, ActivityType.WALKING_RUNNING),
    ])
    def test_normalize_sport(self, sport, sub, expected):
        assert garmin_fit._normalize_sport(sport, sub) is expected

    def test_semicircles(self):
        assert garmin_fit._degrees(2 ** 30) == 90.0
        assert garmin_fit._degrees(None) == 0.0


# ── parse ─────────────────────────────────────────────────────────────────────

class TestParse:
    def test_run(self, fit_folder):
        data = garmin_fit.parse(str(fit_folder / "run.fit"), identity="me@example.com")
        workout, meta, diagram = data["workout"], data["metadata"], data["diagram"]

        assert workout["workoutActivityType"] == "Walking/Running"
        assert workout["workoutStartDate"] == "2025-11-20T07:00:00Z"
        assert meta["distance"] == "1500.00"
        assert meta["duration"] == "600.00"
        assert meta["avg_temp"] == "11.00"
        assert "me@example.com" in diagram["description"]

        rows = diagram["data"]
        assert [r["time_numeric"] for r in rows] == list(range(11))
        assert rows[1]["speed_kmh"] == 9.0
        assert rows[0]["latitude"] == pytest.approx(55.75, abs=1e-5)

    def test_no_session(self, fit_folder):
        assert garmin_fit.parse(str(fit_folder / "empty.fit")) is None

    def test_folder_skips_bad_files(self, fit_folder):
        resources = garmin_fit.parse_folder(str(fit_folder))
        assert len(resources["list_workouts"]["data"]) == 2
        assert set(resources["workout_metadata"]["workouts"]) == set(resources["diagram_data"]["workouts"])

    def test_missing_folder(self, tmp_path):
        resources = garmin_fit.parse_folder(str(tmp_path / "missing"))
        assert resources["list_workouts"]["data"] == []


# ── As a repository source ────────────────────────────────────────────────────

class TestFitFolderSource:
    def test_repository_reads_fit_folder(self, fit_folder):
        repo = WorkoutRepository(FitFolderSource(fit_folder))
        workouts = repo.list_workouts()
        assert [w.activity_type for w in workouts] == [ActivityType.WALKING_RUNNING, ActivityType.WATER]

        key = workouts[0].workout_key
        assert repo.get_metadata(key).distance == 1500.0
        assert len(repo.get_diagram_samples(key)) == 11
        assert repo.get_diagram_samples(workouts[1].workout_key) == []

    def test_since_filters(self, fit_folder):
        repo = WorkoutRepository(FitFolderSource(fit_folder))
        since = datetime(2025, 11, 21, tzinfo=timezone.utc)
        assert [w.activity_type for w in repo.list_workouts(since=since)] == [ActivityType.WATER]

    def test_missing_folder_is_empty(self, tmp_path):
        assert WorkoutRepository(FitFolderSource(tmp_path / "missing")).list_workouts() == []
