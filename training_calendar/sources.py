"""
Training Calendar · Resource sources
Where the repository gets its raw JSON payloads from.

A source answers fetch(name, identity=..., since=...) with the decoded JSON
object for one of the three resource names, raises ResourceUnavailable when
it cannot, and returns None for names it doesn't know.
"""

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Protocol

from .decoding import (
    DIAGRAM_DATA,
    LIST_WORKOUTS,
    RESOURCE_NAMES,
    WORKOUT_METADATA,
    parse_timestamp,
)
from .errors import ResourceUnavailable
from .fixtures import load_embedded
from .parsers.garmin_fit import parse_folder

logger = logging.getLogger(__name__)


# ── Config ────────────────────────────────────────────────────────────────────

DEFAULT_RESOURCE_DIR = Path.home() / ".training-calendar" / "resources"

# Top-level container each resource must carry
_CONTAINERS = {
    LIST_WORKOUTS: ("data", list),
    WORKOUT_METADATA: ("workouts", dict),
    DIAGRAM_DATA: ("workouts", dict),
}


class ResourceSource(Protocol):
    def fetch(self, name: str, identity: Optional[str] = None,
              since: Optional[datetime] = None) -> Optional[dict]:
        ...


def _check_shape(name: str, payload) -> dict:
    if not isinstance(payload, dict):
        raise ResourceUnavailable(name, f"top level must be an object, got {type(payload).__name__}")
    key, kind = _CONTAINERS[name]
    if not isinstance(payload.get(key), kind):
        raise ResourceUnavailable(name, f"'{key}' must be a {kind.__name__}")
    return payload


# ── Bundled files ─────────────────────────────────────────────────────────────

class BundledResourceSource:
    """Reads <directory>/<name>.json."""

    def __init__(self, directory=DEFAULT_RESOURCE_DIR):
        self.directory = Path(directory).expanduser()

    def path_for(self, name: str) -> Path:
        return self.directory / f"{name}.json"

    def fetch(self, name, identity=None, since=None):
        if name not in RESOURCE_NAMES:
            return None
        path = self.path_for(name)
        try:
            with open(path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except FileNotFoundError:
            raise ResourceUnavailable(name, f"{path} not found")
        except OSError as e:
            raise ResourceUnavailable(name, f"cannot read {path}: {e}")
        except UnicodeDecodeError as e:
            raise ResourceUnavailable(name, f"cannot decode {path}: {e}")
        except json.JSONDecodeError as e:
            raise ResourceUnavailable(name, f"invalid JSON in {path}: {e}")
        return _check_shape(name, payload)


# ── Embedded literals ─────────────────────────────────────────────────────────

class EmbeddedResourceSource:
    """Always succeeds for the three known names."""

    def fetch(self, name, identity=None, since=None):
        return load_embedded(name)


# ── Fallback chain ────────────────────────────────────────────────────────────

class FallbackResourceSource:
    """
    Try `primary`; on any failure use `fallback` for the known resource names.
    Unknown names yield None from both.
    """

    def __init__(self, primary: ResourceSource, fallback: Optional[ResourceSource] = None):
        self.primary = primary
        self.fallback = fallback or EmbeddedResourceSource()

    def fetch(self, name, identity=None, since=None):
        if name not in RESOURCE_NAMES:
            return None
        try:
            payload = self.primary.fetch(name, identity=identity, since=since)
        except ResourceUnavailable as e:
            logger.info("%s; loading embedded %s data", e, name)
        else:
            if payload is not None:
                return payload
            logger.info("No %s data from primary source; loading embedded data", name)
        return self.fallback.fetch(name, identity=identity, since=since)


def default_source(directory: Optional[str] = None) -> FallbackResourceSource:
    """Bundled directory with embedded fallback, the standard setup."""
    directory = directory or os.fspath(DEFAULT_RESOURCE_DIR)
    return FallbackResourceSource(BundledResourceSource(directory))


# ── Garmin FIT folder ─────────────────────────────────────────────────────────

class FitFolderSource:
    """
    Builds the three resources from a folder of Garmin .fit activity files.
    Unlike the fixture sources, list_workouts honours `since`.
    """

    def __init__(self, folder):
        self.folder = Path(folder).expanduser()

    def fetch(self, name, identity=None, since=None):
        if name not in RESOURCE_NAMES:
            return None
        if not self.folder.is_dir():
            raise ResourceUnavailable(name, f"{self.folder} is not a directory")

        resources = parse_folder(str(self.folder), identity=identity)
        payload = resources[name]

        if name == LIST_WORKOUTS and since is not None:
            cutoff = since if since.tzinfo else since.replace(tzinfo=timezone.utc)
            payload["data"] = [
                item for item in payload["data"]
                if parse_timestamp(item["workoutStartDate"]) >= cutoff
            ]
        return payload
