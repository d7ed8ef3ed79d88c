"""
Training Calendar · Workout Repository
Resolves the workout list, per-workout metadata and diagram samples.

Every call reads its resource fresh from the configured source. Nothing is
raised to the caller: failures come back as an empty list or None, and the
problems found along the way are logged and kept in `last_diagnostics`.
"""

import logging
from datetime import datetime
from typing import Optional

from .decoding import (
    DIAGRAM_DATA,
    LIST_WORKOUTS,
    WORKOUT_METADATA,
    decode_keyed,
    decode_metadata,
    decode_series,
    decode_workout_list,
)
from .errors import ResourceUnavailable
from .models import Diagnostic, DiagramSample, DiagramSeries, Workout, WorkoutMetadata
from .sources import ResourceSource, default_source

logger = logging.getLogger(__name__)

DEFAULT_IDENTITY = "test@gmail.com"


class WorkoutRepository:
    def __init__(self, source: Optional[ResourceSource] = None):
        self.source = source if source is not None else default_source()
        self._diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def last_diagnostics(self) -> tuple[Diagnostic, ...]:
        """Problems recorded by the most recent call."""
        return self._diagnostics

    def _fetch(self, name: str, identity: str, since: Optional[datetime] = None) -> Optional[dict]:
        try:
            payload = self.source.fetch(name, identity=identity, since=since)
        except ResourceUnavailable as e:
            logger.error("%s", e)
            return None
        if payload is None:
            logger.warning("No data for resource '%s'", name)
        return payload

    def _record(self, diagnostics) -> None:
        self._diagnostics = tuple(diagnostics)
        for d in self._diagnostics:
            logger.warning("%s", d)

    # ── List ──────────────────────────────────────────────────────────────────

    def list_workouts(self, identity: str = DEFAULT_IDENTITY,
                      since: Optional[datetime] = None) -> list[Workout]:
        """
        All workouts for `identity` starting at or after `since`.

        `since` is handed to the source; whether it filters is up to the
        source (the fixture sources return their full set).
        """
        self._record(())
        payload = self._fetch(LIST_WORKOUTS, identity, since)
        if payload is None:
            return []
        try:
            result = decode_workout_list(payload)
        except ResourceUnavailable as e:
            logger.error("%s", e)
            self._record((Diagnostic(LIST_WORKOUTS, "*", str(e)),))
            return []
        self._record(result.diagnostics)
        return list(result.value)

    # ── Metadata ──────────────────────────────────────────────────────────────

    def get_metadata(self, workout_key: str,
                     identity: str = DEFAULT_IDENTITY) -> Optional[WorkoutMetadata]:
        """Metadata for one workout, or None if the key is unknown or undecodable."""
        self._record(())
        payload = self._fetch(WORKOUT_METADATA, identity)
        if payload is None:
            return None
        try:
            result = decode_keyed(payload, WORKOUT_METADATA, decode_metadata, only=workout_key)
        except ResourceUnavailable as e:
            logger.error("%s", e)
            return None
        self._record(result.diagnostics)
        return result.value.get(workout_key)

    def get_all_metadata(self, identity: str = DEFAULT_IDENTITY) -> dict[str, WorkoutMetadata]:
        """Every decodable metadata entry; bad entries are skipped."""
        self._record(())
        payload = self._fetch(WORKOUT_METADATA, identity)
        if payload is None:
            return {}
        try:
            result = decode_keyed(payload, WORKOUT_METADATA, decode_metadata)
        except ResourceUnavailable as e:
            logger.error("%s", e)
            return {}
        self._record(result.diagnostics)
        return dict(result.value)

    # ── Diagram ───────────────────────────────────────────────────────────────

    def get_diagram_series(self, workout_key: str,
                           identity: str = DEFAULT_IDENTITY) -> Optional[DiagramSeries]:
        self._record(())
        payload = self._fetch(DIAGRAM_DATA, identity)
        if payload is None:
            return None
        try:
            result = decode_keyed(payload, DIAGRAM_DATA, decode_series, only=workout_key)
        except ResourceUnavailable as e:
            logger.error("%s", e)
            return None
        self._record(result.diagnostics)
        return result.value.get(workout_key)

    def get_diagram_samples(self, workout_key: str,
                            identity: str = DEFAULT_IDENTITY) -> list[DiagramSample]:
        """Ordered samples for one workout; empty when unknown or empty."""
        series = self.get_diagram_series(workout_key, identity)
        if series is None:
            return []
        return list(series.samples)
