"""Lab Note Store - user-annotated snapshots kept across sessions.

The whole collection is one JSON array stored under one key, newest first.
It is read once at construction and written after every mutation. When the
backend is unavailable the store degrades: it lists nothing, and save and
delete leave the collection untouched instead of raising.
"""

from __future__ import annotations

import json
import logging
from typing import Optional

from pydantic import ValidationError

from simlab.labnotes.export import export_note
from simlab.labnotes.models import ExportedDocument, LabNote, NoteMetrics, RestorePoint
from simlab.labnotes.storage import InMemoryStorage, JsonFileStorage, NoteStorage
from simlab.scenario.branches import branch_label
from simlab.scenario.models import Scenario, Snapshot
from simlab.scenario.scorer import GovernanceWeights, compute_composite_score
from simlab.settings import LAB_NOTES_KEY, SimLabSettings, get_settings
from simlab.utils import StorageUnavailableError

logger = logging.getLogger(__name__)

_STORAGE_ERRORS = (StorageUnavailableError, OSError)


class LabNoteStore:
    """Ordered collection of lab notes over an injected storage backend."""

    def __init__(self, storage: NoteStorage | None = None, key: str = LAB_NOTES_KEY) -> None:
        self._storage = storage if storage is not None else InMemoryStorage()
        self._key = key
        self._notes: list[LabNote] = []
        self._available = True
        self._load()

    @classmethod
    def from_settings(cls, settings: SimLabSettings) -> LabNoteStore:
        """Store persisted as JSON under ``settings.lab_notes_dir``."""
        return cls(JsonFileStorage(settings.lab_notes_dir), key=settings.lab_notes_key)

    @property
    def available(self) -> bool:
        return self._available

    # -- CRUD -----------------------------------------------------------------

    def save(self, note: LabNote) -> LabNote:
        """Prepend *note* and persist. A note with the same id is replaced."""
        updated = [note] + [n for n in self._notes if n.id != note.id]
        if self._persist(updated):
            self._notes = updated
            logger.info("Saved lab note %s (%s, year %d)", note.id, note.scenario_id, note.year)
        return note

    def list(self) -> list[LabNote]:
        """All notes, most recent first."""
        return list(self._notes)

    def get(self, note_id: str) -> LabNote | None:
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    def delete(self, note_id: str) -> bool:
        """Remove a note by id. Returns True if it existed and the removal persisted."""
        if self.get(note_id) is None:
            return False
        updated = [n for n in self._notes if n.id != note_id]
        if not self._persist(updated):
            return False
        self._notes = updated
        logger.info("Deleted lab note %s", note_id)
        return True

    def restore(self, note_id: str) -> RestorePoint | None:
        """The scenario position a note was taken at, or None if unknown."""
        note = self.get(note_id)
        if note is None:
            return None
        return RestorePoint(scenario_id=note.scenario_id, year_index=note.year_index)

    def export(self, note: LabNote) -> ExportedDocument:
        return export_note(note)

    def __len__(self) -> int:
        return len(self._notes)

    # -- Persistence ----------------------------------------------------------

    def _load(self) -> None:
        try:
            blob = self._storage.load(self._key)
        except _STORAGE_ERRORS as exc:
            logger.warning("Lab note storage unavailable; notes will not persist: %s", exc)
            self._available = False
            return
        except UnicodeDecodeError as exc:
            logger.warning("Ignoring unreadable lab notes under %r: %s", self._key, exc)
            return
        if not blob:
            return

        try:
            raw = json.loads(blob)
            if not isinstance(raw, list):
                raise ValueError("expected a JSON array")
            self._notes = [LabNote.model_validate(item) for item in raw]
        except (ValueError, ValidationError) as exc:
            logger.warning("Ignoring unreadable lab notes under %r: %s", self._key, exc)
            self._notes = []

    def _persist(self, notes: list[LabNote]) -> bool:
        if not self._available:
            logger.warning("Lab note storage unavailable; change not saved")
            return False
        blob = json.dumps([n.model_dump(mode="json") for n in notes])
        try:
            self._storage.save(self._key, blob)
        except _STORAGE_ERRORS as exc:
            logger.warning("Failed to persist lab notes: %s", exc)
            return False
        return True


def create_note(
    scenario: Scenario,
    year_index: int,
    baseline: Optional[Snapshot],
    report: str,
    title: str = "",
    annotation: str = "",
    weights: Optional[GovernanceWeights] = None,
) -> LabNote | None:
    """Build a note for *scenario* at *year_index*.

    Returns None when there is nothing to save: the index is outside the
    trajectory or no baseline is available to score against.
    """
    if weights is None:
        weights = get_settings().governance
    snapshot = scenario.snapshot_at(year_index)
    breakdown = compute_composite_score(snapshot, baseline, weights)
    if snapshot is None or breakdown is None:
        return None

    return LabNote(
        title=title or f"{scenario.name} — Year {snapshot.year}",
        annotation=annotation,
        scenario_id=scenario.id,
        scenario_name=scenario.name,
        branch_label=branch_label(scenario.branch),
        year_index=year_index,
        year=snapshot.year,
        metrics=NoteMetrics.from_snapshot(snapshot),
        composite_score=breakdown.total,
        rating=breakdown.rating,
        report=report,
    )
