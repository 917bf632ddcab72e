"""Pydantic v2 models for saved lab notes."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from simlab.scenario.models import Snapshot
from simlab.utils import generate_note_id


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class NoteMetrics(BaseModel):
    """The five tracked metrics at the saved position."""
    model_config = ConfigDict(frozen=True)

    gini: float
    civic_trust: float
    annual_emissions: float
    resilience_score: float
    ai_influence: float

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> NoteMetrics:
        return cls(
            gini=snapshot.gini,
            civic_trust=snapshot.civic_trust,
            annual_emissions=snapshot.annual_emissions,
            resilience_score=snapshot.resilience_score,
            ai_influence=snapshot.ai_influence,
        )


class LabNote(BaseModel):
    """A user-annotated snapshot of one scenario at one year.

    Immutable once created; the store only ever adds or removes whole notes.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=generate_note_id)
    title: str
    annotation: str = ""
    timestamp: str = Field(default_factory=_utc_now_iso)
    scenario_id: str
    scenario_name: str
    branch_label: str = ""
    year_index: int = Field(ge=0)
    year: int
    metrics: NoteMetrics
    composite_score: int
    rating: str
    report: str = ""


class RestorePoint(BaseModel):
    """Where to navigate back to when a note is restored."""
    scenario_id: str
    year_index: int


class ExportedDocument(BaseModel):
    """Markdown export of a note. Callers decide where to write it."""
    filename: str
    content: str
