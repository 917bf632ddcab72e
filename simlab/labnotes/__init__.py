"""SimLab lab notes - saved, annotated scenario snapshots.

Core components:
    LabNote          - Immutable snapshot of one scenario at one year
    LabNoteStore     - Newest-first collection over an injected backend
    InMemoryStorage  - Dict-based backend
    JsonFileStorage  - One JSON file per key on disk
    DisabledStorage  - Always-unavailable backend (persistence off)
"""

from simlab.labnotes.models import ExportedDocument, LabNote, NoteMetrics, RestorePoint
from simlab.labnotes.storage import (
    DisabledStorage,
    InMemoryStorage,
    JsonFileStorage,
    NoteStorage,
)
from simlab.labnotes.store import LAB_NOTES_KEY, LabNoteStore, create_note
from simlab.labnotes.export import export_filename, render_lab_note_markdown

__all__ = [
    "ExportedDocument",
    "LabNote",
    "NoteMetrics",
    "RestorePoint",
    "DisabledStorage",
    "InMemoryStorage",
    "JsonFileStorage",
    "NoteStorage",
    "LAB_NOTES_KEY",
    "LabNoteStore",
    "create_note",
    "export_filename",
    "render_lab_note_markdown",
]
