"""
SimLab - Scenario trajectory scoring and report engine
Composite scores, narrative eras, branch divergence and lab notes
"""

__version__ = "0.1.0"
__author__ = "SimLab Team"

from simlab.settings import SimLabSettings, get_settings
from simlab.scenario import (
    Scenario,
    SimulationDataset,
    Snapshot,
    compute_composite_score,
    classify_era,
    compare,
    load_dataset,
)
from simlab.report import build_report, generate_report
from simlab.labnotes import LabNote, LabNoteStore, create_note

__all__ = [
    "SimLabSettings",
    "get_settings",
    "Scenario",
    "SimulationDataset",
    "Snapshot",
    "compute_composite_score",
    "classify_era",
    "compare",
    "load_dataset",
    "build_report",
    "generate_report",
    "LabNote",
    "LabNoteStore",
    "create_note",
]
