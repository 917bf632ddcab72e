"""Loader for the pre-generated scenario dataset.

The dataset is one static JSON document read from disk. Any failure
degrades to an empty dataset so downstream code sees "no data" instead of
crashing.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from simlab.scenario.models import SimulationDataset
from simlab.utils import DataLoadError

logger = logging.getLogger(__name__)


def read_dataset(path: Path | str) -> SimulationDataset:
    """Read and validate the dataset. Raises DataLoadError on any failure."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise DataLoadError(f"Cannot read scenario dataset {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise DataLoadError(f"Scenario dataset {path} is not a JSON object")

    try:
        return SimulationDataset.model_validate({"scenarios": raw.get("scenarios", [])})
    except ValidationError as exc:
        raise DataLoadError(f"Invalid scenario dataset {path}: {exc}") from exc


def load_dataset(path: Path | str) -> SimulationDataset:
    """Load the dataset, substituting an empty scenario list on failure."""
    try:
        dataset = read_dataset(path)
    except DataLoadError as exc:
        logger.error("Failed to load simulation scenarios: %s", exc)
        return SimulationDataset()
    logger.info("Loaded %d scenarios from %s", len(dataset.scenarios), path)
    return dataset
