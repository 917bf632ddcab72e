"""SimLab configuration settings using Pydantic.

Loads settings from:
1. An optional YAML file (``SimLabSettings.from_yaml``)
2. Environment variables prefixed ``SIMLAB_`` (and ``.env``)
3. Default values
"""

from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from simlab.scenario.scorer import GovernanceWeights

# Load environment variables
load_dotenv()

LAB_NOTES_KEY = "simulation-lab-notes"


class SimLabSettings(BaseSettings):
    """Central configuration for SimLab."""

    model_config = SettingsConfigDict(
        env_prefix="SIMLAB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # --- Dataset ---
    dataset_path: Path = Field(
        default_factory=lambda: Path(__file__).parent.parent / "data" / "simulation.json",
        description="Pre-computed scenario trajectories (JSON)"
    )

    # --- Lab notes ---
    lab_notes_dir: Path = Field(
        default_factory=lambda: Path.home() / ".simlab",
        description="Directory holding persisted lab notes"
    )
    lab_notes_key: str = LAB_NOTES_KEY

    # --- Report assembly ---
    default_report_scenario: str = Field(
        default="moderate",
        description="Scenario whose phrasing fills template gaps"
    )

    # --- AI governance heuristics ---
    governance_trust_threshold: float = Field(default=0.65, gt=0)
    governance_gap_margin: float = 0.1
    governance_gap_penalty: float = Field(default=2.5, ge=0)

    # --- Logging ---
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    @property
    def governance(self) -> GovernanceWeights:
        return GovernanceWeights(
            trust_threshold=self.governance_trust_threshold,
            gap_margin=self.governance_gap_margin,
            gap_penalty=self.governance_gap_penalty,
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path = "config/simlab.yaml") -> "SimLabSettings":
        """Load settings from a YAML file, falling back to env/defaults."""
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            return cls()

        with open(yaml_path) as f:
            config_data = yaml.safe_load(f) or {}

        return cls(**config_data)


# Global settings instance
_settings: Optional[SimLabSettings] = None


def get_settings() -> SimLabSettings:
    """Get or create global settings instance"""
    global _settings
    if _settings is None:
        _settings = SimLabSettings.from_yaml()
    return _settings


def reload_settings(yaml_path: Optional[str | Path] = None) -> SimLabSettings:
    """Reload settings from file"""
    global _settings
    _settings = SimLabSettings.from_yaml(yaml_path) if yaml_path else SimLabSettings.from_yaml()
    return _settings
