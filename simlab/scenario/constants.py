"""
Scenario scoring constants.
Metric directions, rating bands, era bounds and intervention tiers live here
so the scorer, the divergence analyzer and the report share one source.
"""

from typing import Literal

Direction = Literal["higher_is_better", "lower_is_better", "stable"]

# Good direction per metric. "stable" means small movement is the good case.
METRIC_DIRECTIONS: dict[str, Direction] = {
    "gini": "lower_is_better",
    "civic_trust": "higher_is_better",
    "annual_emissions": "lower_is_better",
    "resilience_score": "higher_is_better",
    "ai_influence": "stable",
}

# |delta| below which a "stable" metric counts as holding steady
STABLE_TOLERANCE = 0.05

METRIC_LABELS: dict[str, str] = {
    "gini": "GINI Index",
    "civic_trust": "Civic Trust",
    "annual_emissions": "Annual Emissions",
    "resilience_score": "Resilience",
    "ai_influence": "AI Influence",
}

METRIC_SHORT_LABELS: dict[str, str] = {
    "gini": "GINI",
    "civic_trust": "Trust",
    "annual_emissions": "Emissions",
    "resilience_score": "Resilience",
    "ai_influence": "AI influence",
}

METRIC_UNITS: dict[str, str] = {
    "annual_emissions": "Gt",
}

# Export / display order
METRIC_ORDER: tuple[str, ...] = (
    "gini", "civic_trust", "annual_emissions", "resilience_score", "ai_influence",
)

# Metrics compared between two branches
DIVERGENCE_METRICS: tuple[str, ...] = (
    "gini", "civic_trust", "annual_emissions", "resilience_score",
)

# Inclusive lower bounds, checked top-down
RATING_BANDS: list[tuple[int, str]] = [
    (80, "Thriving"),
    (65, "Promising"),
    (50, "Mixed signals"),
    (35, "Under stress"),
    (0, "Critical"),
]

# Component explanation tiers: (strong above, fair above)
COMPONENT_TIER_BOUNDS: dict[str, tuple[float, float]] = {
    "equality": (0.7, 0.5),
    "trust": (0.7, 0.4),
    "resilience": (0.7, 0.4),
    "decarbonization": (0.7, 0.4),
    "ai_governance": (0.7, 0.4),
}

COMPONENT_TIER_PHRASES: dict[str, tuple[str, str, str]] = {
    "equality": (
        "income is well distributed",
        "moderate inequality remains",
        "significant inequality persists",
    ),
    "trust": (
        "strong social cohesion",
        "cooperation is possible but fragile",
        "low willingness to collaborate",
    ),
    "resilience": (
        "systems absorb shocks well",
        "some buffering capacity",
        "vulnerable to disruption",
    ),
    "decarbonization": (
        "major progress",
        "some reduction",
        "still tracking high",
    ),
    "ai_governance": (
        "governance institutions are strong and keeping pace",
        "governance readiness is building but gaps are emerging",
        "institutional trust lags dangerously behind AI adoption",
    ),
}

# Upper bound (inclusive) of elapsed years per era; legacy is open-ended
ERA_UPPER_BOUNDS: list[tuple[int, str]] = [
    (5, "dawn"),
    (15, "diverge"),
    (30, "mature"),
]

# Intervention intensity tiers, inclusive lower bounds
INTENSITY_TIERS: list[tuple[float, str]] = [
    (0.80, "Bold action"),
    (0.55, "Strong action"),
    (0.35, "Moderate action"),
    (0.15, "Minimal action"),
    (0.0, "Status quo"),
]
