"""
Named parameter sets.

- small: many short-range particles, rugged coastlines
- smooth: few long-range particles, round islands
- large: the smooth settings on a grid four times bigger
"""

from __future__ import annotations
from dataclasses import dataclass

from islands.core.population import PopulationConfig


@dataclass
class IslandPreset:
    """A population configuration plus the number of particles to drop."""

    config: PopulationConfig
    n_particles: int


PRESETS: dict[str, IslandPreset] = {
    "small": IslandPreset(
        config=PopulationConfig(width=520, height=680, period=3.0, amplitude=1000.0),
        n_particles=100_000,
    ),
    "smooth": IslandPreset(
        config=PopulationConfig(width=520, height=680, period=10.0, amplitude=10_000.0),
        n_particles=10_000,
    ),
    "large": IslandPreset(
        config=PopulationConfig(width=1040, height=1360, period=10.0, amplitude=10_000.0),
        n_particles=500_000,
    ),
}

DEFAULT_PRESET = "small"


def get_preset(name: str) -> IslandPreset:
    """Look up a preset by name."""
    try:
        return PRESETS[name]
    except KeyError:
        raise KeyError(
            f"Unknown preset {name!r}, expected one of: {', '.join(sorted(PRESETS))}"
        ) from None
