"""Search configuration."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Self

from .constants import (
    AFTERNOON_START_TIMES,
    DEFAULT_BEAM_WIDTH,
    DEFAULT_MAX_SECTIONS_PER_COURSE,
    DEFAULT_PROPOSAL_COUNT,
    DEFAULT_TARGET_CREDITS,
    SOFT_CONSTRAINT_WEIGHTS,
)


def _default_start_times() -> tuple[tuple[int, str], ...]:
    return tuple((entry["slot"], entry["start"]) for entry in AFTERNOON_START_TIMES)


@dataclass(frozen=True)
class SearchConfig:
    """Tuning knobs for one engine invocation.

    Attributes:
        beam_width: States kept in the frontier after each course
        max_sections_per_course: Best-ranked sections tried per course
        proposal_count: Proposals requested when the caller gives none
        default_target_credits: Credit target used when the profile has none
        afternoon_start_times: (ordinal, "HH:MM") canonical afternoon starts
        weights: Scoring weights, see SOFT_CONSTRAINT_WEIGHTS
    """

    beam_width: int = DEFAULT_BEAM_WIDTH
    max_sections_per_course: int = DEFAULT_MAX_SECTIONS_PER_COURSE
    proposal_count: int = DEFAULT_PROPOSAL_COUNT
    default_target_credits: float = DEFAULT_TARGET_CREDITS
    afternoon_start_times: tuple[tuple[int, str], ...] = field(default_factory=_default_start_times)
    weights: dict[str, int] = field(default_factory=lambda: dict(SOFT_CONSTRAINT_WEIGHTS))

    def __post_init__(self) -> None:
        # Bounds below 1 would make the search return nothing
        object.__setattr__(self, "beam_width", max(1, int(self.beam_width)))
        object.__setattr__(self, "max_sections_per_course", max(1, int(self.max_sections_per_course)))
        object.__setattr__(self, "proposal_count", max(1, int(self.proposal_count)))
        object.__setattr__(self, "weights", {**SOFT_CONSTRAINT_WEIGHTS, **self.weights})

    def weight(self, name: str) -> int:
        """Get a scoring weight by name."""
        return self.weights[name]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a config from a dictionary, ignoring unknown keys."""
        kwargs: dict[str, Any] = {}
        for key in ("beam_width", "max_sections_per_course", "proposal_count", "default_target_credits"):
            if data.get(key) is not None:
                kwargs[key] = data[key]
        if data.get("afternoon_start_times"):
            kwargs["afternoon_start_times"] = tuple(
                (int(entry["slot"]), str(entry["start"])) for entry in data["afternoon_start_times"]
            )
        if data.get("weights"):
            kwargs["weights"] = dict(data["weights"])
        return cls(**kwargs)

    @classmethod
    def from_file(cls, path: Path | str) -> Self:
        """Load a config from a JSON file."""
        with open(path, encoding="utf-8") as f:
            return cls.from_dict(json.load(f))
