"""Base class for constraint implementations."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from ..slots import preferred_slot_ordinal

if TYPE_CHECKING:
    from ...models import ConstraintProfile
    from ..config import SearchConfig
    from ..models import SearchState
    from ..tiers import RelaxationTier


class ConstraintBase(ABC):
    """Abstract base class for constraint implementations."""

    def __init__(
        self,
        profile: "ConstraintProfile",
        tier: "RelaxationTier",
        config: "SearchConfig",
    ):
        """
        Initialize constraint handler.

        Args:
            profile: The constraint profile as requested by the student.
            tier: Relaxation tier the search is running under.
            config: Search configuration with bounds and weights.
        """
        self.base_profile = profile
        self.tier = tier
        self.config = config
        self.profile = tier.effective_profile(profile)
        self.preferred_ordinal = preferred_slot_ordinal(
            self.profile.preferred_afternoon_time, config.afternoon_start_times
        )

    @abstractmethod
    def evaluate(self, state: "SearchState") -> Any:
        """
        Evaluate the constraints against a schedule state.

        Args:
            state: The search state to evaluate.
        """
        pass
