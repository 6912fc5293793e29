"""Constraint implementations for the schedule search."""

from .base import ConstraintBase
from .hard import HardConstraints
from .soft import SoftConstraints, StateScore

__all__ = [
    "ConstraintBase",
    "HardConstraints",
    "SoftConstraints",
    "StateScore",
]
