"""Core data schema for rehabilitation sessions."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Session:
    """Normalized session record used by all modules."""

    id: int
    hash: Optional[str]
    reaction_time: float
    violated: bool
    date: str


@dataclass(frozen=True)
class QuantileSummary:
    """Five-number summary of reaction times."""

    min: float
    q1: float
    median: float
    q3: float
    max: float


@dataclass(frozen=True)
class AggregateBucket:
    """Per-label rollup of reaction time and violations."""

    label: str
    average_reaction_time: float
    violation_count: int
