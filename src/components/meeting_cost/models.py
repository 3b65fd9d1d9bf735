"""
Meeting cost component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import Participant


@dataclass(frozen=True)
class CalculateCostInput:
    """Input for costing a meeting."""

    participants: tuple[Participant, ...]
    duration_minutes: float


@dataclass(frozen=True)
class CostLine:
    """Per-participant row. Values are raw numbers, not display strings."""

    index: int
    name: str
    salary: float
    cost: float


@dataclass(frozen=True)
class MeetingCostOutput:
    """Output from cost calculation."""

    lines: tuple[CostLine, ...]
    total_salary: float
    total_cost: float
    duration_minutes: float
