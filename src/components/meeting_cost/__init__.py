"""
Meeting cost component - Per-minute salary costing of a meeting.
"""

from ._money import format_currency
from .component import (
    individual_cost,
    per_minute_rate,
    run_calculate,
    total_meeting_cost,
    total_salary,
)
from .models import CalculateCostInput, CostLine, MeetingCostOutput

__all__ = [
    # Entry points
    "run_calculate",
    # Pure functions
    "per_minute_rate",
    "individual_cost",
    "total_salary",
    "total_meeting_cost",
    "format_currency",
    # Models
    "CalculateCostInput",
    "CostLine",
    "MeetingCostOutput",
]
