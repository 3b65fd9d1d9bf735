"""
Meeting cost component - Salary to meeting cost conversion.

Functional Core - every function here is pure; results depend only on the
arguments and the cost model constants.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from functools import lru_cache

from src.domain.entities import Participant
from src.rules.models import CostModelRules

from .models import CalculateCostInput, CostLine, MeetingCostOutput

DEFAULT_COST_MODEL = CostModelRules()


def per_minute_rate(salary: float, model: CostModelRules = DEFAULT_COST_MODEL) -> float:
    """Annual salary spread over working weeks, hours and minutes."""
    return salary / model.weeks_per_year / model.hours_per_week / model.minutes_per_hour


def individual_cost(
    salary: float,
    duration_minutes: float,
    model: CostModelRules = DEFAULT_COST_MODEL,
) -> float:
    return per_minute_rate(salary, model) * duration_minutes


def total_salary(participants: Iterable[Participant]) -> float:
    return sum((p.salary for p in participants), 0.0)


def total_meeting_cost(
    participants: Iterable[Participant],
    duration_minutes: float,
    model: CostModelRules = DEFAULT_COST_MODEL,
) -> float:
    return sum(
        (individual_cost(p.salary, duration_minutes, model) for p in participants),
        0.0,
    )


@lru_cache(maxsize=64)
def _calculate(
    participants: tuple[Participant, ...],
    duration_minutes: float,
    duration_sign: float,
    weeks_per_year: float,
    hours_per_week: float,
    minutes_per_hour: float,
) -> MeetingCostOutput:
    model = CostModelRules(
        weeks_per_year=weeks_per_year,
        hours_per_week=hours_per_week,
        minutes_per_hour=minutes_per_hour,
    )
    lines = tuple(
        CostLine(
            index=i,
            name=p.name,
            salary=p.salary,
            cost=individual_cost(p.salary, duration_minutes, model),
        )
        for i, p in enumerate(participants)
    )
    return MeetingCostOutput(
        lines=lines,
        total_salary=total_salary(participants),
        total_cost=total_meeting_cost(participants, duration_minutes, model),
        duration_minutes=duration_minutes,
    )


def run_calculate(
    input_data: CalculateCostInput,
    model: CostModelRules = DEFAULT_COST_MODEL,
) -> MeetingCostOutput:
    """Cost every participant and the meeting as a whole."""
    return _calculate(
        tuple(input_data.participants),
        input_data.duration_minutes,
        # -0.0 == 0.0 as a cache key, but the sign shows in the result
        math.copysign(1.0, input_data.duration_minutes),
        model.weeks_per_year,
        model.hours_per_week,
        model.minutes_per_hour,
    )
