"""
ParticipantStore - Ordered list of validated meeting participants.

Functional Core - validation is pure; the store only swaps immutable tuples.
"""

from __future__ import annotations

import logging
import math
from numbers import Real

from src.domain.entities import Participant
from src.rules.models import ValidationRules

from .models import AddParticipantInput, ParticipantValidationError

logger = logging.getLogger(__name__)

# --- Validation Functions ---


def validate_participant(
    candidate: AddParticipantInput,
    rules: ValidationRules | None = None,
) -> list[ParticipantValidationError]:
    """
    Validate a pending participant.

    Every violated rule is reported. The name is checked for exact emptiness,
    so whitespace-only names pass.
    """
    rules = rules or ValidationRules()
    messages = rules.messages
    errors: list[ParticipantValidationError] = []

    if candidate.name is None or candidate.name == "":
        errors.append(
            ParticipantValidationError(
                code="name_required",
                message=messages.name_required,
                field="name",
            )
        )

    salary = candidate.salary
    if salary is None:
        errors.append(
            ParticipantValidationError(
                code="salary_required",
                message=messages.salary_required,
                field="salary",
            )
        )
    elif isinstance(salary, bool) or not isinstance(salary, Real) or math.isnan(salary):
        errors.append(
            ParticipantValidationError(
                code="salary_not_number",
                message=messages.salary_not_number,
                field="salary",
            )
        )
    else:
        if salary < 0:
            errors.append(
                ParticipantValidationError(
                    code="salary_negative",
                    message=messages.salary_negative,
                    field="salary",
                )
            )
        if salary < rules.min_salary:
            errors.append(
                ParticipantValidationError(
                    code="salary_too_small",
                    message=messages.salary_too_small,
                    field="salary",
                )
            )

    return errors


# --- Service ---


class ParticipantStore:
    """In-memory participant store owned by a single UI session."""

    def __init__(self, rules: ValidationRules | None = None) -> None:
        self.rules = rules or ValidationRules()
        self._participants: tuple[Participant, ...] = ()

    def add(
        self, candidate: AddParticipantInput
    ) -> tuple[Participant | None, list[ParticipantValidationError]]:
        errors = validate_participant(candidate, self.rules)
        if errors:
            codes = ", ".join(e.code for e in errors)
            logger.info(f"Rejected participant: {codes}")
            return None, errors

        # Validated above, so name and salary are set
        participant = Participant(name=candidate.name, salary=float(candidate.salary))  # type: ignore[arg-type]
        self._participants = (*self._participants, participant)
        logger.info(
            f"Added participant {participant.name!r} ({len(self._participants)} total)"
        )
        return participant, []

    def remove(self, index: int) -> bool:
        if not 0 <= index < len(self._participants):
            logger.debug(f"Ignoring remove at out-of-range index {index}")
            return False

        removed = self._participants[index]
        self._participants = tuple(
            p for i, p in enumerate(self._participants) if i != index
        )
        logger.info(f"Removed participant {removed.name!r} ({len(self._participants)} left)")
        return True

    def get_all(self) -> tuple[Participant, ...]:
        return self._participants

    def __len__(self) -> int:
        return len(self._participants)
