"""
Participants component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import Participant

# --- Validation Errors ---


@dataclass(frozen=True)
class ParticipantValidationError:
    """Participant validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class AddParticipantInput:
    """Pending add-form contents. None means the field was not supplied."""

    name: str | None
    salary: float | None


@dataclass(frozen=True)
class RemoveParticipantInput:
    """Input for removing a participant by position."""

    index: int


# --- Output Models ---


@dataclass(frozen=True)
class ParticipantOperationOutput:
    """Output from a participant store operation."""

    participants: tuple[Participant, ...]
    participant: Participant | None
    errors: tuple[ParticipantValidationError, ...]
    success: bool

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.errors]


@dataclass(frozen=True)
class ParticipantListOutput:
    """Output from list operation."""

    participants: tuple[Participant, ...]
    total: int
