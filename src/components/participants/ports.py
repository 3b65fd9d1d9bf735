"""
Participants component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import Participant

from .models import AddParticipantInput, ParticipantValidationError


class ParticipantStorePort(Protocol):
    """Ordered in-memory participant store."""

    def add(
        self, candidate: AddParticipantInput
    ) -> tuple[Participant | None, list[ParticipantValidationError]]:
        """Validate and append."""
        ...

    def remove(self, index: int) -> bool:
        """Remove by position; False if out of range."""
        ...

    def get_all(self) -> tuple[Participant, ...]:
        """Current participants in insertion order."""
        ...
