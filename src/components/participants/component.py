"""
Participants component - Meeting participant management.

Handles adding (with validation) and removing participants.

Shell Layer - converts service results into output models.
"""

from __future__ import annotations

from .models import (
    AddParticipantInput,
    ParticipantListOutput,
    ParticipantOperationOutput,
    RemoveParticipantInput,
)
from .ports import ParticipantStorePort

# --- Shell Layer Functions ---


def run_add(
    input_data: AddParticipantInput,
    store: ParticipantStorePort,
) -> ParticipantOperationOutput:
    """Validate and append a participant."""
    participant, errors = store.add(input_data)

    return ParticipantOperationOutput(
        participants=store.get_all(),
        participant=participant,
        errors=tuple(errors),
        success=participant is not None,
    )


def run_remove(
    input_data: RemoveParticipantInput,
    store: ParticipantStorePort,
) -> ParticipantOperationOutput:
    """Remove a participant by index. Out-of-range indices are a no-op."""
    removed = store.remove(input_data.index)

    return ParticipantOperationOutput(
        participants=store.get_all(),
        participant=None,
        errors=(),
        success=removed,
    )


def run_list(store: ParticipantStorePort) -> ParticipantListOutput:
    """List participants in insertion order."""
    participants = store.get_all()
    return ParticipantListOutput(
        participants=participants,
        total=len(participants),
    )
