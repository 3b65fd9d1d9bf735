"""
Participants component - Validated, ordered meeting participants.
"""

from ._impl import ParticipantStore, validate_participant
from .component import run_add, run_list, run_remove
from .models import (
    AddParticipantInput,
    ParticipantListOutput,
    ParticipantOperationOutput,
    ParticipantValidationError,
    RemoveParticipantInput,
)
from .ports import ParticipantStorePort

__all__ = [
    # Entry points
    "run_add",
    "run_remove",
    "run_list",
    # Input models
    "AddParticipantInput",
    "RemoveParticipantInput",
    # Output models
    "ParticipantOperationOutput",
    "ParticipantListOutput",
    "ParticipantValidationError",
    # Ports
    "ParticipantStorePort",
    # Service
    "ParticipantStore",
    "validate_participant",
]
