from pydantic import BaseModel, ConfigDict, Field

# --- Meeting ---

class Participant(BaseModel):
    """A validated meeting participant. Never mutated after creation."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    salary: float  # Annual


class MeetingState(BaseModel):
    participants: tuple[Participant, ...] = ()
    duration_minutes: float = 60  # Unvalidated: may be negative or NaN
