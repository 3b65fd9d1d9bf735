from dataclasses import dataclass, field

from src.components.meeting_cost import (
    CalculateCostInput,
    MeetingCostOutput,
    run_calculate,
)
from src.components.participants import (
    AddParticipantInput,
    ParticipantOperationOutput,
    ParticipantStore,
    RemoveParticipantInput,
    run_add,
    run_remove,
)
from src.domain.coerce import to_number
from src.domain.entities import MeetingState
from src.rules.models import Rules, default_rules


@dataclass
class AppState:
    """Form state owned by one page session."""

    rules: Rules = field(default_factory=default_rules)
    store: ParticipantStore = field(init=False)
    duration_minutes: float = field(init=False)
    pending_name: str = ""
    pending_salary: float = 0.0
    form_errors: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.store = ParticipantStore(self.rules.validation)
        self.duration_minutes = self.rules.cost_model.default_duration_minutes

    # --- Inputs ---

    def set_duration(self, text: str | None) -> None:
        self.duration_minutes = to_number(text)

    def set_pending_name(self, text: str | None) -> None:
        self.pending_name = text or ""

    def set_pending_salary(self, text: str | None) -> None:
        self.pending_salary = to_number(text)

    # --- Actions ---

    def add_participant(self) -> ParticipantOperationOutput:
        result = run_add(
            AddParticipantInput(name=self.pending_name, salary=self.pending_salary),
            self.store,
        )
        if result.success:
            self.pending_name = ""
            self.pending_salary = 0.0
            self.form_errors = []
        else:
            self.form_errors = result.messages
        return result

    def remove_participant(self, index: int) -> ParticipantOperationOutput:
        return run_remove(RemoveParticipantInput(index=index), self.store)

    # --- Derived ---

    @property
    def meeting(self) -> MeetingState:
        return MeetingState(
            participants=self.store.get_all(),
            duration_minutes=self.duration_minutes,
        )

    def summary(self) -> MeetingCostOutput:
        return run_calculate(
            CalculateCostInput(
                participants=self.store.get_all(),
                duration_minutes=self.duration_minutes,
            ),
            self.rules.cost_model,
        )
