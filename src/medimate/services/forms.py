"""Medication creation form state."""

from collections.abc import Callable
from dataclasses import dataclass, replace

from medimate.domain.medications import (
    DEFAULT_COLORS,
    DEFAULT_ICON,
    FrequencyType,
    Medication,
)
from medimate.domain.parsing import MedicationDraft, is_valid_time
from medimate.errors import InvalidMedicationError
from medimate.services.intake import new_id

DEFAULT_TIME = "08:00"


@dataclass(frozen=True)
class MedicationForm:
    """Values entered for a new medication, manually or from a draft."""

    name: str = ""
    dosage: str = ""
    instructions: str = ""
    times: tuple[str, ...] = (DEFAULT_TIME,)
    color: str = DEFAULT_COLORS[0]

    def add_time_slot(self) -> "MedicationForm":
        """Append a default time slot."""
        return replace(self, times=(*self.times, DEFAULT_TIME))

    def remove_time_slot(self, index: int) -> "MedicationForm":
        """Drop the time slot at ``index``."""
        return replace(
            self, times=tuple(t for i, t in enumerate(self.times) if i != index)
        )

    def update_time_slot(self, index: int, value: str) -> "MedicationForm":
        """Replace the time slot at ``index``."""
        times = list(self.times)
        times[index] = value
        return replace(self, times=tuple(times))

    def with_color(self, color: str) -> "MedicationForm":
        """Select a display color."""
        return replace(self, color=color)

    def apply_draft(self, draft: MedicationDraft) -> "MedicationForm":
        """Merge a parsed draft; times are kept when the draft has none."""
        return replace(
            self,
            name=draft.name,
            dosage=draft.dosage,
            instructions=draft.instructions,
            times=tuple(draft.times) if draft.times else self.times,
        )

    def build(self, id_factory: Callable[[], str] = new_id) -> Medication:
        """Create a daily medication from the form."""
        if not self.name.strip():
            raise InvalidMedicationError("Medication name is required")
        invalid = [time for time in self.times if not is_valid_time(time)]
        if invalid:
            raise InvalidMedicationError(f"Times must be HH:mm, got {invalid}")
        return Medication(
            id=id_factory(),
            name=self.name,
            dosage=self.dosage,
            instructions=self.instructions,
            frequency=FrequencyType.DAILY,
            times=self.times,
            color=self.color,
            icon=DEFAULT_ICON,
        )
