"""Domain models for medications and intake records."""

from dataclasses import dataclass, field
from enum import StrEnum

DEFAULT_COLORS = (
    "#3B82F6",
    "#10B981",
    "#F59E0B",
    "#EF4444",
    "#8B5CF6",
    "#EC4899",
)
DEFAULT_ICON = "pill"


class FrequencyType(StrEnum):
    """How often a medication is taken."""

    DAILY = "DAILY"
    AS_NEEDED = "AS_NEEDED"
    INTERVAL = "INTERVAL"


class IntakeStatus(StrEnum):
    """Outcome of a single dose."""

    TAKEN = "taken"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class Medication:
    """A user-registered drug with daily dosing times."""

    id: str
    name: str
    dosage: str
    instructions: str
    frequency: FrequencyType
    times: tuple[str, ...]
    color: str = DEFAULT_COLORS[0]
    icon: str = DEFAULT_ICON


@dataclass(frozen=True)
class IntakeRecord:
    """Append-only log entry for one dose event."""

    id: str
    medication_id: str
    taken_at: str
    status: IntakeStatus
    scheduled_time: str | None = None

    @property
    def taken_on(self) -> str:
        """Date portion of the ISO timestamp, before the first ``T``."""
        return self.taken_at.split("T", 1)[0]


@dataclass(frozen=True)
class ScheduledInstance:
    """A medication time slot for a given day."""

    medication: Medication
    time: str
    taken: bool


@dataclass(frozen=True)
class AdherenceStats:
    """Summary counts over the intake log."""

    total_taken: int
    active_days: int


@dataclass(frozen=True)
class RecentIntake:
    """Intake record paired with the medication it refers to."""

    record: IntakeRecord
    medication: Medication


@dataclass(frozen=True)
class AppState:
    """Snapshot of everything the user has entered."""

    medications: tuple[Medication, ...] = field(default_factory=tuple)
    records: tuple[IntakeRecord, ...] = field(default_factory=tuple)
