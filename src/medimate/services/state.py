"""Application state and its transitions."""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime

from medimate.domain.medications import (
    AdherenceStats,
    AppState,
    IntakeRecord,
    Medication,
    RecentIntake,
    ScheduledInstance,
)
from medimate.services.adherence import (
    RecordPredicate,
    aggregate_adherence,
    counts_every_record,
    recent_intakes,
)
from medimate.services.intake import confirm_dose
from medimate.services.schedule import project_schedule, today_string
from medimate.services.storage import StateRepository

_logger = logging.getLogger(__name__)


def add_medication(state: AppState, medication: Medication) -> AppState:
    """Return a new state with the medication appended."""
    return replace(state, medications=(*state.medications, medication))


def record_intake(state: AppState, record: IntakeRecord) -> AppState:
    """Return a new state with the record appended to the log."""
    return replace(state, records=(*state.records, record))


@dataclass
class MedicationController:
    """Owns the application state and persists it after each change."""

    repository: StateRepository
    counts: RecordPredicate = counts_every_record
    state: AppState = field(default_factory=AppState)

    def load(self) -> AppState:
        """Replace the current state with the stored one."""
        self.state = self.repository.load()
        _logger.info(
            "Loaded state: medications=%s records=%s",
            len(self.state.medications),
            len(self.state.records),
        )
        return self.state

    @property
    def medication_count(self) -> int:
        """Number of registered medications."""
        return len(self.state.medications)

    def add_medication(self, medication: Medication) -> AppState:
        """Register a medication."""
        return self._commit(add_medication(self.state, medication))

    def take_medication(
        self, medication_id: str, scheduled_time: str, now: datetime | None = None
    ) -> IntakeRecord:
        """Log a dose for a medication slot and return the new record."""
        record = confirm_dose(medication_id, scheduled_time, now=now)
        self._commit(record_intake(self.state, record))
        _logger.info(
            "Dose recorded: medication_id=%s scheduled_time=%s",
            medication_id,
            scheduled_time,
        )
        return record

    def today_schedule(self, today: str | None = None) -> list[ScheduledInstance]:
        """Return today's scheduled doses."""
        return project_schedule(
            self.state.medications, self.state.records, today or today_string()
        )

    def stats(self) -> AdherenceStats:
        """Return adherence stats for the whole log."""
        return aggregate_adherence(self.state.records, counts=self.counts)

    def recent_history(self, limit: int = 10) -> list[RecentIntake]:
        """Return the latest intake records with their medications."""
        return recent_intakes(self.state.records, self.state.medications, limit)

    def _commit(self, new_state: AppState) -> AppState:
        self.state = new_state
        self.repository.save(new_state)
        return new_state
