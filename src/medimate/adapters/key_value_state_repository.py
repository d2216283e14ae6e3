"""State repository that serializes collections into a key-value store."""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from medimate.domain.medications import (
    DEFAULT_COLORS,
    DEFAULT_ICON,
    AppState,
    FrequencyType,
    IntakeRecord,
    IntakeStatus,
    Medication,
)
from medimate.services.storage import (
    INTAKE_RECORDS_KEY,
    MEDICATIONS_KEY,
    KeyValueStore,
    StateRepository,
)

_logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class KeyValueStateRepository(StateRepository):
    """Persists medications and intake records as two JSON blobs."""

    store: KeyValueStore

    def load(self) -> AppState:
        """Return the stored state; unreadable rows are logged and skipped."""
        return AppState(
            medications=tuple(
                _convert_rows(self._load_rows(MEDICATIONS_KEY), _medication_from_row)
            ),
            records=tuple(
                _convert_rows(self._load_rows(INTAKE_RECORDS_KEY), _record_from_row)
            ),
        )

    def save(self, state: AppState) -> None:
        """Write both collections."""
        self.store.set(
            MEDICATIONS_KEY,
            json.dumps([_medication_to_row(m) for m in state.medications]),
        )
        self.store.set(
            INTAKE_RECORDS_KEY,
            json.dumps([_record_to_row(r) for r in state.records]),
        )

    def _load_rows(self, key: str) -> list[dict[str, object]]:
        raw = self.store.get(key)
        if not raw:
            return []
        try:
            rows = json.loads(raw)
        except json.JSONDecodeError:
            _logger.warning("Ignoring unreadable %s blob", key)
            return []
        if not isinstance(rows, list):
            _logger.warning("Ignoring %s blob that is not a list", key)
            return []
        return rows


def _convert_rows(
    rows: list[dict[str, object]], convert: Callable[[dict[str, object]], T]
) -> list[T]:
    converted = []
    for row in rows:
        try:
            converted.append(convert(row))
        except (AttributeError, KeyError, TypeError, ValueError):
            _logger.warning("Skipping malformed stored row: %r", row)
    return converted


def _medication_to_row(medication: Medication) -> dict[str, object]:
    return {
        "id": medication.id,
        "name": medication.name,
        "dosage": medication.dosage,
        "instructions": medication.instructions,
        "frequency": medication.frequency.value,
        "times": list(medication.times),
        "color": medication.color,
        "icon": medication.icon,
    }


def _medication_from_row(row: dict[str, object]) -> Medication:
    times = row.get("times") or []
    if not isinstance(times, list):
        raise TypeError(f"times must be a list, got {type(times).__name__}")
    return Medication(
        id=str(row["id"]),
        name=str(row["name"]),
        dosage=str(row.get("dosage", "")),
        instructions=str(row.get("instructions", "")),
        frequency=FrequencyType(row.get("frequency", FrequencyType.DAILY)),
        times=tuple(str(t) for t in times),
        color=str(row.get("color", DEFAULT_COLORS[0])),
        icon=str(row.get("icon", DEFAULT_ICON)),
    )


def _record_to_row(record: IntakeRecord) -> dict[str, object]:
    row: dict[str, object] = {
        "id": record.id,
        "medicationId": record.medication_id,
        "takenAt": record.taken_at,
        "status": record.status.value,
    }
    if record.scheduled_time is not None:
        row["scheduledTime"] = record.scheduled_time
    return row


def _record_from_row(row: dict[str, object]) -> IntakeRecord:
    scheduled_time = row.get("scheduledTime")
    return IntakeRecord(
        id=str(row["id"]),
        medication_id=str(row["medicationId"]),
        taken_at=str(row["takenAt"]),
        status=IntakeStatus(row.get("status", IntakeStatus.TAKEN)),
        scheduled_time=str(scheduled_time) if scheduled_time is not None else None,
    )
