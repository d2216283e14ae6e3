"""Dose confirmation."""

from collections.abc import Callable
from datetime import UTC, datetime
from uuid import uuid4

from medimate.domain.medications import IntakeRecord, IntakeStatus


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return str(uuid4())


def confirm_dose(
    medication_id: str,
    scheduled_time: str | None,
    now: datetime | None = None,
    id_factory: Callable[[], str] = new_id,
) -> IntakeRecord:
    """Create a taken record for a medication slot.

    No deduplication is done: confirming the same slot twice yields two
    records.
    """
    current = now or datetime.now(tz=UTC)
    return IntakeRecord(
        id=id_factory(),
        medication_id=medication_id,
        taken_at=current.astimezone(UTC).isoformat(),
        status=IntakeStatus.TAKEN,
        scheduled_time=scheduled_time,
    )
