"""Projection of daily medication schedules."""

from collections.abc import Iterable
from datetime import UTC, datetime

from medimate.domain.medications import IntakeRecord, Medication, ScheduledInstance


def today_string(now: datetime | None = None) -> str:
    """Return the UTC calendar date as ``YYYY-MM-DD``."""
    current = now or datetime.now(tz=UTC)
    return current.astimezone(UTC).date().isoformat()


def project_schedule(
    medications: Iterable[Medication],
    records: Iterable[IntakeRecord],
    today: str,
) -> list[ScheduledInstance]:
    """Return today's dose instances ordered by time of day.

    A slot is taken when any record for the same medication and scheduled
    time was logged on ``today``. Dates are compared as the literal prefix of
    ``taken_at`` before the first ``T``; no timezone conversion happens here.
    """
    taken_slots = {
        (record.medication_id, record.scheduled_time)
        for record in records
        if record.scheduled_time is not None and record.taken_on == today
    }
    instances = [
        ScheduledInstance(
            medication=medication,
            time=time,
            taken=(medication.id, time) in taken_slots,
        )
        for medication in medications
        for time in medication.times
    ]
    # sorted() is stable, so equal times keep medication order.
    return sorted(instances, key=lambda instance: instance.time)
