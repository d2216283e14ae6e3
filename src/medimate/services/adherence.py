"""Adherence statistics over the intake log."""

from collections.abc import Callable, Iterable, Sequence

from medimate.domain.medications import (
    AdherenceStats,
    IntakeRecord,
    IntakeStatus,
    Medication,
    RecentIntake,
)

RecordPredicate = Callable[[IntakeRecord], bool]


def counts_every_record(record: IntakeRecord) -> bool:
    """Count all records, skipped ones included."""
    return True


def counts_taken_only(record: IntakeRecord) -> bool:
    """Count only records marked as taken."""
    return record.status == IntakeStatus.TAKEN


def aggregate_adherence(
    records: Iterable[IntakeRecord],
    counts: RecordPredicate = counts_every_record,
) -> AdherenceStats:
    """Return total counted doses and the number of distinct active days."""
    total = 0
    days: set[str] = set()
    for record in records:
        if counts(record):
            total += 1
        days.add(record.taken_on)
    return AdherenceStats(total_taken=total, active_days=len(days))


def recent_intakes(
    records: Sequence[IntakeRecord],
    medications: Iterable[Medication],
    limit: int = 10,
) -> list[RecentIntake]:
    """Return the latest records, newest first, paired with their medication.

    Records pointing at a medication that no longer exists are left out of
    the listing.
    """
    by_id = {medication.id: medication for medication in medications}
    recent = []
    for record in list(reversed(records))[:limit]:
        medication = by_id.get(record.medication_id)
        if medication is None:
            continue
        recent.append(RecentIntake(record=record, medication=medication))
    return recent
