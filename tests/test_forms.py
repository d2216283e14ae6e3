"""Tests for the medication form."""

import pytest

from medimate.domain.medications import DEFAULT_COLORS, FrequencyType
from medimate.domain.parsing import MedicationDraft
from medimate.errors import InvalidMedicationError
from medimate.services.forms import MedicationForm
from medimate.services.schedule import project_schedule


def test_form_defaults() -> None:
    form = MedicationForm()

    assert form.times == ("08:00",)
    assert form.color == DEFAULT_COLORS[0]


def test_time_slot_editing() -> None:
    form = MedicationForm().add_time_slot().update_time_slot(1, "21:00")

    assert form.times == ("08:00", "21:00")
    assert form.remove_time_slot(0).times == ("21:00",)


def test_apply_draft_replaces_fields() -> None:
    draft = MedicationDraft(
        name="Amoxicillin",
        dosage="500mg",
        instructions="Before food",
        times=["07:00", "19:00"],
    )

    form = MedicationForm().apply_draft(draft)

    assert form.name == "Amoxicillin"
    assert form.dosage == "500mg"
    assert form.instructions == "Before food"
    assert form.times == ("07:00", "19:00")


def test_apply_draft_keeps_times_when_draft_has_none() -> None:
    draft = MedicationDraft(name="Vitamin C", dosage="1", instructions="", times=[])

    form = MedicationForm(times=("10:00",)).apply_draft(draft)

    assert form.times == ("10:00",)


def test_build_creates_daily_medication() -> None:
    form = MedicationForm(name="Aspirin", dosage="81mg").with_color("#EF4444")

    medication = form.build(id_factory=lambda: "med-1")

    assert medication.id == "med-1"
    assert medication.frequency is FrequencyType.DAILY
    assert medication.times == ("08:00",)
    assert medication.color == "#EF4444"
    assert medication.icon == "pill"


def test_build_requires_name() -> None:
    with pytest.raises(InvalidMedicationError):
        MedicationForm(name="  ").build()


def test_build_rejects_unpadded_times() -> None:
    form = (
        MedicationForm(name="Aspirin")
        .update_time_slot(0, "9:00")
        .add_time_slot()
        .update_time_slot(1, "10:00")
    )

    with pytest.raises(InvalidMedicationError):
        form.build()


def test_built_times_sort_chronologically() -> None:
    form = (
        MedicationForm(name="Aspirin")
        .update_time_slot(0, "10:00")
        .add_time_slot()
        .update_time_slot(1, "09:00")
    )

    schedule = project_schedule([form.build()], [], "2024-01-01")

    assert [item.time for item in schedule] == ["09:00", "10:00"]
