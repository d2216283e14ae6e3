"""Models for free-form medication parsing results."""

import re

from pydantic import BaseModel, field_validator

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def is_valid_time(value: str) -> bool:
    """Return True for zero-padded 24-hour ``HH:mm`` strings."""
    return bool(_TIME_PATTERN.match(value))


class MedicationDraft(BaseModel):
    """Structured output for medication parsing."""

    name: str
    dosage: str
    instructions: str
    times: list[str]

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("name must not be blank")
        return cleaned

    @field_validator("times")
    @classmethod
    def _times_are_hh_mm(cls, value: list[str]) -> list[str]:
        cleaned = [item.strip() for item in value]
        invalid = [item for item in cleaned if not is_valid_time(item)]
        if invalid:
            raise ValueError(f"times must be HH:mm, got {invalid}")
        return cleaned
