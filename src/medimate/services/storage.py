"""Persistence interfaces."""

from typing import Protocol

from medimate.domain.medications import AppState

MEDICATIONS_KEY = "medications"
INTAKE_RECORDS_KEY = "intakeRecords"


class KeyValueStore(Protocol):
    """Interface for storing opaque string blobs by key."""

    def get(self, key: str) -> str | None:
        """Return the stored value, if present."""

    def set(self, key: str, value: str) -> None:
        """Store a value under a key."""


class StateRepository(Protocol):
    """Persistence interface for the application state."""

    def load(self) -> AppState:
        """Return the stored state, or an empty one."""

    def save(self, state: AppState) -> None:
        """Persist the full state."""
