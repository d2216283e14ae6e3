"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from medimate.config import Settings
from medimate.containers import AppContainer
from medimate.domain.medications import (
    AppState,
    FrequencyType,
    IntakeRecord,
    IntakeStatus,
    Medication,
)
from medimate.services.parser import MedicationParserService, TextModelClient
from medimate.services.state import MedicationController
from medimate.services.storage import KeyValueStore, StateRepository
from medimate.services.tips import TipService


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed key-value store for tests."""

    values: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


@dataclass
class InMemoryStateRepository(StateRepository):
    """State repository that remembers every save."""

    stored: AppState = field(default_factory=AppState)
    saves: list[AppState] = field(default_factory=list)

    def load(self) -> AppState:
        return self.stored

    def save(self, state: AppState) -> None:
        self.stored = state
        self.saves.append(state)


@dataclass
class FakeTextClient(TextModelClient):
    """Fake text client returning fixed payloads."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "name": "Paracetamol",
            "dosage": "1 tablet",
            "instructions": "Take after food",
            "times": ["08:30", "22:00"],
        }
    )
    tip: str = "Drink water with your pills."
    error: Exception | None = None
    prompts: list[str] = field(default_factory=list)

    async def extract(
        self,
        *,
        model: str,
        store: bool,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.payload

    async def complete(self, *, model: str, store: bool, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.tip


def make_medication(
    med_id: str = "m1",
    times: tuple[str, ...] = ("08:00", "20:00"),
    name: str = "Metformin",
) -> Medication:
    return Medication(
        id=med_id,
        name=name,
        dosage="500mg",
        instructions="With meals",
        frequency=FrequencyType.DAILY,
        times=times,
    )


def make_record(
    medication_id: str = "m1",
    scheduled_time: str | None = "08:00",
    taken_at: str = "2024-01-01T08:05:00Z",
    record_id: str = "r1",
    status: IntakeStatus = IntakeStatus.TAKEN,
) -> IntakeRecord:
    return IntakeRecord(
        id=record_id,
        medication_id=medication_id,
        taken_at=taken_at,
        status=status,
        scheduled_time=scheduled_time,
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        openai_api_key="openai-key",
        data_path=tmp_path / "medimate.json",
    )


@pytest.fixture
def text_client() -> FakeTextClient:
    return FakeTextClient()


@pytest.fixture
def state_repository() -> InMemoryStateRepository:
    return InMemoryStateRepository()


@pytest.fixture
def container(
    settings: Settings,
    text_client: FakeTextClient,
    state_repository: InMemoryStateRepository,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        controller=MedicationController(state_repository),
        parser_service=MedicationParserService(
            client=text_client, model=settings.openai_model
        ),
        tip_service=TipService(client=text_client, model=settings.openai_model),
        close_resources=close_resources,
    )
