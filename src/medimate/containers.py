"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from medimate.adapters.json_file_store import JsonFileStore
from medimate.adapters.key_value_state_repository import KeyValueStateRepository
from medimate.adapters.openai_text_client import OpenAITextClient
from medimate.app_logging import configure_logging
from medimate.config import Settings
from medimate.services.parser import MedicationParserService
from medimate.services.state import MedicationController
from medimate.services.tips import TipService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    controller: MedicationController
    parser_service: MedicationParserService
    tip_service: TipService
    close_resources: Callable[[], Awaitable[None]]

    @property
    def ai_enabled(self) -> bool:
        """True when parsing and tips can reach the model."""
        return self.parser_service.client is not None


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container and load stored state."""
    configure_logging()
    resolved_settings = settings or Settings()
    repository = KeyValueStateRepository(JsonFileStore(resolved_settings.data_path))
    controller = MedicationController(repository)
    controller.load()

    text_client: OpenAITextClient | None = None
    if resolved_settings.ai_enabled:
        text_client = OpenAITextClient.create(resolved_settings.openai_api_key or "")
    else:
        _logger.error("OpenAI API key is missing, AI features are disabled")

    parser_service = MedicationParserService(
        client=text_client,
        model=resolved_settings.openai_model,
        store=resolved_settings.openai_store,
    )
    tip_service = TipService(
        client=text_client,
        model=resolved_settings.openai_model,
        store=resolved_settings.openai_store,
    )

    async def close_resources() -> None:
        if text_client is not None:
            await text_client.close()

    return AppContainer(
        settings=resolved_settings,
        controller=controller,
        parser_service=parser_service,
        tip_service=tip_service,
        close_resources=close_resources,
    )
