"""Free-form medication parsing using LLMs."""

import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from medimate.domain.parsing import MedicationDraft
from medimate.errors import AIUnavailableError, MedicationParseError

_logger = logging.getLogger(__name__)

DRAFT_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "name": {"type": "string", "description": "Name of the medicine"},
        "dosage": {
            "type": "string",
            "description": "Amount to take (e.g. 1 tablet, 500mg)",
        },
        "times": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Array of times in HH:mm format",
        },
        "instructions": {
            "type": "string",
            "description": "Brief instructions (e.g. Take after food)",
        },
    },
    "required": ["name", "dosage", "times", "instructions"],
    "additionalProperties": False,
}


class TextModelClient(Protocol):
    """Interface for LLM text generation."""

    async def extract(
        self,
        *,
        model: str,
        store: bool,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Return structured data matching the schema."""

    async def complete(self, *, model: str, store: bool, prompt: str) -> str:
        """Return free text for the prompt."""


@dataclass
class MedicationParserService:
    """Service that turns free-form text into a medication draft."""

    client: TextModelClient | None
    model: str
    store: bool = False

    async def parse(self, text: str) -> MedicationDraft:
        """Extract medication details from Thai or English text."""
        if self.client is None:
            raise AIUnavailableError("OpenAI API key is not configured")
        cleaned = text.strip()
        if not cleaned:
            raise MedicationParseError("Nothing to parse")
        try:
            raw = await self.client.extract(
                model=self.model,
                store=self.store,
                schema=DRAFT_SCHEMA,
                prompt=_build_prompt(cleaned),
            )
        except Exception as exc:
            _logger.warning("Medication parsing request failed: %s", exc)
            raise MedicationParseError("Medication parsing request failed") from exc
        try:
            return MedicationDraft.model_validate(raw)
        except ValidationError as exc:
            _logger.warning("Medication parsing returned invalid payload: %s", exc)
            raise MedicationParseError(
                "Medication parsing returned invalid data"
            ) from exc


def _build_prompt(text: str) -> str:
    return (
        "Analyze the following medication instruction (in Thai or English) "
        "and extract the details into a structured JSON format.\n"
        "Calculate specific times (HH:mm format) based on common practices "
        '(e.g., "Morning" = "08:00", "Before Bed" = "22:00", '
        '"After Breakfast" = "08:30").\n'
        "If strict times aren't provided, estimate sensible defaults.\n\n"
        f'Input text: "{text}"'
    )
