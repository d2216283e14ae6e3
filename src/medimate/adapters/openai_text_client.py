"""OpenAI Responses API client for text generation."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from medimate.services.parser import TextModelClient


@dataclass
class OpenAITextClient(TextModelClient):
    """Text client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAITextClient":
        """Create an OpenAI text client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def extract(
        self,
        *,
        model: str,
        store: bool,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Call OpenAI Responses API with structured outputs."""
        response = await self.client.responses.create(
            model=model,
            input=[{"role": "user", "content": prompt}],
            text={
                "format": {
                    "type": "json_schema",
                    "name": "medication_draft",
                    "strict": True,
                    "schema": schema,
                }
            },
            store=store,
        )
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return json.loads(output_text)

    async def complete(self, *, model: str, store: bool, prompt: str) -> str:
        """Return the plain text answer for a prompt."""
        response = await self.client.responses.create(
            model=model, input=prompt, store=store
        )
        return response.output_text or ""

    async def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        await self.client.close()
