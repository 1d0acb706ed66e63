"""OpenAI Responses API client for label text recognition."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from calorie_hunter.services.label_scan import TextRecognizer

LABEL_TEXT_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "lines": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["lines"],
    "additionalProperties": False,
}

LABEL_TEXT_PROMPT = (
    "Transcribe the nutrition facts label in the image. "
    "Return every printed line top to bottom exactly as written, "
    "one entry per line, without translating or correcting values."
)


@dataclass
class OpenAITextRecognizer(TextRecognizer):
    """Text recognizer backed by OpenAI Responses API."""

    client: AsyncOpenAI
    model: str
    store: bool = False

    @classmethod
    def create(
        cls, api_key: str, model: str, store: bool = False
    ) -> "OpenAITextRecognizer":
        """Create an OpenAI text recognizer."""
        return cls(client=AsyncOpenAI(api_key=api_key), model=model, store=store)

    async def recognize_lines(self, image_data_url: str) -> list[str]:
        """Call OpenAI Responses API and return the transcribed lines."""
        response = await self.client.responses.create(
            model=self.model,
            input=[
                {
                    "role": "user",
                    "content": [
                        {"type": "input_text", "text": LABEL_TEXT_PROMPT},
                        {"type": "input_image", "image_url": image_data_url},
                    ],
                }
            ],
            text={
                "format": {
                    "type": "json_schema",
                    "name": "label_text",
                    "strict": True,
                    "schema": LABEL_TEXT_SCHEMA,
                }
            },
            store=self.store,
        )
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        payload = json.loads(output_text)
        return [str(line) for line in payload.get("lines", [])]

    async def close(self) -> None:
        """Close the underlying OpenAI client."""
        await self.client.close()
