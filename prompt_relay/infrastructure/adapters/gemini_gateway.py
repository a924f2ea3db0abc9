from typing import Any

import httpx
import structlog

from ...domain.ports import GenerationError, GenerationGateway
from ...domain.value_objects import PromptPair
from ..logging import Timer

logger = structlog.get_logger()

# candidates[0].content.parts[0].text
TEXT_PATH: tuple[str | int, ...] = ("candidates", 0, "content", "parts", 0, "text")


def _lookup(data: Any, path: tuple[str | int, ...]) -> Any | None:
    """Follow a key/index path through decoded JSON, returning None when any step is missing."""
    current = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return None
        elif not isinstance(current, dict) or step not in current:
            return None
        current = current[step]
    return current


def extract_text(data: Any) -> str | None:
    """Return the first candidate's text, or None if the response has no usable text."""
    text = _lookup(data, TEXT_PATH)
    if isinstance(text, str) and text:
        return text
    return None


class GeminiGateway(GenerationGateway):
    """Google Gemini generateContent API gateway."""

    def __init__(
        self,
        api_key: str,
        url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._url = url
        self._timeout = timeout
        self._transport = transport

    async def generate(self, prompts: PromptPair) -> str:
        """Send the prompt pair to Gemini and return the generated text."""
        headers = {"Content-Type": "application/json"}
        params = {"key": self._api_key}

        with Timer() as t:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(
                    self._url,
                    params=params,
                    headers=headers,
                    json=prompts.to_payload(),
                )

        if not response.is_success:
            raise GenerationError(
                f"Google API error! status: {response.status_code}, body: {response.text}"
            )

        try:
            data = response.json()
        except ValueError:
            data = None

        text = extract_text(data)
        if text is None:
            raise GenerationError("Invalid response structure from Google API.")

        logger.info(
            "Gemini generation completed",
            status_code=response.status_code,
            duration_ms=t.duration_ms,
            text_length=len(text),
        )
        return text
