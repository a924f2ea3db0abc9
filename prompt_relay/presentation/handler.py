"""Prompt relay request handler.

Translates one inbound function event into one Gemini call and one response.
Guard checks run in a fixed order and short-circuit:

1. method must be POST (405)
2. the API key must be configured (500)
3. the body must be JSON (400)
4. both prompts must be present and non-empty (400)

Everything after the guards is a single recovery boundary: any failure from
the upstream call or its response parsing becomes a logged 500.
"""

import base64
import binascii
import json
from typing import Any

import structlog
from pydantic import ValidationError

from ..config import Settings
from ..domain.ports import GenerationGateway
from ..domain.value_objects import PromptPair
from ..infrastructure.adapters import GeminiGateway
from ..infrastructure.logging import redact_secret

logger = structlog.get_logger()

METHOD_NOT_ALLOWED = "Method Not Allowed"
API_KEY_NOT_SET = "API key is not set. Set GEMINI_API_KEY in the function environment variables."
INVALID_JSON = "Bad request: Invalid JSON."
MISSING_PROMPTS = "Bad request: Missing prompts."


class InvalidBodyError(ValueError):
    """Raised when the event body cannot be decoded as JSON."""


def json_response(status_code: int, payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(payload),
    }


def text_response(status_code: int, text: str, headers: dict[str, str] | None = None) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "text/plain", **(headers or {})},
        "body": text,
    }


def request_method(event: dict[str, Any]) -> str | None:
    """Read the HTTP method from a REST (v1) or HTTP API (v2) proxy event."""
    method = event.get("httpMethod")
    if method is not None:
        return method

    request_context = event.get("requestContext")
    if not isinstance(request_context, dict):
        return None
    http = request_context.get("http")
    if not isinstance(http, dict):
        return None
    return http.get("method")


def parse_body(event: dict[str, Any]) -> Any:
    """
    Decode the event body as JSON.

    Raises:
        InvalidBodyError: If the body is missing, not valid base64 when flagged
            as encoded, or not valid JSON
    """
    body = event.get("body")
    if body is None:
        raise InvalidBodyError("Request body is empty")

    try:
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body, validate=True).decode("utf-8")
        return json.loads(body)
    except (binascii.Error, UnicodeDecodeError, TypeError, ValueError) as e:
        raise InvalidBodyError(str(e)) from e


class PromptRelayHandler:
    """Relays a client prompt pair to the generation backend."""

    def __init__(self, settings: Settings, gateway: GenerationGateway | None = None) -> None:
        self._settings = settings
        self._gateway = gateway

    def _get_gateway(self) -> GenerationGateway:
        if self._gateway is None:
            self._gateway = GeminiGateway(
                api_key=self._settings.gemini_api_key,
                url=self._settings.gemini_generate_url,
                timeout=self._settings.gemini_timeout_seconds,
            )
        return self._gateway

    async def handle(self, event: dict[str, Any]) -> dict[str, Any]:
        """Handle one function invocation and return a proxy response."""
        if request_method(event) != "POST":
            return text_response(405, METHOD_NOT_ALLOWED, headers={"Allow": "POST"})

        api_key = self._settings.gemini_api_key
        if not api_key:
            return json_response(500, {"error": API_KEY_NOT_SET})

        try:
            data = parse_body(event)
        except InvalidBodyError:
            return json_response(400, {"error": INVALID_JSON})

        try:
            prompts = PromptPair.model_validate(data)
        except ValidationError:
            return json_response(400, {"error": MISSING_PROMPTS})

        try:
            text = await self._get_gateway().generate(prompts)
        except Exception as e:
            message = redact_secret(str(e) or type(e).__name__, api_key)
            logger.error("Function error", error=message, error_type=type(e).__name__)
            return json_response(500, {"error": message})

        return json_response(200, {"text": text})
