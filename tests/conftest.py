import json

import pytest

from prompt_relay.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key="test-key", _env_file=None)


@pytest.fixture
def settings_without_key() -> Settings:
    return Settings(gemini_api_key="", _env_file=None)


@pytest.fixture
def prompt_body() -> dict:
    return {
        "userPrompt": "Ask me a behavioural interview question.",
        "systemPrompt": "You are a strict technical interviewer.",
    }


@pytest.fixture
def post_event(prompt_body) -> dict:
    return {"httpMethod": "POST", "body": json.dumps(prompt_body)}


@pytest.fixture
def gemini_success() -> dict:
    return {"candidates": [{"content": {"parts": [{"text": "hello"}]}}]}
