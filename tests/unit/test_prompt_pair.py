import pytest
from pydantic import ValidationError

from prompt_relay.domain.value_objects import PromptPair


class TestPromptPair:
    def test_valid_prompts(self):
        prompts = PromptPair.model_validate({"userPrompt": "Hi", "systemPrompt": "Be brief"})

        assert prompts.userPrompt == "Hi"
        assert prompts.systemPrompt == "Be brief"

    @pytest.mark.parametrize(
        "body",
        [
            {"systemPrompt": "Be brief"},
            {"userPrompt": "Hi"},
            {"userPrompt": "", "systemPrompt": "Be brief"},
            {"userPrompt": "Hi", "systemPrompt": ""},
            {"userPrompt": None, "systemPrompt": "Be brief"},
            {"userPrompt": 42, "systemPrompt": "Be brief"},
        ],
    )
    def test_missing_or_empty_prompts_rejected(self, body):
        with pytest.raises(ValidationError):
            PromptPair.model_validate(body)

    def test_non_object_rejected(self):
        with pytest.raises(ValidationError):
            PromptPair.model_validate(["Hi", "Be brief"])

    def test_extra_fields_ignored(self):
        prompts = PromptPair.model_validate(
            {"userPrompt": "Hi", "systemPrompt": "Be brief", "temperature": 0.2}
        )

        assert prompts.to_payload()["contents"][0]["parts"][0]["text"] == "Hi"

    def test_to_payload_shape(self):
        prompts = PromptPair(userPrompt="Hi", systemPrompt="Be brief")

        assert prompts.to_payload() == {
            "contents": [{"parts": [{"text": "Hi"}]}],
            "systemInstruction": {"parts": [{"text": "Be brief"}]},
        }

    def test_immutable(self):
        prompts = PromptPair(userPrompt="Hi", systemPrompt="Be brief")

        with pytest.raises(ValidationError):
            prompts.userPrompt = "changed"
