"""Inbound prompt pair submitted by the browser client."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class PromptPair(BaseModel):
    """Validated prompts for one generation request.

    Field names follow the JSON body the client posts.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    userPrompt: StrictStr = Field(..., min_length=1)
    systemPrompt: StrictStr = Field(..., min_length=1)

    def to_payload(self) -> dict:
        """Build the generateContent request body."""
        return {
            "contents": [{"parts": [{"text": self.userPrompt}]}],
            "systemInstruction": {"parts": [{"text": self.systemPrompt}]},
        }
