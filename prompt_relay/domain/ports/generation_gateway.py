"""
Outbound port for text generation.

The relay depends on this abstraction; the Gemini HTTP client is one adapter.
"""

from abc import ABC, abstractmethod

from ..value_objects import PromptPair


class GenerationError(Exception):
    """Raised when the upstream service fails or answers with an unusable body."""


class GenerationGateway(ABC):
    """Port for a generative-language backend."""

    @abstractmethod
    async def generate(self, prompts: PromptPair) -> str:
        """
        Generate text for a prompt pair.

        Args:
            prompts: Validated user and system prompts

        Returns:
            The generated text

        Raises:
            GenerationError: On a non-success status or unexpected response shape
        """
        ...
