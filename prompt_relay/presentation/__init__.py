from .handler import PromptRelayHandler

__all__ = ["PromptRelayHandler"]
