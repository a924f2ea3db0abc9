from .prompt_pair import PromptPair

__all__ = ["PromptPair"]
