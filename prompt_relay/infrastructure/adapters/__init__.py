from .gemini_gateway import GeminiGateway, extract_text

__all__ = [
    "GeminiGateway",
    "extract_text",
]
