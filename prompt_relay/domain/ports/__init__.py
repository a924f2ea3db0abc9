from .generation_gateway import GenerationError, GenerationGateway

__all__ = [
    "GenerationError",
    "GenerationGateway",
]
