"""Function entry point for serverless deployment."""

import asyncio
from uuid import uuid4

from .config import settings
from .infrastructure.logging import configure_logging, set_correlation_id
from .presentation import PromptRelayHandler

configure_logging(settings.service_name, settings.log_level)


def handler(event: dict, context) -> dict:
    """Lambda/Netlify handler for API Gateway proxy integration."""
    set_correlation_id(getattr(context, "aws_request_id", None) or str(uuid4()))
    return asyncio.run(PromptRelayHandler(settings).handle(event))
