"""structlog setup for the relay: JSON lines on stdout, tagged per invocation."""

import logging
import sys
import time
from contextvars import ContextVar

import structlog

# Platform request id of the running invocation
correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")

REDACTED = "***"


def configure_logging(service_name: str, level: str = "INFO") -> None:
    """Route structlog through stdlib logging and render every event as JSON."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            invocation_context(service_name),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def invocation_context(service_name: str):
    """Processor tagging each event with the service and, once bound, the request id."""

    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        request_id = correlation_id.get()
        if request_id:
            event_dict["correlation_id"] = request_id
        return event_dict

    return processor


def set_correlation_id(cid: str) -> None:
    correlation_id.set(cid)


class Timer:
    """Wall-clock timer for the upstream round trip."""

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        self._end = self._start
        return self

    def __exit__(self, *args) -> None:
        self._end = time.perf_counter()

    @property
    def duration_ms(self) -> float:
        return round((self._end - self._start) * 1000, 2)


def redact_secret(text: str, secret: str) -> str:
    """
    Mask every occurrence of a secret in a message.

    Upstream error text can echo the request URL, which carries the API key
    as a query parameter.

    Args:
        text: Message to clean
        secret: Value to mask; an empty secret leaves the text unchanged

    Returns:
        The message with the secret replaced by ``REDACTED``
    """
    if not text or not secret:
        return text
    return text.replace(secret, REDACTED)
