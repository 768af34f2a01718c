"""Structured Logging for the Case Messenger Backend

- Colored, human-readable dev output
- JSON structured production output
- Request correlation IDs bound through contextvars
- Domain loggers (api, engine, session, content)
"""
import logging
import sys
from functools import lru_cache
from uuid import uuid4

import structlog
from structlog.types import EventDict, Processor

SERVICE_NAME = "case-messenger"
SERVICE_VERSION = "0.1.0"


def _add_service_info(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor that adds service metadata."""
    event_dict.setdefault("service", SERVICE_NAME)
    event_dict.setdefault("version", SERVICE_VERSION)
    return event_dict


def _stringify_tokens(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Render token sequences (words, inflected words) as their surface strings."""
    for key, value in event_dict.items():
        if isinstance(value, (list, tuple)) and value and all(hasattr(v, "value") for v in value):
            event_dict[key] = [str(v.value) for v in value]
    return event_dict


def get_shared_processors() -> list[Processor]:
    """Processors used in both dev and prod configurations."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_service_info,
        _stringify_tokens,
    ]


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Configure the logging system.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output JSON format (for production). If False, colored console output.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors = get_shared_processors()

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )

    # Formatter for stdlib logger (handles logs from uvicorn and friends)
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(log_level)

    for logger_name in ["uvicorn", "uvicorn.error"]:
        logging.getLogger(logger_name).handlers = []

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ from the calling module)
    """
    return structlog.get_logger(name)


def generate_correlation_id() -> str:
    """Generate a short correlation ID for request tracing."""
    return str(uuid4())[:8]


def bind_context(**kwargs) -> None:
    """Bind key-value pairs to the current logging context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


DOMAINS = ("api", "engine", "session", "content")


@lru_cache(maxsize=None)
def domain_logger(domain: str) -> structlog.stdlib.BoundLogger:
    """Logger for one application domain, named case_messenger.<domain>."""
    if domain not in DOMAINS:
        raise ValueError(f"Unknown logging domain '{domain}', expected one of {', '.join(DOMAINS)}")
    return get_logger(f"case_messenger.{domain}")


def api_logger() -> structlog.stdlib.BoundLogger:
    """Logger for API layer events."""
    return domain_logger("api")


def engine_logger() -> structlog.stdlib.BoundLogger:
    """Logger for matching/inflection events."""
    return domain_logger("engine")


def session_logger() -> structlog.stdlib.BoundLogger:
    """Logger for learner session transitions."""
    return domain_logger("session")


def content_logger() -> structlog.stdlib.BoundLogger:
    """Logger for seed content loading."""
    return domain_logger("content")
