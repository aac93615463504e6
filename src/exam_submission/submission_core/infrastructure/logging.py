import structlog
import logging
import sys
from typing import Any, MutableMapping

def _contents_filter(logger: Any, method_name: str, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """
    Keep submitted file contents out of logs; only their size is recorded.
    """
    if "contents" in event_dict:
        event_dict["contents"] = f"<{len(str(event_dict['contents']))} chars>"
    return event_dict

def setup_logging(env: str, level: str = "INFO") -> None:
    """
    Configure structlog based on environment.
    """
    processors = [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        _contents_filter,
    ]

    if env in ("local", "development"):
        # Development: Colored Console
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        # Production: JSON
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )
