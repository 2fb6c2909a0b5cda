"""
Structured logging setup for the adapter using structlog.

- Use structlog for structured JSON logging
- Include event, module, and elapsed_ms fields
- Never log argument values, request bodies or credentials
- Write to stderr: stdout carries the stdio protocol stream
"""

import logging
import logging.handlers
import sys
import time
from typing import Any, List, Optional

import structlog

from common.config import Config

# Global config reference for pretty print setting
_config: Optional[Config] = None


def pretty_renderer(_, __, event_dict) -> str:
    """
    Render a log entry based on configuration:
    - enable_pretty_print: One key per line, without timestamp/level/logger
    - Otherwise: Compact JSON
    """
    if _config and _config.enable_pretty_print:
        filtered_dict = {
            k: v for k, v in event_dict.items() if k not in ["timestamp", "level", "logger"]
        }

        event = filtered_dict.pop("event", "unknown_event")
        output_lines = [f"EVENT: {event}"]

        for key, value in filtered_dict.items():
            if isinstance(value, (dict, list)):
                # Add line breaks after commas
                formatted_value = str(value).replace(", ", ",\n    ")
                output_lines.append(f"{key}: {formatted_value}")
            else:
                output_lines.append(f"{key}: {value}")

        output_lines.append("-" * 50)
        return "\n".join(output_lines)

    return str(structlog.processors.JSONRenderer()(_, __, event_dict))


def setup_logging(config: Config) -> None:
    """
    Setup structured JSON logging using structlog.

    Args:
        config: Application configuration
    """
    global _config
    _config = config

    log_level = getattr(logging, config.log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            pretty_renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handlers: List[logging.Handler] = []

    # Console handler (always present, never stdout)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    handlers.append(console_handler)

    if config.save_to_file:
        file_handler = logging.handlers.RotatingFileHandler(
            filename=config.log_file_path,
            maxBytes=config.max_log_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(file_handler)

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        format="%(message)s",
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("httpx").setLevel(logging.WARNING)


class TimedLogger:
    """Context manager for timing operations and logging elapsed time using structlog."""

    def __init__(self, logger: structlog.BoundLogger, event: str, **context: Any):
        """
        Initialize timed logger.

        Args:
            logger: structlog logger instance
            event: Event name for the log entry
            **context: Additional context to include in logs
        """
        self.logger = logger
        self.event = event
        self.context = context
        self.start_time: Optional[float] = None
        self.elapsed_ms: Optional[float] = None

    def __enter__(self) -> "TimedLogger":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self.start_time is not None:
            self.elapsed_ms = round((time.perf_counter() - self.start_time) * 1000, 2)
            self.logger.info(
                event=self.event,
                elapsed_ms=self.elapsed_ms,
                success=exc_type is None,
                **self.context,
            )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a configured structlog logger."""
    return structlog.get_logger(name)


def log_startup_message(message: str, **kwargs: Any) -> None:
    """Log a start-up milestone under the dedicated startup logger."""
    logger = get_logger("startup")
    logger.info(event=message, **kwargs)
