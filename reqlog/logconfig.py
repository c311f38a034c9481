"""
reqlog.logconfig
~~~~~~~~~~~~~~~~
Default structlog + stdlib logging configuration.

The middleware only needs *a* logger with ``info(event, **fields)``; this
helper is what the bundled Django project uses to render those records as
one JSON object per line on stdout.
"""
from __future__ import annotations

import logging.config

import structlog


def build_logging_dict(level: str = "INFO", json: bool = True) -> dict:
    """Return a ``logging.config.dictConfig`` mapping for the console handler."""
    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structlog_formatter": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processor": renderer,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "structlog_formatter",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level.upper(),
        },
        "loggers": {
            "django": {
                "handlers": ["console"],
                "level": "INFO",
                "propagate": False,
            },
        },
    }


def configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging(level: str = "INFO", json: bool = True) -> None:
    """
    Configure stdlib logging and structlog in one go.  Call once at startup
    in hosts without Django; Django settings assign ``LOGGING`` from
    :func:`build_logging_dict` and call :func:`configure_structlog` instead.
    """
    logging.config.dictConfig(build_logging_dict(level, json))
    configure_structlog()
