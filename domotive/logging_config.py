"""
Structured logging for DoMotive: structlog rendering through stdlib logging.

The `logging` section of args/domotive.yaml picks the level and whether lines
are rendered for a console or as JSON. `DOMOTIVE_LOG_LEVEL` and
`DOMOTIVE_LOG_FORMAT=json` override the file (applied by
`config_models.load_and_validate`).

Output goes to stderr so the CLI's JSON result on stdout stays parseable.

Usage:
    from domotive.config_models import load_and_validate
    from domotive.logging_config import get_logger, setup_logging

    setup_logging(load_and_validate().logging)
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from domotive.config_models import LoggingConfig, load_and_validate

HANDLER_NAME = "domotive"


def _render_chain(json_output: bool) -> list[structlog.types.Processor]:
    if json_output:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    # ConsoleRenderer formats exceptions itself
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """Route structlog and stdlib records through one stderr handler."""
    if config is None:
        config = load_and_validate().logging

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_render_chain(config.json_output),
            ],
        )
    )

    # replace only our own handler; others (e.g. test capture) stay attached
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


__all__ = ["get_logger", "setup_logging"]
