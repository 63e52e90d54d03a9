"""structlog setup shared by every folioterm command.

structlog and stdlib ``logging`` records go through one handler on the
root logger, so ``logging.getLogger(__name__)`` and
``structlog.get_logger(__name__)`` produce the same output: a console
rendering by default, or one JSON object per line with ``--log-json``.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog
from structlog.types import Processor

# Third-party loggers that stay at WARNING even with --verbose.
_QUIET_LIBRARIES = ("markdown_it",)


def _pre_chain() -> list[Processor]:
    """Processors applied to structlog and stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _handler(stream: TextIO, *, log_json: bool) -> logging.Handler:
    renderer: Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route all log output to *stream* (default: stderr).

    Args:
        verbose: Let ``folioterm.*`` loggers emit DEBUG; otherwise WARNING+.
        log_json: Render JSON lines instead of the console format.
        stream: Destination for log records.
    """
    structlog.configure(
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_handler(stream if stream is not None else sys.stderr, log_json=log_json))
    root.setLevel(logging.WARNING)

    logging.getLogger("folioterm").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _QUIET_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)
