"""Diagnostic logging for payrollctl, rendered by structlog on stderr.

stdout carries the operator dialogue (menu, prompts, report), so every log
record goes to stderr and only ``payrollctl.*`` loggers are routed there.
Human mode prints short ``HH:MM:SS`` lines; ``--log-json`` prints one JSON
object per record with an ISO timestamp.
"""

from __future__ import annotations

import logging
import sys

import structlog

PAYROLL_LOGGER = "payrollctl"


def _pre_chain(*, log_json: bool) -> list[structlog.types.Processor]:
    """Processors shared by structlog and stdlib ``logging`` records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso" if log_json else "%H:%M:%S"),
        structlog.processors.StackInfoRenderer(),
    ]


def _stderr_handler(*, log_json: bool) -> logging.Handler:
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(log_json=log_json),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route payrollctl logs to stderr: WARNING and up, or DEBUG with *verbose*.

    Safe to call more than once; each call replaces the previous handler.
    """
    structlog.configure(
        processors=[
            *_pre_chain(log_json=log_json),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logger = logging.getLogger(PAYROLL_LOGGER)
    logger.handlers.clear()
    logger.addHandler(_stderr_handler(log_json=log_json))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
