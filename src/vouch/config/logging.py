"""structlog configuration for vouch.

Two output modes:
- Human (default): colored console output to stderr
- JSON (--log-json): Structured JSON lines to stderr

Records from stdlib ``logging`` (the engine's debug traces) and from
structlog (:func:`structlog_sink`) share one processor chain and one
stderr handler.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

import structlog

from vouch.domain.logentry import LogEntry

# Every record carries level, logger name and an ISO timestamp.
SHARED_PROCESSORS: tuple[structlog.types.Processor, ...] = (
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
)


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        # Offending inputs may be arbitrary objects.
        return structlog.processors.JSONRenderer(default=repr)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _stderr_handler(log_json: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=list(SHARED_PROCESSORS),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route vouch logging to stderr.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.

    Repeated calls replace the handler instead of stacking a new one.
    """
    structlog.configure(
        processors=[
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(_stderr_handler(log_json))
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("vouch").setLevel(logging.DEBUG if verbose else logging.WARNING)


def structlog_sink(name: str = "vouch.constraints") -> Callable[[LogEntry], None]:
    """Build a ``ValidationConfig.logger`` callback that logs through structlog.

    Satisfied entries log at DEBUG, violated entries at INFO.
    """
    log = structlog.get_logger(name)

    def sink(entry: LogEntry) -> None:
        fields = entry.model_dump(exclude={"kind"})
        if entry.kind == "violated":
            log.info("constraint_violated", **fields)
        else:
            log.debug("constraint_satisfied", **fields)

    return sink
