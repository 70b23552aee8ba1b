"""
Centralized logging configuration for the MEFF query engine.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the system should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    # structlog handles the formatting
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_query_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for query handling.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger tagged with the query subsystem
    """
    return get_logger(name).bind(subsystem="query")


def log_query_outcome(
    logger: FilteringBoundLogger,
    operation: str,
    ticker: str,
    result: Any,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a query operation with standardized format.

    Successful results are logged at INFO, failures at WARNING with the
    error kind and message attached.

    Args:
        logger: Structlog logger instance
        operation: Name of the operation that produced the result
        ticker: Ticker the query was about
        result: QueryResult returned by the operation
        context: Additional context data
    """
    bound_logger = logger.bind(operation=operation, ticker=ticker)

    if context:
        bound_logger = bound_logger.bind(context=context)

    status = result.status
    if status.has_errors:
        kind = status.error_kind.value if status.error_kind is not None else None
        bound_logger.warning(
            "Query failed",
            error_kind=kind,
            error_message=status.error_message
        )
    else:
        bound_logger.info("Query succeeded")
