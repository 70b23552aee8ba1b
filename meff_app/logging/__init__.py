"""
Logging configuration and utilities for the MEFF query engine.
"""
from .config import configure_logging, get_logger, get_query_logger, log_query_outcome

__all__ = ["configure_logging", "get_logger", "get_query_logger", "log_query_outcome"]
