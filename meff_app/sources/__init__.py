"""
Quote source module.

Interfaces and implementations of the collaborators that fetch raw quotes
from the market data service.
"""
from .base import BaseQuoteSource
from .memory import InMemoryQuoteSource

__all__ = ["BaseQuoteSource", "InMemoryQuoteSource"]
