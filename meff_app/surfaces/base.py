"""Base class for option price surface builders."""

from abc import ABC, abstractmethod
from datetime import date

from ..data.models import OptionQuoteView, QueryResult


class BaseSurfaceBuilder(ABC):
    """Turns a flat option chain into an option price surface."""

    @abstractmethod
    def build(self, ticker: str, as_of: date,
              quotes: list[OptionQuoteView]) -> QueryResult:
        """
        Build a surface from option quotes.

        Args:
            ticker: Underlying ticker
            as_of: Session date of the chain
            quotes: Option legs to place on the surface

        Returns:
            QueryResult carrying an OptionPriceSurface, or the builder's error
        """
        pass
