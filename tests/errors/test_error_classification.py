"""Error classification and propagation tests."""

from datetime import date
from unittest.mock import Mock

import pytest

from meff_app.data.models import DataType, Query
from meff_app.errors import (
    ConfigurationError,
    ErrorKind,
    QuoteSourceError,
    QuoteSourceFormatError,
    QuoteSourceTransportError,
)
from meff_app.surfaces.base import BaseSurfaceBuilder


class TestErrorClassification:
    """Test error classification system."""

    def test_quote_source_error_hierarchy(self) -> None:
        base_error = QuoteSourceError("base error")
        assert base_error.context == {}

        transport = QuoteSourceTransportError("HTTP 503", status_code=503, url="http://meff.example")
        assert isinstance(transport, QuoteSourceError)
        assert transport.status_code == 503
        assert transport.url == "http://meff.example"

        fmt = QuoteSourceFormatError("bad row", raw_data="x;y", expected_format="csv",
                                     context={"ticker": "GRF"})
        assert isinstance(fmt, QuoteSourceError)
        assert fmt.raw_data == "x;y"
        assert fmt.context == {"ticker": "GRF"}

    def test_configuration_error_keeps_errors(self) -> None:
        error = ConfigurationError("invalid", errors=["a"])
        assert error.errors == ["a"]
        assert str(error) == "invalid"

    def test_error_kinds_are_distinct(self) -> None:
        assert len({kind.value for kind in ErrorKind}) == 6


class TestNoFaultEscapes:
    """Faults from collaborators never cross the provider boundary."""

    @pytest.mark.parametrize("fault", [
        RuntimeError("boom"),
        KeyError("SettlPrice"),
        TimeoutError("read timed out"),
    ])
    def test_scalar_path(self, make_provider, mock_source, fault) -> None:
        mock_source.fetch_historical_quotes.side_effect = fault
        provider = make_provider(mock_source)

        result = provider.dispatch(Query("GRF", "close", DataType.SCALAR, date(2011, 1, 31)))

        assert result.error_kind == ErrorKind.PROVIDER_UNAVAILABLE
        assert result.payload is None

    @pytest.mark.parametrize("fault", [RuntimeError("boom"), OSError("network down")])
    def test_option_chain_path(self, make_provider, mock_source, fault) -> None:
        mock_source.fetch_option_quotes.side_effect = fault
        provider = make_provider(mock_source)

        result = provider.dispatch(Query("GRF", "close", DataType.OPTION_CHAIN, date(2011, 1, 31)))

        assert result.error_kind == ErrorKind.PROVIDER_UNAVAILABLE

    def test_builder_fault(self, make_provider, mock_source) -> None:
        builder = Mock(spec=BaseSurfaceBuilder)
        builder.build.side_effect = IndexError("list index out of range")
        provider = make_provider(mock_source, surface_builder=builder)

        result = provider.dispatch(Query("GRF", "close", DataType.OPTION_CHAIN, date(2011, 1, 31)))

        assert result.error_kind == ErrorKind.SURFACE_BUILD_FAILURE
