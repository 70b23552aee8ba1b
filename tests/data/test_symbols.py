"""Unit tests for ticker pre-parsing."""

import pytest

from meff_app.config.defaults import SymbolParams
from meff_app.data.symbols import preparse_symbol


class TestPreparseSymbol:
    """Test suite for preparse_symbol."""

    @pytest.mark.parametrize("raw, expected", [
        ("GRF", "GRF"),
        ("  grf ", "GRF"),
        ("MEFF:GRF", "GRF"),
        ("meff: san", "SAN"),
        ("GRF.MC", "GRF.MC"),
    ])
    def test_default_parsing(self, raw: str, expected: str) -> None:
        assert preparse_symbol(raw) == expected

    def test_custom_prefixes(self) -> None:
        params = SymbolParams(strip_prefixes=("BME:", "MEFF:"))

        assert preparse_symbol("BME:TEF", params) == "TEF"

    def test_case_preserved_when_disabled(self) -> None:
        params = SymbolParams(uppercase=False)

        assert preparse_symbol("MEFF:Grf", params) == "Grf"
