"""
Tests for the static symbol catalogue.
"""
import pytest

from stockcast.data.symbols import (
    STOCK_SYMBOLS,
    BASE_PRICES,
    get_base_price,
    get_symbol,
    list_symbols,
)
from stockcast.shared.defaults import DEFAULT_BASE_PRICE


class TestCatalogue:
    """Test catalogue contents and lookups."""

    def test_every_symbol_has_base_price(self):
        assert len(STOCK_SYMBOLS) == 22
        assert {s.symbol for s in STOCK_SYMBOLS} == set(BASE_PRICES)

    def test_known_base_prices(self):
        assert get_base_price("RELIANCE") == 2450
        assert get_base_price("NESTLEIND") == 22500
        assert get_base_price("POWERGRID") == 245

    def test_unknown_symbol_falls_back(self):
        assert get_base_price("UNKNOWN") == DEFAULT_BASE_PRICE == 1000

    def test_base_prices_are_read_only(self):
        with pytest.raises(TypeError):
            BASE_PRICES["RELIANCE"] = 1.0

    def test_get_symbol(self):
        entry = get_symbol("TCS")
        assert entry.name == "Tata Consultancy Services"
        assert entry.sector == "IT Services"
        assert get_symbol("UNKNOWN") is None

    def test_list_symbols_by_sector(self):
        banks = list_symbols("banking")
        assert [s.symbol for s in banks] == ["HDFCBANK", "ICICIBANK", "SBIN", "KOTAKBANK", "AXISBANK"]
        assert list_symbols("Nonexistent") == []
        assert len(list_symbols()) == len(STOCK_SYMBOLS)
