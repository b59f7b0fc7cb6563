"""
Synthetic data module.

Provides the symbol catalogue and the OHLCV series generator.
"""
from .generator import SeriesGenerator, generate_series
from .symbols import STOCK_SYMBOLS, BASE_PRICES, get_base_price, get_symbol, list_symbols

__all__ = [
    'SeriesGenerator',
    'generate_series',
    'STOCK_SYMBOLS',
    'BASE_PRICES',
    'get_base_price',
    'get_symbol',
    'list_symbols',
]
