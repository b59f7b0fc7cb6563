"""
Static symbol catalogue: NSE large caps with sector and base price.

Base prices seed the synthetic walk so every symbol starts near a
realistic INR level; unknown symbols fall back to DEFAULT_BASE_PRICE.
"""
from types import MappingProxyType
from typing import List, Mapping, Optional

from ..shared.defaults import DEFAULT_BASE_PRICE
from ..shared.types import StockSymbol


STOCK_SYMBOLS = (
    StockSymbol("RELIANCE", "Reliance Industries Ltd.", "Oil & Gas"),
    StockSymbol("TCS", "Tata Consultancy Services", "IT Services"),
    StockSymbol("HDFCBANK", "HDFC Bank Ltd.", "Banking"),
    StockSymbol("INFY", "Infosys Ltd.", "IT Services"),
    StockSymbol("ICICIBANK", "ICICI Bank Ltd.", "Banking"),
    StockSymbol("HINDUNILVR", "Hindustan Unilever Ltd.", "FMCG"),
    StockSymbol("SBIN", "State Bank of India", "Banking"),
    StockSymbol("BHARTIARTL", "Bharti Airtel Ltd.", "Telecom"),
    StockSymbol("ITC", "ITC Ltd.", "FMCG"),
    StockSymbol("KOTAKBANK", "Kotak Mahindra Bank", "Banking"),
    StockSymbol("LT", "Larsen & Toubro Ltd.", "Engineering"),
    StockSymbol("AXISBANK", "Axis Bank Ltd.", "Banking"),
    StockSymbol("ASIANPAINT", "Asian Paints Ltd.", "Paints"),
    StockSymbol("MARUTI", "Maruti Suzuki India Ltd.", "Automotive"),
    StockSymbol("SUNPHARMA", "Sun Pharmaceutical Industries", "Pharmaceuticals"),
    StockSymbol("TITAN", "Titan Company Ltd.", "Jewellery"),
    StockSymbol("WIPRO", "Wipro Ltd.", "IT Services"),
    StockSymbol("ULTRACEMCO", "UltraTech Cement Ltd.", "Cement"),
    StockSymbol("NESTLEIND", "Nestle India Ltd.", "FMCG"),
    StockSymbol("POWERGRID", "Power Grid Corporation", "Power"),
    StockSymbol("NTPC", "NTPC Ltd.", "Power"),
    StockSymbol("TECHM", "Tech Mahindra Ltd.", "IT Services"),
)

BASE_PRICES: Mapping[str, float] = MappingProxyType({
    "RELIANCE": 2450.0,
    "TCS": 3650.0,
    "HDFCBANK": 1580.0,
    "INFY": 1420.0,
    "ICICIBANK": 950.0,
    "HINDUNILVR": 2680.0,
    "SBIN": 580.0,
    "BHARTIARTL": 850.0,
    "ITC": 420.0,
    "KOTAKBANK": 1750.0,
    "LT": 2850.0,
    "AXISBANK": 1050.0,
    "ASIANPAINT": 3250.0,
    "MARUTI": 9850.0,
    "SUNPHARMA": 1180.0,
    "TITAN": 3150.0,
    "WIPRO": 480.0,
    "ULTRACEMCO": 8950.0,
    "NESTLEIND": 22500.0,
    "POWERGRID": 245.0,
    "NTPC": 285.0,
    "TECHM": 1250.0,
})

_BY_SYMBOL = MappingProxyType({s.symbol: s for s in STOCK_SYMBOLS})


def get_base_price(symbol: str) -> float:
    """Return the catalogue base price for symbol, or DEFAULT_BASE_PRICE if unknown."""
    return BASE_PRICES.get(symbol, DEFAULT_BASE_PRICE)


def get_symbol(symbol: str) -> Optional[StockSymbol]:
    return _BY_SYMBOL.get(symbol)


def list_symbols(sector: Optional[str] = None) -> List[StockSymbol]:
    """
    List catalogue entries, optionally restricted to one sector.

    Args:
        sector: Sector name to filter on (case-insensitive). If None, all symbols.

    Returns:
        Symbols in catalogue order
    """
    if sector is None:
        return list(STOCK_SYMBOLS)
    wanted = sector.strip().lower()
    return [s for s in STOCK_SYMBOLS if s.sector.lower() == wanted]
