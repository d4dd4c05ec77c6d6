"""Static reference data bundled with the dashboard. Read-only."""

from .market import MARKET_PRICES
from .reference import FINANCIAL_NEEDS, SOIL_TYPES
from .schemes import ALL_SCHEMES, CENTRAL_SCHEMES, STATE_SCHEMES
from .search import filter_records, market_crops, search_market_prices, search_schemes
from .weather import mock_weather

__all__ = [
    "ALL_SCHEMES",
    "CENTRAL_SCHEMES",
    "FINANCIAL_NEEDS",
    "MARKET_PRICES",
    "SOIL_TYPES",
    "STATE_SCHEMES",
    "filter_records",
    "market_crops",
    "mock_weather",
    "search_market_prices",
    "search_schemes",
]
