from __future__ import annotations

from typing import List, Literal, Sequence, Tuple, TypeVar

from ..schemas.models import MarketPrice, Scheme
from .market import MARKET_PRICES
from .schemes import ALL_SCHEMES, CENTRAL_SCHEMES, STATE_SCHEMES


T = TypeVar("T")

SchemeScope = Literal["central", "state", "all"]
SCHEME_SEARCH_FIELDS = ("name", "benefit", "eligibility")
MARKET_SEARCH_FIELDS = ("crop", "variety", "market")

_SCHEME_SCOPES = {
    "central": CENTRAL_SCHEMES,
    "state": STATE_SCHEMES,
    "all": ALL_SCHEMES,
}


def filter_records(records: Sequence[T], query: str, fields: Sequence[str]) -> List[T]:
    """
    Keep records whose named text fields contain ``query`` (case-insensitive).

    An empty query returns every record; order is preserved. The query is
    matched as typed, surrounding whitespace included.
    """
    needle = (query or "").lower()
    if not needle:
        return list(records)
    return [
        record
        for record in records
        if any(needle in str(getattr(record, name, "") or "").lower() for name in fields)
    ]


def search_schemes(query: str = "", scope: SchemeScope = "all") -> List[Scheme]:
    try:
        records = _SCHEME_SCOPES[scope]
    except KeyError:
        raise ValueError(f"unknown scheme scope: {scope!r}") from None
    return filter_records(records, query, SCHEME_SEARCH_FIELDS)


def search_market_prices(query: str = "") -> List[MarketPrice]:
    return filter_records(MARKET_PRICES, query, MARKET_SEARCH_FIELDS)


def market_crops() -> Tuple[str, ...]:
    return tuple(dict.fromkeys(price.crop for price in MARKET_PRICES))
