import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from farm_connect.data import (
    ALL_SCHEMES,
    CENTRAL_SCHEMES,
    FINANCIAL_NEEDS,
    MARKET_PRICES,
    SOIL_TYPES,
    STATE_SCHEMES,
    filter_records,
    market_crops,
    mock_weather,
    search_market_prices,
    search_schemes,
)
from farm_connect.data.search import MARKET_SEARCH_FIELDS, SCHEME_SEARCH_FIELDS
from farm_connect.domain.errors import InvalidFieldError


class SchemeSearchTests(unittest.TestCase):
    def test_catalog_sizes(self) -> None:
        self.assertEqual(len(CENTRAL_SCHEMES), 13)
        self.assertEqual(len(STATE_SCHEMES), 9)
        self.assertEqual(len(ALL_SCHEMES), 22)

    def test_blank_query_returns_everything(self) -> None:
        self.assertEqual(search_schemes(""), list(ALL_SCHEMES))
        self.assertEqual(search_schemes("", "state"), list(STATE_SCHEMES))

    def test_query_is_case_insensitive(self) -> None:
        names = [scheme.name for scheme in search_schemes("kisan", "central")]
        self.assertIn("PM-KISAN (Pradhan Mantri Kisan Samman Nidhi)", names)
        self.assertIn("Kisan Credit Card (KCC)", names)

    def test_scope_limits_results(self) -> None:
        results = search_schemes("AP", "state")
        self.assertTrue(results)
        self.assertTrue(all(scheme in STATE_SCHEMES for scheme in results))

    def test_unknown_scope(self) -> None:
        with self.assertRaises(ValueError):
            search_schemes("", "district")

    def test_filter_is_idempotent(self) -> None:
        once = filter_records(ALL_SCHEMES, "insurance", SCHEME_SEARCH_FIELDS)
        twice = filter_records(once, "insurance", SCHEME_SEARCH_FIELDS)
        self.assertEqual(once, twice)
        self.assertTrue(once)

    def test_no_match(self) -> None:
        self.assertEqual(search_schemes("zzz-no-such-scheme"), [])

    def test_records_are_frozen(self) -> None:
        with self.assertRaises(Exception):
            ALL_SCHEMES[0].name = "changed"


class MarketTests(unittest.TestCase):
    def test_search_by_market(self) -> None:
        results = search_market_prices("guntur")
        self.assertEqual([price.crop for price in results], ["Cotton", "Chilli"])

    def test_search_by_variety(self) -> None:
        results = search_market_prices("HYBRID")
        self.assertEqual({price.crop for price in results}, {"Tomato", "Maize"})

    def test_blank_query(self) -> None:
        self.assertEqual(search_market_prices(), list(MARKET_PRICES))

    def test_query_whitespace_is_significant(self) -> None:
        self.assertEqual([price.crop for price in search_market_prices("rice")], ["Rice"])
        self.assertEqual(search_market_prices("rice "), [])
        self.assertEqual(search_schemes("   "), [])

    def test_market_filter_is_idempotent(self) -> None:
        once = filter_records(MARKET_PRICES, "ri", MARKET_SEARCH_FIELDS)
        self.assertEqual(filter_records(once, "ri", MARKET_SEARCH_FIELDS), once)

    def test_market_crops_unique_and_ordered(self) -> None:
        crops = market_crops()
        self.assertEqual(crops[0], "Rice")
        self.assertEqual(len(crops), len(set(crops)))
        self.assertEqual(len(crops), len(MARKET_PRICES))


class WeatherAndReferenceTests(unittest.TestCase):
    def test_mock_weather_for_any_location(self) -> None:
        weather = mock_weather("  Kurnool ")
        self.assertEqual(weather.location, "Kurnool")
        self.assertEqual(len(weather.forecast), 5)
        self.assertEqual(weather.current.condition, "Partly Cloudy")

    def test_mock_weather_requires_location(self) -> None:
        with self.assertRaises(InvalidFieldError):
            mock_weather(" ")

    def test_reference_lists(self) -> None:
        self.assertIn("Alluvial", SOIL_TYPES)
        self.assertEqual(len(FINANCIAL_NEEDS), 6)
        self.assertEqual(FINANCIAL_NEEDS[0].title, "Crop Production Finance")


if __name__ == "__main__":
    unittest.main()
