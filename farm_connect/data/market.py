from __future__ import annotations

from typing import Tuple

from ..schemas.models import MarketPrice


# Sample mandi prices in INR per quintal.
MARKET_PRICES: Tuple[MarketPrice, ...] = (
    MarketPrice(crop="Rice", variety="Sona Masoori", market="Hyderabad", price=4500, change=1.2),
    MarketPrice(crop="Cotton", variety="Long Staple", market="Guntur", price=7200, change=-0.5),
    MarketPrice(crop="Tomato", variety="Hybrid", market="Madanapalle", price=2500, change=3.5),
    MarketPrice(crop="Wheat", variety="Lokwan", market="Indore", price=2300, change=0.8),
    MarketPrice(crop="Soybean", variety="JS-335", market="Nagpur", price=5100, change=-1.1),
    MarketPrice(crop="Maize", variety="Hybrid", market="Karimnagar", price=2100, change=2.0),
    MarketPrice(crop="Chilli", variety="Teja", market="Guntur", price=18000, change=-2.3),
    MarketPrice(crop="Turmeric", variety="Finger", market="Nizamabad", price=8500, change=1.5),
    MarketPrice(crop="Onion", variety="Red", market="Kurnool", price=1800, change=5.1),
)
