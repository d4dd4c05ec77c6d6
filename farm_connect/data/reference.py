from __future__ import annotations

from typing import Tuple

from ..schemas.models import FinancialNeed


SOIL_TYPES: Tuple[str, ...] = (
    "Alluvial",
    "Black (Regur)",
    "Red and Yellow",
    "Laterite",
    "Arid",
    "Saline",
    "Peaty (Kari)",
    "Forest",
)

FINANCIAL_NEEDS: Tuple[FinancialNeed, ...] = (
    FinancialNeed(
        title="Crop Production Finance",
        description="Loans for seeds, fertilizers, pesticides, labor, and machinery. Includes working capital loans timed with sowing and harvesting cycles.",
    ),
    FinancialNeed(
        title="Irrigation & Infrastructure",
        description="Funds for drip/sprinkler systems, borewells, pumps, and infrastructure for storage (warehouses, silos) and post-harvest processing.",
    ),
    FinancialNeed(
        title="Equipment & Mechanization",
        description="Loans or subsidies to buy tractors, harvesters, threshers, and drones to reduce labor dependency and increase efficiency.",
    ),
    FinancialNeed(
        title="Crop Insurance & Risk Mitigation",
        description="Insurance premiums to protect against crop failure from weather, pests, or diseases, securing income stability.",
    ),
    FinancialNeed(
        title="Livestock & Allied Activities",
        description="Finance to invest in dairy cattle, poultry, fisheries, sericulture, and related businesses for income diversification.",
    ),
    FinancialNeed(
        title="Market Access & Working Capital",
        description="Credit to manage supply chain activities like storage, transportation, and marketing to hold produce for better prices.",
    ),
)
