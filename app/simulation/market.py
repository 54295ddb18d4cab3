import logging
from typing import Dict, Optional
from app.schemas.simulation import MarketFactors

logger = logging.getLogger(__name__)

# ---------------------------------------------------------
# INDUSTRY MARKET PROFILES
# ---------------------------------------------------------
MARKET_FACTORS: Dict[str, MarketFactors] = {
    "Technology": MarketFactors(
        industry_growth_rate=0.12,
        economic_condition="growth",
        automation_risk=0.3,
        demand_trend="growing"
    ),
    "Finance": MarketFactors(
        industry_growth_rate=0.06,
        economic_condition="stable",
        automation_risk=0.4,
        demand_trend="stable"
    ),
    "Healthcare": MarketFactors(
        industry_growth_rate=0.08,
        economic_condition="growth",
        automation_risk=0.2,
        demand_trend="growing"
    ),
    "Education": MarketFactors(
        industry_growth_rate=0.03,
        economic_condition="recovery",
        automation_risk=0.35,
        demand_trend="stable"
    ),
    "Manufacturing": MarketFactors(
        industry_growth_rate=0.04,
        economic_condition="recovery",
        automation_risk=0.6,
        demand_trend="stable"
    ),
}

DEFAULT_MARKET_FACTORS = MarketFactors(
    industry_growth_rate=0.05,
    economic_condition="stable",
    automation_risk=0.4,
    demand_trend="stable"
)

# Yearly salary multipliers. Keys missing here (e.g. "stable" economy) count as 1.0.
ECONOMIC_IMPACT = {
    "recession": 0.97,
    "recovery": 1.0,
    "growth": 1.02,
    "boom": 1.05,
}

DEMAND_TREND_IMPACT = {
    "declining": 0.98,
    "stable": 1.0,
    "growing": 1.03,
    "explosive": 1.08,
}

ENTERPRISE_COMPANIES = [
    "google", "microsoft", "amazon", "apple", "meta", "facebook",
    "netflix", "tesla", "oracle", "ibm", "salesforce", "adobe"
]


def get_market_factors(industry: Optional[str]) -> MarketFactors:
    """Market assumptions for an industry; unknown industries get the default profile."""
    factors = MARKET_FACTORS.get(industry)
    if factors is None:
        logger.info(f"No market profile for industry '{industry}', using default market factors")
        factors = DEFAULT_MARKET_FACTORS
    return factors.model_copy()


def calculate_market_impact(market_factors: Optional[MarketFactors]) -> float:
    if market_factors is None:
        return 1.0

    impact = 1.0
    impact *= ECONOMIC_IMPACT.get(market_factors.economic_condition, 1.0)
    impact *= DEMAND_TREND_IMPACT.get(market_factors.demand_trend, 1.0)
    return impact


def infer_company_stage(company_name: Optional[str]) -> str:
    """
    Heuristic company stage (enterprise | startup | growth | mature).
    No company means we assume an established employer.
    """
    if not company_name:
        return "mature"

    name_lower = company_name.lower()
    if any(e in name_lower for e in ENTERPRISE_COMPANIES):
        return "enterprise"

    if "labs" in name_lower or "ventures" in name_lower:
        return "startup"

    return "growth"
