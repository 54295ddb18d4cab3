"""
Pure scoring functions for a built career path.

- Path characteristics: stability, growth, learning, balance, demand (0-100)
- Success score: fit against the user's success criteria (0-100)
- Risk score: volatility and market exposure of the path (0-100)
"""
from typing import List, Optional

from app.core.exceptions import ComputationGuardError
from app.core.utils import clamp, round_half_up
from app.schemas.simulation import CareerPath, MarketFactors, PathCharacteristics, ScenarioOutcome, SuccessCriteria

MARKET_DEMAND_SCORES = {
    "declining": 30,
    "stable": 60,
    "growing": 80,
    "explosive": 95,
}
DEFAULT_MARKET_DEMAND = 60

# Checked in order; first keyword hit wins
TITLE_IMPACT_SCORES = [
    (("director", "vp", "executive"), 95),
    (("principal", "distinguished"), 85),
    (("lead", "staff"), 70),
    (("senior",), 60),
]
DEFAULT_IMPACT_SCORE = 45
MISSING_TITLE_IMPACT_SCORE = 50

SALARY_COMPONENT_WEIGHT = 0.4
BASE_RISK = 50
MAX_VARIABILITY_RISK = 30


def population_variance(values: List[float]) -> float:
    mean = sum(values) / len(values)
    return sum((v - mean) ** 2 for v in values) / len(values)


def count_promotions(scenario: ScenarioOutcome) -> int:
    return sum(1 for dp in scenario.key_decision_points if "Promotion" in dp.decision)


def _require_positive(value: float, label: str) -> float:
    if value == 0:
        raise ComputationGuardError(f"{label} is zero; salaries must be positive")
    return value


def calculate_path_characteristics(path: CareerPath, market_factors: Optional[MarketFactors]) -> PathCharacteristics:
    scenarios = path.scenarios

    # Stability: lower spread between scenarios = more stable
    salary_variance = population_variance([
        scenarios.optimistic.final_salary,
        scenarios.realistic.final_salary,
        scenarios.pessimistic.final_salary
    ])
    stability_score = max(0, 100 - salary_variance / 1000)

    # Growth potential: optimistic vs pessimistic spread
    pessimistic_final = _require_positive(scenarios.pessimistic.final_salary, "Pessimistic final salary")
    growth_potential = (scenarios.optimistic.final_salary - pessimistic_final) / pessimistic_final * 100

    learning_curve = min(100, count_promotions(scenarios.realistic) * 20)

    # Work-life balance moves inversely to (uncapped) growth
    work_life_balance = max(30, 100 - growth_potential)

    demand_trend = market_factors.demand_trend if market_factors else None
    market_demand = MARKET_DEMAND_SCORES.get(demand_trend, DEFAULT_MARKET_DEMAND)

    return PathCharacteristics(
        stability_score=round_half_up(clamp(stability_score)),
        growth_potential=round_half_up(clamp(growth_potential)),
        learning_curve=round_half_up(clamp(learning_curve)),
        work_life_balance=round_half_up(clamp(work_life_balance)),
        market_demand=round_half_up(clamp(market_demand))
    )


def get_title_impact_score(title: Optional[str]) -> int:
    """Approximates the scope of a role from keywords in its title."""
    if not title:
        return MISSING_TITLE_IMPACT_SCORE

    title_lower = title.lower()
    for keywords, score in TITLE_IMPACT_SCORES:
        if any(k in title_lower for k in keywords):
            return score
    return DEFAULT_IMPACT_SCORE


def calculate_success_score(path: CareerPath, success_criteria: SuccessCriteria) -> int:
    """
    Weighted fit of the path against the user's criteria.
    The three user weights are applied as given (not normalized), so
    weights summing above 1 can push the raw score past 100 before clamping.
    """
    realistic = path.scenarios.realistic
    characteristics = path.path_characteristics
    score = 0.0

    if success_criteria.target_salary:
        salary_ratio = realistic.final_salary / success_criteria.target_salary
        score += min(100, salary_ratio * 100) * SALARY_COMPONENT_WEIGHT

    if success_criteria.work_life_balance_weight > 0:
        score += characteristics.work_life_balance * success_criteria.work_life_balance_weight

    if success_criteria.learning_opportunities_weight > 0:
        score += characteristics.learning_curve * success_criteria.learning_opportunities_weight

    if success_criteria.impact_weight > 0:
        score += get_title_impact_score(realistic.final_title) * success_criteria.impact_weight

    return round_half_up(clamp(score))


def calculate_risk_score(path: CareerPath, market_factors: Optional[MarketFactors]) -> int:
    scenarios = path.scenarios
    risk_score = BASE_RISK

    # Salary variability
    realistic_final = _require_positive(scenarios.realistic.final_salary, "Realistic final salary")
    salary_spread = scenarios.optimistic.final_salary - scenarios.pessimistic.final_salary
    risk_score += min(MAX_VARIABILITY_RISK, salary_spread / realistic_final * 50)

    # Market exposure
    if market_factors:
        if market_factors.automation_risk > 0.5:
            risk_score += 15
        if market_factors.demand_trend == "declining":
            risk_score += 20
        if market_factors.economic_condition == "recession":
            risk_score += 10

    # Fast progression is riskier
    if count_promotions(scenarios.realistic) > 3:
        risk_score += 10

    return round_half_up(clamp(risk_score))
