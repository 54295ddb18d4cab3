import random
from typing import NamedTuple, Optional

from app.core.exceptions import ComputationGuardError
from app.core.utils import round_half_up
from app.schemas.simulation import MarketFactors, PathScenarios, Role, ScenarioOutcome, TargetRole
from app.simulation.scenario import generate_scenario

# Blend used for expected lifetime earnings
REALISTIC_WEIGHT = 0.6
OPTIMISTIC_WEIGHT = 0.25
PESSIMISTIC_WEIGHT = 0.15


class PathProjection(NamedTuple):
    scenarios: PathScenarios
    expected_lifetime_earnings: float


def blend_earnings(scenarios: PathScenarios) -> float:
    return (
        REALISTIC_WEIGHT * scenarios.realistic.total_earnings
        + OPTIMISTIC_WEIGHT * scenarios.optimistic.total_earnings
        + PESSIMISTIC_WEIGHT * scenarios.pessimistic.total_earnings
    )


def build_path(
    starting_role: Role,
    target_role: Optional[TargetRole],
    time_horizon: int,
    market_factors: Optional[MarketFactors],
    rng: random.Random
) -> PathProjection:
    """Runs the three scenario types (in a fixed order, sharing `rng`) and blends their earnings."""
    scenarios = PathScenarios(
        optimistic=generate_scenario(starting_role, target_role, time_horizon, market_factors, "optimistic", rng),
        realistic=generate_scenario(starting_role, target_role, time_horizon, market_factors, "realistic", rng),
        pessimistic=generate_scenario(starting_role, target_role, time_horizon, market_factors, "pessimistic", rng),
    )
    return PathProjection(scenarios, blend_earnings(scenarios))


def average_salary_growth_rate(scenario: ScenarioOutcome) -> float:
    """Compound annual growth between the first and last milestone, as a percentage (1 decimal)."""
    milestones = scenario.milestones
    if len(milestones) < 2:
        return 0.0

    first_salary = milestones[0].salary
    last_salary = milestones[-1].salary
    years = len(milestones)

    if first_salary <= 0:
        raise ComputationGuardError("First milestone salary must be positive to compute growth")

    total_growth = (last_salary - first_salary) / first_salary
    annual_growth = (1 + total_growth) ** (1 / years) - 1
    return round_half_up(annual_growth * 1000) / 10
