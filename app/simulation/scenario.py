"""
Year-by-year projection of a single career scenario.

Each scenario type (optimistic / realistic / pessimistic) keeps the same
shape - annual raise, promotion when the level's typical tenure is reached,
occasional job switch, market adjustment - and only changes the multipliers.
All randomness comes from the `rng` argument, so a seeded random.Random
reproduces a scenario exactly.
"""
import random
from typing import List, NamedTuple, Optional

from app.core.exceptions import SimulationValidationError
from app.core.utils import round_half_up
from app.schemas.simulation import (
    CareerMilestone,
    DecisionPoint,
    MarketFactors,
    Role,
    ScenarioOutcome,
    TargetRole,
)
from app.simulation.levels import get_level_progression
from app.simulation.market import calculate_market_impact
from app.simulation.titles import next_title


class ScenarioMultipliers(NamedTuple):
    progression_speed: float   # scales the typical years spent in a level
    salary: float              # scales every raise / bump
    probability: float         # display weight stored on each milestone
    switch_probability: float  # yearly chance of a job switch


SCENARIO_MULTIPLIERS = {
    "optimistic": ScenarioMultipliers(0.8, 1.15, 0.75, 0.25),
    "realistic": ScenarioMultipliers(1.0, 1.0, 0.5, 0.15),
    "pessimistic": ScenarioMultipliers(1.3, 0.90, 0.25, 0.08),
}

SCENARIO_TYPES = ("optimistic", "realistic", "pessimistic")

BASE_ANNUAL_RAISE = 0.03
ANNUAL_RAISE_SPREAD = 0.02
JOB_SWITCH_BONUS = 0.15
JOB_SWITCH_MIN_YEAR = 2


def generate_scenario(
    starting_role: Role,
    target_role: Optional[TargetRole],
    time_horizon: int,
    market_factors: Optional[MarketFactors],
    scenario_type: str,
    rng: random.Random
) -> ScenarioOutcome:
    if scenario_type not in SCENARIO_MULTIPLIERS:
        raise ValueError(f"Unknown scenario type: {scenario_type}")
    if time_horizon < 1:
        raise SimulationValidationError("Time horizon must be at least 1 year")

    mult = SCENARIO_MULTIPLIERS[scenario_type]
    market_impact = calculate_market_impact(market_factors)

    milestones: List[CareerMilestone] = []
    key_decision_points: List[DecisionPoint] = []

    current_level = starting_role.level
    current_salary = starting_role.salary
    current_title = starting_role.title
    years_in_level = 0
    total_earnings = 0.0

    for year in range(1, time_horizon + 1):
        # Paid this year's salary before next year's raise kicks in
        total_earnings += current_salary

        # Annual raise (cost of living + performance)
        annual_raise = current_salary * (BASE_ANNUAL_RAISE + rng.uniform(0, ANNUAL_RAISE_SPREAD)) * mult.salary
        current_salary += annual_raise

        # Level progression
        progression = get_level_progression(current_level)
        if progression and progression.next_level:
            progression_years = round_half_up(progression.typical_years * mult.progression_speed)
            if years_in_level >= progression_years:
                current_level = progression.next_level
                current_salary = round_half_up(current_salary * (1 + progression.salary_growth * mult.salary))
                current_title = next_title(current_title, current_level)
                years_in_level = 0

                key_decision_points.append(DecisionPoint(
                    year=year,
                    decision=f"Promotion to {current_level}",
                    impact=f"Salary increase to ${current_salary:,}",
                    alternative_path="Stay at current level or switch companies"
                ))

        # Job switch (drawn every year to keep the random stream aligned)
        switch_roll = rng.random()
        if switch_roll < mult.switch_probability and year >= JOB_SWITCH_MIN_YEAR:
            switch_bonus = JOB_SWITCH_BONUS * mult.salary
            current_salary = round_half_up(current_salary * (1 + switch_bonus))

            key_decision_points.append(DecisionPoint(
                year=year,
                decision="Job switch opportunity",
                impact=f"{round_half_up(switch_bonus * 100)}% salary increase",
                alternative_path="Stay with current employer"
            ))

        current_salary = round_half_up(current_salary * market_impact)

        milestones.append(CareerMilestone(
            year=year,
            title=current_title,
            level=current_level,
            salary=current_salary,
            company=starting_role.company,
            industry=starting_role.industry,
            probability=mult.probability
        ))
        years_in_level += 1

    last = milestones[-1]
    return ScenarioOutcome(
        scenario_type=scenario_type,
        total_earnings=round_half_up(total_earnings),
        final_title=last.title,
        final_salary=last.salary,
        years_to_goal=calculate_years_to_goal(milestones, target_role) if target_role else None,
        milestones=milestones,
        key_decision_points=key_decision_points
    )


def calculate_years_to_goal(milestones: List[CareerMilestone], target_role: Optional[TargetRole]) -> Optional[int]:
    """1-indexed year in which the target level or salary is first reached, None if never."""
    if not target_role:
        return None

    for index, milestone in enumerate(milestones):
        if target_role.level is not None and milestone.level == target_role.level:
            return index + 1
        if target_role.salary is not None and milestone.salary >= target_role.salary:
            return index + 1

    return None
