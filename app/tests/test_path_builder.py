import random
import pytest

from app.core.exceptions import ComputationGuardError
from app.schemas.simulation import CareerMilestone, PathScenarios, ScenarioOutcome, TargetRole
from app.simulation.market import get_market_factors
from app.simulation.paths import average_salary_growth_rate, blend_earnings, build_path
from app.simulation.scenario import generate_scenario
from app.tests.factories import make_outcome


def outcome_with_salaries(*salaries):
    return ScenarioOutcome(
        scenario_type="realistic",
        total_earnings=sum(salaries),
        final_title="Engineer",
        final_salary=salaries[-1],
        milestones=[
            CareerMilestone(year=i + 1, title="Engineer", level="Mid", salary=s, probability=0.5)
            for i, s in enumerate(salaries)
        ]
    )


def test_build_path_runs_scenarios_in_fixed_order(software_engineer):
    market = get_market_factors("Technology")
    projection = build_path(software_engineer, None, 5, market, random.Random(3))

    rng = random.Random(3)
    expected = [
        generate_scenario(software_engineer, None, 5, market, scenario_type, rng)
        for scenario_type in ("optimistic", "realistic", "pessimistic")
    ]

    assert projection.scenarios.in_order() == expected


def test_expected_earnings_blend_is_not_rounded():
    scenarios = PathScenarios(
        optimistic=make_outcome("optimistic", 40),
        realistic=make_outcome("realistic", 20),
        pessimistic=make_outcome("pessimistic", 10),
    )
    # totals are 200 / 100 / 50
    assert blend_earnings(scenarios) == pytest.approx(117.5)


def test_expected_earnings_sit_between_extremes(software_engineer, rng):
    projection = build_path(software_engineer, None, 10, get_market_factors("Technology"), rng)
    totals = [s.total_earnings for s in projection.scenarios.in_order()]

    assert min(totals) <= projection.expected_lifetime_earnings <= max(totals)


def test_target_role_reaches_every_scenario(software_engineer, rng):
    target = TargetRole(title="Senior Software Engineer", level="Senior")
    projection = build_path(software_engineer, target, 10, get_market_factors("Technology"), rng)

    # Realistic Mid -> Senior happens at year 5 at the latest
    assert projection.scenarios.realistic.years_to_goal == 5
    assert projection.scenarios.optimistic.years_to_goal <= 5


def test_average_growth_rate_is_compound_and_rounded():
    # +21% over 2 years = 10% per year
    assert average_salary_growth_rate(outcome_with_salaries(100000, 121000)) == 10.0


def test_average_growth_rate_keeps_one_decimal():
    rate = average_salary_growth_rate(outcome_with_salaries(100000, 103000, 106000, 110000))
    # (1.10) ** (1/4) - 1 = 2.41%
    assert rate == 2.4


def test_average_growth_rate_of_single_year_is_zero():
    assert average_salary_growth_rate(outcome_with_salaries(100000)) == 0.0


def test_average_growth_rate_rejects_zero_salary():
    with pytest.raises(ComputationGuardError):
        average_salary_growth_rate(outcome_with_salaries(0, 50000))
