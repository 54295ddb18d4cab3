import random
from datetime import datetime

import pytest

from app.core.exceptions import SimulationValidationError
from app.schemas.simulation import Role, SuccessCriteria, TargetRole
from app.services.career_simulation_engine import CareerSimulationEngine, career_simulation_engine

FIXED_DATE = datetime(2024, 5, 1, 12, 0, 0)


@pytest.fixture
def engine():
    return CareerSimulationEngine()


def test_without_targets_builds_current_track_and_industry_switch(engine, software_engineer, rng):
    simulation = engine.simulate(software_engineer, time_horizon=5, rng=rng)

    assert [p.path_id for p in simulation.paths] == ["current-track", "industry-switch"]

    current, switch = simulation.paths
    assert current.path_name == "Current Track"
    assert current.starting_salary == 100000
    assert switch.path_name == "Switch to Finance"
    assert switch.starting_role == "Software Engineer"
    assert switch.starting_salary == pytest.approx(90000)
    assert {m.industry for m in switch.scenarios.realistic.milestones} == {"Finance"}


def test_non_tech_industries_switch_into_technology(engine, rng):
    nurse = Role(title="Nurse", level="Mid", salary=70000, industry="Healthcare")
    simulation = engine.simulate(nurse, time_horizon=3, rng=rng)

    assert simulation.paths[1].path_name == "Switch to Technology"
    assert simulation.market_factors.industry_growth_rate == 0.08


def test_unknown_industry_uses_default_market(engine, rng):
    farmer = Role(title="Agronomist", level="Senior", salary=65000, industry="Agriculture")
    simulation = engine.simulate(farmer, time_horizon=3, rng=rng)

    assert simulation.market_factors.industry_growth_rate == 0.05
    assert simulation.market_factors.demand_trend == "stable"


@pytest.mark.parametrize("time_horizon", [1, 2, 10, 30])
def test_every_scenario_covers_the_horizon(engine, software_engineer, rng, time_horizon):
    simulation = engine.simulate(software_engineer, time_horizon=time_horizon, rng=rng)

    for path in simulation.paths:
        for scenario in path.scenarios.in_order():
            assert len(scenario.milestones) == time_horizon
            assert scenario.final_salary == scenario.milestones[-1].salary


@pytest.mark.parametrize("time_horizon", [0, -1, 31])
def test_out_of_range_horizon_is_rejected(engine, software_engineer, time_horizon):
    with pytest.raises(SimulationValidationError):
        engine.simulate(software_engineer, time_horizon=time_horizon)


def test_scores_stay_in_range(engine, software_engineer, rng):
    simulation = engine.simulate(software_engineer, time_horizon=30, rng=rng)

    for path in simulation.paths:
        assert 0 <= path.success_score <= 100
        assert 0 <= path.risk_score <= 100
        characteristics = path.path_characteristics.model_dump()
        assert all(0 <= value <= 100 for value in characteristics.values())

    assert 0 <= simulation.recommended_path.confidence <= 1


def test_recommendation_points_at_the_best_path(engine, software_engineer, rng):
    simulation = engine.simulate(software_engineer, time_horizon=10, rng=rng)

    recommended = simulation.get_path(simulation.recommended_path.path_id)
    assert recommended is not None
    assert recommended.success_score == max(p.success_score for p in simulation.paths)
    assert simulation.recommended_path.reasoning


def test_same_seed_same_simulation(engine, software_engineer):
    criteria = SuccessCriteria(target_salary=150000)
    first = engine.simulate(software_engineer, time_horizon=10, success_criteria=criteria,
                            rng=random.Random(11), simulation_date=FIXED_DATE)
    second = engine.simulate(software_engineer, time_horizon=10, success_criteria=criteria,
                             rng=random.Random(11), simulation_date=FIXED_DATE)

    assert first == second
    assert first.model_dump_json(by_alias=True) == second.model_dump_json(by_alias=True)


def test_target_roles_replace_the_industry_switch(engine, software_engineer, rng):
    targets = [
        TargetRole(job_id=42, title="Staff Engineer", company="Google", salary=180000, level="Lead"),
        TargetRole(title="Engineering Manager", company="Acme Labs"),
    ]
    simulation = engine.simulate(software_engineer, targets, time_horizon=8, rng=rng)

    assert [p.path_id for p in simulation.paths] == ["current-track", "target-42", "target-2"]

    google, acme = simulation.paths[1:]
    assert google.path_name == "Staff Engineer at Google"
    assert google.starting_salary == 180000
    assert google.company_stage == "enterprise"

    assert acme.path_name == "Engineering Manager at Acme Labs"
    assert acme.company_stage == "startup"
    # No salary on the target: 20% above the current one
    assert acme.starting_salary == 120000

    assert simulation.target_roles == targets


def test_target_without_title_or_company(engine, software_engineer, rng):
    simulation = engine.simulate(software_engineer, [TargetRole(salary=110000)], time_horizon=3, rng=rng)
    target_path = simulation.paths[1]

    assert target_path.path_name == "Software Engineer at Target Company"
    assert target_path.company_stage == "mature"


def test_years_to_target_comes_from_realistic_scenario(engine, software_engineer, rng):
    target = TargetRole(title="Senior Software Engineer", level="Senior")
    simulation = engine.simulate(software_engineer, [target], time_horizon=10, rng=rng)

    target_path = simulation.get_path("target-1")
    assert target_path.years_to_target_role == target_path.scenarios.realistic.years_to_goal
    assert target_path.years_to_target_role == 5
    # The current track has no target
    assert simulation.get_path("current-track").years_to_target_role is None


def test_simulation_is_immutable(engine, software_engineer, rng):
    simulation = engine.simulate(software_engineer, time_horizon=2, rng=rng)

    with pytest.raises(Exception):
        simulation.time_horizon = 5


def test_default_criteria_and_date(software_engineer, rng):
    simulation = career_simulation_engine.simulate(software_engineer, time_horizon=2, rng=rng, user_id=7)

    assert simulation.user_id == 7
    assert simulation.success_criteria == SuccessCriteria()
    assert isinstance(simulation.simulation_date, datetime)
