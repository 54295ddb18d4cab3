"""
Read-side helpers over a finished simulation: merged decision points and
side-by-side path comparisons. Nothing here changes the simulation.
"""
from typing import Dict, List, Optional, Sequence

from app.core.exceptions import PathNotFoundError
from app.core.utils import round_to
from app.schemas.simulation import CareerPath, DecisionPoint, Simulation

CURRENT_TRACK_ID = "current-track"


def get_decision_points(simulation: Simulation, path_id: str) -> List[DecisionPoint]:
    """
    Decision points of every scenario of a path, one per year, oldest first.
    Scenarios are merged optimistic -> realistic -> pessimistic, so for a
    shared year the later scenario's entry is kept.
    """
    path = simulation.get_path(path_id)
    if path is None:
        raise PathNotFoundError(path_id)

    by_year: Dict[int, DecisionPoint] = {}
    for scenario in path.scenarios.in_order():
        for dp in scenario.key_decision_points:
            by_year[dp.year] = dp

    return [by_year[year] for year in sorted(by_year)]


def _difference(path: CareerPath, baseline: CareerPath) -> Dict:
    earnings_difference = path.expected_lifetime_earnings - baseline.expected_lifetime_earnings
    return {
        "earningsDifference": earnings_difference,
        "earningsPercentage": round_to(earnings_difference / baseline.expected_lifetime_earnings * 100, 1),
        "riskDifference": path.risk_score - baseline.risk_score,
        "successScoreDifference": path.success_score - baseline.success_score,
    }


def compare_with_current_track(simulation: Simulation, path: CareerPath) -> Optional[Dict]:
    current_track = simulation.get_path(CURRENT_TRACK_ID)
    if current_track is None or path.path_id == CURRENT_TRACK_ID:
        return None
    return _difference(path, current_track)


def compare_with_recommended(simulation: Simulation, path: CareerPath) -> Optional[Dict]:
    if simulation.recommended_path.path_id == path.path_id:
        return None

    recommended = simulation.get_path(simulation.recommended_path.path_id)
    if recommended is None:
        return None
    return _difference(path, recommended)


def compare_paths(paths: Sequence[CareerPath], path_ids: Optional[Sequence[str]] = None) -> Dict[str, List[Dict]]:
    selected = [p for p in paths if p.path_id in path_ids] if path_ids else list(paths)

    by_earnings = sorted(
        (
            {
                "pathId": p.path_id,
                "pathName": p.path_name,
                "expectedLifetimeEarnings": p.expected_lifetime_earnings,
                "finalSalary": p.scenarios.realistic.final_salary,
            }
            for p in selected
        ),
        key=lambda item: item["expectedLifetimeEarnings"],
        reverse=True
    )

    by_risk = sorted(
        (
            {
                "pathId": p.path_id,
                "pathName": p.path_name,
                "riskScore": p.risk_score,
                "stabilityScore": p.path_characteristics.stability_score if p.path_characteristics else None,
            }
            for p in selected
        ),
        key=lambda item: item["riskScore"]
    )

    by_success = sorted(
        (
            {
                "pathId": p.path_id,
                "pathName": p.path_name,
                "successScore": p.success_score,
                "characteristics": (
                    p.path_characteristics.model_dump(by_alias=True) if p.path_characteristics else None
                ),
            }
            for p in selected
        ),
        key=lambda item: item["successScore"],
        reverse=True
    )

    return {
        "byEarnings": by_earnings,
        "byRisk": by_risk,
        "bySuccessScore": by_success,
    }
