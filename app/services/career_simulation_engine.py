import logging
import random
from datetime import datetime
from typing import List, Optional, Sequence

from app.core.config import settings
from app.core.exceptions import SimulationValidationError
from app.core.utils import round_half_up
from app.schemas.simulation import (
    CareerPath,
    MarketFactors,
    Role,
    Simulation,
    SuccessCriteria,
    TargetRole,
)
from app.simulation.insights import CURRENT_TRACK_ID
from app.simulation.market import get_market_factors, infer_company_stage
from app.simulation.paths import average_salary_growth_rate, build_path
from app.simulation.recommendation import recommend_path
from app.simulation.scoring import (
    calculate_path_characteristics,
    calculate_risk_score,
    calculate_success_score,
)

logger = logging.getLogger(__name__)


class CareerSimulationEngine:
    """
    Builds the candidate paths for a person's career and recommends one.

    Candidates:
    1. Current track (same role, same industry).
    2. One path per target role, starting from that role.
    3. Without target roles, a synthetic industry switch.

    The engine only works with already-resolved roles; profile and job
    lookups happen in the service layer before `simulate` is called.
    """

    INDUSTRY_SWITCH_ID = "industry-switch"
    INDUSTRY_SWITCH_SALARY_FACTOR = 0.9  # typical pay cut when changing industry
    TARGET_SALARY_FALLBACK_FACTOR = 1.2  # target without a known salary

    def simulate(
        self,
        current_role: Role,
        target_roles: Sequence[TargetRole] = (),
        time_horizon: int = settings.DEFAULT_TIME_HORIZON,
        success_criteria: Optional[SuccessCriteria] = None,
        rng: Optional[random.Random] = None,
        simulation_date: Optional[datetime] = None,
        user_id: Optional[int] = None
    ) -> Simulation:
        if not settings.MIN_TIME_HORIZON <= time_horizon <= settings.MAX_TIME_HORIZON:
            raise SimulationValidationError(
                f"Time horizon must be between {settings.MIN_TIME_HORIZON} "
                f"and {settings.MAX_TIME_HORIZON} years"
            )

        # Every run owns its generator; never the module-level random state
        rng = rng or random.Random(settings.SIMULATION_SEED)
        criteria = success_criteria or SuccessCriteria()
        market_factors = get_market_factors(current_role.industry)

        paths: List[CareerPath] = [
            self.generate_path(
                CURRENT_TRACK_ID,
                "Current Track",
                current_role,
                None,
                time_horizon,
                market_factors,
                criteria,
                rng
            )
        ]

        for position, target_role in enumerate(target_roles, start=1):
            starting_role = self._starting_role_for_target(current_role, target_role)
            path_id = f"target-{target_role.job_id if target_role.job_id is not None else position}"
            path_name = f"{starting_role.title} at {target_role.company or 'Target Company'}"

            paths.append(self.generate_path(
                path_id,
                path_name,
                starting_role,
                target_role,
                time_horizon,
                market_factors,
                criteria,
                rng
            ))

        if not target_roles:
            alternative_industry = self.alternative_industry(current_role.industry)
            switched_role = current_role.model_copy(update={
                "industry": alternative_industry,
                "salary": current_role.salary * self.INDUSTRY_SWITCH_SALARY_FACTOR
            })
            paths.append(self.generate_path(
                self.INDUSTRY_SWITCH_ID,
                f"Switch to {alternative_industry}",
                switched_role,
                None,
                time_horizon,
                get_market_factors(alternative_industry),
                criteria,
                rng
            ))

        recommended = recommend_path(paths)
        logger.info(
            f"Simulated {len(paths)} career paths over {time_horizon} years; "
            f"recommended '{recommended.path_id}' (confidence {recommended.confidence:.2f})"
        )

        return Simulation(
            user_id=user_id,
            current_role=current_role,
            target_roles=list(target_roles),
            time_horizon=time_horizon,
            success_criteria=criteria,
            paths=paths,
            recommended_path=recommended,
            market_factors=market_factors,
            simulation_date=simulation_date or datetime.utcnow()
        )

    def generate_path(
        self,
        path_id: str,
        path_name: str,
        starting_role: Role,
        target_role: Optional[TargetRole],
        time_horizon: int,
        market_factors: MarketFactors,
        success_criteria: SuccessCriteria,
        rng: random.Random
    ) -> CareerPath:
        projection = build_path(starting_role, target_role, time_horizon, market_factors, rng)
        scenarios = projection.scenarios

        path = CareerPath(
            path_id=path_id,
            path_name=path_name,
            starting_role=starting_role.title,
            starting_salary=starting_role.salary,
            company_stage=infer_company_stage(starting_role.company),
            scenarios=scenarios,
            expected_lifetime_earnings=projection.expected_lifetime_earnings,
            average_salary_growth_rate=average_salary_growth_rate(scenarios.realistic),
            years_to_target_role=scenarios.realistic.years_to_goal
        )

        # Success needs the characteristics; risk only needs the scenarios
        path = path.model_copy(update={
            "path_characteristics": calculate_path_characteristics(path, market_factors)
        })
        return path.model_copy(update={
            "success_score": calculate_success_score(path, success_criteria),
            "risk_score": calculate_risk_score(path, market_factors)
        })

    def _starting_role_for_target(self, current_role: Role, target_role: TargetRole) -> Role:
        salary = target_role.salary
        if salary is None:
            salary = round_half_up(current_role.salary * self.TARGET_SALARY_FALLBACK_FACTOR)

        return current_role.model_copy(update={
            "title": target_role.title or current_role.title,
            "company": target_role.company,
            "salary": salary,
            "industry": target_role.industry or current_role.industry
        })

    @staticmethod
    def alternative_industry(industry: str) -> str:
        return "Finance" if industry == "Technology" else "Technology"


# ---------------------------------------------------------
# SERVICE INSTANCE
# ---------------------------------------------------------
career_simulation_engine = CareerSimulationEngine()
