import logging
import random
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import PathNotFoundError, SimulationNotFoundError, SimulationValidationError
from app.db.crud import jobs as jobs_crud
from app.db.crud import simulations as simulations_crud
from app.db.crud import users as users_crud
from app.db.models.user import User
from app.schemas.simulation import (
    CurrentRoleInput,
    Role,
    Simulation,
    SimulationRequest,
    SimulationSummary,
    TargetRole,
)
from app.services.career_simulation_engine import CareerSimulationEngine, career_simulation_engine
from app.simulation.insights import (
    compare_paths,
    compare_with_current_track,
    compare_with_recommended,
    get_decision_points,
)
from app.simulation.levels import normalize_level

logger = logging.getLogger(__name__)

MISSING_ROLE_MESSAGE = "Current role with title and salary is required"


def parse_simulation_request(payload: Union[Dict[str, Any], SimulationRequest]) -> SimulationRequest:
    """
    Validates a raw request (camelCase or snake_case keys).
    Raises SimulationValidationError before any simulation work is done.
    """
    if isinstance(payload, SimulationRequest):
        return payload

    current_role = (payload or {}).get("currentRole") or (payload or {}).get("current_role")
    if not isinstance(current_role, dict) or not current_role.get("title") or not current_role.get("salary"):
        raise SimulationValidationError(MISSING_ROLE_MESSAGE)

    try:
        return SimulationRequest.model_validate(payload)
    except ValidationError as e:
        raise SimulationValidationError(
            f"Invalid career simulation request: {e.error_count()} validation error(s)",
            errors=e.errors(include_url=False)
        ) from e


class CareerSimulationService:
    """
    Entry point used by the outer layers.
    Resolves collaborators (user profile, saved jobs), runs the engine and
    persists the resulting document. Lookups run before the computation and
    the write runs after it.
    """

    def __init__(self, engine: CareerSimulationEngine = career_simulation_engine):
        self.engine = engine

    # =========================================================
    # CREATE
    # =========================================================
    def create_simulation(
        self,
        db: Session,
        user_id: int,
        payload: Union[Dict[str, Any], SimulationRequest],
        rng: Optional[random.Random] = None
    ) -> Simulation:
        request = parse_simulation_request(payload)

        user = users_crud.get_user(db, user_id)
        current_role = self.enrich_current_role(request.current_role, user)
        target_roles = [self.resolve_target_role(db, t, current_role) for t in request.target_roles]

        simulation = self.engine.simulate(
            current_role=current_role,
            target_roles=target_roles,
            time_horizon=request.time_horizon,
            success_criteria=request.success_criteria,
            rng=rng,
            user_id=user_id
        )

        record = simulations_crud.create_simulation(db, user_id, simulation)
        logger.info(f"Career simulation {record.id} created for user {user_id} ({len(simulation.paths)} paths)")
        return simulation.model_copy(update={"id": record.id})

    def enrich_current_role(self, role: CurrentRoleInput, user: Optional[User]) -> Role:
        profile = user.career_profile if user else None

        level = normalize_level(
            role.level or (profile.experience_level if profile else None),
            default=settings.DEFAULT_LEVEL
        )
        industry = role.industry or (profile.industry if profile else None) or settings.DEFAULT_INDUSTRY

        years_of_experience = role.years_of_experience
        if years_of_experience is None:
            if user and user.employment_history:
                years_of_experience = users_crud.calculate_total_experience(user.employment_history)
            else:
                years_of_experience = settings.DEFAULT_YEARS_OF_EXPERIENCE

        return Role(
            title=role.title,
            level=level,
            salary=role.salary,
            company=role.company,
            industry=industry,
            years_of_experience=years_of_experience
        )

    def resolve_target_role(self, db: Session, target: TargetRole, current_role: Role) -> TargetRole:
        """Fills a target from the saved job it references; any lookup problem keeps the target as sent."""
        if target.job_id is None:
            return target

        try:
            job = jobs_crud.get_job(db, int(target.job_id))
        except (ValueError, SQLAlchemyError) as e:
            logger.warning(f"Could not look up job {target.job_id} for target role, using it as given: {e}")
            return target

        if not job:
            logger.warning(f"Job {target.job_id} not found, using target role as given")
            return target

        return TargetRole(
            job_id=job.id,
            title=job.title,
            company=job.company,
            # No salary on the posting: the engine applies its own fallback
            salary=job.salary_min or job.salary_max,
            industry=job.industry or current_role.industry,
            level=target.level
        )

    # =========================================================
    # READ
    # =========================================================
    def get_simulation(self, db: Session, user_id: int, simulation_id: int) -> Simulation:
        record = simulations_crud.get_simulation(db, simulation_id, user_id)
        if not record:
            raise SimulationNotFoundError(simulation_id)
        return simulations_crud.to_schema(record)

    def list_simulations(self, db: Session, user_id: int, limit: Optional[int] = None) -> List[SimulationSummary]:
        records = simulations_crud.list_user_simulations(
            db, user_id, limit=limit or settings.SIMULATION_HISTORY_LIMIT
        )
        summaries = []
        for record in records:
            simulation = simulations_crud.to_schema(record)
            summaries.append(SimulationSummary(
                id=simulation.id,
                current_role=simulation.current_role,
                time_horizon=simulation.time_horizon,
                path_count=len(simulation.paths),
                recommended_path=simulation.recommended_path,
                simulation_date=simulation.simulation_date
            ))
        return summaries

    def get_path_details(self, db: Session, user_id: int, simulation_id: int, path_id: str) -> Dict[str, Any]:
        simulation = self.get_simulation(db, user_id, simulation_id)
        path = simulation.get_path(path_id)
        if path is None:
            raise PathNotFoundError(path_id)

        return {
            "path": path,
            "decisionPoints": get_decision_points(simulation, path_id),
            "comparison": {
                "vsCurrentTrack": compare_with_current_track(simulation, path),
                "vsRecommended": compare_with_recommended(simulation, path),
            }
        }

    def compare_paths(
        self,
        db: Session,
        user_id: int,
        simulation_id: int,
        path_ids: Optional[Sequence[str]] = None
    ) -> Dict[str, List[Dict]]:
        simulation = self.get_simulation(db, user_id, simulation_id)
        return compare_paths(simulation.paths, path_ids)

    # =========================================================
    # DELETE
    # =========================================================
    def delete_simulation(self, db: Session, user_id: int, simulation_id: int) -> int:
        if not simulations_crud.delete_simulation(db, simulation_id, user_id):
            raise SimulationNotFoundError(simulation_id)
        logger.info(f"Career simulation {simulation_id} deleted for user {user_id}")
        return simulation_id


# ---------------------------------------------------------
# SERVICE INSTANCE
# ---------------------------------------------------------
career_simulation_service = CareerSimulationService()
