import logging
from typing import List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import SimulationStorageError
from app.db.models.career_simulation import CareerSimulation
from app.schemas.simulation import Simulation

logger = logging.getLogger(__name__)

def _dump(model) -> dict:
    return model.model_dump(mode="json", by_alias=True)

def to_schema(record: CareerSimulation) -> Simulation:
    """Rebuilds the immutable Simulation document from its stored row."""
    return Simulation(
        id=record.id,
        user_id=record.user_id,
        current_role=record.current_role,
        target_roles=record.target_roles or [],
        time_horizon=record.time_horizon,
        success_criteria=record.success_criteria,
        paths=record.paths,
        recommended_path=record.recommended_path,
        market_factors=record.market_factors,
        simulation_date=record.simulation_date
    )

def create_simulation(db: Session, user_id: int, simulation: Simulation) -> CareerSimulation:
    record = CareerSimulation(
        user_id=user_id,
        current_role=_dump(simulation.current_role),
        target_roles=[_dump(t) for t in simulation.target_roles],
        time_horizon=simulation.time_horizon,
        success_criteria=_dump(simulation.success_criteria),
        paths=[_dump(p) for p in simulation.paths],
        recommended_path=_dump(simulation.recommended_path),
        market_factors=_dump(simulation.market_factors),
        simulation_date=simulation.simulation_date
    )
    try:
        db.add(record)
        db.commit()
        db.refresh(record)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error saving career simulation for user {user_id}: {e}")
        raise SimulationStorageError(f"Failed to create career simulation: {e}") from e
    return record

def get_simulation(db: Session, simulation_id: int, user_id: int) -> CareerSimulation | None:
    return (
        db.query(CareerSimulation)
        .filter(CareerSimulation.id == simulation_id, CareerSimulation.user_id == user_id)
        .first()
    )

def list_user_simulations(db: Session, user_id: int, limit: int = 10) -> List[CareerSimulation]:
    return (
        db.query(CareerSimulation)
        .filter(CareerSimulation.user_id == user_id)
        .order_by(CareerSimulation.simulation_date.desc(), CareerSimulation.id.desc())
        .limit(limit)
        .all()
    )

def delete_simulation(db: Session, simulation_id: int, user_id: int) -> bool:
    record = get_simulation(db, simulation_id, user_id)
    if not record:
        return False
    try:
        db.delete(record)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting career simulation {simulation_id}: {e}")
        raise SimulationStorageError(f"Failed to delete career simulation: {e}") from e
    return True
