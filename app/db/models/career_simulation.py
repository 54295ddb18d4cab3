from sqlalchemy import Column, Integer, ForeignKey, JSON, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from app.db.base_class import Base

class CareerSimulation(Base):
    """
    Persisted career path simulation.
    Written once when the simulation is created and never recomputed in place;
    re-running with other inputs creates a new row.
    """
    __tablename__ = "career_simulations"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # --- Inputs (camelCase JSON documents) ---
    current_role = Column(JSON, nullable=False)
    target_roles = Column(JSON, default=[])
    time_horizon = Column(Integer, nullable=False, default=10)
    success_criteria = Column(JSON, nullable=False)

    # --- Results ---
    paths = Column(JSON, nullable=False)
    recommended_path = Column(JSON, nullable=False)
    market_factors = Column(JSON, nullable=False)

    simulation_date = Column(DateTime, default=datetime.utcnow, index=True)

    user = relationship("User", back_populates="career_simulations")
