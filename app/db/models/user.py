from sqlalchemy import Column, Integer, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.db.base_class import Base

class User(Base):
    __tablename__ = "users"

    # --- Identidade Core ---
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    full_name = Column(String, nullable=True)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # --- Relacionamentos ---

    # 1. Perfil de Carreira (One-to-One)
    # Source of the experience level used to enrich simulations
    career_profile = relationship("CareerProfile", back_populates="user", uselist=False, cascade="all, delete-orphan")

    # 2. Histórico de Emprego (One-to-Many)
    # Used to derive total years of experience
    employment_history = relationship("EmploymentRecord", back_populates="user", cascade="all, delete-orphan")

    # 3. Simulações de Carreira (One-to-Many)
    career_simulations = relationship("CareerSimulation", back_populates="user", cascade="all, delete-orphan")
