from pydantic_settings import BaseSettings
from pydantic import field_validator, ValidationInfo, model_validator
from typing import Optional, Any

class Settings(BaseSettings):
    # App
    APP_NAME: str = "Career Path Simulator"
    ENVIRONMENT: str = "development" # development, production, test
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./career_simulations.db"
    POSTGRES_URL: Optional[str] = None

    @model_validator(mode='before')
    @classmethod
    def check_database_url(cls, data: Any) -> Any:
        if isinstance(data, dict):
            if not data.get("DATABASE_URL") and data.get("POSTGRES_URL"):
                data["DATABASE_URL"] = data.get("POSTGRES_URL")
        return data

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def assemble_db_connection(cls, v: Optional[str], info: ValidationInfo) -> str:
        if isinstance(v, str):
            if v.startswith("postgres://"):
                return v.replace("postgres://", "postgresql://", 1)
        return v

    # Simulation defaults
    DEFAULT_TIME_HORIZON: int = 10
    MIN_TIME_HORIZON: int = 1
    MAX_TIME_HORIZON: int = 30
    DEFAULT_INDUSTRY: str = "Technology"
    DEFAULT_LEVEL: str = "Mid"
    DEFAULT_YEARS_OF_EXPERIENCE: int = 3

    # Fixed seed makes every run reproducible (tests, demos). None = fresh entropy per run.
    SIMULATION_SEED: Optional[int] = None

    # How many simulations the history listing returns
    SIMULATION_HISTORY_LIMIT: int = 10

    class Config:
        env_file = ".env"
        extra = "ignore" # Prevent crash on extra env vars

settings = Settings()
