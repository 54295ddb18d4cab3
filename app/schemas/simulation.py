from typing import List, Literal, Optional, Union
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

CareerLevel = Literal["Entry", "Mid", "Senior", "Lead", "Principal", "Executive"]
EconomicCondition = Literal["recession", "recovery", "stable", "growth", "boom"]
DemandTrend = Literal["declining", "stable", "growing", "explosive"]
ScenarioType = Literal["optimistic", "realistic", "pessimistic"]


class CamelModel(BaseModel):
    # Serialized form (persistence / export) keeps the camelCase field names
    # used by the existing documents; Python code uses snake_case.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Request Schemas ---

class CurrentRoleInput(CamelModel):
    title: str = Field(min_length=1)
    salary: float = Field(gt=0)
    level: Optional[str] = None  # free text, normalized during enrichment
    industry: Optional[str] = None
    company: Optional[str] = None
    years_of_experience: Optional[float] = Field(default=None, ge=0)


class TargetRole(CamelModel):
    job_id: Optional[Union[int, str]] = None
    title: Optional[str] = None
    company: Optional[str] = None
    salary: Optional[float] = Field(default=None, gt=0)
    industry: Optional[str] = None
    level: Optional[CareerLevel] = None


class SuccessCriteria(CamelModel):
    target_salary: Optional[float] = Field(default=None, gt=0)
    target_title: Optional[str] = None
    # User-supplied fractions, intended to sum to ~1 but never normalized
    work_life_balance_weight: float = 0.33
    learning_opportunities_weight: float = 0.33
    impact_weight: float = 0.34
    geographic_preference: Optional[str] = None
    industry_preference: Optional[List[str]] = None


class SimulationRequest(CamelModel):
    current_role: CurrentRoleInput
    target_roles: List[TargetRole] = Field(default_factory=list)
    time_horizon: int = Field(default=10, ge=1, le=30)
    success_criteria: Optional[SuccessCriteria] = None


# --- Simulation Records ---

class Role(CamelModel):
    title: str = Field(min_length=1)
    level: CareerLevel = "Mid"
    salary: float = Field(gt=0)
    company: Optional[str] = None
    industry: str = "Technology"
    years_of_experience: Optional[float] = None


class MarketFactors(CamelModel):
    industry_growth_rate: float
    economic_condition: EconomicCondition
    automation_risk: float = Field(ge=0, le=1)
    demand_trend: DemandTrend


class CareerMilestone(CamelModel):
    year: int = Field(ge=1)
    title: str
    level: CareerLevel
    salary: int
    company: Optional[str] = None
    industry: Optional[str] = None
    probability: float = Field(ge=0, le=1)


class DecisionPoint(CamelModel):
    year: int
    decision: str
    impact: str
    alternative_path: str


class ScenarioOutcome(CamelModel):
    scenario_type: ScenarioType
    total_earnings: int
    final_title: str
    final_salary: int
    years_to_goal: Optional[int] = None
    milestones: List[CareerMilestone]
    key_decision_points: List[DecisionPoint] = Field(default_factory=list)


class PathScenarios(CamelModel):
    optimistic: ScenarioOutcome
    realistic: ScenarioOutcome
    pessimistic: ScenarioOutcome

    def in_order(self) -> List[ScenarioOutcome]:
        return [self.optimistic, self.realistic, self.pessimistic]


class PathCharacteristics(CamelModel):
    stability_score: int = Field(ge=0, le=100)
    growth_potential: int = Field(ge=0, le=100)
    learning_curve: int = Field(ge=0, le=100)
    work_life_balance: int = Field(ge=0, le=100)
    market_demand: int = Field(ge=0, le=100)


class CareerPath(CamelModel):
    path_id: str
    path_name: str
    starting_role: str
    starting_salary: float
    company_stage: Optional[str] = None
    scenarios: PathScenarios
    expected_lifetime_earnings: float
    average_salary_growth_rate: float
    years_to_target_role: Optional[int] = None
    risk_score: int = 0
    success_score: int = 0
    path_characteristics: Optional[PathCharacteristics] = None


class RecommendedPath(CamelModel):
    path_id: str
    reasoning: str
    confidence: float = Field(ge=0, le=1)


class Simulation(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: Optional[int] = None
    user_id: Optional[int] = None
    current_role: Role
    target_roles: List[TargetRole] = Field(default_factory=list)
    time_horizon: int = Field(ge=1, le=30)
    success_criteria: SuccessCriteria
    paths: List[CareerPath]
    recommended_path: RecommendedPath
    market_factors: MarketFactors
    simulation_date: datetime

    def get_path(self, path_id: str) -> Optional[CareerPath]:
        return next((p for p in self.paths if p.path_id == path_id), None)


# --- Read-side Responses ---

class SimulationSummary(CamelModel):
    id: int
    current_role: Role
    time_horizon: int
    path_count: int
    recommended_path: RecommendedPath
    simulation_date: datetime
