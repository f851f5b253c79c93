from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

CityTier = Literal["tier1", "tier2", "tier3"]
ShockPresetType = Literal["medical", "market", "education", "vehicle"]


class ShockModel(BaseModel):
    amount: float = Field(gt=0)
    year: int
    type: str = "custom"


class MilestoneModel(BaseModel):
    year: int
    amount: float = Field(gt=0)
    label: str = ""


class Goals(BaseModel):
    wedding_year: Optional[int] = None
    wedding_cost: Optional[float] = Field(default=None, ge=0)
    house_year: Optional[int] = None
    house_cost: Optional[float] = Field(default=None, ge=0)


class Profile(BaseModel):
    net_worth: float = Field(ge=0, default=500_000)
    city_tier: CityTier = "tier1"
    discretionary_spend_k: Optional[float] = Field(default=None, ge=0)
    savings_habit_delta: float = Field(ge=0, le=100, default=0.0)


class ProjectionRequest(BaseModel):
    profile: Profile = Profile()
    goals: Goals = Goals()
    milestones: List[MilestoneModel] = []
    shock: Optional[ShockModel] = None
    shock_preset: Optional[ShockPresetType] = None
    seed: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _one_shock(self):
        if self.shock is not None and self.shock_preset is not None:
            raise ValueError("provide either shock or shock_preset, not both")
        return self


class ScoreRequest(BaseModel):
    profile: Profile = Profile()
    shock_active: bool = False


class ChartPoint(BaseModel):
    year: int
    status_quo: int
    optimized: int
    label: str


class MedianPoint(BaseModel):
    year: int
    status_quo_median: float
    optimized_median: float


class ScoreResponse(BaseModel):
    health_score: int
    health_band: str
    city_tier: str
    discretionary_spend_k: float
    shock_capacity: float
    shock_capacity_display: str


class ShockPreset(BaseModel):
    type: ShockPresetType
    label: str
    amount: float
    year: int


class ProjectionResponse(BaseModel):
    chart: List[ChartPoint]
    medians: List[MedianPoint]
    probability_of_ruin: float
    trials: int
    monthly_savings_k: float
    milestones: List[MilestoneModel]
    shock: Optional[ShockModel] = None
    score: ScoreResponse
