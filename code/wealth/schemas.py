from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Tuple

HORIZON_YEARS = 10
TRIALS = 1000
SAVINGS_PER_HABIT_UNIT = 1000.0
LAKH = 100_000.0

STATUS_QUO_MEAN = 0.05
STATUS_QUO_VOLATILITY = 0.12
OPTIMIZED_MEAN = 0.12
OPTIMIZED_VOLATILITY = 0.18


@dataclass(frozen=True)
class Shock:
    amount: float
    year: int
    type: str = "custom"


@dataclass(frozen=True)
class Milestone:
    year: int
    amount: float
    label: str = ""


@dataclass(frozen=True)
class SimulationInput:
    start_wealth: float
    shock: Optional[Shock] = None
    monthly_savings_delta: float = 0.0
    milestones: Tuple[Milestone, ...] = ()

    def __post_init__(self):
        # accept any iterable, store a tuple
        object.__setattr__(self, "milestones", tuple(self.milestones))


@dataclass(frozen=True)
class ReturnModel:
    mean: float
    volatility: float


@dataclass(frozen=True)
class SimulationParameters:
    current_year: int = field(default_factory=lambda: date.today().year)
    horizon_years: int = HORIZON_YEARS
    trials: int = TRIALS
    status_quo: ReturnModel = ReturnModel(STATUS_QUO_MEAN, STATUS_QUO_VOLATILITY)
    optimized: ReturnModel = ReturnModel(OPTIMIZED_MEAN, OPTIMIZED_VOLATILITY)
    savings_per_unit: float = SAVINGS_PER_HABIT_UNIT

    @property
    def years(self) -> int:
        return self.horizon_years + 1

    @property
    def calendar(self) -> Tuple[int, ...]:
        return tuple(self.current_year + t for t in range(self.years))


@dataclass(frozen=True)
class ProjectionPoint:
    year: int
    status_quo_median: float
    optimized_median: float


@dataclass(frozen=True)
class ProjectionResult:
    points: Tuple[ProjectionPoint, ...]
    probability_of_ruin: float
    trials: int
