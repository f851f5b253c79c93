import math
import numbers
from typing import Optional

from .errors import InvalidInputError
from .schemas import Milestone, Shock, SimulationInput, SimulationParameters


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(value, hi))


def _require_finite(name: str, value: float) -> None:
    if value is None or not math.isfinite(value):
        raise InvalidInputError(f"{name} must be a finite number, got {value!r}")


def _require_non_negative(name: str, value: float) -> None:
    _require_finite(name, value)
    if value < 0:
        raise InvalidInputError(f"{name} must be non-negative, got {value!r}")


def _require_positive(name: str, value: float) -> None:
    _require_finite(name, value)
    if value <= 0:
        raise InvalidInputError(f"{name} must be positive, got {value!r}")


def validate_shock(shock: Optional[Shock]) -> None:
    if shock is None:
        return
    _require_positive("shock.amount", shock.amount)
    if not isinstance(shock.year, numbers.Integral):
        raise InvalidInputError(f"shock.year must be an integer year, got {shock.year!r}")


def validate_milestone(index: int, milestone: Milestone) -> None:
    _require_positive(f"milestones[{index}].amount", milestone.amount)
    if not isinstance(milestone.year, numbers.Integral):
        raise InvalidInputError(f"milestones[{index}].year must be an integer year, got {milestone.year!r}")


def validate_parameters(params: SimulationParameters) -> None:
    if params.trials <= 0:
        raise InvalidInputError(f"trials must be positive, got {params.trials}")
    if params.horizon_years < 0:
        raise InvalidInputError(f"horizon_years must be non-negative, got {params.horizon_years}")
    for name, model in (("status_quo", params.status_quo), ("optimized", params.optimized)):
        _require_finite(f"{name}.mean", model.mean)
        _require_non_negative(f"{name}.volatility", model.volatility)
    _require_non_negative("savings_per_unit", params.savings_per_unit)


def validate_input(sim: SimulationInput, params: SimulationParameters) -> None:
    _require_non_negative("start_wealth", sim.start_wealth)
    _require_non_negative("monthly_savings_delta", sim.monthly_savings_delta)
    validate_shock(sim.shock)
    for i, m in enumerate(sim.milestones):
        validate_milestone(i, m)
    validate_parameters(params)
