from typing import Dict, List, Optional

from wealth.schemas import LAKH, Milestone, Shock
from wealth.utils import round_half_up

CRORE = 10_000_000.0
MIN_GOAL_YEAR = 1900
PRESET_SHOCK_OFFSET_YEARS = 2
BASE_MONTHLY_SAVINGS_K = 25.0

SHOCK_PRESETS: Dict[str, Dict[str, object]] = {
    "medical": {"label": "Medical Emergency", "amount": 500_000.0},
    "market": {"label": "Market Crash", "amount": 500_000.0},
    "education": {"label": "Higher Education", "amount": 1_000_000.0},
    "vehicle": {"label": "Vehicle Purchase", "amount": 800_000.0},
}


def to_lakhs(value: float) -> int:
    return max(0, round_half_up(value / LAKH))


def format_amount(amount: float) -> str:
    if amount >= CRORE:
        return f"₹{amount / CRORE:.1f}Cr"
    if amount >= LAKH:
        return f"₹{amount / LAKH:.1f}L"
    return f"₹{amount / 1000:.0f}K"


def monthly_savings_k(savings_habit_delta: float) -> float:
    return BASE_MONTHLY_SAVINGS_K + savings_habit_delta


def _goal_milestone(year: Optional[int], cost: Optional[float], label: str) -> Optional[Milestone]:
    if not year or not cost:
        return None
    if year <= MIN_GOAL_YEAR:
        return None
    return Milestone(year=int(year), amount=float(cost), label=label)


def milestones_from_goals(
    wedding_year: Optional[int] = None,
    wedding_cost: Optional[float] = None,
    house_year: Optional[int] = None,
    house_cost: Optional[float] = None,
) -> List[Milestone]:
    out: List[Milestone] = []
    for m in (
        _goal_milestone(wedding_year, wedding_cost, "Wedding"),
        _goal_milestone(house_year, house_cost, "House Downpayment"),
    ):
        if m is not None:
            out.append(m)
    return out


def preset_shock(shock_type: str, current_year: int) -> Shock:
    preset = SHOCK_PRESETS.get(shock_type)
    if preset is None:
        raise KeyError(f"unknown shock preset: {shock_type}")
    return Shock(
        amount=float(preset["amount"]),
        year=current_year + PRESET_SHOCK_OFFSET_YEARS,
        type=shock_type,
    )
