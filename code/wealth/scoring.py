from .schemas import LAKH, SAVINGS_PER_HABIT_UNIT
from .utils import clamp, round_half_up

BASE_SCORE = 60.0
NET_WORTH_POINTS_PER_LAKH = 1.5
NET_WORTH_POINTS_MAX = 25.0
HABIT_POINTS_PER_UNIT = 3.0
SHOCK_PENALTY = 15.0

TIER_SPEND_MULTIPLIERS = {
    "tier1": 0.6,
    "tier2": 0.4,
    "tier3": 0.25,
}
TIER_PENALTIES = {
    "tier1": 10.0,
    "tier2": 5.0,
    "tier3": 0.0,
}
TIER_DEFAULT_SPEND_K = {
    "tier1": 12.0,
    "tier2": 8.0,
    "tier3": 5.0,
}

BASE_LIQUIDITY = 300_000.0
SHOCK_CAPACITY_MONTHS = 24


def normalize_city_tier(value: str) -> str:
    if not value:
        return "tier1"
    cleaned = value.strip().lower().replace(" ", "").replace("-", "").replace("_", "")
    aliases = {
        "tier1": "tier1",
        "t1": "tier1",
        "1": "tier1",
        "metro": "tier1",
        "tier2": "tier2",
        "t2": "tier2",
        "2": "tier2",
        "tier3": "tier3",
        "t3": "tier3",
        "3": "tier3",
    }
    return aliases.get(cleaned, cleaned)


def tier_spend_multiplier(city_tier: str) -> float:
    # anything unrecognised is priced like the cheapest tier
    return TIER_SPEND_MULTIPLIERS.get(normalize_city_tier(city_tier), TIER_SPEND_MULTIPLIERS["tier3"])


def tier_penalty(city_tier: str) -> float:
    return TIER_PENALTIES.get(normalize_city_tier(city_tier), TIER_PENALTIES["tier3"])


def default_discretionary_spend(city_tier: str) -> float:
    """Monthly discretionary spend in thousands of rupees for a tier."""
    return TIER_DEFAULT_SPEND_K.get(normalize_city_tier(city_tier), 8.0)


def health_score(
    net_worth: float,
    savings_habit_delta: float,
    discretionary_spend: float,
    shock_active: bool,
    city_tier: str,
) -> int:
    """0-100 financial health score.

    ``net_worth`` is in rupees and ``discretionary_spend`` in thousands of
    rupees per month. Rounds half up.
    """
    score = BASE_SCORE
    score += min(NET_WORTH_POINTS_MAX, (net_worth / LAKH) * NET_WORTH_POINTS_PER_LAKH)
    score += savings_habit_delta * HABIT_POINTS_PER_UNIT
    score -= discretionary_spend * tier_spend_multiplier(city_tier)
    score -= tier_penalty(city_tier)
    if shock_active:
        score -= SHOCK_PENALTY
    return int(clamp(round_half_up(score), 0, 100))


def health_band(score: float) -> str:
    if score >= 80:
        return "Excellent"
    if score >= 60:
        return "Good"
    return "Needs Work"


def shock_capacity(savings_habit_delta: float) -> float:
    """Largest one-off expense the current liquidity could absorb, in rupees."""
    extra = savings_habit_delta * SAVINGS_PER_HABIT_UNIT * SHOCK_CAPACITY_MONTHS
    return BASE_LIQUIDITY + extra
