import logging
import os
from typing import Any, Dict, Iterable, List, Optional

from wealth.schemas import Milestone, Shock, SimulationInput, SimulationParameters
from wealth.scoring import (
    default_discretionary_spend,
    health_band,
    health_score,
    shock_capacity,
)
from wealth.simulator import project

from .models import (
    ChartPoint,
    MedianPoint,
    MilestoneModel,
    ProjectionRequest,
    ProjectionResponse,
    ScoreRequest,
    ScoreResponse,
    ShockModel,
    ShockPreset,
)
from .tools import (
    SHOCK_PRESETS,
    format_amount,
    milestones_from_goals,
    monthly_savings_k,
    preset_shock,
    to_lakhs,
)

logger = logging.getLogger(__name__)

WEALTH_TRIALS = int(os.getenv("WEALTH_TRIALS", "1000"))
WEALTH_HORIZON_YEARS = int(os.getenv("WEALTH_HORIZON_YEARS", "10"))


def default_parameters() -> SimulationParameters:
    return SimulationParameters(horizon_years=WEALTH_HORIZON_YEARS, trials=WEALTH_TRIALS)


def project_to_chart(
    start_wealth: float,
    shock: Optional[Shock],
    monthly_savings_delta: float,
    milestones: Iterable[Milestone],
    seed: Optional[int] = None,
    params: Optional[SimulationParameters] = None,
) -> List[Dict[str, Any]]:
    """Chart-ready projection: one point per year, values in lakhs."""
    sim = SimulationInput(
        start_wealth=start_wealth,
        shock=shock,
        monthly_savings_delta=monthly_savings_delta,
        milestones=tuple(milestones),
    )
    result = project(sim, params if params is not None else default_parameters(), seed)
    return [
        {
            "year": p.year,
            "status_quo": to_lakhs(p.status_quo_median),
            "optimized": to_lakhs(p.optimized_median),
            "label": str(p.year),
        }
        for p in result.points
    ]


def run_score(payload: ScoreRequest) -> ScoreResponse:
    profile = payload.profile
    spend = profile.discretionary_spend_k
    if spend is None:
        spend = default_discretionary_spend(profile.city_tier)
    score = health_score(
        profile.net_worth,
        profile.savings_habit_delta,
        spend,
        payload.shock_active,
        profile.city_tier,
    )
    capacity = shock_capacity(profile.savings_habit_delta)
    return ScoreResponse(
        health_score=score,
        health_band=health_band(score),
        city_tier=profile.city_tier,
        discretionary_spend_k=spend,
        shock_capacity=capacity,
        shock_capacity_display=format_amount(capacity),
    )


def list_shock_presets(current_year: int) -> List[ShockPreset]:
    presets: List[ShockPreset] = []
    for shock_type, preset in SHOCK_PRESETS.items():
        shock = preset_shock(shock_type, current_year)
        presets.append(
            ShockPreset(type=shock_type, label=str(preset["label"]), amount=shock.amount, year=shock.year)
        )
    return presets


def run_projection(payload: ProjectionRequest) -> ProjectionResponse:
    profile = payload.profile
    params = default_parameters()

    goals = payload.goals
    milestones = milestones_from_goals(goals.wedding_year, goals.wedding_cost, goals.house_year, goals.house_cost)
    milestones.extend(Milestone(year=m.year, amount=m.amount, label=m.label) for m in payload.milestones)

    shock: Optional[Shock] = None
    if payload.shock is not None:
        shock = Shock(amount=payload.shock.amount, year=payload.shock.year, type=payload.shock.type)
    elif payload.shock_preset is not None:
        shock = preset_shock(payload.shock_preset, params.current_year)

    logger.info(
        "projection: net_worth=%.0f tier=%s habit=%.1f milestones=%d shock=%s",
        profile.net_worth,
        profile.city_tier,
        profile.savings_habit_delta,
        len(milestones),
        shock.type if shock else "none",
    )

    sim = SimulationInput(
        start_wealth=profile.net_worth,
        shock=shock,
        monthly_savings_delta=profile.savings_habit_delta,
        milestones=tuple(milestones),
    )
    result = project(sim, params, payload.seed)

    chart = [
        ChartPoint(
            year=p.year,
            status_quo=to_lakhs(p.status_quo_median),
            optimized=to_lakhs(p.optimized_median),
            label=str(p.year),
        )
        for p in result.points
    ]
    medians = [
        MedianPoint(year=p.year, status_quo_median=p.status_quo_median, optimized_median=p.optimized_median)
        for p in result.points
    ]
    score = run_score(ScoreRequest(profile=profile, shock_active=shock is not None))

    return ProjectionResponse(
        chart=chart,
        medians=medians,
        probability_of_ruin=result.probability_of_ruin,
        trials=result.trials,
        monthly_savings_k=monthly_savings_k(profile.savings_habit_delta),
        milestones=[MilestoneModel(year=m.year, amount=m.amount, label=m.label) for m in milestones],
        shock=None if shock is None else ShockModel(amount=shock.amount, year=shock.year, type=shock.type),
        score=score,
    )
