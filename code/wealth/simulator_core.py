from dataclasses import dataclass
from typing import List

from .returns import ReturnGenerator
from .schemas import SimulationInput, SimulationParameters


@dataclass
class PathResult:
    status_quo: List[float]
    optimized: List[float]


def annual_contribution(sim: SimulationInput, params: SimulationParameters) -> float:
    return sim.monthly_savings_delta * params.savings_per_unit * 12


def simulate_path(
    sim: SimulationInput,
    params: SimulationParameters,
    generator: ReturnGenerator,
) -> PathResult:
    """Run one trial of both policies across the horizon.

    Values are recorded before the year's growth and floored at zero. The
    running balances are not floored: a balance pushed below zero by a shock
    keeps compounding from its negative value.
    """
    status = float(sim.start_wealth)
    opt = float(sim.start_wealth)
    contribution = annual_contribution(sim, params)
    status_path: List[float] = []
    opt_path: List[float] = []

    for year in params.calendar:
        for m in sim.milestones:
            if m.year == year:
                status -= m.amount
                opt -= m.amount
        if sim.shock is not None and sim.shock.year == year:
            status -= sim.shock.amount
            opt -= sim.shock.amount

        status_path.append(max(status, 0.0))
        opt_path.append(max(opt, 0.0))

        status_return = generator.sample(params.status_quo.mean, params.status_quo.volatility)
        opt_return = generator.sample(params.optimized.mean, params.optimized.volatility)

        opt = (opt + contribution) * (1 + opt_return)
        status = status * (1 + status_return)

    return PathResult(status_quo=status_path, optimized=opt_path)
