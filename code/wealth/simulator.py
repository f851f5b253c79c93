# wealth/simulator.py
import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .aggregate import per_year_medians, probability_of_ruin
from .returns import ReturnGenerator
from .schemas import ProjectionResult, SimulationInput, SimulationParameters
from .simulator_core import simulate_path
from .utils import validate_input

logger = logging.getLogger(__name__)


@dataclass
class Ensemble:
    """Recorded (floored) values, one row per trial and one column per year."""

    years: List[int]
    status_quo: np.ndarray
    optimized: np.ndarray

    @property
    def trials(self) -> int:
        return int(self.status_quo.shape[0])

    def terminal_optimized(self) -> np.ndarray:
        return self.optimized[:, -1]


def trial_generators(seed: Optional[int], trials: int) -> List[ReturnGenerator]:
    """One independent generator per trial, spawned from a single seed sequence.

    ``seed=None`` pulls fresh entropy from the OS, so unseeded runs differ.
    """
    children = np.random.SeedSequence(seed).spawn(trials)
    return [ReturnGenerator(np.random.default_rng(child)) for child in children]


def run_monte_carlo(
    sim: SimulationInput,
    params: Optional[SimulationParameters] = None,
    seed: Optional[int] = None,
) -> Ensemble:
    params = params if params is not None else SimulationParameters()
    validate_input(sim, params)

    logger.debug(
        "MonteCarlo: trials=%d years=%d-%d milestones=%d shock=%s",
        params.trials,
        params.current_year,
        params.current_year + params.horizon_years,
        len(sim.milestones),
        sim.shock.type if sim.shock else None,
    )

    status = np.zeros((params.trials, params.years))
    opt = np.zeros((params.trials, params.years))
    for i, generator in enumerate(trial_generators(seed, params.trials)):
        path = simulate_path(sim, params, generator)
        status[i, :] = path.status_quo
        opt[i, :] = path.optimized

    return Ensemble(years=list(params.calendar), status_quo=status, optimized=opt)


def project(
    sim: SimulationInput,
    params: Optional[SimulationParameters] = None,
    seed: Optional[int] = None,
) -> ProjectionResult:
    """Run the ensemble and reduce it to per-year medians for both policies."""
    ensemble = run_monte_carlo(sim, params, seed)
    points = per_year_medians(ensemble.years, ensemble.status_quo, ensemble.optimized)
    ruin = probability_of_ruin(ensemble.terminal_optimized())
    logger.debug(
        "MonteCarlo: sims=%d, prob optimized <=0 at horizon=%.1f%%",
        ensemble.trials,
        ruin * 100,
    )
    return ProjectionResult(points=tuple(points), probability_of_ruin=ruin, trials=ensemble.trials)
