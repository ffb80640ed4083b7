#!/usr/bin/env python
"""
Analyse convergence of the Rasch estimator on simulated data.

Reports iterations, convergence rate and parameter recovery for a grid of
tolerances and a grid of learning rates.
"""

import logging
import time
from dataclasses import dataclass

import numpy as np
import typer
from rich.console import Console
from rich.table import Table

from irt_fit.core.utils import get_rng
from irt_fit.irt import RaschEstimator
from irt_fit.irt.estimation import EstimationConfig
from irt_fit.synthetic_data import GeneratedData, generate_responses

logging.getLogger("irt_fit").setLevel(logging.WARNING)

console = Console(force_terminal=True, legacy_windows=True)
app = typer.Typer()

TOLERANCES = {
    "Loose (1e-3)": 1e-3,
    "Medium (1e-4)": 1e-4,
    "Tight (1e-5)": 1e-5,
    "Very Tight (1e-6)": 1e-6,
}
LEARNING_RATES = {
    "Very Slow (0.001)": 0.001,
    "Slow (0.01)": 0.01,
    "Medium (0.05)": 0.05,
    "Fast (0.1)": 0.1,
    "Very Fast (0.2)": 0.2,
}


@dataclass(frozen=True)
class RunSummary:
    seconds: float
    iterations: float
    convergence_rate: float
    difficulty_correlation: float


def run_repeats(
    generated: GeneratedData,
    config: EstimationConfig,
    repeats: int,
    seed: int,
) -> RunSummary:
    """Fit repeatedly from different starting values and average."""
    seconds = []
    iterations = []
    converged = []
    correlations = []
    for r in range(repeats):
        start = time.perf_counter()
        estimator = RaschEstimator(
            generated.responses, config=config, rng=get_rng(seed + r)
        )
        estimates = estimator.fit()
        seconds.append(time.perf_counter() - start)

        result = estimator.last_result
        assert result is not None
        iterations.append(result.n_iterations)
        converged.append(result.converged)
        correlations.append(
            np.corrcoef(
                estimates["difficulties"],
                generated.true_parameters.difficulties,
            )[0, 1]
        )

    return RunSummary(
        seconds=float(np.mean(seconds)),
        iterations=float(np.mean(iterations)),
        convergence_rate=float(np.mean(converged)),
        difficulty_correlation=float(np.mean(correlations)),
    )


def summary_table(title: str, rows: dict[str, RunSummary]) -> Table:
    table = Table(title=title)
    table.add_column("setting")
    table.add_column("time (s)", justify="right")
    table.add_column("iterations", justify="right")
    table.add_column("converged", justify="right")
    table.add_column("corr(b, true b)", justify="right")
    for label, summary in rows.items():
        table.add_row(
            label,
            f"{summary.seconds:.3f}",
            f"{summary.iterations:.1f}",
            f"{summary.convergence_rate:.0%}",
            f"{summary.difficulty_correlation:.3f}",
        )
    return table


@app.command()
def main(
    n_persons: int = typer.Option(100, "--persons"),
    n_items: int = typer.Option(50, "--items"),
    repeats: int = typer.Option(5, "-r", "--repeats"),
    seed: int = typer.Option(42, "-s", "--seed"),
) -> None:
    """Run convergence benchmarks."""
    generated = generate_responses(
        "1pl", n_persons, n_items, rng=get_rng(seed)
    )

    tolerance_rows = {
        label: run_repeats(
            generated,
            EstimationConfig(
                max_iterations=2000,
                tolerance=tol,
                param_tolerance=tol,
                learning_rate=0.01,
            ),
            repeats,
            seed,
        )
        for label, tol in TOLERANCES.items()
    }
    console.print(summary_table("Impact of tolerance", tolerance_rows))

    learning_rate_rows = {
        label: run_repeats(
            generated,
            EstimationConfig(
                max_iterations=1000,
                tolerance=1e-5,
                param_tolerance=1e-5,
                learning_rate=rate,
            ),
            repeats,
            seed,
        )
        for label, rate in LEARNING_RATES.items()
    }
    console.print(summary_table("Impact of learning rate", learning_rate_rows))


if __name__ == "__main__":
    app()
