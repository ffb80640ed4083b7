#!/usr/bin/env python
"""
Benchmark fit time and memory for the 1PL, 2PL and 3PL estimators.

Covers:
- Fit time per model across dataset sizes
- Peak traced memory for a medium dataset
- Scaling of Rasch fit time with the number of responses
- Cost of each missing-data strategy
"""

import logging
import math
import time
import tracemalloc
from dataclasses import dataclass

import numpy as np
import typer
from rich.console import Console
from rich.table import Table

from irt_fit.core.data_models import ResponseMatrix
from irt_fit.core.utils import get_rng
from irt_fit.irt import GradientAscentEstimator
from irt_fit.irt.estimation import EstimationConfig, MissingStrategy, ModelType

# Per-fit INFO messages would drown the tables
logging.getLogger("irt_fit").setLevel(logging.WARNING)

console = Console(force_terminal=True, legacy_windows=True)
app = typer.Typer()


@dataclass(frozen=True)
class DatasetSize:
    n_persons: int
    n_items: int
    label: str

    @property
    def n_cells(self) -> int:
        return self.n_persons * self.n_items


DATASET_SIZES = [
    DatasetSize(10, 5, "Tiny (10x5)"),
    DatasetSize(50, 20, "Small (50x20)"),
    DatasetSize(100, 50, "Medium (100x50)"),
    DatasetSize(200, 100, "Large (200x100)"),
    DatasetSize(500, 200, "XLarge (500x200)"),
]
QUICK_DATASET_SIZES = DATASET_SIZES[:3]


def random_responses(
    size: DatasetSize,
    rng: np.random.Generator,
    missing_rate: float = 0.0,
    p_correct: float = 0.6,
) -> ResponseMatrix:
    """Responses that are correct with a fixed probability, ignoring IRT."""
    values = (rng.random((size.n_persons, size.n_items)) < p_correct).astype(
        np.float64
    )
    values[rng.random(values.shape) < missing_rate] = np.nan
    return ResponseMatrix.from_rows(values)


def time_fit(
    data: ResponseMatrix,
    model_type: ModelType,
    config: EstimationConfig,
    repeats: int,
    seed: int,
) -> float:
    """Mean wall-clock seconds per construct-and-fit."""
    times = []
    for r in range(repeats):
        start = time.perf_counter()
        GradientAscentEstimator(
            data, model_type=model_type, config=config, rng=get_rng(seed + r)
        ).fit()
        times.append(time.perf_counter() - start)
    return float(np.mean(times))


@app.command()
def main(
    quick: bool = typer.Option(
        False, "--quick", help="Only run the smaller datasets"
    ),
    repeats: int = typer.Option(5, "-r", "--repeats"),
    max_iterations: int = typer.Option(100, "--max-iterations"),
    seed: int = typer.Option(42, "-s", "--seed"),
) -> None:
    """Run performance benchmarks."""
    rng = get_rng(seed)
    sizes = QUICK_DATASET_SIZES if quick else DATASET_SIZES
    config = EstimationConfig(max_iterations=max_iterations)

    # Warm up the compiled likelihood kernel before timing anything
    GradientAscentEstimator([[1, 0], [0, 1]], max_iterations=1).fit()

    fit_table = Table(title="Fit time per model (s)")
    fit_table.add_column("dataset")
    for model_type in ModelType:
        fit_table.add_column(model_type.value, justify="right")
    datasets = {size.label: random_responses(size, rng) for size in sizes}
    for size in sizes:
        data = datasets[size.label]
        fit_table.add_row(
            size.label,
            *(
                f"{time_fit(data, m, config, repeats, seed):.4f}"
                for m in ModelType
            ),
        )
    console.print(fit_table)

    memory_table = Table(title="Peak traced memory, Medium (100x50)")
    memory_table.add_column("model")
    memory_table.add_column("peak KiB", justify="right")
    medium = random_responses(DATASET_SIZES[2], rng)
    for model_type in ModelType:
        tracemalloc.start()
        GradientAscentEstimator(
            medium, model_type=model_type, config=config, rng=get_rng(seed)
        ).fit()
        _, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
        memory_table.add_row(model_type.value, f"{peak / 1024:.1f}")
    console.print(memory_table)

    console.print("\n[bold]Scaling analysis (Rasch)[/bold]")
    rasch_times = [
        (
            size,
            time_fit(
                datasets[size.label], ModelType.RASCH, config, repeats, seed
            ),
        )
        for size in sizes
    ]
    for (small, t_small), (large, t_large) in zip(
        rasch_times, rasch_times[1:], strict=False
    ):
        size_ratio = large.n_cells / small.n_cells
        time_ratio = t_large / t_small
        exponent = math.log(time_ratio) / math.log(size_ratio)
        console.print(
            f"  {small.label} -> {large.label}: {size_ratio:.2f}x size, "
            f"{time_ratio:.2f}x time (O(n^{exponent:.2f}))"
        )

    strategy_table = Table(title="Missing strategy cost, 20% missing (Rasch)")
    strategy_table.add_column("strategy")
    strategy_table.add_column("seconds", justify="right")
    with_missing = random_responses(DATASET_SIZES[2], rng, missing_rate=0.2)
    for strategy in MissingStrategy:
        strategy_config = EstimationConfig(
            max_iterations=50, missing_strategy=strategy
        )
        seconds = time_fit(
            with_missing, ModelType.RASCH, strategy_config, repeats, seed
        )
        strategy_table.add_row(strategy.value, f"{seconds:.4f}")
    console.print(strategy_table)


if __name__ == "__main__":
    app()
