#!/usr/bin/env python
"""
Fit a binary IRT model to response data and print the estimates.
"""

from pathlib import Path

import numpy as np
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from irt_fit.core.data import load_csv_to_response_matrix
from irt_fit.core.utils import get_rng
from irt_fit.irt import GradientAscentEstimator
from irt_fit.irt.estimation import MissingStrategy, ModelType
from irt_fit.settings import EstimationSettings

console = Console(force_terminal=True, legacy_windows=True)
app = typer.Typer()

settings = EstimationSettings()


@app.command()
def main(
    input_path: Path = typer.Argument(
        ...,
        help="CSV of responses: a person_id column, then one per item",
    ),
    model_type: ModelType = typer.Option(
        settings.model_type, "-m", "--model", help="IRT model to fit"
    ),
    missing_strategy: MissingStrategy = typer.Option(
        settings.missing_strategy,
        "--missing",
        help="How missing responses are handled",
    ),
    max_iterations: int = typer.Option(
        settings.max_iterations, "--max-iterations"
    ),
    learning_rate: float = typer.Option(
        settings.learning_rate, "--learning-rate"
    ),
    seed: int | None = typer.Option(
        settings.seed,
        "-s",
        "--seed",
        help="Random seed for reproducibility",
    ),
    show_persons: bool = typer.Option(
        False, "--show-persons", help="Also print person abilities"
    ),
) -> None:
    """Fit an IRT model to response data and print the estimates."""

    # Validate input
    if not input_path.exists():
        console.print(f"[red]File not found: {input_path}[/red]")
        raise typer.Exit(1)
    if input_path.suffix != ".csv":
        console.print("[red]Only .csv files are supported[/red]")
        raise typer.Exit(1)

    # Load data
    console.print("[dim]Loading data...[/dim]")
    try:
        person_ids, item_ids, data = load_csv_to_response_matrix(input_path)
    except ValueError as e:
        console.print(f"[red]Error loading CSV: {e}[/red]")
        raise typer.Exit(1) from e

    config = settings.model_copy(
        update={
            "max_iterations": max_iterations,
            "learning_rate": learning_rate,
            "missing_strategy": missing_strategy,
        }
    ).to_config()

    console.print(
        Panel(
            f"[bold]Fit IRT Model[/bold]\n\n"
            f"Input: [cyan]{input_path}[/cyan]\n"
            f"Model: [cyan]{model_type.value}[/cyan]\n"
            f"Persons: [cyan]{data.n_persons}[/cyan]\n"
            f"Items: [cyan]{data.n_items}[/cyan]\n"
            f"Missing: [cyan]{data.n_missing}[/cyan] "
            f"({config.missing_strategy.value})",
            title="Configuration",
        )
    )

    # Fit model
    console.print("[dim]Fitting IRT model...[/dim]")
    estimator = GradientAscentEstimator(
        data, model_type=model_type, config=config, rng=get_rng(seed)
    )
    estimates = estimator.fit()
    result = estimator.last_result
    assert result is not None

    console.print(
        f"  {result.convergence_status.value} "
        f"({result.n_iterations} iterations, {result.n_reverts} reverts, "
        f"LL={result.initial_log_likelihood:.2f} -> "
        f"{result.log_likelihood:.2f})"
    )

    item_table = Table(title="Item parameters")
    item_table.add_column("item")
    item_table.add_column("p correct", justify="right")
    columns = [name for name in estimates if name != "abilities"]
    for name in columns:
        item_table.add_column(name, justify="right")
    proportions = data.proportion_correct()
    for j, item_id in enumerate(item_ids):
        p = proportions[j]
        item_table.add_row(
            item_id,
            "-" if np.isnan(p) else f"{p:.2f}",
            *(f"{estimates[name][j]:.3f}" for name in columns),
        )
    console.print(item_table)

    if show_persons:
        person_table = Table(title="Person abilities")
        person_table.add_column("person")
        person_table.add_column("ability", justify="right")
        for person_id, ability in zip(
            person_ids, estimates["abilities"], strict=True
        ):
            person_table.add_row(person_id, f"{ability:.3f}")
        console.print(person_table)


if __name__ == "__main__":
    app()
