"""
Cardano UTXO CLI - total UTXO sets and run coin selection on JSON files.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import typer
from loguru import logger
from pydantic import ValidationError

from cardano_utxo.config import get_settings
from cardano_utxo.constants import LOVELACE_PER_ADA
from cardano_utxo.models import InputValidationError, select_json, sum_json

app = typer.Typer(
    name="cardano-utxo",
    help="Multi-asset UTXO coin selection",
    add_completion=False,
)

EXIT_INVALID = 1
EXIT_INSUFFICIENT_FUNDS = 2


def setup_logging(level: str = "INFO") -> None:
    """Configure loguru logging."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )


def load_json(path: Path) -> Any:
    if not path.exists():
        logger.error(f"File not found: {path}")
        raise typer.Exit(EXIT_INVALID)
    try:
        return json.loads(path.read_text())
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
        raise typer.Exit(EXIT_INVALID) from None


@app.command()
def total(
    outputs_file: Path = typer.Argument(..., help="JSON list of outputs"),
    log_level: str | None = typer.Option(None, "--log-level", "-l"),
) -> None:
    """Print the combined value of a list of outputs."""
    settings = get_settings()
    setup_logging(log_level or settings.log_level)

    try:
        result = sum_json(load_json(outputs_file))
    except ValidationError as e:
        logger.error(f"Invalid outputs: {e}")
        raise typer.Exit(EXIT_INVALID) from None

    lovelace = result["lovelace"]
    logger.info(f"Total: {lovelace:,} lovelace ({lovelace / LOVELACE_PER_ADA:.6f} ADA)")
    typer.echo(json.dumps(result, indent=settings.json_indent))


@app.command()
def select(
    inputs_file: Path = typer.Argument(..., help="JSON list of candidate inputs"),
    outputs_file: Path = typer.Argument(..., help="JSON list of required outputs"),
    surplus_file: Path | None = typer.Option(
        None, "--surplus", "-s", help="JSON output record already available"
    ),
    min_change: int | None = typer.Option(
        None, "--min-change", "-m", min=0, help="Lovelace the excess must keep"
    ),
    log_level: str | None = typer.Option(None, "--log-level", "-l"),
) -> None:
    """Select inputs covering the outputs and print the result."""
    settings = get_settings()
    setup_logging(log_level or settings.log_level)

    min_change = settings.min_change_lovelace if min_change is None else min_change
    threshold = {"lovelace": min_change, "assets": []} if min_change else None

    try:
        result = select_json(
            load_json(inputs_file),
            load_json(outputs_file),
            threshold=threshold,
            initial_surplus=load_json(surplus_file) if surplus_file else None,
        )
    except (ValidationError, InputValidationError) as e:
        logger.error(f"Invalid input data: {e}")
        raise typer.Exit(EXIT_INVALID) from None

    if result is None:
        logger.error("Insufficient funds: inputs do not cover the outputs")
        raise typer.Exit(EXIT_INSUFFICIENT_FUNDS)

    typer.echo(json.dumps(result, indent=settings.json_indent))


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
