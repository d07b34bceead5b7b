"""Entry point for benchmarks CLI."""

from typing import Annotated

import typer

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._pipeline import run_pipeline, to_table
from ._registery import BENCHMARKS, CONSOLE

app = typer.Typer(help="Benchmarks comparing pyoiter with itertools.")


@app.command(name="list")
def list_() -> None:
    """List the registered benchmarks."""
    for benchmark in BENCHMARKS:
        sizes = ", ".join(str(v.size) for v in benchmark.variants)
        CONSOLE.print(f"{benchmark.category}.{benchmark.name} [dim]({sizes})[/dim]")


@app.command()
def run(
    *,
    category: Annotated[
        str | None, typer.Option("--category", "-c", help="Only run this category.")
    ] = None,
) -> None:
    """Run benchmarks and print the median timings."""
    if category is not None:
        BENCHMARKS[:] = [b for b in BENCHMARKS if b.category == category]
    CONSOLE.print("Running benchmarks...", style="bold blue")
    CONSOLE.print(to_table(run_pipeline()))
    CONSOLE.print("✓ Benchmarks complete", style="bold green")


if __name__ == "__main__":
    app()
