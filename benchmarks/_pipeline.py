"""Aggregation and rendering of benchmark timings."""

from dataclasses import astuple

import polars as pl
from rich.table import Table

from ._registery import BENCHMARKS, Row, collect_raw_timings

BASELINE = "itertools"


def run_pipeline() -> pl.DataFrame:
    """Run every registered benchmark and aggregate the timings."""
    if not BENCHMARKS:
        msg = "No benchmarks registered!"
        raise RuntimeError(msg)
    return _compute_all_stats(collect_raw_timings(BENCHMARKS)).collect()


def _compute_all_stats(raw_rows: tuple[Row, ...]) -> pl.LazyFrame:
    """Compute median stats from raw timings, relative to the `itertools` baseline of each category."""
    medians = (
        pl.LazyFrame(
            [astuple(row) for row in raw_rows],
            schema=["category", "name", "size", "run_idx", "time"],
            orient="row",
        )
        .group_by("category", "name", "size")
        .agg(
            pl.col("time").median().alias("median"),
            pl.len().alias("runs"),
        )
    )
    baseline = medians.filter(pl.col("name") == BASELINE).select(
        "category", "size", pl.col("median").alias("baseline")
    )
    return (
        medians.join(baseline, on=["category", "size"], how="left")
        .with_columns((pl.col("median") / pl.col("baseline")).alias("ratio"))
        .drop("baseline")
        .sort("category", "size", "name")
    )


def to_table(results: pl.DataFrame) -> Table:
    """Render aggregated results as a rich table."""
    table = Table(title="pyoiter vs itertools")
    for column, justify in (
        ("category", "left"),
        ("name", "left"),
        ("size", "right"),
        ("runs", "right"),
        ("median (µs)", "right"),
        ("ratio", "right"),
    ):
        table.add_column(column, justify=justify)  # type: ignore[arg-type]
    rows = results.select("category", "name", "size", "runs", "median", "ratio")
    for category, name, size, runs, median, ratio in rows.iter_rows():
        table.add_row(
            category,
            name,
            str(size),
            str(runs),
            f"{median * 1e6:.1f}",
            "-" if ratio is None else f"{ratio:.2f}x",
        )
    return table
