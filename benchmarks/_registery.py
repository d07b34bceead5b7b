import timeit
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Any, Final, NamedTuple, Self

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)

import pyoiter as po

type BenchFn = Callable[[], object]


WARMUP_RUNS: Final = 5
CALLS_BY_RUN: Final = 10
TARGET_BENCH_SEC: Final = 1
MIN_RUNS: Final = 20
SIZES: Final = (256, 1024, 4096)

CONSOLE: Final = Console()


class Variant(NamedTuple):
    """A specific benchmark variant size."""

    size: int
    n_runs: int
    fn: BenchFn

    @classmethod
    def from_fn(cls, fn: BenchFn, size: int) -> Self:
        """Estimate number of runs needed for benchmark variant."""
        warmup_time = timeit.timeit(fn, number=WARMUP_RUNS) / WARMUP_RUNS
        est = int(TARGET_BENCH_SEC / 2 / max(warmup_time, 1e-9) / CALLS_BY_RUN)
        return cls(size, max(MIN_RUNS, est), fn)


class Benchmark(NamedTuple):
    """A benchmark with multiple data sizes."""

    category: str
    name: str
    variants: tuple[Variant, ...]


@dataclass(slots=True)
class Row:
    """Raw row of timing data."""

    category: str
    name: str
    size: int
    run_idx: int
    time: float


BENCHMARKS: list[Benchmark] = []


def bench[P](
    *, gen: Callable[[po.Iter[int]], P] = lambda size: size.collect()
) -> Callable[[Callable[[P], object]], Callable[[P], object]]:
    """Decorator to register benchmarks with multiple data sizes.

    The benchmark category is the name of the enclosing class, so the `pyoiter` and `itertools` versions of a combinator are grouped together.
    """

    def decorator(func: Callable[[P], object]) -> Callable[[P], object]:
        variants = tuple(
            Variant.from_fn(partial(func, po.Iter(range(size)).into(gen)), size)
            for size in SIZES
        )
        BENCHMARKS.append(
            Benchmark(func.__qualname__.split(".")[0], func.__name__, variants)
        )
        return func

    return decorator


def collect_raw_timings(benchmarks: list[Benchmark]) -> tuple[Row, ...]:
    """Collect raw timing data for all benchmarks. Stats computed at the end."""
    total_runs = sum(v.n_runs for b in benchmarks for v in b.variants)
    CONSOLE.print(
        f"Found {len(benchmarks)} benchmarks, {total_runs} total runs",
        style="bold white",
    )

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeRemainingColumn(),
        console=CONSOLE,
    ) as progress:
        task = progress.add_task("[cyan]Running benchmarks...", total=total_runs)
        f = partial(_run_variant, progress, task)
        return po.Chain.from_iterable(
            f(bench, variant) for bench in benchmarks for variant in bench.variants
        ).collect()


def _run_variant(
    progress: Progress,
    task: Any,  # noqa: ANN401
    bench: Benchmark,
    variant: Variant,
) -> po.Iter[Row]:
    def _update_progress(run_idx: int) -> Row:
        progress.update(
            task,
            description=f"[cyan]{bench.category}: {bench.name} @ {variant.size}",
        )
        time_taken = timeit.timeit(variant.fn, number=CALLS_BY_RUN)
        progress.advance(task)
        return Row(bench.category, bench.name, variant.size, run_idx, time_taken)

    return po.Iter(_update_progress(run_idx) for run_idx in range(variant.n_runs))
