"""Benchmarks comparing pyoiter cursors with their itertools counterparts."""

import itertools
import operator
from collections import deque

import pyoiter as po

from ._registery import bench


def _drain(iterable: object) -> None:
    deque(iterable, maxlen=0)  # type: ignore[call-overload]


class Chain:
    """Benchmark concatenation of several sequences."""

    @bench(gen=lambda size: size.collect(list))
    @staticmethod
    def pyoiter(data: list[int]) -> object:
        """Benchmark Chain."""
        return _drain(po.Chain(data, data, data))

    @bench(gen=lambda size: size.collect(list))
    @staticmethod
    def itertools(data: list[int]) -> object:
        """Benchmark itertools.chain."""
        return _drain(itertools.chain(data, data, data))


class Islice:
    """Benchmark stepped slicing."""

    @bench()
    @staticmethod
    def pyoiter(data: tuple[int, ...]) -> object:
        """Benchmark Islice."""
        return _drain(po.Islice(data, 1, None, 3))

    @bench()
    @staticmethod
    def itertools(data: tuple[int, ...]) -> object:
        """Benchmark itertools.islice."""
        return _drain(itertools.islice(data, 1, None, 3))


class Accumulate:
    """Benchmark running totals."""

    @bench()
    @staticmethod
    def pyoiter(data: tuple[int, ...]) -> object:
        """Benchmark Accumulate."""
        return _drain(po.Accumulate(data, operator.add))

    @bench()
    @staticmethod
    def itertools(data: tuple[int, ...]) -> object:
        """Benchmark itertools.accumulate."""
        return _drain(itertools.accumulate(data, operator.add))


class GroupBy:
    """Benchmark grouping of runs, consuming every group."""

    @bench(gen=lambda size: size.collect(lambda it: [x // 8 for x in it]))
    @staticmethod
    def pyoiter(data: list[int]) -> object:
        """Benchmark GroupBy."""
        for _, group in po.GroupBy(data):
            _drain(group)

    @bench(gen=lambda size: size.collect(lambda it: [x // 8 for x in it]))
    @staticmethod
    def itertools(data: list[int]) -> object:
        """Benchmark itertools.groupby."""
        for _, group in itertools.groupby(data):
            _drain(group)


class Tee:
    """Benchmark interleaved reads of two tee cursors."""

    @bench()
    @staticmethod
    def pyoiter(data: tuple[int, ...]) -> object:
        """Benchmark tee."""
        return _drain(zip(*po.tee(data), strict=True))

    @bench()
    @staticmethod
    def itertools(data: tuple[int, ...]) -> object:
        """Benchmark itertools.tee."""
        return _drain(zip(*itertools.tee(data), strict=True))


class ZipLongest:
    """Benchmark zipping uneven sequences."""

    @bench()
    @staticmethod
    def pyoiter(data: tuple[int, ...]) -> object:
        """Benchmark ZipLongest."""
        return _drain(po.ZipLongest(data, data[::2], fillvalue=0))

    @bench()
    @staticmethod
    def itertools(data: tuple[int, ...]) -> object:
        """Benchmark itertools.zip_longest."""
        return _drain(itertools.zip_longest(data, data[::2], fillvalue=0))


class Combinations:
    """Benchmark pairs drawn from a small pool."""

    @bench(gen=lambda size: size.step_by(16).collect())
    @staticmethod
    def pyoiter(data: tuple[int, ...]) -> object:
        """Benchmark Combinations."""
        return _drain(po.Combinations(data, 2))

    @bench(gen=lambda size: size.step_by(16).collect())
    @staticmethod
    def itertools(data: tuple[int, ...]) -> object:
        """Benchmark itertools.combinations."""
        return _drain(itertools.combinations(data, 2))
