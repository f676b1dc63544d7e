#!filepath: wrapkit/bench/filter_map_reduce.py
"""
filter-map-reduce workload

    data   = [i % modulo for i in range(size)]
    result = sum(n * 2 for n in data if n % 2 == 0)

run() is the plain pipeline; run_decorated() routes every stage call
through a decorated function so the cost of a wrapper layer can be
compared against the plain version.
"""
from __future__ import annotations

from functools import reduce
from typing import Callable, Dict, List, Optional

from wrapkit import logs
from wrapkit.core.context import with_context
from wrapkit.core.decorator import DecoratorLike, decorator
from wrapkit.core.invoker import varargs
from wrapkit.core.memo import memoizer
from wrapkit.observability.timer import Timer


def make_dataset(size: int, modulo: int = 500) -> List[int]:
    return [i % modulo for i in range(size)]


def is_even(n: int) -> bool:
    return n % 2 == 0


def double(n: int) -> int:
    return n * 2


def add(acc: int, n: int) -> int:
    return acc + n


def run(data: List[int]) -> int:
    return reduce(add, map(double, filter(is_even, data)), 0)


def run_decorated(data: List[int], decorate: DecoratorLike) -> int:
    d = decorator(decorate)
    keep, transform, combine = d(is_even), d(double), d(add)
    return reduce(combine, map(transform, filter(keep, data)), 0)


def variants() -> Dict[str, Optional[Callable]]:
    """Stage wrappers compared by `wrapkit bench`; None = plain pipeline."""
    return {
        "plain": None,
        "varargs": varargs,
        "with_context": with_context(),
        "memoizer": memoizer(),
    }


def measure(
    fn: Callable[[List[int]], int],
    data: List[int],
    warmup_rounds: int = 10,
    rounds: int = 10,
) -> List[float]:
    """
    Elapsed seconds of `rounds` calls of fn(data), after `warmup_rounds`
    untimed calls.
    """
    timer = Timer()
    for _ in range(warmup_rounds):
        fn(data)

    elapsed = []
    for i in range(rounds):
        timer.start("round")
        fn(data)
        elapsed.append(timer.end("round"))
        logs.debug(f"[Bench] round {i + 1}/{rounds} took {elapsed[-1]:.4f}s")
    return elapsed
