#!filepath: wrapkit/core/contexts.py
"""
Ready-made Context instantiations.

Each factory returns a fresh Context; wrap functions with
with_context(<context>). Reusing one context across several functions
shares its state (counters, lock, timer) between them.
"""
from __future__ import annotations

import threading
from typing import Any, Callable, Optional, Sequence, Tuple

from wrapkit import logs
from wrapkit.core.context import Context
from wrapkit.observability.metrics import MetricRecorder
from wrapkit.observability.timer import Timer
from wrapkit.utils.errors import ArgumentError

Rule = Tuple[Callable[[Sequence[Any]], bool], str]


def counting_context(key: str = "count") -> Context:
    """entry increments state[key]; nothing else changes."""
    ctx = Context()
    ctx.set(key, 0)

    def _entry(args):
        ctx.state[key] += 1
        return args

    return ctx.define("entry", _entry)


def logging_context(
    name: Optional[str] = None,
    log_inputs: bool = True,
    log_outputs: bool = True,
) -> Context:
    """
    [CALL] / [RETURN] lines around every call, [ERROR] with traceback
    before the error is re-raised.
    """
    label = name or "call"

    def _entry(args):
        if log_inputs:
            logs.info(f"[CALL] {label} args={args}")
        return args

    def _exit(result):
        if log_outputs:
            logs.info(f"[RETURN] {label} result={result}")
        return result

    def _catcher(error):
        logs.exception(f"[ERROR] {label}: {type(error).__name__}: {error}")
        raise error

    return Context(entry=_entry, exit=_exit, catcher=_catcher)


def validating_context(*rules: Rule) -> Context:
    """
    Each rule is (predicate(args) -> bool, message); the first failing
    rule raises ArgumentError(message) before the target runs.

        positive = validating_context((lambda a: a[0] > 0, "expected a positive value"))
    """

    def _entry(args):
        for predicate, message in rules:
            if not predicate(args):
                raise ArgumentError(message)
        return args

    return Context(entry=_entry)


def locking_context(lock=None) -> Context:
    """
    Hold `lock` (a fresh RLock by default) for the duration of each call;
    released by the finalizer on every exit path.
    """
    guard = lock if lock is not None else threading.RLock()

    def _entry(args):
        guard.acquire()
        return args

    ctx = Context(entry=_entry, finalizer=guard.release)
    ctx.set("lock", guard)
    return ctx


def timing_context(
    name: str,
    timer: Optional[Timer] = None,
    metrics: Optional[MetricRecorder] = None,
) -> Context:
    """
    Measure wall time of each call; elapsed seconds are recorded under
    `name` in the MetricRecorder kept in state["metrics"].

    Limitation: the Timer keeps one LIFO stack per name and is not
    synchronized. When the same context times overlapping calls from
    several threads, one thread's end() may pop another thread's start(),
    so individual measurements get mixed up. Use one timing_context per
    thread, or wrap the function in a locking_context as well, when
    per-call timings must be exact.
    """
    timer = timer or Timer()
    metrics = metrics or MetricRecorder()

    def _entry(args):
        timer.start(name)
        return args

    def _finalizer():
        metrics.record(name, timer.end(name))

    ctx = Context(entry=_entry, finalizer=_finalizer)
    ctx.set("timer", timer)
    ctx.set("metrics", metrics)
    return ctx
