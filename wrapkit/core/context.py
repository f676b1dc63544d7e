#!filepath: wrapkit/core/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from functools import wraps
from typing import Any, Callable, Dict, Optional, Sequence

from wrapkit import logs
from wrapkit.core.decorator import Decorator
from wrapkit.core.invoker import callable_name, invoke, signature_of
from wrapkit.utils.errors import ArityMismatch

OPERATIONS = ("entry", "exit", "catcher", "finalizer")


# ------------------------------------------------------------------
# Named no-op operations (defaults of every Context)
# ------------------------------------------------------------------
def identity_entry(args: Sequence[Any]) -> Sequence[Any]:
    return args


def identity_exit(result: Any) -> Any:
    return result


def rethrow(error: BaseException) -> Any:
    raise error


def noop_finalizer() -> None:
    pass


@dataclass
class Context:
    """
    Shared, mutable record driving with_context().

    Four extension points, resolved at call time:
      entry(args) -> args'
      exit(result) -> result'
      catcher(error) -> result   (or raise)
      finalizer() -> None

    Overriding an operation is field replacement (constructor keyword,
    attribute assignment or define()), never subclassing.

    Every wrapper built from the same instance shares `state`; mutations
    happen in invocation order and are NOT synchronized.
    """

    entry: Callable[[Sequence[Any]], Sequence[Any]] = identity_entry
    exit: Callable[[Any], Any] = identity_exit
    catcher: Callable[[BaseException], Any] = rethrow
    finalizer: Callable[[], None] = noop_finalizer
    state: Dict[str, Any] = field(default_factory=dict)

    def define(self, name: str, fn: Callable[..., Any]) -> "Context":
        if name not in OPERATIONS:
            raise ValueError(f"unknown context operation '{name}', expected one of {OPERATIONS}")
        if not callable(fn):
            raise TypeError(f"context operation '{name}' must be callable")
        setattr(self, name, fn)
        return self

    def set(self, key: str, value: Any):
        self.state[key] = value

    def get(self, key: str, default=None):
        return self.state.get(key, default)


def default_context() -> Context:
    return Context()


def _finalize(context: Context, target: Callable[..., Any]) -> None:
    # original outcome wins: a failing finalizer is reported, never raised
    try:
        context.finalizer()
    except Exception:
        logs.exception(
            f"[Context] finalizer failed for {callable_name(target)}, "
            f"keeping original outcome"
        )


def with_context(context: Optional[Context] = None) -> Decorator:
    """
    Generic context decorator.

    Per invocation:
      1. args = entry(args)          errors propagate, catcher NOT involved
      2. result = target(*args)
           ok    -> exit(result)
           error -> catcher(error)   (ArityMismatch always propagates)
      3. finalizer()                 exactly once, on every path

    Keyword arguments bypass entry and are forwarded as given.
    """
    ctx = context if context is not None else default_context()

    def _decorate(target: Callable[..., Any]) -> Callable[..., Any]:
        sig = signature_of(target)

        @wraps(target)
        def wrapper(*args, **kwargs):
            try:
                call_args = tuple(ctx.entry(args))
                try:
                    result = invoke(target, call_args, kwargs, sig)
                except ArityMismatch:
                    raise
                except Exception as error:
                    logs.debug(f"[Context] {callable_name(target)} raised {type(error).__name__}, calling catcher")
                    return ctx.catcher(error)
                return ctx.exit(result)
            finally:
                _finalize(ctx, target)

        return wrapper

    return Decorator(_decorate, name="with_context")
