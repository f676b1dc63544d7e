#!filepath: wrapkit/core/decorator.py
from __future__ import annotations

from typing import Any, Callable, Optional, Union

DecoratorLike = Union["Decorator", Callable[[Callable[..., Any]], Callable[..., Any]]]


class Decorator:
    """
    A callable turning a target callable into a wrapper callable.

    Contract (FROZEN):
    - applying a decorator never mutates the target
    - every call of the wrapper is defined by the target + captured state
    - D1.and_then(D2) applied to f == D2(D1(f))  (D2 outermost)
    """

    __slots__ = ("fn", "name")

    def __init__(self, fn: Callable[[Callable[..., Any]], Callable[..., Any]], name: Optional[str] = None):
        if not callable(fn):
            raise TypeError(f"Decorator expects a callable, got {type(fn).__name__}")
        self.fn = fn
        self.name = name or getattr(fn, "__name__", type(fn).__name__)

    def __call__(self, target: Callable[..., Any]) -> Callable[..., Any]:
        if not callable(target):
            raise TypeError(
                f"decorator '{self.name}' applied to non-callable {type(target).__name__}"
            )
        return self.fn(target)

    def and_then(self, other: DecoratorLike) -> "Decorator":
        """self innermost, other outermost."""
        return compose(self, other)

    def __repr__(self) -> str:
        return f"<Decorator {self.name}>"


def decorator(fn: DecoratorLike) -> Decorator:
    """
    Coerce a plain `target -> wrapper` function into a Decorator.

    Usable on its own definition:

        @decorator
        def shout(target):
            def wrapper(*args):
                return str(target(*args)).upper()
            return wrapper
    """
    if isinstance(fn, Decorator):
        return fn
    return Decorator(fn)


def _identity(target: Callable[..., Any]) -> Callable[..., Any]:
    return target


def compose(*decorators: DecoratorLike) -> Decorator:
    """
    Combine decorators, first one innermost:

        compose(d1, d2)(f) == d2(d1(f))

    i.e. the same as stacking

        @d2
        @d1
        def f(...): ...
    """
    if not decorators:
        return Decorator(_identity, name="identity")

    chain = tuple(decorator(d) for d in decorators)
    if len(chain) == 1:
        return chain[0]

    def _composed(target: Callable[..., Any]) -> Callable[..., Any]:
        wrapped = target
        for d in chain:
            wrapped = d(wrapped)
        return wrapped

    return Decorator(_composed, name=" >> ".join(d.name for d in chain))
