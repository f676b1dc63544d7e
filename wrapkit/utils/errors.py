#!filepath: wrapkit/utils/errors.py
from typing import Any, Optional


class WrapkitError(RuntimeError):
    """
    Base class for errors raised by the engine itself.

    Errors raised by wrapped targets, context operations or user checks
    are never converted into this type: they surface unchanged.
    """


class ArityMismatch(WrapkitError, TypeError):
    """
    Raised when a target is invoked with an argument count (or keyword set)
    its signature cannot accept.

    Contract (FROZEN):
    - Always propagates to the wrapper's caller
    - Never handed to a context catcher
    """

    def __init__(self, target: Any, given: int, detail: Optional[str] = None):
        self.target = target
        self.given = given
        name = getattr(target, "__qualname__", None) or repr(target)
        msg = f"{name}() cannot be invoked with {given} positional argument(s)"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class ArgumentError(WrapkitError, ValueError):
    """Raised by validating contexts when an argument is rejected."""


class ResultError(WrapkitError, ValueError):
    """Raised by result checks when a return value is rejected."""


class CacheKeyError(WrapkitError, TypeError):
    """Raised when memoized arguments cannot form a cache key (unhashable)."""
