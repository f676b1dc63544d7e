#!filepath: wrapkit/core/checks.py
from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from wrapkit.core.context import Context, with_context
from wrapkit.core.decorator import Decorator
from wrapkit.utils.errors import ArgumentError, ResultError


@dataclass(frozen=True)
class Check:
    """
    Named predicate used by check_arguments / check_result.

    Checks combine: is_integer & is_positive, is_string | is_none ...
    """

    name: str
    test: Callable[[Any], bool]

    def __call__(self, value: Any) -> bool:
        return bool(self.test(value))

    def __and__(self, other: "Check") -> "Check":
        return Check(f"({self.name} and {other.name})", lambda v: self(v) and other(v))

    def __or__(self, other: "Check") -> "Check":
        return Check(f"({self.name} or {other.name})", lambda v: self(v) or other(v))


# ------------------------------------------------------------------
# Built-in checks
# ------------------------------------------------------------------
def _is_integer(v):
    return isinstance(v, numbers.Integral) and not isinstance(v, bool)


def _is_number(v):
    return isinstance(v, numbers.Number) and not isinstance(v, bool)


def _has_len(v):
    return hasattr(v, "__len__")


any_value = Check("any", lambda v: True)
is_integer = Check("integer", _is_integer)
is_number = Check("number", _is_number)
is_string = Check("string", lambda v: isinstance(v, str))
is_positive = Check("positive", lambda v: _is_number(v) and v > 0)
is_negative = Check("negative", lambda v: _is_number(v) and v < 0)
is_not_none = Check("not none", lambda v: v is not None)
is_empty = Check("empty", lambda v: _has_len(v) and len(v) == 0)
is_not_empty = Check("not empty", lambda v: _has_len(v) and len(v) > 0)


def has_type(*types: type) -> Check:
    names = "|".join(t.__name__ for t in types)
    return Check(f"type {names}", lambda v: isinstance(v, types))


def has_length(n: int) -> Check:
    return Check(f"length {n}", lambda v: _has_len(v) and len(v) == n)


def is_in(values: Iterable[Any]) -> Check:
    allowed = tuple(values)
    return Check(f"one of {allowed!r}", lambda v: v in allowed)


# ------------------------------------------------------------------
# Contract decorators (context instantiations)
# ------------------------------------------------------------------
def check_arguments(*checks: Check) -> Decorator:
    """
    Validate positional argument i against checks[i] before the call.
    Surplus arguments are not checked.

        @check_arguments(is_integer, is_string)
        def label(n, text): ...
    """

    def _entry(args):
        for index, (check, value) in enumerate(zip(checks, args)):
            if not check(value):
                raise ArgumentError(
                    f"argument {index} = {value!r} is not {check.name}"
                )
        return args

    return with_context(Context(entry=_entry))


def check_result(check: Check) -> Decorator:
    """Validate the return value after a successful call."""

    def _exit(result):
        if not check(result):
            raise ResultError(f"result {result!r} is not {check.name}")
        return result

    return with_context(Context(exit=_exit))
