#!filepath: wrapkit/core/invoker.py
from __future__ import annotations

import inspect
from functools import wraps
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from wrapkit.utils.errors import ArityMismatch

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL,)
_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


_UNRESOLVED = object()


def signature_of(target: Callable) -> Optional[inspect.Signature]:
    # wrappers are bound on their own (*args, **kwargs) signature, not the
    # wrapped target's; builtins may not expose one at all
    try:
        return inspect.signature(target, follow_wrapped=False)
    except (TypeError, ValueError):
        return None


def arity(target: Callable) -> Tuple[int, Optional[int]]:
    """
    Positional arity of target as (minimum, maximum).

    maximum is None when the target takes *args, and (0, None) is returned
    when the signature cannot be introspected.
    """
    sig = signature_of(target)
    if sig is None:
        return 0, None

    minimum = 0
    maximum: Optional[int] = 0
    for p in sig.parameters.values():
        if p.kind in _VARIADIC:
            maximum = None
        elif p.kind in _POSITIONAL:
            if p.default is inspect.Parameter.empty:
                minimum += 1
            if maximum is not None:
                maximum += 1
    return minimum, maximum


def invoke(
    target: Callable,
    args: Sequence[Any] = (),
    kwargs: Optional[Dict[str, Any]] = None,
    signature: Any = _UNRESOLVED,
) -> Any:
    """
    Invoke target with a materialized argument sequence.

    Contract (FROZEN):
    - arguments are bound against the signature BEFORE the call,
      a failed bind raises ArityMismatch
    - errors raised by the target itself propagate unchanged
      (a TypeError from inside the target is never reclassified)

    Wrappers resolve the signature once with signature_of() and pass it
    in; None means "not introspectable, call directly".
    """
    args = tuple(args)
    kwargs = kwargs or {}

    sig = signature_of(target) if signature is _UNRESOLVED else signature
    if sig is not None:
        try:
            sig.bind(*args, **kwargs)
        except TypeError as e:
            raise ArityMismatch(target, len(args), str(e)) from e

    return target(*args, **kwargs)


def varargs(target: Callable) -> Callable:
    """
    Arity-erasure wrapper: a plain *args/**kwargs function forwarding to target.
    """
    if not callable(target):
        raise TypeError(f"varargs() expects a callable, got {type(target).__name__}")
    sig = signature_of(target)

    @wraps(target)
    def wrapper(*args, **kwargs):
        return invoke(target, args, kwargs, sig)

    return wrapper


def spread(target: Callable) -> Callable:
    """
    Adapter taking ONE sequence and invoking target with its elements.

    Usage:
        spread(add)([2, 3])  ->  add(2, 3)
    """
    if not callable(target):
        raise TypeError(f"spread() expects a callable, got {type(target).__name__}")
    sig = signature_of(target)

    @wraps(target)
    def wrapper(arguments: Sequence[Any]):
        return invoke(target, arguments, signature=sig)

    return wrapper


def callable_name(target: Callable) -> str:
    return getattr(target, "__qualname__", None) or getattr(target, "__name__", None) or repr(target)
