#!filepath: wrapkit/core/memo.py
from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Dict, Hashable, Tuple

from wrapkit import logs
from wrapkit.core.invoker import callable_name, invoke, signature_of
from wrapkit.utils.errors import CacheKeyError

_MISSING = object()


def _identity_key(target: Callable[..., Any]) -> Hashable:
    try:
        hash(target)
    except TypeError:
        return ("id", id(target))
    return target


class Memoizer:
    """
    Memoizing decorator backed by an explicit cache.

    Cache key = (target identity, positional args, sorted kwargs).
    Keys compare with ==, so add(1, 2) and add(1.0, 2) share an entry
    (like functools.lru_cache); pass typed=True to also key on the
    argument types.
    One Memoizer = one cache: apply the SAME instance to every function
    that should share it; a new Memoizer starts empty.

    Contract (FROZEN):
    - hit  -> stored result, target not invoked
    - miss -> invoke, store, return (None results are cached too)
    - errors raised by the target are never cached
    - unhashable arguments raise CacheKeyError, target not invoked

    Limitation: no per-key at-most-once synchronization. Two threads racing
    on the same uncached key may both invoke the target; the last result
    stored wins. Guard the wrapped function (e.g. locking_context) when
    that matters.
    """

    def __init__(self, typed: bool = False):
        self.typed = typed
        self._cache: Dict[Tuple[Hashable, ...], Any] = {}
        self.hits = 0
        self.misses = 0

    def __call__(self, target: Callable[..., Any]) -> Callable[..., Any]:
        if not callable(target):
            raise TypeError(f"memoizer applied to non-callable {type(target).__name__}")

        identity = _identity_key(target)
        sig = signature_of(target)

        @wraps(target)
        def wrapper(*args, **kwargs):
            items = tuple(sorted(kwargs.items()))
            key = (identity, args, items)
            if self.typed:
                key += (
                    tuple(type(a) for a in args),
                    tuple(type(v) for _, v in items),
                )
            try:
                cached = self._cache.get(key, _MISSING)
            except TypeError as e:
                raise CacheKeyError(
                    f"cannot memoize {callable_name(target)}: unhashable arguments ({e})"
                ) from e

            if cached is not _MISSING:
                self.hits += 1
                logs.debug(f"[Memo] hit {callable_name(target)} args={args}")
                return cached

            self.misses += 1
            result = invoke(target, args, kwargs, sig)
            self._cache[key] = result
            logs.debug(f"[Memo] miss {callable_name(target)} args={args}")
            return result

        return wrapper

    def clear(self):
        self._cache.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._cache)

    def __repr__(self) -> str:
        return f"<Memoizer entries={len(self._cache)} hits={self.hits} misses={self.misses}>"


def memoizer(typed: bool = False) -> Memoizer:
    return Memoizer(typed=typed)
