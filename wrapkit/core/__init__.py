#!filepath: wrapkit/core/__init__.py
from .invoker import arity, invoke, spread, varargs
from .decorator import Decorator, compose, decorator
from .context import Context, default_context, with_context
from .contexts import (
    counting_context,
    locking_context,
    logging_context,
    timing_context,
    validating_context,
)
from .memo import Memoizer, memoizer

__all__ = [
    "arity", "invoke", "spread", "varargs",
    "Decorator", "compose", "decorator",
    "Context", "default_context", "with_context",
    "counting_context", "locking_context", "logging_context",
    "timing_context", "validating_context",
    "Memoizer", "memoizer",
]
