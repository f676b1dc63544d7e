#!filepath: wrapkit/__init__.py

__version__ = "0.1.0"

# logger first: every other module does `from wrapkit import logs`
from .utils.logger import Logging, logs
from .utils.errors import (
    ArgumentError,
    ArityMismatch,
    CacheKeyError,
    ResultError,
    WrapkitError,
)
from .core import (
    Context,
    Decorator,
    Memoizer,
    arity,
    compose,
    counting_context,
    decorator,
    default_context,
    invoke,
    locking_context,
    logging_context,
    memoizer,
    spread,
    timing_context,
    validating_context,
    varargs,
    with_context,
)
from .core import checks
from .utils.retry import Retry
from .config.app_config import AppConfig

# alias
retry = Retry

__all__ = [
    "logs", "Logging",
    "retry",
    "AppConfig",
    "Decorator", "decorator", "compose",
    "Context", "default_context", "with_context",
    "counting_context", "locking_context", "logging_context",
    "timing_context", "validating_context",
    "Memoizer", "memoizer",
    "arity", "invoke", "spread", "varargs",
    "checks",
    "WrapkitError", "ArityMismatch", "ArgumentError", "ResultError", "CacheKeyError",
]
