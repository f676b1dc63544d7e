#!filepath: wrapkit/utils/retry.py
import random
import time
from functools import wraps
from typing import Callable, Tuple, Type

from wrapkit import logs
from wrapkit.core.decorator import Decorator
from wrapkit.core.invoker import callable_name, invoke
from wrapkit.utils.errors import ArityMismatch


class Retry:
    """
    Synchronous retry with exponential backoff, jitter and logging.
    ArityMismatch is never retried.
    """

    @staticmethod
    def run(
        func: Callable,
        *args,
        exceptions: Tuple[Type[Exception], ...] = (Exception,),
        max_attempts: int = 3,
        delay: float = 1.0,
        backoff: float = 2.0,
        jitter: bool = True,
        **kwargs,
    ):
        """
        Call func(*args, **kwargs) until it succeeds or max_attempts is reached.
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")

        attempt = 1
        while attempt <= max_attempts:

            try:
                return invoke(func, args, kwargs)

            except ArityMismatch:
                raise

            except exceptions as e:
                if attempt == max_attempts:
                    logs.error(f"[Retry] {callable_name(func)} failed after {max_attempts} attempts")
                    raise

                wait = delay * (backoff ** (attempt - 1))
                if jitter:
                    wait = wait * random.uniform(0.8, 1.2)

                logs.warning(
                    f"[Retry] attempt {attempt}/{max_attempts} failed: {e}. "
                    f"retrying in {wait:.2f}s..."
                )
                time.sleep(wait)

                attempt += 1

    @staticmethod
    def decorator(
        exceptions: Tuple[Type[Exception], ...] = (Exception,),
        max_attempts: int = 2,
        delay: float = 1.0,
        backoff: float = 2.0,
        jitter: bool = True,
    ) -> Decorator:
        """
        Parametrized decorator form; composes like any other Decorator.
        """

        def wrapper(func: Callable):
            @wraps(func)
            def inner(*args, **kwargs):
                return Retry.run(
                    func,
                    *args,
                    exceptions=exceptions,
                    max_attempts=max_attempts,
                    delay=delay,
                    backoff=backoff,
                    jitter=jitter,
                    **kwargs,
                )

            return inner

        return Decorator(wrapper, name="retry")
