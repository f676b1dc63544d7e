#!filepath: wrapkit/observability/timer.py
import time
from typing import Dict, List


class Timer:
    """
    High resolution named timer
    - start(name)
    - end(name) -> elapsed seconds

    Starts under the same name nest (LIFO), so a recursive timed function
    gets one measurement per call.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._start: Dict[str, List[float]] = {}

    def start(self, name: str):
        if not self.enabled:
            return
        self._start.setdefault(name, []).append(time.perf_counter())

    def end(self, name: str) -> float:
        if not self.enabled:
            return 0.0
        stack = self._start.get(name)
        if not stack:
            return 0.0
        elapsed = time.perf_counter() - stack.pop()
        if not stack:
            del self._start[name]
        return elapsed

    def running(self, name: str) -> int:
        return len(self._start.get(name, ()))
