#!filepath: wrapkit/observability/__init__.py
from .timer import Timer
from .metrics import MetricRecorder

__all__ = ["Timer", "MetricRecorder"]
