#!filepath: wrapkit/observability/metrics.py
from dataclasses import dataclass, field
from typing import Any, Dict, List

from wrapkit import logs


@dataclass
class MetricRecorder:
    """
    Last value per metric name, plus the full series for repeated records.
    """

    enabled: bool = True
    metrics: Dict[str, Any] = field(default_factory=dict)
    series: Dict[str, List[Any]] = field(default_factory=dict)

    def record(self, name: str, value: Any):
        if not self.enabled:
            return
        self.metrics[name] = value
        self.series.setdefault(name, []).append(value)
        logs.debug(f"[Metric] {name} = {value}")

    def mean(self, name: str) -> float:
        values = self.series.get(name)
        if not values:
            return 0.0
        return sum(values) / len(values)
