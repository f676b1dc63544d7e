#!filepath: wrapkit/config/bench_config.py
from pydantic import BaseModel, Field


class BenchConfig(BaseModel):
    """
    filter-map-reduce workload: [i % modulo for i in range(size)]
    """

    size: int = Field(2_000_000, ge=0)
    modulo: int = Field(500, ge=1)
    warmup_rounds: int = Field(10, ge=0)
    benchmark_rounds: int = Field(10, ge=1)
