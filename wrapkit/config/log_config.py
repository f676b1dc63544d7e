#!filepath: wrapkit/config/log_config.py
from typing import Optional

from pydantic import BaseModel, field_validator

_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class LogConfig(BaseModel):
    dir: Optional[str] = None
    rotation: str = "1 day"
    retention: str = "30 days"
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = v.upper()
        if v not in _LEVELS:
            raise ValueError(f"unknown log level {v!r}, expected one of {_LEVELS}")
        return v
