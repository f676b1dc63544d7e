#!filepath: wrapkit/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .bench_config import BenchConfig
from .log_config import LogConfig


def project_root() -> str:
    """
    Project root, derived from this file's location:
    wrapkit/config/app_config.py -> wrapkit/config -> wrapkit -> project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig
    bench: BenchConfig

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - defaults to wrapkit/config/base.yml
        - WRAPKIT_LOG_LEVEL / WRAPKIT_LOG_DIR override the log section
        - does not depend on the current working directory
        """
        # 1) .env at the project root (existing env vars win)
        load_dotenv(os.path.join(project_root(), ".env"))

        # 2) config file
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) env overrides
        log = dict(raw.get("log") or {})
        if os.getenv("WRAPKIT_LOG_LEVEL"):
            log["level"] = os.getenv("WRAPKIT_LOG_LEVEL")
        if os.getenv("WRAPKIT_LOG_DIR"):
            log["dir"] = os.getenv("WRAPKIT_LOG_DIR")
        if log:
            raw["log"] = log

        return cls(**raw)
