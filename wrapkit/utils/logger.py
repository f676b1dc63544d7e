#!filepath: wrapkit/utils/logger.py
import os
import sys
from typing import List, Optional

from loguru import logger

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"


class Logging:
    """
    Logging facade over loguru
    ---------------------------------------
    - stderr sink, level from WRAPKIT_LOG_LEVEL (default WARNING)
    - optional file sink with rotation / retention
    - engine internals log at DEBUG, finalizer failures at ERROR
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: Optional[str] = None,
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = (log_level or os.getenv("WRAPKIT_LOG_LEVEL") or "WARNING").upper()
        self._sink_ids: List[int] = []

        self._configure()

    def _configure(self) -> None:
        """
        Replace the sinks owned by this instance. Sinks added by the host
        application are left alone.
        """
        for sink_id in self._sink_ids:
            try:
                logger.remove(sink_id)
            except ValueError:
                # already removed by someone else (e.g. logger.remove())
                pass
        self._sink_ids = []

        self._sink_ids.append(logger.add(sys.stderr, level=self.level, format=_FORMAT))

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
            sink_id = logger.add(
                sink=os.path.join(self.log_dir, "{time:YYYY-MM-DD}.log"),
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format=_FORMAT,
                enqueue=True,  # safe across threads / processes
                backtrace=True,
                diagnose=True,
            )
            self._sink_ids.append(sink_id)

    def configure(self, cfg) -> "Logging":
        """
        Reconfigure from a LogConfig (see wrapkit.config.log_config).
        """
        self.log_dir = cfg.dir
        self.rotation = cfg.rotation
        self.retention = cfg.retention
        self.level = cfg.level.upper()
        self._configure()
        self.debug(f"[Logging] configured level={self.level} dir={self.log_dir}")
        return self

    # ----------- log methods -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.opt(depth=1, exception=True).error(msg, *args, **kwargs)


# default global logs (reconfigured through logs.configure)
logs = Logging()
