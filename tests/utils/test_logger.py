#!filepath: tests/utils/test_logger.py
import subprocess
import sys
from pathlib import Path

from loguru import logger

from wrapkit.config.log_config import LogConfig
from wrapkit.utils.logger import Logging

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def test_import_keeps_host_sinks():
    """A sink installed before `import wrapkit` still receives messages."""
    script = (
        "import io\n"
        "from loguru import logger\n"
        "buf = io.StringIO()\n"
        "logger.add(buf, format='{message}')\n"
        "import wrapkit\n"
        "logger.info('host message')\n"
        "print('CAPTURED=' + buf.getvalue().strip())\n"
    )
    result = subprocess.run(
        [sys.executable, "-c", script],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
        check=True,
    )

    assert "CAPTURED=host message" in result.stdout


def test_configure_only_replaces_own_sinks():
    host = []
    host_id = logger.add(lambda msg: host.append(msg.record["message"]), level="DEBUG")
    try:
        logging = Logging(log_level="ERROR")
        logging.configure(LogConfig(level="WARNING"))
        logging.configure(LogConfig(level="INFO"))

        logger.info("still delivered")
        assert "still delivered" in host
        assert len(logging._sink_ids) == 1
    finally:
        logger.remove(host_id)
        for sink_id in logging._sink_ids:
            logger.remove(sink_id)


def test_configure_survives_external_remove():
    logging = Logging(log_level="ERROR")
    logger.remove()

    logging.configure(LogConfig(level="ERROR"))

    assert len(logging._sink_ids) == 1
    logger.remove(logging._sink_ids[0])


def test_file_sink(tmp_path):
    logging = Logging(log_level="ERROR")
    logging.configure(LogConfig(dir=str(tmp_path / "logs"), level="INFO"))
    try:
        assert (tmp_path / "logs").is_dir()
        assert len(logging._sink_ids) == 2
    finally:
        for sink_id in logging._sink_ids:
            logger.remove(sink_id)
