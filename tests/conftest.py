# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture
def log_records():
    """
    Collect loguru messages emitted during the test (level, message).
    """
    records = []
    sink_id = logger.add(
        lambda msg: records.append((msg.record["level"].name, msg.record["message"])),
        level="DEBUG",
    )
    yield records
    logger.remove(sink_id)


@pytest.fixture
def trace():
    """
    Ordered list of events shared by targets and context operations.
    """
    return []
