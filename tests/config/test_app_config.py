#!filepath: tests/config/test_app_config.py
import pytest
import yaml
from pydantic import ValidationError

from wrapkit.config import AppConfig
from wrapkit.config.bench_config import BenchConfig
from wrapkit.config.log_config import LogConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("WRAPKIT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("WRAPKIT_LOG_DIR", raising=False)


@pytest.fixture
def sample_config_file(tmp_path):
    """
    Temporary YAML config; pytest cleans tmp_path.
    """
    data = {
        "log": {
            "dir": "logs",
            "rotation": "1 day",
            "retention": "30 days",
            "level": "debug",
        },
        "bench": {
            "size": 1000,
            "modulo": 50,
            "warmup_rounds": 1,
            "benchmark_rounds": 2,
        },
    }

    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump(data), encoding="utf-8")
    return config_file


def test_app_config_load(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))

    assert isinstance(cfg, AppConfig)
    assert isinstance(cfg.log, LogConfig)
    assert isinstance(cfg.bench, BenchConfig)


def test_log_config_values(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))
    assert cfg.log.level == "DEBUG"
    assert cfg.log.dir == "logs"


def test_bench_config_values(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))
    assert cfg.bench.size == 1000
    assert cfg.bench.modulo == 50
    assert cfg.bench.benchmark_rounds == 2


def test_default_config_file():
    cfg = AppConfig.load()

    assert cfg.bench.size == 2_000_000
    assert cfg.bench.modulo == 500
    assert cfg.bench.warmup_rounds == 10
    assert cfg.log.dir is None


def test_env_overrides_log_section(sample_config_file, monkeypatch, tmp_path):
    monkeypatch.setenv("WRAPKIT_LOG_LEVEL", "error")
    monkeypatch.setenv("WRAPKIT_LOG_DIR", str(tmp_path / "out"))

    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.log.level == "ERROR"
    assert cfg.log.dir == str(tmp_path / "out")


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        AppConfig.load(path=str(tmp_path / "absent.yml"))


def test_missing_field_should_fail(tmp_path):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text(yaml.safe_dump({"log": {"dir": "logs"}}))

    with pytest.raises(ValidationError):
        AppConfig.load(path=str(bad_file))


def test_invalid_values_fail(tmp_path):
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text(yaml.safe_dump({"log": {"level": "LOUD"}, "bench": {"modulo": 0}}))

    with pytest.raises(ValidationError):
        AppConfig.load(path=str(bad_file))
