#!filepath: tests/test_cli.py
import pytest
import yaml
from typer.testing import CliRunner

from wrapkit import __version__
from wrapkit.cli import app

runner = CliRunner()


@pytest.fixture
def small_config(tmp_path, monkeypatch):
    monkeypatch.delenv("WRAPKIT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("WRAPKIT_LOG_DIR", raising=False)
    path = tmp_path / "bench.yml"
    path.write_text(
        yaml.safe_dump(
            {
                "log": {"level": "WARNING"},
                "bench": {"size": 200, "modulo": 50, "warmup_rounds": 0, "benchmark_rounds": 1},
            }
        ),
        encoding="utf-8",
    )
    return path


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_config_prints_resolved_values(small_config):
    result = runner.invoke(app, ["config", "--config", str(small_config)])

    assert result.exit_code == 0
    assert "200" in result.stdout


def test_bench_runs_every_variant(small_config):
    result = runner.invoke(app, ["bench", "--config", str(small_config), "--size", "100"])

    assert result.exit_code == 0, result.stdout
    for name in ("plain", "varargs", "with_context", "memoizer"):
        assert name in result.stdout
    assert "size=100" in result.stdout


def test_missing_config_fails(tmp_path):
    result = runner.invoke(app, ["bench", "--config", str(tmp_path / "nope.yml")])

    assert result.exit_code != 0
    assert isinstance(result.exception, FileNotFoundError)


@pytest.mark.parametrize(
    "option",
    [["--rounds", "0"], ["--warmup=-1"], ["--size=-5"]],
)
def test_bench_rejects_out_of_range_overrides(small_config, option):
    result = runner.invoke(app, ["bench", "--config", str(small_config), *option])

    assert result.exit_code == 2
    assert not isinstance(result.exception, ZeroDivisionError)
