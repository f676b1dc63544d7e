#!filepath: wrapkit/cli.py
from typing import Optional

import typer
from rich import print

from wrapkit import __version__, logs
from wrapkit.config import AppConfig

app = typer.Typer(help="wrapkit decorator engine CLI")


def _load(config: Optional[str]) -> AppConfig:
    cfg = AppConfig.load(config)
    logs.configure(cfg.log)
    return cfg


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def config(path: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file")):
    """
    Print the resolved configuration (YAML + .env + WRAPKIT_* overrides)
    """
    cfg = _load(path)
    print(cfg.model_dump())


@app.command()
def bench(
    path: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config file"),
    size: Optional[int] = typer.Option(None, min=0, help="dataset size (overrides config)"),
    rounds: Optional[int] = typer.Option(None, min=1, help="timed rounds (overrides config)"),
    warmup: Optional[int] = typer.Option(None, min=0, help="warmup rounds (overrides config)"),
):
    """
    filter-map-reduce: plain pipeline vs. decorated stage functions
    """
    from wrapkit.bench.filter_map_reduce import make_dataset, measure, run, run_decorated, variants

    cfg = _load(path).bench
    size = cfg.size if size is None else size
    rounds = cfg.benchmark_rounds if rounds is None else rounds
    warmup = cfg.warmup_rounds if warmup is None else warmup

    data = make_dataset(size, cfg.modulo)
    print(f"[blue]filter-map-reduce size={size} warmup={warmup} rounds={rounds}[/blue]")

    for name, deco in variants().items():
        if deco is None:
            fn = run
        else:
            def fn(d, _deco=deco):
                return run_decorated(d, _deco)

        elapsed = measure(fn, data, warmup_rounds=warmup, rounds=rounds)
        mean = sum(elapsed) / len(elapsed)
        print(f"[green]{name:>12}[/green]  result={fn(data)}  mean={mean:.4f}s")


if __name__ == "__main__":
    app()

# python -m wrapkit.cli bench --size 100000 --rounds 3
