"""CLI entrypoint for ca-eval — typer app driving the test console."""

import asyncio
import logging
import sys
from collections.abc import AsyncIterator, Callable, Coroutine
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog
import typer

from ca_eval.analysis.infrastructure.http_analyzer import HttpAnalyzer
from ca_eval.analysis.infrastructure.observer import StructlogAnalysisObserver
from ca_eval.api.infrastructure.client import ApiClient
from ca_eval.api.infrastructure.observer import StructlogApiObserver
from ca_eval.cli.output.report import (
    batch_lines,
    compliance_summary_lines,
    record_lines,
    scenario_lines,
    summary_lines,
    validation_lines,
)
from ca_eval.config.domain.config import ConsoleConfig
from ca_eval.config.infrastructure.observer import StructlogConfigObserver
from ca_eval.config.infrastructure.yaml_loader import YamlConfigLoader
from ca_eval.core.errors import CaEvalError
from ca_eval.run.application.executor import RunExecutor
from ca_eval.run.domain.batch import BatchRun
from ca_eval.run.domain.observer import RunObserver
from ca_eval.run.infrastructure.composite_observer import CompositeRunObserver
from ca_eval.run.infrastructure.http_batch import HttpRemoteBatchSource
from ca_eval.run.infrastructure.observer import StructlogRunObserver
from ca_eval.run.infrastructure.progress_observer import ProgressRunObserver
from ca_eval.scenario.application.catalog import ScenarioCatalog
from ca_eval.scenario.infrastructure.http_source import HttpScenarioSource
from ca_eval.scenario.infrastructure.observer import StructlogCatalogObserver
from ca_eval.validation.application.runner import ValidationRunner
from ca_eval.validation.infrastructure.http_source import HttpValidationSource
from ca_eval.validation.infrastructure.observer import StructlogValidationObserver

app = typer.Typer(add_completion=False, help="Test console for the analysis service.")

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass
class _Options:
    config_path: Path | None = None
    log_format: str = "console"
    log_level: str = "warning"


_options = _Options()


def _configure_structlog(log_format: str, log_level: str) -> None:
    """Configure structlog based on the requested format and level."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)
    if log_level not in _LOG_LEVELS:
        typer.echo(f"Invalid log level: {log_level!r}.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_LOG_LEVELS[log_level]),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path | None) -> ConsoleConfig:
    if config_path is None:
        return ConsoleConfig.default()
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    return loader.load(path=config_path)


@dataclass
class _Session:
    catalog: ScenarioCatalog
    executor: RunExecutor


@asynccontextmanager
async def _open_session(
    config: ConsoleConfig, show_progress: bool
) -> AsyncIterator[_Session]:
    """Wire the console components around one shared ApiClient."""
    async with ApiClient(config=config.api, observer=StructlogApiObserver()) as client:
        observers: list[RunObserver] = [StructlogRunObserver()]
        if show_progress:
            observers.append(ProgressRunObserver())
        executor = RunExecutor(
            analyzer=HttpAnalyzer(client=client, observer=StructlogAnalysisObserver()),
            validation_runner=ValidationRunner(
                source=HttpValidationSource(client=client),
                observer=StructlogValidationObserver(),
            ),
            observer=CompositeRunObserver(observers=observers),
            remote_batch_source=HttpRemoteBatchSource(client=client),
            max_concurrent=config.execution.max_concurrent,
        )
        catalog_observer = StructlogCatalogObserver()
        catalog = ScenarioCatalog(
            source=HttpScenarioSource(client=client, observer=catalog_observer),
            observer=catalog_observer,
            quick_scenario_count=config.catalog.quick_scenario_count,
        )
        yield _Session(catalog=catalog, executor=executor)


def _echo(lines: list[str]) -> None:
    for line in lines:
        typer.echo(line)


def _run(
    command: Callable[[_Session], Coroutine[Any, Any, int]],
    show_progress: bool = False,
) -> None:
    """Configure logging, load config, run one async command and exit with its code."""
    try:
        _configure_structlog(
            log_format=_options.log_format, log_level=_options.log_level
        )
        config = _load_config(config_path=_options.config_path)

        async def _main() -> int:
            async with _open_session(
                config=config,
                show_progress=show_progress and _options.log_format != "json",
            ) as session:
                return await command(session)

        code = asyncio.run(_main())
    except KeyboardInterrupt:
        typer.echo("Interrupted.")
        sys.exit(1)
    except CaEvalError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except typer.Exit:
        raise
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)
    raise typer.Exit(code=code)


@app.callback()
def main(
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to console config YAML"
    ),
    log_format: str = typer.Option(
        "console", "--log-format", help="Log format: 'console' or 'json'"
    ),
    log_level: str = typer.Option(
        "warning", "--log-level", help="debug, info, warning or error"
    ),
) -> None:
    """Run manual and batch tests against the analysis service."""
    _options.config_path = config_path
    _options.log_format = log_format
    _options.log_level = log_level


@app.command()
def scenarios(
    category: str = typer.Argument("emotion", help="'emotion' or 'compliance'"),
    difficulty: str | None = typer.Option(None, help="Compliance difficulty filter"),
) -> None:
    """List the scenarios of one category."""
    if category not in ("emotion", "compliance"):
        typer.echo(f"Unknown category: {category!r}")
        raise typer.Exit(code=2)

    async def _command(session: _Session) -> int:
        loaded = await session.catalog.load(category=category, difficulty=difficulty)
        _echo(scenario_lines(loaded))
        return 0

    _run(_command)


@app.command()
def quick(text: str = typer.Argument(..., help="Customer text to classify")) -> None:
    """Classify the emotion of one piece of customer text."""

    async def _command(session: _Session) -> int:
        record = await session.executor.run_single(text=text)
        if record is None:
            return 1
        _echo(record_lines(record))
        return 1 if record.is_error else 0

    _run(_command)


@app.command()
def scenario(name: str = typer.Argument(..., help="Scenario id or name")) -> None:
    """Run one catalog scenario and compare the result with its expectation."""

    async def _command(session: _Session) -> int:
        await session.catalog.load(category="emotion")
        await session.catalog.load(category="compliance")
        found = session.catalog.find(name)
        if found is None:
            typer.echo(f"No scenario named {name!r}")
            return 2
        record = await session.executor.run_scenario(found)
        if record is None:
            return 1
        _echo(record_lines(record))
        return 1 if record.is_error else 0

    _run(_command)


@app.command()
def compliance(
    name: str | None = typer.Argument(None, help="Scenario id or name; all if omitted"),
    difficulty: str | None = typer.Option(None, help="Compliance difficulty filter"),
) -> None:
    """Run compliance scenarios, one by name or all of them as a batch."""

    async def _command(session: _Session) -> int:
        loaded = await session.catalog.load(
            category="compliance", difficulty=difficulty
        )
        if name is not None:
            found = session.catalog.find(name)
            if found is None or found.category != "compliance":
                typer.echo(f"No compliance scenario named {name!r}")
                return 2
            record = await session.executor.run_scenario(found)
            if record is None:
                return 1
            _echo(record_lines(record))
            return 1 if record.is_error else 0

        batch = await session.executor.run_batch(loaded)
        return _report_batch(session=session, batch=batch, category="compliance")

    _run(_command, show_progress=True)


@app.command()
def batch(
    category: str = typer.Option("emotion", help="'emotion' or 'compliance'"),
    remote: bool = typer.Option(
        False, "--remote", help="Let the service run its own batch"
    ),
) -> None:
    """Run every scenario of a category and print accuracy statistics."""
    if category not in ("emotion", "compliance"):
        typer.echo(f"Unknown category: {category!r}")
        raise typer.Exit(code=2)

    async def _command(session: _Session) -> int:
        if remote:
            result = await session.executor.run_remote_batch(
                kind="emotions" if category == "emotion" else "compliance"
            )
        else:
            loaded = await session.catalog.load(category=category)
            result = await session.executor.run_batch(loaded)
        return _report_batch(session=session, batch=result, category=category)

    _run(_command, show_progress=True)


def _report_batch(session: _Session, batch: BatchRun | None, category: str) -> int:
    if batch is None:
        return 1
    _echo(batch_lines(batch))
    if batch.error is not None:
        return 1
    typer.echo("")
    if category == "emotion" and session.executor.last_summary is not None:
        _echo(summary_lines(session.executor.last_summary))
    elif session.executor.last_compliance_summary is not None:
        _echo(compliance_summary_lines(session.executor.last_compliance_summary))
    return 0


@app.command()
def validate() -> None:
    """Query the service's own validation metrics."""

    async def _command(session: _Session) -> int:
        outcome = await session.executor.run_validation()
        if outcome is None:
            return 1
        _echo(validation_lines(outcome))
        return 0

    _run(_command)


if __name__ == "__main__":
    app()
