"""Typer CLI entrypoint for mush."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import typer
import yaml

from mush.config import AppSettings, load_settings
from mush.errors import MushError
from mush.logging_utils import configure_logging
from mush.models import FIRST_DAY, LAST_DAY, DayIdentifier
from mush.results import PART_1, PART_2, DayResult
from mush.runner import BatchRunResult, run_all, run_day
from mush.scaffold import create_scaffold
from mush.utils.paths import write_json_atomically
from mush.utils.time_utils import current_year
from mush.workspace import initialize_workspace

app = typer.Typer(
    add_completion=False,
    help="Scaffold, fetch and run daily puzzle solutions.",
    no_args_is_help=True,
)

LOG_FILE_NAME = "mush.log"


def _config_file_option() -> Any:
    return typer.Option(
        None,
        "--config-file",
        help="Optional settings YAML path.",
        exists=False,
        file_okay=True,
        dir_okay=False,
        readable=True,
    )


def _year_option() -> Any:
    return typer.Option(
        None,
        "--year",
        "-y",
        min=1,
        help="Puzzle year. Defaults to the current year.",
    )


def _day_option() -> Any:
    return typer.Option(
        ...,
        "--day",
        "-d",
        min=FIRST_DAY,
        max=LAST_DAY,
        help=f"Puzzle day ({FIRST_DAY}-{LAST_DAY}).",
    )


def _load_and_optionally_configure_logger(
    config_file: Path | None,
    configure: bool,
) -> tuple[AppSettings, logging.Logger]:
    settings = load_settings(config_file=config_file)
    if configure:
        logger = configure_logging(settings.paths.logs_root / LOG_FILE_NAME)
    else:
        logger = logging.getLogger("mush")
    return settings, logger


def _fail(exc: MushError) -> typer.Exit:
    typer.echo(f"error: {exc}", err=True)
    return typer.Exit(code=1)


def _format_day(result: DayResult) -> list[str]:
    lines = [f"Day {result.day:02d}:"]
    for label, value, elapsed in (
        (PART_1, result.part1_result, result.part1_time),
        (PART_2, result.part2_result, result.part2_time),
    ):
        if value is None:
            continue
        suffix = f" ({elapsed:.4f}ms)" if elapsed is not None else ""
        lines.append(f"  {label}: {value}{suffix}")
    lines.append(f"  Total: {result.total_time:.4f}ms")
    return lines


def _render_batch(batch: BatchRunResult, summary_only: bool) -> None:
    if not summary_only:
        failed = set(batch.failed_days)
        results_by_day = {result.day: result for result in batch.results}
        for day in sorted(failed | set(results_by_day)):
            typer.echo("")
            if day in failed:
                typer.echo(f"Day {day:02d}: run failed")
                continue
            for line in _format_day(results_by_day[day]):
                typer.echo(line)

    summary = batch.summary
    if summary is None:
        typer.echo("")
        typer.echo(f"No days found for year {batch.year}")
        return

    mode = " (release)" if batch.release else ""
    typer.echo("")
    typer.echo(f"Summary{mode}:")
    typer.echo(f"  Days completed: {summary.days_completed}/{LAST_DAY}")
    typer.echo(f"  Total time: {summary.total_time:.4f}ms")
    typer.echo(f"  Average time: {summary.average_time:.4f}ms/day")
    typer.echo(f"  Fastest day: Day {summary.fastest.day:02d} ({summary.fastest.total_time:.4f}ms)")
    typer.echo(f"  Slowest day: Day {summary.slowest.day:02d} ({summary.slowest.total_time:.4f}ms)")


@app.command("show-config")
def show_config(config_file: Path | None = _config_file_option()) -> None:
    """Print the effective configuration after env overrides."""

    settings, _ = _load_and_optionally_configure_logger(config_file, configure=False)
    rendered = yaml.safe_dump(settings.as_dict(), sort_keys=False)
    typer.echo(rendered)


@app.command("init")
def init(config_file: Path | None = _config_file_option()) -> None:
    """Create the workspace manifest, .gitignore and .env template."""

    settings, logger = _load_and_optionally_configure_logger(config_file, configure=True)
    root = settings.paths.workspace_root
    try:
        created = initialize_workspace(root, logger=logger)
    except MushError as exc:
        raise _fail(exc) from exc

    for path in created:
        typer.echo(f"created: {path}")
    typer.echo(f"Workspace initialized in {root}")
    typer.echo("Remember to put your session cookie in .env")


@app.command("scaffold")
def scaffold(
    day: int = _day_option(),
    year: int | None = _year_option(),
    config_file: Path | None = _config_file_option(),
) -> None:
    """Generate one day's project skeleton and download its input."""

    settings, logger = _load_and_optionally_configure_logger(config_file, configure=True)
    day_id = DayIdentifier(day=day, year=year or current_year())
    typer.echo(f"Preparing day {day_id.day} of {day_id.year}...")
    try:
        result = create_scaffold(
            day_id,
            settings.paths.workspace_root,
            session_token=settings.session_token(),
            fetch_config=settings.fetch,
            logger=logger,
        )
    except MushError as exc:
        raise _fail(exc) from exc

    for path in result.created:
        typer.echo(f"created: {path}")
    for path in result.skipped:
        typer.echo(f"kept: {path}")
    if result.input_status == "fetched":
        typer.echo("input: fetched")
    elif result.input_status == "fetch_failed":
        typer.echo(f"input: fetch failed ({result.fetch_error}); input.txt left empty, fill it in manually")
    else:
        typer.echo("input: already present, not overwritten")
    typer.echo(f"Scaffold for day {day_id.day} of {day_id.year} ready at {result.base_path}")


@app.command("run")
def run(
    day: int = _day_option(),
    year: int | None = _year_option(),
    release: bool = typer.Option(False, "--release", "-r", help="Build in optimized mode."),
    config_file: Path | None = _config_file_option(),
) -> None:
    """Run one day's solution through the build tool."""

    settings, logger = _load_and_optionally_configure_logger(config_file, configure=True)
    day_id = DayIdentifier(day=day, year=year or current_year())
    typer.echo(f"Running day {day_id.day} of {day_id.year} (package: {day_id.package_name})...")
    try:
        run_day(
            day_id,
            settings.paths.workspace_root,
            build_command=settings.runner.build_command,
            release=release,
            logger=logger,
        )
    except MushError as exc:
        raise _fail(exc) from exc


@app.command("run-all")
def run_all_days(
    year: int | None = _year_option(),
    release: bool = typer.Option(False, "--release", "-r", help="Build in optimized mode."),
    summary_only: bool = typer.Option(False, "--summary-only", "-s", help="Print only the final summary."),
    output_json: Path | None = typer.Option(
        None,
        "--output-json",
        help="Optional path for a JSON copy of the batch results.",
        file_okay=True,
        dir_okay=False,
    ),
    config_file: Path | None = _config_file_option(),
) -> None:
    """Run every scaffolded day of a year and print a timing summary."""

    settings, logger = _load_and_optionally_configure_logger(config_file, configure=True)
    effective_year = year or current_year()
    mode = " (release)" if release else ""
    typer.echo(f"Running all days of {effective_year}{mode}...")
    try:
        batch = run_all(
            effective_year,
            settings.paths.workspace_root,
            release=release,
            build_command=settings.runner.build_command,
            logger=logger,
        )
    except MushError as exc:
        raise _fail(exc) from exc

    _render_batch(batch, summary_only=summary_only)
    if output_json is not None:
        write_json_atomically(batch.as_dict(), output_json)
        typer.echo(f"results_path: {output_json}")


def main() -> None:
    """CLI script entrypoint."""

    app()


if __name__ == "__main__":
    main()
