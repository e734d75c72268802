"""Running solutions through the build tool, one day or a whole year."""

from __future__ import annotations

import logging
import subprocess
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Sequence

from mush.errors import SubprocessLaunchFailedError, SubprocessNonZeroError
from mush.models import DayIdentifier, days_of_year
from mush.results import BatchSummary, DayResult, parse_day_output, summarize_results
from mush.utils.time_utils import elapsed_ms

LOGGER = logging.getLogger(__name__)

DEFAULT_BUILD_COMMAND: tuple[str, ...] = ("cargo",)

Runner = Callable[..., subprocess.CompletedProcess]


@dataclass(slots=True)
class BatchRunResult:
    """Everything collected by ``run_all`` for one year."""

    year: int
    release: bool
    results: list[DayResult] = field(default_factory=list)
    failed_days: list[int] = field(default_factory=list)
    summary: BatchSummary | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "year": self.year,
            "release": self.release,
            "results": [result.as_dict() for result in self.results],
            "failed_days": list(self.failed_days),
            "summary": self.summary.as_dict() if self.summary is not None else None,
        }


def build_run_command(
    day_id: DayIdentifier,
    *,
    build_command: Sequence[str] = DEFAULT_BUILD_COMMAND,
    release: bool = False,
    quiet: bool = False,
) -> list[str]:
    """Argv running one day's package, e.g. ``cargo run -p day01-2024 --release``."""

    command = [*build_command, "run", "-p", day_id.package_name]
    if quiet:
        command.append("--quiet")
    if release:
        command.append("--release")
    return command


def run_day(
    day_id: DayIdentifier,
    root: Path,
    *,
    build_command: Sequence[str] = DEFAULT_BUILD_COMMAND,
    release: bool = False,
    runner: Runner = subprocess.run,
    logger: logging.Logger | None = None,
) -> int:
    """Run one day with inherited stdio; raise on launch failure or non-zero exit."""

    effective_logger = logger or LOGGER
    command = build_run_command(day_id, build_command=build_command, release=release)
    effective_logger.info("run.start package=%s command=%s", day_id.package_name, command)
    try:
        completed = runner(command, cwd=root, check=False)
    except OSError as exc:
        raise SubprocessLaunchFailedError(command, exc) from exc

    if completed.returncode != 0:
        effective_logger.error("run.failed package=%s returncode=%s", day_id.package_name, completed.returncode)
        raise SubprocessNonZeroError(command, completed.returncode)
    return completed.returncode


def run_all(
    year: int,
    root: Path,
    *,
    release: bool = False,
    build_command: Sequence[str] = DEFAULT_BUILD_COMMAND,
    runner: Runner = subprocess.run,
    logger: logging.Logger | None = None,
) -> BatchRunResult:
    """Run every scaffolded day of ``year`` in order and aggregate the timings.

    Days without a scaffold directory are skipped silently and a day whose run
    exits non-zero is recorded in ``failed_days``; neither stops the batch. A
    build tool that cannot be launched at all aborts it.
    """

    effective_logger = logger or LOGGER
    batch = BatchRunResult(year=year, release=release)
    started = time.perf_counter()

    for day_id in days_of_year(year):
        if not day_id.base_path(root).is_dir():
            continue

        command = build_run_command(day_id, build_command=build_command, release=release, quiet=True)
        try:
            completed = runner(command, cwd=root, capture_output=True, text=True, errors="replace", check=False)
        except OSError as exc:
            raise SubprocessLaunchFailedError(command, exc) from exc

        if completed.returncode != 0:
            effective_logger.info(
                "run_all.day_failed day=%s returncode=%s stderr=%s",
                day_id.day,
                completed.returncode,
                (completed.stderr or "").strip()[-500:],
            )
            batch.failed_days.append(day_id.day)
            continue

        result = parse_day_output(day_id.day, completed.stdout or "")
        effective_logger.info("run_all.day_done day=%s total_ms=%.4f", day_id.day, result.total_time)
        batch.results.append(result)

    batch.summary = summarize_results(batch.results)
    effective_logger.info(
        "run_all.done year=%s days=%s failed=%s wall_ms=%.1f",
        year,
        len(batch.results),
        len(batch.failed_days),
        elapsed_ms(started),
    )
    return batch
