"""Per-day scaffold generation: directory tree, manifest, template and inputs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from mush.config import FetchConfig
from mush.errors import DirectoryCreateFailedError, FetchError, WriteFailedError
from mush.fetch import HttpGetter, fetch_input
from mush.models import DayIdentifier
from mush.templates import SOLUTION_TEMPLATE, render_day_manifest
from mush.utils.paths import create_file, ensure_directories

LOGGER = logging.getLogger(__name__)

InputStatus = Literal["fetched", "fetch_failed", "kept"]

MANIFEST_FILE = "Cargo.toml"
SOLUTION_FILE = Path("src") / "main.rs"
INPUT_FILE = "input.txt"
EXAMPLE_FILE = "example.txt"


@dataclass(slots=True)
class ScaffoldResult:
    """Outcome of scaffolding one day."""

    day_id: DayIdentifier
    base_path: Path
    created: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    input_status: InputStatus = "kept"
    fetch_error: str | None = None

    def record(self, path: Path, was_created: bool) -> None:
        (self.created if was_created else self.skipped).append(path)


def input_needs_fetch(input_path: Path) -> bool:
    """Input is fetched when the file is missing or still empty."""

    return not input_path.exists() or input_path.stat().st_size == 0


def _write_fetched_input(input_path: Path, text: str, logger: logging.Logger) -> bool:
    if not input_path.exists():
        return create_file(input_path, text, logger=logger)
    # Only reached for an empty placeholder left by an earlier failed fetch.
    try:
        input_path.write_text(text, encoding="utf-8", newline="")
    except OSError as exc:
        raise WriteFailedError(f"cannot write file {input_path}: {exc}", input_path) from exc
    return True


def create_scaffold(
    day_id: DayIdentifier,
    root: Path,
    *,
    session_token: str | None,
    fetch_config: FetchConfig | None = None,
    http: HttpGetter | None = None,
    logger: logging.Logger | None = None,
) -> ScaffoldResult:
    """Build ``solutions/{year}/day{NN}`` under ``root`` without touching existing files.

    A failed fetch is not fatal: ``input.txt`` is left empty so it can be filled
    by hand or by a later scaffold run.
    """

    effective_logger = logger or LOGGER
    fetch_settings = fetch_config or FetchConfig()
    base_path = day_id.base_path(root)
    src_path = base_path / SOLUTION_FILE.parent
    result = ScaffoldResult(day_id=day_id, base_path=base_path)

    try:
        ensure_directories([src_path])
    except OSError as exc:
        raise DirectoryCreateFailedError(src_path, exc) from exc

    manifest_path = base_path / MANIFEST_FILE
    result.record(manifest_path, create_file(manifest_path, render_day_manifest(day_id), logger=effective_logger))

    solution_path = base_path / SOLUTION_FILE
    result.record(solution_path, create_file(solution_path, SOLUTION_TEMPLATE, logger=effective_logger))

    input_path = base_path / INPUT_FILE
    if input_needs_fetch(input_path):
        effective_logger.info("scaffold.fetch_input day=%s year=%s", day_id.day, day_id.year)
        try:
            text = fetch_input(
                day_id.day,
                day_id.year,
                fetch_settings.base_url,
                session_token,
                user_agent=fetch_settings.user_agent,
                timeout_seconds=fetch_settings.timeout_seconds,
                http=http,
                logger=effective_logger,
            )
        except FetchError as exc:
            effective_logger.error("scaffold.fetch_failed day=%s year=%s error=%s", day_id.day, day_id.year, exc)
            result.input_status = "fetch_failed"
            result.fetch_error = str(exc)
            result.record(input_path, create_file(input_path, "", logger=effective_logger))
        else:
            result.input_status = "fetched"
            result.record(input_path, _write_fetched_input(input_path, text, effective_logger))
    else:
        effective_logger.info("scaffold.input_kept path=%s", input_path)
        result.input_status = "kept"
        result.skipped.append(input_path)

    example_path = base_path / EXAMPLE_FILE
    result.record(example_path, create_file(example_path, "", logger=effective_logger))

    effective_logger.info(
        "scaffold.done day=%s year=%s created=%s skipped=%s input=%s",
        day_id.day,
        day_id.year,
        len(result.created),
        len(result.skipped),
        result.input_status,
    )
    return result
