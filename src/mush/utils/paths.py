"""Path and filesystem helper functions."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Iterable
from uuid import uuid4

from mush.errors import CreateFailedError, WriteFailedError

LOGGER = logging.getLogger(__name__)


def ensure_directories(paths: Iterable[Path]) -> list[Path]:
    """Create all directories in the iterable if they do not exist."""

    created_or_existing: list[Path] = []
    for directory in paths:
        directory.mkdir(parents=True, exist_ok=True)
        created_or_existing.append(directory)
    return created_or_existing


def create_file(path: Path, content: str, logger: logging.Logger | None = None) -> bool:
    """Write ``content`` to ``path`` only if nothing exists there yet.

    Returns True when the file was created, False when an existing file was
    left untouched. Parent directories are never created: a missing parent
    surfaces as ``CreateFailedError``.
    """

    effective_logger = logger or LOGGER
    if path.exists():
        effective_logger.info("materialize.skip_existing path=%s", path)
        return False

    try:
        handle = path.open("x", encoding="utf-8", newline="")
    except FileExistsError:
        effective_logger.info("materialize.skip_existing path=%s", path)
        return False
    except OSError as exc:
        raise CreateFailedError(f"cannot create file {path}: {exc}", path) from exc

    try:
        with handle:
            handle.write(content)
    except OSError as exc:
        raise WriteFailedError(f"cannot write file {path}: {exc}", path) from exc
    effective_logger.info("materialize.created path=%s bytes=%s", path, len(content.encode("utf-8")))
    return True


def write_json_atomically(payload: dict[str, Any], output_path: Path) -> Path:
    """Write JSON payload atomically to output path."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = output_path.parent / f".{output_path.name}.{uuid4().hex}.tmp"
    try:
        temp_path.write_text(json.dumps(payload, indent=2, sort_keys=True, default=str) + "\n", encoding="utf-8")
        os.replace(temp_path, output_path)
    finally:
        if temp_path.exists():
            temp_path.unlink()
    return output_path
