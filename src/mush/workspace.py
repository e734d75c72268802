"""Workspace initialization: root manifest, ignore list and credential template."""

from __future__ import annotations

import logging
from pathlib import Path

from mush.templates import ENV_TEMPLATE, GITIGNORE, WORKSPACE_MANIFEST
from mush.utils.paths import create_file

LOGGER = logging.getLogger(__name__)

WORKSPACE_FILES: tuple[tuple[str, str], ...] = (
    ("Cargo.toml", WORKSPACE_MANIFEST),
    (".gitignore", GITIGNORE),
    (".env", ENV_TEMPLATE),
)


def initialize_workspace(root: Path, logger: logging.Logger | None = None) -> list[Path]:
    """Create the workspace files under ``root`` and return the ones newly written."""

    effective_logger = logger or LOGGER
    created: list[Path] = []
    for name, content in WORKSPACE_FILES:
        path = root / name
        if create_file(path, content, logger=effective_logger):
            created.append(path)
    effective_logger.info("workspace.initialized root=%s created=%s", root, len(created))
    return created
