"""Shared utility helpers."""

from mush.utils.paths import create_file, ensure_directories, write_json_atomically
from mush.utils.time_utils import current_year, elapsed_ms, now_utc

__all__ = [
    "create_file",
    "ensure_directories",
    "write_json_atomically",
    "current_year",
    "elapsed_ms",
    "now_utc",
]
