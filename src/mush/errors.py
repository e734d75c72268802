"""Typed exceptions raised by the scaffold, fetch and run workflows."""

from __future__ import annotations

from pathlib import Path


class MushError(Exception):
    """Base class for all mush failures surfaced to the CLI."""


class FetchError(MushError):
    """Puzzle input could not be fetched."""


class MissingCredentialError(FetchError):
    """No session credential was configured."""

    def __init__(self, env_name: str = "AOC_SESSION") -> None:
        super().__init__(f"session credential is not set (define {env_name} in the environment or .env)")
        self.env_name = env_name


class RequestFailedError(FetchError):
    """Network-level failure (connection, DNS, timeout)."""

    def __init__(self, url: str, reason: object) -> None:
        super().__init__(f"request to {url} failed: {reason}")
        self.url = url


class ServerError(FetchError):
    """The endpoint answered with a non-2xx status."""

    def __init__(self, status_code: int, url: str = "") -> None:
        super().__init__(f"server returned status {status_code}" + (f" for {url}" if url else ""))
        self.status_code = status_code
        self.url = url


class ReadFailedError(FetchError):
    """The response body could not be decoded as text."""


class MaterializeError(MushError):
    """A scaffold file could not be written."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class CreateFailedError(MaterializeError):
    """Opening a new file failed."""


class WriteFailedError(MaterializeError):
    """Writing to a freshly created file failed."""


class ScaffoldError(MushError):
    """Scaffolding a day could not proceed."""


class DirectoryCreateFailedError(ScaffoldError):
    """The day directory tree could not be created."""

    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"cannot create directory {path}: {reason}")
        self.path = path


class RunError(MushError):
    """Running a day's solution failed."""


class SubprocessLaunchFailedError(RunError):
    """The build tool could not be started."""

    def __init__(self, command: list[str], reason: object) -> None:
        super().__init__(f"cannot launch {' '.join(command)}: {reason}")
        self.command = command


class SubprocessNonZeroError(RunError):
    """The build tool exited with a non-zero status."""

    def __init__(self, command: list[str], returncode: int) -> None:
        super().__init__(f"{' '.join(command)} exited with status {returncode}")
        self.command = command
        self.returncode = returncode
