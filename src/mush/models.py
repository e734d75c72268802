"""Identity of one puzzle day and the names derived from it."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

FIRST_DAY = 1
LAST_DAY = 25
SOLUTIONS_DIR = "solutions"


@dataclass(frozen=True, slots=True)
class DayIdentifier:
    """A (day, year) pair; day is restricted to the 1-25 puzzle calendar."""

    day: int
    year: int

    def __post_init__(self) -> None:
        if not FIRST_DAY <= self.day <= LAST_DAY:
            raise ValueError(f"day must be between {FIRST_DAY} and {LAST_DAY}, got {self.day}")

    @property
    def dir_name(self) -> str:
        return f"day{self.day:02d}"

    @property
    def package_name(self) -> str:
        return f"day{self.day:02d}-{self.year}"

    @property
    def relative_path(self) -> Path:
        return Path(SOLUTIONS_DIR) / str(self.year) / self.dir_name

    def base_path(self, root: Path) -> Path:
        """Day directory under a workspace root."""

        return root / self.relative_path


def days_of_year(year: int) -> list[DayIdentifier]:
    """All puzzle days of a year in ascending order."""

    return [DayIdentifier(day=day, year=year) for day in range(FIRST_DAY, LAST_DAY + 1)]
