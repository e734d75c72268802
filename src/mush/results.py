"""Parsing of solution stdout and aggregation of per-day timings."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Sequence

PART_1 = "Part 1"
PART_2 = "Part 2"
TIME_PREFIX = "Time:"
TIME_SUFFIX = "ms"


@dataclass(frozen=True, slots=True)
class DayResult:
    """Parsed answers and timings (milliseconds) of one day's run."""

    day: int
    part1_result: str | None = None
    part1_time: float | None = None
    part2_result: str | None = None
    part2_time: float | None = None

    @property
    def total_time(self) -> float:
        return (self.part1_time or 0.0) + (self.part2_time or 0.0)

    def as_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["total_time"] = self.total_time
        return payload


@dataclass(frozen=True, slots=True)
class BatchSummary:
    """Aggregate timings over all days that ran successfully."""

    days_completed: int
    total_time: float
    average_time: float
    fastest: DayResult
    slowest: DayResult

    def as_dict(self) -> dict[str, Any]:
        return {
            "days_completed": self.days_completed,
            "total_time": self.total_time,
            "average_time": self.average_time,
            "fastest_day": self.fastest.day,
            "slowest_day": self.slowest.day,
        }


def _parse_time(line: str) -> float | None:
    value = line.partition(":")[2].strip()
    if value.endswith(TIME_SUFFIX):
        value = value[: -len(TIME_SUFFIX)]
    try:
        return float(value)
    except ValueError:
        return None


def parse_part(output: str, label: str) -> tuple[str | None, float | None]:
    """Extract ``(result, time_ms)`` for ``label`` from solution output.

    The first line starting with ``label`` provides the result (text after the
    first colon). The first parsable ``Time:`` line that follows it provides
    the time. Either value is None when absent.
    """

    result: str | None = None
    time_ms: float | None = None

    for line in output.splitlines():
        if line.startswith(label):
            if result is None:
                _, sep, tail = line.partition(":")
                if sep:
                    result = tail.strip()
        elif line.startswith(TIME_PREFIX) and result is not None and time_ms is None:
            time_ms = _parse_time(line)

    return result, time_ms


def parse_day_output(day: int, output: str) -> DayResult:
    """Build a DayResult from both parts of one day's stdout."""

    part1_result, part1_time = parse_part(output, PART_1)
    part2_result, part2_time = parse_part(output, PART_2)
    return DayResult(
        day=day,
        part1_result=part1_result,
        part1_time=part1_time,
        part2_result=part2_result,
        part2_time=part2_time,
    )


def summarize_results(results: Sequence[DayResult]) -> BatchSummary | None:
    """Return totals plus fastest/slowest days, or None when nothing ran.

    Ties keep the earliest day.
    """

    if not results:
        return None

    total_time = sum(result.total_time for result in results)
    fastest = results[0]
    slowest = results[0]
    for result in results[1:]:
        if result.total_time < fastest.total_time:
            fastest = result
        if result.total_time > slowest.total_time:
            slowest = result

    return BatchSummary(
        days_completed=len(results),
        total_time=total_time,
        average_time=total_time / len(results),
        fastest=fastest,
        slowest=slowest,
    )
