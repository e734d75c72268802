from __future__ import annotations

import logging
from pathlib import Path

import pytest

from mush.config import FetchConfig
from mush.errors import DirectoryCreateFailedError
from mush.models import DayIdentifier
from mush.scaffold import create_scaffold, input_needs_fetch
from tests.conftest import FakeHttp, FakeResponse

FETCH = FetchConfig(base_url="http://puzzles.test")


def _scaffold(root: Path, day: int, year: int, http: FakeHttp, token: str | None = "cookie"):
    return create_scaffold(
        DayIdentifier(day=day, year=year),
        root,
        session_token=token,
        fetch_config=FETCH,
        http=http,
    )


def test_scaffold_creates_full_layout(tmp_path: Path, fake_http_ok: FakeHttp) -> None:
    result = _scaffold(tmp_path, 1, 2024, fake_http_ok)

    day_path = tmp_path / "solutions" / "2024" / "day01"
    assert result.base_path == day_path
    for relative in ("Cargo.toml", "src/main.rs", "input.txt", "example.txt"):
        assert (day_path / relative).is_file()

    manifest = (day_path / "Cargo.toml").read_text(encoding="utf-8")
    assert 'name = "day01-2024"' in manifest
    assert "itertools" in manifest
    assert "regex" in manifest

    solution = (day_path / "src" / "main.rs").read_text(encoding="utf-8")
    assert "fn part1" in solution
    assert "fn part2" in solution
    assert "#[cfg(test)]" in solution
    assert 'include_str!("../example.txt")' in solution

    assert (day_path / "input.txt").read_text(encoding="utf-8") == "1 2 3\n4 5 6\n"
    assert (day_path / "example.txt").read_text(encoding="utf-8") == ""
    assert result.input_status == "fetched"
    assert fake_http_ok.calls[0]["url"] == "http://puzzles.test/2024/day/1/input"


def test_scaffold_pads_day_25(tmp_path: Path, fake_http_ok: FakeHttp) -> None:
    _scaffold(tmp_path, 25, 2023, fake_http_ok)

    day_path = tmp_path / "solutions" / "2023" / "day25"
    assert 'name = "day25-2023"' in (day_path / "Cargo.toml").read_text(encoding="utf-8")


def test_rescaffold_keeps_user_edits(tmp_path: Path, fake_http_ok: FakeHttp) -> None:
    _scaffold(tmp_path, 1, 2024, fake_http_ok)
    day_path = tmp_path / "solutions" / "2024" / "day01"
    main_path = day_path / "src" / "main.rs"
    main_path.write_text("// Modified content", encoding="utf-8")
    (day_path / "example.txt").write_text("example", encoding="utf-8")

    second = _scaffold(tmp_path, 1, 2024, fake_http_ok)

    assert main_path.read_text(encoding="utf-8") == "// Modified content"
    assert (day_path / "example.txt").read_text(encoding="utf-8") == "example"
    assert second.created == []
    assert second.input_status == "kept"


def test_non_empty_input_is_never_fetched(tmp_path: Path, fake_http_ok: FakeHttp) -> None:
    day_path = tmp_path / "solutions" / "2024" / "day02"
    day_path.mkdir(parents=True)
    (day_path / "input.txt").write_text("mine\n", encoding="utf-8")

    result = _scaffold(tmp_path, 2, 2024, fake_http_ok)

    assert fake_http_ok.calls == []
    assert result.input_status == "kept"
    assert (day_path / "input.txt").read_text(encoding="utf-8") == "mine\n"


def test_empty_input_is_fetched_again(tmp_path: Path, fake_http_ok: FakeHttp) -> None:
    day_path = tmp_path / "solutions" / "2024" / "day03"
    day_path.mkdir(parents=True)
    (day_path / "input.txt").write_text("", encoding="utf-8")

    result = _scaffold(tmp_path, 3, 2024, fake_http_ok)

    assert len(fake_http_ok.calls) == 1
    assert result.input_status == "fetched"
    assert (day_path / "input.txt").read_text(encoding="utf-8") == "1 2 3\n4 5 6\n"


def test_empty_example_is_left_alone(tmp_path: Path, fake_http_ok: FakeHttp) -> None:
    day_path = tmp_path / "solutions" / "2024" / "day04"
    day_path.mkdir(parents=True)
    (day_path / "example.txt").write_text("", encoding="utf-8")

    result = _scaffold(tmp_path, 4, 2024, fake_http_ok)

    assert day_path / "example.txt" in result.skipped


def test_fetch_failure_leaves_empty_input(tmp_path: Path) -> None:
    http = FakeHttp(response=FakeResponse(404))

    result = _scaffold(tmp_path, 5, 2024, http)

    input_path = tmp_path / "solutions" / "2024" / "day05" / "input.txt"
    assert input_path.read_text(encoding="utf-8") == ""
    assert result.input_status == "fetch_failed"
    assert "404" in (result.fetch_error or "")


def test_missing_credential_still_scaffolds(tmp_path: Path, fake_http_ok: FakeHttp) -> None:
    result = _scaffold(tmp_path, 6, 2024, fake_http_ok, token=None)

    day_path = tmp_path / "solutions" / "2024" / "day06"
    assert fake_http_ok.calls == []
    assert result.input_status == "fetch_failed"
    assert (day_path / "input.txt").exists()
    assert (day_path / "src" / "main.rs").exists()


def test_directory_failure_is_fatal(tmp_path: Path, fake_http_ok: FakeHttp) -> None:
    (tmp_path / "solutions").write_text("not a directory", encoding="utf-8")

    with pytest.raises(DirectoryCreateFailedError):
        _scaffold(tmp_path, 7, 2024, fake_http_ok)

    assert fake_http_ok.calls == []


def test_input_needs_fetch(tmp_path: Path) -> None:
    path = tmp_path / "input.txt"
    assert input_needs_fetch(path)
    path.write_text("", encoding="utf-8")
    assert input_needs_fetch(path)
    path.write_text("x", encoding="utf-8")
    assert not input_needs_fetch(path)


def test_rescaffold_reports_kept_files_without_warnings(
    tmp_path: Path, fake_http_ok: FakeHttp, caplog: pytest.LogCaptureFixture
) -> None:
    _scaffold(tmp_path, 8, 2024, fake_http_ok)
    caplog.clear()
    caplog.set_level(logging.DEBUG, logger="mush")

    _scaffold(tmp_path, 8, 2024, fake_http_ok)

    messages = [r.getMessage() for r in caplog.records]
    assert any("scaffold.input_kept" in m for m in messages)
    assert sum("materialize.skip_existing" in m for m in messages) == 3
    assert [r for r in caplog.records if r.levelno >= logging.WARNING] == []
