from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pytest

from cubetimer.app import TimerApp
from cubetimer.cli import run_cli
from cubetimer.cli import timer as timer_command
from cubetimer.cli.errors import CliError, log_cli_error
from cubetimer.core.records import SolveRecord
from tests.helpers import run_cli_in_tmp, write_config


def _add(path: Path, *times: str, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    return run_cli_in_tmp(
        ["--history", str(path), "add", *times], tmp_path=tmp_path, monkeypatch=monkeypatch
    )


def test_add_appends_solves_and_reports_averages(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "times.txt"

    output = _add(path, "10", "11", "9", "12", "8", tmp_path=tmp_path, monkeypatch=monkeypatch)

    assert path.read_text(encoding="utf-8") == "10.0\n11.0\n9.0\n12.0\n8.0\n"
    lines = output.splitlines()
    assert lines[0].split() == ["#", "time", "ao5", "ao12"]
    assert lines[1].split() == ["5", "8.000", "10.000", "-"]
    assert lines[-1].split() == ["1", "10.000", "-", "-"]


def test_stats_summarises_history(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "times.txt"
    path.write_text("10\n11\n9\n12\n8\n", encoding="utf-8")

    output = run_cli_in_tmp(
        ["--history", str(path), "stats"], tmp_path=tmp_path, monkeypatch=monkeypatch
    )

    rows = dict(line.split(maxsplit=1) for line in output.splitlines() if not line.startswith("pb"))
    assert rows["solves"] == "5"
    assert rows["best"] == "8.000"
    assert rows["worst"] == "12.000"
    assert rows["mean"] == "10.000"
    assert rows["ao5"] == "10.000"
    assert rows["ao12"] == "-"
    assert "pb ao5   10.000" in output
    assert "trend" in rows


def test_times_lists_most_recent_first(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "times.txt"
    path.write_text("61.5\n9.75\n8.125\n", encoding="utf-8")

    output = run_cli_in_tmp(
        ["--history", str(path), "times", "--limit", "2"],
        tmp_path=tmp_path,
        monkeypatch=monkeypatch,
    )

    lines = output.splitlines()
    assert len(lines) == 3
    assert lines[1].split()[:2] == ["3", "8.125"]
    assert lines[2].split()[:2] == ["2", "9.750"]


def test_times_on_new_history(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "fresh.txt"

    output = run_cli_in_tmp(
        ["--history", str(path), "times"], tmp_path=tmp_path, monkeypatch=monkeypatch
    )

    assert output == "No solves recorded."
    assert path.is_file()


def test_times_rejects_non_positive_limit(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run_cli_in_tmp(["times", "--limit", "0"], tmp_path=tmp_path, monkeypatch=monkeypatch)

    assert excinfo.value.code == 2


@pytest.mark.parametrize("value", ["abc", "-3", "nan", "inf"])
def test_add_rejects_invalid_times(
    value: str,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = tmp_path / "times.txt"

    with pytest.raises(SystemExit) as excinfo:
        _add(path, "10", value, tmp_path=tmp_path, monkeypatch=monkeypatch)

    assert excinfo.value.code == 2
    assert not path.exists()
    captured = capsys.readouterr()
    assert f"Invalid solve time '{value}'" in captured.out
    error = json.loads(captured.err.splitlines()[-1])
    assert error["event"] == "cli.error"
    assert error["category"] == "usage"


def test_missing_config_file_exits_not_found(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run_cli_in_tmp(
            ["--config", str(tmp_path / "absent.toml"), "stats"],
            tmp_path=tmp_path,
            monkeypatch=monkeypatch,
        )

    assert excinfo.value.code == 4


def test_unknown_log_level_is_usage_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        run_cli(["--log-level", "chatty", "stats"])

    assert excinfo.value.code == 2


def test_history_path_from_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    history_path = tmp_path / "from-config.txt"
    config_path = write_config(tmp_path, f'[history]\npath = "{history_path.as_posix()}"\n')

    run_cli_in_tmp(
        ["--config", str(config_path), "add", "12.5"],
        tmp_path=tmp_path,
        monkeypatch=monkeypatch,
    )

    assert history_path.read_text(encoding="utf-8") == "12.5\n"


def test_default_history_lives_in_data_dir(
    isolated_user_dirs: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    run_cli_in_tmp(["add", "9.5"], tmp_path=tmp_path, monkeypatch=monkeypatch)

    stored = isolated_user_dirs / "data" / "cubetimer" / "times.txt"
    assert stored.read_text(encoding="utf-8") == "9.5\n"
    assert (isolated_user_dirs / "config" / "cubetimer" / "config.toml").is_file()


def test_version_flag(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run_cli_in_tmp(["--version"], tmp_path=tmp_path, monkeypatch=monkeypatch)

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("cubetimer ")


class _FakeCurses:
    def __init__(self, *, fail: bool = False) -> None:
        self.fail = fail
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, func: Any, app: TimerApp, margin: int) -> None:
        self.calls.append((func, app, margin))
        app.history.insert(SolveRecord(time=7.0))
        if self.fail:
            raise RuntimeError("terminal went away")


@pytest.fixture()
def fake_curses(monkeypatch: pytest.MonkeyPatch) -> _FakeCurses:
    fake = _FakeCurses()
    monkeypatch.setattr(timer_command.curses, "wrapper", fake)
    monkeypatch.setattr(timer_command.locale, "setlocale", lambda *args: "C")
    return fake


def test_timer_is_default_command_and_saves_on_exit(
    fake_curses: _FakeCurses, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "times.txt"
    path.write_text("9.0\n", encoding="utf-8")

    output = run_cli_in_tmp(["--history", str(path)], tmp_path=tmp_path, monkeypatch=monkeypatch)

    assert output == f"2 solves saved to {path}"
    assert path.read_text(encoding="utf-8") == "9.0\n7.0\n"
    func, app, margin = fake_curses.calls[0]
    assert margin == 2
    assert app.tick_rate == pytest.approx(0.1)
    assert app.history_path == path


def test_timer_uses_configured_settings(
    fake_curses: _FakeCurses, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    config_path = write_config(
        tmp_path,
        """
        [terminal]
        tick_rate = 250

        [frontend]
        margin = 1

        [scramble]
        length = 5
        """,
    )

    run_cli_in_tmp(
        ["--config", str(config_path), "--history", str(tmp_path / "t.txt"), "timer"],
        tmp_path=tmp_path,
        monkeypatch=monkeypatch,
    )

    _, app, margin = fake_curses.calls[0]
    assert margin == 1
    assert app.tick_rate == pytest.approx(0.25)
    assert len(app.scramble.split()) == 5


def test_timer_saves_history_when_interface_fails(
    fake_curses: _FakeCurses, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    fake_curses.fail = True
    path = tmp_path / "times.txt"

    with pytest.raises(RuntimeError):
        run_cli_in_tmp(["--history", str(path)], tmp_path=tmp_path, monkeypatch=monkeypatch)

    assert path.read_text(encoding="utf-8") == "7.0\n"


@pytest.mark.parametrize(
    ("category", "status"),
    [("runtime", 1), ("usage", 2), ("io", 3), ("not_found", 4)],
)
def test_cli_error_status_codes(category: str, status: int) -> None:
    assert CliError("failed", category=category).status_code == status


def test_cli_error_rejects_unknown_category() -> None:
    with pytest.raises(ValueError):
        CliError("failed", category="other")


def test_cli_error_from_os_error(tmp_path: Path) -> None:
    exc = FileNotFoundError(2, "No such file or directory", str(tmp_path / "x"))

    error = CliError.from_os_error("Unable to open history file", exc)

    assert error.category == "io"
    assert error.status_code == 3
    assert error.context == {"path": str(tmp_path / "x"), "reason": "No such file or directory"}
    assert str(error).startswith("Unable to open history file: ")


def test_cli_error_is_logged_once(caplog: pytest.LogCaptureFixture) -> None:
    error = CliError.invalid_solve_time("abc")

    with caplog.at_level(logging.ERROR, logger="cubetimer.cli"):
        log_cli_error(error)
        log_cli_error(error)

    assert len(caplog.records) == 1
    assert caplog.records[0].category == "usage"
    assert caplog.records[0].context == {"value": "abc"}


def test_scalar_logging_key_is_usage_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    config_path = write_config(tmp_path, 'logging = "debug"\n')
    history_path = tmp_path / "times.txt"
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        run_cli(["--config", str(config_path), "--history", str(history_path), "stats"])

    assert excinfo.value.code == 2
    assert "'logging' must be a table" in capsys.readouterr().out
    assert not history_path.exists()
