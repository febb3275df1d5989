from __future__ import annotations

import pytest

from strip_scheduler.cli import main
from strip_scheduler.config import ENV_VARS


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    for var in ENV_VARS.values():
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write_tasks(tmp_path, text: str):
    path = tmp_path / "tasks.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_ffdh_run_writes_schedule_and_prints_summary(tmp_path, capsys) -> None:
    tasks = write_tasks(tmp_path, "2 5\n1 5\n2 3\n1 3\n3 2\n")
    schedule = tmp_path / "out" / "schedule.txt"

    code = main(["ffdh", str(tasks), "3", "--schedule-file", str(schedule)])

    assert code == 0
    out = capsys.readouterr().out
    assert "Using algorithm: FFDH" in out
    assert "N: 3" in out
    assert "Tasks count: 5" in out
    assert "T(S): 10" in out
    assert "E: 0.000000" in out
    assert f"Tasks schedule in file {schedule}" in out
    assert len(schedule.read_text(encoding="utf-8").splitlines()) == 5


def test_mode_is_case_insensitive_and_defaults_schedule_file(tmp_path, capsys) -> None:
    tasks = write_tasks(tmp_path, "3 5\n2 4\n2 4\n1 3\n")

    assert main(["NfDh", str(tasks), "4"]) == 0

    assert "T(S): 12" in capsys.readouterr().out
    assert (tmp_path / "schedule.txt").exists()


def test_schedule_file_from_environment(tmp_path, monkeypatch) -> None:
    tasks = write_tasks(tmp_path, "1 1\n")
    monkeypatch.setenv("STRIP_SCHEDULE_FILE", str(tmp_path / "env_schedule.txt"))

    assert main(["nfdh", str(tasks), "1"]) == 0
    assert (tmp_path / "env_schedule.txt").read_text(encoding="utf-8") == (
        "{task №1, StartEM: 0 EMCount: 1, Time: 1, L: 0}\n"
    )


def test_json_report(tmp_path) -> None:
    tasks = write_tasks(tmp_path, "3 5\n2 4\n2 4\n1 3\n")

    assert main(["ffdh", str(tasks), "4", "--json", str(tmp_path / "report.json")]) == 0
    assert '"makespan": 9' in (tmp_path / "report.json").read_text(encoding="utf-8")


def test_unknown_mode_is_a_silent_no_op(tmp_path, capsys) -> None:
    assert main(["bestfit", "whatever", "3"]) == 0

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
    assert not (tmp_path / "schedule.txt").exists()


def test_oversized_task_fails_before_packing(tmp_path, capsys) -> None:
    tasks = write_tasks(tmp_path, "2 5\n4 1\n")

    assert main(["ffdh", str(tasks), "3"]) == 1

    assert "OversizedTaskError" in capsys.readouterr().err
    assert not (tmp_path / "schedule.txt").exists()


def test_malformed_line(tmp_path, capsys) -> None:
    tasks = write_tasks(tmp_path, "2 5\n2\n")

    assert main(["nfdh", str(tasks), "3"]) == 1

    err = capsys.readouterr().err
    assert "MalformedInputError" in err
    assert "line 2" in err


def test_missing_task_file(tmp_path, capsys) -> None:
    assert main(["nfdh", str(tmp_path / "missing.txt"), "3"]) == 1
    assert "ScheduleIOError" in capsys.readouterr().err


@pytest.mark.parametrize("params", [["tasks.txt"], ["tasks.txt", "three"], ["tasks.txt", "0"]])
def test_bad_pack_parameters(tmp_path, capsys, params) -> None:
    write_tasks(tmp_path, "1 1\n")

    assert main(["nfdh", *params]) == 1
    assert "InvalidParameterError" in capsys.readouterr().err


def test_generate(tmp_path, capsys) -> None:
    code = main(["generate", "12", "5", "8", "--output-dir", str(tmp_path / "gen"), "--seed", "3"])

    assert code == 0
    path = tmp_path / "gen" / "tasks12.txt"
    assert f"Generated 12 tasks in file {path}" in capsys.readouterr().out
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 12
    for line in lines:
        width, duration = map(int, line.split())
        assert 1 <= width < 5
        assert 1 <= duration < 8


def test_generate_with_seed_is_reproducible(tmp_path) -> None:
    main(["generate", "20", "9", "9", "--output-dir", str(tmp_path / "a"), "--seed", "5"])
    main(["generate", "20", "9", "9", "--output-dir", str(tmp_path / "b"), "--seed", "5"])

    assert (tmp_path / "a" / "tasks20.txt").read_text(encoding="utf-8") == (
        tmp_path / "b" / "tasks20.txt"
    ).read_text(encoding="utf-8")


def test_generate_needs_three_parameters(capsys) -> None:
    assert main(["generate", "10", "5"]) == 1
    assert "InvalidParameterError" in capsys.readouterr().err


def test_unknown_mode_ignores_broken_settings(monkeypatch, capsys) -> None:
    """Settings are never read when the mode is unknown."""
    monkeypatch.setenv("STRIP_LOG_LEVEL", "LOUD")
    monkeypatch.setenv("STRIP_SEED", "abc")

    assert main(["bestfit", "x", "3"]) == 0

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_unknown_mode_ignores_unknown_options(capsys) -> None:
    assert main(["bestfit", "--verbose"]) == 0

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_unknown_mode_after_options_is_a_no_op(tmp_path, capsys) -> None:
    assert main(["--seed", "3", "bestfit"]) == 0

    assert capsys.readouterr().err == ""
    assert not (tmp_path / "schedule.txt").exists()
