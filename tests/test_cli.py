import argparse
import json

import pytest

from courtpairing.testing.__main__ import (
    COMMANDS,
    create_completer,
    main,
    parse_count_range,
    run_command_line,
)


def test_completer_accepts_both_command_forms():
    options = create_completer().options
    for command in COMMANDS:
        assert command in options
        assert f"/{command}" in options
    assert "help" in options and "/help" in options
    assert "/list" not in options


@pytest.mark.parametrize(
    "value, expected",
    [("8", [8]), ("8-11", [8, 9, 10, 11]), ("8,9,12", [8, 9, 12])],
)
def test_parse_count_range(value, expected):
    assert parse_count_range(value) == expected


@pytest.mark.parametrize("value", ["12-8", "eight", "8-x"])
def test_parse_count_range_rejects_bad_values(value):
    with pytest.raises(argparse.ArgumentTypeError):
        parse_count_range(value)


def test_simulate_command(capsys):
    assert main(["simulate", "--courts", "2", "--rounds", "3", "--seed", "1"]) == 0
    output = capsys.readouterr().out
    assert "Event Summary" in output
    assert "Round 3" in output


def test_simulate_writes_json(tmp_path):
    output = tmp_path / "event.json"
    args = [
        "simulate",
        "--format",
        "americano",
        "--players",
        "9",
        "--courts",
        "2",
        "--rounds",
        "4",
        "--seed",
        "8",
        "--output",
        str(output),
    ]
    assert main(args) == 0
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["event"]["format"] == "americano"
    assert len(data["rounds"]) == 4


def test_simulate_reports_bad_roster(capsys):
    assert main(["simulate", "--courts", "2", "--players", "9", "--rounds", "2"]) == 1
    assert "Simulation failed" in capsys.readouterr().out


def test_sweep_command(capsys):
    assert main(["sweep", "--players", "8-9", "--courts", "2"]) == 0
    output = capsys.readouterr().out
    assert "coverage" in output
    assert run_command_line(["sweep", "--players", "5", "--courts", "2"]) == 1


def test_command_line_without_command_prints_help(capsys):
    assert run_command_line([]) == 0
    assert "courtpairing-sim" in capsys.readouterr().out


def test_bad_arguments_exit():
    with pytest.raises(SystemExit):
        run_command_line(["simulate", "--pattern", "chaotic"])
