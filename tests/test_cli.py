"""Tests for the command line interface."""

from src.presentation.cli.main import main


def test_estimate_command(capsys):
    """Test the estimate sub-command output."""
    code = main(
        ["estimate", "--growing-days", "75-85", "--planted", "2024-01-01", "--today", "2024-01-01"]
    )
    output = capsys.readouterr().out

    assert code == 0
    assert "mid March to late March" in output
    assert "Days to go:   75" in output


def test_calendar_command(capsys):
    """Test the calendar sub-command output."""
    code = main(["calendar", "--growing-days", "75-85", "--planted", "2024-03-05"])
    output = capsys.readouterr().out

    assert code == 0
    assert "Best weeks: [20, 21, 22]" in output
    assert "Good weeks: [19, 23]" in output


def test_clock_commands_with_csv_storage(tmp_path, capsys):
    """Test clock-in, duplicate clock-in, clock-out and hours."""
    data_file = str(tmp_path / "blocks.csv")
    base = ["--storage", "csv", "--data-file", data_file]

    assert main(base + ["clock-in", "--worker", "w-1", "--at", "2024-05-13T09:00:00"]) == 0
    assert main(base + ["clock-in", "--worker", "w-1", "--at", "2024-05-13T09:30:00"]) == 1
    assert main(base + ["clock-out", "--worker", "w-1", "--at", "2024-05-13T17:30:00"]) == 0
    assert main(base + ["hours", "--worker", "w-1", "--date", "2024-05-13"]) == 0

    output = capsys.readouterr().out
    assert "Clocked in w-1: Block 1: 9:00 AM - Active" in output
    assert "(8.5 hours)" in output
    assert "Total 2024-05-13: 8.5 hours (warning)" in output


def test_clock_out_without_clock_in_fails(tmp_path):
    """Test clock-out on an empty store exits with an error code."""
    code = main(
        ["--storage", "memory", "clock-out", "--worker", "w-1", "--at", "2024-05-13T17:00:00"]
    )
    assert code == 1
