"""End-to-end tests for ``marquee weeks``."""

import json

import pytest

from marquee.entrypoints.cli.main import marquee

# pylint: disable=magic-value-comparison, unused-argument


def test_regression_fixture_passes(runner, fs):
    """The January fixture yields the two expected Sunday weeks."""
    result = runner.invoke(marquee, ["weeks", "2025-01-05", "2025-01-19", "--expect", "2"])
    assert result.exit_code == 0, result.output
    assert "2025-01-05  2025-01-12" in result.output
    assert "2025-01-12  2025-01-19" in result.output
    assert "2 week(s), as expected." in result.output


def test_unexpected_count_fails(runner, fs):
    """A wrong --expect exits 1 and says what came out."""
    result = runner.invoke(marquee, ["weeks", "2025-01-05", "2025-01-19", "--expect", "3"])
    assert result.exit_code == 1
    assert "Expected 3 week(s), got 2." in result.output


def test_json_output(runner, fs):
    """--json prints the weeks with their exclusive ends."""
    result = runner.invoke(marquee, ["weeks", "2025-01-05", "2025-01-19", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == [
        {"start": "2025-01-05", "end": "2025-01-12"},
        {"start": "2025-01-12", "end": "2025-01-19"},
    ]


def test_json_output_with_seeds(runner, fs):
    """The first January week touches the end-of-year window and is BUSY."""
    result = runner.invoke(
        marquee, ["weeks", "2025-01-05", "2025-01-19", "--json", "--seeds"]
    )
    assert result.exit_code == 0, result.output
    rows = json.loads(result.output)
    assert [(row["kind"], row["performances_count"], row["fee_cents"]) for row in rows] == [
        ("BUSY", 4, 30_000),
        ("CALM", 2, 15_000),
    ]


def test_seeds_in_text_output(runner, fs):
    """--seeds adds kind, performances and fee to each line."""
    result = runner.invoke(marquee, ["weeks", "2025-03-02", "2025-03-08", "--seeds"])
    assert result.exit_code == 0, result.output
    assert "2025-03-02  2025-03-09  CALM  2 performances  150.00" in result.output


@pytest.mark.parametrize(
    "args, env",
    [
        (["--anchor", "monday"], {}),
        (["--anchor", "Mon"], {}),
        ([], {"MARQUEE_WEEK_ANCHOR": "monday"}),
    ],
    ids=["name", "abbreviation", "env-var"],
)
def test_monday_anchor(runner, fs, args, env):
    """A Monday anchor snaps the same range onto three Monday weeks."""
    result = runner.invoke(
        marquee, ["weeks", "2025-01-05", "2025-01-19", "--json"] + args, env=env
    )
    assert result.exit_code == 0, result.output
    assert [row["start"] for row in json.loads(result.output)] == [
        "2024-12-30",
        "2025-01-06",
        "2025-01-13",
    ]


def test_single_anchor_day(runner, fs):
    """A range that is one Sunday gives exactly one week."""
    result = runner.invoke(marquee, ["weeks", "2025-01-05", "2025-01-05", "--expect", "1"])
    assert result.exit_code == 0, result.output


def test_unknown_anchor(runner, fs):
    """An anchor that is not a weekday is a usage error."""
    result = runner.invoke(marquee, ["weeks", "2025-01-05", "2025-01-19", "--anchor", "funday"])
    assert result.exit_code == 2
    assert "'funday' is not a weekday name." in result.output


def test_invalid_date(runner, fs):
    """An impossible date is reported with its label and exits 1."""
    result = runner.invoke(marquee, ["weeks", "2025-02-30", "2025-03-10"])
    assert result.exit_code == 1
    assert "Invalid date." in result.output
    assert "2025-02-30" in result.output


def test_reversed_range(runner, fs):
    """A start after the end is reported as an invalid period."""
    result = runner.invoke(marquee, ["weeks", "2025-01-19", "2025-01-05"])
    assert result.exit_code == 1
    assert "Invalid period." in result.output
