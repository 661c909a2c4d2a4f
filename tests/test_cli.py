#!/usr/bin/env python3
"""
Tests for the pypeoffset command-line interface.
"""

import pytest
from click.testing import CliRunner

from pypeoffset.cli import cli

JOBS = """\
settings:
  precision: 1
jobs:
  - id: good
    description: Drain line
    offset_distance: 100
    angle: 45
  - id: bad
    offset_distance: 100
    angle: 37
"""


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestAngles:
    def test_lists_supported_angles(self, runner):
        result = runner.invoke(cli, ["angles"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["15°", "22.5°", "30°", "45°", "60°", "90°"]

    def test_verbose_flag(self, runner):
        result = runner.invoke(cli, ["-v", "angles"])
        assert result.exit_code == 0


class TestCalc:
    """Tests for the calc command."""

    def test_default_angle(self, runner):
        result = runner.invoke(cli, ["calc", "100"])
        assert result.exit_code == 0
        assert "Travel:     141.42" in result.output
        assert "Angle:      45°" in result.output

    def test_with_diameter_and_precision(self, runner):
        result = runner.invoke(cli, ["calc", "50", "-a", "30", "-d", "10", "-p", "1"])
        assert result.exit_code == 0
        # 50 / sin(30°) + 10 / sin(30°) = 120
        assert "120.0" in result.output
        assert "Pipe diameter: 10.0" in result.output

    def test_negative_offset(self, runner):
        result = runner.invoke(cli, ["calc", "-a", "45", "--", "-10"])
        assert result.exit_code == 1
        assert "Error: Invalid offset distance" in result.output

    def test_unsupported_angle(self, runner):
        result = runner.invoke(cli, ["calc", "100", "--angle", "37"])
        assert result.exit_code == 1
        assert "Supported angles are: 15, 22.5, 30, 45, 60, 90" in result.output

    def test_unparseable_diameter(self, runner):
        result = runner.invoke(cli, ["calc", "100", "-d", "wide"])
        assert result.exit_code == 1
        assert "Invalid pipe diameter" in result.output

    def test_negative_precision_rejected(self, runner):
        result = runner.invoke(cli, ["calc", "100", "-p", "-1"])
        assert result.exit_code == 2


class TestDiagram:
    def test_writes_svg(self, runner, tmp_path):
        output = tmp_path / "offset.svg"
        result = runner.invoke(cli, ["diagram", "100", "-a", "30", "-o", str(output)])
        assert result.exit_code == 0
        assert output.exists()
        assert "Travel: 200.00" in output.read_text(encoding="utf-8")

    def test_invalid_input_writes_nothing(self, runner, tmp_path):
        output = tmp_path / "offset.svg"
        result = runner.invoke(cli, ["diagram", "100", "-a", "37", "-o", str(output)])
        assert result.exit_code == 1
        assert not output.exists()


class TestBatch:
    """Tests for the batch command."""

    def test_reports_all_jobs_and_fails_on_errors(self, runner, tmp_path):
        jobs = tmp_path / "jobs.yaml"
        jobs.write_text(JOBS)
        out_dir = tmp_path / "svg"

        result = runner.invoke(cli, ["batch", str(jobs), "--output-dir", str(out_dir)])

        assert result.exit_code == 1
        assert "[good] Drain line" in result.output
        assert "141.4" in result.output
        assert "Unsupported angle: 37" in result.output
        assert "1 of 2 jobs calculated." in result.output
        assert (out_dir / "good.svg").exists()
        assert not (out_dir / "bad.svg").exists()

    def test_all_jobs_succeed(self, runner, tmp_path):
        jobs = tmp_path / "jobs.yaml"
        jobs.write_text("jobs:\n  - id: a\n    offset_distance: 50\n    angle: 30\n")

        result = runner.invoke(cli, ["batch", str(jobs)])

        assert result.exit_code == 0
        assert "Travel:     100.00" in result.output
        assert "1 of 1 jobs calculated." in result.output

    def test_bad_job_file(self, runner, tmp_path):
        jobs = tmp_path / "jobs.yaml"
        jobs.write_text("jobs:\n  - id: a\n    angle: 30\n")

        result = runner.invoke(cli, ["batch", str(jobs)])

        assert result.exit_code == 1
        assert "Error loading job file" in result.output


class TestBatchBadInput:
    """Malformed job files and unwritable diagrams end in a clean exit 1."""

    @pytest.mark.parametrize(
        "content",
        [
            "jobs:\n  - 5\n",
            "settings: 5\njobs: []\n",
            "jobs:\n  - id: line/a\n    offset_distance: 100\n    angle: 45\n",
            "jobs:\n  - id: ../x\n    offset_distance: 100\n    angle: 45\n",
        ],
    )
    def test_malformed_job_file(self, runner, tmp_path, content):
        jobs = tmp_path / "jobs.yaml"
        jobs.write_text(content)

        result = runner.invoke(cli, ["batch", str(jobs), "--output-dir", str(tmp_path / "svg")])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error loading job file" in result.output
        assert not (tmp_path / "x.svg").exists()

    def test_unwritable_diagram_does_not_stop_batch(self, runner, tmp_path):
        jobs = tmp_path / "jobs.yaml"
        jobs.write_text(
            "jobs:\n"
            "  - id: a\n    offset_distance: 100\n    angle: 45\n"
            "  - id: b\n    offset_distance: 50\n    angle: 30\n"
        )
        out_dir = tmp_path / "svg"
        # A directory where the first diagram file should go
        (out_dir / "a.svg").mkdir(parents=True)

        result = runner.invoke(cli, ["batch", str(jobs), "--output-dir", str(out_dir)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Cannot write diagram" in result.output
        assert (out_dir / "b.svg").is_file()
        assert "1 of 2 jobs calculated." in result.output


class TestCalcHelp:
    def test_help_explains_negative_values(self, runner):
        result = runner.invoke(cli, ["calc", "--help"])
        assert result.exit_code == 0
        assert "pypeoffset calc -a 45 -- -10" in result.output
