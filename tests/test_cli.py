"""Tests for the CLI."""

import pytest
from click.testing import CliRunner

from shrinkwrap.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


def _payloads(output, prefix):
    lines = output.strip().splitlines()
    assert all(line.startswith(prefix) and line.endswith(")") for line in lines)
    return [int(line[len(prefix):-1]) for line in lines]


class TestListCommands:
    """Tests for the listing commands."""

    def test_list_modifiers(self, runner):
        result = runner.invoke(cli, ["list-modifiers"])

        assert result.exit_code == 0
        assert "Available Modifiers" in result.output
        assert "positive" in result.output
        assert "ranked_shrink" in result.output

    def test_list_bases(self, runner):
        result = runner.invoke(cli, ["list-bases"])

        assert result.exit_code == 0
        assert "int8" in result.output
        assert "text" in result.output


class TestSampleCommand:
    """Tests for the sample command."""

    def test_sample_positive(self, runner):
        result = runner.invoke(
            cli, ["sample", "positive", "--count", "20", "--seed", "1", "--size", "10"]
        )

        assert result.exit_code == 0
        values = _payloads(result.output, "Positive(value=")
        assert len(values) == 20
        assert all(0 < v <= 10 for v in values)

    def test_sample_deterministic(self, runner):
        args = ["sample", "non_zero", "-n", "10", "-s", "7"]

        first = runner.invoke(cli, args)
        second = runner.invoke(cli, args)

        assert first.exit_code == 0
        assert first.output == second.output

    def test_sample_with_base(self, runner):
        result = runner.invoke(
            cli, ["sample", "wide_num", "--base", "int8", "-n", "50", "-s", "2"]
        )

        assert result.exit_code == 0
        values = _payloads(result.output, "WideNum(value=")
        assert all(-128 <= v <= 127 for v in values)

    def test_sample_with_config(self, runner, tmp_path):
        config = tmp_path / "settings.yaml"
        config.write_text("generation:\n  count: 5\n  seed: 3\n")

        result = runner.invoke(cli, ["sample", "non_negative", "--config", str(config)])

        assert result.exit_code == 0
        assert len(result.output.strip().splitlines()) == 5

    def test_sample_unbounded_wide_num(self, runner):
        result = runner.invoke(cli, ["sample", "wide_num", "--base", "integer"])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_sample_unknown_base(self, runner):
        result = runner.invoke(cli, ["sample", "positive", "--base", "nope"])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_sample_char_class_without_base(self, runner):
        result = runner.invoke(cli, ["sample", "ascii", "-n", "5", "-s", "1"])

        assert result.exit_code == 0
        assert len(result.output.strip().splitlines()) == 5

    def test_sample_char_class_rejects_base(self, runner):
        result = runner.invoke(cli, ["sample", "ascii", "--base", "float"])

        assert result.exit_code == 1
        assert "Error: ASCIIArbitrary" in result.output

    def test_stateful_not_offered(self, runner):
        result = runner.invoke(cli, ["sample", "stateful"])

        assert result.exit_code == 2


class TestShrinkCommand:
    """Tests for the shrink command."""

    def test_shrink_positive(self, runner):
        result = runner.invoke(cli, ["shrink", "positive", "100"])

        assert result.exit_code == 0
        assert "Shrinks of" in result.output
        assert "Positive(value=50)" in result.output
        assert "Positive(value=99)" in result.output

    def test_shrink_limit(self, runner):
        result = runner.invoke(cli, ["shrink", "positive", "100", "--limit", "2"])

        assert result.exit_code == 0
        assert "Positive(value=75)" in result.output
        assert "Positive(value=88)" not in result.output

    def test_shrink_ranked(self, runner):
        result = runner.invoke(cli, ["shrink", "ranked_shrink", "1000", "--rank", "5"])

        assert result.exit_code == 0
        assert "Rank" in result.output

    def test_shrink_list_literal(self, runner):
        result = runner.invoke(cli, ["shrink", "sorted", "[1, 5]"])

        assert result.exit_code == 0
        assert "Sorted(value=())" in result.output

    def test_shrink_invalid_payload(self, runner):
        result = runner.invoke(cli, ["shrink", "sorted", "[3, 1]"])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_no_shrink(self, runner):
        result = runner.invoke(cli, ["shrink", "no_shrink", "5"])

        assert result.exit_code == 0
        assert "No shrink candidates" in result.output


class TestValidateSettingsCommand:
    """Tests for the validate-settings command."""

    def test_valid(self, runner, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("count: 10\nseed: 1\n")

        result = runner.invoke(cli, ["--verbose", "validate-settings", str(path)])

        assert result.exit_code == 0
        assert "Valid settings" in result.output
        assert "count: 10" in result.output

    def test_invalid(self, runner, tmp_path):
        path = tmp_path / "settings.yaml"
        path.write_text("count: 0\n")

        result = runner.invoke(cli, ["validate-settings", str(path)])

        assert result.exit_code == 1
        assert "Error" in result.output
