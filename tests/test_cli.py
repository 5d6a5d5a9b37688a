import json

import pytest
from click.testing import CliRunner

from fixed_decimal import __version__
from fixed_decimal.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_cli_help(runner: CliRunner):
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for command in ("parse", "convert", "calc", "config"):
        assert command in result.output


def test_cli_version(runner: CliRunner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_parse(runner: CliRunner):
    result = runner.invoke(cli, ["parse", "1.5"])
    assert result.exit_code == 0
    assert result.output.strip() == "1.500000 (atomics: 1500000)"

    result = runner.invoke(cli, ["parse", "1.5", "--places", "18"])
    assert result.exit_code == 0
    assert result.output.strip() == "1.500000000000000000 (atomics: 1500000000000000000)"


def test_cli_parse_truncate(runner: CliRunner):
    result = runner.invoke(cli, ["parse", "1.1234567"])
    assert result.exit_code == 1
    assert "too many decimal places" in result.output

    result = runner.invoke(cli, ["parse", "1.1234567", "--truncate"])
    assert result.exit_code == 0
    assert result.output.strip() == "1.123456 (atomics: 1123456)"


def test_cli_parse_invalid(runner: CliRunner):
    result = runner.invoke(cli, ["parse", "abc"])
    assert result.exit_code == 1
    assert "Invalid decimal string" in result.output

    result = runner.invoke(cli, ["parse", "1.5", "--places", "39"])
    assert result.exit_code == 2


def test_cli_convert(runner: CliRunner):
    result = runner.invoke(cli, ["convert", "1.123456789", "--from", "9", "--to", "6"])
    assert result.exit_code == 0
    assert result.output.strip() == "1.123456"

    result = runner.invoke(cli, ["convert", "1.5", "--from", "6", "--to", "18"])
    assert result.exit_code == 0
    assert result.output.strip() == "1.500000000000000000"


def test_cli_convert_overflow(runner: CliRunner):
    result = runner.invoke(
        cli, ["convert", "340282366920938463463374607431768.211455", "--from", "6", "--to", "18"]
    )
    assert result.exit_code == 1
    assert "Precision conversion overflow" in result.output


def test_cli_calc(runner: CliRunner):
    result = runner.invoke(cli, ["calc", "1.5", "+", "2"])
    assert result.exit_code == 0
    assert result.output.strip() == "3.500000"

    result = runner.invoke(cli, ["calc", "1.5", "*", "2"])
    assert result.exit_code == 0
    assert result.output.strip() == "3.000000"

    result = runner.invoke(cli, ["calc", "10", "/", "4", "--places", "2"])
    assert result.exit_code == 0
    assert result.output.strip() == "2.50"

    result = runner.invoke(cli, ["calc", "5.5", "%", "2"])
    assert result.exit_code == 0
    assert result.output.strip() == "1.500000"


def test_cli_calc_modes(runner: CliRunner):
    result = runner.invoke(cli, ["calc", "1", "-", "2"])
    assert result.exit_code == 1
    assert "Underflow" in result.output or "less than the minimum" in result.output

    result = runner.invoke(cli, ["calc", "1", "-", "2", "--mode", "checked"])
    assert result.exit_code == 0
    assert result.output.strip() == "None"

    result = runner.invoke(cli, ["calc", "1", "-", "2", "--mode", "saturating"])
    assert result.exit_code == 0
    assert result.output.strip() == "0.000000"

    result = runner.invoke(cli, ["calc", "1", "/", "0", "--mode", "checked"])
    assert result.exit_code == 0
    assert result.output.strip() == "None"

    result = runner.invoke(cli, ["calc", "1", "/", "0"])
    assert result.exit_code == 1
    assert "Division by zero" in result.output

    result = runner.invoke(cli, ["calc", "1", "/", "2", "--mode", "saturating"])
    assert result.exit_code == 2


def test_cli_calc_invalid_operator(runner: CliRunner):
    result = runner.invoke(cli, ["calc", "1", "^", "2"])
    assert result.exit_code == 2


def test_cli_config_show_default(runner: CliRunner):
    result = runner.invoke(cli, ["config", "show"])
    assert result.exit_code == 0
    assert "[parser]" in result.output


def test_cli_config_show_json(runner: CliRunner):
    result = runner.invoke(cli, ["config", "show", "--json"])
    assert result.exit_code == 0
    assert "max_fractional_digits" in json.loads(result.output)["parser"]


def test_cli_config_show_toml(runner: CliRunner):
    result = runner.invoke(cli, ["config", "show", "--toml"])
    assert result.exit_code == 0
    assert "[parser]" in result.output
    assert "max_input_length" in result.output
