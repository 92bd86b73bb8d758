"""Tests for the command-line runner and settings."""

import json

import pytest
from click.testing import CliRunner

from scicalc.calc_types import AngleMode
from scicalc.cli import main, parse_script
from scicalc.config import CalculatorSettings


def test_run_script_prints_display():
    result = CliRunner().invoke(main, ["3 + 4 * 2 ="])
    assert result.exit_code == 0
    assert result.output.strip() == "14"


def test_grouping_and_functions():
    result = CliRunner().invoke(main, ["2 + ( 9 sqrt + 4 ) ="])
    assert result.exit_code == 0
    assert result.output.strip() == "9"


def test_radians_flag():
    result = CliRunner().invoke(main, ["--radians", "--json", "90 sin"])
    assert result.exit_code == 0
    state = json.loads(result.output)
    assert state["angle_mode"] == "rad"
    assert state["display"].startswith("0.89399")


def test_trace_prints_every_token():
    result = CliRunner().invoke(main, ["--trace", "12 / 4 ="])
    lines = result.output.strip().splitlines()
    assert lines[0].split("\t")[:2] == ["12", "12"]
    assert lines[1] == "/\t12\t12 ÷"
    assert lines[-1].split("\t")[1] == "3"


def test_memory_tokens():
    result = CliRunner().invoke(main, ["5 M+ C MR"])
    assert result.output.strip() == "5"


def test_unknown_token_is_usage_error():
    result = CliRunner().invoke(main, ["2 % 3"])
    assert result.exit_code == 2
    assert "Unknown token" in result.output


def test_parse_script_expands_numbers():
    steps = parse_script("1.5 pi")
    assert [a.payload for a in steps[0]] == ["1", ".", "5"]
    assert steps[1][0].payload.value == "pi"


def test_settings_from_env():
    settings = CalculatorSettings.from_env(
        {
            "SCICALC_DISPLAY_MAX_LENGTH": "12",
            "SCICALC_ANGLE_MODE": "RAD",
            "SCICALC_PORT": "8080",
            "SCICALC_LOG_LEVEL": "debug",
        }
    )
    assert settings.display_max_length == 12
    assert settings.default_angle_mode is AngleMode.RADIANS
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.display_precision == 6


def test_settings_reject_invalid_values():
    with pytest.raises(ValueError):
        CalculatorSettings.from_env({"SCICALC_PORT": "eighty"})
    with pytest.raises(ValueError):
        CalculatorSettings.from_env({"SCICALC_ANGLE_MODE": "grad"})
    with pytest.raises(ValueError):
        CalculatorSettings(log_level="chatty")
