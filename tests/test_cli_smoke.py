"""Smoke tests for the huesync CLI."""

import json

import pytest
from click.testing import CliRunner

from huesync import __version__
from huesync.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def invoke(runner, config_file):
    """Run the CLI against a temp config file."""

    def _invoke(*args, **kwargs):
        return runner.invoke(cli, ["--config", str(config_file), *args], **kwargs)

    return _invoke


@pytest.mark.integration
class TestCli:
    """Test top-level CLI behavior."""

    def test_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "show" in result.output
        assert "presets" in result.output
        assert "config" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_command_shows_default_color(self, invoke):
        result = invoke()
        assert result.exit_code == 0
        assert "HEX  #667eea" in result.output


@pytest.mark.integration
class TestShowCommand:
    """Test the show command."""

    def test_default(self, invoke):
        result = invoke("show")
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "HEX  #667eea",
            "RGB  rgb(102, 126, 234)",
            "HSL  hsl(229, 76%, 66%)",
        ]

    @pytest.mark.parametrize("value", ["#FF00FF", "ff00ff"])
    def test_hex(self, invoke, value):
        result = invoke("show", value)
        assert result.exit_code == 0
        assert "HEX  #ff00ff" in result.output
        assert "RGB  rgb(255, 0, 255)" in result.output
        assert "HSL  hsl(300, 100%, 50%)" in result.output

    def test_hsl(self, invoke):
        result = invoke("show", "--hsl", "249", "78", "73")
        assert result.exit_code == 0
        assert "HEX  #9584f0" in result.output
        assert "HSL  hsl(249, 78%, 73%)" in result.output

    @pytest.mark.parametrize("s,l", [("0", "101"), ("101", "50")])
    def test_hsl_percentages_out_of_range(self, invoke, s, l):
        result = invoke("show", "--hsl", "0", s, l)
        assert result.exit_code == 2
        assert "Invalid value" in result.output
        assert "Traceback" not in result.output

    def test_hsl_hue_is_not_bounded(self, invoke):
        result = invoke("show", "--hsl", "360", "100", "50")
        assert result.exit_code == 0
        assert "HEX  #000000" in result.output

    def test_rgb_is_clamped(self, invoke):
        result = invoke("show", "--rgb", "999", "abc", "128")
        assert result.exit_code == 0
        assert "RGB  rgb(255, 0, 128)" in result.output
        assert "HEX  #ff0080" in result.output

    def test_json(self, invoke):
        result = invoke("show", "#ff00ff", "--json")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {
            "hsl": {"h": 300, "s": 100, "l": 50},
            "rgb": {"r": 255, "g": 0, "b": 255},
            "hex": "#ff00ff",
        }

    def test_invalid_hex(self, invoke):
        result = invoke("show", "#12")
        assert result.exit_code == 1
        assert "ERROR: '#12' is not a valid HEX color" in result.output

    def test_several_inputs(self, invoke):
        result = invoke("show", "#ff00ff", "--hsl", "0", "0", "0")
        assert result.exit_code == 2

    def test_uses_configured_default(self, invoke, config_file):
        config_file.write_text('{"default_color": "#000000"}')
        result = invoke("show")
        assert result.exit_code == 0
        assert "HEX  #000000" in result.output

    def test_broken_config(self, invoke, config_file):
        config_file.write_text('{"default_color": "#000000",}')
        result = invoke("show")
        assert result.exit_code == 1
        assert "ERROR:" in result.output

    def test_config_not_utf8(self, invoke, config_file):
        config_file.write_bytes(b"\xff\xfe")
        result = invoke("show")
        assert result.exit_code == 1
        assert "ERROR: Configuration file is not valid JSON" in result.output


@pytest.mark.integration
class TestPresetsCommand:
    """Test the presets command."""

    def test_lists_default_presets(self, invoke):
        result = invoke("presets")
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 12
        assert lines[1].startswith("#4ECDC4  rgb(78, 205, 196)")
        assert lines[1].endswith("Turquoise")

    def test_unnamed_preset(self, invoke, config_file):
        config_file.write_text('{"presets": ["#123456"]}')
        result = invoke("presets")
        assert result.exit_code == 0
        assert result.output.splitlines() == ["#123456  rgb(18, 52, 86)       hsl(210, 65%, 20%)"]

    def test_no_presets(self, invoke, config_file):
        config_file.write_text('{"presets": []}')
        result = invoke("presets")
        assert result.exit_code == 0
        assert "No presets configured." in result.output


@pytest.mark.integration
class TestConfigCommands:
    """Test the config command group."""

    def test_path(self, invoke, config_file):
        result = invoke("config", "path")
        assert result.exit_code == 0
        assert result.output.strip() == str(config_file)

    def test_show(self, invoke):
        result = invoke("config", "show")
        assert result.exit_code == 0
        assert json.loads(result.output)["default_color"] == "#667eea"

    def test_validate_missing(self, invoke):
        result = invoke("config", "validate")
        assert result.exit_code == 0
        assert "defaults are used" in result.output

    def test_validate_valid(self, invoke, config_file):
        config_file.write_text('{"default_color": "#000000"}')
        result = invoke("config", "validate")
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output

    def test_validate_invalid(self, invoke, config_file):
        config_file.write_text('{"default_color": "black"}')
        result = invoke("config", "validate")
        assert result.exit_code == 1
        assert "Configuration is invalid" in result.output

    def test_reset(self, invoke, config_file):
        config_file.write_text('{"default_color": "#000000"}')
        result = invoke("config", "reset", "--yes")
        assert result.exit_code == 0
        assert json.loads(config_file.read_text())["default_color"] == "#667eea"
        assert config_file.with_suffix(".json.bak").exists()

    def test_reset_aborted(self, invoke, config_file):
        result = invoke("config", "reset", input="n\n")
        assert result.exit_code == 1
        assert not config_file.exists()
