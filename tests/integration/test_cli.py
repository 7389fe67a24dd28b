"""
CLI Integration Tests
=====================

Tests the complete CLI interface including command parsing, configuration loading,
and font resolution output.
"""

import json
from unittest.mock import patch

import pytest
import yaml
from click.testing import CliRunner

from main import cli
from osfont.core.exceptions import UnsupportedPlatformError


class TestCLIIntegration:
    """CLI integration tests."""

    @pytest.fixture
    def runner(self):
        """Click test runner."""
        return CliRunner()

    @pytest.fixture
    def static_config(self, temp_dir):
        """Configuration whose catalog only knows the Ubuntu font."""
        config_path = temp_dir / "osfont.yaml"
        with config_path.open("w") as f:
            yaml.dump({"catalog_backend": "static", "available_fonts": ["Ubuntu"]}, f)
        return config_path

    def test_cli_help(self, runner):
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        for command in ("resolve", "detect", "system-font", "rules"):
            assert command in result.output

    def test_resolve(self, runner):
        result = runner.invoke(cli, ["resolve", "windows", "6.1.7601", "--catalog", "any"])

        assert result.exit_code == 0
        assert "Font: Segoe UI" in result.output
        assert "Size: 9" in result.output
        assert "Advisory" not in result.output

    def test_resolve_with_advisory(self, runner):
        result = runner.invoke(cli, ["resolve", "macos", "10.11", "--catalog", "any"])

        assert result.exit_code == 0
        assert "Font: Helvetica Neue" in result.output
        assert "Size: 13" in result.output
        assert "Advisory: FontNotAvailable" in result.output

    def test_resolve_json(self, runner):
        result = runner.invoke(cli, ["resolve", "ubuntu", "10", "--catalog", "any", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["font_name"] == ""
        assert data["font_size"] is None
        assert data["advisories"][0]["kind"] == "MinorVersionNeeded"

    def test_resolve_unknown_os(self, runner):
        result = runner.invoke(cli, ["resolve", "", "--catalog", "any"])

        assert result.exit_code == 0
        assert "Font: (none)" in result.output
        assert "Size: (none)" in result.output

    @pytest.mark.parametrize("version", ["10.x", "10..4", "10.11"])
    def test_resolve_empty_os_ignores_version(self, runner, version):
        """Test the version is not parsed when the OS is unknown."""
        result = runner.invoke(cli, ["resolve", "", version, "--catalog", "any", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["font_name"] == ""
        assert data["font_size"] is None
        assert data["advisories"] == []

    @pytest.mark.parametrize("args", [["resolve", "macos"], ["resolve", "macos", "10.x"]])
    def test_resolve_invalid_version(self, runner, args):
        result = runner.invoke(cli, [*args, "--catalog", "any"])

        assert result.exit_code == 1

    def test_resolve_with_config_file(self, runner, static_config):
        installed = runner.invoke(cli, ["--config", str(static_config), "resolve", "ubuntu", "22.04"])
        missing = runner.invoke(cli, ["--config", str(static_config), "resolve", "macos", "10.9"])

        assert installed.exit_code == 0
        assert "Font: Ubuntu" in installed.output
        assert missing.exit_code == 0
        assert "Font: (none)" in missing.output
        assert "Size: 13" in missing.output

    def test_invalid_config_file(self, runner, temp_dir):
        config_path = temp_dir / "bad.yaml"
        config_path.write_text("catalog_backend: registry\n")

        result = runner.invoke(cli, ["--config", str(config_path), "rules"])

        assert result.exit_code == 1

    def test_rules(self, runner):
        result = runner.invoke(cli, ["rules"])

        assert result.exit_code == 0
        assert "Segoe UI 9pt" in result.output
        assert "redhat" in result.output
        assert "(replaces San Francisco Text)" in result.output

    def test_detect(self, runner):
        with patch("main.detect_os", return_value=("windows", [10, 0, 19045])):
            result = runner.invoke(cli, ["detect"])

        assert result.exit_code == 0
        assert "OS: windows" in result.output
        assert "Version: 10.0.19045" in result.output

    def test_detect_failure_falls_back_to_unknown(self, runner):
        with patch("main.detect_os", side_effect=UnsupportedPlatformError("Java")):
            result = runner.invoke(cli, ["detect"])

        assert result.exit_code == 0
        assert "OS: (unknown)" in result.output

    def test_system_font(self, runner):
        with patch("main.detect_os", return_value=("centos", [7, 9])):
            result = runner.invoke(cli, ["system-font", "--catalog", "any"])

        assert result.exit_code == 0
        assert "Font: Cantarell" in result.output
        assert "Size: 11" in result.output

    def test_system_font_detection_failure(self, runner):
        with patch("main.detect_os", side_effect=UnsupportedPlatformError("")):
            result = runner.invoke(cli, ["system-font", "--catalog", "any", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"font_name": "", "font_size": None, "advisories": []}
