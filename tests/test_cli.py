import json
from pathlib import Path
from unittest.mock import patch

import click
import pytest
from click.testing import CliRunner

from whackerlink_reporter import __version__
from whackerlink_reporter.cli import cli
from whackerlink_reporter.config import ReporterConfig
from whackerlink_reporter.models import PacketType, ResponseType


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Empty working directory, so no stray config.ini is picked up.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def app_config(workdir: Path):
    """
    Factory fixture writing an application config file and returning its path.
    """

    def _create_config(content: str) -> str:
        config_path = workdir / "app.ini"
        config_path.write_text(content)
        return str(config_path)

    return _create_config


class TestCLI:
    """
    Tests for the whackerlink-reporter command line.
    """

    def setup_method(self):
        self.runner = CliRunner()

    def test_help(self):
        result = self.runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "Usage: cli [OPTIONS] COMMAND [ARGS]..." in click.unstyle(result.output)

    def test_version(self):
        result = self.runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_config_defaults(self, workdir):
        result = self.runner.invoke(cli, ["config"])

        assert result.exit_code == 0
        assert json.loads(result.output) == ReporterConfig().as_dict()

    def test_config_from_file_with_override(self, app_config):
        path = app_config("[reporter]\nenabled = true\naddress = collector\nport = 3000\n")

        result = self.runner.invoke(cli, ["config", "--config", path, "--port", "4000"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["enabled"] is True
        assert data["address"] == "collector"
        assert data["port"] == 4000

    def test_config_invalid_file(self, app_config):
        path = app_config("[reporter]\nenabled = true\nport = 3000\n")

        result = self.runner.invoke(cli, ["config", "--config", path])

        assert result.exit_code == 1
        assert "address must not be empty" in result.output

    @patch("whackerlink_reporter.cli.Reporter")
    def test_send_test_forces_enabled(self, reporter_cls, workdir):
        result = self.runner.invoke(
            cli,
            [
                "send-test",
                "--address", "collector",
                "--port", "3000",
                "--packet-type", "GRP_AFF_REQ",
                "--src-id", "100",
                "--dst-id", "200",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "Report dispatched to http://collector:3000" in result.output

        config = reporter_cls.from_config.call_args[0][0]
        assert config.enabled is True

        reporter = reporter_cls.from_config.return_value
        reporter.send.assert_called_once_with(
            PacketType.GRP_AFF_REQ,
            "100",
            "200",
            None,
            "test",
            response_type=ResponseType.UNKNOWN,
        )

    def test_send_test_unknown_timezone(self, app_config):
        path = app_config("[reporter]\naddress = collector\ntimezone = Mars/Olympus\n")

        result = self.runner.invoke(cli, ["send-test", "--config", path])

        assert result.exit_code == 1
        assert "Mars/Olympus" in result.output

    def test_send_test_rejects_unknown_packet_type(self):
        result = self.runner.invoke(cli, ["send-test", "--packet-type", "NOPE"])

        assert result.exit_code == 2
