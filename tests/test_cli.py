"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from unittest.mock import patch

import pytest

from forecast_svg.cli import cmd_info, cmd_render, create_parser, main
from forecast_svg.config import Settings
from forecast_svg.schemas import Result, RunStage


def _render_args(**overrides: object) -> argparse.Namespace:
    values: dict[str, object] = {"template": None, "output": None, "lat": None, "lon": None}
    values.update(overrides)
    return argparse.Namespace(**values)


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "forecast-svg"

    def test_parser_has_version(self) -> None:
        """Parser has version argument."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_parser_has_debug_flag(self) -> None:
        """Parser accepts --debug flag."""
        parser = create_parser()
        args = parser.parse_args(["--debug", "info"])
        assert args.debug is True

    def test_parser_render_defaults(self) -> None:
        """Render command leaves overrides unset."""
        parser = create_parser()
        args = parser.parse_args(["render"])
        assert args.command == "render"
        assert args.template is None
        assert args.output is None
        assert args.lat is None
        assert args.lon is None

    def test_parser_render_overrides(self) -> None:
        """Render command accepts paths and coordinates."""
        parser = create_parser()
        args = parser.parse_args(
            [
                "render",
                "--template",
                "t.svg",
                "--output",
                "o.svg",
                "--lat",
                "45.5",
                "--lon",
                "-122.6",
            ]
        )
        assert args.template == Path("t.svg")
        assert args.output == Path("o.svg")
        assert args.lat == 45.5
        assert args.lon == -122.6

    def test_parser_info_command(self) -> None:
        """Parser accepts info command."""
        parser = create_parser()
        args = parser.parse_args(["info"])
        assert args.command == "info"


class TestCmdRender:
    """Tests for cmd_render function."""

    def test_success_returns_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Successful run exits 0 and prints the completion message."""
        ok = Result(success=True, message="SVG generated successfully: chat.svg")
        with (
            patch("forecast_svg.cli.get_settings", return_value=Settings()),
            patch("forecast_svg.cli.render_forecast", return_value=ok),
        ):
            assert cmd_render(_render_args()) == 0
        assert "SVG generated successfully" in capsys.readouterr().out

    def test_failure_returns_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Any failed stage exits 1 with the error on stderr."""
        failed = Result(
            success=False,
            message="Run failed while parsing",
            stage=RunStage.FAILED,
            error="Error parsing JSON response: Expecting value",
        )
        with (
            patch("forecast_svg.cli.get_settings", return_value=Settings()),
            patch("forecast_svg.cli.render_forecast", return_value=failed),
        ):
            assert cmd_render(_render_args()) == 1
        assert "Error parsing JSON response" in capsys.readouterr().err

    def test_overrides_applied(self) -> None:
        """Command-line values replace settings for this run only."""
        ok = Result(success=True, message="done")
        with (
            patch("forecast_svg.cli.get_settings", return_value=Settings()),
            patch("forecast_svg.cli.render_forecast", return_value=ok) as mock_render,
        ):
            cmd_render(_render_args(output=Path("out.svg"), lat=45.5))

        settings = mock_render.call_args.args[0]
        assert settings.output_path == Path("out.svg")
        assert settings.lat == 45.5
        assert settings.template_path == Path("template.svg")

    def test_invalid_override_rejected(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Out-of-range overrides are validated and the run never starts."""
        with (
            patch("forecast_svg.cli.get_settings", return_value=Settings()),
            patch("forecast_svg.cli.render_forecast") as mock_render,
        ):
            assert cmd_render(_render_args(lat=999.0)) == 1

        mock_render.assert_not_called()
        assert "invalid option" in capsys.readouterr().err

    def test_no_overrides_uses_settings(self) -> None:
        """Without overrides the loaded settings are passed through unchanged."""
        loaded = Settings()
        ok = Result(success=True, message="done")
        with (
            patch("forecast_svg.cli.get_settings", return_value=loaded),
            patch("forecast_svg.cli.render_forecast", return_value=ok) as mock_render,
        ):
            cmd_render(_render_args())

        assert mock_render.call_args.args[0] is loaded


class TestCmdInfo:
    """Tests for cmd_info function."""

    def test_info_returns_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Info command returns 0 and prints settings."""
        args = argparse.Namespace()
        exit_code = cmd_info(args)
        assert exit_code == 0
        out = capsys.readouterr().out
        assert "forecast-svg" in out
        assert "template.svg" in out
        assert "chat.svg" in out


class TestMain:
    """Tests for main function."""

    def test_no_command_shows_help(self) -> None:
        """No command shows help and exits 0."""
        with patch("sys.argv", ["forecast-svg"]):
            exit_code = main()
            assert exit_code == 0

    def test_render_command_executes(self) -> None:
        """Render command is dispatched and its exit code returned."""
        with (
            patch("sys.argv", ["forecast-svg", "render"]),
            patch("forecast_svg.cli.cmd_render") as mock_cmd,
        ):
            mock_cmd.return_value = 1
            exit_code = main()
            assert exit_code == 1
            mock_cmd.assert_called_once()

    def test_info_command_executes(self) -> None:
        """Info command executes successfully."""
        with (
            patch("sys.argv", ["forecast-svg", "info"]),
            patch("forecast_svg.cli.cmd_info") as mock_cmd,
        ):
            mock_cmd.return_value = 0
            exit_code = main()
            assert exit_code == 0
            mock_cmd.assert_called_once()

    def test_unknown_command_shows_help(self) -> None:
        """Unknown command shows help and returns 1."""
        with (
            patch("sys.argv", ["forecast-svg", "render"]),
            patch("forecast_svg.cli.create_parser") as mock_parser,
        ):
            mock_parser.return_value.parse_args.return_value = argparse.Namespace(
                command="unknown", debug=False
            )
            exit_code = main()
            assert exit_code == 1
