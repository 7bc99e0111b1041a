"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from forecast_svg import __version__
from forecast_svg.config import Settings, get_settings
from forecast_svg.flows.render import render_forecast


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="forecast-svg",
        description="Render today's Open-Meteo forecast into an SVG template",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'render' command - one fetch + render run
    render_parser = subparsers.add_parser("render", help="Fetch the forecast and write the SVG")
    render_parser.add_argument(
        "--template",
        type=Path,
        default=None,
        help="Template path (default: template_path from settings)",
    )
    render_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output path (default: output_path from settings)",
    )
    render_parser.add_argument("--lat", type=float, default=None, help="Latitude override")
    render_parser.add_argument("--lon", type=float, default=None, help="Longitude override")

    # 'info' command
    subparsers.add_parser("info", help="Show effective settings")

    return parser


def cmd_render(args: argparse.Namespace) -> int:
    """Handle the 'render' command. Exit code 1 on any failed stage."""
    settings = get_settings()
    overrides = {
        "template_path": args.template,
        "output_path": args.output,
        "lat": args.lat,
        "lon": args.lon,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        try:
            settings = Settings.model_validate({**settings.model_dump(), **overrides})
        except ValidationError as e:
            print(f"Error: invalid option: {e}", file=sys.stderr)
            return 1

    result = render_forecast(settings)
    if result.success:
        print(result.message)
        return 0
    else:
        print(f"Error: {result.message}: {result.error}", file=sys.stderr)
        return 1


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Location: ({settings.lat}, {settings.lon})")
    print(f"API: {settings.base_url}")
    print(f"Template: {settings.template_path}")
    print(f"Output: {settings.output_path}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    debug = args.debug or get_settings().debug
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "render": cmd_render,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
