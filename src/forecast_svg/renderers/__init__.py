"""Rendering: derived values -> SVG text.

The SVG template is plain text with literal ``{name}`` tokens, e.g.::

    <text x="20" y="40">{todayDay} {degC}°C / {degF}°F {weatherEmoji}</text>
    <rect width="{dayBubbleWidth}" height="48" rx="12"/>

Substitution is literal and global: every occurrence of a known token is
replaced, anything else (unknown tokens, CSS braces) is left untouched.
No template engine is involved, so SVG ``<style>`` blocks need no escaping.

Public API:
  - render_svg: pure token substitution
  - read_template / write_output: UTF-8 file I/O raising TemplateError subclasses
  - weather_utils: celsius_to_fahrenheit, convert_temperature, wmo_code_to_emoji
  - date_utils: weekday_name, bubble_width, format_distance
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Mapping
from pathlib import Path

from forecast_svg.errors import OutputWriteError, TemplateReadError

#: Tokens understood by the default template.
PLACEHOLDERS = (
    "{degF}",
    "{degC}",
    "{weatherEmoji}",
    "{psTime}",
    "{todayDay}",
    "{dayBubbleWidth}",
)


def render_svg(template: str, values: Mapping[str, object]) -> str:
    """Replace every occurrence of each token in ``values`` with ``str(value)``."""
    for token, value in values.items():
        template = template.replace(token, str(value))
    return template


def read_template(path: Path) -> str:
    """Read a UTF-8 template file."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise TemplateReadError(f"Template data is not valid UTF-8 text ({e.reason})", path) from e
    except OSError as e:
        raise TemplateReadError(f"Error reading template ({e.strerror or e})", path) from e


def write_output(path: Path, content: str) -> Path:
    """Write rendered SVG, replacing any existing file.

    The content goes to a temporary file next to ``path`` which is then
    renamed over it, so a failed write leaves the previous file intact.
    """
    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_name = f.name
            f.write(content)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        raise OutputWriteError(f"Error writing output ({e.strerror or e})", path) from e
    return path
