"""Rendering colour lists as an SVG pie chart and showing it in a browser."""

from __future__ import annotations

import math
import subprocess
from os import PathLike
from pathlib import Path

SVG_FILE_PATH = "pie_chart.svg"
DEFAULT_BROWSER = "firefox"
NUM_COLORS = 10

CENTER_X = 200.0
CENTER_Y = 200.0
RADIUS = 150.0
START_ANGLE = -90.0

_SVG_HEADER = (
    '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n'
    '<svg width="400" height="400" xmlns="http://www.w3.org/2000/svg">\n'
    '  <rect width="100%" height="100%" fill="#ffffff" />\n'
)
_SVG_FOOTER = "</svg>\n"


def _degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def _color_tokens(data: str) -> list[str]:
    """Return the comma-separated fields of ``data`` after the leading one."""
    tokens = [token for token in data.split(",") if token]
    return tokens[1:]


def _point(angle: float) -> tuple[float, float]:
    radians = _degrees_to_radians(angle)
    return CENTER_X + RADIUS * math.cos(radians), CENTER_Y + RADIUS * math.sin(radians)


def pie_chart_svg(data: str) -> str:
    """Build an SVG pie chart with one equal slice per colour in ``data``.

    ``data`` is a comma-separated list whose first field (such as
    ``couleurs: 3``) is a label and whose other fields are fill colours.
    """
    slice_angle = 360.0 / NUM_COLORS
    parts = [_SVG_HEADER]
    start_angle = START_ANGLE
    for fill in _color_tokens(data):
        end_angle = start_angle + slice_angle
        x1, y1 = _point(start_angle)
        x2, y2 = _point(end_angle)
        parts.append(
            f'  <path d="M{x1:.2f},{y1:.2f} A{RADIUS:.2f},{RADIUS:.2f} 0 0,1 '
            f'{x2:.2f},{y2:.2f} L{CENTER_X:.2f},{CENTER_Y:.2f} Z" fill="{fill}" />\n'
        )
        start_angle = end_angle
    parts.append(_SVG_FOOTER)
    return "".join(parts)


def write_pie_chart(data: str, path: str | PathLike[str] = SVG_FILE_PATH) -> Path:
    """Write the pie chart for ``data`` to ``path`` and return the path."""
    target = Path(path)
    target.write_text(pie_chart_svg(data), encoding="utf-8")
    return target


def open_in_browser(
    path: str | PathLike[str] = SVG_FILE_PATH, browser: str = DEFAULT_BROWSER
) -> bool:
    """Open ``path`` with ``browser``; return whether the browser succeeded."""
    try:
        result = subprocess.run([browser, str(path)], check=False)
    except OSError:
        succeeded = False
    else:
        succeeded = result.returncode == 0
    if succeeded:
        print(f"SVG file opened in {browser}.")
    else:
        print("Failed to open the SVG file.")
    return succeeded