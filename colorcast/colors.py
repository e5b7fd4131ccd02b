"""Colour values, distinct-colour counting and plain-text listings."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


class BitDepth(Enum):
    """Number of bits used to store one pixel."""

    BITS24 = 24
    BITS32 = 32


@dataclass(frozen=True)
class Color:
    """An RGB colour, with an alpha channel when it comes from 32-bit data."""

    red: int
    green: int
    blue: int
    alpha: int | None = None

    def hex(self) -> str:
        """Return the colour as ``#rrggbb``."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def key(self) -> str:
        """Return the colon-separated key that identifies the colour."""
        parts = [self.red, self.green, self.blue]
        if self.alpha is not None:
            parts.append(self.alpha)
        return ":".join(str(part) for part in parts)


@dataclass
class ColorCount:
    """A distinct colour and how many times it occurs."""

    color: Color
    count: int = 1


@dataclass
class ColorCounter:
    """Distinct colours of an image together with their occurrence counts."""

    bit_depth: BitDepth
    counts: list[ColorCount] = field(default_factory=list)

    @property
    def size(self) -> int:
        """Number of distinct colours."""
        return len(self.counts)

    def sort(self) -> None:
        """Sort the counts in ascending order of occurrence."""
        self.counts.sort(key=lambda entry: entry.count)


def _normalise(color: Color, bit_depth: BitDepth) -> Color:
    if bit_depth is BitDepth.BITS24:
        return dataclasses.replace(color, alpha=None) if color.alpha is not None else color
    if color.alpha is None:
        return dataclasses.replace(color, alpha=0)
    return color


def _check_depth(bit_depth: object) -> BitDepth:
    if not isinstance(bit_depth, BitDepth):
        raise ValueError(f"unknown bit count: {bit_depth!r}")
    return bit_depth


def count_colors(colors: Iterable[Color], bit_depth: BitDepth) -> ColorCounter:
    """Count distinct colours, keeping them in order of first appearance."""
    depth = _check_depth(bit_depth)
    seen: dict[str, ColorCount] = {}
    for color in colors:
        color = _normalise(color, depth)
        entry = seen.get(color.key())
        if entry is None:
            seen[color.key()] = ColorCount(color)
        else:
            entry.count += 1
    return ColorCounter(depth, list(seen.values()))


def format_colors(colors: Iterable[Color], bit_depth: BitDepth) -> str:
    """Render colours one per line as hexadecimal channel values."""
    depth = _check_depth(bit_depth)
    lines = []
    for color in colors:
        if depth is BitDepth.BITS24:
            lines.append(f"{color.red:5x} {color.green:5x} {color.blue:5x}\n")
        else:
            alpha = color.alpha or 0
            lines.append(f"{color.red:5x} {color.green:5x} {color.blue:5x} {alpha:5x}\n")
    return "".join(lines)


def format_counts(counter: ColorCounter) -> str:
    """Render each distinct colour with its count, one per line."""
    lines = []
    for entry in counter.counts:
        color = entry.color
        channels = f"{color.red:5x} {color.green:5x} {color.blue:5x}"
        if counter.bit_depth is BitDepth.BITS32:
            channels += f" {color.alpha or 0:5x}"
        lines.append(f"{channels}: {entry.count:10d}\n")
    return "".join(lines)