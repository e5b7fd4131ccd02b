"""Reading BMP files and counting the colours they contain."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from typing import ClassVar

from .colors import BitDepth, Color, ColorCounter, count_colors

BMP_SIGNATURE = 0x4D42


class BmpError(ValueError):
    """Raised when a file is not a BMP image this module can read."""


@dataclass(frozen=True)
class BmpHeader:
    """The 14-byte BMP file header."""

    type: int
    file_size: int
    reserved1: int
    reserved2: int
    offset: int

    FORMAT: ClassVar[struct.Struct] = struct.Struct("<HIHHI")

    @classmethod
    def from_bytes(cls, data: bytes) -> "BmpHeader":
        """Parse the header from the start of ``data``."""
        if len(data) < cls.FORMAT.size:
            raise BmpError("truncated BMP file header")
        return cls(*cls.FORMAT.unpack_from(data))


@dataclass(frozen=True)
class BmpInfoHeader:
    """The 40-byte BMP information header."""

    info_header_size: int
    width: int
    height: int
    planes: int
    bit_count: int
    compression: int
    image_size: int
    x_pixels_per_meter: int
    y_pixels_per_meter: int
    colors_used: int
    colors_important: int

    FORMAT: ClassVar[struct.Struct] = struct.Struct("<IIIHHIIIIII")

    @classmethod
    def from_bytes(cls, data: bytes) -> "BmpInfoHeader":
        """Parse the information header from the start of ``data``."""
        if len(data) < cls.FORMAT.size:
            raise BmpError("truncated BMP information header")
        return cls(*cls.FORMAT.unpack_from(data))


_DEPTHS = {24: BitDepth.BITS24, 32: BitDepth.BITS32}


def read_pixels(path: str | PathLike[str]) -> tuple[BitDepth, list[Color]]:
    """Read the pixel data of a 24- or 32-bit BMP file.

    Pixels are stored as blue, green, red and, for 32 bits, alpha bytes.
    Pixel data shorter than the declared image size is padded with zeros.
    """
    with open(path, "rb") as stream:
        content = stream.read()

    header = BmpHeader.from_bytes(content)
    if header.type != BMP_SIGNATURE:
        raise BmpError("not a BMP image")
    info = BmpInfoHeader.from_bytes(content[BmpHeader.FORMAT.size:])

    depth = _DEPTHS.get(info.bit_count)
    if depth is None:
        raise BmpError(f"unsupported bit count: {info.bit_count}")

    raw = content[header.offset:header.offset + info.image_size]
    raw = raw.ljust(info.image_size, b"\x00")

    if depth is BitDepth.BITS32:
        colors = [
            Color(red, green, blue, alpha)
            for blue, green, red, alpha in struct.iter_unpack("4B", raw[: len(raw) // 4 * 4])
        ]
    else:
        colors = [
            Color(red, green, blue)
            for blue, green, red in struct.iter_unpack("3B", raw[: len(raw) // 3 * 3])
        ]
    return depth, colors


def analyze_bmp_image(path: str | PathLike[str]) -> ColorCounter:
    """Count the distinct colours of a BMP image, least frequent first."""
    depth, colors = read_pixels(path)
    counter = count_colors(colors, depth)
    counter.sort()
    return counter