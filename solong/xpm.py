"""Reading XPM pixmaps into plain pixel grids."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .colors import text_to_rgb

TRANSPARENT = 0xFF000000

_ATOI = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or is malformed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image: ``pixels[y][x]`` holds a 0xRRGGBB value."""

    width: int
    height: int
    pixels: tuple

    def pixel(self, x, y):
        """Return the colour of column ``x`` in row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return self.pixels[y][x]

    def to_bytes(self, bytes_per_pixel, big_endian):
        """Pack the pixels row by row, ``bytes_per_pixel`` bytes each."""
        if bytes_per_pixel < 1:
            raise ValueError("bytes_per_pixel must be at least 1")
        mask = (1 << (8 * bytes_per_pixel)) - 1
        order = "big" if big_endian else "little"
        return b"".join(
            (_as_int32(value) & mask).to_bytes(bytes_per_pixel, order)
            for row in self.pixels
            for value in row
        )


def _as_int32(value):
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _atoi(text):
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def split_words(text):
    """Split ``text`` on spaces and tabs, dropping empty words."""
    return text.replace("\t", " ").split()


def _find_unquoted(text, token):
    """Index of the first ``token`` outside double quotes, or -1."""
    quoted = False
    for pos in range(len(text) - len(token) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, pos):
            return pos
    return -1


def strip_comments(text):
    """Blank out ``/* */`` and ``//`` comments lying outside quotes.

    Comments are replaced by spaces, so the length of the text is kept.
    """
    while (begin := _find_unquoted(text, "/*")) >= 0:
        end = text.find("*/", begin + 2)
        stop = len(text) if end < 0 else end + 2
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := _find_unquoted(text, "//")) >= 0:
        end = text.find("\n", begin + 2)
        stop = len(text) if end < 0 else end + 1
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def quoted_strings(text):
    """Yield the contents of each pair of double quotes, in order."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start < 0:
            return
        end = text.find('"', start + 1)
        if end < 0:
            return
        yield text[start + 1 : end]
        pos = end + 1


def _next_line(lines):
    try:
        return next(lines)
    except StopIteration:
        raise XpmError("XPM data ends too early") from None


def _read_header(line):
    words = split_words(line)
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError("XPM header values must be positive")
    return values


def _read_colors(lines, count, cpp):
    colors = {}
    for _ in range(count):
        line = _next_line(lines)
        if len(line) < cpp:
            raise XpmError("XPM colour line is shorter than its key")
        key = line[:cpp]
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError("XPM colour line has no 'c' entry") from None
        if index >= len(words):
            raise XpmError("XPM colour line has no colour after 'c'")
        suffix = words[index + 1] if index + 1 < len(words) else None
        value = text_to_rgb(words[index], suffix)
        if cpp <= 2:
            colors[key] = value
        else:
            colors.setdefault(key, value)
    return colors


def parse_xpm_lines(lines):
    """Decode XPM from its strings: header, colour lines, then pixel rows."""
    lines = iter(lines)
    width, height, ncolors, cpp = _read_header(_next_line(lines))
    colors = _read_colors(lines, ncolors, cpp)
    rows = []
    for _ in range(height):
        line = _next_line(lines)
        if len(line) < width * cpp:
            raise XpmError("XPM pixel row is too short")
        row = []
        for x in range(width):
            value = colors.get(line[x * cpp : (x + 1) * cpp], 0)
            row.append(TRANSPARENT if value == -1 else value)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def parse_xpm(text):
    """Decode the text of an XPM file."""
    return parse_xpm_lines(quoted_strings(strip_comments(text)))


def load_xpm(path):
    """Read and decode the XPM file at ``path``."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read XPM file {path!s}") from exc
    return parse_xpm(data.decode("latin-1"))