"""Text formatting of numbers, arrays, matrices and bit patterns."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def _to_text(value: object) -> str:
    """Render a value the way a default-configured output stream would."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def _round_hundredths(num: float) -> float:
    scaled = abs(num) * 100.0
    rounded = math.floor(scaled + 0.5) / 100.0
    return math.copysign(rounded, num)


def format_number(num: int | float, precision: int = 2) -> str:
    """Return ``num`` with thousands separators.

    Floating-point values are first rounded to two decimals (halves away
    from zero) and then cut to ``precision`` digits after the point.
    Integers never carry a decimal part.
    """
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    if isinstance(num, float):
        text = f"{_round_hundredths(num):f}"
    else:
        text = str(num)
    point = text.find(".")
    integer_end = len(text) if point == -1 else point
    chars = list(text)
    for position in range(integer_end - 3, 0, -3):
        chars.insert(position, ",")
    text = "".join(chars)
    point = text.find(".")
    if point != -1:
        text = text[: point + precision + 1]
    return text


def format_array(values: Iterable[object], title: str = "", sep: str = " ") -> str:
    """Return ``title`` followed by every value, each followed by ``sep``.

    An empty input is shown as ``<empty>``; the text ends with a blank line.
    """
    items = [_to_text(value) for value in values]
    body = "".join(item + sep for item in items) if items else "<empty>"
    return f"{title}{body}\n\n"


def print_array(values: Iterable[object], title: str = "", sep: str = " ") -> None:
    """Write :func:`format_array` output to standard output."""
    print(format_array(values, title, sep), end="")


def format_matrix(
    values: Sequence[object],
    rows: int,
    cols: int,
    ld: int | None = None,
    title: str = "",
    column_major: bool = False,
) -> str:
    """Return a right-aligned table of a matrix stored in a flat sequence.

    ``ld`` is the leading dimension: the stride between rows (row-major) or
    between columns (column-major). It defaults to the tight stride.
    Every column is as wide as its widest entry plus two spaces.
    """
    if rows < 0 or cols < 0:
        raise ValueError(f"matrix shape must be non-negative, got {rows} x {cols}")
    if ld is None:
        ld = rows if column_major else cols

    def cell(i: int, j: int) -> str:
        index = j * ld + i if column_major else i * ld + j
        return _to_text(values[index])

    table = [[cell(i, j) for j in range(cols)] for i in range(rows)]
    widths = [max((len(row[j]) for row in table), default=0) for j in range(cols)]

    lines = []
    if title:
        lines.append(f"{title}\n")
    for row in table:
        lines.append("".join(text.rjust(width + 2) for text, width in zip(row, widths)))
        lines.append("\n")
    lines.append("\n")
    return "".join(lines)


def print_matrix(
    values: Sequence[object],
    rows: int,
    cols: int,
    ld: int | None = None,
    title: str = "",
    column_major: bool = False,
) -> None:
    """Write :func:`format_matrix` output to standard output."""
    print(format_matrix(values, rows, cols, ld, title, column_major), end="")


def format_bits(values: Iterable[int], bit_width: int = 32) -> str:
    """Return the bits of each value, least significant first.

    Each value contributes ``bit_width`` characters followed by a space.
    """
    if bit_width <= 0:
        raise ValueError(f"bit_width must be positive, got {bit_width}")
    groups = []
    for value in values:
        bits = "".join("1" if (value >> bit) & 1 else "0" for bit in range(bit_width))
        groups.append(bits + " ")
    return "".join(groups)