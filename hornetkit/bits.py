"""Bit-packed boolean matrices and generic matrices with power-of-two row strides."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from .numeric import ceil_div, ceil_log2

_WORD_BITS = 32
_WORD_MASK = 0xFFFFFFFF


def _check_index(index: int, length: int, what: str) -> int:
    if index < 0:
        index += length
    if not 0 <= index < length:
        raise IndexError(f"{what} index out of range (size {length})")
    return index


class BitRef:
    """A reference to a single bit inside a list of 32-bit words."""

    __slots__ = ("_words", "_index", "_mask")

    def __init__(self, words: list[int], index: int, mask: int) -> None:
        self._words = words
        self._index = index
        self._mask = mask

    def set(self, value: bool) -> BitRef:
        """Set the referenced bit to ``value`` and return this reference."""
        if value:
            self._words[self._index] |= self._mask
        else:
            self._words[self._index] &= ~self._mask & _WORD_MASK
        return self

    def __bool__(self) -> bool:
        return bool(self._words[self._index] & self._mask)

    def __repr__(self) -> str:
        return f"BitRef({bool(self)})"


class BitRow:
    """A mutable view of one row of a :class:`BitMatrix`."""

    __slots__ = ("_words", "_offset", "_length")

    def __init__(self, words: list[int], offset: int, length: int) -> None:
        self._words = words
        self._offset = offset
        self._length = length

    def __getitem__(self, index: int) -> BitRef:
        index = _check_index(index, self._length, "column")
        return BitRef(
            self._words,
            self._offset + index // _WORD_BITS,
            1 << (index % _WORD_BITS),
        )

    def __setitem__(self, index: int, value: bool) -> None:
        self[index].set(value)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[bool]:
        return (bool(self[index]) for index in range(self._length))


class BitMatrix:
    """A boolean matrix storing 32 bits per word, each row padded to a power of two words."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0:
            raise ValueError(f"rows must be non-negative, got {rows}")
        if cols <= 0:
            raise ValueError(f"cols must be positive, got {cols}")
        self._rows = rows
        self._cols = cols
        self._shift = ceil_log2(ceil_div(cols, _WORD_BITS))
        self._words = [0] * (rows << self._shift)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def __len__(self) -> int:
        return self._rows

    def __getitem__(self, row_index: int) -> BitRow:
        row_index = _check_index(row_index, self._rows, "row")
        return BitRow(self._words, row_index << self._shift, self._cols)

    def __iter__(self) -> Iterator[BitRow]:
        return (self[index] for index in range(self._rows))

    def copy(self) -> BitMatrix:
        """Return an independent copy of this matrix."""
        duplicate = BitMatrix(self._rows, self._cols)
        duplicate._words = list(self._words)
        return duplicate

    def reset(self) -> None:
        """Clear every bit."""
        self._words[:] = [0] * len(self._words)

    def row_reset(self, row_index: int) -> None:
        """Clear every bit of one row."""
        row_index = _check_index(row_index, self._rows, "row")
        start = row_index << self._shift
        end = (row_index + 1) << self._shift
        self._words[start:end] = [0] * (end - start)

    def nnz(self) -> int:
        """Return the number of set bits."""
        return sum(word.bit_count() for word in self._words)

    def format(self, title: str = "") -> str:
        """Return the matrix as text: a header, one line per row and the bit count."""
        lines = [f"{title}  ({self._rows} x {self._cols})\n\n"]
        for row in self:
            lines.append("".join("1 " if bit else "0 " for bit in row))
            lines.append("\n")
        lines.append(f"\nnnz: {self.nnz()}\n\n")
        return "".join(lines)

    def __repr__(self) -> str:
        return f"BitMatrix(rows={self._rows}, cols={self._cols}, nnz={self.nnz()})"


class _MatrixRow:
    """A mutable view of one row of a :class:`Matrix`."""

    __slots__ = ("_storage", "_offset", "_length")

    def __init__(self, storage: list[Any], offset: int, length: int) -> None:
        self._storage = storage
        self._offset = offset
        self._length = length

    def __getitem__(self, index: int) -> Any:
        index = _check_index(index, self._length, "column")
        return self._storage[self._offset + index]

    def __setitem__(self, index: int, value: Any) -> None:
        index = _check_index(index, self._length, "column")
        self._storage[self._offset + index] = value

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        return iter(self._storage[self._offset : self._offset + self._length])


class Matrix:
    """A dense matrix whose rows start at power-of-two offsets in one flat list."""

    def __init__(self, rows: int, cols: int, fill: Any = 0) -> None:
        if rows < 0:
            raise ValueError(f"rows must be non-negative, got {rows}")
        if cols <= 0:
            raise ValueError(f"cols must be positive, got {cols}")
        self._rows = rows
        self._cols = cols
        self._shift = ceil_log2(cols)
        self._storage = [fill] * (rows << self._shift)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def __len__(self) -> int:
        return self._rows

    def __getitem__(self, row_index: int) -> _MatrixRow:
        row_index = _check_index(row_index, self._rows, "row")
        return _MatrixRow(self._storage, row_index << self._shift, self._cols)

    def __iter__(self) -> Iterator[_MatrixRow]:
        return (self[index] for index in range(self._rows))

    def copy(self) -> Matrix:
        """Return an independent copy of this matrix."""
        duplicate = Matrix(self._rows, self._cols)
        duplicate._storage = list(self._storage)
        return duplicate

    def format(self) -> str:
        """Return the matrix as text, each entry followed by a space, then a blank line."""
        lines = ["".join(f"{value} " for value in row) + "\n" for row in self]
        lines.append("\n")
        return "".join(lines)

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols})"