"""Integer helpers: rounding divisions, logarithms, combinatorics and size checks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate
from math import factorial

_DIGITS = frozenset("0123456789")


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _require_positive(name: str, value: int) -> None:
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def ceil_div(n: int, div: int) -> int:
    """Return ``n / div`` rounded up, for a non-negative ``n``."""
    _require_non_negative("n", n)
    if div == 0:
        raise ZeroDivisionError("division by zero in integer arithmetic")
    _require_non_negative("div", div)
    return 0 if n == 0 else 1 + (n - 1) // div


def round_div(n: int, div: int) -> int:
    """Return ``n / div`` rounded to the nearest integer (halves round up)."""
    _require_non_negative("n", n)
    if div == 0:
        raise ZeroDivisionError("division by zero in integer arithmetic")
    _require_non_negative("div", div)
    return (n + div // 2) // div


def lower_approx(n: int, mul: int) -> int:
    """Return the largest multiple of ``mul`` not greater than ``n``."""
    _require_non_negative("n", n)
    if mul == 0:
        raise ZeroDivisionError("division by zero in integer arithmetic")
    _require_non_negative("mul", mul)
    return (n // mul) * mul


def upper_approx(n: int, mul: int) -> int:
    """Return the smallest multiple of ``mul`` not less than ``n``."""
    return ceil_div(n, mul) * mul


def power(n: int, exp: int) -> int:
    """Return ``n`` raised to the non-negative integer ``exp``."""
    _require_non_negative("exp", exp)
    return n**exp


def floor_log(n: int, base: int) -> int:
    """Return the floor of the base-``base`` logarithm of a positive ``n``."""
    _require_positive("n", n)
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    result = 0
    while n >= base:
        n //= base
        result += 1
    return result


def floor_log2(n: int) -> int:
    """Return the floor of the base-2 logarithm of a positive ``n``."""
    return floor_log(n, 2)


def _roundup_pow2(n: int) -> int:
    return 1 << (n - 1).bit_length()


def ceil_log2(n: int) -> int:
    """Return the ceiling of the base-2 logarithm of a positive ``n``."""
    _require_positive("n", n)
    return floor_log2(_roundup_pow2(n))


def ceil_log(n: int, base: int) -> int:
    """Return the ceiling of the base-``base`` logarithm of a positive ``n``."""
    log = floor_log(n, base)
    return log if base**log == n else log + 1


def product_sequence(low: int, high: int) -> int:
    """Return the product of all integers from ``low`` to ``high`` inclusive."""
    if low > high:
        raise ValueError(f"empty range: low={low} > high={high}")
    result = 1
    for value in range(low, high + 1):
        result *= value
    return result


def binomial_coeff(n: int, k: int) -> int:
    """Return the binomial coefficient ``n`` choose ``k``."""
    if not 0 <= k <= n:
        raise ValueError(f"binomial coefficient needs 0 <= k <= n, got n={n}, k={k}")
    low, high = min(k, n - k), max(k, n - k)
    if high == n:
        return 1
    return product_sequence(high + 1, n) // factorial(low)


def geometric_series(n: int, high: int) -> int:
    """Return ``1 + n + n**2 + ... + n**high`` for ``n`` other than 1."""
    _require_non_negative("high", high)
    if n == 1:
        raise ValueError("geometric series ratio must differ from 1")
    return (n ** (high + 1) - 1) // (n - 1)


def inclusive_prefix_sum(values: Iterable[int]) -> list[int]:
    """Return the running totals of ``values``."""
    return list(accumulate(values))


def exclusive_prefix_sum(values: Iterable[int]) -> list[int]:
    """Return the running totals of ``values`` starting at 0, one longer than the input."""
    return list(accumulate(values, initial=0))


def is_integer(text: str) -> bool:
    """Return True if ``text`` holds decimal digits only (an empty string counts)."""
    return all(char in _DIGITS for char in text)


def is_aligned(address: int, byte_size: int) -> bool:
    """Return True if ``address`` is a multiple of ``byte_size``."""
    _require_positive("byte_size", byte_size)
    return address % byte_size == 0


def max_size(sizes: Iterable[int]) -> int:
    """Return the largest of the given type sizes."""
    sizes = list(sizes)
    if not sizes:
        raise ValueError("at least one size is required")
    return max(sizes)


def first_n_size_sum(n: int, sizes: Sequence[int]) -> int:
    """Return the sum of the first ``n`` type sizes."""
    _require_non_negative("n", n)
    if n > len(sizes):
        raise ValueError(f"index {n} exceeds the number of sizes ({len(sizes)})")
    return sum(sizes[:n])


def is_vectorizable(sizes: Sequence[int]) -> bool:
    """Return True if up to 4 equally sized types fit together in 16 bytes."""
    if not sizes:
        raise ValueError("at least one size is required")
    same_size = len(set(sizes)) == 1
    return same_size and sum(sizes) <= 16 and len(sizes) <= 4