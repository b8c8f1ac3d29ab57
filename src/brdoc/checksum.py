"""Weighted-sum checksum engine and modulo-11 transforms.

Most Brazilian document numbers end in one or two check digits computed the
same way:

1. Multiply each body digit by the multiplier at the same position
2. Sum the products
3. Reduce the sum with a format-specific transform (usually modulo 11)

Only the multiplier table, the body window and the transform change between
formats, so :func:`calculate_check_digit` takes the transform as a parameter
and the per-format code in :mod:`brdoc.documents` stays declarative.

Example:
    >>> calculate_check_digit([9, 5, 8, 7], [2, 3, 4, 5], lambda x: x % 10)
    0
    >>> mod_11(890)
    0
"""

from typing import Callable, Sequence

Transform = Callable[[int], int]


def mod_11(value: int) -> int:
    """Remainder of ``value`` by 11, with 10 mapped to 0.

    Example:
        >>> mod_11(810)
        7
        >>> mod_11(880)  # 880 % 11 == 0
        0
        >>> mod_11(890)  # 890 % 11 == 10
        0
    """
    remainder = value % 11
    return 0 if remainder == 10 else remainder


def eleven_minus_mod11(value: int) -> int:
    """``11 - value % 11``, forced to 0 when the result is above 9.

    Used by RENAVAM, RG and PIS. Remainders 0 and 1 give 11 and 10, which
    cannot be written as a single digit.
    """
    result = 11 - value % 11
    return 0 if result > 9 else result


def times_ten_mod11(value: int) -> int:
    """``mod_11(10 * value)``, the CPF/CNPJ variant of the modulo-11 check."""
    return mod_11(10 * value)


def gs1_complement(value: int) -> int:
    """Distance from ``value`` to the next multiple of ten above it.

    GS1 barcodes (EAN-8/12/13/14, SSCC-18) compute ``(value // 10 + 1) * 10 -
    value``. A sum that is already a multiple of ten yields 10.
    """
    return (value // 10 + 1) * 10 - value


def identity(value: int) -> int:
    """Return the weighted sum unreduced."""
    return value


def calculate_check_digit(
    digits: Sequence[int],
    multipliers: Sequence[int],
    transform: Transform,
) -> int:
    """Compute a check digit from body digits and positional multipliers.

    Args:
        digits: Body digits, left to right.
        multipliers: One multiplier per body digit, paired by position.
        transform: Finishing function applied to the weighted sum.

    Returns:
        ``transform(sum(digits[i] * multipliers[i]))``.

    Raises:
        ValueError: If ``digits`` and ``multipliers`` differ in length. This
            is a broken layout, not an invalid document.

    Example:
        >>> calculate_check_digit([0, 8, 5, 6, 6, 8, 8, 3, 0],
        ...                       [10, 9, 8, 7, 6, 5, 4, 3, 2], times_ten_mod11)
        4
    """
    if len(digits) != len(multipliers):
        raise ValueError(
            f"Expected {len(multipliers)} digits for the multiplier table, "
            f"got {len(digits)}"
        )

    total = sum(digit * multiplier for digit, multiplier in zip(digits, multipliers))
    return transform(total)


def calculate_check_digit_mod11(
    digits: Sequence[int], multipliers: Sequence[int]
) -> int:
    """Shortcut for :func:`calculate_check_digit` with :func:`mod_11`."""
    return calculate_check_digit(digits, multipliers, mod_11)
