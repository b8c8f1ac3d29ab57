"""Digit extraction and padding helpers.

Every validator in :mod:`brdoc.documents` starts from the digits of the
candidate text, ignoring punctuation, spaces and letters. Formats whose
issuing authority drops leading zeros (RENAVAM, GS1 barcodes) are then
left-padded to their canonical length.

Example:
    >>> extract_digits("085.668.830-47", 11)
    [0, 8, 5, 6, 6, 8, 8, 3, 0, 4, 7]
    >>> digits = [7, 8, 9]
    >>> pad_left(digits, 5)
    >>> digits
    [0, 0, 7, 8, 9]
"""

from typing import List

ASCII_DIGITS = "0123456789"


def extract_digits(text: str, max_digits: int) -> List[int]:
    """Return the first ``max_digits`` ASCII digits found in ``text``.

    Characters that are not ASCII decimal digits are skipped. When the text
    holds fewer digits than requested, all of them are returned, so callers
    must check the length before indexing.

    Args:
        text: Candidate text in any format (e.g. "14.572.457/0001-85").
        max_digits: Maximum number of digits to collect.

    Returns:
        Digits in the order they appear in ``text``.

    Example:
        >>> extract_digits("1.23/001-0", 20)
        [1, 2, 3, 0, 0, 1, 0]
        >>> extract_digits("no digits here", 5)
        []
    """
    digits: List[int] = []
    for char in text:
        if len(digits) >= max_digits:
            break
        if char in ASCII_DIGITS:
            digits.append(int(char))
    return digits


def pad_left(digits: List[int], length: int) -> None:
    """Prefix ``digits`` with zeros in place until it has ``length`` items.

    Lists already at or above ``length`` are left untouched.

    Args:
        digits: Digit list to pad (modified in place).
        length: Target length.

    Example:
        >>> value = [7, 5, 2]
        >>> pad_left(value, 2)
        >>> value
        [7, 5, 2]
    """
    missing = length - len(digits)
    if missing > 0:
        digits[:0] = [0] * missing
