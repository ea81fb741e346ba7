from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .errors import ComponentRangeError

DIGIT_BITS = 15
DIGIT_BASE = 1 << DIGIT_BITS
DIGIT_MASK = DIGIT_BASE - 1
MAX_DIGITS = 16
COMPONENT_LIMIT = 1 << (DIGIT_BITS * MAX_DIGITS)

# Digits and widths map onto U+0100..U+80FF, clear of the surrogate block.
CODE_ORIGIN = 0x0100


def encode_component(value: int) -> str:
    """Order-preserving, prefix-free encoding of one non-negative int.

    Layout: <width><digit>*width, each a single code point CODE_ORIGIN + n.
    Digits are big-endian base 2^15 with no leading zeros, and zero has
    width 0. A wider value is always larger, so comparing code points
    compares the integers.
    """
    if (
        not isinstance(value, int)
        or isinstance(value, bool)
        or value < 0
        or value >= COMPONENT_LIMIT
    ):
        raise ComponentRangeError(value=value, limit=COMPONENT_LIMIT)

    digits: List[str] = []
    while value:
        digits.append(chr(CODE_ORIGIN + (value & DIGIT_MASK)))
        value >>= DIGIT_BITS
    digits.append(chr(CODE_ORIGIN + len(digits)))
    return "".join(reversed(digits))


def encode_components(components: Sequence[int]) -> str:
    """Concatenate component encodings; text order == lexicographic order."""
    return "".join(encode_component(c) for c in components)


def decode_components(text: str) -> Optional[Tuple[int, ...]]:
    """Inverse of encode_components. Returns None as ⊥ on foreign text."""
    out: List[int] = []
    i = 0
    n = len(text)
    while i < n:
        width = ord(text[i]) - CODE_ORIGIN
        if width < 0 or width > MAX_DIGITS or i + 1 + width > n:
            return None
        value = 0
        for j in range(i + 1, i + 1 + width):
            digit = ord(text[j]) - CODE_ORIGIN
            if digit < 0 or digit >= DIGIT_BASE:
                return None
            value = (value << DIGIT_BITS) | digit
        # Canonical form only: a leading zero digit would alias a narrower value.
        if width and ord(text[i + 1]) == CODE_ORIGIN:
            return None
        out.append(value)
        i += 1 + width
    return tuple(out)
