from __future__ import annotations

import pytest

from posid.codec import (
    CODE_ORIGIN,
    COMPONENT_LIMIT,
    DIGIT_BASE,
    decode_components,
    encode_component,
    encode_components,
)
from posid.errors import ComponentRangeError

SAMPLES = [0, 1, 2, 255, 0x7FFF, 0x8000, 0x8001, 2**30 - 1, 2**30, 2**45 + 3, 2**53, COMPONENT_LIMIT - 1]


def test_zero_is_a_single_width_code_point():
    assert encode_component(0) == chr(CODE_ORIGIN)
    assert decode_components(chr(CODE_ORIGIN)) == (0,)


def test_decode_inverts_encode():
    for value in SAMPLES:
        assert decode_components(encode_component(value)) == (value,)

    components = [3, 0, 2**40, 7, DIGIT_BASE]
    assert decode_components(encode_components(components)) == tuple(components)
    assert decode_components("") == ()


def test_component_order_is_preserved():
    encoded = [encode_component(v) for v in SAMPLES]
    assert encoded == sorted(encoded)
    assert len(set(encoded)) == len(encoded)


def test_sequence_order_is_lexicographic():
    assert encode_components([1]) < encode_components([1, 0])
    assert encode_components([1, 2**40]) < encode_components([2, 0])
    assert encode_components([5, 1, 9]) < encode_components([5, 2, 0])
    assert encode_components([]) < encode_components([0])


def test_code_points_avoid_surrogates():
    text = encode_components(SAMPLES)
    for ch in text:
        assert CODE_ORIGIN <= ord(ch) < CODE_ORIGIN + DIGIT_BASE
        assert not 0xD800 <= ord(ch) <= 0xDFFF

    assert text.encode("utf-8").decode("utf-8") == text
    assert text.encode("utf-16").decode("utf-16") == text


@pytest.mark.parametrize("bad", [-1, COMPONENT_LIMIT, True, 1.5, "3"])
def test_out_of_range_components_are_rejected(bad):
    with pytest.raises(ComponentRangeError) as info:
        encode_components([1, bad])
    assert info.value.value == bad
    assert isinstance(info.value, ValueError)


def test_decode_rejects_foreign_text():
    assert decode_components("hello") is None
    # Truncated digit run.
    assert decode_components(encode_component(2**20)[:-1]) is None
    # Non-canonical leading zero digit.
    assert decode_components(chr(CODE_ORIGIN + 1) + chr(CODE_ORIGIN)) is None
    # Width beyond the supported magnitude.
    assert decode_components(chr(CODE_ORIGIN + 17) + chr(CODE_ORIGIN + 1) * 17) is None
    # Digit outside the digit range.
    assert decode_components(chr(CODE_ORIGIN + 1) + chr(CODE_ORIGIN + DIGIT_BASE)) is None
