from __future__ import annotations

from posid.codec import decode_components, encode_components
from posid.core import EMPTY, Params, create_triplex_id, triplex_triplets
from posid.ro import path_seed, ro_default


def lowest(seed: bytes, bound: int) -> int:
    # Toy oracle: always the first slot of the bucket.
    return 0


def highest(seed: bytes, bound: int) -> int:
    return bound


def test_custom_params_with_lowest_oracle():
    params = Params(Encode=encode_components, Decode=decode_components, RO=lowest)

    first = create_triplex_id(0, 1, EMPTY, EMPTY, params)
    assert [t.path for t in triplex_triplets(first, params)] == [1]

    second = create_triplex_id(1, 1, first, EMPTY, params)
    assert [t.path for t in triplex_triplets(second, params)] == [2]

    # Paths 1 and 2 are adjacent, so the id must grow a triplet.
    middle = create_triplex_id(2, 1, first, second, params)
    assert first < middle < second
    assert [t.path for t in triplex_triplets(middle, params)] == [1, 1]


def test_custom_params_with_highest_oracle_stays_in_range():
    params = Params(Encode=encode_components, Decode=decode_components, RO=highest, max_span=16)

    lower = create_triplex_id(0, 1, EMPTY, EMPTY, params)
    assert [t.path for t in triplex_triplets(lower, params)] == [1 + 3]

    upper = create_triplex_id(1, 1, lower, EMPTY, params)
    assert [t.path for t in triplex_triplets(upper, params)] == [5 + 3]

    middle = create_triplex_id(2, 1, lower, upper, params)
    assert [t.path for t in triplex_triplets(middle, params)] == [5 + 1]
    assert lower < middle < upper


def test_ro_default_is_deterministic_and_bounded():
    seed = path_seed(3, 4, "", "")
    assert ro_default(seed, 1000) == ro_default(seed, 1000)
    assert 0 <= ro_default(seed, 1000) <= 1000
    assert ro_default(seed, 0) == 0


def test_path_seed_distinguishes_fields():
    assert path_seed(1, 2, "a", "b") != path_seed(1, 2, "b", "a")
    assert path_seed(1, 23, "", "") != path_seed(12, 3, "", "")
