from __future__ import annotations

import logging
from dataclasses import dataclass
from math import isqrt
from typing import List, Tuple

from .codec import decode_components, encode_components
from .errors import InvalidBoundsError
from .interfaces import Decode, Encode, PathOracle
from .ro import path_seed, ro_default

logger = logging.getLogger(__name__)

MAX_SPAN = 0xFFFFFFFFFFFF


@dataclass(frozen=True, order=True)
class Identifier:
    """Opaque list-position key, ordered by code point.

    Only `str(identifier)` is meant to leave the library (for persistence);
    rebuild with `Identifier(text)`. The empty identifier is the minimum and
    stands for "no bound".
    """

    text: str

    def __str__(self) -> str:
        return self.text

    def __bool__(self) -> bool:
        return bool(self.text)


EMPTY = Identifier("")


@dataclass(frozen=True)
class Triplet:
    path: int
    version: int
    store: int


PAD = Triplet(path=0, version=0, store=0)


@dataclass(frozen=True)
class Params:
    Encode: Encode
    Decode: Decode
    RO: PathOracle  # RO(seed, bound) -> {0,...,bound}
    max_span: int = MAX_SPAN


DEFAULT_PARAMS = Params(Encode=encode_components, Decode=decode_components, RO=ro_default)


def id_cmp(a: Identifier, b: Identifier) -> int:
    """Three-way compare: -1 if a < b, 1 if a > b, else 0."""
    return (a.text > b.text) - (a.text < b.text)


def create_duplex_id(version: int, store: int, params: Params = DEFAULT_PARAMS) -> Identifier:
    """Append-style identifier: <version><store>."""
    return Identifier(params.Encode((version, store)))


def duplex_fields(identifier: Identifier, params: Params = DEFAULT_PARAMS) -> Tuple[int, int]:
    """Return (version, store) of a duplex identifier."""
    decoded = params.Decode(identifier.text)
    if decoded is None or len(decoded) != 2:
        raise InvalidBoundsError(f"not a duplex identifier: {identifier.text!r}")
    version, store = decoded
    return version, store


def triplex_triplets(identifier: Identifier, params: Params = DEFAULT_PARAMS) -> Tuple[Triplet, ...]:
    """Return the path triplets of a triplex identifier (empty for EMPTY)."""
    decoded = params.Decode(identifier.text)
    if decoded is None or len(decoded) % 3 != 0:
        raise InvalidBoundsError(f"not a triplex identifier: {identifier.text!r}")
    return tuple(
        Triplet(path=decoded[k], version=decoded[k + 1], store=decoded[k + 2])
        for k in range(0, len(decoded), 3)
    )


def _encode_triplets(params: Params, triplets: List[Triplet]) -> Identifier:
    components: List[int] = []
    for t in triplets:
        components.extend((t.path, t.version, t.store))
    return Identifier(params.Encode(components))


def _leading_bucket(params: Params, seed: bytes, lo: int, hi: int) -> int:
    """Pick a path in the leading bucket of the inclusive range [lo, hi]."""
    return lo + params.RO(seed, isqrt(hi - lo))


def create_triplex_id(
    version: int,
    store: int,
    lower: Identifier = EMPTY,
    upper: Identifier = EMPTY,
    params: Params = DEFAULT_PARAMS,
) -> Identifier:
    """Create an identifier strictly between `lower` and `upper`.

    Either bound may be EMPTY, meaning unbounded on that side.

    Format: (<path><version><store>) * N, N >= 1. The shared triplet prefix
    of the bounds is copied; at the first divergence a fresh triplet
    (path, version, store) is placed in the gap between the two paths. When
    the paths are adjacent, the lower triplet is copied and the id grows by
    one more triplet instead, so there is always room.
    """
    lower_t = triplex_triplets(lower, params)
    upper_t = triplex_triplets(upper, params)
    if upper and lower >= upper:
        logger.debug("rejected bounds lower=%r upper=%r", lower.text, upper.text)
        raise InvalidBoundsError(
            "lower bound must sort before upper bound",
            lower=lower.text,
            upper=upper.text,
        )

    seed = path_seed(version, store, lower.text, upper.text)
    out: List[Triplet] = []
    bounded = bool(upper_t)

    for i in range(max(len(lower_t), len(upper_t))):
        lo = lower_t[i] if i < len(lower_t) else PAD

        if not bounded:
            path = _leading_bucket(params, seed, lo.path + 1, lo.path + params.max_span)
            out.append(Triplet(path=path, version=version, store=store))
            return _encode_triplets(params, out)

        hi = upper_t[i]

        if lo == hi:
            out.append(lo)
            continue

        if hi.path - lo.path > 1:
            path = _leading_bucket(params, seed, lo.path + 1, hi.path - 1)
            out.append(Triplet(path=path, version=version, store=store))
            return _encode_triplets(params, out)

        # Adjacent paths: everything after a copy of `lo` sorts below `hi`.
        out.append(lo)
        bounded = False

    if bounded:
        raise InvalidBoundsError(
            "no identifier exists between the bounds",
            lower=lower.text,
            upper=upper.text,
        )

    path = _leading_bucket(params, seed, PAD.path + 1, PAD.path + params.max_span)
    out.append(Triplet(path=path, version=version, store=store))
    if len(out) > 1:
        logger.debug(
            "triplex path extended to depth %d (version=%d, store=%d)",
            len(out),
            version,
            store,
        )
    return _encode_triplets(params, out)


def create_triplex_ids(
    n: int,
    version: int,
    store: int,
    lower: Identifier = EMPTY,
    upper: Identifier = EMPTY,
    params: Params = DEFAULT_PARAMS,
) -> List[Identifier]:
    """Create `n` ascending identifiers between the (exclusive) boundaries."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    ids: List[Identifier] = []
    while len(ids) < n:
        identifier = create_triplex_id(version, store, lower, upper, params)
        ids.append(identifier)
        lower = identifier
    return ids
