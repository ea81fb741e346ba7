"""Ordered position identifiers for replicated lists."""

from .codec import decode_components, encode_components
from .core import (
    DEFAULT_PARAMS,
    EMPTY,
    Identifier,
    Params,
    Triplet,
    create_duplex_id,
    create_triplex_id,
    create_triplex_ids,
    duplex_fields,
    id_cmp,
    triplex_triplets,
)
from .errors import ComponentRangeError, InvalidBoundsError
from .interfaces import Decode, Encode, PathOracle

__all__ = [
    "ComponentRangeError",
    "DEFAULT_PARAMS",
    "Decode",
    "EMPTY",
    "Encode",
    "Identifier",
    "InvalidBoundsError",
    "Params",
    "PathOracle",
    "Triplet",
    "create_duplex_id",
    "create_triplex_id",
    "create_triplex_ids",
    "decode_components",
    "duplex_fields",
    "encode_components",
    "id_cmp",
    "triplex_triplets",
]
