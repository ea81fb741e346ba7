"""Interface definitions for identifier components."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, Tuple


class Encode(Protocol):
    """Encoding interface: non-negative int components -> identifier text."""

    def __call__(self, components: Sequence[int]) -> str:
        ...


class Decode(Protocol):
    """Decoding interface: identifier text -> components, or None as ⊥."""

    def __call__(self, text: str) -> Optional[Tuple[int, ...]]:
        ...


class PathOracle(Protocol):
    """Deterministic choice interface: (seed, bound) -> {0,...,bound}."""

    def __call__(self, seed: bytes, bound: int) -> int:
        ...
