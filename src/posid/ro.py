from __future__ import annotations

from hashlib import sha256


def path_seed(version: int, store: int, lower: str, upper: str) -> bytes:
    """Injective seed for one allocation.

    We encode as: b"v=" + version + b"|s=" + store + b"|lo=" + lower + b"|hi=" + upper.
    Identifier text never contains "|", so the fields cannot run together.
    """
    return (
        b"v=" + str(version).encode("utf-8")
        + b"|s=" + str(store).encode("utf-8")
        + b"|lo=" + lower.encode("utf-8")
        + b"|hi=" + upper.encode("utf-8")
    )


def ro_default(seed: bytes, bound: int) -> int:
    """Deterministic stand-in for a random choice: {0,1}* -> {0,...,bound}."""
    h = int.from_bytes(sha256(seed).digest(), "big")
    return h % (bound + 1)
