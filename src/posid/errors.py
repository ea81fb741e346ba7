from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class ComponentRangeError(ValueError):
    value: object
    limit: int

    def __str__(self) -> str:
        return (
            f"identifier component out of range: {self.value!r} "
            f"(expected an int with 0 <= value < {self.limit:#x})"
        )


@dataclass(eq=False)
class InvalidBoundsError(ValueError):
    message: str
    lower: str = ""
    upper: str = ""

    def __str__(self) -> str:
        return self.message


__all__ = [
    "ComponentRangeError",
    "InvalidBoundsError",
]
