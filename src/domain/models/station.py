from __future__ import annotations

from dataclasses import dataclass

from src.domain.exceptions import MissingInputError


@dataclass(frozen=True, slots=True, order=True)
class Station:
    """A named stop location.

    Identity is the name: two stations are equal iff their names are equal
    (exact, case-sensitive comparison).
    """

    name: str

    def __post_init__(self) -> None:
        if self.name is None:
            raise MissingInputError("Station name cannot be None")
        if not isinstance(self.name, str):
            raise TypeError(f"Station name must be a string, got {type(self.name)!r}")

    def check_invariant(self) -> bool:
        return isinstance(self.name, str)

    def __str__(self) -> str:
        return self.name
