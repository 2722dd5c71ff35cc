"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class _IntegerId:
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Identifier must be an integer")
        if self.value <= 0:
            raise ValueError("Identifier must be positive")

    @classmethod
    def from_string(cls, value: str | int) -> Self:
        if isinstance(value, str):
            value = int(value.strip())
        return cls(value=value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class SportId(_IntegerId):
    """Unique identifier for a Sport."""


@dataclass(frozen=True)
class SessionId(_IntegerId):
    """Unique identifier for a Session."""


@dataclass(frozen=True)
class PlayerId(_IntegerId):
    """Identifier of a user acting as player or session creator."""
