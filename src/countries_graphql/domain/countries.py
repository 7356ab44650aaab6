from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Country:
    """
    One row of the countries list.
    - code is the natural key (ISO-like, non-empty)
    - capital is None for some territories
    - id is a per-instance surrogate for UI list diffing (not part of equality / wire shape)
    """

    code: str
    name: str
    capital: str | None
    emoji: str
    id: uuid.UUID = field(default_factory=uuid.uuid4, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("Country.code must be non-empty")

    def to_wire(self) -> dict[str, Any]:
        return {"code": self.code, "name": self.name, "capital": self.capital, "emoji": self.emoji}


@dataclass(frozen=True)
class Subdivision:
    name: str

    def to_wire(self) -> dict[str, Any]:
        return {"name": self.name}


@dataclass(frozen=True)
class CountryDetail:
    name: str
    capital: str | None
    emoji: str
    # server order, never re-sorted
    subdivisions: tuple[Subdivision, ...] = ()

    def to_wire(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "capital": self.capital,
            "emoji": self.emoji,
            "states": [s.to_wire() for s in self.subdivisions],
        }
