from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from invasion.common.errors import DuplicateCityError, InvalidConnectionError, UnknownCityError
from invasion.common.types import DISPLAY_ORDER, Direction

logger = logging.getLogger(__name__)

Row = Dict[Direction, Optional[int]]


@dataclass(frozen=True)
class City:
    """Identity token for a city. Two City values with the same name are the same city."""

    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("City name must be non-empty")

    def __str__(self) -> str:
        return self.name


def _empty_row() -> Row:
    return {direction: None for direction in DISPLAY_ORDER}


class CityGraph:
    """Live cities and their four-way adjacency.

    Cities are stored in an arena of slots. Adjacency rows hold slot numbers,
    and a removed city leaves a tombstone in its slot, so a stale slot number
    fails loudly instead of resolving to some other city.
    """

    def __init__(self) -> None:
        self._slots: list[City | None] = []
        self._rows: list[Row | None] = []
        self._index: dict[str, int] = {}
        self.destroyed: set[str] = set()

    # Construction

    def add_city(self, name: str) -> City:
        if name in self._index or name in self.destroyed:
            raise DuplicateCityError(name)
        city = City(name)
        self._index[name] = len(self._slots)
        self._slots.append(city)
        self._rows.append(_empty_row())
        return city

    def connect(self, name1: str, name2: str, direction: Direction | str) -> None:
        """Link name2 on the given side of name1, and name1 on the opposite side of name2.

        Existing links in either slot are overwritten. A partner that loses its
        link this way has its inverse slot cleared so both sides stay symmetric.
        """
        direction = _coerce_direction(direction)
        i1 = self._slot_of(name1)
        i2 = self._slot_of(name2)
        if i1 == i2:
            raise InvalidConnectionError(f"City {name1!r} cannot neighbour itself")
        inverse = direction.opposite
        self._detach(i1, direction)
        self._detach(i2, inverse)
        self._row(i1)[direction] = i2
        self._row(i2)[inverse] = i1

    def remove_city(self, name: str) -> None:
        target = self._slot_of(name)
        for neighbor in self._row(target).values():
            if neighbor is None:
                continue
            row = self._row(neighbor)
            for direction, slot in row.items():
                if slot == target:
                    row[direction] = None
                    break
        self.destroyed.add(name)
        del self._index[name]
        self._slots[target] = None
        self._rows[target] = None
        logger.debug("Removed city %s", name)

    # Queries

    def city(self, name: str) -> City:
        return self._city_at(self._slot_of(name))

    def is_live(self, name: str) -> bool:
        return name in self._index

    def is_destroyed(self, name: str) -> bool:
        return name in self.destroyed

    def names(self) -> list[str]:
        return sorted(self._index)

    def cities(self) -> list[City]:
        return [self._city_at(self._index[name]) for name in self.names()]

    def links(self, name: str) -> dict[Direction, City]:
        row = self._row(self._slot_of(name))
        return {
            direction: self._city_at(row[direction])
            for direction in DISPLAY_ORDER
            if row[direction] is not None
        }

    def neighbors(self, name: str) -> List[City]:
        return list(self.links(name).values())

    def has_live_neighbors(self, name: str) -> bool:
        row = self._row(self._slot_of(name))
        return any(slot is not None for slot in row.values())

    def render(self) -> list[str]:
        lines = []
        for name in self.names():
            parts = [name]
            for direction, neighbor in self.links(name).items():
                parts.append(f"{direction.value}={neighbor.name}")
            lines.append(" ".join(parts))
        return lines

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    # Internal helpers

    def _slot_of(self, name: str) -> int:
        slot = self._index.get(name)
        if slot is None:
            raise UnknownCityError(name, destroyed=name in self.destroyed)
        return slot

    def _city_at(self, slot: int) -> City:
        city = self._slots[slot]
        if city is None:
            raise UnknownCityError(f"#{slot}", destroyed=True)
        return city

    def _row(self, slot: int) -> Row:
        row = self._rows[slot]
        if row is None:
            raise UnknownCityError(f"#{slot}", destroyed=True)
        return row

    def _detach(self, slot: int, direction: Direction) -> None:
        previous = self._row(slot)[direction]
        if previous is None:
            return
        other = self._row(previous)
        if other[direction.opposite] == slot:
            other[direction.opposite] = None
        self._row(slot)[direction] = None


def _coerce_direction(direction: Direction | str) -> Direction:
    if isinstance(direction, Direction):
        return direction
    try:
        return Direction(direction)
    except ValueError:
        raise InvalidConnectionError(f"Unknown direction {direction!r}") from None
