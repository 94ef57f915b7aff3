from __future__ import annotations

from invasion.common.types import AlienId
from invasion.engine.graph import City


class OccupancyTracker:
    """Which aliens are currently inside which city.

    Entries are keyed by City, i.e. by name. A stale entry can never alias a new
    city because CityGraph.add_city refuses names that were destroyed.
    """

    def __init__(self) -> None:
        self._occupants: dict[City, set[AlienId]] = {}

    def enter(self, city: City, alien: AlienId) -> None:
        self._occupants.setdefault(city, set()).add(alien)

    def leave(self, city: City, alien: AlienId) -> None:
        occupants = self._occupants.get(city)
        if occupants is None:
            return
        occupants.discard(alien)
        if not occupants:
            del self._occupants[city]

    def occupants(self, city: City) -> frozenset[AlienId]:
        return frozenset(self._occupants.get(city, ()))

    def count(self, city: City) -> int:
        return len(self._occupants.get(city, ()))

    def clear(self, city: City) -> None:
        self._occupants.pop(city, None)

    def occupied_cities(self) -> list[City]:
        return sorted(self._occupants, key=lambda c: c.name)

    def positions(self) -> dict[AlienId, City]:
        return {
            alien: city
            for city in self.occupied_cities()
            for alien in sorted(self._occupants[city])
        }

    def total(self) -> int:
        return sum(len(occupants) for occupants in self._occupants.values())
