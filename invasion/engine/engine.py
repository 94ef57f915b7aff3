from __future__ import annotations

import logging

from invasion.common.constants import MAX_OCCUPANTS
from invasion.common.types import AlienId, Phase
from invasion.engine.graph import City, CityGraph
from invasion.engine.occupancy import OccupancyTracker
from invasion.engine.selection import RandomSelector
from invasion.engine.state import Destruction, SimulationState, StepSummary

logger = logging.getLogger(__name__)


class SimulationEngine:
    """Runs one invasion over a city graph.

    Step 1 scatters the aliens over random live cities. Every later step moves
    each surviving alien to a random live neighbour. Two aliens meeting in a
    city destroy it on the spot, together with themselves.
    """

    def __init__(
        self,
        graph: CityGraph,
        selector: RandomSelector | None = None,
        seed: int | None = None,
    ) -> None:
        self.graph = graph
        self.selector = selector if selector is not None else RandomSelector(seed)
        self.occupancy = OccupancyTracker()
        self.state = SimulationState()

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def events(self) -> list[Destruction]:
        return self.state.events

    def run(self, num_aliens: int, num_steps: int) -> SimulationState:
        """Scatter the aliens and step until num_steps or nothing can change."""
        self.scatter(num_aliens, num_steps)
        while self.advance() is not None:
            pass
        return self.state

    def scatter(self, num_aliens: int, num_steps: int = 0) -> StepSummary | None:
        """Place aliens 1..num_aliens on random live cities (step 1)."""
        if num_aliens < 0 or num_steps < 0:
            raise ValueError("Alien and step counts must be non-negative")
        if self.state.phase != Phase.UNINITIALIZED:
            raise RuntimeError("Simulation has already been started")
        self.state.num_aliens = num_aliens
        self.state.num_steps = num_steps
        self.state.surviving = num_aliens
        if not len(self.graph) or num_aliens == 0:
            logger.info("Nothing to simulate (%d cities, %d aliens)", len(self.graph), num_aliens)
            self._finish()
            return None

        self.state.phase = Phase.SCATTERING
        self.state.step = 1
        summary = StepSummary(step=1)
        for alien in range(1, num_aliens + 1):
            if not len(self.graph):
                self.state.stranded = num_aliens - alien + 1
                logger.debug("No cities left, %d aliens never landed", self.state.stranded)
                break
            if self.state.surviving == 0:
                break
            city = self.selector.pick_one(self.graph.cities())
            summary.moved += 1
            self._arrive(city, alien, summary)
        self.state.summaries.append(summary)
        logger.debug(
            "Scatter placed %d aliens, %d cities destroyed", summary.moved, len(summary.destroyed)
        )
        self.state.phase = Phase.STEPPING
        return summary

    def advance(self) -> StepSummary | None:
        """Run the next step. Returns None once the simulation is finished."""
        if self.state.phase != Phase.STEPPING:
            return None
        if self.state.step >= self.state.num_steps or self._exhausted():
            self._finish()
            return None
        self.state.step += 1
        summary = self._move_all(self.state.step)
        self.state.summaries.append(summary)
        if summary.moved == 0:
            # Nobody can move, so no later step can change anything either.
            logger.debug("No alien could move at step %d", summary.step)
            self._finish()
        return summary

    def narrate(self) -> list[str]:
        return [event.message for event in self.state.events]

    def render(self) -> list[str]:
        return self.graph.render()

    def positions(self) -> dict[AlienId, str]:
        return {alien: city.name for alien, city in self.occupancy.positions().items()}

    # Internal helpers

    def _move_all(self, step: int) -> StepSummary:
        summary = StepSummary(step=step)
        moved: set[AlienId] = set()
        for city in self.occupancy.occupied_cities():
            if not self.graph.is_live(city.name):
                continue
            for alien in sorted(self.occupancy.occupants(city)):
                if alien in moved:
                    continue
                if not self.graph.has_live_neighbors(city.name):
                    break
                destination = self.selector.pick_one(self.graph.neighbors(city.name))
                self.occupancy.leave(city, alien)
                moved.add(alien)
                summary.moved += 1
                self._arrive(destination, alien, summary)
        return summary

    def _arrive(self, city: City, alien: AlienId, summary: StepSummary) -> None:
        present = self.occupancy.count(city)
        if present >= MAX_OCCUPANTS:
            raise RuntimeError(f"City {city} already holds {present} aliens")
        self.occupancy.enter(city, alien)
        if present:
            self._destroy(city, summary)

    def _destroy(self, city: City, summary: StepSummary) -> None:
        first, second = sorted(self.occupancy.occupants(city))
        event = Destruction(city=city.name, aliens=(first, second), step=self.state.step)
        self.state.events.append(event)
        self.state.surviving -= 2
        self.state.destroyed_aliens += 2
        summary.destroyed.append(city.name)
        logger.info("%s", event.message)
        self.graph.remove_city(city.name)
        self.occupancy.clear(city)

    def _exhausted(self) -> bool:
        return not len(self.graph) or self.state.surviving == 0

    def _finish(self) -> None:
        self.state.phase = Phase.FINISHED
        logger.info(
            "Simulation finished at step %d: %d cities destroyed, %d aliens surviving",
            self.state.step,
            len(self.state.events),
            self.state.surviving,
        )
