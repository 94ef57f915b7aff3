from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from invasion.common.config import settings
from invasion.engine.engine import SimulationEngine
from invasion.engine.state import Destruction


class RunConfig(BaseModel):
    map_path: str = settings.map_path
    aliens: int = Field(default=settings.num_aliens, ge=0)
    steps: int = Field(default=settings.num_steps, ge=0)
    seed: Optional[int] = settings.random_seed


class DestructionRecord(BaseModel):
    city: str
    aliens: List[int]
    step: int
    message: str

    @classmethod
    def from_event(cls, event: Destruction) -> DestructionRecord:
        return cls(
            city=event.city,
            aliens=list(event.aliens),
            step=event.step,
            message=event.message,
        )


class SimulationReport(BaseModel):
    config: RunConfig
    initial_map: List[str]
    destructions: List[DestructionRecord] = Field(default_factory=list)
    final_map: List[str]
    steps_run: int
    surviving_aliens: int
    destroyed_aliens: int
    stranded_aliens: int = 0
    positions: Dict[int, str] = Field(default_factory=dict)

    @classmethod
    def from_engine(
        cls, config: RunConfig, initial_map: List[str], engine: SimulationEngine
    ) -> SimulationReport:
        state = engine.state
        return cls(
            config=config,
            initial_map=initial_map,
            destructions=[DestructionRecord.from_event(e) for e in state.events],
            final_map=engine.render(),
            steps_run=state.step,
            surviving_aliens=state.surviving,
            destroyed_aliens=state.destroyed_aliens,
            stranded_aliens=state.stranded,
            positions=engine.positions(),
        )
