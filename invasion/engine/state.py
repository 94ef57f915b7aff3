from __future__ import annotations

from dataclasses import dataclass, field

from invasion.common.types import AlienId, Phase


@dataclass(frozen=True)
class Destruction:
    city: str
    aliens: tuple[AlienId, AlienId]
    step: int

    @property
    def message(self) -> str:
        first, second = self.aliens
        return f"{self.city} has been destroyed by alien {first} and alien {second}!"


@dataclass
class StepSummary:
    step: int
    moved: int = 0
    destroyed: list[str] = field(default_factory=list)


@dataclass
class SimulationState:
    num_aliens: int = 0
    num_steps: int = 0
    phase: Phase = Phase.UNINITIALIZED
    step: int = 0
    surviving: int = 0
    destroyed_aliens: int = 0
    stranded: int = 0  # never placed because every city was gone
    events: list[Destruction] = field(default_factory=list)
    summaries: list[StepSummary] = field(default_factory=list)

    @property
    def finished(self) -> bool:
        return self.phase == Phase.FINISHED
