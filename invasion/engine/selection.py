from __future__ import annotations

import random
from typing import Sequence, TypeVar

from invasion.common.errors import EmptySelectionError

T = TypeVar("T")


class RandomSelector:
    """Uniform picks from a generator owned by this selector.

    The generator is created (and seeded, if a seed is given) exactly once, so
    successive picks within a run are independent of the wall clock.
    """

    def __init__(self, seed: int | None = None, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)

    def pick_one(self, candidates: Sequence[T]) -> T:
        if not candidates:
            raise EmptySelectionError()
        return candidates[self.rng.randrange(len(candidates))]
