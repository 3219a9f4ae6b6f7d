"""Parent selection strategies."""

from __future__ import annotations

import math
from bisect import bisect_right
from collections.abc import Sequence
from itertools import accumulate
from random import Random
from typing import Protocol

from .individual import IndividualT


class SelectionMethod(Protocol):
    """Picks one individual out of a population."""

    def select(
        self,
        rng: Random,
        population: Sequence[IndividualT],
    ) -> IndividualT: ...


class RouletteWheelSelection:
    """Fitness-proportional sampling with replacement.

    Each individual owns a slice of the cumulative fitness distribution,
    taken in population order; a single ``rng.random()`` draw scaled by the
    total fitness picks the slice. Individuals with zero fitness are never
    chosen.
    """

    __slots__ = ()

    def select(
        self,
        rng: Random,
        population: Sequence[IndividualT],
    ) -> IndividualT:
        if not population:
            msg = "Cannot select from an empty population."
            raise ValueError(msg)

        weights = [float(individual.fitness) for individual in population]
        for index, weight in enumerate(weights):
            if not math.isfinite(weight) or weight < 0.0:
                msg = (
                    f"Fitness must be finite and non-negative for roulette "
                    f"selection, individual {index} has {weight}."
                )
                raise ValueError(msg)

        cumulative = list(accumulate(weights))
        total = cumulative[-1]
        if not math.isfinite(total):
            msg = "Total fitness overflowed; cannot build the roulette wheel."
            raise ValueError(msg)
        if total <= 0.0:
            msg = "Roulette selection requires at least one positive fitness."
            raise ValueError(msg)

        draw = rng.random() * total
        index = bisect_right(cumulative, draw)
        # A draw rounded up to the total lands past the end; fall back to the
        # last individual that owns a non-empty slice.
        last_positive = max(i for i, weight in enumerate(weights) if weight > 0.0)
        return population[min(index, last_positive)]

    def __repr__(self) -> str:
        return "RouletteWheelSelection()"


__all__ = ["RouletteWheelSelection", "SelectionMethod"]
