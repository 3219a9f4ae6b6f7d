"""Generational step driving selection, crossover and mutation."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from random import Random

from .chromosome import Chromosome
from .crossover import CrossoverMethod
from .individual import IndividualT
from .mutation import MutationMethod
from .selection import SelectionMethod


@dataclass(frozen=True, slots=True)
class GeneticAlgorithm:
    """Produces the next generation from the current one.

    The three methods are pluggable: any object with the matching
    ``select``/``crossover``/``mutate`` signature works.
    """

    selection_method: SelectionMethod
    crossover_method: CrossoverMethod
    mutation_method: MutationMethod

    def evolve(
        self,
        rng: Random,
        population: Sequence[IndividualT],
        *,
        factory: Callable[[Chromosome], IndividualT] | None = None,
    ) -> list[IndividualT]:
        """Build a new population of the same size.

        For every output slot, in order: select parent A, select parent B,
        cross them, mutate the child in place and wrap it in a new
        individual. ``factory`` defaults to ``create`` on the type of
        parent A. The input population is only read.
        """
        if not population:
            msg = "Cannot evolve an empty population."
            raise ValueError(msg)

        offspring: list[IndividualT] = []
        for _ in range(len(population)):
            parent_a = self.selection_method.select(rng, population)
            parent_b = self.selection_method.select(rng, population)

            child = self.crossover_method.crossover(
                rng,
                parent_a.chromosome,
                parent_b.chromosome,
            )
            self.mutation_method.mutate(rng, child)

            create = factory if factory is not None else type(parent_a).create
            offspring.append(create(child))
        return offspring


__all__ = ["GeneticAlgorithm"]
