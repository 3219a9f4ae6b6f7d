"""Recombination of two parent chromosomes into one child."""

from __future__ import annotations

from random import Random
from typing import Protocol

from .chromosome import Chromosome


class CrossoverMethod(Protocol):
    """Combines two parents into a new chromosome of the same length."""

    def crossover(
        self,
        rng: Random,
        parent_a: Chromosome,
        parent_b: Chromosome,
    ) -> Chromosome: ...


class UniformCrossover:
    """Pick every gene independently from either parent with a fair coin."""

    __slots__ = ()

    def crossover(
        self,
        rng: Random,
        parent_a: Chromosome,
        parent_b: Chromosome,
    ) -> Chromosome:
        return parent_a.zip_with(
            parent_b,
            lambda a, b: a if rng.random() < 0.5 else b,
        )

    def __repr__(self) -> str:
        return "UniformCrossover()"


__all__ = ["CrossoverMethod", "UniformCrossover"]
