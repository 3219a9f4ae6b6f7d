"""Random perturbation of chromosomes."""

from __future__ import annotations

from dataclasses import dataclass
from random import Random
from typing import Protocol

from .chromosome import Chromosome


class MutationMethod(Protocol):
    """Perturbs a chromosome in place."""

    def mutate(self, rng: Random, chromosome: Chromosome) -> None: ...


@dataclass(frozen=True, slots=True)
class GaussianMutation:
    """Per-gene probabilistic additive perturbation.

    Attributes:
        chance: Probability that a given gene is changed, in [0, 1].
        coeff: Magnitude of the change.

    A selected gene receives ``coeff * u`` with ``u`` drawn from
    ``rng.random()``, i.e. uniform on [0, 1). The name is kept for
    compatibility with existing seeds and expected values.
    """

    chance: float
    coeff: float

    def __post_init__(self) -> None:
        try:
            chance = float(self.chance)
            coeff = float(self.coeff)
        except (TypeError, ValueError) as error:
            msg = "chance and coeff must be numbers."
            raise ValueError(msg) from error
        if not 0.0 <= chance <= 1.0:
            msg = f"chance must be in [0, 1], got {self.chance!r}."
            raise ValueError(msg)
        object.__setattr__(self, "chance", chance)
        object.__setattr__(self, "coeff", coeff)

    def mutate(self, rng: Random, chromosome: Chromosome) -> None:
        def perturb(gene: float) -> float:
            if rng.random() < self.chance:
                return gene + self.coeff * rng.random()
            return gene

        chromosome.apply(perturb)


__all__ = ["GaussianMutation", "MutationMethod"]
