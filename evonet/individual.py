"""Capability a host type must provide to be evolved by the engine."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from .chromosome import Chromosome

IndividualT = TypeVar("IndividualT", bound="Individual")


@runtime_checkable
class Individual(Protocol):
    """Candidate solution pairing a chromosome with a fitness score.

    Implemented by the host application. The engine reads ``fitness`` only
    through a selection method, reads ``chromosome`` positionally, and builds
    offspring through ``create``; it never modifies an existing individual.
    """

    @classmethod
    def create(cls: type[IndividualT], chromosome: Chromosome) -> IndividualT:
        """Build a new individual around ``chromosome``."""
        ...

    @property
    def fitness(self) -> float:
        """Non-negative score used as a selection weight."""
        ...

    @property
    def chromosome(self) -> Chromosome:
        """Genetic material of this individual."""
        ...


__all__ = ["Individual", "IndividualT"]
