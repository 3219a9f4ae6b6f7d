"""Fixed-length generation loop around :class:`GeneticAlgorithm`."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from random import Random
from time import perf_counter
from typing import Generic

from .algorithm import GeneticAlgorithm
from .config import EvolutionConfig
from .individual import IndividualT
from .metrics import MetricsRow, MetricsWriter
from .reporters import EventLogger

EvaluateHook = Callable[[Sequence[IndividualT]], Sequence[IndividualT]]


@dataclass(frozen=True)
class EvolutionRun(Generic[IndividualT]):
    """Outcome of :func:`run_generations`."""

    population: list[IndividualT]
    history: tuple[MetricsRow, ...]

    @property
    def generations(self) -> int:
        return len(self.history)


def run_generations(
    algorithm: GeneticAlgorithm,
    rng: Random,
    population: Sequence[IndividualT],
    generations: int,
    *,
    evaluate: EvaluateHook | None = None,
    metrics: MetricsWriter | None = None,
    logger: EventLogger | None = None,
) -> EvolutionRun[IndividualT]:
    """Evolve ``population`` exactly ``generations`` times.

    There is no stopping criterion. Before each step the optional
    ``evaluate`` hook receives the current population and returns the
    population to breed from, which is where a host scores its individuals.
    The returned population is the output of the last step and has not been
    passed through ``evaluate``.
    """
    if generations < 0:
        msg = "generations must be >= 0."
        raise ValueError(msg)
    if not population:
        msg = "Cannot evolve an empty population."
        raise ValueError(msg)

    current = list(population)
    history: list[MetricsRow] = []

    if logger is not None:
        logger.log(
            f"Evolution started: generations={generations} "
            f"population_size={len(current)}"
        )

    for generation in range(generations):
        if evaluate is not None:
            current = list(evaluate(current))
            if not current:
                msg = "evaluate hook returned an empty population."
                raise ValueError(msg)

        start_time = perf_counter()
        offspring = algorithm.evolve(rng, current)
        evolve_time = perf_counter() - start_time

        row = MetricsRow.from_population(
            generation,
            current,
            evolve_time_s=evolve_time,
        )
        history.append(row)
        if metrics is not None:
            metrics.append(row)
        if logger is not None:
            logger.log_generation(row)

        current = offspring

    if logger is not None:
        logger.log("Evolution finished.")

    return EvolutionRun(population=current, history=tuple(history))


def run_evolution(
    config: EvolutionConfig,
    population: Sequence[IndividualT],
    *,
    rng: Random | None = None,
    evaluate: EvaluateHook | None = None,
) -> EvolutionRun[IndividualT]:
    """Run ``config.generations`` steps with the configured methods.

    Metrics and events go to the configured paths, when set. ``rng``
    defaults to ``config.make_rng()``; pass the generator that built the
    initial population to keep a single random stream for the whole run.
    """
    if len(population) != config.population_size:
        msg = (
            f"Expected a population of {config.population_size} "
            f"but received {len(population)}."
        )
        raise ValueError(msg)
    source = rng if rng is not None else config.make_rng()
    with config.open_reporters() as (metrics, logger):
        return run_generations(
            config.build_algorithm(),
            source,
            population,
            config.generations,
            evaluate=evaluate,
            metrics=metrics,
            logger=logger,
        )


__all__ = ["EvaluateHook", "EvolutionRun", "run_evolution", "run_generations"]
