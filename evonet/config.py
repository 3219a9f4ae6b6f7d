"""Configuration loading utilities for evolution runs."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass
from pathlib import Path
from random import Random
from typing import Any

import yaml

from .algorithm import GeneticAlgorithm
from .crossover import CrossoverMethod, UniformCrossover
from .metrics import MetricsWriter
from .mutation import GaussianMutation
from .network import LayerTopology
from .reporters import EventLogger
from .selection import RouletteWheelSelection, SelectionMethod

SELECTION_METHODS: dict[str, Callable[[], SelectionMethod]] = {
    "roulette_wheel": RouletteWheelSelection,
}

CROSSOVER_METHODS: dict[str, Callable[[], CrossoverMethod]] = {
    "uniform": UniformCrossover,
}


def _normalize_method_name(name: str) -> str:
    return name.strip().lower().replace("-", "_")


@dataclass(slots=True)
class EvolutionConfig:
    population_size: int = 20
    generations: int = 100
    topology: tuple[int, ...] = (3, 2, 1)
    mutation_chance: float = 0.01
    mutation_coeff: float = 0.3
    seed: int | None = None
    selection: str = "roulette_wheel"
    crossover: str = "uniform"
    metrics_path: Path | None = None
    events_path: Path | None = None

    def __post_init__(self) -> None:
        if self.population_size <= 0:
            msg = "population_size must be positive."
            raise ValueError(msg)
        if self.generations < 0:
            msg = "generations must be >= 0."
            raise ValueError(msg)
        self.topology = tuple(self.topology)
        # Validates sizes and length.
        self.layer_topology()
        if not 0.0 <= self.mutation_chance <= 1.0:
            msg = "mutation_chance must be in [0, 1]."
            raise ValueError(msg)
        self.selection = _normalize_method_name(self.selection)
        self.crossover = _normalize_method_name(self.crossover)
        for label, name, registry in (
            ("selection", self.selection, SELECTION_METHODS),
            ("crossover", self.crossover, CROSSOVER_METHODS),
        ):
            if name not in registry:
                valid = ", ".join(sorted(registry))
                msg = f"Unknown {label} method {name!r}. Expected one of: {valid}"
                raise ValueError(msg)

    def layer_topology(self) -> tuple[LayerTopology, ...]:
        layers = tuple(LayerTopology.coerce(size) for size in self.topology)
        if len(layers) < 2:
            msg = "topology must list at least an input and an output size."
            raise ValueError(msg)
        return layers

    def mutation(self) -> GaussianMutation:
        return GaussianMutation(chance=self.mutation_chance, coeff=self.mutation_coeff)

    def build_algorithm(self) -> GeneticAlgorithm:
        return GeneticAlgorithm(
            selection_method=SELECTION_METHODS[self.selection](),
            crossover_method=CROSSOVER_METHODS[self.crossover](),
            mutation_method=self.mutation(),
        )

    def make_rng(self) -> Random:
        return Random(self.seed)

    @contextmanager
    def open_reporters(
        self,
    ) -> Iterator[tuple[MetricsWriter | None, EventLogger | None]]:
        """Open the configured metrics CSV and event log, closing both on exit.

        Either item is ``None`` when its path is not configured.
        """
        with ExitStack() as stack:
            metrics = (
                stack.enter_context(MetricsWriter(self.metrics_path))
                if self.metrics_path is not None
                else None
            )
            logger = (
                stack.enter_context(EventLogger(self.events_path))
                if self.events_path is not None
                else None
            )
            yield metrics, logger


def _load_yaml(path: Path) -> Mapping[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, Mapping):
        msg = f"Expected mapping in YAML file: {path}"
        raise ValueError(msg)
    return data


def _optional_path(base: Path, value: Any) -> Path | None:
    if not value:
        return None
    return (base / Path(value)).resolve()


def load_evolution_config(path: Path) -> EvolutionConfig:
    path = Path(path)
    data = _load_yaml(path)
    mutation = data.get("mutation") or {}
    if not isinstance(mutation, Mapping):
        msg = "'mutation' must be a mapping with 'chance' and 'coeff'."
        raise ValueError(msg)
    topology = data.get("topology", (3, 2, 1))
    if isinstance(topology, (str, bytes)) or not hasattr(topology, "__iter__"):
        msg = f"'topology' must be a list of layer sizes, got {topology!r}"
        raise ValueError(msg)
    base = path.parent
    return EvolutionConfig(
        population_size=int(data.get("population_size", data.get("pop_size", 20))),
        generations=int(data.get("generations", 100)),
        topology=tuple(int(size) for size in topology),
        mutation_chance=float(mutation.get("chance", data.get("mutation_chance", 0.01))),
        mutation_coeff=float(mutation.get("coeff", data.get("mutation_coeff", 0.3))),
        seed=(int(data["seed"]) if data.get("seed") is not None else None),
        selection=str(data.get("selection", "roulette_wheel")),
        crossover=str(data.get("crossover", "uniform")),
        metrics_path=_optional_path(base, data.get("metrics_path")),
        events_path=_optional_path(base, data.get("events_path")),
    )


__all__ = [
    "CROSSOVER_METHODS",
    "EvolutionConfig",
    "SELECTION_METHODS",
    "load_evolution_config",
]
