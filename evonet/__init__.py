"""Genetic-algorithm and feed-forward network primitives for neuroevolution."""

from __future__ import annotations

from .algorithm import GeneticAlgorithm
from .chromosome import Chromosome
from .config import EvolutionConfig, load_evolution_config
from .crossover import CrossoverMethod, UniformCrossover
from .individual import Individual
from .metrics import MetricsRow, MetricsWriter
from .mutation import GaussianMutation, MutationMethod
from .network import (
    Layer,
    LayerTopology,
    Network,
    Neuron,
    parameter_count,
)
from .reporters import EventLogger
from .selection import RouletteWheelSelection, SelectionMethod
from .training import EvolutionRun, run_evolution, run_generations

__all__ = [
    "Chromosome",
    "Individual",
    "SelectionMethod",
    "RouletteWheelSelection",
    "CrossoverMethod",
    "UniformCrossover",
    "MutationMethod",
    "GaussianMutation",
    "GeneticAlgorithm",
    "Neuron",
    "Layer",
    "LayerTopology",
    "Network",
    "parameter_count",
    "EvolutionConfig",
    "load_evolution_config",
    "MetricsRow",
    "MetricsWriter",
    "EventLogger",
    "EvolutionRun",
    "run_evolution",
    "run_generations",
]
