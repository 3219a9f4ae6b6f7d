"""Per-generation fitness statistics and their CSV sink."""

from __future__ import annotations

import csv
from collections.abc import Sequence
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from statistics import mean, median
from typing import IO, Any

from .individual import Individual


@dataclass(frozen=True, slots=True)
class MetricsRow:
    """Fitness summary of the population entering one ``evolve`` call."""

    generation: int
    population_size: int
    best_fitness: float
    mean_fitness: float
    median_fitness: float
    min_fitness: float
    evolve_time_s: float = 0.0

    @classmethod
    def from_population(
        cls,
        generation: int,
        population: Sequence[Individual],
        *,
        evolve_time_s: float = 0.0,
    ) -> MetricsRow:
        if not population:
            msg = "Cannot summarise an empty population."
            raise ValueError(msg)
        scores = [float(individual.fitness) for individual in population]
        return cls(
            generation=generation,
            population_size=len(scores),
            best_fitness=max(scores),
            mean_fitness=mean(scores),
            median_fitness=median(scores),
            min_fitness=min(scores),
            evolve_time_s=evolve_time_s,
        )


class MetricsWriter:
    """CSV-backed writer that appends metrics rows incrementally."""

    _fieldnames = [field.name for field in fields(MetricsRow)]

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        exists = self._path.exists()
        mode = "a" if exists else "w"
        self._handle: IO[str] = self._path.open(mode, encoding="utf-8", newline="")
        self._writer = csv.DictWriter(self._handle, fieldnames=self._fieldnames)
        if not exists:
            self._writer.writeheader()
            self._handle.flush()

    def __enter__(self) -> MetricsWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        exc_tb: Any,
    ) -> None:
        self.close()

    def append(self, row: MetricsRow) -> None:
        """Append a metrics row and flush to disk."""
        self._writer.writerow(asdict(row))
        self._handle.flush()

    def close(self) -> None:
        """Release the underlying file handle if still open."""
        if not self._handle.closed:
            self._handle.close()

    @property
    def path(self) -> Path:
        """Return the destination path for the CSV file."""
        return self._path


__all__ = ["MetricsRow", "MetricsWriter"]
