"""Timestamped event log for evolution runs."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from .metrics import MetricsRow


class EventLogger:
    """Append-only text logger with ISO timestamps.

    Each call to :meth:`log` writes one UTC-stamped line and flushes, so a
    run that is interrupted keeps every event recorded so far.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._handle = self._path.open("a", encoding="utf-8")

    def __enter__(self) -> EventLogger:
        return self

    def __exit__(self, exc_type, exc, exc_tb) -> None:
        self.close()

    def log(self, message: str) -> None:
        """Append a timestamped message to the log."""
        timestamp = datetime.now(timezone.utc).isoformat()
        self._handle.write(f"{timestamp} {message}\n")
        self._handle.flush()

    def log_generation(self, row: MetricsRow) -> None:
        """Record the fitness summary of one generation."""
        self.log(
            f"Generation {row.generation}: "
            f"size={row.population_size} best={row.best_fitness:.4f} "
            f"mean={row.mean_fitness:.4f} median={row.median_fitness:.4f} "
            f"min={row.min_fitness:.4f} evolve={row.evolve_time_s:.4f}s"
        )

    def close(self) -> None:
        """Close the underlying file handle."""
        if not self._handle.closed:
            self._handle.close()

    @property
    def path(self) -> Path:
        """Return the backing log path."""
        return self._path


__all__ = ["EventLogger"]
