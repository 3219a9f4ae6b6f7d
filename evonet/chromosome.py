"""Fixed-length gene sequences manipulated by the genetic operators."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator


class Chromosome:
    """Ordered, fixed-length sequence of real-valued genes.

    The gene count is set at construction and never changes: there is no
    append, insert or delete. Operations combining two chromosomes require
    equal lengths.
    """

    __slots__ = ("_genes",)

    def __init__(self, genes: Iterable[float] = ()) -> None:
        values: list[float] = []
        for gene in genes:
            try:
                value = float(gene)
            except (TypeError, ValueError) as error:
                msg = f"gene must be convertible to float, got {gene!r}"
                raise ValueError(msg) from error
            values.append(value)
        self._genes = values

    def __len__(self) -> int:
        return len(self._genes)

    def __getitem__(self, index: int) -> float:
        return self._genes[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self._genes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chromosome):
            return NotImplemented
        return self._genes == other._genes

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Chromosome({self._genes!r})"

    @property
    def genes(self) -> tuple[float, ...]:
        """Snapshot of the genes in order."""
        return tuple(self._genes)

    def copy(self) -> Chromosome:
        return Chromosome(self._genes)

    def zip_with(
        self,
        other: Chromosome,
        combine: Callable[[float, float], float],
    ) -> Chromosome:
        """Build a new chromosome from matched positions of two chromosomes."""
        if len(self) != len(other):
            msg = (
                "Chromosomes must have equal length: "
                f"{len(self)} != {len(other)}."
            )
            raise ValueError(msg)
        return Chromosome(combine(a, b) for a, b in zip(self, other, strict=True))

    def apply(self, transform: Callable[[float], float]) -> None:
        """Replace every gene with ``transform(gene)`` in place, in order."""
        for index, gene in enumerate(self._genes):
            self._genes[index] = float(transform(gene))


__all__ = ["Chromosome"]
