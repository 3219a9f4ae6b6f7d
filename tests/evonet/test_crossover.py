from __future__ import annotations

from random import Random

import pytest
from evonet.chromosome import Chromosome
from evonet.crossover import UniformCrossover


def _parents(size: int) -> tuple[Chromosome, Chromosome]:
    parent_a = Chromosome(float(n) for n in range(1, size + 1))
    parent_b = Chromosome(-float(n) for n in range(1, size + 1))
    return parent_a, parent_b


def test_uniform_crossover_takes_about_half_from_each_parent() -> None:
    parent_a, parent_b = _parents(100)

    child = UniformCrossover().crossover(Random(0), parent_a, parent_b)

    from_a = sum(1 for gene, a in zip(child, parent_a) if gene == a)
    from_b = sum(1 for gene, b in zip(child, parent_b) if gene == b)
    assert len(child) == 100
    assert from_a + from_b == 100
    assert 30 <= from_a <= 70


def test_uniform_crossover_is_unbiased_over_many_trials() -> None:
    method = UniformCrossover()
    rng = Random(1234)
    parent_a, parent_b = _parents(50)

    taken_from_a = 0
    trials = 200
    for _ in range(trials):
        child = method.crossover(rng, parent_a, parent_b)
        taken_from_a += sum(1 for gene in child if gene > 0)

    assert taken_from_a / trials == pytest.approx(25.0, abs=1.0)


def test_uniform_crossover_is_reproducible_for_a_seed() -> None:
    parent_a, parent_b = _parents(64)
    method = UniformCrossover()

    first = method.crossover(Random(7), parent_a, parent_b)
    second = method.crossover(Random(7), parent_a, parent_b)

    assert first == second


def test_uniform_crossover_keeps_gene_positions() -> None:
    parent_a, parent_b = _parents(20)

    child = UniformCrossover().crossover(Random(2), parent_a, parent_b)

    for index, gene in enumerate(child):
        assert gene in (parent_a[index], parent_b[index])


def test_uniform_crossover_leaves_parents_untouched() -> None:
    parent_a, parent_b = _parents(10)

    UniformCrossover().crossover(Random(0), parent_a, parent_b)

    assert parent_a == _parents(10)[0]
    assert parent_b == _parents(10)[1]


def test_uniform_crossover_rejects_unequal_lengths() -> None:
    with pytest.raises(ValueError):
        UniformCrossover().crossover(
            Random(0),
            Chromosome([1.0, 2.0, 3.0]),
            Chromosome([1.0, 2.0]),
        )
