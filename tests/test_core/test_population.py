import pytest

from florist.core.population import (
    MendelPopulation,
    SingleGenePopulation,
    prob_at_least_n_heterozygous,
)
from florist.parse.inputs import InputError


def test_mendel():
    pop = MendelPopulation(2, 2, 2)
    assert pop.size == 6
    assert pop.p_dominant_offspring() == pytest.approx(0.78333, abs=1e-5)


@pytest.mark.parametrize(
    "counts,expect",
    [((2, 0, 0), 1.0), ((0, 0, 5), 0.0), ((0, 2, 0), 0.75), ((1, 0, 1), 1.0)],
)
def test_mendel_simple(counts, expect):
    assert MendelPopulation(*counts).p_dominant_offspring() == pytest.approx(expect)


@pytest.mark.parametrize("counts", [(0, 0, 0), (1, 0, 0), (0, 0, 1)])
def test_mendel_too_small(counts):
    assert MendelPopulation(*counts).p_dominant_offspring() == 0.0


def test_mendel_negative():
    with pytest.raises(InputError):
        MendelPopulation(-1, 2, 2)


def test_expected_offspring():
    pop = SingleGenePopulation.from_counts([1, 0, 0, 1, 0, 1])
    assert pop.expected_dominant_offspring() == 3.5
    assert pop.expected_dominant_offspring(litter_size=1) == 1.75


@pytest.mark.parametrize("counts", [[1, 0, 0, 1, 0], [1, 0, 0, 1, 0, 1, 1], []])
def test_expected_offspring_wrong_count(counts):
    with pytest.raises(InputError):
        SingleGenePopulation.from_counts(counts)


def test_independent_alleles():
    assert prob_at_least_n_heterozygous(2, 1) == pytest.approx(0.68359375)


def test_independent_alleles_bounds():
    assert prob_at_least_n_heterozygous(1, 0) == pytest.approx(1.0)
    assert prob_at_least_n_heterozygous(1, 2) == pytest.approx(0.0625)
    assert prob_at_least_n_heterozygous(1, 3) == 0.0
