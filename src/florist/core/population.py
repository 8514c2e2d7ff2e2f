"""Mendelian inheritance in small populations."""

import dataclasses
import math

from florist.parse.inputs import InputError

_NUM_GENOTYPE_PAIRINGS = 6


@dataclasses.dataclass(frozen=True)
class MendelPopulation:
    """counts of homozygous dominant, heterozygous and homozygous recessive
    individuals for a single gene"""

    dominant: int
    heterozygous: int
    recessive: int

    def __post_init__(self):
        if min(self.dominant, self.heterozygous, self.recessive) < 0:
            raise InputError(f"negative counts in {self}")

    @property
    def size(self) -> int:
        return self.dominant + self.heterozygous + self.recessive

    def p_dominant_offspring(self) -> float:
        """probability that the offspring of two randomly chosen (without
        replacement) mates displays the dominant phenotype

        Notes
        -----
        Populations with fewer than two individuals cannot mate, the
        probability is then 0.0.
        """
        size = self.size
        if size < 2:
            return 0.0

        d, h, r = self.dominant, self.heterozygous, self.recessive
        pairs = size * (size - 1)
        p_dd = d * (d - 1) / pairs
        p_hh = h * (h - 1) / pairs
        p_dh = 2 * d * h / pairs
        p_dr = 2 * d * r / pairs
        p_hr = 2 * h * r / pairs
        return p_dd + p_dh + p_dr + 0.75 * p_hh + 0.5 * p_hr


@dataclasses.dataclass(frozen=True)
class SingleGenePopulation:
    """numbers of couples for each genotype pairing

    Attributes are named by the genotypes of the couple, d for AA,
    h for Aa, r for aa.
    """

    dd: int
    dh: int
    dr: int
    hh: int
    hr: int
    rr: int

    @classmethod
    def from_counts(cls, counts) -> "SingleGenePopulation":
        """
        Parameters
        ----------
        counts
            six couple counts in the order AA-AA, AA-Aa, AA-aa, Aa-Aa, Aa-aa,
            aa-aa

        Raises
        ------
        InputError if there are not exactly six values
        """
        counts = list(counts)
        if len(counts) != _NUM_GENOTYPE_PAIRINGS:
            msg = f"expected {_NUM_GENOTYPE_PAIRINGS} values, got {len(counts)}"
            raise InputError(msg)
        return cls(*counts)

    def expected_dominant_offspring(self, litter_size: int = 2) -> float:
        """expected number of offspring displaying the dominant phenotype"""
        certain = self.dd + self.dh + self.dr
        return (certain + 0.75 * self.hh + 0.5 * self.hr) * litter_size


def prob_at_least_n_heterozygous(k: int, n: int) -> float:
    """probability that at least n of the 2**k organisms in generation k are
    AaBb

    Notes
    -----
    The lineage starts from an AaBb organism and every organism mates with
    an AaBb partner, each offspring is AaBb with probability 1/4.
    """
    if k < 0 or n < 0:
        raise InputError(f"generation {k} and count {n} must be non-negative")

    population = 2**k
    p = 0.25
    return math.fsum(
        math.comb(population, i) * p**i * (1 - p) ** (population - i)
        for i in range(n, population + 1)
    )
