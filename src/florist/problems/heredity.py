"""Problems on inheritance and population growth."""

from florist.core.population import (
    MendelPopulation,
    SingleGenePopulation,
    prob_at_least_n_heterozygous,
)
from florist.maths.recurrence import mortal_rabbit_pairs, rabbit_pairs
from florist.parse.inputs import parse_int_list
from florist.problems import Problem


class MendelsFirstLaw(Problem):
    """Probability that two random mates produce a dominant offspring.

    The dataset is the number of homozygous dominant, heterozygous and
    homozygous recessive individuals.
    """

    rosalind_id = "iprb"
    name = "mendels-first-law"

    def parse(self, text: str):
        return MendelPopulation(*parse_int_list(text, count=3))

    def solve(self, data):
        return data.p_dominant_offspring()

    def format(self, result) -> str:
        return f"{result:.5f}"


class CalculatingExpectedOffspring(Problem):
    """Expected number of dominant offspring, two per couple."""

    rosalind_id = "iev"
    name = "calculating-expected-offspring"

    def parse(self, text: str):
        return SingleGenePopulation.from_counts(parse_int_list(text))

    def solve(self, data):
        return data.expected_dominant_offspring(litter_size=2)


class IndependentAlleles(Problem):
    """Probability of at least N AaBb organisms in generation k."""

    rosalind_id = "lia"
    name = "independent-alleles"

    def parse(self, text: str):
        return parse_int_list(text, count=2)

    def solve(self, data):
        k, n = data
        return prob_at_least_n_heterozygous(k, n)

    def format(self, result) -> str:
        return f"{result:.3f}"


class RabbitsAndRecurrenceRelations(Problem):
    """Rabbit pairs after n months with litters of k pairs."""

    rosalind_id = "fib"
    name = "rabbits-and-recurrence-relations"

    def parse(self, text: str):
        return parse_int_list(text, count=2)

    def solve(self, data):
        months, litter_size = data
        return rabbit_pairs(months, litter_size)


class MortalFibonacciRabbits(Problem):
    """Rabbit pairs after n months when rabbits live m months."""

    rosalind_id = "fibd"
    name = "mortal-fibonacci-rabbits"

    def parse(self, text: str):
        return parse_int_list(text, count=2)

    def solve(self, data):
        months, lifespan = data
        return mortal_rabbit_pairs(months, lifespan)
