import numpy
import pytest

from florist.core.profile import Consensus, make_consensus
from florist.core.sequence import (
    DnaSequence,
    EmptyCollectionError,
    LengthMismatchError,
    ProteinSequence,
    RnaSequence,
)

ROSALIND = [
    "ATCCAGCT",
    "GGGCAACT",
    "ATGGATCT",
    "AAGCAACC",
    "TTGGAACT",
    "ATGCCATT",
    "ATGGCACT",
]


@pytest.fixture
def consensus():
    return make_consensus([DnaSequence(s) for s in ROSALIND])


def test_consensus_sequence(consensus):
    assert consensus.sequence == DnaSequence("ATGCAACT")
    assert len(consensus) == 8


def test_frequencies(consensus):
    assert consensus.frequencies == {
        "A": [5, 1, 0, 0, 5, 5, 0, 0],
        "C": [0, 0, 1, 4, 2, 0, 6, 1],
        "G": [1, 1, 6, 3, 0, 1, 0, 0],
        "T": [1, 5, 0, 0, 0, 1, 1, 6],
    }


def test_counts_columns_sum_to_num_seqs(consensus):
    counts = consensus.counts
    assert counts.shape == (4, 8)
    numpy.testing.assert_array_equal(counts.sum(axis=0), [len(ROSALIND)] * 8)


def test_display(consensus):
    expect = "\n".join(
        [
            "ATGCAACT",
            "A: 5 1 0 0 5 5 0 0",
            "C: 0 0 1 4 2 0 6 1",
            "G: 1 1 6 3 0 1 0 0",
            "T: 1 5 0 0 0 1 1 6",
        ]
    )
    assert str(consensus) == expect


@pytest.mark.parametrize(
    "seqs,expect",
    [
        (["A", "C"], "A"),
        (["T", "G"], "G"),
        (["GT", "TG", "CC"], "CC"),
        (["GA", "TA", "GA", "TC"], "GA"),
    ],
)
def test_ties_go_to_smallest_symbol(seqs, expect):
    got = Consensus.from_seqs(DnaSequence(s) for s in seqs)
    assert str(got.sequence) == expect


def test_single_sequence():
    got = make_consensus([RnaSequence("ACGU")])
    assert got.sequence == RnaSequence("ACGU")
    assert isinstance(got.sequence, RnaSequence)
    assert got.frequencies["U"] == [0, 0, 0, 1]


def test_protein_frequencies_cover_alphabet():
    got = make_consensus([ProteinSequence("MA"), ProteinSequence("MW")])
    assert str(got.sequence) == "MA"
    assert len(got.frequencies) == 20
    assert got.frequencies["Y"] == [0, 0]


def test_empty():
    with pytest.raises(EmptyCollectionError):
        make_consensus([])


def test_length_mismatch():
    with pytest.raises(LengthMismatchError):
        make_consensus([DnaSequence("ACG"), DnaSequence("AC")])


def test_mixed_types():
    with pytest.raises(TypeError):
        make_consensus([DnaSequence("ACG"), RnaSequence("ACG")])
