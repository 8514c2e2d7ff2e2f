import math

import pytest

from florist.core.alphabet import EmptySequenceError, InvalidSymbolError
from florist.core.sequence import (
    DnaSequence,
    Frame,
    LengthMismatchError,
    NoValidProteinError,
    ProteinSequence,
    RnaSequence,
    hamming_distance,
    motif_locations,
    overlap_edges,
    transition_transversion_ratio,
)

DNA_SEQS = ["A", "ACGT", "AAAACCCGGT", "GATATATGCATATACTT", "TTTTTTTTT"]


def test_construction_entry_points_agree():
    assert DnaSequence("ACGT") == DnaSequence.from_str("ACGT")
    for make in (DnaSequence, DnaSequence.from_str):
        with pytest.raises(InvalidSymbolError) as err:
            make("AXGT")
        assert err.value.char == "X"
        with pytest.raises(EmptySequenceError):
            make("")


@pytest.mark.parametrize(
    "seq_class,text",
    [(DnaSequence, "ACGU"), (RnaSequence, "ACGT"), (ProteinSequence, "MAB"), (DnaSequence, " ACGT")],
)
def test_invalid_chars_rejected(seq_class, text):
    with pytest.raises(InvalidSymbolError):
        seq_class(text)


def test_display():
    seq = DnaSequence("ACGTTGCA")
    assert str(seq) == "ACGTTGCA"
    assert repr(seq) == "DnaSequence(ACGTTGCA)"
    assert len(seq) == 8
    assert "".join(seq) == "ACGTTGCA"
    assert seq[1] == "C"
    assert seq[2:4] == DnaSequence("GT")


def test_slice_empty():
    with pytest.raises(EmptySequenceError):
        DnaSequence("ACGT")[4:]


def test_equality_requires_same_type():
    assert DnaSequence("ACG") != RnaSequence("ACG")
    assert DnaSequence("ACG") != "ACG"
    assert len({DnaSequence("ACG"), DnaSequence("ACG"), RnaSequence("ACG")}) == 2


def test_ordering():
    seqs = [DnaSequence("TT"), DnaSequence("AC"), DnaSequence("AA")]
    assert [str(s) for s in sorted(seqs)] == ["AA", "AC", "TT"]
    with pytest.raises(TypeError):
        DnaSequence("A") < RnaSequence("A")


def test_contains():
    seq = DnaSequence("ACGT")
    assert "CG" in seq
    assert DnaSequence("GT") in seq
    with pytest.raises(TypeError):
        3 in seq


def test_counts():
    seq = DnaSequence(
        "AGCTTTTCATTCTGACTGCAACGGGCAATATGTCTCTGTGTGGATTAAAAAAAGAGTGTCTGATAGCAGC"
    )
    assert seq.counts() == {"A": 20, "C": 12, "G": 17, "T": 21}
    assert list(RnaSequence("UUU").counts()) == ["A", "C", "G", "U"]


def test_to_rna():
    seq = DnaSequence("GATGGAACTTGACTACGTAAATT")
    rna = seq.to_rna()
    assert isinstance(rna, RnaSequence)
    assert str(rna) == "GAUGGAACUUGACUACGUAAAUU"
    assert rna.to_dna() == seq


@pytest.mark.parametrize("text", DNA_SEQS)
def test_rna_round_trip_stable(text):
    rna = DnaSequence(text).to_rna()
    assert rna.to_dna().to_rna() == rna


def test_reverse_complement():
    seq = DnaSequence("AAAACCCGGT")
    assert str(seq.reverse_complement()) == "ACCGGGTTTT"
    assert str(seq.rc()) == "ACCGGGTTTT"
    assert str(seq.complement()) == "TTTTGGGCCA"
    assert isinstance(seq.complement(), DnaSequence)


@pytest.mark.parametrize("text", DNA_SEQS)
def test_reverse_complement_properties(text):
    seq = DnaSequence(text)
    assert seq.reverse_complement().reverse_complement() == seq
    for transformed in (seq.complement(), seq.reverse_complement()):
        assert len(transformed) == len(seq)
        assert DnaSequence.alphabet.is_valid(str(transformed))


def test_gc_content():
    assert DnaSequence("GGCC").gc_content() == 1.0
    assert DnaSequence("ATAT").gc_content() == 0.0
    assert RnaSequence("AGCU").gc_content() == 0.5


def test_hamming():
    a = DnaSequence("GAGCCTACTAACGGGAT")
    b = DnaSequence("CATCGTAATGACGGCCT")
    assert hamming_distance(a, b) == 7
    assert a.hamming_distance(b) == b.hamming_distance(a)
    assert a.hamming_distance(a) == 0


def test_hamming_length_mismatch():
    with pytest.raises(LengthMismatchError) as err:
        hamming_distance(DnaSequence("ACG"), DnaSequence("AC"))
    assert err.value.lengths == (3, 2)
    assert isinstance(err.value, ValueError)


def test_hamming_type_mismatch():
    with pytest.raises(TypeError):
        hamming_distance(DnaSequence("ACG"), RnaSequence("ACG"))


def test_motif_locations():
    seq = DnaSequence("GATATATGCATATACTT")
    assert seq.motif_locations(DnaSequence("ATAT")) == [1, 3, 9]
    assert motif_locations(seq, DnaSequence("GGGG")) == []


def test_motif_longer_than_seq():
    assert motif_locations(DnaSequence("AC"), DnaSequence("ACGT")) == []


def test_motif_type_mismatch():
    with pytest.raises(TypeError):
        motif_locations(DnaSequence("AC"), RnaSequence("A"))


def test_codons():
    got = [str(c) for c in DnaSequence("ATGGCCTA").codons()]
    assert got == ["ATG", "GCC"]


@pytest.mark.parametrize("seq", [DnaSequence("ATGGCCTAA"), RnaSequence("AUGGCCUAA")])
def test_to_protein_stop_excluded(seq):
    protein = seq.to_protein()
    assert isinstance(protein, ProteinSequence)
    assert str(protein) == "MA"


def test_to_protein_skips_to_start():
    # CCC is skipped, the start is at the second codon
    protein = DnaSequence("CCCATGGCCTAAGG").to_protein()
    assert protein == ProteinSequence("MA")


def test_to_protein_rosalind():
    rna = RnaSequence("AUGGCCAUGGCGCCCAGAACUGAGAUCAAUAGUACCCGUAUUAACGGGUGA")
    assert str(rna.to_protein()) == "MAMAPRTEINSTRING"


def test_to_protein_start_only_in_other_frame():
    with pytest.raises(NoValidProteinError):
        DnaSequence("CATGGCCTAA").to_protein()


@pytest.mark.parametrize("text", ["CCCGGG", "ATGGCC", "ATGGCCTA"])
def test_no_valid_protein(text):
    with pytest.raises(NoValidProteinError):
        DnaSequence(text).to_protein()


def test_translate_ungated():
    assert DnaSequence("CCCTAAATGG").translate() == "P*M"


def test_frames():
    seq = DnaSequence("CATGGCCTAA")
    frames = seq.frames()
    assert [f.offset for f in frames] == [0, 1, 2]
    assert str(frames[1]) == "ATGGCCTAA"
    assert str(frames[1].to_protein()) == "MA"
    assert [str(c) for c in frames[2].codons()] == ["TGG", "CCT"]
    assert frames[2].translate() == "WP"
    assert len(DnaSequence("AC").frames()) == 2


def test_open_frames_overlapping():
    seq = DnaSequence("ATGATGATG")
    assert [f.offset for f in seq.open_frames()] == [0, 3, 6]
    seq = RnaSequence("AUGAUG")
    assert [f.offset for f in seq.open_frames()] == [0, 3]
    assert DnaSequence("CCCC").open_frames() == []


def test_frame_is_a_view():
    seq = DnaSequence("CATGGCCTAA")
    frame = Frame(seq, 1)
    assert frame.parent is seq
    assert len(frame) == 9
    with pytest.raises(IndexError):
        Frame(seq, 10)


def test_splice():
    gene = DnaSequence(
        "ATGGTCTACATAGCTGACAAACAGCACGTAGCAATCGGTCGAATCTCGAGAGGCATATGGTCACATGATCGGTCGAGCGTGTTTCAAAGTTTGCGCCTAG"
    )
    introns = [DnaSequence("ATCGGTCGAA"), DnaSequence("ATCGGTCGAGCGTGT")]
    got = gene.splice(introns).to_protein()
    assert str(got) == "MVYIADKQHVASREAYGHMFKVCA"


def test_splice_junction_not_reexamined():
    # removing CC joins AA to GG, the new AG junction is not removed
    got = DnaSequence("AACCGG").splice([DnaSequence("CC"), DnaSequence("AG")])
    assert str(got) == "AAGG"


def test_splice_everything():
    with pytest.raises(EmptySequenceError):
        DnaSequence("ACAC").splice([DnaSequence("AC")])


def test_reverse_palindromes():
    seq = DnaSequence("TCAATGCATGCGGGTCTATATGCAT")
    expect = [(4, 6), (5, 4), (6, 6), (7, 4), (17, 4), (18, 4), (20, 6), (21, 4)]
    assert seq.reverse_palindromes() == expect


def test_transition_transversion_ratio():
    a = DnaSequence(
        "GCAACGCACAACGAAAACCCTTAGGGACTGGATTATTTCGTGATCGTTGTAGTTATTGGAAGTACGGGCATCAACCCAGTT"
    )
    b = DnaSequence(
        "TTATCTGACAAAGAAAGCCGTCAACGGCTGGATAATTTCGCGATCGTGCTGGTTACTGGCGGTACGAGTGTTCCTTTGGGT"
    )
    assert a.transition_transversion_ratio(b) == pytest.approx(1.21428571429)


def test_transition_transversion_edge_cases():
    assert transition_transversion_ratio(DnaSequence("AC"), DnaSequence("AC")) == 0.0
    assert math.isinf(transition_transversion_ratio(DnaSequence("AC"), DnaSequence("GT")))
    with pytest.raises(LengthMismatchError):
        transition_transversion_ratio(DnaSequence("AC"), DnaSequence("A"))


def test_protein_mass():
    assert ProteinSequence("SKADYEK").monoisotopic_mass() == pytest.approx(821.392, abs=1e-3)


def test_num_mrna_sources():
    assert ProteinSequence("MA").num_mrna_sources() == 12
    # 6 * 6 * 3
    assert ProteinSequence("LL").num_mrna_sources(modulo=None) == 108
    assert ProteinSequence("LL").num_mrna_sources(modulo=100) == 8


def test_overlap_edges():
    records = [
        ("Rosalind_0498", DnaSequence("AAATAAA")),
        ("Rosalind_2391", DnaSequence("AAATTTT")),
        ("Rosalind_2323", DnaSequence("TTTTCCC")),
        ("Rosalind_0442", DnaSequence("AAATCCC")),
        ("Rosalind_5013", DnaSequence("GGGTGGG")),
    ]
    assert overlap_edges(records, k=3) == [
        ("Rosalind_0498", "Rosalind_2391"),
        ("Rosalind_0498", "Rosalind_0442"),
        ("Rosalind_2391", "Rosalind_2323"),
    ]


def test_overlap_edges_invalid_k():
    with pytest.raises(ValueError):
        overlap_edges([], k=0)
