import pytest

import florist
from florist.core import moltype as fl_moltype
from florist.core import sequence as fl_sequence


@pytest.mark.parametrize(
    "name,seq_class",
    [
        ("dna", fl_sequence.DnaSequence),
        ("DNA", fl_sequence.DnaSequence),
        ("rna", fl_sequence.RnaSequence),
        ("protein", fl_sequence.ProteinSequence),
    ],
)
def test_make_seq(name, seq_class):
    mt = fl_moltype.get_moltype(name)
    seq = mt.make_seq("ACG")
    assert type(seq) is seq_class
    assert mt.seq_class is seq_class


def test_get_moltype_instance():
    assert fl_moltype.get_moltype(fl_moltype.DNA) is fl_moltype.DNA


@pytest.mark.parametrize("name", ["text", "", None])
def test_get_moltype_unknown(name):
    with pytest.raises(ValueError):
        fl_moltype.get_moltype(name)


def test_available_moltypes():
    got = fl_moltype.available_moltypes()
    assert [row[0] for row in got] == ["dna", "protein", "rna"]
    assert ("dna", 4, "ACGT") in got


def test_complement():
    assert fl_moltype.DNA.complement("AACGT") == "TTGCA"
    assert fl_moltype.DNA.rc("AACGT") == "ACGTT"
    assert fl_moltype.RNA.complement("AACGU") == "UUGCA"


def test_protein_cannot_complement():
    assert not fl_moltype.PROTEIN.is_nucleic()
    with pytest.raises(fl_moltype.MolTypeError):
        fl_moltype.PROTEIN.complement("ACD")


def test_moltype_display():
    assert str(fl_moltype.RNA) == "rna"
    assert fl_moltype.RNA.label == "rna"
    assert list(fl_moltype.RNA) == ["A", "C", "G", "U"]
    assert len(fl_moltype.PROTEIN) == 20
    assert fl_moltype.DNA.start_text == "ATG"
    assert fl_moltype.RNA.start_text == "AUG"


def test_top_level_make_seq():
    seq = florist.make_seq("ACGU", moltype="rna")
    assert isinstance(seq, fl_sequence.RnaSequence)
    assert florist.get_moltype("dna") is florist.DNA
