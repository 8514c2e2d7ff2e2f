"""Translates RNA or DNA codons to amino acids.

Notes
-----
The standard genetic code is represented with the NCBI 64 character
encoding, codons are ordered as the product of bases in TCAG order. The three
stop codons are kept distinct (ochre, amber, opal) but all display as 'X'.
"""

import collections
import contextlib
import dataclasses
import enum
import itertools
import typing

from florist.core.codon import (
    CODON_LENGTH,
    Codon,
    GeneticCodeError,
    InvalidCodonError,
)

StrORInt = typing.Union[str, int]

STOP_CHAR = "*"


class UnknownAminoAcidError(GeneticCodeError, ValueError):
    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"cannot reconstruct amino acid from {char!r}")


class AminoAcid(enum.Enum):
    """the 20 canonical amino acids plus the three stop signals"""

    ALANINE = "Ala"
    ARGININE = "Arg"
    ASPARAGINE = "Asn"
    ASPARTIC_ACID = "Asp"
    CYSTEINE = "Cys"
    GLUTAMIC_ACID = "Glu"
    GLUTAMINE = "Gln"
    GLYCINE = "Gly"
    HISTIDINE = "His"
    ISOLEUCINE = "Ile"
    LEUCINE = "Leu"
    LYSINE = "Lys"
    METHIONINE = "Met"
    PHENYLALANINE = "Phe"
    PROLINE = "Pro"
    SERINE = "Ser"
    THREONINE = "Thr"
    TRYPTOPHAN = "Trp"
    TYROSINE = "Tyr"
    VALINE = "Val"
    # stop signals
    OCHRE = "Ochre"
    AMBER = "Amber"
    OPAL = "Opal"

    @property
    def abbreviation(self) -> str:
        """single character IUPAC code, 'X' for all stops"""
        return _ABBREVIATIONS.get(self, "X")

    @property
    def monoisotopic_mass(self) -> float:
        """residue mass in daltons, stops have no mass"""
        return _MONOISOTOPIC_MASSES.get(self, 0.0)

    @property
    def is_stop(self) -> bool:
        return self in _STOPS

    @property
    def is_start(self) -> bool:
        return self is AminoAcid.METHIONINE

    @property
    def num_codons(self) -> int:
        """number of codons in the standard code that decode to self"""
        return len(DEFAULT.codons_for(self))

    @classmethod
    def from_abbreviation(cls, char: str) -> "AminoAcid":
        """returns the amino acid for a single character code

        Notes
        -----
        'X' is ambiguous between the stops and raises UnknownAminoAcidError.
        """
        try:
            return _FROM_ABBREVIATION[char]
        except (KeyError, TypeError):
            raise UnknownAminoAcidError(char) from None

    def __str__(self) -> str:
        return self.abbreviation


_STOPS = frozenset((AminoAcid.OCHRE, AminoAcid.AMBER, AminoAcid.OPAL))

_ABBREVIATIONS = {
    AminoAcid.ALANINE: "A",
    AminoAcid.ARGININE: "R",
    AminoAcid.ASPARAGINE: "N",
    AminoAcid.ASPARTIC_ACID: "D",
    AminoAcid.CYSTEINE: "C",
    AminoAcid.GLUTAMIC_ACID: "E",
    AminoAcid.GLUTAMINE: "Q",
    AminoAcid.GLYCINE: "G",
    AminoAcid.HISTIDINE: "H",
    AminoAcid.ISOLEUCINE: "I",
    AminoAcid.LEUCINE: "L",
    AminoAcid.LYSINE: "K",
    AminoAcid.METHIONINE: "M",
    AminoAcid.PHENYLALANINE: "F",
    AminoAcid.PROLINE: "P",
    AminoAcid.SERINE: "S",
    AminoAcid.THREONINE: "T",
    AminoAcid.TRYPTOPHAN: "W",
    AminoAcid.TYROSINE: "Y",
    AminoAcid.VALINE: "V",
}
_FROM_ABBREVIATION = {v: k for k, v in _ABBREVIATIONS.items()}

# monoisotopic residue masses
_MONOISOTOPIC_MASSES = {
    AminoAcid.ALANINE: 71.03711,
    AminoAcid.ARGININE: 156.10111,
    AminoAcid.ASPARAGINE: 114.04293,
    AminoAcid.ASPARTIC_ACID: 115.02694,
    AminoAcid.CYSTEINE: 103.00919,
    AminoAcid.GLUTAMIC_ACID: 129.04259,
    AminoAcid.GLUTAMINE: 128.05858,
    AminoAcid.GLYCINE: 57.02146,
    AminoAcid.HISTIDINE: 137.05891,
    AminoAcid.ISOLEUCINE: 113.08406,
    AminoAcid.LEUCINE: 113.08406,
    AminoAcid.LYSINE: 128.09496,
    AminoAcid.METHIONINE: 131.04049,
    AminoAcid.PHENYLALANINE: 147.06841,
    AminoAcid.PROLINE: 97.05276,
    AminoAcid.SERINE: 87.03203,
    AminoAcid.THREONINE: 101.04768,
    AminoAcid.TRYPTOPHAN: 186.07931,
    AminoAcid.TYROSINE: 163.06333,
    AminoAcid.VALINE: 99.06841,
}

# stop codons are identified by codon, the NCBI encoding only has '*'
_STOP_MARKERS = {
    "TAA": AminoAcid.OCHRE,
    "TAG": AminoAcid.AMBER,
    "TGA": AminoAcid.OPAL,
}

_bases = "TCAG"
_dna_codons = tuple(map("".join, itertools.product(_bases, repeat=CODON_LENGTH)))


def _to_rna(codon: str) -> str:
    return codon.replace("T", "U")


def _make_mappings(
    code_sequence: str,
) -> typing.Tuple[typing.Dict[str, AminoAcid], typing.Dict[AminoAcid, typing.Set[str]]]:
    """makes codon to amino acid and amino acid to codon mappings

    Parameters
    ----------
    code_sequence
        64-character string containing NCBI representation of the genetic code.

    Returns
    -------
    codon to amino acid mapping with both DNA and RNA codons as keys,
    the reverse mapping with DNA codons as values
    """
    if len(code_sequence) != len(_dna_codons):
        msg = f"code_sequence has length {len(code_sequence)}, expected 64"
        raise GeneticCodeError(msg)

    codon_to_aa = {}
    aa_to_codon = collections.defaultdict(set)
    for codon, char in zip(_dna_codons, code_sequence):
        if char == STOP_CHAR:
            aa = _STOP_MARKERS[codon]
        else:
            aa = AminoAcid.from_abbreviation(char)
        codon_to_aa[codon] = aa
        codon_to_aa[_to_rna(codon)] = aa
        aa_to_codon[aa].add(codon)
    return codon_to_aa, dict(aa_to_codon)


@dataclasses.dataclass(eq=False)
class GeneticCode:
    """Holds codon to amino acid mapping, and vice versa."""

    ID: int
    name: str
    ncbi_code_sequence: str
    _codon_to_aa: typing.Dict[str, AminoAcid] = dataclasses.field(
        init=False, repr=False
    )
    _aa_to_codon: typing.Dict[AminoAcid, typing.Set[str]] = dataclasses.field(
        init=False, repr=False
    )

    def __post_init__(self) -> None:
        self._codon_to_aa, self._aa_to_codon = _make_mappings(self.ncbi_code_sequence)

    def __hash__(self) -> int:
        return hash(self.name)

    def __eq__(self, other: object) -> bool:
        return self.name == getattr(other, "name", None)

    @property
    def stop_codons(self) -> typing.Set[str]:
        return {c for c in _dna_codons if self._codon_to_aa[c].is_stop}

    @property
    def start_codons(self) -> typing.Set[str]:
        return set(self._aa_to_codon[AminoAcid.METHIONINE])

    @property
    def sense_codons(self) -> typing.Tuple[str, ...]:
        return tuple(c for c in _dna_codons if not self._codon_to_aa[c].is_stop)

    def decode(self, codon: Codon | str) -> AminoAcid:
        """returns the amino acid (or stop signal) encoded by codon

        Raises
        ------
        InvalidCodonError if codon is not in the table
        """
        key = str(codon)
        try:
            return self._codon_to_aa[key]
        except KeyError:
            msg = f"codon {key!r} is unknown"
            raise InvalidCodonError(msg) from None

    def codons_for(self, aa: AminoAcid | str) -> typing.Set[str]:
        """returns the DNA codons encoding aa"""
        if isinstance(aa, str):
            aa = AminoAcid.from_abbreviation(aa)
        return set(self._aa_to_codon.get(aa, set()))

    def __getitem__(self, item: Codon | str) -> AminoAcid | typing.Set[str]:
        """Returns amino acid corresponding to codon, or codons for an aa."""
        item = str(item)
        if len(item) == 1:  # amino acid
            return self.codons_for(item)

        if len(item) != CODON_LENGTH:
            raise InvalidCodonError(f"Codon or aa {item} has wrong length")

        return self.decode(item)

    def is_stop(self, codon: Codon | str) -> bool:
        """Returns True if codon is a stop codon, False otherwise."""
        return self.decode(codon).is_stop

    def translate(self, seq: str, start: int = 0) -> str:
        """translates every complete codon of seq, from start

        Notes
        -----
        Unlike the start-codon gated translation of sequence objects, this
        neither waits for a start nor halts at a stop; stops are shown as '*'.
        """
        seq = seq[start:]
        if diff := len(seq) % CODON_LENGTH:
            seq = seq[:-diff]

        aas = (
            self.decode(seq[i : i + CODON_LENGTH])
            for i in range(0, len(seq), CODON_LENGTH)
        )
        return "".join(STOP_CHAR if aa.is_stop else aa.abbreviation for aa in aas)

    def to_table(self) -> typing.List[typing.Tuple[str, str, str]]:
        """returns rows of (aa name, IUPAC code, comma separated codons)"""
        rows = []
        for aa in AminoAcid:
            codons = ",".join(sorted(self._aa_to_codon.get(aa, ())))
            rows.append((aa.name.replace("_", " ").title(), aa.abbreviation, codons))
        return rows


_mapping_cols = "ncbi_code_sequence", "ID", "name"
code_mapping = (
    (
        "FFLLSSSSYY**CC*WLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG",
        1,
        "Standard",
    ),
)
_CODES = {}
for mapping in code_mapping:
    code = GeneticCode(**dict(zip(_mapping_cols, mapping)))
    _CODES[code.ID] = code
    _CODES[code.name] = code
    _CODES[code] = code


DEFAULT = _CODES[1]


def get_code(code_id: StrORInt = 1) -> GeneticCode:
    """returns the genetic code

    Parameters
    ----------
    code_id
        genetic code identifier, name, number or string(number), defaults to
        standard genetic code
    """
    if code_id is None:
        code_id = 1

    with contextlib.suppress(ValueError, TypeError):
        code_id = int(code_id)

    if code_id not in _CODES:
        raise GeneticCodeError(f"Unknown genetic code {code_id}")
    return _CODES[code_id]


def available_codes() -> typing.List[typing.Tuple[int, str]]:
    """returns (Code ID, Name) of the available genetic codes"""
    return [(k, code.name) for k, code in _CODES.items() if isinstance(k, int)]
