"""Contains classes that represent biological sequence data.

Notes
-----
Sequences are immutable, non-empty and contain only characters from the
alphabet of their class. The classes are usually instantiated via
MolType.make_seq() or florist.make_seq().
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Iterator
from functools import total_ordering
from typing import TYPE_CHECKING, ClassVar

import numpy

from florist.core import alphabet as fl_alphabet
from florist.core import genetic_code as fl_genetic_code
from florist.core.codon import Codon, iter_codons

if TYPE_CHECKING:  # pragma: no cover
    from florist.core.moltype import MolType

_TRANSITIONS = frozenset((frozenset("AG"), frozenset("CT")))


class SequenceError(Exception):
    """base class for failures of operations on valid sequences"""


class LengthMismatchError(SequenceError, ValueError):
    def __init__(self, first: int, second: int) -> None:
        self.lengths = first, second
        super().__init__(f"length mismatch: {first} != {second}")


class EmptyCollectionError(SequenceError, ValueError):
    pass


class NoValidProteinError(SequenceError):
    pass


def _check_same_type(first: Sequence, second: Sequence) -> None:
    if type(first) is not type(second):
        msg = (
            f"cannot compare {type(first).__name__!r} with "
            f"{type(second).__name__!r}"
        )
        raise TypeError(msg)


@total_ordering
class Sequence:
    """Holds a validated, immutable sequence of characters.

    Notes
    -----
    The sequence string is validated against the class alphabet on
    construction. Results of transformations of an already valid sequence are
    constructed with _unchecked() to avoid a second validation pass.
    """

    __slots__ = ("_seq",)

    alphabet: ClassVar[fl_alphabet.CharAlphabet]
    _moltype_name: ClassVar[str]

    def __init__(self, seq: str) -> None:
        """
        Parameters
        ----------
        seq
            the sequence string, must be non-empty with every character a
            member of the class alphabet

        Raises
        ------
        EmptySequenceError, InvalidSymbolError
        """
        self._seq = self.alphabet.validate(seq)

    @classmethod
    def from_str(cls, text: str) -> Sequence:
        """parse a sequence from text, identical rules to the constructor"""
        return cls(text)

    @classmethod
    def _unchecked(cls, seq: str) -> Sequence:
        obj = cls.__new__(cls)
        obj._seq = seq
        return obj

    @property
    def moltype(self) -> MolType:
        from florist.core.moltype import get_moltype

        return get_moltype(self._moltype_name)

    def __str__(self) -> str:
        return self._seq

    def __repr__(self) -> str:
        seq = f"{self._seq[:10]}...{self._seq[-5:]}" if len(self) > 20 else self._seq
        return f"{self.__class__.__name__}({seq})"

    def __len__(self) -> int:
        return len(self._seq)

    def __iter__(self) -> Iterator[str]:
        return iter(self._seq)

    def __getitem__(self, index: int | slice) -> str | Sequence:
        if isinstance(index, slice):
            # slicing an empty region raises EmptySequenceError
            return self.__class__(self._seq[index])
        return self._seq[index]

    def __contains__(self, other: object) -> bool:
        if not isinstance(other, (str, Sequence)):
            msg = f"Must use type str or Sequence for __contains__, got {type(other)}."
            raise TypeError(msg)
        return str(other) in self._seq

    def __lt__(self, other: Sequence) -> bool:
        """compares based on the sequence string."""
        _check_same_type(self, other)
        return self._seq < other._seq

    def __eq__(self, other: object) -> bool:
        """equal if the same class with the same symbols"""
        if type(self) is not type(other):
            return False
        return self._seq == other._seq

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._seq))

    def __array__(self, dtype=None, copy=None) -> numpy.ndarray:
        result = self.alphabet.to_indices(self._seq)
        return result if dtype is None else result.astype(dtype)

    def to_array(self) -> numpy.ndarray:
        """returns the sequence as alphabet indices"""
        return numpy.array(self)

    def count(self, item: str) -> int:
        """count() delegates to the sequence string."""
        return self._seq.count(item)

    def counts(self) -> dict[str, int]:
        """returns {symbol: count} for every alphabet symbol, in alphabet order"""
        counts = numpy.bincount(self.to_array(), minlength=len(self.alphabet))
        return {char: int(n) for char, n in zip(self.alphabet, counts)}

    def hamming_distance(self, other: Sequence) -> int:
        """number of positions where self and other differ"""
        return hamming_distance(self, other)

    def motif_locations(self, motif: Sequence) -> list[int]:
        """0-based start of every occurrence of motif, overlaps included"""
        return motif_locations(self, motif)


class NucleicAcidSequence(Sequence):
    """shared behaviour of DNA and RNA sequences"""

    __slots__ = ()

    start_text: ClassVar[str]

    def gc_content(self) -> float:
        """fraction of positions that are G or C"""
        return (self._seq.count("G") + self._seq.count("C")) / len(self)

    def codons(self) -> Iterator[Codon]:
        """non-overlapping codons from the first position"""
        return iter_codons(self._seq, self.alphabet)

    def to_protein(
        self, gc: fl_genetic_code.GeneticCode | int | str | None = None
    ) -> ProteinSequence:
        """translate from the first start codon up to, not including, a stop

        Parameters
        ----------
        gc
            valid input to florist.get_code(), defaults to the standard code

        Raises
        ------
        NoValidProteinError if there is no start codon in frame or the
        translation from the start never reaches a stop codon

        Notes
        -----
        Codons preceding the first start codon are skipped. Reading frames
        other than the first are accessed via frames() or open_frames().
        """
        return _translate_from(self, 0, gc)

    def translate(self, gc: fl_genetic_code.GeneticCode | int | str | None = None) -> str:
        """ungated translation of every complete codon, stops shown as '*'"""
        return fl_genetic_code.get_code(gc).translate(self._seq)

    def frames(self) -> list[Frame]:
        """the reading frames at offsets 0, 1 and 2"""
        return [Frame(self, offset) for offset in range(min(3, len(self)))]

    def open_frames(self) -> list[Frame]:
        """a frame at every occurrence of the start codon, overlaps included"""
        seq = self._seq
        size = len(self.start_text)
        return [
            Frame(self, i)
            for i in range(len(seq) - size + 1)
            if seq.startswith(self.start_text, i)
        ]


class DnaSequence(NucleicAcidSequence):
    """Holds the standard DNA sequence."""

    __slots__ = ()

    alphabet = fl_alphabet.DNA_ALPHABET
    start_text = "ATG"
    _moltype_name = "dna"

    def complement(self) -> DnaSequence:
        """pairs A with T and C with G, preserving order"""
        return self._unchecked(self.moltype.complement(self._seq))

    def reverse_complement(self) -> DnaSequence:
        """Converts a nucleic acid sequence to its reverse complement."""
        return self._unchecked(self.moltype.rc(self._seq))

    rc = reverse_complement

    def to_rna(self) -> RnaSequence:
        """Returns copy of self as RNA."""
        return RnaSequence._unchecked(self._seq.replace("T", "U"))

    def splice(self, introns: list[DnaSequence]) -> DnaSequence:
        """returns self with every occurrence of each intron removed

        Notes
        -----
        Introns are removed in the order given. Removing one intron never
        creates a new occurrence of a later one across the junction.

        Raises
        ------
        EmptySequenceError if nothing remains
        """
        seq = self._seq
        for intron in introns:
            _check_same_type(self, intron)
            seq = seq.replace(str(intron), "-")
        return self.__class__(seq.replace("-", ""))

    def transition_transversion_ratio(self, other: DnaSequence) -> float:
        return transition_transversion_ratio(self, other)

    def reverse_palindromes(
        self, min_length: int = 4, max_length: int = 12
    ) -> list[tuple[int, int]]:
        """locates substrings equal to their own reverse complement

        Parameters
        ----------
        min_length, max_length
            inclusive bounds on palindrome length

        Returns
        -------
        list of (1-based position, length), ordered by position then length
        """
        seq = self._seq
        rc = self.moltype.rc
        result = []
        for start in range(len(seq)):
            for length in range(min_length, max_length + 1):
                end = start + length
                if end > len(seq):
                    break
                sub = seq[start:end]
                if sub == rc(sub):
                    result.append((start + 1, length))
        return result


class RnaSequence(NucleicAcidSequence):
    """Holds the standard RNA sequence."""

    __slots__ = ()

    alphabet = fl_alphabet.RNA_ALPHABET
    start_text = "AUG"
    _moltype_name = "rna"

    def to_dna(self) -> DnaSequence:
        """Returns copy of self as DNA."""
        return DnaSequence._unchecked(self._seq.replace("U", "T"))


class ProteinSequence(Sequence):
    """Holds the standard protein sequence."""

    __slots__ = ()

    alphabet = fl_alphabet.PROTEIN_ALPHABET
    _moltype_name = "protein"

    def amino_acids(self) -> list[fl_genetic_code.AminoAcid]:
        return [fl_genetic_code.AminoAcid.from_abbreviation(c) for c in self._seq]

    def monoisotopic_mass(self) -> float:
        """sum of the monoisotopic residue masses"""
        return math.fsum(aa.monoisotopic_mass for aa in self.amino_acids())

    def num_mrna_sources(self, modulo: int | None = 1_000_000) -> int:
        """number of distinct mRNAs that could encode self, including a stop

        Parameters
        ----------
        modulo
            the result is reduced modulo this number, None for the exact value
        """
        num_stops = len(fl_genetic_code.DEFAULT.stop_codons)
        total = num_stops
        for aa in self.amino_acids():
            total *= aa.num_codons
            if modulo:
                total %= modulo
        return total % modulo if modulo else total


@dataclasses.dataclass(frozen=True)
class Frame:
    """a read-only view of a nucleic acid sequence from offset to its end

    Notes
    -----
    The parent sequence is referenced, not copied.
    """

    parent: NucleicAcidSequence
    offset: int

    def __post_init__(self) -> None:
        if not 0 <= self.offset < len(self.parent):
            msg = f"offset {self.offset} outside sequence of length {len(self.parent)}"
            raise IndexError(msg)

    def __str__(self) -> str:
        return self.parent._seq[self.offset :]

    def __len__(self) -> int:
        return len(self.parent) - self.offset

    def codons(self) -> Iterator[Codon]:
        """non-overlapping codons from the start of the frame"""
        return iter_codons(self.parent._seq, self.parent.alphabet, start=self.offset)

    def to_protein(
        self, gc: fl_genetic_code.GeneticCode | int | str | None = None
    ) -> ProteinSequence:
        """start codon gated translation of the frame, see
        NucleicAcidSequence.to_protein()"""
        return _translate_from(self.parent, self.offset, gc)

    def translate(self, gc: fl_genetic_code.GeneticCode | int | str | None = None) -> str:
        return fl_genetic_code.get_code(gc).translate(self.parent._seq, start=self.offset)


def _translate_from(
    seq: NucleicAcidSequence,
    start: int,
    gc: fl_genetic_code.GeneticCode | int | str | None,
) -> ProteinSequence:
    code = fl_genetic_code.get_code(gc)
    protein = []
    started = False
    for codon in iter_codons(seq._seq, seq.alphabet, start=start):
        aa = code.decode(codon)
        if not started:
            started = aa.is_start
            if not started:
                continue

        if aa.is_stop:
            return ProteinSequence._unchecked("".join(protein))

        protein.append(aa.abbreviation)

    reason = "no stop codon after the start" if started else "no start codon"
    msg = f"no valid protein, {reason} in frame from {start}"
    raise NoValidProteinError(msg)


def hamming_distance(first: Sequence, second: Sequence) -> int:
    """number of positions at which two sequences differ

    Raises
    ------
    TypeError if the sequences are of different classes,
    LengthMismatchError if they have different lengths
    """
    _check_same_type(first, second)
    if len(first) != len(second):
        raise LengthMismatchError(len(first), len(second))

    return int((first.to_array() != second.to_array()).sum())


def motif_locations(seq: Sequence, motif: Sequence) -> list[int]:
    """0-based start of every occurrence of motif in seq, overlaps included

    Notes
    -----
    A motif longer than seq has no locations.
    """
    _check_same_type(seq, motif)
    haystack, needle = str(seq), str(motif)
    return [
        i
        for i in range(len(haystack) - len(needle) + 1)
        if haystack.startswith(needle, i)
    ]


def transition_transversion_ratio(first: DnaSequence, second: DnaSequence) -> float:
    """ratio of transitions (A<->G, C<->T) to transversions between two
    aligned DNA sequences

    Notes
    -----
    With no transversions, returns inf if there are transitions, 0.0 if
    the sequences are identical.
    """
    _check_same_type(first, second)
    if len(first) != len(second):
        raise LengthMismatchError(len(first), len(second))

    transitions = transversions = 0
    for a, b in zip(str(first), str(second)):
        if a == b:
            continue
        if frozenset((a, b)) in _TRANSITIONS:
            transitions += 1
        else:
            transversions += 1

    if transversions:
        return transitions / transversions
    return math.inf if transitions else 0.0


def overlap_edges(
    records: list[tuple[str, Sequence]], k: int = 3
) -> list[tuple[str, str]]:
    """directed edges of the overlap graph of labelled sequences

    Parameters
    ----------
    records
        series of (label, sequence)
    k
        overlap length

    Returns
    -------
    (label_s, label_t) for each pair of distinct records where the length k
    suffix of s equals the length k prefix of t, in input order
    """
    if k < 1:
        raise ValueError(f"overlap length must be >= 1, not {k}")

    edges = []
    for i, (label_s, seq_s) in enumerate(records):
        suffix = str(seq_s)[-k:]
        for j, (label_t, seq_t) in enumerate(records):
            if i != j and len(seq_s) >= k and str(seq_t)[:k] == suffix:
                edges.append((label_s, label_t))
    return edges
