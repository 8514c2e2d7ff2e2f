"""Codons, ordered triples of nucleotides from a single alphabet."""

import dataclasses
import typing

from florist.core.alphabet import DNA_ALPHABET, RNA_ALPHABET, CharAlphabet

CODON_LENGTH = 3
_NUCLEIC_ALPHABETS = DNA_ALPHABET, RNA_ALPHABET


class GeneticCodeError(Exception):
    pass


class InvalidCodonError(KeyError, GeneticCodeError):
    def __str__(self) -> str:
        # KeyError quotes its argument
        return str(self.args[0]) if self.args else ""


@dataclasses.dataclass(frozen=True)
class Codon:
    """three symbols from a nucleic acid alphabet

    Notes
    -----
    Use Codon.from_str() for untrusted input. Codon.unchecked() is for
    codons carved out of an already validated sequence.
    """

    first: str
    second: str
    third: str
    alphabet: CharAlphabet = dataclasses.field(default=DNA_ALPHABET, repr=False)

    @classmethod
    def unchecked(
        cls, first: str, second: str, third: str, alphabet: CharAlphabet
    ) -> "Codon":
        return cls(first, second, third, alphabet)

    @classmethod
    def from_chars(
        cls, chars: typing.Sequence[str], alphabet: CharAlphabet = DNA_ALPHABET
    ) -> "Codon":
        """validated construction

        Parameters
        ----------
        chars
            a length 3 series of characters
        alphabet
            the nucleic acid alphabet all characters must belong to

        Raises
        ------
        InvalidCodonError if alphabet is not the DNA or RNA alphabet, chars is
        not of length 3, or contains a character outside alphabet
        """
        if alphabet not in _NUCLEIC_ALPHABETS:
            msg = f"codons are not defined for the {alphabet.name} alphabet"
            raise InvalidCodonError(msg)

        if len(chars) != CODON_LENGTH:
            msg = f"codon {''.join(chars)!r} has wrong length {len(chars)}"
            raise InvalidCodonError(msg)

        for char in chars:
            if char not in alphabet:
                msg = f"invalid character {char!r} in {alphabet.name} codon"
                raise InvalidCodonError(msg)

        return cls(*chars, alphabet)

    @classmethod
    def from_str(cls, text: str, alphabet: CharAlphabet | None = None) -> "Codon":
        """validated construction from text

        Notes
        -----
        If alphabet is None, it is RNA when text contains a 'U', DNA otherwise.
        """
        if alphabet is None:
            alphabet = RNA_ALPHABET if "U" in text else DNA_ALPHABET
        return cls.from_chars(tuple(text), alphabet)

    def __str__(self) -> str:
        return f"{self.first}{self.second}{self.third}"

    def __iter__(self) -> typing.Iterator[str]:
        yield from (self.first, self.second, self.third)

    def __len__(self) -> int:
        return CODON_LENGTH


def make_codon(chars: typing.Sequence[str], moltype: str = "dna") -> Codon:
    """returns a validated Codon

    Parameters
    ----------
    chars
        three nucleotide characters
    moltype
        'dna' or 'rna'
    """
    alphabets = {"dna": DNA_ALPHABET, "rna": RNA_ALPHABET}
    try:
        alphabet = alphabets[moltype.lower()]
    except KeyError as err:
        msg = f"codons are only defined for {list(alphabets)}, not {moltype!r}"
        raise ValueError(msg) from err
    return Codon.from_chars(tuple(chars), alphabet)


def iter_codons(
    seq: str, alphabet: CharAlphabet, start: int = 0
) -> typing.Iterator[Codon]:
    """yields successive non-overlapping codons from seq beginning at start

    Notes
    -----
    seq must already be validated against alphabet. A trailing partial
    codon is ignored.
    """
    end = start + (len(seq) - start) // CODON_LENGTH * CODON_LENGTH
    for i in range(start, end, CODON_LENGTH):
        yield Codon.unchecked(seq[i], seq[i + 1], seq[i + 2], alphabet)
