import logging

import numpy

from florist.core.sequence import (
    EmptyCollectionError,
    LengthMismatchError,
    Sequence,
)

logger = logging.getLogger(__name__)


class Consensus:
    """majority sequence of a set of equal length sequences, with the
    per position counts of every alphabet symbol

    Notes
    -----
    Counts are stored as a (symbols x positions) integer array, rows in
    alphabet order. All standard alphabets are sorted, so the first row
    holding the maximum count at a position is the alphabetically smallest
    symbol.
    """

    def __init__(self, sequence: Sequence, counts: numpy.ndarray):
        self._sequence = sequence
        self._counts = counts

    @classmethod
    def from_seqs(cls, seqs) -> "Consensus":
        """
        Parameters
        ----------
        seqs
            series of sequences of one class, all the same length

        Raises
        ------
        EmptyCollectionError if seqs is empty, LengthMismatchError if lengths
        differ, TypeError if classes differ
        """
        seqs = list(seqs)
        if not seqs:
            raise EmptyCollectionError("cannot make consensus of zero sequences")

        first = seqs[0]
        seq_class = type(first)
        for seq in seqs[1:]:
            if type(seq) is not seq_class:
                msg = f"mixed sequence types {seq_class.__name__!r} and {type(seq).__name__!r}"
                raise TypeError(msg)
            if len(seq) != len(first):
                raise LengthMismatchError(len(first), len(seq))

        alphabet = seq_class.alphabet
        indices = numpy.array([seq.to_array() for seq in seqs])
        num_pos = indices.shape[1]
        counts = numpy.zeros((len(alphabet), num_pos), dtype=int)
        positions = numpy.tile(numpy.arange(num_pos), len(seqs))
        numpy.add.at(counts, (indices.ravel(), positions), 1)

        # argmax returns the first maximum, i.e. the smallest symbol on a tie
        majority = alphabet.from_indices(counts.argmax(axis=0))
        logger.debug("consensus of %d sequences of length %d", len(seqs), num_pos)
        return cls(seq_class._unchecked(majority), counts)

    @property
    def sequence(self) -> Sequence:
        return self._sequence

    @property
    def counts(self) -> numpy.ndarray:
        """symbols x positions array of counts"""
        return self._counts.copy()

    @property
    def frequencies(self) -> dict[str, list[int]]:
        """{symbol: per position counts} for every alphabet symbol"""
        alphabet = self._sequence.alphabet
        return {char: row.tolist() for char, row in zip(alphabet, self._counts)}

    def __len__(self) -> int:
        return len(self._sequence)

    def __str__(self) -> str:
        lines = [str(self._sequence)]
        for char, row in self.frequencies.items():
            lines.append(f"{char}: {' '.join(map(str, row))}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._sequence!r})"


def make_consensus(seqs) -> Consensus:
    """returns the Consensus of seqs, see Consensus.from_seqs()"""
    return Consensus.from_seqs(seqs)
