from collections.abc import Sized
from collections.abc import Sequence as PySeq

import numpy
import numpy.typing as npt

NumpyIntArrayType = npt.NDArray[numpy.integer]


class AlphabetError(ValueError):
    """base class for failures of alphabet validation"""


class EmptySequenceError(AlphabetError):
    def __init__(self, alphabet_name: str = "") -> None:
        self.alphabet_name = alphabet_name
        prefix = f"{alphabet_name} " if alphabet_name else ""
        super().__init__(f"empty {prefix}sequence")


class InvalidSymbolError(AlphabetError):
    """a character outside the alphabet was encountered"""

    def __init__(self, char: str, position: int, alphabet_name: str = "") -> None:
        self.char = char
        self.position = position
        self.alphabet_name = alphabet_name
        suffix = f" for {alphabet_name}" if alphabet_name else ""
        super().__init__(f"invalid character {char!r} at position {position}{suffix}")


class convert_alphabet:
    """convert one character set into another"""

    def __init__(
        self,
        src: bytes,
        dest: bytes,
        delete: bytes | None = None,
    ) -> None:
        """
        Parameters
        ----------
        src
            unique series of characters
        dest
            characters in src will be mapped to these in order
        delete
            characters to be deleted from the result

        Examples
        --------
        >>> dna_to_ry = convert_alphabet(src=b"TCAG", dest=b"YYRR")
        >>> dna_to_ry(b"GCTA")
        b'RYYR'
        """
        if len(src) != len(dest):
            msg = f"length of src={len(src)} != length of dest {len(dest)}"
            raise ValueError(msg)

        consistent_words(src, length=1)
        self._table = b"".maketrans(src, dest)
        self._delete = delete or b""

    def __call__(self, seq: bytes) -> bytes:
        return seq.translate(self._table, delete=self._delete)


def get_array_type(num_elements: int) -> type[numpy.unsignedinteger]:
    """Returns the smallest numpy integer dtype that can contain elements
    within num_elements.
    """
    if num_elements <= 2**8:
        return numpy.uint8
    if num_elements <= 2**16:
        return numpy.uint16

    msg = f"{num_elements} is too big for a character alphabet"
    raise NotImplementedError(msg)


def consistent_words(words: PySeq[Sized] | bytes, length: int | None = None) -> None:
    """make sure all alphabet elements are unique and have the same length"""
    if not words:
        msg = "no words provided"
        raise ValueError(msg)

    if len(set(words)) != len(words):
        msg = f"duplicate elements in {words}"
        raise ValueError(msg)

    lengths = {1} if isinstance(words, bytes) else {len(w) for w in words}
    if len(lengths) != 1:
        msg = f"mixed lengths {lengths} in {words}"
        raise ValueError(msg)
    actual_length = next(iter(lengths))
    if length and actual_length != length:
        msg = f"word length {actual_length} does not match expected {length}"
        raise ValueError(msg)


class bytes_to_array:
    """wrapper around convert_alphabet. It defines a linear mapping from provided
    characters to uint8. The resulting object is callable, taking a bytes object
    and returning a numpy array."""

    def __init__(self, chars: bytes, dtype: type[numpy.unsignedinteger]) -> None:
        self._converter = convert_alphabet(chars, bytes(bytearray(range(len(chars)))))
        self.dtype = dtype

    def __call__(self, seq: bytes) -> NumpyIntArrayType:
        b = self._converter(seq)
        return numpy.array(memoryview(b), dtype=self.dtype)


class array_to_bytes:
    """the inverse of bytes_to_array"""

    def __init__(self, chars: bytes) -> None:
        self._converter = convert_alphabet(bytes(bytearray(range(len(chars)))), chars)

    def __call__(self, seq: NumpyIntArrayType) -> bytes:
        return self._converter(seq.astype(numpy.uint8).tobytes())


class CharAlphabet(tuple):
    """representing a fundamental, fixed, monomer character set.

    Notes
    -----
    The order of characters defines their index. All the standard alphabets
    are in alphabetical order, so index order is also display order.
    """

    def __new__(cls, chars: str, name: str = "") -> "CharAlphabet":
        """
        Parameters
        ----------
        chars
            the characters in the alphabet
        name
            label used in error messages, e.g. 'DNA'
        """
        if not chars:
            msg = f"cannot create empty {cls.__name__!r}"
            raise ValueError(msg)

        consistent_words(chars, length=1)
        return tuple.__new__(cls, chars)

    def __init__(self, chars: str, name: str = "") -> None:
        self.name = name
        self.dtype = get_array_type(len(self))
        self._chars = frozenset(self)
        # deletes every valid character, whatever remains is invalid
        self._strip_valid = str.maketrans("", "", "".join(self))
        byte_chars = self.as_bytes()
        self._bytes2arr = bytes_to_array(byte_chars, dtype=self.dtype)
        self._arr2bytes = array_to_bytes(byte_chars)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({''.join(self)!r}, name={self.name!r})"

    def __reduce__(self):
        return self.__class__, ("".join(self), self.name)

    def __contains__(self, char: object) -> bool:
        return char in self._chars

    def __hash__(self) -> int:
        return hash(("".join(self), self.name))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CharAlphabet):
            return tuple(self) == tuple(other) and self.name == other.name
        return tuple.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        return not self == other

    def as_bytes(self) -> bytes:
        """returns self as a byte string"""
        return "".join(self).encode("utf8")

    def validate(self, seq: str) -> str:
        """returns seq if it is a non-empty string composed only of alphabet
        characters

        Raises
        ------
        EmptySequenceError if seq is empty, InvalidSymbolError identifying the
        first character that is not a member of self
        """
        if not isinstance(seq, str):
            msg = f"{type(seq)} is invalid, expected str"
            raise TypeError(msg)

        if not seq:
            raise EmptySequenceError(self.name)

        if invalid := seq.translate(self._strip_valid):
            char = invalid[0]
            raise InvalidSymbolError(char, seq.index(char), self.name)

        return seq

    def is_valid(self, seq: str) -> bool:
        """seq is valid for alphabet"""
        try:
            self.validate(seq)
        except AlphabetError:
            return False
        return True

    def to_indices(self, seq: str | bytes) -> NumpyIntArrayType:
        """returns a sequence of indices for the characters in seq

        Notes
        -----
        Assumes seq has been validated, characters outside the alphabet
        are returned unconverted.
        """
        if isinstance(seq, str):
            seq = seq.encode("utf8")

        if isinstance(seq, bytes):
            return self._bytes2arr(seq)

        msg = f"{type(seq)} is invalid"
        raise TypeError(msg)

    def from_indices(self, seq: NumpyIntArrayType) -> str:
        """returns a string from a sequence of indices"""
        if isinstance(seq, numpy.ndarray):
            return self._arr2bytes(seq).decode("utf8")

        msg = f"{type(seq)} is invalid"
        raise TypeError(msg)


DNA_ALPHABET = CharAlphabet("ACGT", name="DNA")
RNA_ALPHABET = CharAlphabet("ACGU", name="RNA")
PROTEIN_ALPHABET = CharAlphabet("ACDEFGHIKLMNPQRSTVWY", name="protein")
