import dataclasses
import typing

from florist.core import alphabet as fl_alphabet
from florist.core import sequence as fl_sequence

IUPAC_DNA_complements = {"A": "T", "C": "G", "G": "C", "T": "A"}
IUPAC_RNA_complements = {"A": "U", "C": "G", "G": "C", "U": "A"}


class MolTypeError(TypeError): ...


@dataclasses.dataclass
class MolType:
    """MolType handles operations that depend on the sequence type.

    Notes
    -----
    Create sequences via ``make_seq()`` and get a moltype using the
    ``get_moltype()`` function.
    """

    name: str
    alphabet: fl_alphabet.CharAlphabet
    make_seq: dataclasses.InitVar[type]
    complements: dataclasses.InitVar[dict[str, str] | None] = None
    start_text: str | None = None

    _make_seq: type = dataclasses.field(init=False, repr=False)
    _complement: typing.Callable[[bytes], bytes] | None = dataclasses.field(
        init=False, default=None, repr=False
    )

    def __post_init__(self, make_seq: type, complements: dict[str, str] | None) -> None:
        self._make_seq = make_seq
        if complements:
            dest = "".join(complements[c] for c in self.alphabet)
            self._complement = fl_alphabet.convert_alphabet(
                self.alphabet.as_bytes(), dest.encode("utf8")
            )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.alphabet})"

    def __str__(self) -> str:
        return self.name

    def __hash__(self) -> int:
        return id(self)

    def __eq__(self, other: object) -> bool:
        return id(self) == id(other)

    def __len__(self) -> int:
        return len(self.alphabet)

    def __iter__(self) -> typing.Iterator[str]:
        yield from self.alphabet

    @property
    def label(self) -> str:
        """synonym for name"""
        return self.name

    @property
    def seq_class(self) -> type:
        return self._make_seq

    def is_nucleic(self) -> bool:
        """nucleic moltypes can be used for complementing and translating"""
        return callable(self._complement)

    def is_valid(self, seq: str) -> bool:
        return self.alphabet.is_valid(seq)

    def make_seq(self, seq: str) -> "fl_sequence.Sequence":
        """returns a validated sequence of the class for this moltype"""
        return self._make_seq(seq)

    def complement(self, seq: str) -> str:
        """converts a string into its nucleic acid complement

        Notes
        -----
        Characters are not validated, anything outside the alphabet is
        returned unchanged.
        """
        if not self.is_nucleic():
            msg = f"{self.name!r} cannot complement"
            raise MolTypeError(msg)
        return self._complement(seq.encode("utf8")).decode("utf8")

    def rc(self, seq: str) -> str:
        """reverse complement of a sequence"""
        return self.complement(seq)[::-1]


DNA = MolType(
    name="dna",
    alphabet=fl_alphabet.DNA_ALPHABET,
    make_seq=fl_sequence.DnaSequence,
    complements=IUPAC_DNA_complements,
    start_text="ATG",
)
RNA = MolType(
    name="rna",
    alphabet=fl_alphabet.RNA_ALPHABET,
    make_seq=fl_sequence.RnaSequence,
    complements=IUPAC_RNA_complements,
    start_text="AUG",
)
PROTEIN = MolType(
    name="protein",
    alphabet=fl_alphabet.PROTEIN_ALPHABET,
    make_seq=fl_sequence.ProteinSequence,
)


def _make_moltype_dict() -> dict[str, MolType]:
    """make a dictionary of local name space molecular types"""
    return {obj.name: obj for obj in globals().values() if isinstance(obj, MolType)}


_moltypes = _make_moltype_dict()


def get_moltype(name: str | MolType) -> MolType:
    """returns the moltype with the matching name attribute"""
    if isinstance(name, MolType):
        return name

    if not isinstance(name, str) or name.lower() not in _moltypes:
        msg = f"unknown moltype {name!r}"
        raise ValueError(msg)

    return _moltypes[name.lower()]


def available_moltypes() -> list[tuple[str, int, str]]:
    """returns (name, number of states, alphabet) for each moltype"""
    return [(n, len(m), "".join(m.alphabet)) for n, m in sorted(_moltypes.items())]
