"""Parsers for the plain text inputs of problems: integer lists and one
sequence per line."""


class InputError(ValueError):
    """Exception raised when problem input is malformed."""


def parse_int_list(text: str, count: int | None = None, sep: str | None = None) -> list[int]:
    """returns the integers in text

    Parameters
    ----------
    text
        integers separated by sep
    count
        if provided, the exact number of values required
    sep
        separator, None means any white space

    Raises
    ------
    InputError if text holds no values, a value is not an integer, or the
    number of values differs from count
    """
    if sep is None:
        fields = text.split()
    else:
        fields = [f.strip() for f in text.split(sep)]
    if not fields:
        raise InputError("input parsed to an empty list")

    try:
        values = [int(f) for f in fields]
    except ValueError as err:
        raise InputError(str(err)) from err

    if count is not None and len(values) != count:
        msg = f"expected {count} values, got {len(values)} from {text!r}"
        raise InputError(msg)
    return values


def parse_seq_list(text: str, moltype="dna") -> list:
    """returns one sequence per non-blank line of text

    Parameters
    ----------
    text
        newline separated sequences
    moltype
        name or MolType instance, determines the sequence class

    Raises
    ------
    InputError if there are no sequences, AlphabetError if a line is not a
    valid sequence
    """
    from florist.core.moltype import get_moltype

    moltype = get_moltype(moltype)
    lines = [line.strip() for line in text.splitlines()]
    seqs = [moltype.make_seq(line) for line in lines if line]
    if not seqs:
        raise InputError("no sequences in input")
    return seqs
