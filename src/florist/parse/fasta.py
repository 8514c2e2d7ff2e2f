"""Parsers for FASTA formatted text."""

import logging
import os
import re
import typing
from functools import singledispatch

from florist.parse.record import RecordError
from florist.util.io import open_

logger = logging.getLogger(__name__)

_white_space = re.compile(r"\s+")

RenamerType = typing.Callable[[str], str]
PathOrIterableType = typing.Union[os.PathLike, str, list[str], tuple[str]]


@singledispatch
def _prep_data(data) -> typing.Iterable[str]:
    return data


@_prep_data.register
def _(data: str):
    # a str is a path unless it holds FASTA text
    if data.lstrip().startswith(">") or "\n" in data:
        return data.splitlines()

    with open_(data) as infile:
        return infile.read().splitlines()


@_prep_data.register
def _(data: os.PathLike):
    return _prep_data(str(data))


def _faster_parser(
    data: typing.Iterable[str],
    label_to_name: RenamerType,
    label_char: set[str],
) -> typing.Iterable[tuple[str, str]]:
    label = None
    seq = []
    for line in data:
        line = line.strip()
        if not line:
            # ignore empty lines
            continue

        if line[0] in label_char:
            if seq:
                yield label_to_name(label or ""), _white_space.sub("", "".join(seq))

            label = line[1:].strip()
            seq = []
        else:
            seq.append(line)

    if seq:
        yield label_to_name(label or ""), _white_space.sub("", "".join(seq))


def _strict_parser(
    data: typing.Iterable[str],
    label_to_name: RenamerType,
    label_char: set[str],
) -> typing.Iterable[tuple[str, str]]:
    seq: list[str] = []
    label: str | None = None
    for line in data:
        line = line.strip()
        if not line:
            # ignore empty lines
            continue

        if line[0] in label_char:
            if label is not None:
                if not seq:
                    msg = f"{label} has no data"
                    raise RecordError(msg)
                yield label_to_name(label), _white_space.sub("", "".join(seq))
            elif seq:
                msg = "missing a label"
                raise RecordError(msg)

            label = line[1:].strip()
            seq = []
        else:
            seq.append(line)

    if label is None:
        msg = "no FASTA records" if not seq else "missing a label"
        raise RecordError(msg)
    if not seq:
        msg = f"{label} has no data"
        raise RecordError(msg)

    yield label_to_name(label), _white_space.sub("", "".join(seq))


def MinimalFastaParser(
    path: PathOrIterableType,
    strict: bool = True,
    label_to_name: RenamerType = str,
    label_characters: str = ">",
) -> typing.Iterable[tuple[str, str]]:
    """
    Yields successive sequences from infile as (label, seq) tuples.

    Parameters
    ----------
    path
        a file path, FASTA formatted text or a series of lines
    strict
        raises RecordError when label or seq missing
    label_to_name
        function for converting a label to a name
    label_characters
        character(s) at the start of a label line
    """
    if not path:
        if strict:
            raise RecordError("no FASTA records")
        return

    data = _prep_data(path)
    label_char = set(label_characters)
    if strict:
        yield from _strict_parser(data, label_to_name, label_char)
    else:
        yield from _faster_parser(data, label_to_name, label_char)


def parse_fasta(text: str) -> list[tuple[str, str]]:
    """returns the (label, sequence) records of FASTA text in input order

    Raises
    ------
    RecordError if there are no records, a label has no sequence, or
    sequence data precedes the first label
    """
    records = list(MinimalFastaParser(text.splitlines()))
    logger.debug("parsed %d FASTA records", len(records))
    return records
