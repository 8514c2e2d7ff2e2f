"""florist: solutions to Rosalind bioinformatics problems built on typed,
alphabet validated biological sequences."""

import logging
import os
import typing
import warnings
from importlib import import_module

from florist._version import __version__

if typing.TYPE_CHECKING:  # pragma: no cover
    from florist.core.sequence import Sequence

__copyright__ = "Copyright 2022-date, The Florist Project"
__license__ = "BSD-3"


def __getattr__(name: str) -> typing.Any:
    if (attr := globals().get(name)) is not None:
        return attr

    if name not in _import_mapping:
        raise AttributeError(name)

    module_name = _import_mapping[name]
    module = import_module(f".{module_name}", package=__name__)
    attr = getattr(module, name)
    globals()[name] = attr
    return attr


_import_mapping = {
    "DNA": "core.moltype",
    "RNA": "core.moltype",
    "PROTEIN": "core.moltype",
    "available_moltypes": "core.moltype",
    "get_moltype": "core.moltype",
    "AminoAcid": "core.genetic_code",
    "get_code": "core.genetic_code",
    "available_codes": "core.genetic_code",
    "make_consensus": "core.profile",
    "hamming_distance": "core.sequence",
    "motif_locations": "core.sequence",
    "parse_fasta": "parse.fasta",
    "open_": "util.io",
    "available_problems": "problems",
    "get_problem": "problems",
}


def __dir__() -> list[str]:
    return list(_import_mapping.keys()) + list(globals().keys())


__all__ = list(_import_mapping.keys()) + ["make_seq"]

version = __version__
version_info = tuple(int(v) for v in version.split(".") if v.isdigit())


warn_env = "FLORIST_WARNINGS"

if warn := os.environ.get(warn_env):
    warnings.simplefilter(warn)

logging.getLogger(__name__).addHandler(logging.NullHandler())


def make_seq(seq: str, moltype: str = "dna") -> "Sequence":
    """
    Parameters
    ----------
    seq
        raw string to be converted to sequence object, must already be
        trimmed of whitespace
    moltype
        name of a moltype or moltype instance

    Returns
    -------
    returns a validated sequence object of the type matching moltype
    """
    from florist.core.moltype import get_moltype

    return get_moltype(moltype).make_seq(seq)
