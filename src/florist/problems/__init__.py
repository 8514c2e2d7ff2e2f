"""Solvers for Rosalind problems.

Each problem is a class registered as a plugin in the ``florist.problem``
entry point namespace, under its Rosalind id. A problem instance converts
the text of a dataset into the text of the answer in three steps: parse,
solve and format.
"""

from __future__ import annotations

import logging

import stevedore

from florist.util.misc import doc_summary

logger = logging.getLogger(__name__)

# Entry_point for problems to register themselves as plugins
PROBLEM_ENTRY_POINT = "florist.problem"


class ProblemNotFoundError(KeyError):
    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class Problem:
    """base class of problem solvers

    Notes
    -----
    Subclasses define ``rosalind_id``, ``name`` and ``solve()``, and
    override ``parse()`` and ``format()`` when the dataset or answer is
    not a single value.
    """

    rosalind_id: str = ""
    name: str = ""

    def parse(self, text: str):
        """converts the stripped dataset text into the input of solve()"""
        return text

    def solve(self, data):
        raise NotImplementedError

    def format(self, result) -> str:
        """converts the result of solve() into the answer text"""
        return str(result)

    def __call__(self, text: str) -> str:
        return self.format(self.solve(self.parse(text)))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


# private global to hold an ExtensionManager instance
__problems = None


def get_problem_manager() -> stevedore.ExtensionManager:
    """
    Lazy load a stevedore ExtensionManager to collect problems.
    """
    global __problems
    if not __problems:
        __problems = stevedore.ExtensionManager(
            namespace=PROBLEM_ENTRY_POINT,
            invoke_on_load=False,
        )
        logger.debug("loaded %d problem plugins", len(__problems.names()))

    return __problems


def _matches(extension, name: str) -> bool:
    return name in (extension.name, getattr(extension.plugin, "name", None))


def get_problem(name: str) -> Problem:
    """returns an instance of the problem with the Rosalind id, e.g. 'dna',
    or the descriptive name, e.g. 'counting-dna-nucleotides'

    Raises
    ------
    ProblemNotFoundError if no registered problem matches
    """
    matching = [ext for ext in get_problem_manager() if _matches(ext, name)]
    if not matching:
        msg = f"problem {name!r} not found, see 'florist list'"
        raise ProblemNotFoundError(msg)
    return matching[0].plugin()


def available_problems() -> list[tuple[str, str, str]]:
    """returns (Rosalind id, name, summary) of the registered problems, sorted
    by id"""
    rows = []
    for extension in get_problem_manager():
        plugin = extension.plugin
        rows.append((extension.name, plugin.name, doc_summary(plugin)))
    return sorted(rows)
