"""Command line interface for solving Rosalind problems.

Each registered problem is available as a subcommand named by its Rosalind
id, e.g. ``florist dna rosalind_dna.txt``, or via
``florist solve dna rosalind_dna.txt``.
"""

import hashlib
import logging
import pathlib
import time

import click
from scitrack import CachingLogger

from florist._version import __version__
from florist.core.codon import GeneticCodeError
from florist.core.sequence import SequenceError
from florist.parse.record import RecordError
from florist.problems import (
    Problem,
    ProblemNotFoundError,
    available_problems,
    get_problem,
)
from florist.util.io import read_text
from florist.util.misc import get_setting_from_environ

logger = logging.getLogger(__name__)

# AlphabetError, InputError and UnicodeDecodeError are ValueError subclasses
_FAILURES = (ValueError, SequenceError, GeneticCodeError, RecordError)

_settings_env = "FLORIST_CLI"


def _cli_settings() -> dict:
    return get_setting_from_environ(_settings_env, {"log_dir": str, "verbose": int})


def _resolve_log_path(log: pathlib.Path | None) -> pathlib.Path | None:
    """a bare log file name is placed in the log_dir setting, if defined"""
    if log is None:
        return None

    log_dir = _cli_settings().get("log_dir")
    if log_dir and log.parent == pathlib.Path("."):
        log = pathlib.Path(log_dir) / log
    return log


def _run(problem: Problem, input_path: pathlib.Path, log: pathlib.Path | None) -> None:
    start = time.time()
    try:
        data = problem.parse(read_text(input_path))
    except _FAILURES as err:
        raise click.ClickException(f"Failed to parse input: {err}") from err

    try:
        result = problem.solve(data)
    except _FAILURES as err:
        raise click.ClickException(f"Failed to solve: {err}") from err

    answer = problem.format(result)
    click.echo(answer)
    logger.debug("solved %r from %s", problem.name, input_path)

    log = _resolve_log_path(log)
    if log is None:
        return

    run_log = CachingLogger(create_dir=True)
    run_log.log_file_path = str(log)
    run_log.log_message(problem.name, label="problem")
    run_log.log_versions(["florist"])
    run_log.input_file(str(input_path))
    md5 = hashlib.md5(answer.encode("utf8")).hexdigest()
    run_log.log_message(md5, label="output md5sum")
    taken = time.time() - start
    run_log.log_message(f"{taken}", label="TIME TAKEN")
    run_log.shutdown()


def _get_problem_or_fail(name: str) -> Problem:
    try:
        return get_problem(name)
    except ProblemNotFoundError as err:
        raise click.UsageError(str(err)) from err


_input_argument = click.argument(
    "input_path",
    type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path),
)
_log_option = click.option(
    "--log",
    type=click.Path(dir_okay=False, path_type=pathlib.Path),
    default=None,
    help="write a run log to this path",
)


def _make_problem_command(name: str) -> click.Command:
    problem = _get_problem_or_fail(name)

    @click.command(name=problem.rosalind_id, help=problem.__doc__)
    @_input_argument
    @_log_option
    def command(input_path, log):
        _run(problem, input_path, log)

    return command


class _ProblemGroup(click.Group):
    """adds a subcommand for every registered problem"""

    def list_commands(self, ctx):
        builtin = super().list_commands(ctx)
        problem_ids = [pid for pid, _, _ in available_problems()]
        return builtin + [pid for pid in problem_ids if pid not in builtin]

    def get_command(self, ctx, cmd_name):
        if (command := super().get_command(ctx, cmd_name)) is not None:
            return command

        try:
            return _make_problem_command(cmd_name)
        except click.UsageError:
            return None


@click.group(cls=_ProblemGroup)
@click.version_option(__version__, prog_name="florist")
@click.option("-v", "--verbose", is_flag=True, help="debug level logging")
def main(verbose):
    """solutions to Rosalind bioinformatics problems"""
    if verbose or _cli_settings().get("verbose"):
        logging.basicConfig(level=logging.DEBUG)


@main.command(name="list")
def list_():
    """lists the available problems"""
    rows = available_problems()
    width = max((len(pid) for pid, _, _ in rows), default=0)
    for pid, name, summary in rows:
        click.echo(f"{pid:<{width}}  {name}: {summary}")


@main.command()
@click.argument("problem_name")
@_input_argument
@_log_option
def solve(problem_name, input_path, log):
    """solves PROBLEM_NAME (Rosalind id or name) for the dataset in
    INPUT_PATH"""
    _run(_get_problem_or_fail(problem_name), input_path, log)


if __name__ == "__main__":
    main()
