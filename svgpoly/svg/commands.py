"""Path data → commands → subpaths → expanded commands.

Three small stages, each a plain function over explicit inputs:

- ``parse_commands``: tokenize a ``d`` attribute into raw commands. Numbers that
  follow a command letter accumulate on that command, so ``L 1 2 3 4`` is one raw
  command carrying four numbers.
- ``split_subpaths``: group the raw commands at every move command.
- ``expand_commands``: split repeated-argument shorthand into one command per
  fixed-arity group (``L 1 2 3 4`` → ``L 1 2``, ``L 3 4``).
"""

from __future__ import annotations

import logging
import math

from svgpoly.models.path import COMMAND_LETTERS, Command, CommandKind, Subpath
from svgpoly.svg.errors import EmptyPathError, MalformedCommandError, SubpathStructureError

logger = logging.getLogger(__name__)


def _parse_numbers(text: str) -> list[float]:
    numbers: list[float] = []
    for part in text.split(","):
        if not part:
            continue
        try:
            value = float(part)
        except ValueError:
            raise MalformedCommandError(f"Invalid number in path data: {part!r}") from None
        # "1e999" reads as inf
        if not math.isfinite(value):
            raise MalformedCommandError(f"Number out of range in path data: {part!r}")
        numbers.append(value)
    return numbers


def _make_command(letter: str, numbers: list[float]) -> Command:
    return Command(
        kind=COMMAND_LETTERS.get(letter.lower(), CommandKind.UNSUPPORTED),
        relative=letter.islower(),
        arguments=tuple(numbers),
        letter=letter,
    )


def parse_commands(path_data: str) -> list[Command]:
    """Tokenize path data into raw commands, in order.

    Tokens are whitespace separated. A token starting with a letter opens a new
    command (anything after the letter is read as numbers); every other token is
    a comma separated group of numbers for the open command. Letters outside
    COMMAND_LETTERS give UNSUPPORTED commands.
    """
    commands: list[Command] = []
    letter: str | None = None
    numbers: list[float] = []

    for token in path_data.split():
        if token[0].isalpha():
            if letter is not None:
                commands.append(_make_command(letter, numbers))
            elif numbers:
                logger.warning("Ignoring %d numbers before the first path command", len(numbers))
            letter = token[0]
            numbers = _parse_numbers(token[1:])
        else:
            numbers.extend(_parse_numbers(token))

    if letter is not None:
        commands.append(_make_command(letter, numbers))

    if not commands:
        raise EmptyPathError("Path data has no commands")
    return commands


def split_subpaths(commands: list[Command]) -> list[list[Command]]:
    """Group commands into subpaths; each move command opens a new one."""
    if not commands:
        raise EmptyPathError("Path data has no commands")
    if not commands[0].is_move:
        raise SubpathStructureError(f"Path data must start with a move command, got '{commands[0]}'")

    subpaths: list[list[Command]] = []
    for cmd in commands:
        if cmd.is_move:
            subpaths.append([])
        subpaths[-1].append(cmd)
    return subpaths


def expand_command(cmd: Command) -> list[Command]:
    """Split one raw command into commands of exactly ``cmd.arity`` arguments.

    Commands without an arity (UNSUPPORTED) are returned as they are.
    """
    arity = cmd.arity
    count = len(cmd.arguments)

    if arity is None:
        return [cmd]

    if arity == 0:
        if count:
            raise MalformedCommandError(f"Command '{cmd.letter}' takes no arguments, got {count}")
        return [cmd]

    if count == 0 or count % arity:
        raise MalformedCommandError(
            f"Command '{cmd.letter}' needs a multiple of {arity} arguments, got {count}"
        )

    return [
        Command(
            kind=cmd.kind,
            relative=cmd.relative,
            arguments=cmd.arguments[i : i + arity],
            letter=cmd.letter,
        )
        for i in range(0, count, arity)
    ]


def expand_commands(subpaths: list[list[Command]]) -> list[Subpath]:
    expanded: list[Subpath] = []
    for raw in subpaths:
        cmds: list[Command] = []
        for cmd in raw:
            cmds.extend(expand_command(cmd))
        expanded.append(tuple(cmds))
    return expanded


def parse_path_data(path_data: str) -> list[Subpath]:
    """Run the three stages: the expanded subpaths of one ``d`` attribute."""
    return expand_commands(split_subpaths(parse_commands(path_data)))
