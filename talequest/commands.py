"""Recognition of the player's out-of-game commands."""

from __future__ import annotations

import json
import sys
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Iterable, Optional, TextIO, Tuple, Union

PROMPT = "<<:"
DEFAULT_COMMANDS_FILE = "commands.json"


class CommandType(Enum):
    """The kinds of command the game understands."""

    EXIT = "EXIT"
    UNKNOWN = "UNKNOWN"
    HELP = "HELP"


Command = Tuple[Tuple[str, ...], CommandType]

DEFAULT_COMMANDS: list[Command] = [(("exit", "quit"), CommandType.EXIT)]


def load_commands(path: Union[str, PathLike] = DEFAULT_COMMANDS_FILE) -> list[Command]:
    """Read command aliases from a JSON file.

    The file holds an object whose upper-case keys name a command type and
    whose values are arrays of strings; each string is split on whitespace
    into a group of aliases. Unrecognised keys map to ``UNKNOWN``.

    Raises ``OSError`` when the file cannot be read and ``ValueError`` when
    it is not valid JSON.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        return []

    commands: list[Command] = []
    for key, value in data.items():
        try:
            kind = CommandType[key]
        except KeyError:
            kind = CommandType.UNKNOWN
        if not isinstance(value, list):
            continue
        commands.extend(
            (tuple(item.split()), kind) for item in value if isinstance(item, str)
        )
    return commands


def match_command(text: str, commands: Iterable[Command]) -> CommandType:
    """Return the type of the first command group with an alias equal to *text*.

    Matching ignores the case of *text*; anything unmatched is ``UNKNOWN``.
    """
    lowered = text.lower()
    return next(
        (kind for aliases, kind in commands if lowered in aliases),
        CommandType.UNKNOWN,
    )


def parse_command(
    text: str, path: Union[str, PathLike] = DEFAULT_COMMANDS_FILE
) -> CommandType:
    """Classify *text* using the commands in *path*, or the defaults if it cannot be loaded."""
    try:
        commands = load_commands(path)
    except (OSError, ValueError):
        commands = DEFAULT_COMMANDS
    return match_command(text, commands)


def read_input(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> str:
    """Show the prompt, read one line and return it without surrounding whitespace."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stdout.write(PROMPT)
    stdout.flush()
    return stdin.readline().strip()