"""Typewriter-style output of game text."""

from __future__ import annotations

import random
import sys
import time
from os import PathLike
from typing import Callable, Optional, TextIO, Union

PROMPT = "<<:"


class Writer:
    """Prints text one character at a time with a short random pause after each."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        max_delay: int = 100,
        rng: Optional[random.Random] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        if max_delay < 0:
            raise ValueError("max_delay must not be negative")
        self.stream = stream
        self.max_delay = max_delay
        self.rng = rng if rng is not None else random.Random()
        self.sleep = sleep if sleep is not None else time.sleep

    def write(self, text: str) -> None:
        """Print the prompt and *text*, dropping everything up to its first newline."""
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(PROMPT)
        _, newline, rest = text.partition("\n")
        if newline:
            text = rest
        for char in text:
            stream.write(char)
            stream.flush()
            delay_ms = self.rng.randrange(self.max_delay) if self.max_delay else 0
            self.sleep(delay_ms / 1000)
        stream.write("\n")
        stream.flush()


def read_file(path: Union[str, PathLike]) -> str:
    """Return the whole content of a text file."""
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def read_line(stdin: Optional[TextIO] = None) -> str:
    """Read one line and return it without surrounding whitespace."""
    stdin = stdin if stdin is not None else sys.stdin
    return stdin.readline().strip()