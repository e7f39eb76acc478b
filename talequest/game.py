"""The main game loop tying prompts, commands and play together."""

from __future__ import annotations

import argparse
import sys
from enum import Enum
from os import PathLike
from typing import Optional, Sequence, TextIO, Union

from .classify import Classifier, KeywordClassifier
from .commands import DEFAULT_COMMANDS, DEFAULT_COMMANDS_FILE, PROMPT, Command, load_commands
from .entity import Entity
from .logic import Logic
from .state import EXIT_TEXT, GameState, InputLabels, State
from .writer import Writer


class SystemState(Enum):
    """What the game loop does next."""

    CREATE = "create"
    WRITE = "write"
    PLAY = "play"
    END = "end"


class Game:
    """Runs the cycle of prompting, reading answers and playing turns."""

    def __init__(
        self,
        writer: Optional[Writer] = None,
        classifier: Optional[Classifier] = None,
        logic: Optional[Logic] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        commands_path: Union[str, PathLike] = DEFAULT_COMMANDS_FILE,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.writer = writer if writer is not None else Writer(stream=self.stdout)
        self.classifier = classifier if classifier is not None else KeywordClassifier()
        self.logic = logic if logic is not None else Logic(out=self.stdout)
        self.commands_path = commands_path
        self.system_state = SystemState.WRITE
        self.game_state = State("Generate a prompt", GameState.GENERATE_PROMPT)
        self.play_state = InputLabels.OTHER
        self.tick = 0

    def _commands(self) -> list[Command]:
        try:
            return load_commands(self.commands_path)
        except (OSError, ValueError):
            return list(DEFAULT_COMMANDS)

    def _read_answer(self) -> str:
        self.stdout.write(PROMPT)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            self.game_state.state = GameState.END
            return EXIT_TEXT
        return self.game_state.parse_answer(line.strip(), self._commands())

    def create(self) -> SystemState:
        """Advance the prompt/answer cycle by one stage and return what follows."""
        stage = self.game_state.state
        if stage is GameState.GENERATE_PROMPT:
            self.game_state.prompt = State.generate_prompt()
            self.game_state.state = GameState.PARSE_ANSWER
        elif stage is GameState.PARSE_ANSWER:
            self.game_state.prompt = self._read_answer()
        elif stage is GameState.GENERATE_RESPONSE:
            kind, label = self.game_state.generate_response(self.classifier, self.stdout)
            self.game_state.prompt = label
            self.play_state = kind
            self.game_state.state = GameState.PLAY
        elif stage is GameState.PLAY:
            return SystemState.PLAY
        else:
            return SystemState.END
        return SystemState.WRITE

    def write(self, text: str) -> SystemState:
        """Show *text* to the player."""
        self.writer.write(text)
        return SystemState.CREATE

    def play(self) -> SystemState:
        """Play one turn of the kind the last answer was classified as."""
        self.writer.write("Game play logic")

        if self.tick == 0:
            self.logic.entities.append(Entity(0, "Hero", 100, 10, 5))

        if self.play_state is InputLabels.COMBAT:
            self.logic.update(self.play_state, self.tick)
        elif self.play_state is InputLabels.EXPLORATION:
            self.logic.update(self.play_state, self.tick)
            self.writer.write("Enemy found!")
        elif self.play_state is InputLabels.PUZZLE:
            self.writer.write("Puzzle logic")
            self.logic.update(self.play_state, self.tick)
        else:
            self.writer.write("Other logic")

        self.tick += 1
        self.game_state.state = GameState.PARSE_ANSWER
        return SystemState.CREATE

    def step(self, system_state: SystemState) -> SystemState:
        """Perform the work of *system_state* and return the state that follows."""
        self.system_state = system_state
        if system_state is SystemState.CREATE:
            return self.create()
        if system_state is SystemState.WRITE:
            return self.write(self.game_state.prompt)
        if system_state is SystemState.PLAY:
            return self.play()
        return SystemState.END

    def run(self) -> None:
        """Run the game until the player leaves."""
        state = SystemState.CREATE
        while state is not SystemState.END:
            state = self.step(state)
        self.system_state = SystemState.END


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start an interactive game on the terminal."""
    parser = argparse.ArgumentParser(prog="talequest", description="A text adventure.")
    parser.add_argument(
        "--commands",
        default=DEFAULT_COMMANDS_FILE,
        help="JSON file with command aliases (default: %(default)s)",
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="print text at once instead of typing it out",
    )
    args = parser.parse_args(argv)
    writer = Writer(max_delay=0) if args.no_delay else None
    Game(writer=writer, commands_path=args.commands).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())