"""Game flow states and interpretation of player answers."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, TextIO

from .classify import Classifier
from .commands import Command, CommandType, match_command, parse_command

HELP_TEXT = (
    "Available commands: EXIT, HELP,\n"
    "Available actions: try exploring or fighting."
)
EXIT_TEXT = "Exiting the game..."


class GameState(Enum):
    """Stages of the prompt/answer cycle."""

    GENERATE_PROMPT = "generate_prompt"
    PARSE_ANSWER = "parse_answer"
    GENERATE_RESPONSE = "generate_response"
    PLAY = "play"
    END = "end"


class InputLabels(Enum):
    """What kind of action the player's input asks for."""

    COMBAT = "combat"
    EXPLORATION = "exploration"
    PUZZLE = "puzzle"
    OTHER = "other"


@dataclass
class State:
    """The current prompt text and the stage of the cycle."""

    prompt: str
    state: GameState

    @staticmethod
    def generate_prompt() -> str:
        """Return the text shown to the player when a new prompt is needed."""
        return "No prompt available."

    def generate_response(
        self, classifier: Classifier, out: Optional[TextIO] = None
    ) -> tuple[InputLabels, str]:
        """Classify the prompt, print every score and return the best label.

        Only a score above zero counts; without one the label is ``other``.
        """
        out = out if out is not None else sys.stdout
        labels = [label.value for label in InputLabels]
        scores = classifier.classify(self.prompt, labels)
        for label, score in scores:
            print(f"{label}: {score}", file=out)

        highest_score = 0.0
        highest_label = InputLabels.OTHER.value
        for label, score in scores:
            if score > highest_score:
                highest_score, highest_label = score, label

        try:
            kind = InputLabels(highest_label)
        except ValueError:
            kind = InputLabels.OTHER
        return kind, highest_label

    def parse_answer(
        self, command: str, commands: Optional[Iterable[Command]] = None
    ) -> str:
        """Advance the state according to the player's *command* and return the next text.

        Without *commands* the aliases are loaded from the default commands file.
        Text that is no command is returned unchanged for classification.
        """
        kind = (
            parse_command(command) if commands is None else match_command(command, commands)
        )
        if kind is CommandType.EXIT:
            self.state = GameState.END
            return EXIT_TEXT
        if kind is CommandType.HELP:
            self.state = GameState.GENERATE_PROMPT
            return HELP_TEXT
        self.state = GameState.GENERATE_RESPONSE
        return command