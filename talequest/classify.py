"""Scoring of player input against a set of labels."""

from __future__ import annotations

import re
from typing import Iterable, Mapping, Optional, Protocol, Sequence

_WORD = re.compile(r"\w+")

DEFAULT_KEYWORDS: dict[str, tuple[str, ...]] = {
    "combat": (
        "attack", "fight", "hit", "strike", "kill", "battle", "punch",
        "slash", "stab", "shoot", "swing",
    ),
    "exploration": (
        "explore", "walk", "go", "look", "search", "travel", "wander",
        "move", "enter", "north", "south", "east", "west",
    ),
    "puzzle": (
        "solve", "riddle", "think", "examine", "inspect", "unlock",
        "open", "decipher",
    ),
    "other": (),
}


class Classifier(Protocol):
    """Anything that scores a prompt against candidate labels."""

    def classify(self, prompt: str, labels: Sequence[str]) -> list[tuple[str, float]]:
        """Return one (label, score) pair per label, scores between 0 and 1."""
        ...


class KeywordClassifier:
    """Scores each label independently by how many of its keywords the prompt uses.

    A label always counts as one of its own keywords. A label matched by
    ``n`` words scores ``n / (n + 1)``.
    """

    def __init__(self, keywords: Optional[Mapping[str, Iterable[str]]] = None) -> None:
        source = DEFAULT_KEYWORDS if keywords is None else keywords
        self.keywords = {
            label.lower(): frozenset(word.lower() for word in words)
            for label, words in source.items()
        }

    def classify(self, prompt: str, labels: Sequence[str]) -> list[tuple[str, float]]:
        """Return a score for every label, in the order the labels were given."""
        words = _WORD.findall(prompt.lower())
        results = []
        for label in labels:
            vocabulary = self.keywords.get(label.lower(), frozenset()) | {label.lower()}
            hits = sum(word in vocabulary for word in words)
            results.append((label, hits / (hits + 1)))
        return results