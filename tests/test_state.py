import io

import pytest

from talequest.classify import KeywordClassifier
from talequest.commands import DEFAULT_COMMANDS, CommandType
from talequest.state import GameState, InputLabels, State


class FixedClassifier:
    def __init__(self, scores):
        self.scores = scores
        self.calls = []

    def classify(self, prompt, labels):
        self.calls.append((prompt, list(labels)))
        return [(label, self.scores.get(label, 0.0)) for label in labels]


COMMANDS = DEFAULT_COMMANDS + [(("help",), CommandType.HELP)]


def test_generate_prompt():
    assert State.generate_prompt() == "No prompt available."


def test_generate_response_picks_highest():
    classifier = FixedClassifier({"combat": 0.25, "puzzle": 0.75})
    state = State("think hard", GameState.GENERATE_RESPONSE)
    assert state.generate_response(classifier, io.StringIO()) == (InputLabels.PUZZLE, "puzzle")
    assert classifier.calls == [("think hard", ["combat", "exploration", "puzzle", "other"])]


def test_generate_response_prints_scores():
    out = io.StringIO()
    State("x", GameState.GENERATE_RESPONSE).generate_response(
        FixedClassifier({"combat": 0.25}), out
    )
    assert out.getvalue().splitlines() == [
        "combat: 0.25",
        "exploration: 0.0",
        "puzzle: 0.0",
        "other: 0.0",
    ]


def test_generate_response_defaults_to_other():
    state = State("???", GameState.GENERATE_RESPONSE)
    assert state.generate_response(FixedClassifier({}), io.StringIO()) == (InputLabels.OTHER, "other")


def test_generate_response_ties_keep_first():
    classifier = FixedClassifier({"combat": 0.5, "exploration": 0.5})
    kind, label = State("x", GameState.PLAY).generate_response(classifier, io.StringIO())
    assert (kind, label) == (InputLabels.COMBAT, "combat")


def test_generate_response_with_keyword_classifier():
    state = State("explore the forest", GameState.GENERATE_RESPONSE)
    kind, _ = state.generate_response(KeywordClassifier(), io.StringIO())
    assert kind is InputLabels.EXPLORATION


def test_parse_answer_exit():
    state = State("", GameState.PARSE_ANSWER)
    assert state.parse_answer("Quit", COMMANDS) == "Exiting the game..."
    assert state.state is GameState.END


def test_parse_answer_help():
    state = State("", GameState.PARSE_ANSWER)
    text = state.parse_answer("help", COMMANDS)
    assert text == "Available commands: EXIT, HELP,\nAvailable actions: try exploring or fighting."
    assert state.state is GameState.GENERATE_PROMPT


def test_parse_answer_free_text():
    state = State("", GameState.PARSE_ANSWER)
    assert state.parse_answer("Attack the Troll", COMMANDS) == "Attack the Troll"
    assert state.state is GameState.GENERATE_RESPONSE


@pytest.mark.parametrize("word, expected", [("exit", GameState.END), ("help", GameState.GENERATE_RESPONSE)])
def test_parse_answer_default_file_fallback(tmp_path, monkeypatch, word, expected):
    monkeypatch.chdir(tmp_path)
    state = State("", GameState.PARSE_ANSWER)
    state.parse_answer(word)
    assert state.state is expected