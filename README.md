# talequest

A small text adventure you play at the terminal. You type an action. The game
scores it against four labels: combat, exploration, puzzle and other. It then
plays one turn of the label that scores highest. Text appears one character
at a time, with a short random pause after each character.

## Installing

```
pip install .
```

## Playing

```
talequest
```

Options:

- `--commands FILE` reads command aliases from `FILE`. The default is
  `commands.json` in the current directory.
- `--no-delay` prints text at once instead of typing it out.

The prompt `<<:` waits for your input. Some words are commands. The match
ignores case.

- `help` shows the available actions.
- `exit` or `quit` ends the game.

The game also ends when input runs out (end of file).

Any other input counts as an action. The game prints the score of each label,
shows the winning label and plays a turn:

- **exploration**: a new monster appears, named `Monster 1`, `Monster 2` and
  so on. Each monster has 50 health, 8 attack and 3 defence.
- **combat**: the Hero (100 health) attacks the most recently found monster.
  The damage is a d20 roll plus 5. A monster whose health drops to zero or
  below is removed. If no monster is present, the game lists the entities and
  tells you to go exploring.
- **puzzle** and **other**: the game reports the kind of turn and changes
  nothing.

If no label scores above zero, the action counts as **other**.

## Custom commands

A JSON file maps command names to lists of aliases:

```json
{
  "EXIT": ["exit", "quit", "bye"],
  "HELP": ["help", "?"]
}
```

Each string is split on whitespace into a group of aliases. Names other than
`EXIT`, `HELP` and `UNKNOWN` are treated as `UNKNOWN`. If the file is missing
or is not valid JSON, only `exit` and `quit` are recognised.

## How input is classified

`talequest.classify.KeywordClassifier` scores each label by itself. It counts
how many words of the input belong to the label's keyword list. The label's
own name always counts as a keyword. A label matched by `n` words scores
`n / (n + 1)`. The built-in lists hold simple verbs such as "attack",
"explore", "north" and "solve". You can pass your own mapping from label to
words.

There is no statistical or language-model classification. Phrasing that uses
none of the keywords scores zero for every label and falls back to **other**.
Any object with a `classify(prompt, labels)` method that returns
`(label, score)` pairs can stand in for the keyword classifier.

## Using it as a library

```python
import random

from talequest.classify import KeywordClassifier
from talequest.commands import CommandType, match_command
from talequest.entity import Entity
from talequest.logic import AttackType, Logic
from talequest.state import InputLabels

commands = [(("exit", "quit"), CommandType.EXIT)]
assert match_command("QUIT", commands) is CommandType.EXIT

scores = KeywordClassifier().classify("I swing my sword", ["combat", "other"])
# [("combat", 0.5), ("other", 0.0)]

logic = Logic(rng=random.Random(1))
logic.entities.append(Entity(0, "Hero", 100, 10, 5))
logic.update(InputLabels.EXPLORATION, 1)   # adds "Monster 1"
logic.attack(AttackType.PHYSICAL, 0, 1)    # Hero strikes Monster 1
```

Each module does one job:

- `talequest.commands` loads and matches command aliases: `load_commands`,
  `match_command`, `parse_command` and `read_input`.
- `talequest.state` holds the prompt and stage: `State`, `GameState` and
  `InputLabels`.
- `talequest.writer.Writer` does the typewriter-style output. It accepts a
  stream, a maximum delay in milliseconds, a random generator and a sleep
  function. It prints only the part of the text after its first newline.
- `talequest.game.Game` ties the pieces together. You can pass it a writer,
  classifier, logic, input and output streams and a commands file. Use
  `Game.step` to drive the loop one stage at a time, or `Game.run` to play
  until the game ends.

## Running the tests

```
pip install ".[test]"
pytest
```