"""Rules for exploring and fighting."""

from __future__ import annotations

import random
from enum import Enum
from typing import Optional, Protocol, TextIO

from .entity import Entity
from .state import InputLabels

MONSTER_HEALTH = 50
MONSTER_ATTACK = 8
MONSTER_DEFENSE = 3


class AttackType(Enum):
    """How an attack is delivered."""

    PHYSICAL = "physical"
    MAGICAL = "magical"


_MODIFIERS = {AttackType.PHYSICAL: 5, AttackType.MAGICAL: 3}


class Dice(Protocol):
    """A source of random integers, such as ``random.Random``."""

    def randint(self, a: int, b: int) -> int:
        """Return an integer between *a* and *b* inclusive."""
        ...


class Logic:
    """Holds the entities in play and resolves the player's actions."""

    def __init__(self, rng: Optional[Dice] = None, out: Optional[TextIO] = None) -> None:
        self.entities: list[Entity] = []
        self.target = 1
        self.rng: Dice = rng if rng is not None else random.Random()
        self.out = out

    def _say(self, text: object) -> None:
        print(text, file=self.out)

    def update(self, play_state: InputLabels, tick: int) -> None:
        """Carry out one turn of the kind given by *play_state*.

        Combat makes the first entity attack the last one; exploration adds a
        new monster whose id is *tick*. Puzzles and other input change nothing.
        """
        if play_state is InputLabels.COMBAT:
            if not self.entities:
                raise IndexError("there are no entities to fight")
            self.attack(AttackType.PHYSICAL, 0, len(self.entities) - 1)
        elif play_state is InputLabels.EXPLORATION:
            monster = Entity(
                id=tick,
                name=f"Monster {self.target}",
                health=MONSTER_HEALTH,
                attack=MONSTER_ATTACK,
                defense=MONSTER_DEFENSE,
            )
            self.entities.append(monster)
            self.target += 1
            self._say(f"Exploring... Found: {monster.name}")

    def roll(self, attack_type: AttackType) -> int:
        """Roll a d20 and add the modifier for *attack_type*."""
        return self.rng.randint(1, 20) + _MODIFIERS[attack_type]

    def attack(self, attack_type: AttackType, attacker_id: int, target_id: int) -> None:
        """Let the entity at *attacker_id* strike the one at *target_id*.

        A defeated target is removed from play. Aiming at the first entity, or
        at the attacker itself, does nothing but suggest exploring.
        """
        damage = self.roll(attack_type)

        if target_id == 0:
            self._say(self.entities)
            self._say("Go explore the world!")
            return
        if attacker_id == target_id:
            self._say("Go explore the world!")
            return
        for index in (attacker_id, target_id):
            if not 0 <= index < len(self.entities):
                raise IndexError(f"no entity at position {index}")

        attacker = self.entities[attacker_id]
        target = self.entities[target_id]

        if target.health <= 0:
            self._say(f"{target.name} is already defeated!")
            return

        self._say(f"{target.name}'s health before attack: {target.health}")
        if attack_type is AttackType.PHYSICAL:
            message = f"{attacker.name} attacks {target.name} for {damage} damage!"
        else:
            message = f"{attacker.name} casts a spell on {target.name} for {damage} damage!"

        target.health -= damage

        self._say(message)
        self._say(f"{target.name}'s health after attack: {target.health}")
        if target.health <= 0:
            self._say(f"{target.name} has been defeated!")
            del self.entities[target_id]