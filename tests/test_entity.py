import copy

import pytest

from talequest.entity import Entity


def test_repr_format():
    hero = Entity(0, "Hero", 100, 10, 5)
    assert repr(hero) == "Entity { id: 0, name: Hero, health: 100, attack: 10, defense: 5 }"


def test_list_repr_joins_entities():
    entities = [Entity(0, "Hero", 100, 10, 5), Entity(1, "Monster 1", 50, 8, 3)]
    assert str(entities) == f"[{entities[0]!r}, {entities[1]!r}]"


def test_copy_is_independent():
    hero = Entity(0, "Hero", 100, 10, 5)
    twin = copy.copy(hero)
    twin.health -= 30
    assert hero.health == 100
    assert twin == Entity(0, "Hero", 70, 10, 5)


def test_fields_are_mutable():
    monster = Entity(3, "Monster 2", 50, 8, 3)
    monster.defense = -1
    monster.attack = 12
    assert (monster.defense, monster.attack) == (-1, 12)


def test_negative_attack_rejected():
    with pytest.raises(ValueError):
        Entity(0, "Hero", 100, -1, 5)


def test_negative_id_rejected():
    with pytest.raises(ValueError):
        Entity(-1, "Hero", 100, 10, 5)