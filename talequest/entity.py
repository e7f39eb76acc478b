"""Creatures and characters taking part in the game."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Entity:
    """A combatant with an identifier, a name and fighting statistics."""

    id: int
    name: str
    health: int
    attack: int
    defense: int

    def __post_init__(self) -> None:
        if self.id < 0:
            raise ValueError("entity id must not be negative")
        if self.attack < 0:
            raise ValueError("attack must not be negative")

    def __repr__(self) -> str:
        return (
            f"Entity {{ id: {self.id}, name: {self.name}, health: {self.health}, "
            f"attack: {self.attack}, defense: {self.defense} }}"
        )