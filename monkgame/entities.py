"""Combatants: the player's monk and the monsters."""

from __future__ import annotations

import sys
from typing import Callable, Optional

Output = Callable[[str], None]


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)


class Entity:
    """Anything with a name, health and an attack value."""

    def __init__(self, name: str, health: int, attack: int, output: Optional[Output] = None) -> None:
        self.name = name
        self.health = health
        self.attack = attack
        self.max_health = health
        self.output: Output = output or _write_stdout

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, health={self.health}, "
            f"attack={self.attack}, max_health={self.max_health})"
        )

    def is_alive(self) -> bool:
        return self.health > 0

    def take_damage(self, amount: int) -> None:
        """Lose health, never dropping below zero."""
        self.health = max(0, self.health - amount)
        self.output(f"{self.name} took {amount} damage. Remaining health: {self.health}\n")

    def heal(self, amount: int) -> None:
        """Regain health, never rising above the maximum."""
        self.health = min(self.max_health, self.health + amount)
        self.output(f"{self.name} healed for {amount}. Current health: {self.health}\n")

    def attack_entity(self, target: Entity) -> None:
        """Strike the target for this entity's attack value."""
        self.output(f"{self.name} attacks {target.name} for {self.attack} damage!\n")
        target.take_damage(self.attack)


class Monster(Entity):
    """A hostile entity found in the dungeon."""


class Goblin(Monster):
    """A goblin: 10 health, 2 attack."""

    def __init__(self, output: Optional[Output] = None) -> None:
        super().__init__("Goblin", 10, 2, output)


class Monk(Entity):
    """The player's character: 15 health, 3 attack."""

    def __init__(self, name: str, description: str, output: Optional[Output] = None) -> None:
        super().__init__(name, 15, 3, output)
        self.description = description

    def increase_health(self, amount: int) -> None:
        """Raise maximum health and restore health to it."""
        self.max_health += amount
        self.health = self.max_health

    def increase_attack(self, amount: int) -> None:
        self.attack += amount

    def meditate(self) -> None:
        """Fully restore health."""
        self.health = self.max_health
        self.output(f"{self.name} meditates and fully restores health.\n")