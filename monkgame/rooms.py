"""Dungeon rooms and the factory that builds them."""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from typing import Optional

from .console import Console
from .entities import Goblin, Monk

log = logging.getLogger(__name__)


class Room(ABC):
    """A room with a type, a description and one-way exits to other rooms."""

    def __init__(self, room_type: str, description: str) -> None:
        self.room_type = room_type
        self.description = description
        self.connected_rooms: list[Room] = []
        log.debug("Room created: %s - %s", room_type, description)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def add_connection(self, room: Room) -> None:
        self.connected_rooms.append(room)

    @abstractmethod
    def on_enter(self, monk: Monk, console: Console) -> None:
        """Run what happens when the monk walks in."""


class EmptyRoom(Room):
    def __init__(self) -> None:
        super().__init__("Empty", "A quiet, empty room.")

    def on_enter(self, monk: Monk, console: Console) -> None:
        console.write("You entered an empty room. Meditating to restore full health.\n")
        monk.heal(monk.max_health)


class TreasureRoom(Room):
    def __init__(self) -> None:
        super().__init__("Treasure", "The treasure room!")

    def on_enter(self, monk: Monk, console: Console) -> None:
        console.write("You found the treasure! You win!\n")


class UpgradeRoom(Room):
    def __init__(self) -> None:
        super().__init__("Upgrade", "A room with an upgrade station.")

    def on_enter(self, monk: Monk, console: Console) -> None:
        console.write("You entered an upgrade room. Choose an upgrade:\n")
        console.write("1. Increase health by 5\n")
        console.write("2. Increase attack by 2\n")
        while True:
            try:
                choice = console.read_int("Enter your choice: ")
            except ValueError:
                console.write("Invalid input. Try again.\n")
                continue
            if choice == 1:
                monk.increase_health(5)
                console.write("Max health increased!\n")
                return
            if choice == 2:
                monk.increase_attack(2)
                console.write("Attack power increased!\n")
                return
            console.write("Invalid choice. Try again.\n")


class MonsterRoom(Room):
    """A room where a goblin must be fought."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__("Monster", "A room with a dangerous goblin!")
        self.rng = rng or random.Random()

    def _coin(self) -> bool:
        return self.rng.randrange(2) == 0

    def on_enter(self, monk: Monk, console: Console) -> None:
        console.write("You entered a monster room. A goblin appears!\n")
        goblin = Goblin(output=console.write)

        while monk.is_alive() and goblin.is_alive():
            console.write("\n--- Combat Turn ---\n")
            console.write(f"Monk HP: {monk.health} | Goblin HP: {goblin.health}\n")
            console.write("Choose your action:\n")
            console.write("1. Attack\n")
            console.write("2. Guard (+1 HP)\n")
            try:
                choice: Optional[int] = console.read_int("")
            except ValueError:
                choice = None

            monk_success = self._coin()
            goblin_success = self._coin()

            if not monk_success:
                console.write("Your action failed!\n")
            elif choice == 1:
                monk.attack_entity(goblin)
                console.write("You attack the goblin!\n")
            elif choice == 2:
                monk.heal(1)
                console.write("You guard and regain 1 HP.\n")
            else:
                console.write("Invalid action.\n")

            if goblin.is_alive():
                if not goblin_success:
                    console.write("The goblin's action failed!\n")
                elif self._coin():
                    goblin.attack_entity(monk)
                    console.write("The goblin attacks you!\n")
                else:
                    goblin.heal(1)
                    console.write("The goblin guards and regains 1 HP.\n")

        if monk.is_alive():
            console.write("\nYou defeated the goblin!\n")
        else:
            console.write("\nYou have been defeated by the goblin...\n")


def create_room(room_type: str, rng: Optional[random.Random] = None) -> Room:
    """Build a room by its type name; raise ValueError for unknown types."""
    if room_type == "Empty":
        return EmptyRoom()
    if room_type == "Monster":
        return MonsterRoom(rng)
    if room_type == "Upgrade":
        return UpgradeRoom()
    if room_type == "Treasure":
        return TreasureRoom()
    raise ValueError("Unknown room type")