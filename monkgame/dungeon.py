"""Dungeon layout and the exploration loop."""

from __future__ import annotations

import random
from typing import Optional

from .console import Console
from .entities import Monk
from .rooms import Room, create_room

_REQUIRED_ROOMS = ("Empty", "Upgrade", "Monster", "Monster")
_EXTRA_ROOM_TYPES = ("Empty", "Monster", "Upgrade")


class Dungeon:
    """A linear chain of rooms that always ends in the treasure room."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()
        self.rooms: list[Room] = []
        self.starting_room: Optional[Room] = None

    def generate(self) -> None:
        """Build a shuffled set of rooms followed by the treasure room."""
        treasure = create_room("Treasure", self.rng)
        rooms = [create_room(kind, self.rng) for kind in _REQUIRED_ROOMS]
        extra_count = self.rng.randrange(3)
        rooms.extend(
            create_room(self.rng.choice(_EXTRA_ROOM_TYPES), self.rng) for _ in range(extra_count)
        )
        self.rng.shuffle(rooms)
        rooms.append(treasure)
        self.rooms = rooms
        self._connect_rooms()
        self.starting_room = rooms[0]

    def _connect_rooms(self) -> None:
        for here, there in zip(self.rooms, self.rooms[1:]):
            here.add_connection(there)

    def explore(self, monk: Monk, console: Console) -> None:
        """Walk the monk through the dungeon, asking where to go next."""
        if self.starting_room is None:
            raise RuntimeError("dungeon has not been generated")
        current = self.starting_room
        while True:
            current.on_enter(monk, console)
            connections = current.connected_rooms
            if not connections:
                console.write("No more rooms to explore. Game over!\n")
                return

            console.write("\nConnected rooms:\n")
            for number, room in enumerate(connections, start=1):
                console.write(f"{number}. {room.room_type}\n")

            while True:
                try:
                    choice = console.read_int("Choose a room to go to (0 to quit): ")
                except ValueError:
                    console.write("Invalid input. Please enter a number.\n")
                    continue
                if choice == 0:
                    console.write("Exiting exploration.\n")
                    return
                if 0 < choice <= len(connections):
                    current = connections[choice - 1]
                    break
                console.write("Invalid choice. Try again.\n")