import io

import pytest

from monkgame.console import Console
from monkgame.entities import Monk
from monkgame.rooms import (
    EmptyRoom,
    MonsterRoom,
    TreasureRoom,
    UpgradeRoom,
    create_room,
)


class FixedRng:
    def __init__(self, value=0):
        self.value = value
        self.calls = 0

    def randrange(self, n):
        self.calls += 1
        return self.value


def setup(text):
    out = io.StringIO()
    console = Console(io.StringIO(text), out)
    monk = Monk("Hero", "brave", output=console.write)
    return console, monk, out


@pytest.mark.parametrize(
    "name, cls",
    [("Empty", EmptyRoom), ("Monster", MonsterRoom), ("Upgrade", UpgradeRoom), ("Treasure", TreasureRoom)],
)
def test_create_room_types(name, cls):
    room = create_room(name)
    assert isinstance(room, cls)
    assert room.room_type == name
    assert room.connected_rooms == []


def test_create_room_unknown():
    with pytest.raises(ValueError, match="Unknown room type"):
        create_room("Kitchen")


def test_create_monster_room_uses_given_rng():
    rng = FixedRng()
    assert create_room("Monster", rng).rng is rng


def test_add_connection_keeps_order():
    a, b, c = EmptyRoom(), UpgradeRoom(), TreasureRoom()
    a.add_connection(b)
    a.add_connection(c)
    assert a.connected_rooms == [b, c]
    assert b.connected_rooms == []


def test_empty_room_heals_fully():
    console, monk, out = setup("")
    monk.take_damage(9)
    EmptyRoom().on_enter(monk, console)
    assert monk.health == monk.max_health
    assert "Meditating to restore full health" in out.getvalue()


def test_treasure_room_announces_win():
    console, monk, out = setup("")
    TreasureRoom().on_enter(monk, console)
    assert out.getvalue() == "You found the treasure! You win!\n"


def test_upgrade_health_after_bad_input():
    console, monk, out = setup("abc\n9\n1\n")
    UpgradeRoom().on_enter(monk, console)
    assert monk.max_health == 20
    assert monk.health == 20
    text = out.getvalue()
    assert "Invalid input. Try again." in text
    assert "Invalid choice. Try again." in text
    assert text.endswith("Max health increased!\n")


def test_upgrade_attack():
    console, monk, out = setup("2\n")
    UpgradeRoom().on_enter(monk, console)
    assert monk.attack == 5
    assert out.getvalue().endswith("Attack power increased!\n")


def test_upgrade_eof_propagates():
    console, monk, _ = setup("")
    with pytest.raises(EOFError):
        UpgradeRoom().on_enter(monk, console)


def test_monster_room_monk_wins_when_attacking():
    console, monk, out = setup("1\n" * 20)
    MonsterRoom(FixedRng(0)).on_enter(monk, console)
    text = out.getvalue()
    assert monk.is_alive()
    assert monk.health < monk.max_health
    assert text.rstrip().endswith("You defeated the goblin!")
    assert "The goblin attacks you!" in text


def test_monster_room_monk_loses_when_guarding():
    console, monk, out = setup("2\n" * 60)
    MonsterRoom(FixedRng(0)).on_enter(monk, console)
    assert not monk.is_alive()
    assert out.getvalue().rstrip().endswith("You have been defeated by the goblin...")


def test_monster_room_invalid_action():
    console, monk, out = setup("x\n" + "1\n" * 20)
    MonsterRoom(FixedRng(0)).on_enter(monk, console)
    assert "Invalid action." in out.getvalue()
    assert monk.is_alive()


def test_monster_room_eof_propagates():
    console, monk, _ = setup("")
    with pytest.raises(EOFError):
        MonsterRoom(FixedRng(0)).on_enter(monk, console)