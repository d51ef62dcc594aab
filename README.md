# monkgame

A small text-based dungeon crawler played in the terminal. You control a monk
named Hero who walks through a chain of rooms, fighting goblins, choosing
upgrades and resting, until the treasure room is reached.

## Installing

```
pip install .
```

## Playing

```
monkgame
```

To replay the same dungeon layout and dice rolls, give a seed:

```
monkgame --seed 42
```

Each game builds a new dungeon. It holds an empty room, an upgrade room, two
monster rooms and up to two extra random rooms, in shuffled order. The
treasure room is always last. The rooms are linked in one line, each leading
only to the next.

- **Empty room**: the monk meditates and gets back full health.
- **Upgrade room**: choose `1` for +5 maximum health (health is refilled) or
  `2` for +2 attack. Any other answer asks again.
- **Monster room**: a goblin (10 HP, 2 attack) appears. Each turn choose `1`
  to attack or `2` to guard and regain 1 HP. Each action, yours or the
  goblin's, fails half of the time. When the goblin acts, it picks at random
  between attacking and guarding. The fight goes on until one side falls.
- **Treasure room**: you win.

After each room the game lists the connected rooms. Enter a room's number to
move on, or `0` to stop exploring. When input runs out (end of file) or the
game is interrupted with Ctrl-C, it ends quietly.

The monk starts with 15 health and 3 attack.

## Using it as a library

The game pieces can also be used from Python code:

```python
import random

from monkgame.console import Console
from monkgame.dungeon import Dungeon
from monkgame.entities import Monk

console = Console()
dungeon = Dungeon(random.Random(42))
dungeon.generate()
dungeon.explore(Monk("Hero", "A brave monk seeking adventure!", output=console.write), console)
```

- `Console(stdin=None, stdout=None)` writes game text and reads whole numbers;
  it uses `sys.stdin` and `sys.stdout` unless other streams are given.
  `read_int` raises `ValueError` for a line that is not a number and
  `EOFError` when input is exhausted.
- `Dungeon.explore` raises `RuntimeError` if `generate` has not been called.
- `monkgame.rooms.create_room(room_type, rng)` builds a single room from one
  of the types `"Empty"`, `"Monster"`, `"Upgrade"` or `"Treasure"`, for
  example `create_room("Monster", random.Random())`. Any other name raises
  `ValueError`.
- `monkgame.entities` holds `Entity`, `Monster`, `Goblin` and `Monk`. Their
  messages go to the `output` callable given to them, or to standard output.

## What it does not do

There is no saving or loading of games, and the dungeon is always a single
line of rooms with no branching paths. Room creation is reported only through
the `monkgame.rooms` logger at debug level, not on screen.

## Running the tests

```
pip install ".[test]"
pytest
```