# territorywar

A small turn-based game played at the console, with prompts and messages in
Portuguese. You register territories, each with a name, an army colour and a
number of troops, and then let them fight it out with dice.

## Installing

```
pip install .
```

## Playing

The `territorywar` command takes the mode of play as its one required
argument:

```
territorywar beginner
territorywar adventurer
territorywar master --seed 42
```

- **beginner**: register five territories and see them listed.
- **adventurer**: choose how many territories to register, then attack one
  territory from another for as long as you answer `s` or `S` when asked
  whether to attack again. Each side rolls one six-sided die. When the
  attacker rolls strictly higher, the defender takes the attacker's colour
  and half of the attacker's troops (rounded down) move there. Otherwise the
  attacker loses one troop. A territory cannot attack one of its own colour,
  and it needs at least two troops to attack.
- **master**: the same battles, with a sixth colour (Branco) to choose from.
  Two players, the Azul and Vermelho armies, each get a mission drawn at
  random. They take turns to attack (1), check their mission (2) or quit (0).
  After each of a player's attacks their mission is checked automatically,
  and the first to fulfil it wins.

`--seed` fixes the random number generator used for dice and missions, so a
game can be replayed. Names of territories are cut to 29 characters. Numbers
that cannot be read are asked for again. If input ends, or the number of
territories is not positive, the command prints a message to standard error
and exits with status 1.

Of the five missions, only "Conquistar 3 territorios" (hold at least three
territories of your colour) and "Destruir o exercito Verde" (no Verde
territory has troops left) can be fulfilled; the others are drawn but never
count as done.

## Using it as a library

The pieces of the game can be used on their own:

```python
import random

from territorywar.territory import Territory, attack, format_compact
from territorywar.mission import draw_mission, mission_accomplished

rng = random.Random(1)
north = Territory("Norte", "Verde", 10)
south = Territory("Sul", "Azul", 3)

result = attack(north, south, rng)
print(result.attacker_roll, result.defender_roll, result.attacker_won)
print(format_compact([north, south]))

mission = draw_mission(["Conquistar 3 territorios"], rng)
print(mission_accomplished(mission, [north, south], "Verde"))
```

- `territorywar.territory`: `Territory`, `roll_die`, `attack` (updates both
  territories in place, raises `AttackError` when the attack is not allowed
  and returns a `BattleResult` otherwise), `format_detailed` and
  `format_compact`.
- `territorywar.mission`: `Player`, `MISSIONS`, `draw_mission` and
  `mission_accomplished`.
- `territorywar.console`: `Console`, which prompts on one text stream and
  reads from another (standard input and output by default).
- `territorywar.games`: `run_beginner(console)`, `run_adventurer(console, rng)`
  and `run_master(console, rng)`, the three modes. `run_master` returns the
  number of the winning player, or `None` if the game was quit.

## What it does not do

Games are not saved: the map lives only for one run of the command. There is
no computer opponent; every move is typed in at the console.

## Running the tests

```
pip install .[test]
pytest
```