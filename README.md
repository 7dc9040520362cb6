# borinrpg

A small role-playing game for the terminal. You name your warrior and then
travel to harder and harder regions to fight beasts and trolls. You earn
experience and coins, level up, and spend your coins in the shop on potions
and weapons.

## Installing

```
pip install .
```

## Playing

```
borinrpg
```

The game runs in a full-screen curses window, so it needs a terminal that
supports curses. The command takes no options except `--help`.

First the game asks for your warrior's name. Only the first word you type is
kept. After the welcome screen, the main menu offers:

1. the woods: easy enemies, 3 to 8 hp
2. the desert: medium enemies, 15 to 25 hp
3. the jungle: hard enemies, 40 to 55 hp
4. the icelands: harder enemies, 60 to 90 hp
5. the store
6. the boss, unlocked at level 100
7. quit

Each region has five enemies. One of them is picked at random, each equally
likely.

### Fighting

Each round you press `a` to attack or `b` to block. The enemy picks attack or
block at random:

- If you both attack, each side takes a random hit below its opponent's
  attack.
- If you both block, nothing happens.
- If you block while the enemy attacks, you take about half of a random hit.
- If you attack while the enemy blocks, the enemy takes about half of a random
  hit.

The fight ends when one side reaches 0 hp. If you win, you gain random
experience and coins, up to the enemy's limits. The game ends when your hp
drops below 1.

At the start of every fight, fighting with your fist adds 1 to your attack.
Most weapons sold in the shop set your attack to 10 at the start of every
fight.

### Levelling up

After each menu choice, the game checks whether your experience has reached
the amount needed for the next level. If it has, you gain one level. Each
level raises your maximum hp and your attack by an amount that gets smaller
at higher levels. It also raises the experience needed for the next level and
gives you a coin bonus of 1 to 25.

### The store

The store sells three potions:

| Potion | Effect | Price |
|---|---|---|
| small | 25 hp | 25 coins |
| half | half your maximum hp | 50 coins |
| full | full heal | 100 coins |

It also sells ten weapons, from brass knuckles ($20) to an RPG ($1000). The
chain and the wooden dagger set your attack to their value. All other weapons
add to your attack. You start with 1000 coins.

## Using it as a library

The game logic is kept apart from the terminal. Every part of the game draws
on a `borinrpg.screen.Screen`:

- `CursesScreen` wraps a curses window.
- `MemoryScreen` replays a scripted list of key presses and typed lines. It
  records everything written, and `transcript()` returns all of it.

This lets you run a whole game without a terminal. In the example below, the
first key dismisses the welcome screen and the second one quits:

```python
import random

from borinrpg.game import run
from borinrpg.screen import MemoryScreen

screen = MemoryScreen(keys=["x", "7"], lines=["Hero"])
player = run(screen, random.Random(1))
print(screen.transcript())
```

`run` returns the final `Player`. If the scripted input runs out,
`MemoryScreen` raises `EOFError`.

Modules:

- `borinrpg.player`
  - `Player`
  - `FightOutcome`
  - `show_stats`
  - `fight`, which returns `FightOutcome.WON` or `FightOutcome.LOST`
  - `level_gains`
  - `level_check`
- `borinrpg.enemy`
  - `Enemy`
  - `Stage`
  - `enemies_for`
  - `random_enemy`
  - `say_hi`
- `borinrpg.banner`
  - `show_banner`
  - `show_menu`
  - `shop`
  - `Potion`
  - `Weapon`
  - `buy_potion` and `buy_weapon`, which raise `NotEnoughCoins` when the
    player cannot pay and return `None` for a key that sells nothing

## What it does not do

- Progress is never saved. Quitting or dying ends the game for good.
- The boss choice does not start a fight. It only shows a defeat message
  followed by a champion message.
- The game can run in a terminal only through curses. Python provides curses
  on POSIX systems, not on Windows.

## Running the tests

```
pip install .[test]
pytest
```