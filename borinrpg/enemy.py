"""Enemies and the areas they are met in."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass

from borinrpg.screen import Screen


@dataclass
class Enemy:
    """A creature the player can fight."""

    hp: int
    name: str
    attack: int
    exp: int
    level: int
    weapon: str
    coins: int


class Stage(enum.IntEnum):
    """Areas that can be chosen from the main menu."""

    WOODS = 1
    DESERT = 2
    JUNGLE = 3
    ICELANDS = 4


_ROSTERS: dict[Stage, tuple[tuple, ...]] = {
    Stage.WOODS: (
        (3, "mini troll", 5, 3, 1, "fists", 3),
        (4, "goblin", 8, 3, 1, "fists", 5),
        (6, "wolf", 10, 3, 2, "claws", 5),
        (7, "Big Python", 15, 5, 2, "fangs", 6),
        (8, "Big Foot", 25, 5, 3, "big feet", 8),
    ),
    Stage.DESERT: (
        (15, "small troll", 5, 5, 5, "fists", 5),
        (15, "thirsty goblin", 8, 8, 5, "fists", 8),
        (15, "hungry coyote", 10, 8, 5, "teeth", 9),
        (25, "blood thirsty memphits", 15, 8, 8, "fangs", 9),
        (25, "giant scorpion", 20, 8, 10, "stinger", 10),
    ),
    Stage.JUNGLE: (
        (40, "medium troll", 5, 5, 5, "fists", 5),
        (45, "hairy goblin", 8, 8, 5, "fists", 8),
        (45, "starved coyote", 10, 8, 5, "teeth", 9),
        (50, "blood thirsty vampire", 15, 8, 8, "fangs", 9),
        (55, "giant anaconda", 20, 8, 10, "fangs", 10),
    ),
    Stage.ICELANDS: (
        (60, "large troll", 5, 5, 5, "fists", 5),
        (60, "ice goblin", 8, 8, 5, "fists", 8),
        (70, "ice bear ", 10, 8, 5, "claws", 9),
        (75, "ice dragon", 15, 8, 8, "ice attack", 9),
        (90, "ice cthulhu", 20, 8, 10, "great strength", 10),
    ),
}


def enemies_for(stage: Stage | int) -> list[Enemy]:
    """Return fresh copies of the five enemies found in a stage."""
    return [Enemy(*row) for row in _ROSTERS[Stage(stage)]]


def random_enemy(stage: Stage | int, rng=None) -> Enemy:
    """Pick one enemy of a stage, each equally likely."""
    rng = random if rng is None else rng
    roster = enemies_for(stage)
    return roster[rng.randrange(len(roster))]


def say_hi(enemy: Enemy, screen: Screen) -> None:
    """Have an enemy greet the player."""
    screen.write("ello")