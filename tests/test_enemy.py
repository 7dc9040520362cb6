import random

import pytest

from borinrpg.enemy import Enemy, Stage, enemies_for, random_enemy, say_hi
from borinrpg.screen import MemoryScreen


class _FixedIndex:
    def __init__(self, index):
        self.index = index
        self.bounds = []

    def randrange(self, n):
        self.bounds.append(n)
        return self.index


def test_woods_roster_matches_source():
    names = [enemy.name for enemy in enemies_for(Stage.WOODS)]
    assert names == ["mini troll", "goblin", "wolf", "Big Python", "Big Foot"]
    assert enemies_for(Stage.WOODS)[0] == Enemy(3, "mini troll", 5, 3, 1, "fists", 3)


def test_icelands_boss_of_the_stage():
    last = enemies_for(Stage.ICELANDS)[-1]
    assert last == Enemy(90, "ice cthulhu", 20, 8, 10, "great strength", 10)


@pytest.mark.parametrize("stage", list(Stage))
def test_every_stage_has_five_living_enemies(stage):
    roster = enemies_for(stage)
    assert len(roster) == 5
    assert all(enemy.hp > 0 and enemy.exp > 0 and enemy.coins > 0 for enemy in roster)


def test_stage_accepts_menu_number():
    assert enemies_for(2) == enemies_for(Stage.DESERT)


def test_unknown_stage_is_rejected():
    with pytest.raises(ValueError):
        enemies_for(5)


def test_rosters_are_fresh_copies():
    first = enemies_for(Stage.JUNGLE)
    first[0].hp = -100
    assert enemies_for(Stage.JUNGLE)[0].hp == 40


def test_random_enemy_uses_index_from_rng():
    rng = _FixedIndex(3)
    enemy = random_enemy(Stage.DESERT, rng)
    assert enemy.name == "blood thirsty memphits"
    assert rng.bounds == [5]


def test_random_enemy_belongs_to_stage():
    rng = random.Random(42)
    roster = enemies_for(Stage.JUNGLE)
    for _ in range(20):
        assert random_enemy(Stage.JUNGLE, rng) in roster


def test_say_hi_writes_greeting():
    screen = MemoryScreen()
    say_hi(enemies_for(Stage.WOODS)[1], screen)
    assert screen.transcript() == "ello"