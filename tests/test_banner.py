import pytest

from borinrpg.banner import (
    NotEnoughCoins,
    Potion,
    Weapon,
    buy_potion,
    buy_weapon,
    shop,
    show_banner,
    show_menu,
)
from borinrpg.player import Player
from borinrpg.screen import Color, MemoryScreen


def test_banner_waits_for_one_key():
    screen = MemoryScreen(keys=["x"])
    show_banner(screen)
    assert "Welcome to BorinRPG" in screen.transcript()
    with pytest.raises(EOFError):
        screen.getkey()


def test_banner_without_key_raises():
    with pytest.raises(EOFError):
        show_banner(MemoryScreen())


def test_menu_locked_boss_below_level_100():
    screen = MemoryScreen()
    show_menu(Player(level=1), screen)
    assert ("6) UNLOCK AT LVL 100!!!  -120 hp boss!!-\n", Color.RED) in screen.entries
    assert "MAN BEAR PIG" not in screen.transcript()


def test_menu_unlocked_boss_at_level_100():
    screen = MemoryScreen()
    show_menu(Player(level=100), screen)
    assert ("6) go Fight MAN BEAR PIG!!   -120 hp!-\n", Color.GREEN) in screen.entries
    assert "UNLOCK" not in screen.transcript()


def test_small_potion_heals_and_costs():
    player = Player(hp=10, maxhp=1000, coins=1000)
    assert buy_potion(player, "1") is Potion.SMALL
    assert player.hp == 10 + 25
    assert player.coins == 1000 - 25


def test_small_potion_capped_at_max():
    player = Player(hp=990, maxhp=1000, coins=100)
    buy_potion(player, "1")
    assert player.hp == player.maxhp


def test_half_potion_capped():
    player = Player(hp=900, maxhp=1000, coins=100)
    assert buy_potion(player, "2") is Potion.HALF
    assert player.hp == player.maxhp
    assert player.coins == 100 - 50


def test_full_potion_restores_max():
    player = Player(hp=1, maxhp=1000, coins=100)
    assert buy_potion(player, "3") is Potion.FULL
    assert player.hp == player.maxhp
    assert player.coins == 0


def test_potion_without_coins_raises_and_changes_nothing():
    player = Player(hp=10, coins=10)
    with pytest.raises(NotEnoughCoins):
        buy_potion(player, "1")
    assert (player.hp, player.coins) == (10, 10)


def test_unknown_potion_key():
    player = Player(coins=500)
    assert buy_potion(player, "9") is None
    assert player.coins == 500


def test_brass_knuckles_adds_attack():
    player = Player(attack=10, coins=100)
    assert buy_weapon(player, "1") is Weapon.BRASS_KNUCKLES
    assert player.weapon == "brass knuckles"
    assert player.attack == 11
    assert player.coins == 100 - 20


def test_chain_replaces_attack():
    player = Player(attack=40, coins=100)
    buy_weapon(player, "3")
    assert player.attack == 3
    assert player.weapon == "chain"


def test_rpg_costs_everything():
    player = Player(attack=10, coins=1000)
    assert buy_weapon(player, "0") is Weapon.RPG
    assert player.weapon == "rpg"
    assert player.coins == 0
    assert player.attack == 10 + 50


def test_weapon_without_coins_raises():
    player = Player(coins=99)
    with pytest.raises(NotEnoughCoins) as info:
        buy_weapon(player, "5")
    assert info.value.price == 100
    assert player.weapon == "fist"


def test_unknown_weapon_key():
    player = Player(coins=500)
    assert buy_weapon(player, "z") is None
    assert player.weapon == "fist"


def test_shop_buys_potion_then_leaves():
    player = Player(hp=10, maxhp=1000, coins=1000)
    screen = MemoryScreen(keys=["1", "3", "3"])
    shop(player, screen)
    assert player.hp == player.maxhp
    assert player.coins == 1000 - 100


def test_shop_complains_when_poor():
    player = Player(coins=0)
    screen = MemoryScreen(keys=["2", "0", "x", "3"])
    shop(player, screen)
    assert "you dont have enough coins bro" in screen.transcript()
    assert player.weapon == "fist"


def test_shop_ignores_other_keys_until_leave():
    player = Player(coins=1000)
    screen = MemoryScreen(keys=["q", "w", "3"])
    shop(player, screen)
    assert player.coins == 1000
    assert screen.transcript().count("Welcome to the shop") == 3