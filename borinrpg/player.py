"""The player, the battle loop and levelling up."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass

from borinrpg.enemy import Enemy
from borinrpg.screen import Color, Screen

_BAR = "-" * 49 + "\n"

# Carrying one of these resets attack to 10 at the start of every fight.
_RESET_WEAPONS = frozenset(
    {
        "brass knuckles",
        "metal bat",
        "chain",
        "wooden dagger",
        "iron dagger",
        "short sword",
        "long sword",
        "uzi",
        "ak47",
        "RPG",
    }
)

# Highest level of each band and what reaching a level in it grants:
# (extra exp needed, max hp gain, attack gain).
_LEVEL_BANDS = (
    (10, (10, 5, 5)),
    (20, (50, 4, 4)),
    (30, (70, 3, 3)),
    (50, (100, 2, 2)),
    (70, (150, 1, 1)),
    (90, (225, 1, 1)),
    (120, (300, 1, 1)),
)
_BEYOND_BANDS = (100, 1, 1)


@dataclass
class Player:
    """The hero; the defaults are the starting character."""

    hp: int = 10
    name: str = " "
    attack: int = 10
    level: int = 1
    exp: int = 0
    exptolevelup: int = 20
    maxhp: int = 1000
    weapon: str = "fist"
    coins: int = 1000


class FightOutcome(enum.Enum):
    """How a fight ended."""

    WON = "won"
    LOST = "lost"


def show_stats(player: Player, screen: Screen) -> None:
    """Draw the player's stat block."""
    screen.put(f"Name:  {player.name}\n", 4, 10)
    screen.put("player hp: ", 3, 10)
    hp_color = Color.GREEN if player.hp >= 80 else Color.YELLOW
    screen.put(f"{player.hp}\n", 3, 25, hp_color)
    screen.put(f"level:  {player.level}\n", 5, 10)
    screen.put(f"exp:   {player.exp}\n", 6, 10)
    to_level = max(player.exptolevelup, 0)
    screen.put(f"exp to get:  {to_level - player.exp}\n", 7, 10)
    screen.put(f"weapon:   {player.weapon}\n", 8, 10)
    screen.put(f"attack:  {player.attack}\n", 9, 10)
    screen.put(f"Coins:   {player.coins}\n\n\n", 10, 10)


def _draw_panel(screen: Screen, col: int, color: Color, name: str, hp: int,
                details: tuple[str, ...] = ()) -> None:
    screen.put(_BAR, 5, col, color)
    screen.put(f"{name}       HP:   {hp}\n", 6, col, color)
    row = 7
    for row, line in enumerate(details, start=7):
        screen.put(line, row, col, color)
    screen.put(_BAR, row + 1 if details else 7, col, color)


def _draw_fighters(player: Player, enemy: Enemy, screen: Screen) -> None:
    _draw_panel(screen, 10, Color.YELLOW, player.name, player.hp, (
        f"Weapon:  {player.weapon}\n",
        f"Attack:   {player.attack}\n",
        f"Level:  {player.level}\n",
        f"Coins:  {player.coins}\n",
    ))
    _draw_panel(screen, 60, Color.CYAN, enemy.name, enemy.hp, (
        f"Weapon:  {enemy.weapon}\n",
        f"Attack:   {enemy.attack}\n",
        f"Level:  {enemy.level}\n",
        f"Coins:  {enemy.coins}\n",
    ))


def _acknowledge(screen: Screen) -> None:
    screen.refresh()
    screen.getkey()
    screen.clear()


def _roll_reward(rng, top: int) -> int:
    value = rng.randrange(top) + 1
    return 1 if value == ord("0") else value


def fight(player: Player, enemy: Enemy, screen: Screen, rng=None) -> FightOutcome:
    """Run a battle until one side drops, updating both in place."""
    rng = random if rng is None else rng
    if player.weapon == "fist":
        player.attack += 1
    elif player.weapon in _RESET_WEAPONS:
        player.attack = 10

    while player.hp >= 1 and enemy.hp >= 1:
        _draw_fighters(player, enemy, screen)
        screen.put("Press a key to attack or block\n", 20, 25)
        screen.put("a) attack", 22, 25)
        screen.put("b) block\n\n-->  ", 23, 25)
        screen.refresh()

        enemy_choice = rng.randint(1, 2)
        choice = screen.getkey()
        screen.clear()

        if choice == "a" and enemy_choice == 1:
            screen.put("You both attacked\n\n", 20, 20)
            player_hit = rng.randrange(player.attack) if player.attack > 0 else 0
            enemy_hit = rng.randrange(enemy.attack) if enemy.attack > 0 else 0
            player.hp -= enemy_hit
            enemy.hp -= player_hit
            screen.put(f"{player.name} was hit with {enemy_hit} damage\n", 21, 20)
            screen.put(f"{enemy.name} was hit with {player_hit} damage\n\n", 22, 20)
            _acknowledge(screen)
        elif choice == "b" and enemy_choice == 2:
            screen.write("You both blocked, no one attacked\n")
            _acknowledge(screen)
        elif choice == "b":
            screen.clear()
            if enemy.attack > 0:
                damage = (rng.randrange(enemy.attack) + 1) // 2
                player.hp -= damage
                screen.write(f"You blocked and took {damage} damage\n")
            else:
                screen.write("Enemy's attack is zero, you took no damage.\n")
            _acknowledge(screen)
        elif choice == "a":
            screen.put(
                f"{player.name} attacked but {enemy.name} blocked, "
                "they take half damage!\n\n", 10, 20)
            if player.attack > 0:
                damage = (rng.randrange(player.attack) + 1) // 2
                enemy.hp -= damage
                screen.put(f"{enemy.name} took {damage} damage\n", 20, 20)
            else:
                screen.put(f"{player.name} attack is zero, no damage done.", 20, 20)
            _acknowledge(screen)
            enemy.hp = max(enemy.hp, 0)

        if player.hp <= 0 and enemy.hp >= 1:
            screen.clear()
            screen.put(
                f"{player.name} has {player.hp} HP. You died my dude. "
                "Press something to leave.\n", 20, 20)
            screen.refresh()
            screen.getkey()
            return FightOutcome.LOST

        if enemy.hp <= 0:
            screen.clear()
            _draw_panel(screen, 10, Color.YELLOW, player.name, player.hp)
            _draw_panel(screen, 60, Color.CYAN, enemy.name, enemy.hp)
            screen.put("You win the battle!!!!!!", 15, 20, Color.GREEN)
            exp_gain = _roll_reward(rng, enemy.exp)
            coin_gain = _roll_reward(rng, enemy.coins)
            player.exp += exp_gain
            player.coins += coin_gain
            screen.put(f"you got {coin_gain} coins and {exp_gain} exp :D",
                       17, 20, Color.GREEN)
            screen.refresh()
            screen.getkey()
            return FightOutcome.WON

        screen.clear()

    return FightOutcome.LOST if player.hp < 1 else FightOutcome.WON


def level_gains(level: int) -> tuple[int, int, int]:
    """Return (extra exp needed, max hp gain, attack gain) for reaching a level."""
    for top, gains in _LEVEL_BANDS:
        if level <= top:
            return gains
    return _BEYOND_BANDS


def _write_stats(screen: Screen, player: Player) -> None:
    screen.write(f"level:  {player.level}\n")
    screen.write(f"attack:  {player.attack}\n")


def level_check(player: Player, screen: Screen, rng=None) -> bool:
    """Level the player up once if enough exp was gained; report whether it happened."""
    if player.exp < player.exptolevelup:
        return False
    rng = random if rng is None else rng

    screen.write("you leveled up!!!\n\n")
    screen.write("--old stats--\n")
    _write_stats(screen, player)
    screen.write(f"max hp:  {player.maxhp}\n")
    screen.write(f"coins  {player.coins}\n\n")

    player.level += 1
    exp_step, hp_gain, attack_gain = level_gains(player.level)
    if player.level > 120:
        player.level += 1
    player.exptolevelup += exp_step
    player.maxhp += hp_gain
    player.attack += attack_gain

    bonus = rng.randint(1, 25)
    player.coins += bonus
    screen.write("--New stats--\n")
    _write_stats(screen, player)
    screen.write(f"max hp:  {player.maxhp}\n\nheres a coin bonus of {bonus} also!!\n")
    screen.write(f"coins:   {player.coins}")
    screen.refresh()
    screen.getkey()
    screen.write("\n\npress something........")
    screen.clear()
    return True