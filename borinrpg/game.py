"""The main game loop and the command that starts it."""

from __future__ import annotations

import argparse
import random

from borinrpg.banner import shop, show_banner, show_menu
from borinrpg.enemy import Enemy, Stage, random_enemy
from borinrpg.player import Player, fight, level_check, show_stats
from borinrpg.screen import Screen

_STAGE_KEYS = {str(int(stage)): stage for stage in Stage}
_BOSS_LEVEL = 100


def _boss_encounter(screen: Screen) -> None:
    boss = Enemy(90, "ice cthulhu", 20, 8, 10, "great strength", 10)
    screen.refresh()
    screen.getkey()
    screen.clear()
    if boss.hp <= 0:
        screen.write("YOU WON!!! now keep leveling up\nor leave and do this again!\n")
    else:
        screen.write("you lost my guy, try again sometime.\n")
    screen.refresh()
    screen.getkey()
    screen.write("you have defeated the boss, you are the champion of the world\n")
    screen.refresh()


def run(screen: Screen, rng=None) -> Player:
    """Play a game on a screen until the player dies or quits; return the player."""
    rng = random.Random() if rng is None else rng
    player = Player()
    words = screen.readline("What's your name, young warrior? : ", 10, 10).split()
    if words:
        player.name = words[0]
    screen.refresh()
    show_banner(screen)
    screen.clear()

    while player.hp >= 1:
        show_stats(player, screen)
        show_menu(player, screen)
        screen.refresh()
        choice = screen.getkey()

        stage = _STAGE_KEYS.get(choice)
        if stage is not None:
            screen.clear()
            fight(player, random_enemy(stage, rng), screen, rng)
            screen.refresh()
        elif choice == "5":
            shop(player, screen)
            screen.refresh()
            screen.getkey()
        elif choice == "6" and player.level >= _BOSS_LEVEL:
            _boss_encounter(screen)
        elif choice == "7":
            return player

        screen.clear()
        show_stats(player, screen)
        level_check(player, screen, rng)
        screen.clear()

    screen.clear()
    return player


def main(argv=None) -> int:
    """Start the game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="borinrpg", description="Fight beasts and trolls in the terminal.")
    parser.parse_args(argv)

    import curses

    from borinrpg.screen import CursesScreen

    curses.wrapper(lambda stdscr: run(CursesScreen(stdscr)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())