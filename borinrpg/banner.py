"""Title screen, main menu and the shop."""

from __future__ import annotations

import enum

from borinrpg.player import Player
from borinrpg.screen import Color, Screen

_POOR = "you dont have enough coins bro.......\npress something"
_POOR_SMALL_POTION = "you dont have enough coins bro.......\n-->  press something"


class NotEnoughCoins(Exception):
    """Raised when the player cannot afford an item."""

    def __init__(self, price: int, coins: int) -> None:
        super().__init__(f"costs {price} coins, only {coins} available")
        self.price = price
        self.coins = coins


class Potion(enum.Enum):
    """Healing potions sold in the shop."""

    SMALL = ("1", 25)
    HALF = ("2", 50)
    FULL = ("3", 100)

    def __init__(self, key: str, price: int) -> None:
        self.key = key
        self.price = price

    def heal(self, player: Player) -> None:
        """Apply this potion's effect to the player."""
        if self is Potion.SMALL:
            player.hp = min(player.hp + 25, player.maxhp)
        elif self is Potion.HALF:
            player.hp = min(player.hp + player.maxhp // 2, player.maxhp)
        else:
            player.hp = player.maxhp


class Weapon(enum.Enum):
    """Weapons sold in the shop: key, name, price, attack and whether it replaces attack."""

    BRASS_KNUCKLES = ("1", "brass knuckles", 20, 1, False)
    METAL_BAT = ("2", "metal bat", 30, 2, False)
    CHAIN = ("3", "chain", 50, 3, True)
    WOODEN_DAGGER = ("4", "wooden dagger", 80, 5, True)
    IRON_DAGGER = ("5", "irron dagger", 100, 7, False)
    SHORT_SWORD = ("6", "short sword", 120, 15, False)
    LONG_SWORD = ("7", "long sword", 160, 25, False)
    UZI = ("8", "uzi", 200, 35, False)
    AK47 = ("9", "ak47", 250, 45, False)
    RPG = ("0", "rpg", 1000, 50, False)

    def __init__(self, key: str, label: str, price: int, attack: int,
                 replaces: bool) -> None:
        self.key = key
        self.label = label
        self.price = price
        self.attack = attack
        self.replaces = replaces


_POTIONS = {potion.key: potion for potion in Potion}
_WEAPONS = {weapon.key: weapon for weapon in Weapon}

_WEAPON_LIST = (
    "\n\n1)  brass knuckles   +1 attack    $20\n"
    "2)  metal bat        +2 attack    $30\n"
    "3)  chain            +3 attack    $50\n"
    "4)  wooden dagger    +5 attack    $80\n"
    "5)  iron dagger     +7 attack    $100\n"
    "6)  short sword      +15 attack   $120\n"
    "7)  long sword       +25 attack   $160\n"
    "8)  uzi              +35 attack   $200\n"
    "9)  ak47             +45 attack   $250\n"
    "0)  RPG              +50 attack   $1000\n\n-->  "
)


def show_banner(screen: Screen) -> None:
    """Show the welcome text and wait for a key."""
    screen.clear()
    screen.put("Welcome to BorinRPG, you will fight beasts and trolls", 5, 10)
    screen.put("You will also level up and get weapons and exp!!!!!!! maybe", 6, 10)
    screen.put("Press anything to go on........", 7, 10)
    screen.refresh()
    screen.getkey()


def show_menu(player: Player, screen: Screen) -> None:
    """Draw the main menu of places to go."""
    for row, line in enumerate((
        "1) go to woods   -easy-     3-8   hp\n",
        "2) go to dessert  -medium-  15-25 hp\n",
        "3) go to jungle   -hard-    40-55 hp\n",
        "4) go to icelands  -harder- 60-90 hp\n",
        "5) go to store",
    ), start=3):
        screen.put(line, row, 40, Color.BLUE)
    if player.level < 100:
        screen.put("6) UNLOCK AT LVL 100!!!  -120 hp boss!!-\n", 8, 40, Color.RED)
    else:
        screen.put("6) go Fight MAN BEAR PIG!!   -120 hp!-\n", 8, 40, Color.GREEN)
    screen.refresh()
    screen.put("7) Quit    - no progress will be saved.....yet", 9, 40)


def _pay(player: Player, price: int) -> None:
    if player.coins < price:
        raise NotEnoughCoins(price, player.coins)
    player.coins -= price


def buy_potion(player: Player, key: str) -> Potion | None:
    """Buy and drink the potion on a shop key; None if the key sells nothing."""
    potion = _POTIONS.get(key)
    if potion is None:
        return None
    _pay(player, potion.price)
    potion.heal(player)
    return potion


def buy_weapon(player: Player, key: str) -> Weapon | None:
    """Buy and equip the weapon on a shop key; None if the key sells nothing."""
    weapon = _WEAPONS.get(key)
    if weapon is None:
        return None
    _pay(player, weapon.price)
    player.weapon = weapon.label
    if weapon.replaces:
        player.attack = weapon.attack
    else:
        player.attack += weapon.attack
    return weapon


def _complain(screen: Screen, message: str) -> None:
    screen.clear()
    screen.write(message)
    screen.refresh()
    screen.getkey()


def shop(player: Player, screen: Screen) -> None:
    """Run the shop until the player chooses to leave."""
    while True:
        screen.clear()
        screen.write("Welcome to the shop, here you can buy potions and weapons\n")
        screen.write("1) buy potion\n")
        screen.write("2) buy weapon\n")
        screen.write("3) leave store\n\n")
        screen.write(f"\nCoins:    {player.coins}\n")
        screen.write(f"Weapon:  {player.weapon}\n\n-->  ")
        screen.write(f"{player.name} hp: {player.hp}\n")
        screen.refresh()
        pick = screen.getkey()

        if pick == "1":
            screen.clear()
            screen.write("1) small potion   - 25 coins\n")
            screen.write("2) half potion  - 50 coins\n")
            screen.write("3) full heal      - 100 coins\n")
            screen.write(f"you have:  {player.coins} coins\n")
            screen.write("--> ")
            screen.refresh()
            key = screen.getkey()
            try:
                if buy_potion(player, key) is Potion.SMALL:
                    screen.clear()
            except NotEnoughCoins:
                _complain(screen, _POOR_SMALL_POTION if key == "1" else _POOR)
        elif pick == "2":
            screen.clear()
            screen.write(_WEAPON_LIST)
            key = screen.getkey()
            if key in _WEAPONS:
                screen.clear()
            try:
                buy_weapon(player, key)
            except NotEnoughCoins:
                _complain(screen, _POOR)
        elif pick == "3":
            return