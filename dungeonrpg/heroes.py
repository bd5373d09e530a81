"""Playable heroes."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from dungeonrpg.characters import Character

if TYPE_CHECKING:
    from dungeonrpg.items import Item

ARMOR_REDUCTION = 5
POTION_HEAL = 20
MIN_EARNINGS = 50
MAX_EARNINGS = 150


class Hero(Character):
    """A character with money, equipment and a personal bag of items."""

    def __init__(
        self, name: str, hp: int, atk: int, defense: int, spd: int, lck: int, money: int
    ) -> None:
        super().__init__(name, hp, atk, defense, spd, lck)
        self.money = money
        self.items: list[Item] = []
        self.weapon: Item | None = None
        self.armor: Item | None = None
        self.potions: Item | None = None

    def equip_weapon(self, weapon: Item) -> None:
        self.weapon = weapon
        print(f"{self.name} ha equipado el arma: {weapon.name}")

    def equip_armor(self, armor: Item) -> None:
        self.armor = armor
        print(f"{self.name} ha equipado la armadura: {armor.name}")

    def equip_potions(self, potions: Item) -> None:
        self.potions = potions
        print(f"{self.name} ha añadido pociones: {potions.name}")

    def use_potion(self) -> bool:
        """Heal a fixed amount if potions are equipped; return whether one was used."""
        if self.potions is None:
            print("No tienes pociones para usar.")
            return False
        self.heal(POTION_HEAL)
        print(f"{self.name} usó una poción.")
        return True

    def take_damage(self, amount: int) -> int:
        """Reduce by defense and worn armor, then apply the base reduction."""
        reduction = ARMOR_REDUCTION if self.armor is not None else 0
        damage = max(amount - self.defense - reduction, 0)
        return super().take_damage(damage)

    def show_inventory(self) -> None:
        print(f"Inventario de {self.name}:")
        for item in self.items:
            print(f"- {item.name}")
        if not self.items:
            print("Inventario vacío.")

    def earn_money(self, rng: random.Random | None = None) -> int:
        """Earn a random amount between 50 and 150; return it."""
        gain = (rng or random).randint(MIN_EARNINGS, MAX_EARNINGS)
        self.money += gain
        print(f"{self.name} ganó {gain} de dinero.")
        return gain