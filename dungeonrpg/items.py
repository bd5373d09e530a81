"""Equipment and consumables a hero can use."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dungeonrpg.heroes import Hero


class ItemType(enum.Enum):
    WEAPON = "arma"
    ARMOR = "armadura"
    ATTACK_POTION = "pocion_atk"
    HP_POTION = "pocion_hp"


class Item(ABC):
    """Something a hero can carry and use."""

    def __init__(self, name: str, description: str, duration: int, kind: ItemType) -> None:
        self.name = name
        self.description = description
        self.duration = duration
        self.kind = kind

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, kind={self.kind.name})"

    @abstractmethod
    def use(self, hero: Hero) -> None:
        """Apply the item to a hero."""


class Weapon(Item):
    def __init__(self, name: str, description: str, duration: int, attack_bonus: int) -> None:
        super().__init__(name, description, duration, ItemType.WEAPON)
        self.attack_bonus = attack_bonus

    def use(self, hero: Hero) -> None:
        hero.equip_weapon(self)
        print(f'{hero.name} ha equipado el arma "{self.name}" con +{self.attack_bonus} ATK.')


class Armor(Item):
    def __init__(self, name: str, description: str, duration: int, resistance: int) -> None:
        super().__init__(name, description, duration, ItemType.ARMOR)
        self.resistance = resistance

    def use(self, hero: Hero) -> None:
        hero.equip_armor(self)
        print(f'{hero.name} ha equipado la armadura "{self.name}" con +{self.resistance} DEF.')


class Potion(Item):
    def __init__(
        self, name: str, description: str, effect: int, duration: int, kind: ItemType
    ) -> None:
        super().__init__(name, description, duration, kind)
        self.effect = effect

    def use(self, hero: Hero) -> None:
        """Heal for HP potions; attack potions have no lasting effect."""
        if self.kind is ItemType.HP_POTION:
            hero.heal(self.effect)
            print(
                f"{hero.name} usó una poción de HP y recuperó {self.effect} puntos de vida."
            )
        elif self.kind is ItemType.ATTACK_POTION:
            print(
                f"{hero.name} usó una poción de ataque. "
                f"(Aumento temporal de {self.effect} ATK no implementado aún)"
            )
        else:
            raise ValueError("Este ítem no es una poción válida para usar.")