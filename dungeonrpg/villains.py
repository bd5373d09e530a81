"""Enemies: ordinary demons, mini bosses and the final boss."""

from __future__ import annotations

import enum

from dungeonrpg.characters import Character


class VillainType(enum.Enum):
    DEMON = "Demonio"
    MINIBOSS = "Mini Jefe"
    BOSS = "Jefe Final"


class Villain(Character):
    """An enemy character of a given kind."""

    def __init__(
        self, name: str, hp: int, atk: int, defense: int, spd: int, lck: int, kind: VillainType
    ) -> None:
        super().__init__(name, hp, atk, defense, spd, lck)
        self.kind = kind

    def describe(self) -> str:
        """Print and return a line introducing the villain."""
        text = f"Tipo de villano: {self.kind.value}"
        print(text)
        return text


class Demon(Villain):
    def __init__(
        self, name: str, hp: int, atk: int, defense: int, kind: VillainType = VillainType.DEMON
    ) -> None:
        super().__init__(name, hp, atk, defense, 0, 0, kind)

    def describe(self) -> str:
        return super().describe()


class MiniBoss(Villain):
    def __init__(
        self, name: str, hp: int, atk: int, defense: int, kind: VillainType = VillainType.MINIBOSS
    ) -> None:
        super().__init__(name, hp, atk, defense, 4, 2, kind)

    def describe(self) -> str:
        text = (
            f"⚔️ MINI JEFE: {self.name} entra en combate. "
            "¡Cuidado con sus habilidades especiales!"
        )
        print(text)
        return text


class Boss(Villain):
    def __init__(
        self, name: str, hp: int, atk: int, defense: int, kind: VillainType = VillainType.BOSS
    ) -> None:
        super().__init__(name, hp, atk, defense, 5, 3, kind)

    def describe(self) -> str:
        text = (
            f"⚠️ JEFE FINAL: {self.name} ha aparecido. "
            "Prepárate para la batalla definitiva."
        )
        print(text)
        return text