"""Base character with combat statistics."""

from __future__ import annotations

from typing import TextIO

FULL_HP = 100


class Character:
    """A combatant with hit points, attack, defense, speed and luck."""

    def __init__(self, name: str, hp: int, atk: int, defense: int, spd: int, lck: int) -> None:
        self.name = name
        self.hp = hp
        self.atk = atk
        self.defense = defense
        self.spd = spd
        self.lck = lck

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, hp={self.hp}, atk={self.atk}, "
            f"defense={self.defense}, spd={self.spd}, lck={self.lck})"
        )

    def rename(self, name: str) -> None:
        """Give the character a new name."""
        self.name = name

    def take_damage(self, amount: int) -> int:
        """Apply damage reduced by defense; return the damage actually dealt."""
        damage = max(amount - self.defense, 0)
        self.hp = max(self.hp - damage, 0)
        print(f"{self.name} recibió {damage} de daño. HP actual: {self.hp}")
        return damage

    def heal(self, amount: int) -> None:
        """Restore hit points."""
        self.hp += amount
        print(f"{self.name} se curó {amount}. HP actual: {self.hp}")

    def reset_hp(self) -> None:
        """Restore hit points to the full value."""
        self.hp = FULL_HP
        print(f"{self.name} ha recuperado su HP al máximo ({FULL_HP}).")

    def stats_text(self) -> str:
        """Return the statistics block as text."""
        return "\n".join(
            [
                f"==== {self.name} ====",
                f"HP: {self.hp}",
                f"ATK: {self.atk}",
                f"DEF: {self.defense}",
                f"SPD: {self.spd}",
                f"LCK: {self.lck}",
                "===================",
            ]
        )

    def show_stats(self, file: TextIO | None = None) -> None:
        """Print the statistics block."""
        print(self.stats_text(), file=file)