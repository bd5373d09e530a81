"""Game session: the hero team, the shared inventory and the dungeon."""

from __future__ import annotations

import os
from pathlib import Path

from dungeonrpg.dungeon import Dungeon
from dungeonrpg.heroes import Hero
from dungeonrpg.inventory import Inventory

DEFAULT_SCORE_FILE = "score.txt"
WELCOME_MESSAGE = "Bienvenido al juego de RPG por turnos."


class GameNotStartedError(Exception):
    """Raised when an action needs a started game."""


class Game:
    """Holds the team of heroes, the general inventory and the current dungeon."""

    def __init__(self) -> None:
        self.heroes: list[Hero] = []
        self.inventory = Inventory()
        self.dungeon: Dungeon | None = None

    def start(self) -> None:
        """Reset the game: a new dungeon, an empty inventory and no heroes."""
        print("=== Iniciando el juego ===")
        self.dungeon = Dungeon()
        self.inventory = Inventory()
        self.heroes.clear()
        print("¡Juego iniciado con éxito!")

    def select_heroes(self) -> list[Hero]:
        """Add the two default heroes to the team and return them."""
        print("Seleccionando héroes...")
        chosen = [
            Hero("Ares", 100, 20, 10, 5, 3, 100),
            Hero("Athena", 90, 15, 12, 6, 5, 120),
        ]
        self.heroes.extend(chosen)
        print("Héroes seleccionados:")
        for hero in self.heroes:
            hero.show_stats()
        return chosen

    def play_dungeon(self) -> list[int]:
        """Walk through the dungeon to its last room; return the rooms passed."""
        if self.dungeon is None:
            raise GameNotStartedError("Debes iniciar el juego primero.")
        visited: list[int] = []
        while not self.dungeon.is_final():
            room = self.dungeon.current_room
            visited.append(room)
            print(f"\nEstás en la sala {room}.")
            print("Simulando combate...")
            self.dungeon.advance()
        print("¡Has completado la mazmorra!")
        return visited

    def show_main_menu(self) -> str:
        """Print the welcome line and return it."""
        message = WELCOME_MESSAGE
        print(message)
        return message

    def save_score(self, path: str | os.PathLike[str] = DEFAULT_SCORE_FILE) -> Path:
        """Append each hero's money to the score file and return its path."""
        target = Path(path)
        with target.open("a", encoding="utf-8") as score_file:
            score_file.write("Score guardado: \n")
            for hero in self.heroes:
                score_file.write(f"{hero.name} - Dinero: {hero.money}\n")
        print(f"Puntaje guardado en '{target}'.")
        return target