"""Text menu that drives a game from lines of input."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from dungeonrpg.game import Game, GameNotStartedError

MENU_TEXT = "\n".join(
    [
        "======================",
        "    MENÚ PRINCIPAL    ",
        "======================",
        "1. Iniciar juego",
        "2. Seleccionar héroes",
        "3. Jugar mazmorra",
        "4. Ver inventario",
        "5. Guardar puntaje",
        "0. Salir",
    ]
)

INVALID_OPTION = "Opción inválida. Intenta de nuevo."


class Menu:
    """Main menu bound to one game."""

    def __init__(self, game: Game | None = None) -> None:
        self.game = game if game is not None else Game()

    def handle(self, option: int | None) -> bool:
        """Carry out one menu option; return False when the menu should exit."""
        match option:
            case 1:
                self.game.start()
            case 2:
                self.game.select_heroes()
            case 3:
                try:
                    self.game.play_dungeon()
                except GameNotStartedError as error:
                    print(error)
            case 4:
                self.game.inventory.show()
            case 5:
                try:
                    self.game.save_score()
                except OSError:
                    print("Error al guardar el score.")
            case 0:
                print("Saliendo del juego...")
                return False
            case _:
                print(INVALID_OPTION)
        return True

    def run(self, lines: Iterable[str]) -> None:
        """Show the menu and handle options read from lines until 0 or end of input."""
        for line in lines:
            print(MENU_TEXT)
            print("Opción: ", end="")
            try:
                option: int | None = int(line.strip())
            except ValueError:
                option = None
            keep_going = self.handle(option)
            print()
            if not keep_going:
                return


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu on standard input."""
    Menu(Game()).run(sys.stdin)
    return 0