"""A linear dungeon of numbered rooms."""

from __future__ import annotations

DEFAULT_ROOMS = 10


class Dungeon:
    """Tracks progress through rooms numbered from 1 to total_rooms."""

    def __init__(self, total_rooms: int = DEFAULT_ROOMS) -> None:
        self.total_rooms = total_rooms
        self.current_room = 1

    def advance(self) -> bool:
        """Move to the next room; return False if already in the last one."""
        if self.is_final():
            print("¡Ya estás en la sala final!")
            return False
        self.current_room += 1
        print(f"Has avanzado a la sala {self.current_room}.")
        return True

    def is_final(self) -> bool:
        return self.current_room >= self.total_rooms