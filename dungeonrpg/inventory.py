"""A bounded collection of items."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from dungeonrpg.items import Item

DEFAULT_CAPACITY = 50


class InventoryFullError(Exception):
    """Raised when adding an item to a full inventory."""


class Inventory:
    """An ordered list of items with a maximum capacity."""

    def __init__(self, items: Iterable[Item] | None = None, capacity: int = DEFAULT_CAPACITY) -> None:
        self._items: list[Item] = list(items or [])
        self.capacity = capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def add(self, item: Item) -> None:
        """Append an item; raise InventoryFullError when at capacity."""
        if len(self._items) >= self.capacity:
            raise InventoryFullError(
                f"El inventario está lleno. No se puede agregar {item.name}."
            )
        self._items.append(item)
        print(f"Item agregado: {item.name}")

    def remove(self, index: int) -> Item:
        """Remove and return the item at a position; raise IndexError if invalid."""
        if not 0 <= index < len(self._items):
            raise IndexError("Índice inválido. No se puede eliminar.")
        item = self._items.pop(index)
        print(f"Eliminando item: {item.name}")
        return item

    def show(self) -> None:
        print(f"\nInventario ({len(self._items)}/{self.capacity}):")
        if not self._items:
            print("- Vacío -")
            return
        for position, item in enumerate(self._items):
            print(f"{position}. {item.name} - {item.description}")

    def get(self, index: int) -> Item | None:
        """Return the item at a position, or None if the position is invalid."""
        if not 0 <= index < len(self._items):
            return None
        return self._items[index]