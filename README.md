# dungeonrpg

A small turn-based dungeon role-playing game that you play from the terminal.
You can start a game, add a party of heroes, walk the dungeon room by room and
save the party's score. The game's messages are in Spanish.

## Installation

```
pip install .
```

## Playing

```
dungeonrpg
```

The command shows the main menu and reads one option per line from standard
input. It stops when you choose `0` or when the input ends. Anything that is
not a number counts as an invalid option.

| Option | Action |
|--------|--------|
| 1 | Start a new game. This makes a new dungeon of 10 rooms, empties the shared inventory and clears the party. |
| 2 | Select heroes. The heroes Ares and Athena join the party and their stats are shown. |
| 3 | Play the dungeon. You move through the rooms until you reach the last one. Before option 1 this only prints a message asking you to start the game. |
| 4 | Show the shared inventory. |
| 5 | Save the score. A line with each hero's money is appended to `score.txt` in the current directory. |
| 0 | Quit. |

## Using it as a library

```python
from dungeonrpg.heroes import Hero
from dungeonrpg.items import Weapon, Armor, Potion, ItemType
from dungeonrpg.villains import Boss, VillainType
from dungeonrpg.inventory import Inventory, InventoryFullError
from dungeonrpg.dungeon import Dungeon

hero = Hero("Ares", 100, 20, 10, 5, 3, 100)
Weapon("Sword", "A sharp blade", 10, 5).use(hero)
Armor("Mail", "Chain mail", 10, 4).use(hero)
hero.take_damage(30)
Potion("Elixir", "Restores health", 20, 1, ItemType.HP_POTION).use(hero)
hero.earn_money()          # adds a random amount from 50 to 150

boss = Boss("Dragon", 300, 40, 20, VillainType.BOSS)
boss.describe()            # prints and returns the boss's entrance line

bag = Inventory([], 2)
bag.add(Weapon("Axe", "Heavy", 5, 7))
print(len(bag), bag.get(0))

dungeon = Dungeon(10)
while not dungeon.is_final():
    dungeon.advance()
```

Modules:

- `dungeonrpg.characters` – `Character`, with `take_damage`, `heal`,
  `reset_hp` (back to 100), `rename`, `stats_text` and `show_stats`.
- `dungeonrpg.heroes` – `Hero`, a character with money and slots for a
  weapon, armor and potions. `use_potion` heals 20 when potions are equipped.
  `take_damage` subtracts defense, and 5 more when armor is worn, before the
  character's own defense reduction is applied.
- `dungeonrpg.villains` – `Villain`, `Demon`, `MiniBoss`, `Boss` and
  `VillainType`.
- `dungeonrpg.items` – `Item`, `Weapon`, `Armor`, `Potion` and `ItemType`.
- `dungeonrpg.inventory` – `Inventory`, a list of items with a capacity
  (50 by default).
- `dungeonrpg.dungeon` – `Dungeon`, rooms numbered from 1 to its total.
- `dungeonrpg.game` – `Game`, holding the party, the shared inventory and the
  dungeon.
- `dungeonrpg.menu` – `Menu` and the `main` function behind the command.

Errors are raised as exceptions:

- `Inventory.add` raises `InventoryFullError` when the inventory is full.
- `Inventory.remove` raises `IndexError` for an invalid position;
  `Inventory.get` returns `None` instead.
- `Game.play_dungeon` raises `GameNotStartedError` before `Game.start`.
- `Potion.use` raises `ValueError` for a potion whose type is not a potion type.

## What it does not do

- There is no real combat: playing the dungeon only walks from room to room.
  Villains are not placed in the dungeon and never fight the heroes.
- Weapon attack bonuses and armor resistance values are not added to a hero's
  stats; attack potions have no effect.
- The party is always Ares and Athena; heroes cannot be chosen or created from
  the menu, and nothing in the menu adds items to the shared inventory.
- Scores are only appended to `score.txt`; there is no way to load a game.

## Running the tests

```
pip install .[test]
pytest
```