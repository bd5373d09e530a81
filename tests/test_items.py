import pytest

from dungeonrpg.heroes import Hero
from dungeonrpg.items import Armor, Item, ItemType, Potion, Weapon


@pytest.fixture
def hero():
    return Hero("Ares", 100, 20, 10, 5, 3, 100)


def test_item_is_abstract():
    with pytest.raises(TypeError):
        Item("Rock", "Just a rock", 1, ItemType.WEAPON)


def test_weapon_kind_and_bonus():
    sword = Weapon("Sword", "Sharp", 10, 7)
    assert sword.kind is ItemType.WEAPON
    assert sword.attack_bonus == 7


def test_weapon_use_equips(hero, capsys):
    sword = Weapon("Sword", "Sharp", 10, 7)
    sword.use(hero)
    assert hero.weapon is sword
    assert 'Ares ha equipado el arma "Sword" con +7 ATK.' in capsys.readouterr().out


def test_armor_use_equips(hero):
    mail = Armor("Mail", "Heavy", 20, 4)
    mail.use(hero)
    assert hero.armor is mail
    assert mail.kind is ItemType.ARMOR
    assert mail.resistance == 4


def test_hp_potion_heals_by_effect(hero):
    potion = Potion("Red", "Heals", 30, 1, ItemType.HP_POTION)
    potion.use(hero)
    assert hero.hp == 100 + 30


def test_attack_potion_changes_nothing(hero, capsys):
    potion = Potion("Blue", "Rage", 5, 1, ItemType.ATTACK_POTION)
    potion.use(hero)
    assert (hero.hp, hero.atk) == (100, 20)
    assert "no implementado aún" in capsys.readouterr().out


def test_potion_with_wrong_kind_raises(hero):
    potion = Potion("Odd", "Not a potion", 5, 1, ItemType.WEAPON)
    with pytest.raises(ValueError):
        potion.use(hero)