import io

import pytest

from dungeonrpg.characters import FULL_HP, Character


@pytest.fixture
def knight():
    return Character("Knight", 80, 20, 10, 5, 3)


def test_damage_is_reduced_by_defense(knight):
    dealt = knight.take_damage(25)
    assert dealt == 25 - knight.defense
    assert knight.hp == 80 - dealt


def test_damage_below_defense_deals_nothing(knight):
    assert knight.take_damage(knight.defense - 1) == 0
    assert knight.hp == 80


def test_hp_never_negative(knight):
    knight.take_damage(10_000)
    assert knight.hp == 0


def test_damage_message(knight, capsys):
    knight.take_damage(5)
    assert "Knight recibió 0 de daño. HP actual: 80" in capsys.readouterr().out


def test_heal_adds_without_cap(knight):
    knight.heal(50)
    assert knight.hp == 80 + 50


def test_reset_hp(knight):
    knight.take_damage(40)
    knight.reset_hp()
    assert knight.hp == FULL_HP == 100


def test_rename(knight):
    knight.rename("Paladin")
    assert knight.name == "Paladin"


def test_stats_text(knight):
    lines = knight.stats_text().splitlines()
    assert lines[0] == "==== Knight ===="
    assert "DEF: 10" in lines
    assert lines[-1] == "==================="


def test_show_stats_writes_to_file(knight):
    buffer = io.StringIO()
    knight.show_stats(buffer)
    assert buffer.getvalue() == knight.stats_text() + "\n"