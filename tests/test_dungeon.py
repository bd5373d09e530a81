from dungeonrpg.dungeon import Dungeon


def test_starts_in_first_room():
    dungeon = Dungeon()
    assert dungeon.current_room == 1
    assert dungeon.total_rooms == 10
    assert not dungeon.is_final()


def test_advance_until_final():
    dungeon = Dungeon()
    steps = 0
    while not dungeon.is_final():
        assert dungeon.advance() is True
        steps += 1
    assert steps == dungeon.total_rooms - 1
    assert dungeon.current_room == dungeon.total_rooms


def test_advance_at_final_stays(capsys):
    dungeon = Dungeon(2)
    dungeon.advance()
    assert dungeon.advance() is False
    assert dungeon.current_room == 2
    assert "¡Ya estás en la sala final!" in capsys.readouterr().out


def test_advance_message(capsys):
    dungeon = Dungeon(3)
    dungeon.advance()
    assert "Has avanzado a la sala 2." in capsys.readouterr().out


def test_single_room_is_final():
    assert Dungeon(1).is_final()