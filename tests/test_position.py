from tetrix.position import Position


def test_fields_hold_given_values():
    pos = Position(2, 7)
    assert pos.row == 2
    assert pos.col == 7


def test_equality_by_value():
    assert Position(1, 3) == Position(1, 3)
    assert Position(1, 3) != Position(3, 1)


def test_hashable_and_usable_in_sets():
    tiles = {Position(0, 0), Position(0, 0), Position(4, 5)}
    assert len(tiles) == 2
    assert Position(4, 5) in tiles