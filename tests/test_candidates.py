import numpy as np

from candidates import board_center, get_candidates
from conftest import make_board
from skills import BLACK, EMPTY, WHITE, Coordinate


def center_priority(c, center=7):
    return 100 - (abs(c.x - center) + abs(c.y - center))


def test_empty_board_only_center():
    board = make_board({})
    assert get_candidates(board) == [Coordinate(7, 7)]


def test_board_center():
    assert board_center(make_board({})) == Coordinate(7, 7)
    assert board_center(make_board({}, size=9)) == Coordinate(4, 4)


def test_neighbourhood_of_single_stone():
    board = make_board({BLACK: [(7, 7)]})
    candidates = get_candidates(board)

    assert len(candidates) == 24
    assert Coordinate(7, 7) not in candidates
    assert all(max(abs(c.x - 7), abs(c.y - 7)) <= 2 for c in candidates)
    # 同分时按逐行扫描顺序
    assert candidates[0] == Coordinate(7, 6)
    assert candidates[:4] == [Coordinate(7, 6), Coordinate(6, 7), Coordinate(8, 7), Coordinate(7, 8)]


def test_corner_stone_adds_center():
    board = make_board({WHITE: [(0, 0)]})
    candidates = get_candidates(board)

    assert candidates[0] == Coordinate(7, 7)
    assert set(candidates[1:]) == {
        Coordinate(x, y) for x in range(3) for y in range(3) if (x, y) != (0, 0)
    }


def test_sorted_by_center_priority():
    board = make_board({BLACK: [(3, 3), (10, 12)], WHITE: [(7, 7)]})
    candidates = get_candidates(board)
    priorities = [center_priority(c) for c in candidates]
    assert priorities == sorted(priorities, reverse=True)


def test_candidates_are_empty_cells():
    rng = np.random.default_rng(7)
    board = rng.choice([EMPTY, BLACK, WHITE], size=(15, 15), p=[0.7, 0.15, 0.15]).astype(np.int8)
    for c in get_candidates(board):
        assert board[c.y, c.x] == EMPTY


def test_radius_one():
    board = make_board({BLACK: [(7, 7)]})
    assert len(get_candidates(board, radius=1)) == 8


def test_full_board_has_no_candidates():
    board = np.ones((15, 15), dtype=np.int8)
    assert get_candidates(board) == []


def test_does_not_mutate_board():
    board = make_board({BLACK: [(7, 7), (8, 8)], WHITE: [(6, 6)]})
    before = board.copy()
    get_candidates(board)
    assert np.array_equal(board, before)
