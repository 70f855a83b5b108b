import numpy as np

from candidates import get_candidates
from conftest import make_board
from patterns import Scores
from skills import BLACK, WHITE, Coordinate
from threats import analyze_threats


def test_report_matches_candidates():
    board = make_board({BLACK: [(7, 7)], WHITE: [(8, 8)]})
    candidates = get_candidates(board)
    report = analyze_threats(board, BLACK, candidates)

    assert [(s.x, s.y) for s in report.scores] == [(c.x, c.y) for c in candidates]
    assert report.max_attack == max(s.attack for s in report.scores)
    assert report.max_threat == max(s.defense for s in report.scores)


def test_opponent_open_four_is_located():
    board = make_board({WHITE: [(5, 5), (6, 5), (7, 5), (8, 5)]})
    report = analyze_threats(board, BLACK, get_candidates(board))

    assert report.max_threat >= Scores.WIN
    assert report.threat_loc in {Coordinate(4, 5), Coordinate(9, 5)}
    assert report.max_attack < Scores.LIVE_2


def test_threat_loc_keeps_first_maximum():
    board = make_board({WHITE: [(5, 5), (6, 5), (7, 5), (8, 5)]})
    report = analyze_threats(board, BLACK, get_candidates(board))
    # (9, 5) 离中心更近，排在 (4, 5) 前面
    assert report.threat_loc == Coordinate(9, 5)


def test_attack_and_defense_are_symmetric_views():
    board = make_board({BLACK: [(6, 7), (7, 7), (8, 7)]})
    black_view = analyze_threats(board, BLACK, get_candidates(board))
    white_view = analyze_threats(board, WHITE, get_candidates(board))

    assert black_view.max_attack == white_view.max_threat
    assert black_view.max_threat == white_view.max_attack


def test_empty_candidates():
    board = make_board({})
    report = analyze_threats(board, BLACK, [])
    assert report.scores == []
    assert report.threat_loc is None
    assert report.max_attack == 0 and report.max_threat == 0


def test_board_untouched():
    board = make_board({BLACK: [(7, 7), (7, 8)], WHITE: [(8, 7), (8, 8)]})
    before = board.copy()
    analyze_threats(board, WHITE, get_candidates(board))
    assert np.array_equal(board, before)
