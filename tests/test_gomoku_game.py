import numpy as np

from gomoku_game import GomokuGame
from skills import (
    BLACK, EMPTY, WHITE, Coordinate, Move, MovePieceSkill, SkillType, UseSkill,
)


def test_initial_state():
    game = GomokuGame()
    assert game.board.shape == (15, 15)
    assert game.current_player == BLACK
    assert game.turn_count == 0
    assert game.get_winner() is None
    assert not game.is_game_over()
    assert len(game.get_legal_moves()) == 225
    for player in (BLACK, WHITE):
        assert game.player_states[player].used_skills == set()
        assert game.player_states[player].last_skill_turn == -999


def test_make_move_switches_turn():
    game = GomokuGame()
    assert game.make_move(3, 4)
    assert game.board[4, 3] == BLACK
    assert game.last_move == Coordinate(3, 4)
    assert game.turn_count == 1
    assert game.current_player == WHITE


def test_illegal_moves_rejected():
    game = GomokuGame()
    game.make_move(7, 7)
    assert not game.make_move(7, 7)
    assert not game.make_move(15, 0)
    assert not game.make_move(-1, 3)
    assert game.turn_count == 1
    assert game.current_player == WHITE


def test_five_in_a_row_wins():
    game = GomokuGame()
    for i in range(4):
        game.make_move(i, 0)
        game.make_move(i, 5)
    game.make_move(4, 0)

    assert game.is_game_over()
    assert game.get_winner() == BLACK
    assert not game.make_move(8, 8)
    assert game.get_legal_moves() == []


def test_diagonal_win_for_white():
    game = GomokuGame()
    game.make_move(0, 14)
    for i in range(5):
        game.make_move(10 - i, 2 + i)
        if not game.is_game_over():
            game.make_move(i, 10)
    assert game.get_winner() == WHITE


def test_draw_on_full_board():
    game = GomokuGame(board_size=3)
    for y in range(3):
        for x in range(3):
            assert game.make_move(x, y)
    assert game.is_game_over()
    assert game.get_winner() == 0


def test_remove_random_keeps_turn():
    game = GomokuGame(rng=1)
    game.board[5, 5] = WHITE
    game.board[6, 6] = WHITE
    game.board[7, 7] = BLACK
    game.turn_count = 3

    assert game.apply_action(UseSkill(SkillType.REMOVE_RANDOM))
    assert np.count_nonzero(game.board == WHITE) == 1
    assert game.board[7, 7] == BLACK
    assert game.current_player == BLACK
    record = game.player_states[BLACK]
    assert record.has_used(SkillType.REMOVE_RANDOM)
    assert record.last_skill_turn == 3

    # 同一技能不能用第二次
    assert not game.apply_action(UseSkill(SkillType.REMOVE_RANDOM))
    assert np.count_nonzero(game.board == WHITE) == 1


def test_remove_random_without_target_is_not_consumed():
    game = GomokuGame()
    game.board[7, 7] = BLACK
    assert not game.remove_random()
    assert not game.player_states[BLACK].has_used(SkillType.REMOVE_RANDOM)


def test_force_random_places_opponent_stone():
    game = GomokuGame(rng=2)
    game.make_move(7, 7)
    game.make_move(8, 8)
    assert game.current_player == BLACK

    assert game.apply_action(UseSkill(SkillType.FORCE_RANDOM))
    assert np.count_nonzero(game.board == WHITE) == 2
    assert game.turn_count == 3
    assert game.current_player == BLACK
    assert game.player_states[BLACK].last_skill_turn == 2


def test_force_random_can_hand_opponent_the_win():
    game = GomokuGame(board_size=5)
    game.board[:, :] = np.array([
        [WHITE, WHITE, WHITE, WHITE, EMPTY],
        [BLACK, WHITE, BLACK, WHITE, BLACK],
        [WHITE, BLACK, WHITE, BLACK, WHITE],
        [BLACK, WHITE, BLACK, WHITE, BLACK],
        [BLACK, BLACK, WHITE, BLACK, BLACK],
    ], dtype=np.int8)

    assert game.force_random()
    assert game.board[0, 4] == WHITE
    assert game.get_winner() == WHITE


def test_reset_board_rebases_cooldowns():
    game = GomokuGame()
    game.make_move(7, 7)
    game.make_move(0, 0)
    game.make_move(8, 8)
    game.player_states[BLACK].mark_used(SkillType.REMOVE_RANDOM, 1)
    assert game.current_player == WHITE

    assert game.apply_action(UseSkill(SkillType.RESET_BOARD))
    assert not np.any(game.board)
    assert game.turn_count == 0
    assert game.last_move is None
    assert game.current_player == WHITE
    assert game.player_states[WHITE].last_skill_turn == 0
    assert game.player_states[BLACK].last_skill_turn == -2


def test_reset_board_keeps_never_used_sentinel():
    game = GomokuGame()
    game.make_move(7, 7)
    game.make_move(0, 0)
    assert game.reset_board()
    assert game.player_states[BLACK].last_skill_turn == 0
    assert game.player_states[WHITE].last_skill_turn == -999


def test_move_piece():
    game = GomokuGame()
    game.make_move(7, 7)
    game.make_move(8, 8)

    assert game.apply_action(MovePieceSkill((8, 8), (0, 14)))
    assert game.board[8, 8] == EMPTY
    assert game.board[14, 0] == WHITE
    assert game.current_player == BLACK
    assert game.player_states[BLACK].has_used(SkillType.MOVE_PIECE)


def test_move_piece_rejects_bad_targets():
    game = GomokuGame()
    game.make_move(7, 7)
    game.make_move(8, 8)

    assert not game.move_piece((7, 7), (0, 0))    # 自己的棋子
    assert not game.move_piece((8, 8), (7, 7))    # 终点有子
    assert not game.move_piece((8, 8), (20, 0))   # 越界
    assert not game.player_states[BLACK].has_used(SkillType.MOVE_PIECE)


def test_move_piece_can_complete_opponent_five():
    game = GomokuGame()
    for x in range(4):
        game.board[3, x] = WHITE
    game.board[10, 10] = WHITE
    assert game.move_piece((10, 10), (4, 3))
    assert game.get_winner() == WHITE


def test_apply_action_history():
    game = GomokuGame(rng=0)
    game.apply_action(Move(7, 7))
    game.apply_action(Move(6, 6))
    game.apply_action(UseSkill(SkillType.REMOVE_RANDOM))
    assert [player for player, _ in game.history] == [BLACK, WHITE, BLACK]
    assert game.history[-1][1] == UseSkill(SkillType.REMOVE_RANDOM)
    assert not game.apply_action(Move(7, 7))
    assert len(game.history) == 3


def test_skills_unavailable_after_game_over():
    game = GomokuGame()
    for i in range(4):
        game.make_move(i, 0)
        game.make_move(i, 5)
    game.make_move(4, 0)
    assert not game.apply_action(UseSkill(SkillType.RESET_BOARD))


def test_copy_is_independent():
    game = GomokuGame()
    game.make_move(7, 7)
    clone = game.copy()
    clone.make_move(8, 8)
    clone.player_states[BLACK].mark_used(SkillType.FORCE_RANDOM, 1)

    assert game.board[8, 8] == EMPTY
    assert game.turn_count == 1
    assert not game.player_states[BLACK].has_used(SkillType.FORCE_RANDOM)


def test_reset():
    game = GomokuGame()
    game.make_move(7, 7)
    game.player_states[BLACK].mark_used(SkillType.FORCE_RANDOM, 1)
    game.reset()
    assert not np.any(game.board)
    assert game.turn_count == 0
    assert game.player_states[BLACK].used_skills == set()
    assert game.history == []


def test_display(capsys):
    game = GomokuGame()
    game.make_move(7, 7)
    game.make_move(0, 0)
    game.display()
    out = capsys.readouterr().out
    assert '●' in out and '○' in out
