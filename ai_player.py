"""
AI决策模块
一层评估：先看能否直接获胜，再综合攻防分选点，最后判断是否该用技能
"""

import numpy as np

from candidates import board_center, get_candidates
from config import Config
from patterns import Scores
from skills import (
    EMPTY, Coordinate, Move, MovePieceSkill, SkillType, UseSkill, opponent_of,
)
from threats import analyze_threats


def move_score(attack, defense):
    """
    综合攻防分
    对手下一步能成五或活四时必须堵；冲四优先堵但保留进攻分；否则略偏进攻
    """
    if defense >= Scores.WIN or defense >= Scores.LIVE_4:
        return defense * 2
    if defense >= Scores.DEAD_4:
        return defense * 1.5 + attack
    return attack * 1.1 + defense


def threat_neighbors(board, x, y, player):
    """(x, y) 周围八格中 player 的棋子，按先行后列的顺序"""
    size = board.shape[0]
    found = []
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx == 0 and dy == 0:
                continue
            nx, ny = x + dx, y + dy
            if 0 <= nx < size and 0 <= ny < size and board[ny, nx] == player:
                found.append(Coordinate(nx, ny))
    return found


def find_empty_spot(board, rng, attempts=Config.EMPTY_SPOT_ATTEMPTS):
    """
    随机找一个空位
    先随机试 attempts 次，都没中再逐行扫描；棋盘满了返回 None
    """
    size = board.shape[0]
    for _ in range(attempts):
        x, y = (int(v) for v in rng.integers(0, size, size=2))
        if board[y, x] == EMPTY:
            return Coordinate(x, y)

    ys, xs = np.nonzero(board == EMPTY)
    if len(ys) == 0:
        return None
    return Coordinate(int(xs[0]), int(ys[0]))


def decide(board, player, record, current_turn, rng=None):
    """
    为 player 决定本回合的动作
    Args:
        board: (N, N) 棋盘，不会被修改
        player: 行动方 BLACK / WHITE
        record: 行动方的 SkillRecord
        current_turn: 当前回合数
        rng: numpy Generator，用于随机选择技能目标
    Returns:
        Move / UseSkill / MovePieceSkill
    """
    board = np.asarray(board)
    if board.ndim != 2 or board.shape[0] != board.shape[1]:
        raise ValueError(f"棋盘必须是正方形，实际形状: {board.shape}")
    opponent = opponent_of(player)
    if rng is None:
        rng = np.random.default_rng()

    candidates = get_candidates(board)
    if not candidates:
        return Move(*board_center(board))

    report = analyze_threats(board, player, candidates)

    # 1. 能赢就直接赢
    for cand in report.scores:
        if cand.attack >= Scores.WIN:
            return Move(cand.x, cand.y)

    # 2. 攻防综合打分，同分取靠前（更靠近中心）的点
    best_move = candidates[0]
    max_score = -np.inf
    for cand in report.scores:
        score = move_score(cand.attack, cand.defense)
        if score > max_score:
            max_score = score
            best_move = Coordinate(cand.x, cand.y)

    max_attack = report.max_attack
    max_threat = report.max_threat
    on_cooldown = record.is_on_cooldown(current_turn)

    if not on_cooldown:
        # 静如止水：对手活三以上时打乱他的布局
        if (not record.has_used(SkillType.FORCE_RANDOM)
                and max_threat >= Scores.LIVE_3 and max_attack < Scores.WIN
                and np.any(board == EMPTY)):
            return UseSkill(SkillType.FORCE_RANDOM)

        # 对手下一步就要赢
        if max_threat >= Scores.LIVE_4:
            # 擒擒拿拿：搬走威胁点旁边的对手棋子
            if not record.has_used(SkillType.MOVE_PIECE) and report.threat_loc is not None:
                targets = threat_neighbors(board, report.threat_loc.x, report.threat_loc.y, opponent)
                if targets:
                    dest = find_empty_spot(board, rng)
                    if dest is not None:
                        return MovePieceSkill(targets[0], dest)

            # 飞沙走石
            if not record.has_used(SkillType.REMOVE_RANDOM) and np.any(board == opponent):
                return UseSkill(SkillType.REMOVE_RANDOM)

    # 力拔山兮：最后手段，不受冷却限制
    if not record.has_used(SkillType.RESET_BOARD):
        if max_threat >= Scores.LIVE_4 and max_attack < Scores.WIN:
            exhausted = (record.has_used(SkillType.MOVE_PIECE)
                         and record.has_used(SkillType.REMOVE_RANDOM))
            if on_cooldown or exhausted:
                return UseSkill(SkillType.RESET_BOARD)
        if max_threat >= Scores.WIN:
            return UseSkill(SkillType.RESET_BOARD)

    return Move(best_move.x, best_move.y)


class HeuristicAI:
    """基于棋型评估的AI玩家"""

    def __init__(self, player, rng=None):
        """
        Args:
            player: 执子方 BLACK / WHITE
            rng: numpy Generator 或随机种子
        """
        self.player = player
        self.rng = np.random.default_rng(rng)

    def get_action(self, game):
        """
        获取当前局面下的动作
        Args:
            game: GomokuGame
        """
        record = game.player_states[self.player]
        return decide(game.board, self.player, record, game.turn_count, rng=self.rng)
