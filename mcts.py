"""
随机模拟顾问
纯MCTS式的随机对局评估，只给落子建议，可以替换启发式AI；失败时退回启发式AI
"""

from collections import defaultdict

import numpy as np

from ai_player import HeuristicAI
from candidates import get_candidates
from config import Config
from skills import EMPTY, Move


class PureMCTS:
    """纯随机模拟（不使用技能，只评估落子）"""

    def __init__(self, num_simulations=Config.ROLLOUT_SIMULATIONS,
                 max_depth=Config.ROLLOUT_DEPTH, rng=None):
        """
        Args:
            num_simulations: 模拟总次数
            max_depth: 每次模拟最多走的步数，走满算平局
            rng: numpy Generator 或随机种子
        """
        self.num_simulations = num_simulations
        self.max_depth = max_depth
        self.rng = np.random.default_rng(rng)

    def get_action(self, game):
        """随机模拟后选择胜率最高的候选点，没有可下的点时返回 None"""
        if game.is_game_over():
            return None

        moves = get_candidates(game.board)
        if not moves:
            return None

        player = game.current_player
        move_stats = defaultdict(lambda: {'wins': 0, 'visits': 0})

        for i in range(self.num_simulations):
            # 轮流分配，保证每个候选点都被模拟到
            move = moves[i % len(moves)]

            sim_game = game.copy()
            sim_game.make_move(move.x, move.y)

            # 随机走到游戏结束或步数上限
            depth = 0
            while not sim_game.is_game_over() and depth < self.max_depth:
                sim_moves = get_candidates(sim_game.board)
                if not sim_moves:
                    break
                sim_move = sim_moves[self.rng.integers(len(sim_moves))]
                sim_game.make_move(sim_move.x, sim_move.y)
                depth += 1

            # 更新统计
            move_stats[move]['visits'] += 1
            if sim_game.get_winner() == player:
                move_stats[move]['wins'] += 1

        # 选择胜率最高的移动
        best_move = max(moves,
                        key=lambda m: move_stats[m]['wins'] / max(move_stats[m]['visits'], 1))
        return Move(best_move.x, best_move.y)


class AdvisedAI:
    """先问顾问，顾问出错、没有建议或给出非法点时改用启发式AI"""

    def __init__(self, advisor, fallback):
        """
        Args:
            advisor: 有 get_action(game) 的落子顾问
            fallback: 兜底的 HeuristicAI
        """
        self.advisor = advisor
        self.fallback = fallback
        self.player = fallback.player

    def get_action(self, game):
        try:
            move = self.advisor.get_action(game)
        except Exception as e:  # noqa: BLE001
            print(f"顾问出错，改用启发式AI: {e}")
            move = None

        if move is not None and not self._is_legal(game, move):
            print(f"顾问给出非法落子 {tuple(move)}，改用启发式AI")
            move = None

        if move is None:
            return self.fallback.get_action(game)

        # 顾问只管落子，技能仍由启发式AI决定
        action = self.fallback.get_action(game)
        if action.kind == 'skill':
            return action
        return Move(*move)

    @staticmethod
    def _is_legal(game, move):
        x, y = move
        return game.in_bounds(x, y) and game.board[y, x] == EMPTY


def make_rollout_ai(player, num_simulations=Config.ROLLOUT_SIMULATIONS,
                    max_depth=Config.ROLLOUT_DEPTH, seed=None):
    """构造以随机模拟为顾问、启发式AI兜底的玩家"""
    rng = np.random.default_rng(seed)
    advisor = PureMCTS(num_simulations=num_simulations, max_depth=max_depth, rng=rng)
    return AdvisedAI(advisor, HeuristicAI(player, rng=rng))
