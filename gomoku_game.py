"""
五子棋游戏逻辑模块
实现15x15棋盘、落子规则、胜负判定，以及四种技能的执行
"""

import numpy as np

from config import Config
from skills import (
    BLACK, EMPTY, WHITE, Coordinate, SkillRecord, SkillType, opponent_of,
)


class GomokuGame:
    """技能五子棋游戏类"""

    def __init__(self, board_size=15, rng=None):
        self.board_size = board_size
        self.rng = np.random.default_rng(rng)
        self.reset()

    def reset(self):
        """重置游戏"""
        self.board = np.zeros((self.board_size, self.board_size), dtype=np.int8)
        self.current_player = BLACK  # 黑棋先手
        self.turn_count = 0
        self.last_move = None
        self.winner = None
        self.game_over = False
        self.player_states = {
            BLACK: SkillRecord(BLACK),
            WHITE: SkillRecord(WHITE),
        }
        self.history = []  # [(player, action)]

    def in_bounds(self, x, y):
        return 0 <= x < self.board_size and 0 <= y < self.board_size

    def get_legal_moves(self):
        """获取所有合法落子位置 [(x, y)]"""
        if self.game_over:
            return []
        ys, xs = np.nonzero(self.board == EMPTY)
        return [Coordinate(int(x), int(y)) for y, x in zip(ys, xs)]

    def get_opponent_pieces(self, player=None):
        """player 的对手在棋盘上的所有棋子"""
        if player is None:
            player = self.current_player
        ys, xs = np.nonzero(self.board == opponent_of(player))
        return [Coordinate(int(x), int(y)) for y, x in zip(ys, xs)]

    def is_full(self):
        return not np.any(self.board == EMPTY)

    def make_move(self, x, y):
        """
        落子
        Args:
            x, y: 列、行
        Returns:
            bool: 是否成功落子
        """
        if self.game_over:
            return False

        if not self.in_bounds(x, y):
            return False

        if self.board[y, x] != EMPTY:
            return False

        player = self.current_player
        self.board[y, x] = player
        self.last_move = Coordinate(x, y)
        self.turn_count += 1

        # 检查是否获胜
        if self.check_winner(x, y, player):
            self._finish(player)
        # 检查是否平局
        elif self.is_full():
            self._finish(0)
        else:
            self.current_player = opponent_of(player)

        return True

    def _finish(self, winner):
        self.winner = winner
        self.game_over = True

    def check_winner(self, x, y, player):
        """
        检查 (x, y) 处 player 的棋子是否连成五子
        检查四个方向：横、竖、主对角线、副对角线
        """
        directions = [
            (1, 0),   # 横向
            (0, 1),   # 纵向
            (1, 1),   # 主对角线
            (1, -1)   # 副对角线
        ]

        for dx, dy in directions:
            count = 1  # 包含当前棋子

            # 正方向检查
            nx, ny = x + dx, y + dy
            while self.in_bounds(nx, ny) and self.board[ny, nx] == player:
                count += 1
                nx += dx
                ny += dy

            # 反方向检查
            nx, ny = x - dx, y - dy
            while self.in_bounds(nx, ny) and self.board[ny, nx] == player:
                count += 1
                nx -= dx
                ny -= dy

            if count >= Config.WIN_COUNT:
                return True

        return False

    # ========== 技能 ==========

    def can_use_skill(self, skill, player=None):
        """技能是否还没用过（冷却只约束AI自己的决策）"""
        if player is None:
            player = self.current_player
        return not self.game_over and not self.player_states[player].has_used(skill)

    def _mark_skill_used(self, skill):
        self.player_states[self.current_player].mark_used(skill, self.turn_count)

    def remove_random(self):
        """飞沙走石：随机移除对手一颗棋子"""
        if not self.can_use_skill(SkillType.REMOVE_RANDOM):
            return False

        pieces = self.get_opponent_pieces()
        if not pieces:
            return False

        target = pieces[self.rng.integers(len(pieces))]
        self.board[target.y, target.x] = EMPTY
        self._mark_skill_used(SkillType.REMOVE_RANDOM)
        return True

    def force_random(self):
        """静如止水：替对手在随机空位落一子，这一子算作一次落子"""
        if not self.can_use_skill(SkillType.FORCE_RANDOM):
            return False

        spots = self.get_legal_moves()
        if not spots:
            return False

        spot = spots[self.rng.integers(len(spots))]
        opponent = opponent_of(self.current_player)
        self._mark_skill_used(SkillType.FORCE_RANDOM)

        self.board[spot.y, spot.x] = opponent
        self.last_move = spot
        self.turn_count += 1

        # 可能送对手连成五子
        if self.check_winner(spot.x, spot.y, opponent):
            self._finish(opponent)
        elif self.is_full():
            self._finish(0)
        return True

    def reset_board(self):
        """
        力拔山兮：清空棋盘，回合数归零
        已记录的技能回合同步平移，冷却剩余回合数不变
        """
        if not self.can_use_skill(SkillType.RESET_BOARD):
            return False

        self._mark_skill_used(SkillType.RESET_BOARD)
        offset = self.turn_count
        for state in self.player_states.values():
            if state.last_skill_turn != Config.NEVER_USED_TURN:
                state.last_skill_turn -= offset

        self.board[:, :] = EMPTY
        self.last_move = None
        self.turn_count = 0
        return True

    def move_piece(self, source, dest):
        """
        擒擒拿拿：把对手在 source 的棋子搬到空位 dest
        Args:
            source: (x, y) 对手棋子
            dest: (x, y) 空位
        """
        if not self.can_use_skill(SkillType.MOVE_PIECE):
            return False

        source, dest = Coordinate(*source), Coordinate(*dest)
        opponent = opponent_of(self.current_player)
        if not (self.in_bounds(*source) and self.in_bounds(*dest)):
            return False
        if self.board[source.y, source.x] != opponent or self.board[dest.y, dest.x] != EMPTY:
            return False

        self.board[source.y, source.x] = EMPTY
        self.board[dest.y, dest.x] = opponent
        self._mark_skill_used(SkillType.MOVE_PIECE)

        if self.check_winner(dest.x, dest.y, opponent):
            self._finish(opponent)
        return True

    def apply_action(self, action):
        """
        执行AI或玩家的动作
        落子后轮到对手；技能成功后仍是自己的回合
        Args:
            action: Move / UseSkill / MovePieceSkill
        Returns:
            bool: 是否执行成功
        """
        player = self.current_player

        if action.kind == 'move':
            applied = self.make_move(action.x, action.y)
        elif action.skill is SkillType.MOVE_PIECE:
            applied = self.move_piece(action.source, action.dest)
        elif action.skill is SkillType.REMOVE_RANDOM:
            applied = self.remove_random()
        elif action.skill is SkillType.FORCE_RANDOM:
            applied = self.force_random()
        elif action.skill is SkillType.RESET_BOARD:
            applied = self.reset_board()
        else:
            raise ValueError(f"未知动作: {action!r}")

        if applied:
            self.history.append((player, action))
        return applied

    def copy(self):
        """复制当前游戏状态"""
        new_game = GomokuGame(self.board_size)
        new_game.board = self.board.copy()
        new_game.current_player = self.current_player
        new_game.turn_count = self.turn_count
        new_game.last_move = self.last_move
        new_game.winner = self.winner
        new_game.game_over = self.game_over
        new_game.player_states = {p: s.copy() for p, s in self.player_states.items()}
        new_game.history = list(self.history)
        return new_game

    def get_winner(self):
        """获取获胜者 (1: 黑棋, -1: 白棋, 0: 平局, None: 未结束)"""
        return self.winner

    def is_game_over(self):
        """游戏是否结束"""
        return self.game_over

    def display(self):
        """在终端显示棋盘"""
        symbols = {EMPTY: '·', BLACK: '●', WHITE: '○'}

        print('\n   ', end='')
        for i in range(self.board_size):
            print(f'{i:2d}', end=' ')
        print()

        for y in range(self.board_size):
            print(f'{y:2d} ', end='')
            for x in range(self.board_size):
                print(f' {symbols[int(self.board[y, x])]} ', end='')
            print()
        print()
