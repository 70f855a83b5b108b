"""
对战GUI界面
使用pygame实现技能五子棋对战界面，支持人机对战和AI对战
"""

import sys
import pygame
import numpy as np
from ai_player import HeuristicAI
from config import Config
from gomoku_game import GomokuGame
from skills import BLACK, EMPTY, SKILL_ORDER, WHITE, MovePieceSkill, SkillType, UseSkill


# 交互模式
MODE_NORMAL = 'NORMAL'
MODE_SELECT_PIECE = 'SELECT_TARGET_PIECE'  # 擒擒拿拿第一步：选对手棋子
MODE_SELECT_DEST = 'SELECT_TARGET_DEST'    # 第二步：选空位

SKILL_KEYS = {
    pygame.K_1: SKILL_ORDER[0],
    pygame.K_2: SKILL_ORDER[1],
    pygame.K_3: SKILL_ORDER[2],
    pygame.K_4: SKILL_ORDER[3],
}


class GomokuGUI:
    """技能五子棋GUI界面"""

    def __init__(self, board_size=None, seed=None):
        pygame.init()

        self.board_size = board_size if board_size is not None else Config.BOARD_SIZE
        self.cell_size = 40
        self.margin = 50
        self.board_width = self.cell_size * (self.board_size - 1)
        self.window_size = self.board_width + 2 * self.margin

        # 创建窗口
        self.screen = pygame.display.set_mode((self.window_size, self.window_size + 130))
        pygame.display.set_caption("Super Gomoku")

        # 颜色
        self.BG_COLOR = (220, 179, 92)
        self.LINE_COLOR = (0, 0, 0)
        self.BLACK = (0, 0, 0)
        self.WHITE = (255, 255, 255)
        self.HIGHLIGHT = (255, 0, 0)
        self.SELECTED = (160, 32, 240)
        self.TEXT_COLOR = (50, 50, 50)
        self.USED_COLOR = (160, 160, 160)

        # 游戏状态
        self.seed = seed
        self.game = GomokuGame(self.board_size, rng=seed)

        # 游戏模式
        self.ai_vs_ai = False
        self.human_player = BLACK  # 黑棋(先手)
        self._create_agents()

        # 交互状态
        self.mode = MODE_NORMAL
        self.selected_piece = None
        self.message = "Game started!"

        # 字体
        self.font = pygame.font.Font(None, 36)
        self.small_font = pygame.font.Font(None, 24)

    def _create_agents(self):
        rng = np.random.default_rng(self.seed)
        self.agents = {
            BLACK: HeuristicAI(BLACK, rng=rng),
            WHITE: HeuristicAI(WHITE, rng=rng),
        }

    def draw_board(self):
        """绘制棋盘"""
        self.screen.fill(self.BG_COLOR)

        # 绘制网格线
        for i in range(self.board_size):
            # 横线
            start_pos = (self.margin, self.margin + i * self.cell_size)
            end_pos = (self.margin + self.board_width, self.margin + i * self.cell_size)
            pygame.draw.line(self.screen, self.LINE_COLOR, start_pos, end_pos, 2)

            # 竖线
            start_pos = (self.margin + i * self.cell_size, self.margin)
            end_pos = (self.margin + i * self.cell_size, self.margin + self.board_width)
            pygame.draw.line(self.screen, self.LINE_COLOR, start_pos, end_pos, 2)

        # 绘制星位（天元和四个角的星）
        center = self.board_size // 2
        star_positions = [(3, 3), (3, self.board_size - 4), (self.board_size - 4, 3),
                          (self.board_size - 4, self.board_size - 4), (center, center)]
        for x, y in star_positions:
            px = self.margin + x * self.cell_size
            py = self.margin + y * self.cell_size
            pygame.draw.circle(self.screen, self.LINE_COLOR, (px, py), 5)

    def draw_pieces(self):
        """绘制棋子"""
        for y in range(self.board_size):
            for x in range(self.board_size):
                if self.game.board[y, x] != EMPTY:
                    px = self.margin + x * self.cell_size
                    py = self.margin + y * self.cell_size

                    color = self.BLACK if self.game.board[y, x] == BLACK else self.WHITE
                    pygame.draw.circle(self.screen, color, (px, py), self.cell_size // 2 - 2)

                    # 给白棋添加黑色边框
                    if color == self.WHITE:
                        pygame.draw.circle(self.screen, self.BLACK, (px, py), self.cell_size // 2 - 2, 2)

        # 擒擒拿拿选中的棋子
        if self.selected_piece is not None:
            px = self.margin + self.selected_piece[0] * self.cell_size
            py = self.margin + self.selected_piece[1] * self.cell_size
            pygame.draw.circle(self.screen, self.SELECTED, (px, py), self.cell_size // 2, 3)

        # 高亮最后一步
        if self.game.last_move is not None:
            x, y = self.game.last_move
            px = self.margin + x * self.cell_size
            py = self.margin + y * self.cell_size
            pygame.draw.circle(self.screen, self.HIGHLIGHT, (px, py), 6)

    def draw_info(self):
        """绘制游戏信息"""
        y_offset = self.window_size - 20

        if self.game.is_game_over():
            if self.game.winner == BLACK:
                text = "Black wins!"
            elif self.game.winner == WHITE:
                text = "White wins!"
            else:
                text = "Draw!"
            text += " Press R to restart"
        else:
            text = "Black to move" if self.game.current_player == BLACK else "White to move"
            if not self.ai_vs_ai:
                if self.game.current_player == self.human_player:
                    text += " (your turn)"
                else:
                    text += " (AI thinking...)"

        text_surface = self.font.render(text, True, self.TEXT_COLOR)
        text_rect = text_surface.get_rect(center=(self.window_size // 2, y_offset))
        self.screen.blit(text_surface, text_rect)

        # 消息
        if self.message:
            msg_surface = self.small_font.render(self.message, True, self.HIGHLIGHT)
            msg_rect = msg_surface.get_rect(center=(self.window_size // 2, y_offset + 28))
            self.screen.blit(msg_surface, msg_rect)

        # 技能栏
        record = self.game.player_states[self.human_player]
        labels = []
        for i, skill in enumerate(SKILL_ORDER):
            labels.append((f"{i+1}:{skill.value}", record.has_used(skill)))
        x = self.margin
        for label, used in labels:
            color = self.USED_COLOR if used else self.TEXT_COLOR
            surface = self.small_font.render(label, True, color)
            self.screen.blit(surface, (x, y_offset + 50))
            x += surface.get_width() + 16

        # 控制说明
        help_text = "R: restart | A: AI vs AI | H: vs AI | B: swap color | Esc: cancel skill | Q: quit"
        help_surface = self.small_font.render(help_text, True, self.TEXT_COLOR)
        help_rect = help_surface.get_rect(center=(self.window_size // 2, y_offset + 90))
        self.screen.blit(help_surface, help_rect)

    def get_board_pos(self, mouse_pos):
        """将鼠标位置转换为棋盘坐标 (x, y)"""
        mx, my = mouse_pos

        # 计算最近的交叉点
        x = round((mx - self.margin) / self.cell_size)
        y = round((my - self.margin) / self.cell_size)

        # 检查是否在棋盘范围内
        if 0 <= x < self.board_size and 0 <= y < self.board_size:
            # 检查是否靠近交叉点
            actual_x = self.margin + x * self.cell_size
            actual_y = self.margin + y * self.cell_size

            distance = np.sqrt((mx - actual_x)**2 + (my - actual_y)**2)

            if distance < self.cell_size / 2:
                return (x, y)

        return None

    def is_human_turn(self):
        return (not self.ai_vs_ai and not self.game.is_game_over()
                and self.game.current_player == self.human_player)

    def use_skill(self, skill):
        """人类玩家发动技能"""
        if not self.is_human_turn():
            return
        if not self.game.can_use_skill(skill):
            self.message = f"{skill.value} already used."
            return

        if skill is SkillType.MOVE_PIECE:
            self.mode = MODE_SELECT_PIECE
            self.message = "Select opponent's piece."
            return

        if self.game.apply_action(UseSkill(skill)):
            self.message = f"{skill.value}! Your turn continues."
            print(f"玩家使用技能: {skill.title}")
        else:
            self.message = "No valid target!"

    def cancel_skill(self):
        if self.mode != MODE_NORMAL:
            self.message = "Skill cancelled."
        self.mode = MODE_NORMAL
        self.selected_piece = None

    def handle_click(self, pos):
        """
        处理人类玩家点击棋盘
        Args:
            pos: 棋盘坐标 (x, y)
        """
        if not self.is_human_turn():
            return
        x, y = pos
        opponent = -self.human_player

        if self.mode == MODE_SELECT_PIECE:
            if self.game.board[y, x] == opponent:
                self.selected_piece = (x, y)
                self.mode = MODE_SELECT_DEST
                self.message = "Select empty square."
            else:
                self.message = "Invalid choice."
            return

        if self.mode == MODE_SELECT_DEST:
            if self.game.board[y, x] == EMPTY:
                action = MovePieceSkill(self.selected_piece, (x, y))
                if self.game.apply_action(action):
                    self.message = "Piece moved!"
                    print(f"玩家使用技能: {SkillType.MOVE_PIECE.title} {self.selected_piece} -> {(x, y)}")
                self.mode = MODE_NORMAL
                self.selected_piece = None
            else:
                self.message = "Must be empty."
            return

        if self.game.make_move(x, y):
            self.message = None
            print(f"玩家落子: ({x}, {y})")

    def handle_key(self, key):
        """处理键盘，返回 False 表示退出"""
        if key == pygame.K_r:
            self.reset_game()
        elif key == pygame.K_a:
            self.ai_vs_ai = True
            self.reset_game()
            print("切换到AI对战模式")
        elif key == pygame.K_h:
            self.ai_vs_ai = False
            self.reset_game()
            print("切换到人机对战模式")
        elif key == pygame.K_b:
            self.human_player = -self.human_player
            self.reset_game()
            role = "黑棋(先手)" if self.human_player == BLACK else "白棋(后手)"
            print(f"切换为人类执{role}")
        elif key == pygame.K_ESCAPE:
            self.cancel_skill()
        elif key in SKILL_KEYS:
            self.use_skill(SKILL_KEYS[key])
        elif key == pygame.K_q:
            return False
        return True

    def ai_move(self):
        """AI行动（落子或技能）"""
        if self.game.is_game_over():
            return

        player = self.game.current_player
        action = self.agents[player].get_action(self.game)
        if not self.game.apply_action(action):
            print(f"AI动作无效: {action!r}")
            return

        side = "Black" if player == BLACK else "White"
        if action.kind == 'skill':
            self.message = f"{side} AI used {action.skill.value}!"
            print(f"AI使用技能: {action.skill.title}")

    def reset_game(self):
        """重置游戏"""
        self.game.reset()
        self._create_agents()
        self.cancel_skill()
        self.message = "Game started!"

    def run(self):
        """运行游戏主循环"""
        clock = pygame.time.Clock()
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

                elif event.type == pygame.KEYDOWN:
                    running = self.handle_key(event.key)

                elif event.type == pygame.MOUSEBUTTONDOWN:
                    pos = self.get_board_pos(pygame.mouse.get_pos())
                    if pos is not None:
                        self.handle_click(pos)

            # AI自动行动
            if not self.game.is_game_over():
                if self.ai_vs_ai or self.game.current_player != self.human_player:
                    # 先画出当前局面，再停顿以便观看
                    self.draw_board()
                    self.draw_pieces()
                    self.draw_info()
                    pygame.display.flip()
                    pygame.time.delay(Config.AI_THINK_DELAY_MS)
                    self.ai_move()

            # 绘制
            self.draw_board()
            self.draw_pieces()
            self.draw_info()

            pygame.display.flip()
            clock.tick(30)

        pygame.quit()


if __name__ == "__main__":
    # 可以传入随机种子
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else None
    gui = GomokuGUI(board_size=Config.BOARD_SIZE, seed=seed)
    gui.run()
