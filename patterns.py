"""
棋型评估模块
假设某方在 (x, y) 落子，按横、竖、两条斜线四个方向统计连子与堵截，给出分数
"""

from skills import EMPTY


class Scores:
    """棋型分数，每一级都远高于下一级，低级棋型再多也抵不过一个高级棋型"""

    WIN = 100_000_000     # 五连
    LIVE_4 = 10_000_000   # 活四 (011110)
    DEAD_4 = 5_000_000    # 冲四 (211110)
    LIVE_3 = 1_000_000    # 活三 (01110)
    DEAD_3 = 50_000       # 眠三 (21110)
    LIVE_2 = 10_000       # 活二 (0110)
    DEAD_2 = 1_000        # 眠二
    SINGLE = 10


# 横、竖、主对角线(\)、副对角线(/)
DIRECTIONS = [(1, 0), (0, 1), (1, 1), (1, -1)]


def score_line(count, blocked_ends):
    """
    单个方向的棋型分
    Args:
        count: 连子数（含落子本身）
        blocked_ends: 被堵的端数 0/1/2
    """
    if count >= 5:
        return Scores.WIN
    if count == 1:
        return Scores.SINGLE
    if blocked_ends >= 2:
        # 两头都被堵死，没有价值
        return 0

    table = {
        4: (Scores.LIVE_4, Scores.DEAD_4),
        3: (Scores.LIVE_3, Scores.DEAD_3),
        2: (Scores.LIVE_2, Scores.DEAD_2),
    }
    return table[count][blocked_ends]


def _walk(board, x, y, dx, dy, player):
    """
    从 (x, y) 沿 (dx, dy) 方向数连续的同色棋子
    Returns:
        (count, blocked): 连子数（不含起点），是否被对手棋子或边界挡住
    """
    size = board.shape[0]
    count = 0
    nx, ny = x + dx, y + dy
    while 0 <= nx < size and 0 <= ny < size:
        cell = board[ny, nx]
        if cell == player:
            count += 1
        elif cell == EMPTY:
            return count, False
        else:
            return count, True
        nx += dx
        ny += dy
    # 走出棋盘
    return count, True


def evaluate_point(board, x, y, player):
    """
    评估 player 在 (x, y) 落子后的局面分
    (x, y) 本身按 player 的棋子处理，无论棋盘上实际是什么，棋盘不会被修改
    Args:
        board: (N, N) 棋盘，board[y, x]
        x, y: 列、行
        player: BLACK 或 WHITE
    Returns:
        int: 四个方向的棋型分之和
    """
    total = 0
    for dx, dy in DIRECTIONS:
        forward, forward_blocked = _walk(board, x, y, dx, dy, player)
        backward, backward_blocked = _walk(board, x, y, -dx, -dy, player)
        count = 1 + forward + backward
        total += score_line(count, int(forward_blocked) + int(backward_blocked))
    return total
