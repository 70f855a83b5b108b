"""
候选点生成
只考虑已有棋子附近的空位，空棋盘时考虑天元
"""

import numpy as np

from config import Config
from skills import EMPTY, Coordinate


def board_center(board):
    """棋盘中心（天元）"""
    center = (board.shape[0] - 1) // 2
    return Coordinate(center, center)


def get_candidates(board, radius=Config.CANDIDATE_RADIUS):
    """
    获取候选落子点
    包含周围 radius 范围（切比雪夫距离）内有棋子的所有空位，以及空着的天元。
    按离中心的曼哈顿距离排序，越近越靠前，距离相同时保持逐行扫描的顺序。
    这个顺序只用于后面打分相同时的取舍。
    Args:
        board: (N, N) 棋盘
        radius: 邻域半径
    Returns:
        list[Coordinate]
    """
    size = board.shape[0]
    occupied = (board != EMPTY).astype(np.int32)

    # 统计每个格子 (2r+1)x(2r+1) 邻域内的棋子数
    padded = np.pad(occupied, radius)
    neighbors = np.zeros_like(occupied)
    for dy in range(2 * radius + 1):
        for dx in range(2 * radius + 1):
            neighbors += padded[dy:dy + size, dx:dx + size]

    mask = (occupied == 0) & (neighbors > 0)

    center = board_center(board)
    if board[center.y, center.x] == EMPTY:
        mask[center.y, center.x] = True

    ys, xs = np.nonzero(mask)
    candidates = [Coordinate(int(x), int(y)) for y, x in zip(ys, xs)]

    # 排序是稳定的，reverse 也不会打乱同分点的先后
    candidates.sort(key=lambda c: 100 - (abs(c.x - center.x) + abs(c.y - center.y)), reverse=True)
    return candidates
