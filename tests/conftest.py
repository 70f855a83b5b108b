"""
测试公共设置：无界面后端与常用棋盘构造
"""

import os

# 必须在导入 matplotlib / pygame 之前设置
os.environ.setdefault("MPLBACKEND", "Agg")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest

from skills import SkillRecord


def make_board(stones, size=15):
    """
    构造棋盘
    Args:
        stones: {player: [(x, y), ...]}
    """
    board = np.zeros((size, size), dtype=np.int8)
    for player, coords in stones.items():
        for x, y in coords:
            board[y, x] = player
    return board


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def fresh_record():
    def _make(player, used=(), last_skill_turn=-999):
        return SkillRecord(player, used, last_skill_turn)
    return _make
