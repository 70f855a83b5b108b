"""
工具函数
"""

import os
import json
import matplotlib.pyplot as plt

from ai_player import move_score
from candidates import get_candidates
from skills import BLACK, EMPTY, SKILL_ORDER, WHITE
from threats import analyze_threats


def plot_match_history(stats, save_path=None):
    """
    绘制对战统计图
    Args:
        stats: Evaluator.evaluate 返回的统计字典
        save_path: 保存路径
    """
    fig, axes = plt.subplots(1, 2, figsize=(12, 4))

    # 胜负
    labels = ['Agent1 Wins', 'Agent2 Wins', 'Draws']
    values = [stats['wins'], stats['losses'], stats['draws']]
    axes[0].bar(labels, values, color=['#333333', '#bbbbbb', '#dcb35c'])
    axes[0].set_title('Results')
    axes[0].set_ylabel('Games')
    axes[0].grid(True, axis='y')

    # 技能使用次数
    names = [skill.value for skill in SKILL_ORDER]
    width = 0.4
    positions = list(range(len(names)))
    agent1 = [stats['skills_used']['agent1'].get(name, 0) for name in names]
    agent2 = [stats['skills_used']['agent2'].get(name, 0) for name in names]
    axes[1].bar([p - width / 2 for p in positions], agent1, width, label='Agent1')
    axes[1].bar([p + width / 2 for p in positions], agent2, width, label='Agent2')
    axes[1].set_xticks(positions)
    axes[1].set_xticklabels(names, rotation=15)
    axes[1].set_title('Skill Usage')
    axes[1].legend()
    axes[1].grid(True, axis='y')

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150)
        plt.close(fig)
        print(f"对战统计图已保存到: {save_path}")
    else:
        plt.show()


def save_match_stats(stats, filepath):
    """保存对战统计信息"""
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(filepath, 'w') as f:
        json.dump(stats, f, indent=2)
    print(f"统计信息已保存到: {filepath}")


def load_match_stats(filepath):
    """加载对战统计信息"""
    with open(filepath, 'r') as f:
        stats = json.load(f)
    return stats


def score_map(board, player):
    """
    候选点的综合攻防分
    Returns:
        dict {(x, y): score}
    """
    candidates = get_candidates(board)
    report = analyze_threats(board, player, candidates)
    return {(c.x, c.y): move_score(c.attack, c.defense) for c in report.scores}


def print_board_with_scores(game, player=None):
    """
    打印带有AI打分的棋盘，分数按最高分归一化显示为百分比
    Args:
        game: 游戏状态
        player: 从哪一方的角度打分，默认当前玩家
    """
    if player is None:
        player = game.current_player

    scores = score_map(game.board, player)
    top = max(scores.values()) if scores else 0

    symbols = {EMPTY: '·', BLACK: '●', WHITE: '○'}

    print('\n   ', end='')
    for i in range(game.board_size):
        print(f'{i:2d}', end=' ')
    print()

    for y in range(game.board_size):
        print(f'{y:2d} ', end='')
        for x in range(game.board_size):
            cell = int(game.board[y, x])
            if cell != EMPTY:
                print(f' {symbols[cell]} ', end='')
            elif top > 0 and (x, y) in scores and scores[(x, y)] / top > 0.01:
                print(f'{scores[(x, y)] / top:3.0%}', end='')
            else:
                print(' · ', end='')
        print()
    print()
