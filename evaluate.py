"""
评估和对战工具
AI之间批量对弈统计胜率和技能使用情况，也支持命令行人机对战
"""

import os
import argparse
import numpy as np

from ai_player import HeuristicAI
from config import Config, QuickConfig
from gomoku_game import GomokuGame
from mcts import make_rollout_ai
from skills import BLACK, SKILL_ORDER, WHITE, Move, MovePieceSkill, SkillType, UseSkill


class Evaluator:
    """AI对战评估器"""

    def __init__(self, agent1_factory, agent2_factory, board_size=Config.BOARD_SIZE,
                 max_actions=Config.MAX_ACTIONS_PER_GAME, seed=None):
        """
        Args:
            agent1_factory: 被评估的AI，callable(player) -> agent
            agent2_factory: 对手AI，callable(player) -> agent
            board_size: 棋盘大小
            max_actions: 单局动作上限，超过按平局处理
            seed: 棋局随机种子（技能的随机目标）
        """
        self.agent1_factory = agent1_factory
        self.agent2_factory = agent2_factory
        self.board_size = board_size
        self.max_actions = max_actions
        self.rng = np.random.default_rng(seed)

    def play_game(self, agent1_first=True, verbose=False):
        """
        两个AI对弈一局
        Args:
            agent1_first: agent1是否执黑先手
            verbose: 是否打印详细信息
        Returns:
            winner: 1(agent1胜), -1(agent2胜), 0(平局)
            game: 结束时的棋局
        """
        game = GomokuGame(self.board_size, rng=self.rng)

        # 确定哪个agent先手
        agent1_color = BLACK if agent1_first else WHITE
        agents = {
            agent1_color: self.agent1_factory(agent1_color),
            -agent1_color: self.agent2_factory(-agent1_color),
        }

        actions = 0
        while not game.is_game_over() and actions < self.max_actions:
            current_agent = agents[game.current_player]
            action = current_agent.get_action(game)

            if not game.apply_action(action):
                print(f"动作无效，对局终止: {action!r}")
                break
            actions += 1

            if verbose and action.kind == 'skill':
                side = '黑' if game.history[-1][0] == BLACK else '白'
                print(f"  {side}方使用技能: {action.skill.title}")
            if verbose and actions % 20 == 0:
                print(f"动作数: {actions}")

        winner = game.get_winner()
        if winner is None:
            winner = 0

        # 转换为agent1的视角
        result = winner * agent1_color
        return result, game

    def evaluate(self, num_games=20, verbose=True):
        """
        评估
        Args:
            num_games: 对弈局数（agent1先手和后手各一半）
        Returns:
            stats: 胜负与技能统计
        """
        wins = 0
        losses = 0
        draws = 0
        skills_used = {
            'agent1': {skill.value: 0 for skill in SKILL_ORDER},
            'agent2': {skill.value: 0 for skill in SKILL_ORDER},
        }

        # 一半先手，一半后手
        for i in range(num_games):
            agent1_first = (i % 2 == 0)
            agent1_color = BLACK if agent1_first else WHITE

            if verbose:
                print(f"对局 {i+1}/{num_games}: ", end='')
                print(f"Agent1 {'先手' if agent1_first else '后手'} ... ", end='', flush=True)

            result, game = self.play_game(agent1_first=agent1_first, verbose=False)

            for color, state in game.player_states.items():
                side = 'agent1' if color == agent1_color else 'agent2'
                for skill in state.used_skills:
                    skills_used[side][skill.value] += 1

            if result == 1:
                wins += 1
                if verbose:
                    print("胜")
            elif result == -1:
                losses += 1
                if verbose:
                    print("负")
            else:
                draws += 1
                if verbose:
                    print("平")

        win_rate = wins / num_games if num_games else 0.0

        if verbose:
            print(f"\n评估结果:")
            print(f"  胜: {wins}/{num_games} ({win_rate*100:.1f}%)")
            print(f"  负: {losses}/{num_games} ({losses/max(num_games, 1)*100:.1f}%)")
            print(f"  平: {draws}/{num_games} ({draws/max(num_games, 1)*100:.1f}%)")
            print(f"  胜率: {win_rate*100:.1f}%")

        return {
            'games': num_games,
            'wins': wins,
            'losses': losses,
            'draws': draws,
            'win_rate': win_rate,
            'skills_used': skills_used,
        }


def parse_command(text):
    """
    解析人类玩家的输入
    'x y' 落子；s1 飞沙走石；s2 静如止水；s3 力拔山兮；s4 fx fy tx ty 擒擒拿拿
    Returns:
        动作，无法解析时返回 None
    """
    parts = text.strip().lower().split()
    if not parts:
        return None
    try:
        if parts[0].startswith('s'):
            index = int(parts[0][1:]) - 1
            if not 0 <= index < len(SKILL_ORDER):
                return None
            skill = SKILL_ORDER[index]
            if skill is SkillType.MOVE_PIECE:
                fx, fy, tx, ty = map(int, parts[1:5])
                return MovePieceSkill((fx, fy), (tx, ty))
            return UseSkill(skill)
        x, y = map(int, parts[:2])
        return Move(x, y)
    except ValueError:
        return None


def play_against_human(human_first=True, board_size=Config.BOARD_SIZE, seed=None):
    """
    人机对战（命令行版本）
    Args:
        human_first: 人类是否先手
        board_size: 棋盘大小
        seed: 随机种子
    """
    game = GomokuGame(board_size, rng=seed)
    human_player = BLACK if human_first else WHITE
    ai = HeuristicAI(-human_player, rng=seed)

    print("=" * 50)
    print("技能五子棋 - 人机对战")
    print("=" * 50)
    print(f"你执: {'黑棋 (先手)' if human_first else '白棋 (后手)'}")
    print("输入格式: 列 行 (例如: 7 7)")
    for i, skill in enumerate(SKILL_ORDER):
        usage = " 起点列 起点行 终点列 终点行" if skill is SkillType.MOVE_PIECE else ""
        print(f"  s{i+1}{usage}: {skill.title} - {skill.description}")
    print("输入 'q' 退出")
    print("=" * 50)

    game.display()

    while not game.is_game_over():
        if game.current_player == human_player:
            # 人类回合
            user_input = input(f"\n你的回合 ({'●' if human_player == BLACK else '○'}): ").strip()

            if user_input.lower() == 'q':
                print("游戏结束")
                return

            action = parse_command(user_input)
            if action is None:
                print("输入格式错误，请输入: 列 行，或技能 s1-s4")
                continue
            if not game.apply_action(action):
                print("无效动作，请重试")
                continue
            if action.kind == 'skill':
                print(f"你使用了技能: {action.skill.title}，继续你的回合")
        else:
            # AI回合
            print(f"\nAI思考中 ({'●' if game.current_player == BLACK else '○'})...")
            action = ai.get_action(game)
            if not game.apply_action(action):
                print(f"AI动作无效: {action!r}")
                return
            if action.kind == 'move':
                print(f"AI落子: {action.x} {action.y}")
            else:
                print(f"AI使用了技能: {action.skill.title}")

        game.display()

    # 游戏结束
    print("\n" + "=" * 50)
    winner = game.get_winner()
    if winner == human_player:
        print("你赢了！🎉")
    elif winner == -human_player:
        print("AI获胜！")
    else:
        print("平局！")
    print("=" * 50)


def main(argv=None):
    parser = argparse.ArgumentParser(description='技能五子棋 AI对战评估')
    parser.add_argument('--mode', type=str, default='full', choices=['full', 'quick'],
                        help='评估模式: full(完整) 或 quick(快速)')
    parser.add_argument('--games', type=int, default=None,
                        help='对弈局数（覆盖配置）')
    parser.add_argument('--seed', type=int, default=None,
                        help='随机种子')
    parser.add_argument('--advisor', type=str, default='heuristic', choices=['heuristic', 'rollout'],
                        help='Agent1 使用的AI: heuristic(启发式) 或 rollout(随机模拟顾问)')
    parser.add_argument('--human', action='store_true',
                        help='命令行人机对战')
    parser.add_argument('--human-second', action='store_true',
                        help='人机对战时人类执白后手')
    parser.add_argument('--save', type=str, default=None,
                        help='统计结果保存文件名（保存在配置的统计目录下）')
    parser.add_argument('--plot', type=str, default=None,
                        help='统计图保存路径')

    args = parser.parse_args(argv)

    # 选择配置
    cfg = Config if args.mode == 'full' else QuickConfig
    cfg.display()

    if args.human:
        play_against_human(human_first=not args.human_second,
                           board_size=cfg.BOARD_SIZE, seed=args.seed)
        return None

    seed = args.seed
    if args.advisor == 'rollout':
        def agent1_factory(player):
            return make_rollout_ai(player, num_simulations=cfg.ROLLOUT_SIMULATIONS,
                                   max_depth=cfg.ROLLOUT_DEPTH, seed=seed)
    else:
        def agent1_factory(player):
            return HeuristicAI(player, rng=seed)

    def agent2_factory(player):
        return HeuristicAI(player, rng=None if seed is None else seed + 1)

    num_games = args.games if args.games else cfg.EVAL_GAMES

    print(f"\n开始评估（{num_games}局对弈）...")
    evaluator = Evaluator(agent1_factory, agent2_factory, board_size=cfg.BOARD_SIZE,
                          max_actions=cfg.MAX_ACTIONS_PER_GAME, seed=seed)
    stats = evaluator.evaluate(num_games=num_games, verbose=True)

    if args.save or args.plot:
        from utils import plot_match_history, save_match_stats
        if args.save:
            save_match_stats(stats, os.path.join(cfg.STATS_DIR, args.save))
        if args.plot:
            plot_match_history(stats, save_path=args.plot)

    return stats


if __name__ == "__main__":
    main()
