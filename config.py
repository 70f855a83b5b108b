"""
配置文件
技能五子棋的规则常量与评估设置
"""


class Config:
    """技能五子棋配置"""

    # ========== 棋盘设置 ==========
    BOARD_SIZE = 15
    WIN_COUNT = 5  # 五连获胜

    # ========== 技能设置 ==========
    SKILL_COOLDOWN = 5  # 两次技能之间至少间隔的回合数
    NEVER_USED_TURN = -999  # 从未使用过技能

    # ========== AI设置 ==========
    CANDIDATE_RADIUS = 2  # 候选点搜索半径（切比雪夫距离）
    EMPTY_SPOT_ATTEMPTS = 50  # 随机找空位的尝试次数，失败后线性扫描
    AI_THINK_DELAY_MS = 600  # 界面上AI“思考”的停顿，只影响展示

    # ========== 随机模拟顾问 ==========
    ROLLOUT_SIMULATIONS = 60
    ROLLOUT_DEPTH = 40  # 每次模拟最多走的步数

    # ========== 评估设置 ==========
    EVAL_GAMES = 20  # 评估时对弈局数
    MAX_ACTIONS_PER_GAME = 900  # 单局动作上限（包括技能）
    STATS_DIR = './stats'

    @classmethod
    def display(cls):
        """显示配置信息"""
        print("=" * 60)
        print("技能五子棋配置")
        print("=" * 60)
        print(f"棋盘大小: {cls.BOARD_SIZE}x{cls.BOARD_SIZE}")
        print(f"获胜连子数: {cls.WIN_COUNT}")
        print(f"\n技能:")
        print(f"  冷却回合: {cls.SKILL_COOLDOWN}")
        print(f"\nAI:")
        print(f"  候选半径: {cls.CANDIDATE_RADIUS}")
        print(f"  模拟次数: {cls.ROLLOUT_SIMULATIONS}")
        print(f"  模拟深度: {cls.ROLLOUT_DEPTH}")
        print(f"\n评估:")
        print(f"  对弈局数: {cls.EVAL_GAMES}")
        print(f"  单局动作上限: {cls.MAX_ACTIONS_PER_GAME}")
        print("=" * 60)


class QuickConfig(Config):
    """快速配置（适合冒烟测试或CPU较弱的机器）"""

    ROLLOUT_SIMULATIONS = 20
    ROLLOUT_DEPTH = 20

    EVAL_GAMES = 4
    MAX_ACTIONS_PER_GAME = 600
    STATS_DIR = './stats_quick'

    @classmethod
    def display(cls):
        """显示配置信息"""
        print("=" * 60)
        print("技能五子棋配置 (快速版)")
        print("=" * 60)
        print(f"棋盘大小: {cls.BOARD_SIZE}x{cls.BOARD_SIZE}")
        print(f"冷却回合: {cls.SKILL_COOLDOWN}")
        print(f"模拟次数: {cls.ROLLOUT_SIMULATIONS}")
        print(f"对弈局数: {cls.EVAL_GAMES}")
        print("=" * 60)


if __name__ == "__main__":
    print("\n标准配置:")
    Config.display()

    print("\n\n快速配置:")
    QuickConfig.display()
