"""
技能与动作定义
四种一次性技能、玩家技能记录，以及AI输出的动作类型
"""

from collections import namedtuple
from enum import Enum

from config import Config


# 棋盘格状态
EMPTY = 0
BLACK = 1
WHITE = -1


Coordinate = namedtuple('Coordinate', ['x', 'y'])


class SkillType(Enum):
    """四种技能，每局每位玩家各限一次"""

    REMOVE_RANDOM = 'REMOVE_RANDOM'  # 飞沙走石
    FORCE_RANDOM = 'FORCE_RANDOM'    # 静如止水
    RESET_BOARD = 'RESET_BOARD'      # 力拔山兮
    MOVE_PIECE = 'MOVE_PIECE'        # 擒擒拿拿

    @property
    def title(self):
        return SKILL_INFO[self][0]

    @property
    def description(self):
        return SKILL_INFO[self][1]


SKILL_INFO = {
    SkillType.REMOVE_RANDOM: ("飞沙走石", "随机掀翻对手一颗棋子"),
    SkillType.FORCE_RANDOM: ("静如止水", "让对方随机走一颗棋子"),
    SkillType.RESET_BOARD: ("力拔山兮", "棋盘瞬间归零，重启战局"),
    SkillType.MOVE_PIECE: ("擒擒拿拿", "把对手的一颗棋子搬家"),
}

# 界面与命令行中技能的编号顺序
SKILL_ORDER = [
    SkillType.REMOVE_RANDOM,
    SkillType.FORCE_RANDOM,
    SkillType.RESET_BOARD,
    SkillType.MOVE_PIECE,
]


def opponent_of(player):
    """返回对手"""
    if player not in (BLACK, WHITE):
        raise ValueError(f"未知玩家: {player}")
    return -player


class SkillRecord:
    """玩家的技能使用记录"""

    def __init__(self, player, used_skills=None, last_skill_turn=Config.NEVER_USED_TURN):
        self.player = player
        self.used_skills = set(used_skills or ())
        self.last_skill_turn = last_skill_turn

    def has_used(self, skill):
        return skill in self.used_skills

    def is_on_cooldown(self, current_turn, cooldown=Config.SKILL_COOLDOWN):
        """距离上次用技能不足 cooldown 回合"""
        return current_turn - self.last_skill_turn < cooldown

    def mark_used(self, skill, turn):
        """
        记录一次技能使用
        Args:
            skill: 技能类型
            turn: 使用时的回合数
        """
        if skill in self.used_skills:
            raise ValueError(f"技能 {skill.value} 已经用过了")
        self.used_skills.add(skill)
        self.last_skill_turn = turn

    def copy(self):
        return SkillRecord(self.player, self.used_skills, self.last_skill_turn)

    def __repr__(self):
        used = sorted(s.value for s in self.used_skills)
        return f"SkillRecord(player={self.player}, used={used}, last_skill_turn={self.last_skill_turn})"


class Move(namedtuple('Move', ['x', 'y'])):
    """落子"""

    __slots__ = ()
    kind = 'move'


class UseSkill(namedtuple('UseSkill', ['skill'])):
    """不需要目标的技能：飞沙走石、静如止水、力拔山兮"""

    __slots__ = ()
    kind = 'skill'

    def __new__(cls, skill):
        skill = SkillType(skill)
        if skill is SkillType.MOVE_PIECE:
            raise ValueError("擒擒拿拿需要起点和终点，请使用 MovePieceSkill")
        return super().__new__(cls, skill)


class MovePieceSkill(namedtuple('MovePieceSkill', ['source', 'dest'])):
    """擒擒拿拿：把对手 source 处的棋子搬到空位 dest"""

    __slots__ = ()
    kind = 'skill'
    skill = SkillType.MOVE_PIECE

    def __new__(cls, source, dest):
        return super().__new__(cls, Coordinate(*source), Coordinate(*dest))
