"""
攻防分析
对每个候选点分别评估：我方落子的进攻分、对手落子的威胁分
"""

from collections import namedtuple

from patterns import evaluate_point
from skills import opponent_of


CandidateScore = namedtuple('CandidateScore', ['x', 'y', 'attack', 'defense'])


class ThreatReport:
    """一次分析的结果"""

    def __init__(self, scores, max_attack, max_threat, threat_loc):
        self.scores = scores  # list[CandidateScore]，与候选点顺序一致
        self.max_attack = max_attack
        self.max_threat = max_threat
        self.threat_loc = threat_loc  # 威胁分最高的点，没有候选点时为 None

    def __repr__(self):
        return (f"ThreatReport(candidates={len(self.scores)}, max_attack={self.max_attack}, "
                f"max_threat={self.max_threat}, threat_loc={self.threat_loc})")


def analyze_threats(board, player, candidates):
    """
    计算所有候选点的攻防分
    Args:
        board: (N, N) 棋盘，不会被修改
        player: 行动方
        candidates: get_candidates 的结果
    Returns:
        ThreatReport
    """
    opponent = opponent_of(player)

    scores = []
    max_attack = 0
    max_threat = 0
    threat_loc = None

    for move in candidates:
        attack = evaluate_point(board, move.x, move.y, player)
        defense = evaluate_point(board, move.x, move.y, opponent)
        scores.append(CandidateScore(move.x, move.y, attack, defense))

        if attack > max_attack:
            max_attack = attack
        # 严格大于：同分时保留先出现的点
        if defense > max_threat:
            max_threat = defense
            threat_loc = move

    return ThreatReport(scores, max_attack, max_threat, threat_loc)
