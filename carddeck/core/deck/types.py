"""
扑克牌组相关类型定义.

定义扑克牌的花色、点数等基础枚举类型.
"""

from enum import IntEnum
from typing import List


class Suit(IntEnum):
    """
    扑克牌花色枚举.

    枚举值即花色在标准牌组中的顺序，用于计算绝对点数.
    JOKER不是可用花色，仅作为大小王的标记.
    """

    SPADE = 0      # 黑桃
    DIAMOND = 1    # 方块
    CLUB = 2       # 梅花
    HEART = 3      # 红桃
    JOKER = 4      # 大小王

    def __str__(self) -> str:
        return self.name.capitalize()


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    定义13种扑克牌点数，A为1，K为13.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return self.name.capitalize()


MIN_RANK = Rank.ACE
MAX_RANK = Rank.KING


def get_all_suits() -> List[Suit]:
    """
    获取所有可用花色.

    Returns:
        List[Suit]: 按黑桃、方块、梅花、红桃顺序排列的四种花色，不含JOKER
    """
    return [suit for suit in Suit if suit is not Suit.JOKER]


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 从A到K的13种点数
    """
    return list(Rank)
