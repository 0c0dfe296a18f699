"""
扑克牌数据结构.

定义不可变的Card类，支持严格的类型检查和完整的操作接口.
"""

from dataclasses import dataclass
from typing import Union

from ..exceptions import InvalidCardError
from .types import Suit, Rank, MIN_RANK, MAX_RANK


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，按花色和点数做值比较，可用作字典键或集合元素.
    普通牌的点数会被规范化为Rank；大小王的点数只是区分不同王牌的
    非负整数标记，不代表牌面大小.

    Attributes:
        suit: 花色
        rank: 点数，大小王为整数标记

    Examples:
        >>> str(Card(Suit.HEART, Rank.ACE))
        'Ace of Hearts'
        >>> str(Card(Suit.JOKER, 1))
        'Joker'
    """

    suit: Suit
    rank: Union[Rank, int] = 0

    def __post_init__(self) -> None:
        """
        验证并规范化花色和点数.

        Raises:
            TypeError: 当花色或点数不是整数类型时
            InvalidCardError: 当花色或点数超出范围时
        """
        for field_name in ('suit', 'rank'):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{field_name}必须是整数类型，实际: {type(value)}")

        try:
            suit = Suit(self.suit)
        except ValueError:
            raise InvalidCardError(f"无效的花色: {self.suit}") from None
        object.__setattr__(self, 'suit', suit)

        if suit is Suit.JOKER:
            if self.rank < 0:
                raise InvalidCardError(f"大小王标记不能为负数: {self.rank}")
            object.__setattr__(self, 'rank', int(self.rank))
            return

        try:
            rank = Rank(self.rank)
        except ValueError:
            raise InvalidCardError(f"无效的点数: {self.rank}") from None
        object.__setattr__(self, 'rank', rank)

    @property
    def is_joker(self) -> bool:
        """是否为大小王."""
        return self.suit is Suit.JOKER

    @property
    def abs_rank(self) -> int:
        """
        牌在标准顺序中的绝对点数.

        普通牌的点数序号从0开始(A为0，K为12)，大小王直接使用标记，
        因此黑桃A为0，红桃K为51，大小王从52开始.

        Returns:
            int: 花色序号 * 13 + 点数序号
        """
        if self.is_joker:
            return int(self.suit) * int(MAX_RANK) + self.rank
        return int(self.suit) * int(MAX_RANK) + int(self.rank) - int(MIN_RANK)

    def __str__(self) -> str:
        """
        返回扑克牌的可读名称.

        Returns:
            str: 如"Ace of Hearts"；大小王统一为"Joker"
        """
        if self.is_joker:
            return str(self.suit)
        return f"{self.rank} of {self.suit}s"

    def __repr__(self) -> str:
        if self.is_joker:
            return f"Card({self.suit.name}, {self.rank})"
        return f"Card({self.rank.name}, {self.suit.name})"
