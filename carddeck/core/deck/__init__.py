"""
扑克牌组模块.

提供Card、花色和点数类型，以及以变换函数组合方式构建牌组的new()和各类变换.
"""

from .types import Suit, Rank, MIN_RANK, MAX_RANK, get_all_suits, get_all_ranks
from .card import Card
from .options import (
    DeckOption,
    new,
    abs_rank,
    less,
    sort_by,
    sort_key,
    default_sort,
    shuffle,
    jokers,
    filter_cards,
    repeat,
)

__all__ = [
    'Suit', 'Rank', 'MIN_RANK', 'MAX_RANK', 'get_all_suits', 'get_all_ranks',
    'Card', 'DeckOption', 'new', 'abs_rank', 'less', 'sort_by', 'sort_key',
    'default_sort', 'shuffle', 'jokers', 'filter_cards', 'repeat',
]
