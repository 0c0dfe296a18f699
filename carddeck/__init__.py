"""
carddeck - 以组合变换函数的方式生成、变换和排序扑克牌组.

    >>> from carddeck import new, default_sort, jokers
    >>> cards = new(jokers(2), default_sort)
"""

from .core.deck import (
    Suit,
    Rank,
    Card,
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
from .core.exceptions import DeckError, InvalidCardError, InvalidOptionError, DeckConfigError

__version__ = "1.0.0"

__all__ = [
    'Suit', 'Rank', 'Card', 'DeckOption', 'new', 'abs_rank', 'less', 'sort_by',
    'sort_key', 'default_sort', 'shuffle', 'jokers', 'filter_cards', 'repeat',
    'DeckError', 'InvalidCardError', 'InvalidOptionError', 'DeckConfigError',
]
