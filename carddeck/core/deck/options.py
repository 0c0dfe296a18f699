"""
牌组构建与变换.

new()先生成标准顺序的52张牌，再按顺序依次应用调用方传入的变换函数.
每个变换函数接收一个牌列表并返回一个新的牌列表，可以增加、删除、
重排或复制牌，但不会修改传入的列表.

Examples:
    >>> cards = new(jokers(2), shuffle(random.Random(7)))
    >>> len(cards)
    54
"""

import functools
import logging
import random
from typing import Any, Callable, List, Optional

from ..exceptions import InvalidOptionError
from .card import Card
from .types import Suit, get_all_suits, get_all_ranks

DeckOption = Callable[[List[Card]], List[Card]]
LessFactory = Callable[[List[Card]], Callable[[int, int], bool]]

logger = logging.getLogger(__name__)


def new(*options: DeckOption) -> List[Card]:
    """
    创建一副牌并依次应用变换.

    Args:
        *options: 变换函数，按传入顺序应用

    Returns:
        List[Card]: 应用全部变换后的牌列表

    Raises:
        InvalidOptionError: 当变换不可调用或未返回列表时
    """
    cards = [
        Card(suit, rank)
        for suit in get_all_suits()
        for rank in get_all_ranks()
    ]

    for option in options:
        if not callable(option):
            raise InvalidOptionError(f"牌组变换必须可调用，实际: {type(option)}")
        cards = option(cards)
        if not isinstance(cards, list):
            raise InvalidOptionError(
                f"牌组变换 {_option_name(option)} 必须返回list，实际: {type(cards)}"
            )

    logger.debug(f"Built deck of {len(cards)} cards with {len(options)} option(s)")
    return cards


def abs_rank(card: Card) -> int:
    """
    计算牌的绝对点数，作为标准排序的键.

    Args:
        card: 扑克牌

    Returns:
        int: 花色序号 * 13 + 点数序号，黑桃A为0，红桃K为51，大小王从52开始
    """
    return card.abs_rank


def less(cards: List[Card]) -> Callable[[int, int], bool]:
    """
    按绝对点数比较牌列表中两个位置的牌.

    Args:
        cards: 被比较的牌列表

    Returns:
        Callable[[int, int], bool]: less(cards)(i, j)在第i张牌小于第j张牌时返回True
    """
    def _less(i: int, j: int) -> bool:
        return abs_rank(cards[i]) < abs_rank(cards[j])
    return _less


def sort_by(less_factory: LessFactory) -> DeckOption:
    """
    根据比较函数工厂生成排序变换.

    less_factory与less()的形式相同：接收牌列表，返回比较两个下标的函数.
    排序是稳定的，比较结果相同的牌保持原有相对顺序.

    Args:
        less_factory: 比较函数工厂

    Returns:
        DeckOption: 返回排序后新列表的变换
    """
    if not callable(less_factory):
        raise InvalidOptionError(f"比较函数工厂必须可调用，实际: {type(less_factory)}")

    def _sort(cards: List[Card]) -> List[Card]:
        is_less = less_factory(cards)

        def _compare(i: int, j: int) -> int:
            if is_less(i, j):
                return -1
            if is_less(j, i):
                return 1
            return 0

        order = sorted(range(len(cards)), key=functools.cmp_to_key(_compare))
        return [cards[i] for i in order]

    return _sort


def sort_key(rank_fn: Callable[[Card], Any]) -> DeckOption:
    """
    根据自定义排序键生成排序变换.

    Args:
        rank_fn: 将牌映射为可比较值的函数

    Returns:
        DeckOption: 稳定排序变换
    """
    if not callable(rank_fn):
        raise InvalidOptionError(f"排序键必须可调用，实际: {type(rank_fn)}")

    def _sort(cards: List[Card]) -> List[Card]:
        return sorted(cards, key=rank_fn)

    return _sort


def default_sort(cards: List[Card]) -> List[Card]:
    """按标准顺序排序：花色依次为黑桃、方块、梅花、红桃，同花色内A到K，大小王最后."""
    return sorted(cards, key=abs_rank)


def shuffle(rng: Optional[random.Random] = None) -> DeckOption:
    """
    生成洗牌变换.

    先用Fisher-Yates算法生成下标的随机排列，再按排列重新取牌，
    返回的是新列表，传入的列表保持不变.

    Args:
        rng: 随机数生成器，用于确定性测试；为None时每次洗牌使用新的随机数生成器

    Returns:
        DeckOption: 洗牌变换
    """
    if rng is not None and not isinstance(rng, random.Random):
        raise InvalidOptionError(f"rng必须是random.Random实例，实际: {type(rng)}")

    def _shuffle(cards: List[Card]) -> List[Card]:
        source = rng if rng is not None else random.Random()
        perm = list(range(len(cards)))
        source.shuffle(perm)
        return [cards[j] for j in perm]

    return _shuffle


def jokers(n: int) -> DeckOption:
    """
    生成添加大小王的变换.

    Args:
        n: 添加的大小王数量，标记依次为0..n-1

    Returns:
        DeckOption: 在牌列表末尾追加n张大小王的变换

    Raises:
        InvalidOptionError: 当n不是非负整数时
    """
    _check_count('jokers', n)

    def _jokers(cards: List[Card]) -> List[Card]:
        return cards + [Card(Suit.JOKER, i) for i in range(n)]

    return _jokers


def filter_cards(predicate: Callable[[Card], bool]) -> DeckOption:
    """
    生成剔除牌的变换.

    注意这是排除式过滤：predicate返回True的牌会被移除，
    返回False的牌按原顺序保留.

    Args:
        predicate: 判断一张牌是否需要移除

    Returns:
        DeckOption: 剔除匹配牌的变换
    """
    if not callable(predicate):
        raise InvalidOptionError(f"过滤条件必须可调用，实际: {type(predicate)}")

    def _filter(cards: List[Card]) -> List[Card]:
        return [card for card in cards if not predicate(card)]

    return _filter


def repeat(n: int) -> DeckOption:
    """
    生成多副牌拼接的变换.

    Args:
        n: 副数，0得到空牌组

    Returns:
        DeckOption: 将传入的牌列表重复n次的变换

    Raises:
        InvalidOptionError: 当n不是非负整数时
    """
    _check_count('repeat', n)

    def _repeat(cards: List[Card]) -> List[Card]:
        return list(cards) * n

    return _repeat


def _check_count(name: str, n: Any) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidOptionError(f"{name}的数量必须是整数，实际: {type(n)}")
    if n < 0:
        raise InvalidOptionError(f"{name}的数量不能为负数: {n}")


def _option_name(option: DeckOption) -> str:
    return getattr(option, '__qualname__', repr(option))
