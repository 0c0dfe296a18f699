"""
扑克牌和基础类型的单元测试.

测试Suit、Rank枚举以及Card的创建、校验、比较和字符串表示.
"""

import pytest

from carddeck.core.deck import Card, Suit, Rank, MIN_RANK, MAX_RANK, get_all_suits, get_all_ranks
from carddeck.core.exceptions import DeckError, InvalidCardError


class TestTypes:
    """花色和点数枚举测试."""

    def test_suit_order(self):
        """测试花色顺序."""
        assert [int(s) for s in Suit] == [0, 1, 2, 3, 4]
        assert get_all_suits() == [Suit.SPADE, Suit.DIAMOND, Suit.CLUB, Suit.HEART]

    def test_rank_range(self):
        """测试点数范围."""
        ranks = get_all_ranks()
        assert len(ranks) == 13
        assert ranks[0] is Rank.ACE and int(ranks[0]) == 1
        assert ranks[-1] is Rank.KING and int(ranks[-1]) == 13
        assert MIN_RANK is Rank.ACE
        assert MAX_RANK is Rank.KING

    def test_display_names(self):
        """测试枚举的显示名称."""
        assert str(Suit.SPADE) == "Spade"
        assert str(Suit.JOKER) == "Joker"
        assert str(Rank.ACE) == "Ace"
        assert str(Rank.QUEEN) == "Queen"


class TestCard:
    """Card类的单元测试."""

    def test_card_creation(self):
        """测试Card对象的创建."""
        card = Card(Suit.HEART, Rank.ACE)

        assert card.suit is Suit.HEART
        assert card.rank is Rank.ACE
        assert not card.is_joker

    def test_card_coerces_ints(self):
        """测试整数花色和点数被规范化为枚举."""
        card = Card(3, 1)

        assert card.suit is Suit.HEART
        assert card.rank is Rank.ACE
        assert card == Card(Suit.HEART, Rank.ACE)

    def test_card_immutability(self):
        """测试Card对象的不可变性."""
        card = Card(Suit.SPADE, Rank.KING)

        with pytest.raises(AttributeError):
            card.suit = Suit.HEART
        with pytest.raises(AttributeError):
            card.rank = Rank.ACE

    @pytest.mark.parametrize("card, expected", [
        (Card(Suit.HEART, Rank.ACE), "Ace of Hearts"),
        (Card(Suit.CLUB, Rank.TWO), "Two of Clubs"),
        (Card(Suit.DIAMOND, Rank.JACK), "Jack of Diamonds"),
        (Card(Suit.SPADE, Rank.KING), "King of Spades"),
        (Card(Suit.JOKER), "Joker"),
        (Card(Suit.JOKER, 3), "Joker"),
    ])
    def test_card_string_representation(self, card, expected):
        """测试Card的字符串表示."""
        assert str(card) == expected

    def test_card_repr(self):
        """测试Card的详细表示."""
        assert repr(Card(Suit.HEART, Rank.ACE)) == "Card(ACE, HEART)"
        assert repr(Card(Suit.JOKER, 2)) == "Card(JOKER, 2)"

    def test_card_equality_and_hash(self):
        """测试Card按值比较和哈希."""
        card1 = Card(Suit.HEART, Rank.ACE)
        card2 = Card(Suit.HEART, Rank.ACE)
        card3 = Card(Suit.SPADE, Rank.ACE)

        assert card1 == card2
        assert card1 != card3
        assert hash(card1) == hash(card2)
        assert len({card1, card2, card3}) == 2

    def test_jokers_distinguished_by_tag(self):
        """测试大小王按标记区分."""
        assert Card(Suit.JOKER, 0) != Card(Suit.JOKER, 1)
        assert Card(Suit.JOKER) == Card(Suit.JOKER, 0)
        assert Card(Suit.JOKER, 1).is_joker

    def test_abs_rank(self):
        """测试绝对点数."""
        assert Card(Suit.SPADE, Rank.ACE).abs_rank == 0
        assert Card(Suit.SPADE, Rank.KING).abs_rank == 12
        assert Card(Suit.DIAMOND, Rank.ACE).abs_rank == 13
        assert Card(Suit.HEART, Rank.KING).abs_rank == 51
        assert Card(Suit.JOKER, 0).abs_rank == 52
        assert Card(Suit.JOKER, 1).abs_rank == 53

    @pytest.mark.parametrize("suit, rank", [
        (Suit.HEART, 0),
        (Suit.HEART, 14),
        (5, Rank.ACE),
        (-1, Rank.ACE),
        (Suit.JOKER, -1),
    ])
    def test_card_validation_range(self, suit, rank):
        """测试超出范围的花色和点数."""
        with pytest.raises(InvalidCardError):
            Card(suit, rank)

    @pytest.mark.parametrize("suit, rank", [
        ("invalid", Rank.ACE),
        (Suit.HEART, "A"),
        (Suit.HEART, 1.0),
        (True, Rank.ACE),
    ])
    def test_card_validation_type(self, suit, rank):
        """测试无效的花色和点数类型."""
        with pytest.raises(TypeError):
            Card(suit, rank)

    def test_invalid_card_error_hierarchy(self):
        """测试异常继承关系."""
        with pytest.raises(ValueError):
            Card(Suit.CLUB, 99)
        with pytest.raises(DeckError):
            Card(Suit.CLUB, 99)
