"""
Test Configuration - pytest配置文件

提供通用的测试fixture和测试标记定义.
"""

import random

import pytest

from carddeck.application import ConfigService
from carddeck.core.deck import Card, Suit, Rank, new


@pytest.fixture
def rng():
    """固定种子的随机数生成器fixture"""
    return random.Random(42)


@pytest.fixture
def fresh_deck():
    """标准顺序的52张牌fixture"""
    return new()


@pytest.fixture
def config_service():
    """配置服务fixture"""
    return ConfigService()


@pytest.fixture
def sample_cards():
    """少量乱序牌fixture"""
    return [
        Card(Suit.HEART, Rank.KING),
        Card(Suit.SPADE, Rank.TWO),
        Card(Suit.JOKER, 0),
        Card(Suit.CLUB, Rank.ACE),
        Card(Suit.SPADE, Rank.ACE),
    ]


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
