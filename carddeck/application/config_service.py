#!/usr/bin/env python3
"""
ConfigService - 牌组配置管理服务

负责集中化管理牌组配方和日志配置：
- 牌组配方：几副牌、几张大小王、剔除哪些牌、最终顺序
- 日志配置：日志级别和格式

配方经pydantic校验后展开为new()可直接使用的变换列表.
"""

import logging
import os
import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Literal, Optional, Union

from pydantic import Field, ValidationError, field_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

from ..core.deck import (
    Card,
    DeckOption,
    Rank,
    Suit,
    default_sort,
    filter_cards,
    jokers,
    new,
    repeat,
    shuffle,
)
from ..core.exceptions import DeckConfigError

LOG_LEVEL_ENV = "CARDDECK_LOG_LEVEL"


class ConfigType(Enum):
    """配置类型枚举"""
    DECK_RECIPE = "deck_recipe"
    LOGGING = "logging"


@pydantic_dataclass
class DeckRecipeConfig:
    """牌组配方.

    描述如何由标准52张牌得到目标牌组，应用顺序为：
    剔除牌 -> 复制多副 -> 添加大小王 -> 排序或洗牌.
    """
    decks: int = Field(1, ge=1, strict=True, description="牌组副数")
    jokers: int = Field(0, ge=0, strict=True, description="大小王数量")
    excluded_ranks: List[Rank] = Field(default_factory=list, description="剔除的点数")
    excluded_suits: List[Suit] = Field(default_factory=list, description="剔除的花色")
    order: Literal["canonical", "sorted", "shuffled"] = Field("canonical", description="最终顺序")
    seed: Optional[int] = Field(None, description="洗牌随机种子，为None时每次结果不同")

    @field_validator('excluded_suits')
    @classmethod
    def validate_excluded_suits(cls, v: List[Suit]) -> List[Suit]:
        """大小王数量由jokers控制，不能作为剔除花色."""
        if Suit.JOKER in v:
            raise ValueError("JOKER不能作为剔除花色，请使用jokers=0")
        return v


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'INFO'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def create_recipe(**values) -> DeckRecipeConfig:
    """
    创建并校验牌组配方.

    Args:
        **values: DeckRecipeConfig的字段

    Returns:
        DeckRecipeConfig: 校验通过的配方

    Raises:
        DeckConfigError: 当字段值无效时
    """
    try:
        return DeckRecipeConfig(**values)
    except ValidationError as e:
        raise DeckConfigError(f"无效的牌组配方: {e}") from e


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    按日志配置初始化根日志器，程序启动时调用一次.

    环境变量CARDDECK_LOG_LEVEL优先于配置中的日志级别.
    """
    config = config or LoggingConfig()
    level_name = os.getenv(LOG_LEVEL_ENV, config.log_level).upper()
    # getLevelName对未知名称返回字符串
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format=config.log_format,
    )


class ConfigService:
    """配置管理服务"""

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._configs: Dict[ConfigType, Dict[str, Union[DeckRecipeConfig, LoggingConfig]]] = {}
        self._load_default_configs()

    def _load_default_configs(self):
        """加载默认配置"""
        low_ranks = [Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE,
                     Rank.SIX, Rank.SEVEN, Rank.EIGHT]

        self._configs[ConfigType.DECK_RECIPE] = {
            'default': DeckRecipeConfig(),
            'with_jokers': DeckRecipeConfig(jokers=2),
            'double_deck': DeckRecipeConfig(decks=2, order="shuffled"),
            'euchre': DeckRecipeConfig(excluded_ranks=low_ranks, order="sorted"),
            'pinochle': DeckRecipeConfig(decks=2, excluded_ranks=low_ranks, order="sorted"),
        }

        self._configs[ConfigType.LOGGING] = {
            'default': LoggingConfig(),
            'debug': LoggingConfig(log_level='DEBUG'),
            'quiet': LoggingConfig(log_level='WARNING'),
        }

        self.logger.debug("默认配置加载完成")

    def get_config(self, config_type: ConfigType, profile: str = "default"):
        """
        获取配置

        Args:
            config_type: 配置类型
            profile: 配置名，不存在时使用default

        Returns:
            对应类型的配置对象

        Raises:
            DeckConfigError: 当配置类型未知时
        """
        if config_type not in self._configs:
            raise DeckConfigError(f"未知的配置类型: {config_type}")

        config_profiles = self._configs[config_type]
        if profile not in config_profiles:
            self.logger.warning(f"未找到{config_type.value}配置 '{profile}'，使用默认配置")
            profile = "default"
        return config_profiles[profile]

    def list_profiles(self, config_type: ConfigType) -> List[str]:
        """
        列出某类配置的所有配置名

        Raises:
            DeckConfigError: 当配置类型未知时
        """
        if config_type not in self._configs:
            raise DeckConfigError(f"未知的配置类型: {config_type}")
        return sorted(self._configs[config_type])

    def register_profile(self, name: str, recipe: DeckRecipeConfig) -> None:
        """
        注册牌组配方

        Args:
            name: 配置名，已存在时覆盖
            recipe: 牌组配方

        Raises:
            DeckConfigError: 当配置名为空或配方类型错误时
        """
        if not name:
            raise DeckConfigError("配置名不能为空")
        if not isinstance(recipe, DeckRecipeConfig):
            raise DeckConfigError(f"配方必须是DeckRecipeConfig，实际: {type(recipe)}")

        profiles = self._configs[ConfigType.DECK_RECIPE]
        if name in profiles:
            self.logger.info(f"覆盖牌组配方 '{name}'")
        profiles[name] = recipe
        self.logger.debug(f"Registered deck recipe '{name}': {recipe}")

    def build_options(self, recipe: DeckRecipeConfig,
                      rng: Optional[random.Random] = None) -> List[DeckOption]:
        """
        将配方展开为变换列表

        Args:
            recipe: 牌组配方
            rng: 洗牌用的随机数生成器，为None时由配方中的seed创建

        Returns:
            List[DeckOption]: 按应用顺序排列的变换
        """
        options: List[DeckOption] = []

        if recipe.excluded_ranks or recipe.excluded_suits:
            ranks = frozenset(recipe.excluded_ranks)
            suits = frozenset(recipe.excluded_suits)
            options.append(filter_cards(lambda card: card.rank in ranks or card.suit in suits))

        if recipe.decks != 1:
            options.append(repeat(recipe.decks))

        if recipe.jokers:
            options.append(jokers(recipe.jokers))

        if recipe.order == "sorted":
            options.append(default_sort)
        elif recipe.order == "shuffled":
            options.append(shuffle(rng if rng is not None else random.Random(recipe.seed)))

        return options

    def build_deck(self, profile: str = "default",
                   rng: Optional[random.Random] = None) -> List[Card]:
        """
        按配方构建牌组

        Args:
            profile: 牌组配方名
            rng: 洗牌用的随机数生成器

        Returns:
            List[Card]: 构建好的牌组
        """
        recipe = self.get_config(ConfigType.DECK_RECIPE, profile)
        cards = new(*self.build_options(recipe, rng))
        self.logger.info(f"按配方 '{profile}' 构建牌组，共{len(cards)}张")
        return cards
