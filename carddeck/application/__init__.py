"""
Application Module - 应用服务层

提供配置管理服务，将牌组配方展开为核心层的变换函数.
"""

from .config_service import (
    ConfigService,
    ConfigType,
    DeckRecipeConfig,
    LoggingConfig,
    create_recipe,
    setup_logging,
)

__all__ = [
    'ConfigService', 'ConfigType', 'DeckRecipeConfig', 'LoggingConfig',
    'create_recipe', 'setup_logging',
]
