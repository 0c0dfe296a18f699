"""
Core Module - 纯领域逻辑层

Modules:
    deck: 扑克牌、花色、点数以及牌组变换
    exceptions: 异常定义

核心模块不依赖应用层.
"""

from .exceptions import DeckError, InvalidCardError, InvalidOptionError, DeckConfigError

__all__ = ['DeckError', 'InvalidCardError', 'InvalidOptionError', 'DeckConfigError']
