"""
牌组库异常定义
所有异常继承DeckError，参数类错误同时继承ValueError
"""


class DeckError(Exception):
    """牌组库基础异常类"""
    pass


class InvalidCardError(DeckError, ValueError):
    """无效扑克牌异常"""
    pass


class InvalidOptionError(DeckError, ValueError):
    """无效牌组变换异常"""
    pass


class DeckConfigError(DeckError, ValueError):
    """牌组配置错误异常"""
    pass
