"""
牌组业务异常定义
区分调用方错误(向上抛)、致命资源错误和可降级的资源错误
"""


class CardDeckError(Exception):
    """牌组库基础异常类"""
    pass


class InvalidArgumentError(CardDeckError, ValueError):
    """无效参数异常：点数越界、花色无效、牌背颜色无效或必需参数为空"""
    pass


class AssetResolutionError(CardDeckError):
    """牌面资源无法加载，牌组构造中止"""
    pass


class AssetDegradedError(CardDeckError):
    """自定义牌背资源不可用，调用方应降级为空白牌背"""
    pass
