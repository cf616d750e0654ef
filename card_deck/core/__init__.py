#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
核心基础组件模块
包含枚举、异常、配置、卡牌和牌组
"""

from .exceptions import CardDeckError, InvalidArgumentError, AssetResolutionError, AssetDegradedError
from .enums import Suit, Rank, BackColor
from .config import DeckConfig, LoggingConfig, setup_logging
from .card import Card
from .deck import Deck, DECK_SIZE

__all__ = [
    # 枚举类型
    'Suit', 'Rank', 'BackColor',

    # 卡牌相关
    'Card', 'Deck', 'DECK_SIZE',

    # 配置相关
    'DeckConfig', 'LoggingConfig', 'setup_logging',

    # 异常类型
    'CardDeckError', 'InvalidArgumentError', 'AssetResolutionError', 'AssetDegradedError',
]
