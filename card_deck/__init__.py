#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
标准52张扑克牌组
提供卡牌身份、牌组构成、无偏洗牌和顺序发牌

模块结构：
- core: 核心组件（枚举、异常、配置、卡牌、牌组）
- assets: 牌面与牌背资源（资源仓库、牌面缓存）
- dto: 展示层使用的快照数据
"""

from .core import (
    Suit, Rank, BackColor,
    Card, Deck, DECK_SIZE,
    DeckConfig, LoggingConfig, setup_logging,
    CardDeckError, InvalidArgumentError, AssetResolutionError, AssetDegradedError
)

from .assets import (
    AssetStore, DirectoryAssetStore, RenderedAssetStore, FaceCache
)

from .dto import CardView, DeckSnapshot

__version__ = "1.0.0"

__all__ = [
    # 核心组件
    'Suit', 'Rank', 'BackColor',
    'Card', 'Deck', 'DECK_SIZE',
    'DeckConfig', 'LoggingConfig', 'setup_logging',
    'CardDeckError', 'InvalidArgumentError', 'AssetResolutionError', 'AssetDegradedError',

    # 资源
    'AssetStore', 'DirectoryAssetStore', 'RenderedAssetStore', 'FaceCache',

    # 快照
    'CardView', 'DeckSnapshot',
]
