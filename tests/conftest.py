"""
Test Configuration - pytest配置文件

该文件提供牌组测试的基础设施，包括：
- 固定种子的随机数生成器
- 独立的牌面缓存和资源仓库
- 测试标记定义

所有测试都会自动加载这些配置。
"""

import random
import threading

import pytest
from PIL import Image

from card_deck import BackColor, Deck, FaceCache, RenderedAssetStore


class CountingAssetStore(RenderedAssetStore):
    """记录牌面加载次数的资源仓库（仅用于测试）"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.face_loads = 0
        self._count_lock = threading.Lock()

    def load_face(self, suit, rank) -> Image.Image:
        with self._count_lock:
            self.face_loads += 1
        return super().load_face(suit, rank)


@pytest.fixture
def rng():
    """固定种子的随机数生成器"""
    return random.Random(20240601)


@pytest.fixture
def face_cache():
    """独立的牌面缓存，避免测试间共享状态"""
    return FaceCache()


@pytest.fixture
def asset_store():
    """计数资源仓库"""
    return CountingAssetStore()


@pytest.fixture
def deck(rng, face_cache, asset_store):
    """红色牌背的确定性牌组"""
    return Deck(BackColor.RED, rng=rng, face_cache=face_cache, asset_store=asset_store)


@pytest.fixture
def deck_factory(face_cache, asset_store):
    """按种子创建牌组"""
    def _make(back=BackColor.RED, seed=None):
        return Deck(back, rng=random.Random(seed), face_cache=face_cache,
                    asset_store=asset_store)
    return _make


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "unit: 标记单元测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
