"""
牌面与牌背资源模块
包含资源仓库和进程级牌面缓存
"""

from .base import AssetStore
from .directory import DirectoryAssetStore
from .face_cache import FaceCache
from .rendered import RenderedAssetStore

__all__ = [
    'AssetStore', 'DirectoryAssetStore', 'RenderedAssetStore', 'FaceCache',
]
