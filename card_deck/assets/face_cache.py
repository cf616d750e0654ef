"""
牌面图像缓存

牌面图像只取决于花色和点数，与牌组无关，因此在进程内按(花色, 点数)缓存。
缓存按需填充、从不失效；写入由锁串行化，命中读取不加锁。
"""

import logging
import threading
from typing import Callable, Dict, Optional, Tuple

from PIL import Image

from ..core.enums import Rank, Suit
from ..core.exceptions import AssetResolutionError

logger = logging.getLogger(__name__)

FaceResolver = Callable[[Suit, Rank], Image.Image]


class FaceCache:
    """
    线程安全的牌面图像缓存
    同一身份在并发首次访问时也只会解析一次
    """
    _shared: Optional['FaceCache'] = None
    _shared_lock = threading.Lock()

    def __init__(self):
        self._faces: Dict[Tuple[Suit, Rank], Image.Image] = {}
        self._lock = threading.Lock()

    @classmethod
    def shared(cls) -> 'FaceCache':
        """返回进程级共享缓存，首次调用时创建"""
        if cls._shared is None:
            with cls._shared_lock:
                if cls._shared is None:
                    cls._shared = cls()
        return cls._shared

    def get_or_resolve(self, suit: Suit, rank: Rank,
                       resolver: FaceResolver) -> Image.Image:
        """
        获取牌面图像，未缓存时调用resolver解析并缓存

        Raises:
            AssetResolutionError: 解析失败或返回空值时，不会写入缓存
        """
        key = (suit, Rank(rank))
        face = self._faces.get(key)
        if face is not None:
            return face

        with self._lock:
            face = self._faces.get(key)
            if face is None:
                face = resolver(suit, key[1])
                if face is None:
                    raise AssetResolutionError(f"无法解析牌面图像: {key[1].display_name} of {suit}")
                self._faces[key] = face
                logger.debug(f"已缓存牌面图像: {key[1].display_name} of {suit}")
        return face

    def clear(self) -> None:
        """清空缓存（主要用于测试）"""
        with self._lock:
            self._faces.clear()

    def __contains__(self, key: Tuple[Suit, Rank]) -> bool:
        return key in self._faces

    def __len__(self) -> int:
        return len(self._faces)
