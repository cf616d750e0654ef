"""
从目录读取PNG图片的资源仓库

文件命名沿用经典扑克牌图片集:
    牌面  {花色}-{点数}-150.png，例如 clubs-a-150.png、hearts-10-150.png
    牌背  back-{颜色}-75-1.png，例如 back-red-75-1.png
"""

import logging
from pathlib import Path
from typing import Union

from PIL import Image

from ..core.enums import BackColor, Rank, Suit
from ..core.exceptions import AssetResolutionError
from .base import AssetStore

logger = logging.getLogger(__name__)


class DirectoryAssetStore(AssetStore):
    """
    目录资源仓库

    牌面缓存只按(花色, 点数)索引，不区分由哪个仓库加载。与其他仓库的牌组
    共用进程级共享缓存时，先填充缓存的仓库决定牌面图像；需要目录中的牌面时
    请为牌组传入独立的FaceCache。
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    @staticmethod
    def face_file_name(suit: Suit, rank: Rank) -> str:
        """返回牌面文件名"""
        return f"{suit.value}-{rank.short_name}-150.png"

    @staticmethod
    def back_file_name(color: BackColor) -> str:
        """返回牌背文件名"""
        return f"back-{color.value}-75-1.png"

    def load_face(self, suit: Suit, rank: Rank) -> Image.Image:
        return self._read(self.root / self.face_file_name(suit, rank))

    def load_back(self, color: BackColor) -> Image.Image:
        return self._read(self.root / self.back_file_name(color))

    def _read(self, path: Path) -> Image.Image:
        """读取图片，失败时抛出AssetResolutionError"""
        try:
            with Image.open(path) as image:
                loaded = image.convert("RGBA")
        except OSError as e:
            raise AssetResolutionError(f"无法加载图片资源 '{path}': {e}") from e

        logger.debug(f"已加载图片资源: {path}")
        return loaded

    def __repr__(self) -> str:
        return f"DirectoryAssetStore(root={str(self.root)!r})"
