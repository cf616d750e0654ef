"""
资源仓库抽象基类

资源仓库负责根据卡牌身份生成牌面图像、根据颜色生成牌背图像，
以及读取调用方提供的任意牌背图像。核心模块只对图像做拷贝、取尺寸和缩放。
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Tuple, Union
from urllib.parse import urlparse
from urllib.request import url2pathname

from PIL import Image

from ..core.enums import BackColor, Rank, Suit
from ..core.exceptions import AssetDegradedError, InvalidArgumentError

logger = logging.getLogger(__name__)

ImageSource = Union[Image.Image, str, "os.PathLike[str]", None]


class AssetStore(ABC):
    """牌面与牌背图像的提供者"""

    @abstractmethod
    def load_face(self, suit: Suit, rank: Rank) -> Image.Image:
        """
        生成指定卡牌的牌面图像

        Raises:
            AssetResolutionError: 图像无法获得时
        """

    @abstractmethod
    def load_back(self, color: BackColor) -> Image.Image:
        """
        生成内置颜色的牌背图像

        Raises:
            AssetResolutionError: 图像无法获得时
        """

    def load_image(self, source: ImageSource) -> Image.Image:
        """
        读取调用方提供的牌背图像
        支持PIL图像、文件路径和file:// URL

        Raises:
            AssetDegradedError: 来源为空、不存在或无法解析时
            InvalidArgumentError: 来源类型无效时
        """
        if source is None:
            raise AssetDegradedError("未提供牌背图像")

        if isinstance(source, Image.Image):
            return source.copy()

        try:
            path = os.fspath(source)
        except TypeError as e:
            raise InvalidArgumentError(f"无效的牌背图像来源: {source!r}") from e
        if "://" in path:
            parsed = urlparse(path)
            if parsed.scheme != "file":
                raise AssetDegradedError(f"不支持的URL协议: {parsed.scheme}")
            path = url2pathname(parsed.path)

        try:
            with Image.open(path) as image:
                return image.convert("RGBA")
        except (OSError, Image.DecompressionBombError, ValueError) as e:
            raise AssetDegradedError(f"无法读取牌背图像 '{path}': {e}") from e

    @staticmethod
    def blank_back(size: Tuple[int, int]) -> Image.Image:
        """返回标准尺寸的透明空白牌背"""
        return Image.new("RGBA", size, (0, 0, 0, 0))

    @staticmethod
    def fit_to_card(image: Image.Image, size: Tuple[int, int],
                    tolerance: int = 1) -> Image.Image:
        """尺寸与标准尺寸相差超过误差时缩放到标准尺寸"""
        width, height = image.size
        if abs(width - size[0]) <= tolerance and abs(height - size[1]) <= tolerance:
            return image

        logger.info(f"牌背图像尺寸 {width}x{height} 缩放到 {size[0]}x{size[1]}")
        return image.resize(size, Image.Resampling.LANCZOS)
