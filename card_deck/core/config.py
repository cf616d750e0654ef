"""
牌组配置相关类的实现
包含卡牌尺寸、资源目录和日志设置
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Tuple

from .exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from ..assets.base import AssetStore


@dataclass
class DeckConfig:
    """
    牌组配置类
    卡牌标准尺寸用于判断自定义牌背是否需要缩放
    """
    card_width: int = 75               # 标准卡牌宽度
    card_height: int = 107             # 标准卡牌高度
    size_tolerance: int = 1            # 尺寸允许误差，超出则缩放
    asset_dir: Optional[Path] = None   # 图片资源目录，为空时使用绘制的图像

    def __post_init__(self):
        """验证配置的有效性"""
        if self.card_width <= 0 or self.card_height <= 0:
            raise InvalidArgumentError(
                f"卡牌尺寸必须大于0: {self.card_width}x{self.card_height}")

        if self.size_tolerance < 0:
            raise InvalidArgumentError(f"尺寸误差不能为负数: {self.size_tolerance}")

        if self.asset_dir is not None:
            self.asset_dir = Path(self.asset_dir)

    @property
    def card_size(self) -> Tuple[int, int]:
        """返回(宽, 高)"""
        return (self.card_width, self.card_height)

    def create_asset_store(self) -> "AssetStore":
        """
        根据配置创建资源仓库
        设置了资源目录时从目录读取PNG文件，否则使用Pillow绘制

        共享牌面缓存不区分仓库，目录牌面需要配合独立的FaceCache使用
        """
        from ..assets import DirectoryAssetStore, RenderedAssetStore

        if self.asset_dir is not None:
            return DirectoryAssetStore(self.asset_dir)
        return RenderedAssetStore(card_size=self.card_size)

    @classmethod
    def from_env(cls) -> 'DeckConfig':
        """
        从环境变量创建配置
        CARD_DECK_ASSET_DIR / CARD_DECK_WIDTH / CARD_DECK_HEIGHT
        """
        asset_dir = os.getenv("CARD_DECK_ASSET_DIR") or None
        try:
            width = int(os.getenv("CARD_DECK_WIDTH", cls.card_width))
            height = int(os.getenv("CARD_DECK_HEIGHT", cls.card_height))
        except ValueError as e:
            raise InvalidArgumentError(f"卡牌尺寸环境变量无效: {e}") from e

        return cls(
            card_width=width,
            card_height=height,
            asset_dir=Path(asset_dir) if asset_dir else None,
        )


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'INFO'
    enable_console_logging: bool = True
    enable_file_logging: bool = False
    log_file_path: str = "logs/card_deck.log"
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def __post_init__(self):
        """验证日志级别"""
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise InvalidArgumentError(f"无效的日志级别: {self.log_level}")


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    配置日志，应用程序启动时调用一次
    库代码本身不会调用此函数
    """
    config = config or LoggingConfig()

    handlers = []
    if config.enable_console_logging:
        handlers.append(logging.StreamHandler())
    if config.enable_file_logging:
        log_path = Path(config.log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding='utf-8'))
    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format=config.log_format,
        handlers=handlers,
        force=True,
    )
