"""
使用Pillow绘制的牌面与牌背

不依赖任何图片文件，牌面为白底圆角卡片加点数和花色图形，
牌背为红色或蓝色底加白色边框和格纹。
"""

from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

from ..core.enums import BackColor, Rank, Suit
from .base import AssetStore

# --- 颜色常量 ---
CARD_BACKGROUND = (255, 255, 255, 255)
CARD_OUTLINE = (60, 60, 60, 255)
RED_INK = (200, 30, 45, 255)
BLACK_INK = (20, 20, 20, 255)
BACK_COLORS = {
    BackColor.RED: (170, 25, 35, 255),
    BackColor.BLUE: (25, 60, 160, 255),
}
BACK_PATTERN = (255, 255, 255, 90)


def _draw_suit(draw: ImageDraw.ImageDraw, suit: Suit, cx: float, cy: float,
               size: float, fill) -> None:
    """以(cx, cy)为中心绘制花色图形"""
    r = size / 4
    if suit is Suit.DIAMONDS:
        draw.polygon([(cx, cy - 2 * r), (cx + 1.5 * r, cy),
                      (cx, cy + 2 * r), (cx - 1.5 * r, cy)], fill=fill)
    elif suit is Suit.HEARTS:
        draw.ellipse([cx - 2 * r, cy - 1.5 * r, cx, cy + 0.5 * r], fill=fill)
        draw.ellipse([cx, cy - 1.5 * r, cx + 2 * r, cy + 0.5 * r], fill=fill)
        draw.polygon([(cx - 1.9 * r, cy), (cx + 1.9 * r, cy), (cx, cy + 2 * r)], fill=fill)
    elif suit is Suit.SPADES:
        draw.ellipse([cx - 2 * r, cy - 0.5 * r, cx, cy + 1.5 * r], fill=fill)
        draw.ellipse([cx, cy - 0.5 * r, cx + 2 * r, cy + 1.5 * r], fill=fill)
        draw.polygon([(cx - 1.9 * r, cy), (cx + 1.9 * r, cy), (cx, cy - 2 * r)], fill=fill)
        draw.polygon([(cx, cy + r), (cx + 0.7 * r, cy + 2 * r), (cx - 0.7 * r, cy + 2 * r)], fill=fill)
    else:
        draw.ellipse([cx - 0.9 * r, cy - 2 * r, cx + 0.9 * r, cy - 0.2 * r], fill=fill)
        draw.ellipse([cx - 2 * r, cy - 0.6 * r, cx - 0.2 * r, cy + 1.2 * r], fill=fill)
        draw.ellipse([cx + 0.2 * r, cy - 0.6 * r, cx + 2 * r, cy + 1.2 * r], fill=fill)
        draw.polygon([(cx, cy), (cx + 0.7 * r, cy + 2 * r), (cx - 0.7 * r, cy + 2 * r)], fill=fill)


class RenderedAssetStore(AssetStore):
    """
    绘制图像的资源仓库，默认使用

    Args:
        face_size: 牌面图像尺寸
        card_size: 牌背图像尺寸，即标准卡牌尺寸
    """

    def __init__(self, face_size: Tuple[int, int] = (150, 214),
                 card_size: Tuple[int, int] = (75, 107)):
        self.face_size = face_size
        self.card_size = card_size
        self._font = ImageFont.load_default()

    def load_face(self, suit: Suit, rank: Rank) -> Image.Image:
        width, height = self.face_size
        image = Image.new("RGBA", self.face_size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(image)
        draw.rounded_rectangle([0, 0, width - 1, height - 1], radius=width // 12,
                               fill=CARD_BACKGROUND, outline=CARD_OUTLINE, width=2)

        ink = RED_INK if suit.is_red else BLACK_INK
        label = rank.short_name.upper()
        margin = width // 15
        draw.text((margin, margin), label, font=self._font, fill=ink)
        bbox = draw.textbbox((0, 0), label, font=self._font)
        draw.text((width - margin - (bbox[2] - bbox[0]),
                   height - margin - (bbox[3] - bbox[1])),
                  label, font=self._font, fill=ink)

        _draw_suit(draw, suit, width / 2, height / 2, width / 2.5, ink)
        return image

    def load_back(self, color: BackColor) -> Image.Image:
        width, height = self.card_size
        image = Image.new("RGBA", self.card_size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(image, "RGBA")
        draw.rounded_rectangle([0, 0, width - 1, height - 1], radius=max(2, width // 12),
                               fill=BACK_COLORS[color], outline=CARD_BACKGROUND, width=3)

        step = max(4, width // 8)
        for offset in range(-height, width, step):
            draw.line([(offset, 0), (offset + height, height)], fill=BACK_PATTERN, width=1)
            draw.line([(offset + height, 0), (offset, height)], fill=BACK_PATTERN, width=1)
        draw.rectangle([2, 2, width - 3, height - 3], outline=CARD_BACKGROUND, width=2)
        return image
