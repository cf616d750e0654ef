"""
扑克牌类的实现
Card只能由Deck创建，牌面与牌背图像通过防御性拷贝对外提供
"""

from dataclasses import InitVar, dataclass, field

from PIL import Image

from .enums import Rank, Suit
from .exceptions import InvalidArgumentError

# 模块私有的创建凭证，只有Deck._make_card会传入
_CREATION_KEY = object()


@dataclass(frozen=True)
class Card:
    """
    不可变的扑克牌类
    使用frozen dataclass确保不可变性，相等性和哈希只取决于花色和点数，
    与牌背图像、所属牌组无关

    该类没有公开的构造方式，请通过Deck.deal()或Deck.lookup()获取实例
    """
    suit: Suit
    rank: Rank
    _face: Image.Image = field(compare=False, repr=False)
    _back: Image.Image = field(compare=False, repr=False)
    _key: InitVar[object] = None

    def __post_init__(self, _key: object):
        """验证创建凭证和卡牌的有效性"""
        if _key is not _CREATION_KEY:
            raise TypeError("Card不能直接创建，请通过Deck获取")
        if not isinstance(self.suit, Suit):
            raise InvalidArgumentError(f"无效的花色: {self.suit!r}")
        object.__setattr__(self, "rank", Rank.coerce(self.rank))

    @property
    def face_image(self) -> Image.Image:
        """返回牌面图像的拷贝"""
        return self._face.copy()

    @property
    def back_image(self) -> Image.Image:
        """返回牌背图像的拷贝"""
        return self._back.copy()

    def __str__(self) -> str:
        """返回可读表示，例如 "ace of spades"、"10 of hearts" """
        return f"{self.rank.display_name} of {self.suit.name.lower()}"

    def __repr__(self) -> str:
        """返回卡牌的调试表示"""
        return f"Card({self.rank.name}, {self.suit.name})"
