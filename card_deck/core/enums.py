"""
扑克牌的基础枚举定义
包含花色、点数和牌背颜色
"""

from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Union

from .exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from .card import Card


class Suit(Enum):
    """扑克牌花色枚举，声明顺序即牌组初始化顺序"""
    CLUBS = "clubs"        # 梅花
    DIAMONDS = "diamonds"  # 方块
    HEARTS = "hearts"      # 红桃
    SPADES = "spades"      # 黑桃

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """返回花色符号"""
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]

    @property
    def is_red(self) -> bool:
        """红色花色（方块、红桃）"""
        return self in (Suit.DIAMONDS, Suit.HEARTS)

    def contains(self, card: "Card") -> bool:
        """检查卡牌是否属于该花色"""
        return card is not None and card.suit is self


class Rank(IntEnum):
    """
    扑克牌点数枚举
    1为A，11为J，12为Q，13为K，其余为字面数值
    """
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return self.display_name

    @property
    def display_name(self) -> str:
        """返回点数的名称，如 "ace"、"7"、"king" """
        names = {1: "ace", 11: "jack", 12: "queen", 13: "king"}
        return names.get(self.value, str(self.value))

    @property
    def short_name(self) -> str:
        """返回点数的简短名称，用于资源文件命名，如 "a"、"7"、"k" """
        names = {1: "a", 11: "j", 12: "q", 13: "k"}
        return names.get(self.value, str(self.value))

    @classmethod
    def coerce(cls, value: Union[int, "Rank"]) -> "Rank":
        """
        将整数或Rank转换为Rank

        Raises:
            InvalidArgumentError: 当点数不在1到13之间时
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"点数必须是整数，实际: {type(value).__name__}")
        if value < 1 or value > 13:
            raise InvalidArgumentError(f"点数必须在1到13之间: {value}")
        return cls(value)


class BackColor(Enum):
    """两种内置牌背颜色"""
    RED = "red"
    BLUE = "blue"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, token: Union[str, "BackColor", None]) -> "BackColor":
        """
        将颜色标记转换为BackColor，字符串不区分大小写

        Raises:
            InvalidArgumentError: 当标记为空或不是RED/BLUE时
        """
        if token is None:
            raise InvalidArgumentError("牌背颜色不能为空")
        if isinstance(token, cls):
            return token
        if isinstance(token, str):
            try:
                return cls(token.strip().lower())
            except ValueError:
                pass
        raise InvalidArgumentError(f"牌背颜色必须是RED或BLUE，实际: {token!r}")
