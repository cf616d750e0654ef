"""数据传输对象定义.

这个模块定义了牌组与展示层之间传输数据的标准格式。
使用Pydantic dataclass确保数据验证和序列化的一致性，快照不包含图像数据。
"""

from datetime import datetime
from typing import TYPE_CHECKING, List

from pydantic import Field, model_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

from .core.card import Card
from .core.enums import Suit

if TYPE_CHECKING:
    from .core.deck import Deck


@pydantic_dataclass
class CardView:
    """卡牌视图.

    只包含卡牌身份和可读名称。
    """
    suit: Suit = Field(..., description="花色")
    rank: int = Field(..., ge=1, le=13, description="点数，1为A，13为K")
    name: str = Field(..., min_length=1, description="可读名称，如 ace of spades")

    @classmethod
    def from_card(cls, card: Card) -> "CardView":
        """从Card创建视图."""
        return cls(suit=card.suit, rank=int(card.rank), name=str(card))


@pydantic_dataclass
class DeckSnapshot:
    """牌组状态快照.

    包含牌组在某个时刻的剩余牌数和已发出的牌，用于UI显示。
    """
    remaining: int = Field(..., ge=0, le=52, description="剩余牌数")
    back: str = Field(..., min_length=1, description="牌背来源")
    dealt: List[CardView] = Field(default_factory=list, description="已发出的牌，按发出顺序")
    timestamp: datetime = Field(default_factory=datetime.now, description="快照时间戳")

    @model_validator(mode="after")
    def validate_card_count(self):
        """验证剩余牌数与已发牌数之和为52."""
        if self.remaining + len(self.dealt) != 52:
            raise ValueError(
                f"剩余牌数({self.remaining})与已发牌数({len(self.dealt)})之和必须为52")
        return self

    @classmethod
    def from_deck(cls, deck: "Deck") -> "DeckSnapshot":
        """从Deck创建快照."""
        return cls(
            remaining=deck.remaining,
            dealt=[CardView.from_card(card) for card in deck.dealt_cards()],
            back=deck.back_source,
        )
