"""
牌组类的实现
包含52张牌的构建、洗牌、发牌和按身份查找
"""

import logging
import random
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Tuple, Union

from PIL import Image

from ..assets.base import AssetStore, ImageSource
from ..assets.face_cache import FaceCache
from .card import _CREATION_KEY, Card
from .config import DeckConfig
from .enums import BackColor, Rank, Suit
from .exceptions import AssetDegradedError, InvalidArgumentError

if TYPE_CHECKING:
    from ..dto import DeckSnapshot

logger = logging.getLogger(__name__)

DECK_SIZE = 52


class Deck:
    """
    一副52张的扑克牌
    每种(花色, 点数)恰好一张Card实例，所有卡牌共享同一牌背图像

    牌组以两种方式索引卡牌：按(花色, 点数)的身份表，和可变的发牌顺序。
    游标之前的牌已发出，之后的牌待发。洗牌只重排发牌顺序，从不替换Card实例。

    Deck不是线程安全的。多线程共享同一牌组时，调用方需要用锁保护整个牌组，
    或保证只有一个线程持有它。

    Examples:
        >>> deck = Deck(BackColor.RED, rng=random.Random(7))
        >>> card = deck.deal()
        >>> deck.remaining
        51
        >>> deck.shuffle()
        >>> len(deck)
        52
    """

    def __init__(self, back: Union[BackColor, str] = BackColor.RED, *,
                 rng: Optional[random.Random] = None,
                 asset_store: Optional[AssetStore] = None,
                 face_cache: Optional[FaceCache] = None,
                 config: Optional[DeckConfig] = None):
        """
        使用内置牌背颜色创建牌组

        Args:
            back: 牌背颜色，BackColor或其名称（不区分大小写）
            rng: 随机数生成器，用于可重现的洗牌结果
            asset_store: 资源仓库，默认由config创建
            face_cache: 牌面缓存，默认使用进程级共享缓存
            config: 牌组配置

        Raises:
            InvalidArgumentError: 牌背颜色为空或不是RED/BLUE时
            AssetResolutionError: 牌面或牌背图像无法加载时
        """
        color = BackColor.coerce(back)
        self._setup(rng, asset_store, face_cache, config)
        self._back_source = f"color:{color.value}"
        back_image = self._asset_store.load_back(color)
        self._initialize(self._asset_store.fit_to_card(
            back_image, self._config.card_size, self._config.size_tolerance))

    @classmethod
    def with_custom_back(cls, source: ImageSource, *,
                         rng: Optional[random.Random] = None,
                         asset_store: Optional[AssetStore] = None,
                         face_cache: Optional[FaceCache] = None,
                         config: Optional[DeckConfig] = None) -> 'Deck':
        """
        使用自定义牌背图像创建牌组

        尺寸与标准尺寸不符的图像会被缩放；来源为空或无法读取时，
        牌背降级为标准尺寸的空白图像，不会构造失败。

        Args:
            source: PIL图像、文件路径、file:// URL或None

        Raises:
            AssetResolutionError: 牌面图像无法加载时
        """
        deck = cls.__new__(cls)
        deck._setup(rng, asset_store, face_cache, config)
        deck._back_source = "custom"

        size = deck._config.card_size
        try:
            back = deck._asset_store.load_image(source)
            back = deck._asset_store.fit_to_card(back, size, deck._config.size_tolerance)
        except AssetDegradedError as e:
            logger.warning(f"牌背图像不可用，使用空白牌背: {e}")
            back = deck._asset_store.blank_back(size)
            deck._back_source = "blank"

        deck._initialize(back)
        return deck

    def _setup(self, rng, asset_store, face_cache, config) -> None:
        """设置协作对象"""
        self._config = config if config is not None else DeckConfig()
        self._random = rng if rng is not None else random.Random()
        self._asset_store = (asset_store if asset_store is not None
                             else self._config.create_asset_store())
        self._face_cache = face_cache if face_cache is not None else FaceCache.shared()
        self._grid: Dict[Tuple[Suit, Rank], Card] = {}
        self._order: List[Card] = []
        self._next_index = 0

    def _make_card(self, suit: Suit, rank: Rank, back: Image.Image) -> Card:
        """创建卡牌，Card的唯一创建入口"""
        face = self._face_cache.get_or_resolve(suit, rank, self._asset_store.load_face)
        return Card(suit, rank, face, back, _CREATION_KEY)

    def _initialize(self, back: Image.Image) -> None:
        """
        创建全部52张牌，放入身份表，并用inside-out Fisher-Yates算法
        在插入的同时生成随机发牌顺序
        """
        self._back = back
        order: List[Optional[Card]] = [None] * DECK_SIZE
        k = 0
        for suit in Suit:
            for rank in Rank:
                card = self._make_card(suit, rank, back)
                self._grid[(suit, rank)] = card
                r = self._random.randint(0, k)
                order[k] = order[r]
                order[r] = card
                k += 1

        assert k == DECK_SIZE
        self._order = order
        self._next_index = 0
        logger.debug(f"牌组初始化完成，牌背: {self._back_source}")

    def deal(self) -> Optional[Card]:
        """
        发一张牌

        Returns:
            下一张牌；牌已发完时返回None，直到重新洗牌
        """
        if self._next_index >= DECK_SIZE:
            return None
        card = self._order[self._next_index]
        self._next_index += 1
        return card

    def deal_cards(self, count: int) -> List[Card]:
        """
        按顺序发多张牌

        Raises:
            InvalidArgumentError: 数量为负或超过剩余牌数时
        """
        if count < 0:
            raise InvalidArgumentError(f"发牌数量不能为负数: {count}")
        if count > self.remaining:
            raise InvalidArgumentError(f"牌组中只有{self.remaining}张牌，无法发{count}张")

        return [self.deal() for _ in range(count)]

    def peek(self) -> Optional[Card]:
        """查看下一张将发出的牌但不发出"""
        if self._next_index >= DECK_SIZE:
            return None
        return self._order[self._next_index]

    def lookup(self, suit: Suit, rank: Union[int, Rank]) -> Card:
        """
        按花色和点数获取本牌组中的卡牌实例，与发牌顺序无关

        Raises:
            InvalidArgumentError: 花色无效或点数不在1到13之间时
        """
        if not isinstance(suit, Suit):
            raise InvalidArgumentError(f"无效的花色: {suit!r}")
        return self._grid[(suit, Rank.coerce(rank))]

    get_card = lookup

    def shuffle(self) -> None:
        """
        洗牌：对全部52张牌执行Fisher-Yates洗牌，并重置游标
        已发出的牌也会重新可用
        """
        order = self._order
        for i in range(DECK_SIZE - 1, 0, -1):
            j = self._random.randint(0, i)
            order[i], order[j] = order[j], order[i]
        self._next_index = 0
        logger.debug("牌组已洗牌")

    @property
    def remaining(self) -> int:
        """返回未发出的牌数"""
        return DECK_SIZE - self._next_index

    @property
    def is_empty(self) -> bool:
        """检查牌是否已全部发出"""
        return self._next_index >= DECK_SIZE

    @property
    def back_image(self) -> Image.Image:
        """返回牌背图像的拷贝"""
        return self._back.copy()

    @property
    def back_source(self) -> str:
        """牌背来源描述：color:red、color:blue、custom或blank"""
        return self._back_source

    def dealt_cards(self) -> List[Card]:
        """按发出顺序返回已发出的牌"""
        return self._order[:self._next_index]

    def iter_cards(self) -> Iterator[Card]:
        """按花色、点数顺序遍历全部52张牌"""
        for suit in Suit:
            for rank in Rank:
                yield self._grid[(suit, rank)]

    def snapshot(self) -> "DeckSnapshot":
        """返回牌组状态快照，用于展示层"""
        from ..dto import DeckSnapshot
        return DeckSnapshot.from_deck(self)

    def __len__(self) -> int:
        """返回未发出的牌数"""
        return self.remaining

    def __repr__(self) -> str:
        """返回牌组的调试表示"""
        return f"Deck(remaining={self.remaining}, back={self._back_source!r})"

    def __str__(self) -> str:
        """返回牌组的可读表示"""
        return f"牌组剩余: {self.remaining} 张"
