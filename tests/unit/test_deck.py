"""
牌组(Deck)类单元测试
测试构造、初始化算法、发牌、查找、洗牌和异常处理
"""

import random

import pytest

from card_deck import (
    DECK_SIZE, BackColor, Card, Deck, InvalidArgumentError, Rank, Suit,
)


class RecordingRandom(random.Random):
    """记录randint调用的随机数生成器"""

    def __init__(self, seed=None):
        super().__init__(seed)
        self.calls = []

    def randint(self, a, b):
        value = super().randint(a, b)
        self.calls.append((a, b, value))
        return value


def expected_initial_order(seed):
    """按inside-out Fisher-Yates算法计算初始发牌顺序"""
    rng = random.Random(seed)
    order = [None] * DECK_SIZE
    k = 0
    for suit in Suit:
        for rank in Rank:
            r = rng.randint(0, k)
            order[k] = order[r]
            order[r] = (suit, rank)
            k += 1
    return order, rng


def identities(cards):
    return [(card.suit, card.rank) for card in cards]


@pytest.mark.unit
class TestDeckConstruction:
    """牌组构造测试"""

    def test_deck_initialization(self, deck):
        """测试新牌组有52张牌"""
        assert deck.remaining == 52
        assert len(deck) == 52
        assert not deck.is_empty
        assert deck.back_source == "color:red"

    @pytest.mark.parametrize("token,source", [
        (BackColor.RED, "color:red"), (BackColor.BLUE, "color:blue"),
        ("red", "color:red"), ("Blue", "color:blue"),
    ])
    def test_color_tokens(self, deck_factory, token, source):
        """测试内置牌背颜色"""
        assert deck_factory(token, seed=0).back_source == source

    @pytest.mark.parametrize("token", ["green", "", None, 7])
    def test_invalid_color_token(self, token, face_cache, asset_store):
        """测试无效牌背颜色"""
        with pytest.raises(InvalidArgumentError):
            Deck(token, face_cache=face_cache, asset_store=asset_store)

    def test_invalid_token_fails_before_loading(self, face_cache, asset_store):
        """无效颜色不会触发资源加载"""
        with pytest.raises(InvalidArgumentError):
            Deck("purple", face_cache=face_cache, asset_store=asset_store)
        assert asset_store.face_loads == 0
        assert len(face_cache) == 0

    def test_red_and_blue_backs_differ(self, deck_factory):
        """红色和蓝色牌背图像不同"""
        red = deck_factory(BackColor.RED, seed=0)
        blue = deck_factory(BackColor.BLUE, seed=0)
        assert red.back_image.size == blue.back_image.size == (75, 107)
        assert red.back_image.tobytes() != blue.back_image.tobytes()

    def test_default_collaborators(self):
        """不传协作对象时使用默认资源仓库和共享缓存"""
        deck = Deck()
        assert deck.remaining == 52
        assert deck.back_source == "color:red"


@pytest.mark.unit
class TestDeckInitializationAlgorithm:
    """初始化洗牌算法测试"""

    def test_uses_exactly_52_draws(self, face_cache, asset_store):
        """初始化恰好使用52次随机抽取，第k次范围为[0, k]"""
        rng = RecordingRandom(11)
        Deck(rng=rng, face_cache=face_cache, asset_store=asset_store)

        assert len(rng.calls) == 52
        for k, (a, b, value) in enumerate(rng.calls):
            assert (a, b) == (0, k)
            assert 0 <= value <= k

    def test_matches_inside_out_fisher_yates(self, face_cache, asset_store):
        """初始发牌顺序与inside-out Fisher-Yates结果一致"""
        expected, _ = expected_initial_order(99)
        deck = Deck(rng=random.Random(99), face_cache=face_cache, asset_store=asset_store)

        assert identities(deck.deal_cards(52)) == expected

    def test_same_seed_same_order(self, deck_factory):
        """相同种子的牌组顺序相同"""
        deck1 = deck_factory(seed=123)
        deck2 = deck_factory(BackColor.BLUE, seed=123)
        assert deck1.deal_cards(52) == deck2.deal_cards(52)

    def test_different_seeds_differ(self, deck_factory):
        """不同种子的牌组顺序不同"""
        cards1 = deck_factory(seed=123).deal_cards(52)
        cards2 = deck_factory(seed=456).deal_cards(52)
        assert cards1 != cards2


@pytest.mark.unit
class TestDeckDealing:
    """发牌测试"""

    def test_deal_single_card(self, deck):
        """测试发单张牌"""
        card = deck.deal()
        assert isinstance(card, Card)
        assert deck.remaining == 51

    def test_deal_all_distinct(self, deck):
        """52次发牌得到52张不同的牌"""
        cards = [deck.deal() for _ in range(52)]
        assert len(set(cards)) == 52
        assert {(c.suit, c.rank) for c in cards} == {(s, r) for s in Suit for r in Rank}

    def test_exhausted_deck_returns_none(self, deck):
        """牌发完后deal返回None且状态不变"""
        deck.deal_cards(52)
        assert deck.is_empty
        assert deck.remaining == 0
        for _ in range(3):
            assert deck.deal() is None
            assert deck.remaining == 0

    def test_deal_cards(self, deck):
        """测试发多张牌"""
        cards = deck.deal_cards(5)
        assert len(cards) == 5
        assert deck.remaining == 47
        assert deck.deal_cards(0) == []

    @pytest.mark.parametrize("count", [-1, 53])
    def test_deal_cards_invalid_count(self, deck, count):
        """发牌数量无效"""
        with pytest.raises(InvalidArgumentError):
            deck.deal_cards(count)
        assert deck.remaining == 52

    def test_deal_cards_more_than_remaining(self, deck):
        """发牌数量超过剩余牌数"""
        deck.deal_cards(50)
        with pytest.raises(InvalidArgumentError):
            deck.deal_cards(3)
        assert deck.remaining == 2

    def test_peek(self, deck):
        """查看下一张牌不消耗"""
        top = deck.peek()
        assert deck.remaining == 52
        assert deck.deal() is top

        deck.deal_cards(51)
        assert deck.peek() is None

    def test_dealt_cards(self, deck):
        """已发出的牌按顺序返回"""
        cards = deck.deal_cards(4)
        assert deck.dealt_cards() == cards
        deck.shuffle()
        assert deck.dealt_cards() == []


@pytest.mark.unit
class TestDeckLookup:
    """按身份查找测试"""

    def test_lookup_by_int_and_rank(self, deck):
        """点数可以是整数或Rank"""
        assert deck.lookup(Suit.CLUBS, 1) is deck.lookup(Suit.CLUBS, Rank.ACE)
        assert deck.get_card(Suit.CLUBS, 13) is deck.lookup(Suit.CLUBS, Rank.KING)

    @pytest.mark.parametrize("rank", [0, 14, -3])
    def test_lookup_rank_out_of_range(self, deck, rank):
        """点数越界"""
        with pytest.raises(InvalidArgumentError):
            deck.lookup(Suit.CLUBS, rank)

    def test_lookup_invalid_suit(self, deck):
        """花色无效"""
        with pytest.raises(InvalidArgumentError):
            deck.lookup("clubs", 1)

    def test_lookup_identity_stable(self, deck):
        """发牌和洗牌不改变查找结果"""
        before = {(s, r): deck.lookup(s, r) for s in Suit for r in Rank}

        deck.deal_cards(20)
        deck.shuffle()
        deck.deal_cards(52)
        deck.shuffle()

        for key, card in before.items():
            assert deck.lookup(*key) is card

    def test_dealt_cards_are_grid_instances(self, deck):
        """发出的牌就是身份表中的实例"""
        grid_ids = {id(card) for card in deck.iter_cards()}
        dealt_ids = {id(card) for card in deck.deal_cards(52)}
        assert dealt_ids == grid_ids

    def test_iter_cards_suit_major(self, deck):
        """iter_cards按花色、点数顺序"""
        assert identities(deck.iter_cards()) == [(s, r) for s in Suit for r in Rank]


@pytest.mark.unit
class TestDeckShuffle:
    """洗牌测试"""

    def test_shuffle_resets_cursor(self, deck):
        """洗牌后全部52张可再发"""
        deck.deal_cards(52)
        assert deck.deal() is None

        deck.shuffle()
        assert deck.remaining == 52
        assert len(set(deck.deal_cards(52))) == 52

    def test_shuffle_partial_deal(self, deck):
        """部分发牌后洗牌，已发出的牌重新可用"""
        dealt = deck.deal_cards(10)
        deck.shuffle()
        remaining = set(deck.deal_cards(52))
        assert set(dealt) <= remaining

    def test_shuffle_uses_51_draws(self, face_cache, asset_store):
        """洗牌使用51次随机抽取，第i次范围为[0, 51-i]"""
        rng = RecordingRandom(5)
        deck = Deck(rng=rng, face_cache=face_cache, asset_store=asset_store)
        rng.calls.clear()

        deck.shuffle()

        assert [(a, b) for a, b, _ in rng.calls] == [(0, i) for i in range(51, 0, -1)]

    def test_shuffle_matches_fisher_yates(self, face_cache, asset_store):
        """洗牌结果与标准Fisher-Yates一致"""
        order, rng = expected_initial_order(42)
        for i in range(51, 0, -1):
            j = rng.randint(0, i)
            order[i], order[j] = order[j], order[i]

        deck = Deck(rng=random.Random(42), face_cache=face_cache, asset_store=asset_store)
        deck.deal_cards(7)
        deck.shuffle()

        assert identities(deck.deal_cards(52)) == order


@pytest.mark.unit
class TestDeckRepresentation:
    """字符串表示测试"""

    def test_repr_and_str(self, deck):
        deck.deal_cards(2)
        assert repr(deck) == "Deck(remaining=50, back='color:red')"
        assert str(deck) == "牌组剩余: 50 张"
