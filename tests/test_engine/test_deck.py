"""Tests for deck building and dealing."""

import random
from collections import Counter

import pytest

from uno_engine.cards import Card, Color, Rank
from uno_engine.deck import (
    DECK_SIZE,
    InsufficientCardsError,
    InvalidCountError,
    create_deck,
    deal,
    draw_card,
    expected_composition,
    is_complete_deck,
    remove_one,
    shuffle_deck,
)


class TestCreateDeck:
    def test_deck_size(self):
        assert len(create_deck()) == DECK_SIZE == 108

    def test_deck_is_complete(self):
        assert is_complete_deck(create_deck())

    def test_deck_order_is_fixed(self):
        assert create_deck() == create_deck()

    def test_deck_order(self):
        deck = create_deck()
        assert deck[0] == Card(Rank.ZERO, Color.RED)
        assert deck[1] == deck[2] == Card(Rank.ONE, Color.RED)
        assert deck[25] == Card(Rank.ZERO, Color.YELLOW)
        assert deck[-8:-4] == [Card(Rank.WILD, Color.NONE)] * 4
        assert deck[-4:] == [Card(Rank.WILD_DRAW_FOUR, Color.NONE)] * 4

    def test_per_color_counts(self):
        counts = Counter(create_deck())
        for color in Color.playable():
            assert counts[Card(Rank.ZERO, color)] == 1
            assert counts[Card(Rank.NINE, color)] == 2
            assert counts[Card(Rank.SKIP, color)] == 2
            assert counts[Card(Rank.DRAW_TWO, color)] == 2
            assert counts[Card(Rank.REVERSE, color)] == 2
            assert sum(n for card, n in counts.items() if card.color == color) == 25
        assert counts[Card(Rank.WILD, Color.NONE)] == 4
        assert counts[Card(Rank.WILD_DRAW_FOUR, Color.NONE)] == 4


class TestIsCompleteDeck:
    def test_shuffled_deck_is_complete(self):
        assert is_complete_deck(shuffle_deck(create_deck(), seed=7))

    def test_missing_card(self):
        deck = create_deck()
        deck.pop()
        assert not is_complete_deck(deck)

    def test_swapped_card(self):
        deck = create_deck()
        deck[0] = Card(Rank.FIVE, Color.RED)
        assert len(deck) == 108
        assert not is_complete_deck(deck)

    def test_empty(self):
        assert not is_complete_deck([])

    def test_expected_composition(self):
        assert sum(expected_composition().values()) == 108


class TestShuffle:
    def test_shuffle_deterministic(self):
        assert shuffle_deck(create_deck(), seed=42) == shuffle_deck(create_deck(), seed=42)

    def test_shuffle_different_seeds(self):
        assert shuffle_deck(create_deck(), seed=42) != shuffle_deck(create_deck(), seed=43)

    def test_shuffle_in_place(self):
        deck = create_deck()
        shuffled = shuffle_deck(deck, seed=1)
        assert shuffled is deck
        assert deck != create_deck()

    def test_shuffle_with_rng(self):
        deck1 = shuffle_deck(create_deck(), rng=random.Random(5))
        deck2 = shuffle_deck(create_deck(), rng=random.Random(5))
        assert deck1 == deck2

    def test_shuffle_preserves_cards(self):
        assert Counter(shuffle_deck(create_deck(), seed=3)) == Counter(create_deck())


class TestDeal:
    def test_deal_from_top(self):
        deck = create_deck()
        top = deck[:7]
        hand = deal(deck, 7)
        assert hand == top
        assert len(deck) == 101

    def test_deal_twice_leaves_94(self):
        deck = create_deck()
        deal(deck, 7)
        deal(deck, 7)
        assert len(deck) == 94

    @pytest.mark.parametrize("n", [1, 7, 50, 108])
    def test_deal_conserves_cards(self, n):
        deck = shuffle_deck(create_deck(), seed=n)
        before = list(deck)
        hand = deal(deck, n)
        assert len(hand) == n
        assert len(deck) == len(before) - n
        assert Counter(hand) + Counter(deck) == Counter(before)

    @pytest.mark.parametrize("n", [0, -1])
    def test_deal_non_positive(self, n):
        deck = create_deck()
        with pytest.raises(InvalidCountError) as exc_info:
            deal(deck, n)
        assert exc_info.value.requested == n
        assert len(deck) == 108

    def test_deal_too_many(self):
        deck = create_deck()[:5]
        with pytest.raises(InsufficientCardsError) as exc_info:
            deal(deck, 6)
        assert exc_info.value.requested == 6
        assert exc_info.value.available == 5
        assert len(deck) == 5

    def test_draw_card(self):
        deck = create_deck()
        assert draw_card(deck) == Card(Rank.ZERO, Color.RED)
        assert len(deck) == 107

    def test_draw_from_empty(self):
        with pytest.raises(InsufficientCardsError):
            draw_card([])


class TestRemoveOne:
    def test_removes_first_match_only(self):
        one = Card(Rank.ONE, Color.RED)
        two = Card(Rank.TWO, Color.RED)
        assert remove_one([one, two, one], one) == (two, one)

    def test_absent_card(self):
        one = Card(Rank.ONE, Color.RED)
        assert remove_one([one], Card(Rank.WILD, Color.NONE)) == (one,)
