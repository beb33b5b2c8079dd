# -*- coding: utf-8 -*-

import pytest

from heartsai.card import RANKS, SUITS, CARDS, Card, two, queen, ace, ten
from heartsai.card import clubs, diamonds, spades, hearts
from heartsai.card import find_card, card_by_value, rank_by_value, get_deck, set_seed
from heartsai.card import QUEEN_OF_SPADES, ACE_OF_HEARTS, TWO_OF_CLUBS
from heartsai.card import is_heart, is_queen_of_spades, is_penalty_card, is_two_of_clubs

def test_static_lists():
    assert len(RANKS) == 13
    assert len(SUITS) == 4
    assert len(CARDS) == 52
    assert sum(c.points for c in CARDS) == 26

def test_find_card():
    card = find_card(ace, diamonds)
    assert type(card) == Card
    assert card.rank == ace
    assert card.suit == diamonds
    assert card.value == 14
    assert str(card) == 'A♦'

    card = find_card(ten, clubs)
    assert str(card) == '10♣'
    assert card_by_value(10, clubs) is card

    with pytest.raises(IndexError):
        _ = rank_by_value(1)
    with pytest.raises(IndexError):
        _ = rank_by_value(15)

def test_special_cards():
    assert QUEEN_OF_SPADES.points == 13
    assert QUEEN_OF_SPADES == find_card(queen, spades)
    assert ACE_OF_HEARTS.points == 1
    assert TWO_OF_CLUBS == find_card(two, clubs)

    assert is_queen_of_spades(QUEEN_OF_SPADES)
    assert is_penalty_card(QUEEN_OF_SPADES)
    assert not is_heart(QUEEN_OF_SPADES)
    assert is_heart(ACE_OF_HEARTS)
    assert is_penalty_card(ACE_OF_HEARTS)
    assert is_two_of_clubs(TWO_OF_CLUBS)
    assert not is_penalty_card(find_card(ace, spades))
    assert not is_two_of_clubs(find_card(two, hearts))

def test_card_sort():
    cards = [find_card(ace, hearts), find_card(two, clubs), find_card(queen, spades)]
    assert sorted(cards) == [TWO_OF_CLUBS, QUEEN_OF_SPADES, ACE_OF_HEARTS]

def test_get_deck():
    deck = get_deck()
    assert len(deck) == len(CARDS)
    assert set(deck) == set(CARDS)

    set_seed(12345)
    deck1 = get_deck()
    set_seed(12345)
    deck2 = get_deck()
    assert deck1 == deck2
