# -*- coding: utf-8 -*-

from heartsai.card import CARDS, Card, clubs, diamonds, spades, hearts
from heartsai.analysis import (penalty_points, highest_rank, is_last_to_play, queen_in_trick,
                               current_winner, players_yet_to_act, HandAnalysis)

CARD_TAGS = {c.tag: c for c in CARDS}

def cards(tags: str) -> list[Card]:
    return [CARD_TAGS[tag] for tag in tags.split()]

def plays(*pairs) -> list:
    return [(pos, CARD_TAGS[tag]) for pos, tag in pairs]

def test_trick_queries():
    trick = plays((1, '9♦'), (2, 'Q♠'), (3, 'K♦'))
    assert penalty_points(trick) == 13
    assert highest_rank(trick, diamonds) == 13
    assert highest_rank(trick, clubs) == 0
    assert is_last_to_play(trick)
    assert queen_in_trick(trick)
    assert current_winner(trick) == 3
    assert players_yet_to_act(trick, 0) == []

    trick = plays((2, '4♥'))
    assert penalty_points(trick) == 1
    assert not is_last_to_play(trick)
    assert not queen_in_trick(trick)
    assert current_winner(trick) == 2
    assert players_yet_to_act(trick, 3) == [0, 1]

    assert penalty_points([]) == 0
    assert current_winner([]) is None
    assert highest_rank([], hearts) == 0

def test_hand_analysis():
    hand = cards('A♣ 9♣ 5♣ 3♣ 2♣ Q♠ 4♠ K♥ 8♦ 7♦ 6♦ 5♦ 4♦')
    analysis = HandAnalysis(hand)

    suit_cards = analysis.get_suit_cards()
    assert suit_cards[clubs] == cards('A♣ 9♣ 5♣ 3♣ 2♣')
    assert analysis.distribution() == {clubs: 5, diamonds: 5, spades: 2, hearts: 1}
    assert analysis.voids() == []
    assert analysis.low_spades() == cards('4♠')
    assert analysis.has_card(CARD_TAGS['Q♠'])

    assert analysis.has_protected_high_cards(clubs)
    assert analysis.has_protected_high_cards(diamonds)  # no high cards
    assert not analysis.has_protected_high_cards(spades)

    # shortest suits first, descending rank within suit
    assert analysis.voiding_candidates() == cards('K♥ Q♠ 4♠')

    high_cards = analysis.high_cards_by_suit()
    assert high_cards[clubs] == {12: 0, 13: 0, 14: 1}
    assert high_cards[hearts][13] == 1

def test_hand_analysis_voids():
    analysis = HandAnalysis(cards('A♣ K♣ Q♣ 2♦'))
    assert analysis.voids() == [spades, hearts]
    # high cards not protected with only 3 in suit
    assert not analysis.has_protected_high_cards(clubs)
