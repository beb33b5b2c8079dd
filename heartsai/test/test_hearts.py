# -*- coding: utf-8 -*-

import pytest

from heartsai.core import LogicError
from heartsai.card import CARDS, Card
from heartsai.hearts import PassDirection, Trick, GameState
from heartsai.hearts import pass_direction, pass_target, play_context, can_play, valid_cards
from heartsai.hearts import trick_winner

CARD_TAGS = {c.tag: c for c in CARDS}

def cards(tags: str) -> list[Card]:
    return [CARD_TAGS[tag] for tag in tags.split()]

def test_pass_rotation():
    assert pass_direction(1) == PassDirection.LEFT
    assert pass_direction(2) == PassDirection.RIGHT
    assert pass_direction(3) == PassDirection.ACROSS
    assert pass_direction(4) == PassDirection.NONE
    assert pass_direction(5) == PassDirection.LEFT

    assert pass_target(0, PassDirection.LEFT) == 1
    assert pass_target(0, PassDirection.RIGHT) == 3
    assert pass_target(3, PassDirection.LEFT) == 0
    assert pass_target(1, PassDirection.ACROSS) == 3

def test_first_trick_lead():
    hand = cards('2♣ 5♣ K♦ Q♠ 3♥')
    assert valid_cards(hand, [], False, True) == cards('2♣')
    assert valid_cards(hand, [], False, False) == cards('2♣ 5♣ K♦ Q♠')

def test_follow_suit():
    hand = cards('5♣ K♣ K♦ Q♠ 3♥')
    trick = [(0, CARD_TAGS['2♣'])]
    assert valid_cards(hand, trick, False, True) == cards('5♣ K♣')
    assert not can_play(CARD_TAGS['K♦'], hand, trick, False, True)
    # card not in hand
    assert not can_play(CARD_TAGS['A♣'], hand, trick, False, True)

def test_first_trick_void():
    trick = [(0, CARD_TAGS['2♣'])]
    hand = cards('K♦ Q♠ 3♥ 9♠')
    assert valid_cards(hand, trick, False, True) == cards('K♦ 9♠')
    # only penalty cards left, so anything goes
    hand = cards('Q♠ 3♥ 9♥')
    assert valid_cards(hand, trick, False, True) == hand
    # not the first trick
    hand = cards('K♦ Q♠ 3♥ 9♠')
    assert valid_cards(hand, trick, False, False) == hand

def test_hearts_lead():
    hand = cards('K♦ 3♥ 9♥')
    assert valid_cards(hand, [], False, False) == cards('K♦')
    assert valid_cards(hand, [], True, False) == hand
    hand = cards('3♥ 9♥')
    assert valid_cards(hand, [], False, False) == hand

def test_trick():
    trick = Trick()
    assert trick.lead_suit is None
    assert trick.play_card(1, CARD_TAGS['5♦'])
    assert not trick.play_card(2, CARD_TAGS['A♠'])
    assert trick.play_card(3, CARD_TAGS['J♦'])
    assert not trick.play_card(0, CARD_TAGS['4♥'])
    assert trick.is_complete()
    assert trick.winning_pos == 3
    assert trick.points == 1
    assert trick_winner(trick.plays) == 3

    with pytest.raises(LogicError):
        trick.play_card(0, CARD_TAGS['6♥'])
    with pytest.raises(LogicError):
        Trick([(0, CARD_TAGS['5♦']), (0, CARD_TAGS['6♦'])])
    with pytest.raises(LogicError):
        trick_winner([])

def test_play_context():
    hands = [cards('2♣ 5♣'), cards('3♣ 4♦'), cards('6♦ 7♦'), cards('8♦ 9♦')]
    state = GameState(['a', 'b', 'c', 'd'], hands, [0] * 4, [0] * 4, [], False, 0,
                      PassDirection.LEFT)
    ctx = play_context(state, 0)
    assert ctx.is_leading
    assert ctx.is_first_trick
    assert ctx.lead_suit is None
    assert ctx.valid_cards == cards('2♣')
    assert ctx.trick_num == 1

    state = state._replace(current_trick=[(0, CARD_TAGS['2♣'])])
    ctx = play_context(state, 1)
    assert not ctx.is_leading
    assert ctx.lead_suit == CARD_TAGS['2♣'].suit
    assert ctx.valid_cards == cards('3♣')
    assert ctx.hand == hands[1]
