# -*- coding: utf-8 -*-

from random import Random

import pytest

from heartsai.core import cfg, ConfigError, LogicError
from heartsai.card import CARDS, Card, TWO_OF_CLUBS, ACE_OF_HEARTS, QUEEN_OF_SPADES
from heartsai.hearts import GameState, PlayContext, PassDirection, pass_context, play_context
from heartsai.strategy import Strategy, StrategyNotice, StrategySmart, MoonMode

cfg.load('test_config.yml')

CARD_TAGS = {c.tag: c for c in CARDS}

def cards(tags: str) -> list[Card]:
    return [CARD_TAGS[tag] for tag in tags.split()]

def plays(*pairs) -> list:
    return [(pos, CARD_TAGS[tag]) for pos, tag in pairs]

def make_state(hand: list[Card], pos: int = 0, trick: list = None, trick_num: int = 0,
               hearts_broken: bool = False) -> GameState:
    hands = [[] for _ in range(4)]
    hands[pos] = hand
    return GameState(['a', 'b', 'c', 'd'], hands, [0] * 4, [0] * 4, trick or [],
                     hearts_broken, trick_num, PassDirection.LEFT)

NORMAL_HAND = 'Q♠ A♠ 2♣ 3♣ 4♣ 5♣ 6♣ 7♦ 8♦ 9♦ 10♦ J♦ K♥'
MOON_HAND   = 'A♥ K♥ Q♥ J♥ A♠ K♠ Q♠ A♣ K♣ 4♣ A♦ 3♦ 2♦'

def test_strategy_new():
    strat = Strategy.new('test_smart')
    assert isinstance(strat, StrategySmart)
    assert strat.rand_seed == 12345
    assert strat.aggressiveness == 0.5
    assert strat.base_aggr == 0.5
    assert str(strat) == 'StrategySmart'

    strat = Strategy.new('test_smart', allow_moon=False)
    assert not strat.allow_moon

    with pytest.raises(ConfigError):
        _ = Strategy.new('not_a_strategy')
    with pytest.raises(ConfigError):
        _ = Strategy.new('test_bad_class')
    with pytest.raises(ConfigError):
        _ = StrategySmart(not_a_param=1)

def test_aggressiveness_draw():
    strat = StrategySmart(rand_seed=1)
    assert 0.3 <= strat.base_aggr <= 0.7
    strat.notify(None, StrategyNotice.GAME_START)
    assert 0.3 <= strat.base_aggr <= 0.7
    # a falsy fixed value still counts as fixed
    strat = StrategySmart(rand_seed=1, aggressiveness=0.0)
    assert strat.base_aggr == 0.0

def test_pass_normal():
    hand = cards(NORMAL_HAND)
    strat = Strategy.new('test_smart')
    passed = strat.choose_cards_to_pass(pass_context(make_state(hand), 0))
    assert len(passed) == 3
    assert set(passed) == set(cards('Q♠ K♥ A♠'))
    assert strat.moon_mode == MoonMode.NORMAL

    with pytest.raises(LogicError):
        strat.choose_cards_to_pass(pass_context(make_state(cards('2♣ 3♣')), 0))

def test_pass_moon():
    hand = cards(MOON_HAND)
    strat = Strategy.new('test_smart')
    passed = strat.choose_cards_to_pass(pass_context(make_state(hand), 0))
    assert passed == cards('2♦ 3♦ 4♣')
    assert strat.attempting_moon
    assert strat.moon_eval.should_attempt

    strat = Strategy.new('test_smart', allow_moon=False)
    passed = strat.choose_cards_to_pass(pass_context(make_state(hand), 0))
    assert not strat.attempting_moon
    assert len(set(passed)) == 3
    assert all(card in hand for card in passed)

def test_moon_abort():
    hand = cards(MOON_HAND)
    strat = Strategy.new('test_smart')
    state = make_state(hand)
    strat.notify(state, StrategyNotice.ROUND_START)
    strat.choose_cards_to_pass(pass_context(state, 0))
    assert strat.attempting_moon

    # winning penalty points ourselves keeps the attempt going
    trick = plays((0, 'A♦'), (1, '5♦'), (2, '3♥'), (3, '9♦'))
    strat.notify(state, StrategyNotice.TRICK_COMPLETE, trick, 0)
    assert strat.attempting_moon
    # pointless trick taken by someone else
    trick = plays((0, '2♣'), (1, '5♣'), (2, '6♣'), (3, '9♣'))
    strat.notify(state, StrategyNotice.TRICK_COMPLETE, trick, 3)
    assert strat.attempting_moon
    # points taken by someone else
    trick = plays((3, 'K♦'), (0, '3♦'), (1, '2♥'), (2, '4♦'))
    strat.notify(state, StrategyNotice.TRICK_COMPLETE, trick, 3)
    assert strat.moon_mode == MoonMode.NORMAL
    assert strat.memory.tricks_counted() == 3

    with pytest.raises(LogicError):
        strat.notify(state, StrategyNotice.TRICK_COMPLETE)

    strat.notify(state, StrategyNotice.ROUND_START)
    assert strat.memory.tricks_counted() == 0
    assert strat.moon_eval is None

def test_play_two_of_clubs():
    hand = cards('2♣ 5♣ K♦ Q♠ 3♥')
    strat = Strategy.new('test_smart')
    ctx = play_context(make_state(hand, pos=1), 1)
    assert strat.choose_card_to_play(ctx) == TWO_OF_CLUBS

def test_play_legal():
    strat = Strategy.new('test_smart')
    hand = cards('5♣ K♣ K♦ Q♠ 3♥')
    state = make_state(hand, pos=2, trick=plays((1, '9♣')), trick_num=4)
    ctx = play_context(state, 2)
    card = strat.choose_card_to_play(ctx)
    assert card in cards('5♣ K♣')
    # duck
    assert card == CARD_TAGS['5♣']

    # void in lead suit, dump Q♠
    hand = cards('K♦ Q♠ 3♥')
    state = make_state(hand, pos=2, trick=plays((1, '9♣')), trick_num=4)
    assert strat.choose_card_to_play(play_context(state, 2)) == CARD_TAGS['Q♠']

    # leading, hearts not broken
    hand = cards('K♦ 4♦ 3♥')
    state = make_state(hand, pos=2, trick_num=4)
    assert strat.choose_card_to_play(play_context(state, 2)) == CARD_TAGS['4♦']

    empty = PlayContext(state, 2, [], True, None, [], 4, False)
    with pytest.raises(LogicError):
        strat.choose_card_to_play(empty)

def test_observer():
    records = []
    strat = StrategySmart(rand_seed=1, aggressiveness=0.5, observer=records.append)
    hand = cards(NORMAL_HAND)
    strat.choose_cards_to_pass(pass_context(make_state(hand), 0))
    assert len(records) == 1
    record = records[0]
    assert record.action == "pass"
    assert record.trick_num is None
    assert len(record.chosen) == 3
    assert len(record.candidates) == len(hand)
    assert record.candidates[0].card in record.chosen
    assert record.aggressiveness == 0.5
    assert record.moon_mode == MoonMode.NORMAL
    assert record.memory['tricks_counted'] == 0

    state = make_state(cards('K♦ 4♦'), pos=0, trick_num=4)
    card = strat.choose_card_to_play(play_context(state, 0))
    assert len(records) == 2
    assert records[1].action == "play"
    assert records[1].chosen == [card]
    assert records[1].trick_num == 5

def test_explain_off():
    records = []
    strat = Strategy.new('test_smart_quiet', observer=records.append)
    strat.choose_cards_to_pass(pass_context(make_state(cards(NORMAL_HAND)), 0))
    assert all(sc.reasons is None for sc in records[0].candidates)

def test_no_self_shooter():
    """Round points alone never make us the shooter, unless committed at the pass
    """
    records = []
    strat = StrategySmart(rand_seed=1, aggressiveness=0.5, observer=records.append)
    hand = cards('A♦ 3♦')
    state = GameState(['a', 'b', 'c', 'd'], [hand, [], [], []], [0] * 4, [20, 0, 0, 0],
                      plays((1, '5♦'), (2, '2♥')), True, 6, PassDirection.LEFT)
    assert strat.detector.detect(state, strat.memory) == 0
    assert strat.moon_mode == MoonMode.NORMAL
    # duck the pointed trick
    assert strat.choose_card_to_play(play_context(state, 0)) == CARD_TAGS['3♦']
    assert records[-1].shooter_idx is None

def test_explain_no_effect():
    """Turning off explanations must not change any decision
    """
    loud = Strategy.new('test_smart', explain=True)
    quiet = Strategy.new('test_smart', explain=False)
    for tags in (NORMAL_HAND, MOON_HAND):
        hand = cards(tags)
        for strat in (loud, quiet):
            strat.notify(make_state(hand), StrategyNotice.ROUND_START)
        ctx = pass_context(make_state(hand), 0)
        assert loud.choose_cards_to_pass(ctx) == quiet.choose_cards_to_pass(ctx)

    # includes free last-to-act wins, which consume the random (bluff) draw
    situations = [('5♣ K♣ K♦ Q♠ 3♥', plays((3, '9♣')), 4),
                  ('5♣ K♣ 2♦', plays((1, '4♣'), (2, '2♣'), (3, '3♣')), 3),
                  ('10♦ J♦ 2♠', plays((1, '9♦'), (2, '2♦'), (3, '4♦')), 5),
                  ('K♦ Q♠ 3♥', plays((1, '9♣')), 4),
                  ('K♦ 4♦ 3♥ 7♠', [], 6)]
    for _ in range(5):
        for tags, trick, trick_num in situations:
            state = make_state(cards(tags), pos=0, trick=trick, trick_num=trick_num,
                               hearts_broken=True)
            ctx = play_context(state, 0)
            assert loud.choose_card_to_play(ctx) == quiet.choose_card_to_play(ctx)

def test_pass_moon_never_critical():
    """Across many hands, a committed moon attempt never passes A♥ or Q♠
    """
    rng = Random(24680)
    core = cards('A♥ Q♠ A♠ K♠ A♣ K♣ A♦ K♦ K♥ Q♥')
    attempts = 0
    for i in range(200):
        if i % 2:
            hand = rng.sample(CARDS, 13)
        else:
            others = [c for c in CARDS if c not in core]
            hand = core + rng.sample(others, 3)
        strat = Strategy.new('test_smart')
        passed = strat.choose_cards_to_pass(pass_context(make_state(hand), 0))
        assert len(set(passed)) == 3
        assert all(card in hand for card in passed)
        if strat.attempting_moon:
            attempts += 1
            assert ACE_OF_HEARTS not in passed
            assert QUEEN_OF_SPADES not in passed
    assert attempts >= 100
