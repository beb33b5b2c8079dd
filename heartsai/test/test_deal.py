# -*- coding: utf-8 -*-

import io

import pytest

from heartsai.core import cfg, ConfigError, LogicError, ImplementationError
from heartsai.card import CARDS, Card, TWO_OF_CLUBS, get_deck, set_seed
from heartsai.hearts import PassContext, PlayContext, PassDirection, Trick, pass_target
from heartsai.strategy import Strategy, StrategySmart
from heartsai.player import Player
from heartsai.deal import Deal, DealPhase, DealAttr
from heartsai.game import Game, GameStat

cfg.load('test_config.yml')

class StrategyBadPass(Strategy):
    def choose_cards_to_pass(self, ctx: PassContext) -> list[Card]:
        return ctx.hand[:2]

class StrategyBadPlay(Strategy):
    def choose_cards_to_pass(self, ctx: PassContext) -> list[Card]:
        return ctx.hand[:3]

    def choose_card_to_play(self, ctx: PlayContext) -> Card:
        return next(c for c in ctx.hand if c not in ctx.valid_cards)

def smart_players() -> list[Player]:
    return [Player(f"Player {i}", 'test_smart') for i in range(4)]

def test_player():
    player = Player("Test Player")
    assert isinstance(player.strategy, StrategySmart)
    assert str(player) == "Test Player"

    strat = StrategySmart()
    player = Player("Another Player", strat)
    assert player.strategy is strat

    with pytest.raises(ConfigError):
        _ = Player("Not a Player")

def test_deal():
    set_seed(12345)
    players = smart_players()
    deal = Deal(players, get_deck())
    assert deal.deal_phase == DealPhase.NEW
    assert deal.direction == PassDirection.LEFT

    deal.deal_cards()
    assert deal.deal_phase == DealPhase.DEALT
    assert all(len(hand) == 13 for hand in deal.hands)

    deal.do_passing()
    assert deal.deal_phase == DealPhase.EXCHANGED
    assert len(deal.cards_passed) == 4
    for pos, passed in enumerate(deal.cards_passed):
        assert len(set(passed)) == 3
        assert all(c in deal.cards_dealt[pos] for c in passed)
        assert all(c in deal.hands[pass_target(pos, deal.direction)] for c in passed)
    assert all(len(hand) == 13 for hand in deal.hands)

    deal.play_cards()
    assert deal.deal_phase == DealPhase.SCORED
    assert len(deal.tricks) == 13
    assert not any(deal.hands)
    assert deal.tricks[0].plays[0][1] == TWO_OF_CLUBS
    assert set(c for t in deal.tricks for c in t.cards) == set(CARDS)
    assert sum(deal.round_scores) == 26
    assert sum(len(cards) for cards in deal.points_taken) == 14
    if DealAttr.SHOOT_MOON in deal.result:
        assert sorted(deal.points) == [0, 26, 26, 26]
    else:
        assert deal.points == deal.round_scores
    # each winner leads the next trick
    for prev, trick in zip(deal.tricks, deal.tricks[1:]):
        assert trick.plays[0][0] == prev.winning_pos

    # every player was notified of every trick
    for player in players:
        assert player.strategy.memory.tricks_counted() == 13

    output = io.StringIO()
    deal.print(file=output, verbose=1)
    assert "Trick #13" in output.getvalue()
    assert "Round Score:" in output.getvalue()

def test_deal_no_pass():
    players = smart_players()
    deal = Deal(players, get_deck(), round_num=4)
    assert deal.direction == PassDirection.NONE
    deal.deal_cards()
    deal.do_passing()
    assert deal.deal_phase == DealPhase.EXCHANGED
    assert DealAttr.NO_PASS in deal.result
    assert deal.cards_passed == []
    assert deal.hands == deal.cards_dealt

    deal.play_cards()
    assert deal.deal_phase == DealPhase.SCORED

def test_shoot_moon_score():
    deal = Deal(smart_players(), get_deck())
    deal.deal_cards()
    trick = Trick([(0, CARDS[0]), (1, CARDS[1]), (2, CARDS[2]), (3, CARDS[3])])
    deal.tricks = [trick] * 13
    deal.round_scores = [0, 26, 0, 0]
    deal.compute_score()
    assert deal.shooter == 1
    assert deal.points == [26, 0, 26, 26]
    assert DealAttr.SHOOT_MOON in deal.result

def test_bad_strategies():
    with pytest.raises(LogicError):
        _ = Deal(smart_players()[:3], get_deck())

    players = [Player(f"Bad {i}", StrategyBadPass()) for i in range(4)]
    deal = Deal(players, get_deck())
    deal.deal_cards()
    with pytest.raises(ImplementationError):
        deal.do_passing()

    players = [Player(f"Bad {i}", StrategyBadPlay()) for i in range(4)]
    deal = Deal(players, get_deck())
    deal.deal_cards()
    deal.do_passing()
    with pytest.raises(ImplementationError):
        deal.play_cards()

def test_game():
    set_seed(54321)
    game = Game(smart_players())
    game.play()
    assert max(game.score) >= 100
    assert len(game.deals) >= 4
    for deal in game.deals:
        assert sum(deal.points) in (26, 78)
    for i, deal in enumerate(game.deals):
        assert deal.round_num == i + 1
    assert sum(stats[GameStat.ROUNDS] for stats in game.stats) == 4 * len(game.deals)

    low_score = min(game.score)
    assert game.winner
    assert all(game.score[idx] == low_score for idx, _ in game.winner)

    output = io.StringIO()
    game.print(file=output, verbose=1)
    assert "Game Winner:" in output.getvalue()

    with pytest.raises(LogicError):
        _ = Game(smart_players()[:3])

def test_game_max_rounds():
    game = Game(smart_players(), max_rounds=2)
    game.play()
    assert len(game.deals) == 2
    assert game.winner

def test_deal_explain_no_effect():
    """A full round plays out identically with and without explanations
    """
    set_seed(97531)
    deck = get_deck()
    results = []
    for explain in (True, False):
        players = [Player(f"Player {i}", Strategy.new('test_smart', rand_seed=100 + i,
                                                      explain=explain))
                   for i in range(4)]
        deal = Deal(players, list(deck))
        deal.deal_cards()
        deal.do_passing()
        deal.play_cards()
        results.append((deal.cards_passed, [t.plays for t in deal.tricks], deal.points))
    assert results[0] == results[1]
