#!/usr/bin/env python
# -*- coding: utf-8 -*-

from .core import ConfigError, cfg
from .card import Card
from .hearts import Play, GameState, PassContext, PlayContext
from .strategy import Strategy, StrategyNotice

##########
# Player #
##########

class Player:
    """A player may be defined by an entry in the config file (identified by ``name``),
    or by a specified strategy (either an instantiated ``Strategy`` object or a configured
    strategy name).  Note that a strategy instance holds the session state for a single
    seat, so the same instance must not be shared across players.

    Calls are delegated to the underlying ``Strategy``.
    """
    name:     str
    strategy: Strategy

    def __init__(self, name: str, strategy: Strategy | str = None):
        if not strategy:
            players = cfg.config('players')
            if name not in players:
                raise ConfigError(f"Player '{name}' is not known")
            strategy_name = players[name].get('strategy')
            if not strategy_name:
                raise ConfigError(f"'strategy' not specified for player '{name}'")
            self.name = name
            self.strategy = Strategy.new(strategy_name)
        elif isinstance(strategy, Strategy):
            self.name = name
            self.strategy = strategy
        else:
            assert isinstance(strategy, str)
            self.name = name
            self.strategy = Strategy.new(strategy)

    def __str__(self):
        return self.name

    def choose_cards_to_pass(self, ctx: PassContext) -> list[Card]:
        return self.strategy.choose_cards_to_pass(ctx)

    def choose_card_to_play(self, ctx: PlayContext) -> Card:
        """Note that ``ctx.valid_cards`` is computed by the caller; the returned card is
        validated against it by the deal
        """
        return self.strategy.choose_card_to_play(ctx)

    def notify(self, state: GameState, notice: StrategyNotice, trick: list[Play] = None,
               winner_idx: int = None) -> None:
        """Pass notifications on to underlying strategy
        """
        self.strategy.notify(state, notice, trick, winner_idx)
