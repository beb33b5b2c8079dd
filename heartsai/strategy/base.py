# -*- coding: utf-8 -*-

from enum import Enum
from importlib import import_module

from ..core import ConfigError, LogicError, cfg
from ..card import Card
from ..hearts import Play, GameState, PassContext, PlayContext

#################
# Notifications #
#################

class StrategyNotice(Enum):
    """Notification type for the ``notify()`` call
    """
    GAME_START     = "Game Start"
    ROUND_START    = "Round Start"
    TRICK_COMPLETE = "Trick Complete"

############
# Strategy #
############

class Strategy:
    """Abstract base class, cannot be instantiated directly.  Subclasses should be
    instantiated using ``Strategy.new(<strat_name>).``

    Subclasses must implement the following methods:

    - ``choose_cards_to_pass()``
    - ``choose_card_to_play()``
    - ``on_game_start()``, ``on_round_start()``, ``on_trick_complete()`` - *[optional]*
      lifecycle hooks (invoked by ``notify()``)

    The context for the decision calls is provided by ``PassContext`` and ``PlayContext``,
    respectively, which are defined in hearts.py.  A strategy instance holds the state for
    exactly one player (seat), and must not be shared.
    """
    @classmethod
    def new(cls, strat_name: str, **kwargs) -> 'Strategy':
        """Return instantiated Strategy object based on configured strategy, identified
        by name; note that the named strategy entry may override base parameter values
        specified for the underlying implementation class
        """
        strategies = cfg.config('strategies')
        if strat_name not in strategies:
            raise ConfigError(f"Strategy '{strat_name}' is not known")
        strat_info   = strategies[strat_name]
        class_name   = strat_info.get('base_class')
        module_path  = strat_info.get('module_path')
        strat_params = dict(strat_info.get('strategy_params') or {})
        if not class_name:
            raise ConfigError(f"'base_class' not specified for strategy '{strat_name}'")
        if module_path:
            module = import_module(module_path)
            strat_class = getattr(module, class_name, None)
        else:
            strat_class = globals().get(class_name)
        if strat_class is None:
            raise ConfigError(f"Class '{class_name}' not found for strategy '{strat_name}'")
        if not issubclass(strat_class, cls):
            raise ConfigError(f"'{strat_class.__name__}' not subclass of '{cls.__name__}'")

        # NOTE: this is a shallow override (entire dicts must be specified)
        strat_params.update(kwargs)
        return strat_class(**strat_params)

    def __init__(self, **kwargs):
        """Note that kwargs are parameters overrides on top of base_strategy_params
        (in the config file) for the underlying implementation class
        """
        class_name = type(self).__name__
        base_params = cfg.config('base_strategy_params')
        if class_name not in base_params:
            raise ConfigError(f"Strategy class '{class_name}' does not exist")
        for key, base_value in base_params[class_name].items():
            setattr(self, key, kwargs[key] if key in kwargs else base_value)
        if unknown := set(kwargs) - set(base_params[class_name]):
            raise ConfigError(f"Unknown param(s) '{', '.join(unknown)}' for {class_name}")

    def __str__(self):
        return type(self).__name__

    def choose_cards_to_pass(self, ctx: PassContext) -> list[Card]:
        """Return exactly ``PASS_CARDS`` distinct cards from ``ctx.hand``
        """
        raise NotImplementedError("Can't call abstract method")

    def choose_card_to_play(self, ctx: PlayContext) -> Card:
        """Return a card from ``ctx.valid_cards``
        """
        raise NotImplementedError("Can't call abstract method")

    def on_game_start(self) -> None:
        pass

    def on_round_start(self) -> None:
        """Must be called before any decision in a new round
        """
        pass

    def on_trick_complete(self, trick: list[Play], winner_idx: int, trick_num: int,
                          state: GameState = None) -> None:
        """Must be called exactly once per completed trick (after the winner is resolved,
        and before the next lead)
        """
        pass

    def notify(self, state: GameState, notice_type: StrategyNotice,
               trick: list[Play] = None, winner_idx: int = None) -> None:
        """Dispatch lifecycle notifications to the corresponding hooks; ``trick`` and
        ``winner_idx`` are required for ``TRICK_COMPLETE``
        """
        if notice_type == StrategyNotice.GAME_START:
            self.on_game_start()
        elif notice_type == StrategyNotice.ROUND_START:
            self.on_round_start()
        elif notice_type == StrategyNotice.TRICK_COMPLETE:
            if trick is None or winner_idx is None:
                raise LogicError("Trick and winner required for TRICK_COMPLETE notice")
            self.on_trick_complete(trick, winner_idx, state.trick_num if state else 0, state)
