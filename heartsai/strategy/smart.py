# -*- coding: utf-8 -*-

from enum import Enum
from typing import Optional, NamedTuple
from collections.abc import Callable
from random import Random

from ..core import LogicError, ImplementationError, log
from ..card import Card, is_two_of_clubs
from ..hearts import Play, GameState, PassContext, PlayContext, PASS_CARDS
from ..memory import CardMemory
from ..aggressiveness import Modifiers, generate_base, effective, modifiers, label
from ..analysis import MoonAnalysis, MoonEvaluation, MoonDetector, penalty_points
from ..scoring import (ScoredCard, PassScorer, LeadScorer, FollowScorer, DumpScorer,
                       rank_candidates)
from .base import Strategy

############
# MoonMode #
############

class MoonMode(Enum):
    """Per-round moon state for the agent; ``ATTEMPTING`` can only be entered at the pass
    decision, and is exited (aborted) as soon as someone else takes penalty points
    """
    NORMAL     = "Normal"
    ATTEMPTING = "Attempting"

##################
# DecisionRecord #
##################

class DecisionRecord(NamedTuple):
    """Passed to the ``observer`` callable (if specified) for each decision, for
    inspection purposes only
    """
    action:         str               # "pass" or "play"
    player_idx:     int
    round_num:      int
    trick_num:      Optional[int]     # None for pass decisions
    chosen:         list[Card]
    candidates:     list[ScoredCard]  # ranked
    context:        str
    moon_mode:      MoonMode
    shooter_idx:    Optional[int]
    aggressiveness: float
    memory:         dict

Observer = Callable[[DecisionRecord], None]

#################
# StrategySmart #
#################

class StrategySmart(Strategy):
    """Strategy based on parameterized scoring of candidate cards, for both passing and
    playing.  Each instance represents the session for a single agent (seat), and holds
    the following state:

    - ``memory`` - opponent memory (``CardMemory``), reset every round
    - ``moon_mode`` - whether the agent has committed to shooting the moon for the round
    - ``base_aggr`` - base aggressiveness, drawn once per game (unless ``aggressiveness``
      is specified as a fixed value)

    Every decision first refreshes the effective aggressiveness (based on the score
    standing), which yields the modifiers used by the card scorers.

    Passing
    -------

    The hand is evaluated for shooting the moon (``MoonAnalysis``); if the evaluation
    recommends an attempt (and ``allow_moon`` is set), the agent commits to it for the
    round, and passes low cards (keeping high ones).  Otherwise the cards are scored by
    ``PassScorer`` (normal priorities).

    Playing
    -------

    Holding 2♣ on the first trick forces its play.  Otherwise, the moon shooter (this
    agent, if attempting, else the result of ``MoonDetector``) is determined, and the
    legal cards are scored by the scorer for the play phase (lead, follow, or dump).
    The top ranked candidate is played.

    Parameters overriding config values for the helper classes may be specified as dicts
    (``moon_analysis``, ``moon_detector``, ``pass_scoring``, ``lead_scoring``,
    ``follow_scoring``, ``dump_scoring``).
    """
    rand_seed:      Optional[int]
    aggressiveness: Optional[float]  # fixed base value (no draw)
    memory_tricks:  int
    allow_moon:     bool
    detect_moon:    bool
    explain:        bool
    observer:       Optional[Observer]
    moon_analysis:  dict
    moon_detector:  dict
    pass_scoring:   dict
    lead_scoring:   dict
    follow_scoring: dict
    dump_scoring:   dict

    random:         Random
    memory:         CardMemory
    moon_mode:      MoonMode
    moon_eval:      Optional[MoonEvaluation]  # debug only
    base_aggr:      float
    player_idx:     Optional[int]

    def __init__(self, **kwargs):
        """See base class
        """
        super().__init__(**kwargs)
        self.random = Random(self.rand_seed if self.rand_seed is not None else id(self))
        self.detector      = MoonDetector(**(self.moon_detector or {}))
        self.pass_scorer   = PassScorer(self.explain, **(self.pass_scoring or {}))
        self.lead_scorer   = LeadScorer(self.explain, **(self.lead_scoring or {}))
        self.follow_scorer = FollowScorer(self.explain, **(self.follow_scoring or {}))
        self.dump_scorer   = DumpScorer(self.explain, **(self.dump_scoring or {}))

        self.memory     = CardMemory(self.memory_tricks)
        self.moon_mode  = MoonMode.NORMAL
        self.moon_eval  = None
        self.player_idx = None
        self.draw_aggressiveness()

    def draw_aggressiveness(self) -> None:
        if self.aggressiveness is not None:
            self.base_aggr = self.aggressiveness
        else:
            self.base_aggr = generate_base(self.random)
        log.debug(f"Base aggressiveness {self.base_aggr:.2f} ({label(self.base_aggr)})")

    @property
    def attempting_moon(self) -> bool:
        return self.moon_mode == MoonMode.ATTEMPTING

    def get_modifiers(self, state: GameState, player_idx: int) -> Modifiers:
        return modifiers(effective(self.base_aggr, state, player_idx))

    def record(self, action: str, ctx_tag: str, state: GameState, player_idx: int,
               chosen: list[Card], ranked: list[ScoredCard], mods: Modifiers,
               trick_num: int = None, shooter_idx: int = None) -> None:
        log.debug(f"{ctx_tag}: {action} {' '.join(str(c) for c in chosen)}")
        for sc in ranked:
            log.trace(f"  {sc}")
        if not self.observer:
            return
        self.observer(DecisionRecord(action, player_idx, state.round_num, trick_num,
                                     chosen, ranked, ctx_tag, self.moon_mode, shooter_idx,
                                     mods.aggressiveness, self.memory.get_snapshot()))

    ###################
    # lifecycle hooks #
    ###################

    def on_game_start(self) -> None:
        """See base class
        """
        self.draw_aggressiveness()

    def on_round_start(self) -> None:
        """See base class
        """
        self.memory.reset()
        self.moon_mode = MoonMode.NORMAL
        self.moon_eval = None

    def on_trick_complete(self, trick: list[Play], winner_idx: int, trick_num: int,
                          state: GameState = None) -> None:
        """See base class
        """
        if not trick:
            return
        self.memory.record_trick(trick, winner_idx=winner_idx)
        if self.attempting_moon and penalty_points(trick) > 0:
            if winner_idx != self.player_idx:
                log.info(f"Aborting moon attempt (trick {trick_num}, "
                         f"points taken by player {winner_idx})")
                self.moon_mode = MoonMode.NORMAL

    #############
    # decisions #
    #############

    def choose_cards_to_pass(self, ctx: PassContext) -> list[Card]:
        """See base class
        """
        hand = ctx.hand
        if len(set(hand)) < PASS_CARDS:
            raise LogicError(f"Hand too small to pass ({len(hand)} cards)")
        self.player_idx = ctx.player_idx
        mods = self.get_modifiers(ctx.state, ctx.player_idx)

        analysis = MoonAnalysis(hand, **(self.moon_analysis or {}))
        if self.allow_moon and self.moon_mode == MoonMode.NORMAL:
            self.moon_eval = analysis.evaluate(mods.moon_threshold_adjustment)
            if self.moon_eval.should_attempt:
                log.info(f"Attempting to shoot the moon (confidence "
                         f"{self.moon_eval.confidence:.0f})")
                self.moon_mode = MoonMode.ATTEMPTING

        if self.attempting_moon:
            scored = analysis.score_for_passing(self.explain)
            ctx_tag = f"Passing {ctx.direction} (moon)"
        else:
            scored = self.pass_scorer.score(hand, ctx.state, ctx.player_idx)
            ctx_tag = f"Passing {ctx.direction}"

        ranked = rank_candidates(scored)
        chosen = [sc.card for sc in ranked[:PASS_CARDS]]
        if len(set(chosen)) != PASS_CARDS:
            raise ImplementationError(f"Bad cards selected for pass: {chosen}")
        self.record("pass", ctx_tag, ctx.state, ctx.player_idx, chosen, ranked, mods)
        return chosen

    def choose_card_to_play(self, ctx: PlayContext) -> Card:
        """See base class
        """
        valid = ctx.valid_cards
        if not valid:
            raise LogicError("No valid cards to play")
        self.player_idx = ctx.player_idx
        mods = self.get_modifiers(ctx.state, ctx.player_idx)

        if ctx.is_first_trick:
            two_clubs = next((c for c in valid if is_two_of_clubs(c)), None)
            if two_clubs:
                sc = ScoredCard(two_clubs, 0.0, self.explain)
                sc.note("Must lead 2♣")
                self.record("play", "First trick", ctx.state, ctx.player_idx, [two_clubs],
                            [sc], mods, ctx.trick_num)
                return two_clubs

        if self.attempting_moon:
            shooter_idx = ctx.player_idx
        elif self.detect_moon:
            shooter_idx = self.detector.detect(ctx.state, self.memory, ctx.trick)
            # only a committed attempt makes us the shooter
            if shooter_idx == ctx.player_idx:
                shooter_idx = None
        else:
            shooter_idx = None
        moon = self.attempting_moon
        suffix = " (moon)" if moon else ""

        if ctx.is_leading:
            scored = self.lead_scorer.score(ctx, self.memory, shooter_idx, moon, mods)
            ctx_tag = "Leading" + suffix
        elif any(c.suit == ctx.lead_suit for c in valid):
            scored = self.follow_scorer.score(ctx, self.memory, shooter_idx, moon, mods,
                                              self.random)
            ctx_tag = f"Following {ctx.lead_suit.name}" + suffix
        else:
            scored = self.dump_scorer.score(ctx, self.memory, shooter_idx, moon, mods)
            ctx_tag = "Dumping" + suffix

        ranked = rank_candidates(scored)
        card = ranked[0].card
        if card not in valid:
            raise ImplementationError(f"Scored card {card} not in valid cards")
        self.record("play", ctx_tag, ctx.state, ctx.player_idx, [card], ranked, mods,
                    ctx.trick_num, shooter_idx)
        return card
