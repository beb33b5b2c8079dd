# -*- coding: utf-8 -*-

from typing import Optional

from ..core import LogicError
from ..card import Card, clubs, diamonds, spades, hearts, queen, king
from ..card import is_heart, is_queen_of_spades
from ..hearts import PlayContext
from ..memory import CardMemory
from ..aggressiveness import Modifiers
from .base import Scorer, ScoredCard

##############
# LeadScorer #
##############

class LeadScorer(Scorer):
    """Scoring for leading a trick.  In normal mode, low cards are preferred (so that
    someone else wins the trick), with adjustments for hearts, spades (relative to Q♠),
    memory-based knowledge of opponent voids and high cards, and moon defense.

    When attempting to shoot the moon, scoring depends on the phase of the round (by trick
    number): early on, lead clubs/diamonds to exhaust opponents' high cards (without
    giving away the intent); mid-round, start collecting hearts; late in the round, sweep
    the remaining hearts and secure Q♠.  The parameters for moon mode are specified in the
    ``moon_scores`` dict.
    """
    base:                  float
    rank_mult:             float
    hearts_not_broken:     float
    low_heart_max:         int
    high_heart_min:        int
    low_heart_void_opps:   float
    high_heart_void_opps:  float
    low_heart:             float
    high_heart:            float
    mid_heart:             float
    never_lead_queen:      float
    fish_for_queen:        float
    queen_gone_spade:      float
    save_spade_for_queen:  float
    high_spade_queen_out:  float
    opp_void_mult:         float
    opp_high_cards_mult:   float
    low_lead_max:          int
    safe_low_lead:         float
    shooter_void:          float
    moon_prevention:       float
    moon_scores:           dict[str, float]

    def score(self, ctx: PlayContext, memory: CardMemory = None,
              shooter_idx: Optional[int] = None, attempting_moon: bool = False,
              mods: Modifiers = None) -> list[ScoredCard]:
        if not ctx.valid_cards:
            raise LogicError("No valid cards to lead")
        if attempting_moon:
            return [self.score_moon(card, ctx) for card in ctx.valid_cards]
        return [self.score_normal(card, ctx, memory, shooter_idx) for card in ctx.valid_cards]

    def opponents(self, ctx: PlayContext) -> list[int]:
        return [i for i in range(ctx.state.num_players) if i != ctx.player_idx]

    def score_normal(self, card: Card, ctx: PlayContext, memory: Optional[CardMemory],
                     shooter_idx: Optional[int]) -> ScoredCard:
        sc = self.new_candidate(card, self.base)
        sc.add(-card.value * self.rank_mult)

        if is_heart(card):
            self.score_heart(sc, ctx, memory)
        if is_queen_of_spades(card):
            sc.add(self.never_lead_queen, "Never lead Q♠")
        elif card.suit == spades:
            self.score_spade(sc, ctx, memory)
        if memory:
            self.score_memory(sc, ctx, memory)

        if card.suit in (clubs, diamonds) and card.value <= self.low_lead_max:
            sc.add(self.safe_low_lead, "Safe low lead")

        if shooter_idx is not None and shooter_idx != ctx.player_idx:
            if memory and memory.is_player_void(shooter_idx, card.suit):
                sc.add(self.shooter_void, "Shooter void in suit")
            else:
                sc.add(self.moon_prevention, "Moon prevention")
        return sc

    def score_heart(self, sc: ScoredCard, ctx: PlayContext,
                    memory: Optional[CardMemory]) -> None:
        rank = sc.card.value
        if not ctx.state.hearts_broken:
            sc.add(self.hearts_not_broken, "Hearts not broken")
            return

        opps_void = 0
        if memory:
            opps_void = len([i for i in self.opponents(ctx) if memory.is_player_void(i, hearts)])
        if opps_void:
            if rank <= self.low_heart_max:
                sc.add(self.low_heart_void_opps, "Low heart, opponents dump on winner")
            else:
                sc.add(self.high_heart_void_opps, "Risky heart, opponents void")
        elif rank <= self.low_heart_max:
            sc.add(self.low_heart, "Low heart lead")
        elif rank >= self.high_heart_min:
            sc.add(self.high_heart, "High heart, might win")
        else:
            sc.add(self.mid_heart, "Mid heart")

    def score_spade(self, sc: ScoredCard, ctx: PlayContext,
                    memory: Optional[CardMemory]) -> None:
        """Non-queen spades only
        """
        rank = sc.card.value
        holds_queen = any(is_queen_of_spades(c) for c in ctx.valid_cards)
        queen_played = bool(memory) and memory.is_queen_played()

        if not holds_queen and rank < queen.value and not queen_played:
            sc.add(self.fish_for_queen, "Fish for Q♠")
        elif queen_played:
            sc.add(self.queen_gone_spade, "Safe spade (Q♠ gone)")
        elif holds_queen and rank < queen.value:
            sc.add(self.save_spade_for_queen, "Save spade to protect Q♠")

        if rank > queen.value and not queen_played:
            sc.add(self.high_spade_queen_out, "High spade, might catch Q♠")

    def score_memory(self, sc: ScoredCard, ctx: PlayContext, memory: CardMemory) -> None:
        suit = sc.card.suit
        opps = self.opponents(ctx)
        num_void = len([i for i in opps if memory.is_player_void(i, suit)])
        num_high = len([i for i in opps if memory.might_have_high_cards(i, suit)])

        if num_void:
            sc.add(self.opp_void_mult * num_void, f"{num_void} opponent(s) void in {suit.name}")
        if num_high and sc.card.value <= self.low_lead_max:
            sc.add(self.opp_high_cards_mult * num_high, f"Opponents may have high {suit.name}")

    def score_moon(self, card: Card, ctx: PlayContext) -> ScoredCard:
        ms = self.moon_scores
        sc = self.new_candidate(card, self.base)
        rank = card.value
        trick_num = ctx.trick_num
        early = trick_num <= ms['early_max']
        late = trick_num > ms['mid_max']
        suit_cards = [c for c in ctx.valid_cards if c.suit == card.suit]

        if is_heart(card):
            if not ctx.state.hearts_broken:
                sc.add(ms['hearts_not_broken'], "Hearts not broken")
            elif early:
                sc.add(ms['heart_early'], "Moon: too early for hearts")
            elif not late:
                sc.add(ms['heart_mid_base'] + rank * ms['heart_mid_mult'], "Moon: collect hearts")
            else:
                sc.add(ms['heart_late_base'] + rank * ms['heart_late_mult'], "Moon: sweep hearts")

        if is_queen_of_spades(card):
            if early:
                sc.add(ms['queen_early'], "Moon: Q♠ too obvious early")
            elif not late:
                sc.add(ms['queen_mid'], "Moon: Q♠ acceptable now")
            else:
                sc.add(ms['queen_late'], "Moon: secure Q♠")
        elif card.suit == spades:
            if early and rank >= king.value:
                sc.add(ms['high_spade_early'], "Moon: careful with high spades early")
            elif late:
                sc.add(ms['spade_late'], "Moon: spades okay late")

        if card.suit in (clubs, diamonds):
            if early:
                sc.add(ms['side_early'], "Moon: setup lead")
                if len([c for c in suit_cards if c.value >= queen.value]) >= ms['run_suit_min']:
                    sc.add(ms['run_suit'], "Moon: can run this suit")
                sc.add(rank * ms['side_early_mult'])
            else:
                sc.add(ms['side_later_base'] + rank)

        if len(suit_cards) >= ms['long_suit_min']:
            sc.add(ms['long_suit'], "Moon: long suit")
        if rank >= queen.value:
            sc.add(ms['high_card'], "Moon: high card control")
        return sc
