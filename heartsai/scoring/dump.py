# -*- coding: utf-8 -*-

from typing import Optional

from ..core import LogicError
from ..card import Card, spades, queen, is_heart, is_queen_of_spades, is_penalty_card
from ..hearts import PlayContext
from ..memory import CardMemory
from ..aggressiveness import Modifiers, modifiers, find_leader
from ..analysis.trick import queen_in_trick, current_winner
from .base import Scorer, ScoredCard

NEUTRAL_AGGRESSIVENESS = 0.5

##############
# DumpScorer #
##############

class DumpScorer(Scorer):
    """Scoring for discarding when void in the lead suit (or for any play outside of
    leading and following).  In normal mode, penalty cards and high cards are dumped
    first, with two overrides:

    - Moon defense (another player detected as shooting): never give penalty cards to the
      shooter if currently winning the trick, and strongly prefer dumping Q♠ on any other
      winner
    - Leader targeting (no shooter): if the scoreboard leader is currently winning, dump
      with an extra bonus; otherwise withhold a fraction of the dump value (so penalty
      cards are saved for the leader), based on the aggressiveness-derived targeting
      factor.  Targeting only applies if the factor is at least ``min_targeting_factor``.

    Low spades are kept while Q♠ is still out.  When attempting to shoot the moon, this is
    all inverted: penalty cards are kept, and low cards are dumped.
    """
    base:                      float
    queen_of_spades:           float
    heart_base:                float
    heart_rank_mult:           float
    dump_on_leader:            float
    queen_to_shooter:          float
    hearts_to_shooter:         float
    queen_on_non_shooter:      float
    min_targeting_factor:      float
    heart_hold_ratio:          float
    late_round_trick:          int
    late_round_hold_reduction: float
    high_card_min:             int
    high_card_rank_mult:       float
    defense_keep_high:         float
    defense_keep_rank_mult:    float
    keep_spade_queen_out:      float
    keep_spade_queen_out_mult: float
    keep_low_spade:            float
    keep_low_spade_mult:       float
    moon_scores:               dict[str, float]

    def score(self, ctx: PlayContext, memory: CardMemory = None,
              shooter_idx: Optional[int] = None, attempting_moon: bool = False,
              mods: Modifiers = None) -> list[ScoredCard]:
        if not ctx.valid_cards:
            raise LogicError("No valid cards to dump")
        if attempting_moon:
            return [self.score_moon(card) for card in ctx.valid_cards]

        mods = mods or modifiers(NEUTRAL_AGGRESSIVENESS)
        winner = current_winner(ctx.trick)
        defending = shooter_idx is not None and shooter_idx != ctx.player_idx
        targeting = mods.leader_targeting_factor >= self.min_targeting_factor
        leader = None
        if targeting and not defending:
            leader = find_leader(ctx.state.scores, mods.leader_target_threshold)
        queen_seen = queen_in_trick(ctx.trick) or (bool(memory) and memory.is_queen_played())

        scored = []
        for card in ctx.valid_cards:
            sc = self.new_candidate(card, self.base)
            if is_queen_of_spades(card):
                if defending:
                    if winner == shooter_idx:
                        sc.add(self.queen_to_shooter, "Don't give Q♠ to shooter")
                    else:
                        sc.add(self.queen_on_non_shooter, "Dump Q♠ on non-shooter")
                else:
                    self.score_targeted(sc, self.queen_of_spades, 1.0, ctx, mods, targeting,
                                        winner, leader)
            elif is_heart(card):
                heart_value = self.heart_base + card.value * self.heart_rank_mult
                if defending:
                    if winner == shooter_idx:
                        sc.add(self.hearts_to_shooter, "Don't give hearts to shooter")
                    else:
                        sc.add(heart_value, "Dump heart on non-shooter")
                else:
                    self.score_targeted(sc, heart_value, self.heart_hold_ratio, ctx, mods,
                                        targeting, winner, leader)
            elif card.value >= self.high_card_min:
                if defending:
                    # keep higher cards longer (i.e. dump J before A)
                    sc.add(self.defense_keep_high + card.value * self.defense_keep_rank_mult,
                           "Keep high card (moon defense)")
                else:
                    sc.add(card.value * self.high_card_rank_mult + mods.high_card_dump_bonus,
                           "Dump high card")

            if card.suit == spades and card.value < queen.value:
                if not queen_seen:
                    sc.add(self.keep_spade_queen_out + card.value * self.keep_spade_queen_out_mult,
                           "Keep spade, Q♠ still out")
                else:
                    sc.add(self.keep_low_spade + card.value * self.keep_low_spade_mult,
                           "Keep low spade")
            scored.append(sc)
        return scored

    def score_targeted(self, sc: ScoredCard, value: float, hold_ratio: float,
                       ctx: PlayContext, mods: Modifiers, targeting: bool,
                       winner: Optional[int], leader: Optional[int]) -> None:
        """Dump value for a penalty card, subject to leader targeting
        """
        tag = "Q♠" if is_queen_of_spades(sc.card) else "heart"
        if not targeting:
            sc.add(value, f"Dump {tag}")
            return
        if leader is not None and winner == leader:
            sc.add(value + self.dump_on_leader, f"Dump {tag} on leader")
            return
        hold_factor = mods.leader_targeting_factor * hold_ratio
        if ctx.trick_num >= self.late_round_trick:
            hold_factor *= self.late_round_hold_reduction
        sc.add(value * (1.0 - hold_factor), f"Hold {tag} for leader ({hold_factor:.2f})")

    def score_moon(self, card: Card) -> ScoredCard:
        ms = self.moon_scores
        sc = self.new_candidate(card, self.base)
        if is_penalty_card(card):
            sc.add(ms['penalty_card'], "Moon: keep penalty cards")
        if card.value <= ms['low_max']:
            sc.add(ms['low_base'] + (ms['low_max'] + 1 - card.value) * ms['low_per_rank'],
                   "Moon: dump low card")
        elif card.value <= ms['mid_max']:
            sc.add(ms['mid_card'], "Moon: dump mid card")
        if card.value >= ms['high_min'] and not is_penalty_card(card):
            sc.add(ms['high_card'], "Moon: keep high cards for control")
        return sc
