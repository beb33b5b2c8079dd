# -*- coding: utf-8 -*-

from typing import Optional
from random import Random

from ..core import LogicError, log
from ..card import Card, spades, queen, QUEEN_OF_SPADES, is_queen_of_spades
from ..hearts import PlayContext
from ..memory import CardMemory
from ..aggressiveness import Modifiers, modifiers
from ..analysis.trick import (penalty_points, highest_rank, is_last_to_play, queen_in_trick,
                              current_winner, players_yet_to_act)
from .base import Scorer, ScoredCard

NEUTRAL_AGGRESSIVENESS = 0.5

################
# FollowScorer #
################

class FollowScorer(Scorer):
    """Scoring for following suit.  In normal mode, avoid winning tricks with penalty
    points and prefer ducking (with the highest card that still ducks), unless stopping
    another player's moon attempt.  When attempting to shoot the moon, winning is
    rewarded (especially pointed tricks), using the lowest winning card.

    Aggressiveness modifiers scale the duck preference and the penalties for risky wins,
    and determine the bluff probability (taking a safe trick now and then to disguise
    hand strength).  Note that the penalty for winning a trick with an opponent yet to
    act who is known to be void in the lead suit is not subject to the risk multiplier.
    """
    base:                 float
    queen_win:            float
    points_mult:          float
    risk_of_dump:         float
    high_spade_risk_mult: float
    safe_win:             float
    safe_win_rank_mult:   float
    moon_shot_take:       float
    stop_moon:            float
    moon_being_stopped:   float
    void_ahead:           float
    reliable_tricks:      int
    likely_safe:          float
    dump_high_min:        int
    duck:                 float
    bluff_take_safe:      float
    late_game_tricks:     int
    moon_scores:          dict[str, float]

    def score(self, ctx: PlayContext, memory: CardMemory = None,
              shooter_idx: Optional[int] = None, attempting_moon: bool = False,
              mods: Modifiers = None, rng: Random = None) -> list[ScoredCard]:
        """Only the candidates in the lead suit are scored (caller should use the dump
        scorer if void).  ``rng`` is needed for the bluff draw (no bluffing if ``None``);
        a single draw is made per call, and only if the trick context allows bluffing.
        """
        suit_cards = [c for c in ctx.valid_cards if c.suit == ctx.lead_suit]
        if not ctx.trick or not suit_cards:
            raise LogicError("Follow scoring requires a lead and cards in the lead suit")
        mods = mods or modifiers(NEUTRAL_AGGRESSIVENESS)
        trick = ctx.trick
        cur_high = highest_rank(trick, ctx.lead_suit)
        points = penalty_points(trick)
        last_to_play = is_last_to_play(trick)
        forced_to_win = min(c.value for c in suit_cards) > cur_high

        bluff = False
        if rng and last_to_play and points == 0 and not ctx.is_first_trick:
            if ctx.tricks_played < self.late_game_tricks:
                bluff = rng.random() < mods.bluff_probability
                if bluff:
                    log.trace("Bluff draw succeeded")

        scored = []
        for card in suit_cards:
            would_win = card.value > cur_high
            if attempting_moon:
                scored.append(self.score_moon(card, would_win, points))
                continue
            sc = self.new_candidate(card, self.base)
            if would_win:
                self.score_win(sc, ctx, memory, shooter_idx, mods, points, last_to_play,
                               forced_to_win, bluff)
            else:
                sc.add(self.duck * mods.duck_multiplier, "Ducking")
                if shooter_idx is not None and shooter_idx != ctx.player_idx:
                    sc.add(-card.value, "Save high card for moon defense")
                else:
                    sc.add(card.value)
            scored.append(sc)
        return scored

    def score_win(self, sc: ScoredCard, ctx: PlayContext, memory: Optional[CardMemory],
                  shooter_idx: Optional[int], mods: Modifiers, points: int,
                  last_to_play: bool, forced_to_win: bool, bluff: bool) -> None:
        card = sc.card
        if is_queen_of_spades(card) and not ctx.is_first_trick:
            sc.add(self.queen_win + QUEEN_OF_SPADES.points * self.points_mult,
                   "Would win with Q♠")
            return

        queen_seen = queen_in_trick(ctx.trick) or (bool(memory) and memory.is_queen_played())
        if card.suit == spades and card.value > queen.value and not queen_seen:
            if not ctx.is_first_trick:
                sc.add(self.risk_of_dump * self.high_spade_risk_mult * mods.risk_multiplier,
                       "High spade risk, Q♠ still out")

        if ctx.is_first_trick:
            sc.add(self.safe_win + card.value * self.safe_win_rank_mult,
                   "Safe win (first trick)")
            return

        if points > 0:
            self.score_pointed_win(sc, ctx, shooter_idx, points, forced_to_win)
        elif last_to_play:
            sc.add(self.safe_win + card.value * self.safe_win_rank_mult,
                   "Safe win as last player")
            if bluff:
                sc.add(self.bluff_take_safe, "Bluff, take safe trick")
        else:
            self.score_risky_win(sc, ctx, memory, mods, forced_to_win)

    def score_pointed_win(self, sc: ScoredCard, ctx: PlayContext, shooter_idx: Optional[int],
                          points: int, forced_to_win: bool) -> None:
        if shooter_idx is not None and shooter_idx == ctx.player_idx:
            sc.add(self.moon_shot_take, "Moon shot, take penalties")
        elif shooter_idx is not None:
            winner = current_winner(ctx.trick)
            if winner is not None and winner != shooter_idx:
                sc.add(self.moon_being_stopped, "Moon already stopped by other player")
            else:
                sc.add(self.stop_moon, "Stop moon, take points")
        else:
            sc.add(self.queen_win + points * self.points_mult, f"Would win {points} pts")
            if forced_to_win:
                sc.add(sc.card.value, "Forced win, dump highest")

    def score_risky_win(self, sc: ScoredCard, ctx: PlayContext, memory: Optional[CardMemory],
                        mods: Modifiers, forced_to_win: bool) -> None:
        """Pointless trick, with opponents still to play
        """
        if memory:
            to_act = players_yet_to_act(ctx.trick, ctx.player_idx, ctx.state.num_players)
            if any(memory.is_player_void(i, ctx.lead_suit) for i in to_act):
                sc.add(self.void_ahead, "Known void player(s) to act")
                return

        if memory and memory.tricks_counted() >= self.reliable_tricks:
            sc.add(self.likely_safe, "Likely safe (memory)")
            if forced_to_win or sc.card.value >= self.dump_high_min:
                sc.add(sc.card.value, "Dump high card")
        else:
            sc.add(self.risk_of_dump * mods.risk_multiplier, "Risk of penalty dump")

    def score_moon(self, card: Card, would_win: bool, points: int) -> ScoredCard:
        ms = self.moon_scores
        sc = self.new_candidate(card, self.base)
        if would_win:
            sc.add(ms['win'], "Moon: win trick")
            if points > 0:
                sc.add(points * ms['points_mult'], f"Moon: collect {points} pts")
            sc.add(card.value * ms['win_rank_mult'], "Moon: win efficiently")
        else:
            sc.add(card.value * ms['lose_rank_mult'], "Moon: can't win, save high cards")
            if points > 0:
                sc.add(ms['lose_points'], "Moon: points lost to others")
        return sc
