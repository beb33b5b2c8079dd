# -*- coding: utf-8 -*-

from collections.abc import Sequence

from ..card import Card, spades, queen, king, QUEEN_OF_SPADES, is_queen_of_spades
from ..hearts import GameState
from ..analysis.hand import HandAnalysis
from .base import Scorer, ScoredCard

##############
# PassScorer #
##############

class PassScorer(Scorer):
    """Scoring for cards to pass in normal mode (higher score means more desirable to pass
    away).  Basic priorities:

    1. Rank - high cards win tricks, so unprotected high cards go first
    2. A♠/K♠ without Q♠ (can catch the queen)
    3. Q♠ without enough low spades for protection
    4. Voiding opportunities, but only for cards of rank 6 or higher (low cards are too
       valuable for ducking to be passed for voiding)
    5. Hearts as a small tiebreaker

    Advanced adjustments are then applied on top of the basic scores (void candidates,
    spade defense, well-protected high cards, and dumping high cards when protecting a
    big lead in the game).
    """
    # base scoring
    low_card_threshold:     int
    low_card_protection:    float
    high_card_min:          int
    unprotected_high_base:  int
    unprotected_high_mult:  float
    high_spade_no_queen:    float
    queen_unprotected:      float
    queen_protected:        float
    min_low_cards:          int
    void_suit_max:          int
    void_suit_base:         int
    void_suit_mult:         float
    low_spade_protection:   float
    # advanced adjustments
    void_opportunity:       float
    void_spade_min:         int
    spade_defense_mult:     float
    protected_suit_size:    int
    protected_low_below:    int
    well_protected_high:    float
    winning_lead_margin:    int
    protect_lead_min_rank:  int
    protect_lead_dump_high: float

    def score(self, hand: Sequence[Card], state: GameState = None,
              player_idx: int = None) -> list[ScoredCard]:
        """Note that the game score adjustment is skipped if ``state`` is not specified
        """
        analysis = HandAnalysis(hand)
        scored = [self.base_score(card, analysis) for card in hand]
        self.adjust(scored, analysis, state, player_idx)
        return scored

    def base_score(self, card: Card, analysis: HandAnalysis) -> ScoredCard:
        sc = self.new_candidate(card)
        dist = analysis.distribution()

        if card.value < self.low_card_threshold:
            sc.add(self.low_card_protection, "Low card, valuable for ducking")

        if card.value >= self.high_card_min:
            if not analysis.has_protected_high_cards(card.suit):
                sc.add((card.value - self.unprotected_high_base) * self.unprotected_high_mult,
                       "Unprotected high card")

        if card.suit == spades and card.value >= king.value:
            if not analysis.has_card(QUEEN_OF_SPADES):
                sc.add(self.high_spade_no_queen, "High spade without Q♠")

        if is_queen_of_spades(card):
            if len(analysis.low_spades()) < self.min_low_cards:
                sc.add(self.queen_unprotected, "Q♠ without protection")
            else:
                sc.add(self.queen_protected, "Q♠ with some protection")

        if card.value >= self.low_card_threshold and card.suit != spades:
            count = dist[card.suit]
            if count <= self.void_suit_max:
                sc.add((self.void_suit_base - count) * self.void_suit_mult,
                       f"Void opportunity ({count} in suit)")

        if card.suit == spades and card.value < queen.value:
            sc.add(self.low_spade_protection, "Low spade protection")

        if card.points > 0 and not is_queen_of_spades(card):
            sc.add(card.points, "Heart")
        return sc

    def adjust(self, scored: list[ScoredCard], analysis: HandAnalysis,
               state: GameState = None, player_idx: int = None) -> None:
        dist = analysis.distribution()
        void_cands = [c for c in analysis.voiding_candidates()
                      if c.value >= self.low_card_threshold]
        num_low_spades = len(analysis.low_spades())

        protect_lead = False
        if state and player_idx is not None and len(state.scores) > 1:
            my_score = state.scores[player_idx]
            min_opp = min(s for i, s in enumerate(state.scores) if i != player_idx)
            protect_lead = my_score < min_opp - self.winning_lead_margin

        for sc in scored:
            card = sc.card
            if card in void_cands:
                if card.suit != spades or dist[spades] > self.void_spade_min:
                    sc.add(self.void_opportunity, "Void candidate")

            if card.suit == spades and card.value < queen.value:
                shortfall = self.min_low_cards - min(num_low_spades, self.min_low_cards)
                if shortfall:
                    sc.add(-self.spade_defense_mult * shortfall, "Critical spade defense")

            if dist[card.suit] >= self.protected_suit_size and card.value >= self.high_card_min:
                low_cards = [c for c in analysis.suit_cards(card.suit)
                             if c.value < self.protected_low_below]
                if len(low_cards) >= self.min_low_cards:
                    sc.add(self.well_protected_high, "Well protected high card")

            if protect_lead and card.value >= self.protect_lead_min_rank:
                sc.add(self.protect_lead_dump_high, "Protect lead, pass high card")
