# -*- coding: utf-8 -*-

from typing import NamedTuple
from collections.abc import Sequence

from ..core import ConfigError, cfg, log
from ..card import SUITS, Card, hearts, spades, queen, king, ace
from ..card import ACE_OF_HEARTS, QUEEN_OF_SPADES, card_by_value, is_queen_of_spades
from ..scoring.base import ScoredCard
from .hand import HandAnalysis

##################
# MoonEvaluation #
##################

class MoonEvaluation(NamedTuple):
    should_attempt: bool
    confidence:     float  # score, clamped to [0, 100]
    score:          float
    reasons:        list[str]

################
# MoonAnalysis #
################

class MoonAnalysis(HandAnalysis):
    """Evaluates a hand for shooting the moon, and (if committed) scores cards for passing
    with the normal priorities inverted (keep high, pass low).

    The evaluation score is additive, based on the following aspects of the hand:

    - Control of the critical cards (A♥, and Q♠ or the spades that can catch it)
    - High cards (Q/K/A) by suit, and the number of suits they cover
    - Suit length (controlled long suits, very long suits, long hearts)
    - Short suits without control, and a surplus of low cards (hard to win tricks)

    Parameters are loaded from ``base_analysis_params`` for the class name (example values
    shown here--see base_config.yml for the actual base values)::

      attempt_threshold:  75
      critical_scores:
        ace_of_hearts:      25
        no_ace_of_hearts:   -30
        queen_of_spades:    20
        ace_king_of_spades: 27
        ace_of_spades:      15
        king_of_spades:     6
        no_spade_control:   -50
      high_card_scores:   {14: 8, 13: 6, 12: 4}
      ...

    Note that a hand without A♥ never attempts, regardless of score.
    """
    # the following annotations represent the parameters that are specified in the config
    # file for the class name under `base_analysis_params` (and which may be overridden
    # under a `moon_analysis` parameter for a parent strategy's configuration)
    attempt_threshold:     float
    critical_scores:       dict[str, float]
    high_card_scores:      dict[int, float]
    suit_spread_min:       int
    suit_spread_bonus:     float
    controlled_suit_min:   int
    controlled_suit_bonus: float
    long_suit_min:         int
    long_suit_per_card:    float
    long_hearts_min:       int
    long_hearts_bonus:     float
    short_suit_max:        int
    short_suit_penalty:    float
    low_card_max:          int
    low_cards_min:         int
    low_card_penalty:      float
    pass_scores:           dict[str, float]

    def __init__(self, hand: Sequence[Card], **kwargs):
        """Note that config parameters passed in through ``kwargs`` will override the
        values specified in base_config.yml (the entire dict must be provided for dict
        parameters)
        """
        super().__init__(hand)
        class_name = type(self).__name__
        base_params = cfg.config('base_analysis_params')
        if class_name not in base_params:
            raise ConfigError(f"Analysis class '{class_name}' does not exist")
        for key, base_value in base_params[class_name].items():
            setattr(self, key, kwargs[key] if key in kwargs else base_value)

    def evaluate(self, threshold_adj: float = 0.0) -> MoonEvaluation:
        """Note that ``threshold_adj`` is typically the moon threshold adjustment from the
        aggressiveness modifiers (negative makes an attempt more likely)
        """
        score = 0.0
        reasons = []
        crit = self.critical_scores

        if self.has_card(ACE_OF_HEARTS):
            score += crit['ace_of_hearts']
            reasons.append("Has A♥")
        else:
            score += crit['no_ace_of_hearts']
            reasons.append("Missing ace of hearts (A♥)")

        has_ace_spades = self.has_card(card_by_value(ace.value, spades))
        has_king_spades = self.has_card(card_by_value(king.value, spades))
        if self.has_card(QUEEN_OF_SPADES):
            score += crit['queen_of_spades']
            reasons.append("Has Q♠")
        elif has_ace_spades and has_king_spades:
            score += crit['ace_king_of_spades']
            reasons.append("Has A♠ and K♠ (can catch Q♠)")
        elif has_ace_spades:
            score += crit['ace_of_spades']
            reasons.append("Has A♠ (might catch Q♠)")
        elif has_king_spades:
            score += crit['king_of_spades']
            reasons.append("Has K♠ only")
        else:
            score += crit['no_spade_control']
            reasons.append("No Q♠ control")

        # A♥ and K♠/Q♠ are already accounted for above
        skip = {ace.value: hearts, king.value: spades, queen.value: spades}
        high_cards = self.high_cards_by_suit()
        total_high = 0
        suits_covered = 0
        for suit in SUITS:
            counts = high_cards[suit]
            suit_high = sum(counts.values())
            total_high += suit_high
            if suit_high:
                suits_covered += 1
            for value, bonus in self.high_card_scores.items():
                if counts[int(value)] and skip[int(value)] != suit:
                    score += bonus
        reasons.append(f"{total_high} high cards")
        if suits_covered >= self.suit_spread_min:
            score += self.suit_spread_bonus
            reasons.append(f"High cards in {suits_covered} suits")

        for suit, cards in self.get_suit_cards().items():
            count = len(cards)
            has_ace = bool(cards) and cards[0].rank == ace
            if count >= self.controlled_suit_min and has_ace:
                score += self.controlled_suit_bonus
                reasons.append(f"Controls {suit.name} ({count} cards with ace)")
            if count >= self.long_suit_min:
                score += (count - self.long_suit_min + 1) * self.long_suit_per_card
                reasons.append(f"Long {suit.name} ({count} cards)")
            if suit == hearts and count >= self.long_hearts_min:
                score += self.long_hearts_bonus
                reasons.append(f"{count} hearts")
            if 0 < count <= self.short_suit_max and not has_ace:
                score += self.short_suit_penalty
                reasons.append(f"Weak in {suit.name} ({count} cards, no ace)")

        low_cards = len([c for c in self.hand if c.value <= self.low_card_max])
        if low_cards >= self.low_cards_min:
            score += (low_cards - self.low_cards_min + 1) * self.low_card_penalty
            reasons.append(f"{low_cards} low cards")

        threshold = self.attempt_threshold + threshold_adj
        should_attempt = score >= threshold and self.has_card(ACE_OF_HEARTS)
        confidence = max(0.0, min(100.0, score))
        log.trace(f"Moon evaluation: score {score:g} (threshold {threshold:g}), "
                  f"attempt={should_attempt}")
        return MoonEvaluation(should_attempt, confidence, score, reasons)

    def is_keep_card(self, card: Card) -> bool:
        if card == ACE_OF_HEARTS or is_queen_of_spades(card):
            return True
        if card.suit == spades and card.value >= king.value:
            return True
        if card.value >= queen.value:
            return True
        return card.suit == hearts and card.value >= self.pass_scores['keep_heart_min']

    def keep_cards(self) -> list[Card]:
        """Cards needed for a moon attempt (never to be passed)
        """
        return [c for c in self.hand if self.is_keep_card(c)]

    def is_critical_card(self, card: Card) -> bool:
        return (card == ACE_OF_HEARTS or is_queen_of_spades(card) or
                (card.suit == spades and card.value >= king.value))

    def score_for_passing(self, explain: bool = True) -> list[ScoredCard]:
        """Higher score means more desirable to pass; low cards are passed first, and
        the critical cards get an overriding penalty so they are never selected
        """
        ps = self.pass_scores
        dist = self.distribution()
        scored = []
        for card in self.hand:
            sc = ScoredCard(card, 0.0, explain)
            rank = card.value
            if self.is_keep_card(card):
                sc.add(ps['keep_card'], "Keep for moon")
            if rank <= ps['low_max']:
                sc.add(ps['low_base'] + (ps['low_max'] + 1 - rank) * ps['low_per_rank'],
                       "Low card, pass")
            elif rank <= ps['mid_low_max']:
                sc.add(ps['mid_low_base'] + (ps['mid_low_max'] + 1 - rank) *
                       ps['mid_low_per_rank'], "Mid-low card")
            elif rank <= ps['mid_max']:
                sc.add(ps['mid_card'], "Mid card, prefer to keep")
            else:
                sc.add(ps['high_base'] - (rank - ps['mid_max']) * ps['high_per_rank'],
                       "High card, keep")

            if dist[card.suit] <= ps['short_suit_max'] and rank < queen.value:
                sc.add(ps['short_suit_bonus'], "Short suit, non-critical")

            if card == ACE_OF_HEARTS:
                sc.add(ps['ace_of_hearts'], "Never pass A♥")
            if is_queen_of_spades(card):
                sc.add(ps['queen_of_spades'], "Never pass Q♠")
            if card.suit == spades and card.value >= king.value:
                sc.add(ps['high_spade'], "Never pass high spades")
            scored.append(sc)
        return scored
