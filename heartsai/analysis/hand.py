# -*- coding: utf-8 -*-

"""See __init__.py for module-level documentation
"""

from collections.abc import Sequence

from ..card import Suit, SUITS, Card, spades, queen, jack

SuitCards = dict[Suit, list[Card]]

HIGH_CARD_VALUE = jack.value  # J or better

################
# HandAnalysis #
################

class HandAnalysis:
    """This class provides helper methods for evaluating hands, typically by extracting
    useful subsets (i.e. lists) of cards.  Counts can then be easily derived using
    ``len()``.  There is no caching of results, so calls reflect the current state of the
    underlying card list.
    """
    hand: list[Card]

    def __init__(self, hand: Sequence[Card]):
        self.hand = list(hand)

    def get_suit_cards(self) -> SuitCards:
        """Return list of cards indexed by suit, sorted by descending rank within each
        suit
        """
        by_suit = {suit: [] for suit in SUITS}
        for card in self.hand:
            by_suit[card.suit].append(card)
        for cards in by_suit.values():
            cards.sort(key=lambda c: c.value, reverse=True)
        return by_suit

    def suit_cards(self, suit: Suit) -> list[Card]:
        return self.get_suit_cards()[suit]

    def distribution(self) -> dict[Suit, int]:
        return {suit: len(cards) for suit, cards in self.get_suit_cards().items()}

    def voids(self) -> list[Suit]:
        return [suit for suit, cards in self.get_suit_cards().items() if not cards]

    def has_card(self, card: Card) -> bool:
        return card in self.hand

    def low_spades(self) -> list[Card]:
        """Spades below the queen (i.e. cards that protect Q♠, or duck under it)
        """
        return [c for c in self.hand if c.suit == spades and c.value < queen.value]

    def has_protected_high_cards(self, suit: Suit) -> bool:
        """High cards (J or better) in a suit are "protected" if there are 3 or more
        cards below the lowest of them (requires 4+ cards in the suit); vacuously true if
        there are no high cards
        """
        cards = self.suit_cards(suit)
        if len(cards) < 4:
            return False
        high_cards = [c for c in cards if c.value >= HIGH_CARD_VALUE]
        if not high_cards:
            return True
        lowest_high = min(c.value for c in high_cards)
        return len([c for c in cards if c.value < lowest_high]) >= 3

    def voiding_candidates(self) -> list[Card]:
        """Cards from suits with 1-3 cards (i.e. voidable by passing), shortest suits
        first
        """
        dist = self.distribution()
        short_suits = [s for s in SUITS if 1 <= dist[s] <= 3]
        short_suits.sort(key=lambda s: dist[s])
        return [card for suit in short_suits for card in self.suit_cards(suit)]

    def high_cards_by_suit(self) -> dict[Suit, dict[int, int]]:
        """Count of Q/K/A by suit, indexed by rank value
        """
        counts = {suit: {12: 0, 13: 0, 14: 0} for suit in SUITS}
        for card in self.hand:
            if card.value in counts[card.suit]:
                counts[card.suit][card.value] += 1
        return counts
