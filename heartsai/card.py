#!/usr/bin/env python
# -*- coding: utf-8 -*-

from typing import NamedTuple
from random import Random

from .core import validate_basedata

##############
# Base Cards #
##############

"""
Suits
    C - 0
    D - 1
    S - 2
    H - 3

Ranks (idx -> value)
    2  - 0  (2)
    ...
    10 - 8  (10)
    J  - 9  (11)
    Q  - 10 (12)
    K  - 11 (13)
    A  - 12 (14)

Cards
    idx = suit.idx * 13 + rank.idx

Points
    hearts - 1
    Q♠     - 13
"""

########
# Rank #
########

class Rank(NamedTuple):
    """``value`` is the conventional numeric rank (2-14), used for all comparisons
    """
    idx:   int
    name:  str
    value: int
    tag:   str

    def __repr__(self):
        return str(self._asdict())

    def __str__(self):
        return self.tag

two         = Rank(0,  'two',   2,  '2')
three       = Rank(1,  'three', 3,  '3')
four        = Rank(2,  'four',  4,  '4')
five        = Rank(3,  'five',  5,  '5')
six         = Rank(4,  'six',   6,  '6')
seven       = Rank(5,  'seven', 7,  '7')
eight       = Rank(6,  'eight', 8,  '8')
nine        = Rank(7,  'nine',  9,  '9')
ten         = Rank(8,  'ten',   10, '10')
jack        = Rank(9,  'jack',  11, 'J')
queen       = Rank(10, 'queen', 12, 'Q')
king        = Rank(11, 'king',  13, 'K')
ace         = Rank(12, 'ace',   14, 'A')

RANKS       = (two, three, four, five, six, seven, eight, nine, ten, jack, queen, king, ace)

########
# Suit #
########

class Suit(NamedTuple):
    """
    """
    idx:  int
    name: str
    tag:  str

    def __repr__(self):
        return str(self._asdict())

    def __str__(self):
        return self.tag

clubs    = Suit(0, 'clubs',    '♣')
diamonds = Suit(1, 'diamonds', '♦')
spades   = Suit(2, 'spades',   '♠')
hearts   = Suit(3, 'hearts',   '♥')

SUITS    = (clubs, diamonds, spades, hearts)

########
# Card #
########

QUEEN_POINTS = 13
HEART_POINTS = 1

class Card(NamedTuple):
    """Immutable; the 52 instances are created once (see ``CARDS``), so identity and
    equality are interchangeable
    """
    idx:     int
    rank:    Rank
    suit:    Suit
    name:    str
    tag:     str
    points:  int
    sortkey: int

    def __repr__(self):
        return str(self._asdict())

    def __str__(self):
        return self.tag

    def __lt__(self, other):
        """Use ``sortkey`` for comparison (e.g. sort)
        """
        return self.sortkey < other.sortkey

    @property
    def value(self) -> int:
        """Shortcut for ``rank.value``
        """
        return self.rank.value

def card_points(rank: Rank, suit: Suit) -> int:
    if suit == hearts:
        return HEART_POINTS
    if suit == spades and rank == queen:
        return QUEEN_POINTS
    return 0

card_list = []
for idx in range(0, len(SUITS) * len(RANKS)):
    suit    = SUITS[idx // len(RANKS)]
    rank    = RANKS[idx % len(RANKS)]
    name    = "%s of %s" % (rank.name.capitalize(), suit.name.capitalize())
    tag     = "%s%s" % (rank.tag, suit.tag)
    points  = card_points(rank, suit)
    sortkey = idx

    card = Card(idx, rank, suit, name, tag, points, sortkey)
    card_list.append(card)

CARDS = tuple(card_list)
del card_list

def get_card(idx: int | str) -> Card:
    """Accepts string representation of the index (e.g. coming from a form)
    """
    return CARDS[int(idx)]

def find_card(rank: Rank, suit: Suit) -> Card:
    return CARDS[suit.idx * len(RANKS) + rank.idx]

def rank_by_value(value: int) -> Rank:
    """Look up rank by conventional numeric value (2-14)
    """
    if not 2 <= value <= 14:
        raise IndexError(f"Rank value {value} out of range")
    return RANKS[value - 2]

def card_by_value(value: int, suit: Suit) -> Card:
    return find_card(rank_by_value(value), suit)

QUEEN_OF_SPADES = find_card(queen, spades)
ACE_OF_HEARTS   = find_card(ace, hearts)
TWO_OF_CLUBS    = find_card(two, clubs)

##############
# Predicates #
##############

def is_heart(card: Card) -> bool:
    return card.suit == hearts

def is_queen_of_spades(card: Card) -> bool:
    return card == QUEEN_OF_SPADES

def is_penalty_card(card: Card) -> bool:
    return card.points > 0

def is_two_of_clubs(card: Card) -> bool:
    return card == TWO_OF_CLUBS

########
# Deck #
########

Deck = list[Card]
mod_rand = Random()  # isolate deck shuffles from other usages of `random`

def set_seed(rand_seed: int) -> None:
    """Set seed for the local (i.e. module-specific) instance of ``random.Random`` (see
    ``get_deck()``)
    """
    mod_rand.seed(rand_seed)

def get_deck() -> Deck:
    """Get a shuffled deck of cards.  This function uses a local (i.e. module-specific)
    instance of ``random.Random`` for isolation from the other callers of the ``random``
    library.  The instantiating program has the option to initialize the state of the
    local instance using ``set_seed()`` for repeatability of deals.
    """
    deck = [c for c in mod_rand.sample(CARDS, k=len(CARDS))]
    return deck

##############
# validation #
##############

validate_basedata(RANKS)
validate_basedata(SUITS)
validate_basedata(CARDS)
