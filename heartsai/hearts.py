# -*- coding: utf-8 -*-
"""This module contains game-/domain-specific stuff on top of the (more) generic building
blocks (e.g. cards), and can be imported by either the strategy or game-playing modules.
The legality functions here (``valid_cards()``, ``is_first_trick()``, ``trick_winner()``)
are the default rules collaborator; strategies only ever consume their results.
"""

from enum import Enum
from typing import Optional, NamedTuple
from collections.abc import Sequence

from .core import LogicError
from .card import Suit, Card, hearts, is_heart, is_penalty_card, is_two_of_clubs

NUM_PLAYERS  = 4
HAND_CARDS   = 13
NUM_TRICKS   = HAND_CARDS
TOTAL_POINTS = 26
PASS_CARDS   = 3

Play = tuple[int, Card]  # (player index, card)

#################
# PassDirection #
#################

class PassDirection(Enum):
    """Value is the seat offset for the pass target
    """
    LEFT   = 1
    RIGHT  = 3
    ACROSS = 2
    NONE   = 0

    def __str__(self):
        return self.name.lower()

PASS_ROTATION = (PassDirection.LEFT, PassDirection.RIGHT, PassDirection.ACROSS,
                 PassDirection.NONE)

def pass_direction(round_num: int) -> PassDirection:
    """Rotation is left, right, across, hold (first round = 1)
    """
    return PASS_ROTATION[(round_num - 1) % len(PASS_ROTATION)]

def pass_target(from_pos: int, direction: PassDirection) -> int:
    return (from_pos + direction.value) % NUM_PLAYERS

#########
# Trick #
#########

class Trick:
    """In-progress (or completed) trick; plays are kept in play order
    """
    plays:        list[Play]
    winning_card: Optional[Card]
    winning_pos:  Optional[int]

    def __init__(self, plays: Sequence[Play] = ()):
        self.plays        = []
        self.winning_card = None
        self.winning_pos  = None
        for pos, card in plays:
            self.play_card(pos, card)

    def __len__(self):
        return len(self.plays)

    def __repr__(self):
        return repr(self.plays)

    def __str__(self):
        return ' '.join(str(p[1]) for p in self.plays)

    @property
    def lead_suit(self) -> Optional[Suit]:
        return self.plays[0][1].suit if self.plays else None

    @property
    def cards(self) -> list[Card]:
        return [card for _, card in self.plays]

    @property
    def points(self) -> int:
        return sum(card.points for _, card in self.plays)

    def play_card(self, pos: int, card: Card) -> bool:
        """Returns `True` if new winning card
        """
        if any(p == pos for p, _ in self.plays):
            raise LogicError(f"Position {pos} played twice")
        if len(self.plays) >= NUM_PLAYERS:
            raise LogicError("Trick already complete")
        self.plays.append((pos, card))
        if self.winning_card is None:
            self.winning_card = card
            self.winning_pos  = pos
            return True
        if card.suit == self.winning_card.suit and card.value > self.winning_card.value:
            self.winning_card = card
            self.winning_pos  = pos
            return True
        return False

    def is_complete(self) -> bool:
        return len(self.plays) == NUM_PLAYERS

#############
# GameState #
#############

class GameState(NamedTuple):
    """Read-only snapshot for a single decision; owned by the caller (strategies must not
    modify any of the contained lists).  ``trick_num`` is the number of completed tricks
    in the current round (0 = first trick in progress).  ``points_taken`` (penalty cards
    captured so far, by player) is optional.
    """
    player_names:   list[str]
    hands:          list[list[Card]]
    scores:         list[int]          # cumulative, before this round
    round_scores:   list[int]
    current_trick:  list[Play]
    hearts_broken:  bool
    trick_num:      int
    pass_direction: PassDirection
    round_num:      int = 1
    points_taken:   Optional[list[list[Card]]] = None

    @property
    def num_players(self) -> int:
        return len(self.player_names)

###########
# Context #
###########

class PassContext(NamedTuple):
    hand:       list[Card]
    direction:  PassDirection
    state:      GameState
    player_idx: int

class PlayContext(NamedTuple):
    state:         GameState
    player_idx:    int
    valid_cards:   list[Card]
    is_leading:    bool
    lead_suit:     Optional[Suit]
    trick:         list[Play]
    tricks_played: int
    is_first_trick: bool

    @property
    def hand(self) -> list[Card]:
        return self.state.hands[self.player_idx]

    @property
    def trick_num(self) -> int:
        """Current trick sequence for the round (first trick = 1)
        """
        return self.tricks_played + 1

def pass_context(state: GameState, pos: int) -> PassContext:
    return PassContext(list(state.hands[pos]), state.pass_direction, state, pos)

def play_context(state: GameState, pos: int) -> PlayContext:
    """Build the per-decision context for the player at ``pos``, deriving legal cards
    from the rules collaborator
    """
    hand = state.hands[pos]
    trick = state.current_trick
    first_trick = is_first_trick(state)
    valid = valid_cards(hand, trick, state.hearts_broken, first_trick)
    lead_suit = trick[0][1].suit if trick else None
    return PlayContext(state, pos, valid, not trick, lead_suit, trick, state.trick_num,
                       first_trick)

############
# Legality #
############

def is_first_trick(state: GameState) -> bool:
    return state.trick_num == 0

def can_play(card: Card, hand: Sequence[Card], trick: Sequence[Play],
             hearts_broken: bool, first_trick: bool) -> bool:
    """Note that penalty cards may be played on the first trick only if the hand holds
    nothing else
    """
    if card not in hand:
        return False
    if first_trick and not trick:
        return is_two_of_clubs(card)

    if trick:
        lead_suit = trick[0][1].suit
        if any(c.suit == lead_suit for c in hand):
            return card.suit == lead_suit
        if first_trick and is_penalty_card(card):
            return all(is_penalty_card(c) for c in hand)
        return True

    if is_heart(card) and not hearts_broken:
        return all(is_heart(c) for c in hand)
    return True

def valid_cards(hand: Sequence[Card], trick: Sequence[Play], hearts_broken: bool,
                first_trick: bool) -> list[Card]:
    return [c for c in hand if can_play(c, hand, trick, hearts_broken, first_trick)]

def trick_winner(trick: Sequence[Play]) -> int:
    """Returns the player index for the winning play
    """
    if not trick:
        raise LogicError("Cannot determine winner of empty trick")
    lead_suit = trick[0][1].suit
    win_pos, win_card = trick[0]
    for pos, card in trick[1:]:
        if card.suit == lead_suit and card.value > win_card.value:
            win_pos, win_card = pos, card
    return win_pos

def breaks_hearts(card: Card) -> bool:
    return card.suit == hearts
