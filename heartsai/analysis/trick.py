# -*- coding: utf-8 -*-

"""Stateless queries over an in-progress trick (given as a sequence of ``Play`` tuples,
in play order)
"""

from collections.abc import Sequence
from typing import Optional

from ..card import Suit, is_queen_of_spades
from ..hearts import Play, NUM_PLAYERS, trick_winner

def penalty_points(trick: Sequence[Play]) -> int:
    return sum(card.points for _, card in trick)

def highest_rank(trick: Sequence[Play], lead_suit: Suit) -> int:
    """Highest rank value of the lead suit played so far (0 if none)
    """
    return max((card.value for _, card in trick if card.suit == lead_suit), default=0)

def is_last_to_play(trick: Sequence[Play]) -> bool:
    return len(trick) == NUM_PLAYERS - 1

def queen_in_trick(trick: Sequence[Play]) -> bool:
    return any(is_queen_of_spades(card) for _, card in trick)

def current_winner(trick: Sequence[Play]) -> Optional[int]:
    """Player index currently holding the trick, or ``None`` if nothing played
    """
    return trick_winner(trick) if trick else None

def players_yet_to_act(trick: Sequence[Play], self_pos: int,
                       num_players: int = NUM_PLAYERS) -> list[int]:
    """Positions that still have to play after ``self_pos`` in the current trick
    """
    played = {pos for pos, _ in trick}
    return [pos for pos in range(num_players) if pos != self_pos and pos not in played]
