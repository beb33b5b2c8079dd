# -*- coding: utf-8 -*-

"""Aggressiveness model for a playing agent.  Scale is 0.0 (very conservative) to 1.0
(very aggressive):

- 0.0-0.3: conservative - protect the lead, duck often, avoid risky plays
- 0.4-0.6: balanced
- 0.7-1.0: aggressive - take risks, shoot the moon more, dump high cards readily

The base value is drawn once per game (personality), and an effective value is derived
for every decision by adjusting for the current score standing (higher cumulative score
is worse in hearts, so trailing players become more aggressive).  All of the curve
constants come from the ``aggressiveness`` section of the config file.
"""

from typing import NamedTuple, Optional
from collections.abc import Sequence
from random import Random

from .core import cfg, LogicError
from .hearts import GameState, NUM_PLAYERS

AggLabels = list[tuple[float, str]]

#############
# Modifiers #
#############

class Modifiers(NamedTuple):
    """Scoring modifiers derived from an effective aggressiveness value
    """
    aggressiveness:            float
    moon_threshold_adjustment: float  # added to moon attempt threshold (negative = easier)
    duck_multiplier:           float
    risk_multiplier:           float
    high_card_dump_bonus:      float
    bluff_probability:         float
    leader_target_threshold:   float  # minimum margin (points) to identify leader
    leader_targeting_factor:   float  # fraction of dump bonus withheld from non-leaders

def agg_params() -> dict:
    return cfg.config('aggressiveness')

def generate_base(rng: Random) -> float:
    """Draw personality value, uniform over the configured band
    """
    params = agg_params()
    return rng.uniform(params['base_min'], params['base_max'])

def score_adjustment(state: GameState, player_idx: int) -> float:
    """Positive if we are behind the average opponent (i.e. higher score), bounded by
    ``max_adjustment``; no adjustment if the score list is incomplete
    """
    params = agg_params()
    scores = state.scores
    if len(scores) < NUM_PLAYERS:
        return 0.0
    opp_scores = [s for i, s in enumerate(scores) if i != player_idx]
    delta = scores[player_idx] - sum(opp_scores) / len(opp_scores)
    max_adj = params['max_adjustment']
    return max(-max_adj, min(max_adj, delta / params['score_divisor']))

def effective(base: float, state: GameState, player_idx: int) -> float:
    return max(0.0, min(1.0, base + score_adjustment(state, player_idx)))

def modifiers(aggressiveness: float) -> Modifiers:
    """Linear interpolation of all scoring modifiers across the aggressiveness scale
    """
    if not 0.0 <= aggressiveness <= 1.0:
        raise LogicError(f"Aggressiveness {aggressiveness} out of range")
    p = agg_params()
    a = aggressiveness
    return Modifiers(
        aggressiveness            = a,
        moon_threshold_adjustment = -(a - 0.5) * p['moon_threshold_range'],
        duck_multiplier           = p['duck_mult_base'] - a * p['duck_mult_factor'],
        risk_multiplier           = p['risk_mult_base'] - a * p['risk_mult_factor'],
        high_card_dump_bonus      = a * p['high_card_dump_max'],
        bluff_probability         = p['bluff_base'] + a * p['bluff_range'],
        leader_target_threshold   = p['leader_threshold_base'] - a * p['leader_threshold_range'],
        leader_targeting_factor   = a * p['leader_targeting_max'])

def label(aggressiveness: float) -> str:
    labels: AggLabels = agg_params()['labels']
    for upper, name in labels[:-1]:
        if aggressiveness < upper:
            return name
    return labels[-1][1]

def find_leader(scores: Sequence[int], threshold: float) -> Optional[int]:
    """Return index of the scoreboard leader (lowest cumulative score), if ahead of the
    next best score by at least ``threshold`` points
    """
    if len(scores) < 2:
        return None
    ordered = sorted(scores)
    if ordered[1] - ordered[0] >= threshold:
        return list(scores).index(ordered[0])
    return None
