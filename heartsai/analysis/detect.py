# -*- coding: utf-8 -*-

from typing import Optional
from collections.abc import Sequence

from ..core import ConfigError, cfg, log
from ..card import is_heart, is_queen_of_spades
from ..hearts import GameState, Play
from ..memory import CardMemory

################
# MoonDetector #
################

class MoonDetector:
    """Infers whether any player is attempting to shoot the moon, based on (in order):

    1. Round score distribution (one player has points, nobody else does)
    2. Composition of captured penalty cards
    3. Alarming leads in the in-progress trick
    4. A player holding all of the points taken so far, with a heavy heart count
    5. Behavioral signals accumulated in ``CardMemory`` (if available)

    The first matching rule wins.  Parameters are loaded from ``base_analysis_params``
    for the class name, and may be overridden by constructor kwargs.
    """
    # the following annotations represent the parameters that are specified in the config
    # file for the class name under `base_analysis_params`
    score_threshold:       int
    hearts_with_queen:     int
    hearts_without_queen:  int
    alarm_heart_min_rank:  int
    alarm_min_points:      int
    dominant_hearts:       int
    dominant_queen_hearts: int
    dominant_no_queen:     int
    suspicion_threshold:   int
    early_suspicion:       int
    early_min_points:      int

    def __init__(self, **kwargs):
        class_name = type(self).__name__
        base_params = cfg.config('base_analysis_params')
        if class_name not in base_params:
            raise ConfigError(f"Analysis class '{class_name}' does not exist")
        for key, base_value in base_params[class_name].items():
            setattr(self, key, kwargs[key] if key in kwargs else base_value)

    @staticmethod
    def others_have_points(round_scores: Sequence[int], player_idx: int) -> bool:
        return any(s > 0 for i, s in enumerate(round_scores) if i != player_idx)

    def detect(self, state: GameState, memory: CardMemory = None,
               current_trick: Sequence[Play] = None) -> Optional[int]:
        """Return index of the suspected shooter, or ``None``; ``current_trick`` defaults
        to the in-progress trick in ``state``
        """
        if current_trick is None:
            current_trick = state.current_trick
        round_scores = state.round_scores

        for i, score in enumerate(round_scores):
            if score >= self.score_threshold and not self.others_have_points(round_scores, i):
                log.debug(f"Moon shooter detected (score): player {i}")
                return i

        taken = state.points_taken
        if taken:
            heart_counts = [len([c for c in cards if is_heart(c)]) for cards in taken]
            for i, cards in enumerate(taken):
                has_queen = any(is_queen_of_spades(c) for c in cards)
                if ((has_queen and heart_counts[i] >= self.hearts_with_queen) or
                    heart_counts[i] >= self.hearts_without_queen):
                    if sum(heart_counts) == heart_counts[i]:
                        log.debug(f"Moon shooter detected (captured cards): player {i}")
                        return i

        if current_trick:
            lead_idx, lead_card = current_trick[0]
            if not self.others_have_points(round_scores, lead_idx):
                if is_queen_of_spades(lead_card):
                    log.debug(f"Moon shooter detected (led Q♠): player {lead_idx}")
                    return lead_idx
                if (is_heart(lead_card) and lead_card.value >= self.alarm_heart_min_rank and
                    round_scores[lead_idx] >= self.alarm_min_points):
                    log.debug(f"Moon shooter detected (led high heart): player {lead_idx}")
                    return lead_idx

        total = sum(round_scores)
        if total > 0 and taken:
            for i, score in enumerate(round_scores):
                if score != total:
                    continue
                cards = taken[i]
                num_hearts = len([c for c in cards if is_heart(c)])
                has_queen = any(is_queen_of_spades(c) for c in cards)
                if (num_hearts >= self.dominant_hearts or
                    (has_queen and num_hearts >= self.dominant_queen_hearts) or
                    (not has_queen and num_hearts >= self.dominant_no_queen)):
                    log.debug(f"Moon shooter detected (dominating): player {i}")
                    return i

        if memory:
            for suspect in memory.get_suspects():
                i = suspect.player_idx
                if i >= len(round_scores) or self.others_have_points(round_scores, i):
                    continue
                if suspect.behavior.led_queen:
                    log.debug(f"Moon shooter detected (behavior, led Q♠): player {i}")
                    return i
                if suspect.score >= self.suspicion_threshold:
                    log.debug(f"Moon shooter detected (behavior): player {i}")
                    return i
                if (round_scores[i] >= self.early_min_points and
                    suspect.score >= self.early_suspicion):
                    log.debug(f"Moon shooter detected (behavior and points): player {i}")
                    return i

        return None

    def suspicion_details(self, state: GameState, memory: CardMemory = None) -> list[dict]:
        """Debugging info on behavioral suspects (json-friendly)
        """
        if not memory:
            return []
        details = []
        for suspect in memory.get_suspects():
            i = suspect.player_idx
            behavior = suspect.behavior
            signals = []
            if behavior.led_queen:
                signals.append("Led Q♠")
            if behavior.high_leads:
                signals.append(f"{behavior.high_leads} high card leads")
            if behavior.hearts_won:
                signals.append(f"Won {behavior.hearts_won} hearts")
            if behavior.voluntary_wins:
                signals.append(f"{behavior.voluntary_wins} voluntary penalty wins")
            if behavior.missed_dumps:
                signals.append(f"{behavior.missed_dumps} missed dumps")
            details.append({'player_idx':  i,
                            'player_name': state.player_names[i],
                            'round_score': state.round_scores[i],
                            'suspicion':   suspect.score,
                            'signals':     signals})
        return details
