# -*- coding: utf-8 -*-

from collections.abc import Iterable
from typing import Optional

from ..core import ConfigError, cfg
from ..card import Card

##############
# ScoredCard #
##############

class ScoredCard:
    """Candidate card with numeric score (higher is better) and an optional list of
    reasons.  Reasons are purely informational (e.g. for logging or an observer), and are
    never looked at when selecting between candidates.
    """
    card:    Card
    score:   float
    reasons: Optional[list[str]]

    def __init__(self, card: Card, score: float = 0.0, explain: bool = True):
        self.card    = card
        self.score   = score
        self.reasons = [] if explain else None

    def __repr__(self):
        return f"ScoredCard({self.card}, {self.score:g})"

    def __str__(self):
        why = f" ({'; '.join(self.reasons)})" if self.reasons else ''
        return f"{self.card}: {self.score:g}{why}"

    def add(self, value: float, reason: str = None) -> None:
        self.score += value
        if reason and self.reasons is not None:
            self.reasons.append(reason)

    def note(self, reason: str) -> None:
        if self.reasons is not None:
            self.reasons.append(reason)

def rank_candidates(candidates: Iterable[ScoredCard]) -> list[ScoredCard]:
    """Sort by score, descending; ties retain the input (i.e. candidate) order
    """
    return sorted(candidates, key=lambda sc: sc.score, reverse=True)

##########
# Scorer #
##########

class Scorer:
    """Abstract base class for the per-phase card scorers.  Parameters (score tables) are
    loaded from the config file section for the class name under ``base_scoring_params``,
    and may be overridden by constructor kwargs (e.g. from a strategy configuration).
    """
    explain: bool

    def __init__(self, explain: bool = True, **kwargs):
        class_name = type(self).__name__
        base_params = cfg.config('base_scoring_params')
        if class_name not in base_params:
            raise ConfigError(f"Scoring class '{class_name}' does not exist")
        for key, base_value in base_params[class_name].items():
            setattr(self, key, kwargs[key] if key in kwargs else base_value)
        if unknown := set(kwargs) - set(base_params[class_name]):
            raise ConfigError(f"Unknown param(s) '{', '.join(unknown)}' for {class_name}")
        self.explain = explain

    def __str__(self):
        return type(self).__name__

    def new_candidate(self, card: Card, base: float = 0.0) -> ScoredCard:
        return ScoredCard(card, base, self.explain)
