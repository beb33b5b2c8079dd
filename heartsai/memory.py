# -*- coding: utf-8 -*-

"""Opponent memory for a single agent, scoped to a round.  The log of played cards is
recency-limited (entries older than ``memory_tricks`` tricks are forgotten, which yields
roughly 50% retention over a 13-trick round), whereas void-suit facts and behavioral
signals (used for moon detection) are kept for the whole round.
"""

from typing import NamedTuple, Optional
from collections.abc import Sequence

from .core import ConfigError, cfg, log
from .card import Suit, Card, queen, jack, ace, card_by_value
from .card import is_heart, is_queen_of_spades, is_penalty_card
from .hearts import Play

class PlayedCard(NamedTuple):
    card:       Card
    player_idx: int
    trick_num:  int   # 0-based, relative to round
    void_play:  bool

class Suspect(NamedTuple):
    player_idx: int
    score:      int
    behavior:   'MoonBehavior'

################
# MoonBehavior #
################

class MoonBehavior:
    """Per-player accumulators for behavior indicative of shooting the moon
    """
    led_queen:     bool
    high_leads:    int
    hearts_won:    int
    missed_dumps:  int
    voluntary_wins: int

    def __init__(self):
        self.led_queen      = False
        self.high_leads     = 0
        self.hearts_won     = 0
        self.missed_dumps   = 0
        self.voluntary_wins = 0

    def __repr__(self):
        return repr(vars(self))

##############
# CardMemory #
##############

class CardMemory:
    """Note that ``record_trick()`` must be called exactly once per completed trick (in
    order); everything else is a pure query.

    Retention and suspicion weights come from ``base_scoring_params.CardMemory``, and may
    be overridden by constructor kwargs.
    """
    # params/config
    memory_tricks:        int
    missed_dump_max_rank: int
    suspect_led_queen:    int
    suspect_high_lead:    int
    suspect_heart_won:    int
    suspect_voluntary:    int
    suspect_missed_dump:  int

    # state
    played:        list[PlayedCard]
    voids:         dict[int, set[Suit]]
    behavior:      dict[int, MoonBehavior]
    trick_num:     int   # number of tricks recorded

    def __init__(self, memory_tricks: int = None, **kwargs):
        class_name = type(self).__name__
        base_params = cfg.config('base_scoring_params').get(class_name)
        if base_params is None:
            raise ConfigError(f"Params for '{class_name}' not configured")
        if memory_tricks is not None:
            kwargs['memory_tricks'] = memory_tricks
        for key, base_value in base_params.items():
            setattr(self, key, kwargs[key] if key in kwargs else base_value)
        if unknown := set(kwargs) - set(base_params):
            raise ConfigError(f"Unknown param(s) '{', '.join(unknown)}' for {class_name}")
        self.reset()

    def reset(self) -> None:
        self.played    = []
        self.voids     = {}
        self.behavior  = {}
        self.trick_num = 0

    def get_behavior(self, player_idx: int) -> MoonBehavior:
        if player_idx not in self.behavior:
            self.behavior[player_idx] = MoonBehavior()
        return self.behavior[player_idx]

    #############
    # recording #
    #############

    def record_trick(self, trick: Sequence[Play], lead_suit: Suit = None,
                     winner_idx: Optional[int] = None) -> None:
        """Record a completed trick, with plays in play order.  ``lead_suit`` defaults to
        the suit of the first play.  Behavior for the trick winner is only analyzed if
        ``winner_idx`` is specified.
        """
        if not trick:
            return
        lead_pos, lead_card = trick[0]
        lead_suit = lead_suit or lead_card.suit
        self._analyze_lead(lead_pos, lead_card)

        for pos, card in trick:
            void_play = card.suit != lead_suit
            self.played.append(PlayedCard(card, pos, self.trick_num, void_play))
            if void_play:
                if lead_suit not in self.voids.setdefault(pos, set()):
                    log.trace(f"Player {pos} void in {lead_suit.name}")
                self.voids[pos].add(lead_suit)
                self._analyze_dump(pos, card)

        if winner_idx is not None:
            self._analyze_win(winner_idx, trick)

        self.trick_num += 1
        self._prune()

    def _analyze_lead(self, pos: int, card: Card) -> None:
        behavior = self.get_behavior(pos)
        if is_queen_of_spades(card):
            behavior.led_queen = True
        if card.value >= queen.value:
            behavior.high_leads += 1

    def _analyze_dump(self, pos: int, card: Card) -> None:
        """Void play with a low non-penalty card, so possibly holding on to penalties
        """
        if not is_penalty_card(card) and card.value <= self.missed_dump_max_rank:
            self.get_behavior(pos).missed_dumps += 1

    def _analyze_win(self, winner_idx: int, trick: Sequence[Play]) -> None:
        behavior = self.get_behavior(winner_idx)
        behavior.hearts_won += len([c for _, c in trick if is_heart(c)])

        lead_suit = trick[0][1].suit
        win_card = next((c for p, c in trick if p == winner_idx), None)
        if win_card is None or win_card.suit != lead_suit:
            return
        suit_plays = [c for _, c in trick if c.suit == lead_suit]
        top_value = max(c.value for c in suit_plays)
        # voluntary: took a pointed trick with the top card, against at least one follower
        if win_card.value == top_value and len(suit_plays) > 1:
            if any(is_penalty_card(c) for _, c in trick):
                behavior.voluntary_wins += 1

    def _prune(self) -> None:
        cutoff = self.trick_num - self.memory_tricks
        self.played = [m for m in self.played if m.trick_num >= cutoff]

    ###########
    # queries #
    ###########

    def get_remembered_cards(self) -> list[PlayedCard]:
        return list(self.played)

    def is_card_played(self, card: Card) -> bool:
        return any(m.card == card for m in self.played)

    def is_player_void(self, player_idx: int, suit: Suit) -> bool:
        return suit in self.voids.get(player_idx, ())

    def get_player_voids(self, player_idx: int) -> list[Suit]:
        return sorted(self.voids.get(player_idx, ()), key=lambda s: s.idx)

    def get_unseen_high_cards(self, suit: Suit, min_rank: int = jack.value) -> list[Card]:
        high_cards = [card_by_value(v, suit) for v in range(min_rank, ace.value + 1)]
        return [c for c in high_cards if not self.is_card_played(c)]

    def count_unseen_high_cards(self, suit: Suit) -> int:
        return len(self.get_unseen_high_cards(suit))

    def get_cards_played_by(self, player_idx: int) -> list[Card]:
        return [m.card for m in self.played if m.player_idx == player_idx]

    def might_have_high_cards(self, player_idx: int, suit: Suit) -> bool:
        """Not void, and either nothing seen in the suit or nothing seen at face-card
        rank or higher
        """
        if self.is_player_void(player_idx, suit):
            return False
        seen = [m.card.value for m in self.played
                if m.player_idx == player_idx and m.card.suit == suit]
        if not seen:
            return True
        return max(seen) < jack.value

    def is_queen_played(self) -> bool:
        return any(is_queen_of_spades(m.card) for m in self.played)

    def who_played_queen(self) -> Optional[int]:
        return next((m.player_idx for m in self.played if is_queen_of_spades(m.card)), None)

    def tricks_counted(self) -> int:
        return self.trick_num

    def get_stats(self) -> dict:
        return {'total_remembered': len(self.played),
                'tricks_counted':   self.trick_num,
                'players_with_voids': len([p for p, s in self.voids.items() if s])}

    def suspicion(self, behavior: MoonBehavior) -> int:
        score = self.suspect_led_queen if behavior.led_queen else 0
        score += behavior.high_leads * self.suspect_high_lead
        score += behavior.hearts_won * self.suspect_heart_won
        score += behavior.voluntary_wins * self.suspect_voluntary
        score += behavior.missed_dumps * self.suspect_missed_dump
        return score

    def get_suspects(self) -> list[Suspect]:
        """Players with positive suspicion score (descending); ties keep seat order
        """
        suspects = []
        for pos in sorted(self.behavior):
            behavior = self.behavior[pos]
            score = self.suspicion(behavior)
            if score > 0:
                suspects.append(Suspect(pos, score, behavior))
        suspects.sort(key=lambda s: s.score, reverse=True)
        return suspects

    def get_snapshot(self) -> dict:
        """For the observability side channel only (json-friendly)
        """
        return {'void_suits':       {pos: [s.name for s in self.get_player_voids(pos)]
                                     for pos in sorted(self.voids)},
                'cards_remembered': len(self.played),
                'tricks_counted':   self.trick_num,
                'queen_played':     self.is_queen_played(),
                'moon_suspects':    [(s.player_idx, s.score) for s in self.get_suspects()]}
