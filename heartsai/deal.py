#!/usr/bin/env python
# -*- coding: utf-8 -*-

import sys
from enum import Enum
from typing import Optional, TextIO

from .core import DEBUG, LogicError, ImplementationError, log
from .card import Card, Deck, TWO_OF_CLUBS, is_penalty_card, get_deck
from .hearts import (NUM_PLAYERS, HAND_CARDS, NUM_TRICKS, TOTAL_POINTS, PASS_CARDS,
                     PassDirection, Trick, GameState, pass_direction, pass_target,
                     pass_context, play_context, breaks_hearts)
from .strategy import StrategyNotice
from .player import Player

###########
# `Enum`s #
###########

DealPhase = Enum('DealPhase', 'NEW DEALT EXCHANGED PLAYING COMPLETE SCORED')

class DealAttr(Enum):
    SHOOT_MOON = "Shoot_Moon"
    NO_PASS    = "No_Pass"

########
# Deal #
########

class Deal:
    """Represents the lifecycle of a single round, from the dealing of hands to passing
    to playing tricks.  Note that ``deck`` is not shuffled in this class, it is up to the
    instantiator as to what it looks like (dealing is single-card round robin).

    Players are notified of the start of the round (after the deal) and of each completed
    trick (exactly once, after the winner is resolved and before the next lead).
    """
    players:      list[Player]      # by position
    deck:         Deck
    scores:       list[int]         # cumulative, before this round
    round_num:    int
    direction:    PassDirection
    hands:        list[list[Card]]  # by position (active)
    cards_dealt:  list[list[Card]]  # by position (for posterity)
    cards_passed: list[list[Card]]  # by passing position
    tricks:       list[Trick]
    hearts_broken: bool
    round_scores: list[int]         # raw penalty points taken
    points_taken: list[list[Card]]  # penalty cards captured
    points:       list[int]         # final round score (after moon adjustment)
    shooter:      Optional[int]
    result:       set[DealAttr]

    def __init__(self, players: list[Player], deck: Deck, scores: list[int] = None,
                 round_num: int = 1):
        if len(players) != NUM_PLAYERS:
            raise LogicError(f"Expecting {NUM_PLAYERS} players, got {len(players)}")
        if len(deck) != NUM_PLAYERS * HAND_CARDS:
            raise LogicError(f"Expecting {NUM_PLAYERS * HAND_CARDS} cards, got {len(deck)}")
        self.players       = players
        self.deck          = deck
        self.scores        = list(scores) if scores else [0] * NUM_PLAYERS
        self.round_num     = round_num
        self.direction     = pass_direction(round_num)
        self.hands         = []
        self.cards_dealt   = []
        self.cards_passed  = []
        self.tricks        = []
        self.hearts_broken = False
        self.round_scores  = [0] * NUM_PLAYERS
        self.points_taken  = [[] for _ in range(NUM_PLAYERS)]
        self.points        = []
        self.shooter       = None
        self.result        = set()

    @property
    def deal_phase(self) -> DealPhase:
        if not self.cards_dealt:
            return DealPhase.NEW
        if not self.cards_passed and not self.tricks:
            if DealAttr.NO_PASS in self.result:
                return DealPhase.EXCHANGED
            return DealPhase.DEALT
        if not self.tricks:
            return DealPhase.EXCHANGED
        if len(self.tricks) < NUM_TRICKS or not self.tricks[-1].is_complete():
            return DealPhase.PLAYING
        if not self.points:
            return DealPhase.COMPLETE
        return DealPhase.SCORED

    def game_state(self, trick: Trick = None) -> GameState:
        """Snapshot for the next decision (or notification); ``trick_num`` is the number
        of completed tricks
        """
        completed = len([t for t in self.tricks if t.is_complete()])
        return GameState([p.name for p in self.players],
                         [list(h) for h in self.hands],
                         list(self.scores),
                         list(self.round_scores),
                         list(trick.plays) if trick else [],
                         self.hearts_broken,
                         completed,
                         self.direction,
                         self.round_num,
                         [list(c) for c in self.points_taken])

    def notify_all(self, notice: StrategyNotice, trick: Trick = None) -> None:
        state = self.game_state()
        for player in self.players:
            if trick:
                player.notify(state, notice, list(trick.plays), trick.winning_pos)
            else:
                player.notify(state, notice)

    def deal_cards(self) -> None:
        """Also notifies the players of the start of the round
        """
        assert self.deal_phase == DealPhase.NEW
        for i in range(NUM_PLAYERS):
            hand = self.deck[i::NUM_PLAYERS]
            self.cards_dealt.append(list(hand))
            self.hands.append(list(hand))
        assert set(c for h in self.hands for c in h) == set(self.deck)
        self.notify_all(StrategyNotice.ROUND_START)

    def do_passing(self) -> None:
        """All selections are made (against the dealt hands) before any cards change
        hands
        """
        assert self.deal_phase == DealPhase.DEALT
        if self.direction == PassDirection.NONE:
            self.result.add(DealAttr.NO_PASS)
            return

        state = self.game_state()
        for pos in range(NUM_PLAYERS):
            cards = self.players[pos].choose_cards_to_pass(pass_context(state, pos))
            if len(cards) != PASS_CARDS or len(set(cards)) != PASS_CARDS:
                raise ImplementationError(f"Bad pass ({len(cards)} cards) from "
                                          f"{self.players[pos]}")
            if any(c not in self.hands[pos] for c in cards):
                raise ImplementationError(f"Card(s) not in hand passed by {self.players[pos]}")
            self.cards_passed.append(list(cards))

        for pos, cards in enumerate(self.cards_passed):
            for card in cards:
                self.hands[pos].remove(card)
        for pos, cards in enumerate(self.cards_passed):
            self.hands[pass_target(pos, self.direction)].extend(cards)
            log.trace(f"{self.players[pos]} passes {self.direction}: "
                      f"{' '.join(str(c) for c in cards)}")

    def play_cards(self) -> None:
        """Holder of 2♣ leads the first trick, winner of each trick leads the next
        """
        assert self.deal_phase == DealPhase.EXCHANGED
        lead_pos = next(pos for pos, hand in enumerate(self.hands) if TWO_OF_CLUBS in hand)

        for _ in range(NUM_TRICKS):
            trick = Trick()
            self.tricks.append(trick)
            for i in range(NUM_PLAYERS):
                pos = (lead_pos + i) % NUM_PLAYERS
                ctx = play_context(self.game_state(trick), pos)
                card = self.players[pos].choose_card_to_play(ctx)
                if card not in ctx.valid_cards:
                    raise ImplementationError(f"Invalid play ({card}) from {self.players[pos]}")
                trick.play_card(pos, card)
                self.hands[pos].remove(card)
                if breaks_hearts(card):
                    self.hearts_broken = True
            self.tabulate(trick)
            self.notify_all(StrategyNotice.TRICK_COMPLETE, trick)
            lead_pos = trick.winning_pos

        assert not any(self.hands)
        self.compute_score()

    def tabulate(self, trick: Trick) -> None:
        winner = trick.winning_pos
        self.round_scores[winner] += trick.points
        self.points_taken[winner].extend(c for c in trick.cards if is_penalty_card(c))

    def compute_score(self) -> None:
        """Taking all penalty points (shooting the moon) gives ``TOTAL_POINTS`` to each
        of the other players instead
        """
        assert self.deal_phase == DealPhase.COMPLETE
        assert sum(self.round_scores) == TOTAL_POINTS
        for pos, points in enumerate(self.round_scores):
            if points == TOTAL_POINTS:
                self.shooter = pos
                self.result.add(DealAttr.SHOOT_MOON)
                log.info(f"{self.players[pos]} shot the moon")
                break

        if self.shooter is not None:
            self.points = [0 if pos == self.shooter else TOTAL_POINTS
                           for pos in range(NUM_PLAYERS)]
        else:
            self.points = list(self.round_scores)
        assert self.points

    def print(self, file: TextIO = sys.stdout, verbose: int = 0) -> None:
        """Setting the `verbose` flag (or DEBUG mode) will print out details for
        individual tricks
        """
        if self.deal_phase.value < DealPhase.DEALT.value:
            return
        verbose = max(verbose, DEBUG)

        print("Hands:", file=file)
        for pos in range(NUM_PLAYERS):
            cards = sorted(self.cards_dealt[pos])
            print(f"  {self.players[pos].name}: {' '.join(str(c) for c in cards)}", file=file)

        if self.deal_phase.value < DealPhase.EXCHANGED.value:
            return

        print(f"Passing ({self.direction}):", file=file)
        if not self.cards_passed:
            print("  (none)", file=file)
        for pos, cards in enumerate(self.cards_passed):
            target = self.players[pass_target(pos, self.direction)].name
            print(f"  {self.players[pos].name} -> {target}: "
                  f"{' '.join(str(c) for c in cards)}", file=file)

        if verbose:
            print("Tricks:", file=file)
            for trick_num, trick in enumerate(self.tricks):
                print(f"  Trick #{trick_num + 1}:", file=file)
                for pos, card in trick.plays:
                    win = " (win)" if trick.winning_pos == pos else ""
                    print(f"    {self.players[pos].name}: {card}{win}", file=file)

        self.print_score(file=file)

    def print_score(self, file: TextIO = sys.stdout) -> None:
        if self.deal_phase.value < DealPhase.PLAYING.value:
            return

        print("Points Taken:", file=file)
        for pos in range(NUM_PLAYERS):
            cards = sorted(self.points_taken[pos])
            print(f"  {self.players[pos].name}: {self.round_scores[pos]:2} "
                  f"{' '.join(str(c) for c in cards)}", file=file)

        if self.deal_phase.value < DealPhase.SCORED.value:
            return

        if self.shooter is not None:
            print(f"Shoot the Moon:\n  {self.players[self.shooter].name}", file=file)
        print("Round Score:", file=file)
        for pos in range(NUM_PLAYERS):
            print(f"  {self.players[pos].name}: {self.points[pos]}", file=file)

########
# main #
########

def main() -> int:
    """Built-in driver to run through a simple/sample deal

    Usage: deal [ndeals [round_num]]
    """
    ndeals = 1
    round_num = 1
    if len(sys.argv) > 1:
        ndeals = int(sys.argv[1])
    if len(sys.argv) > 2:
        round_num = int(sys.argv[2])

    players = [Player("Player 0", "smart"),
               Player("Player 1", "smart_aggressive"),
               Player("Player 2", "smart_conservative"),
               Player("Player 3", "smart")]

    for _ in range(ndeals):
        deal = Deal(players, get_deck(), round_num=round_num)
        deal.deal_cards()
        deal.do_passing()
        deal.play_cards()
        deal.print(verbose=1)

    return 0

if __name__ == '__main__':
    sys.exit(main())
