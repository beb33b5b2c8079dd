#!/usr/bin/env python
# -*- coding: utf-8 -*-

import sys
from enum import Enum
from collections.abc import Iterable
from typing import TextIO

from .core import DEBUG, LogicError, log
from .utils import rankdata
from .card import get_deck
from .hearts import NUM_PLAYERS
from .deal import Deal, DealAttr
from .player import Player
from .strategy import StrategyNotice

############
# GameStat #
############

class GameStat(Enum):
    ROUNDS        = "Rounds"
    POINTS        = "Points"
    ZERO_ROUNDS   = "Zero-Point Rounds"
    QUEENS_TAKEN  = "Queens Taken"
    HEARTS_TAKEN  = "Hearts Taken"
    MOONS_SHOT    = "Moons Shot"

    def __str__(self):
        return self.value

########
# Game #
########

GAME_POINTS = 100

class Game:
    """Plays rounds (with the pass direction rotating left, right, across, hold) until
    any cumulative score reaches ``GAME_POINTS``; the player with the lowest score wins
    (ties are all ranked first).
    """
    # params/config
    players:   list[Player]   # by seat
    max_rounds: int | None

    # state
    deals:     list[Deal]     # sequential
    score:     list[int]      # indexed as `players`
    stats:     list[dict[GameStat, int]]
    winner:    list[tuple[int, Player]] | None

    def __init__(self, players: Iterable[Player], max_rounds: int = None):
        self.players = list(players)
        if len(self.players) != NUM_PLAYERS:
            raise LogicError(f"Expected {NUM_PLAYERS} players, got {len(self.players)}")
        self.max_rounds = max_rounds
        self.deals      = []
        self.score      = [0] * NUM_PLAYERS
        self.stats      = [{stat: 0 for stat in GameStat} for _ in range(NUM_PLAYERS)]
        self.winner     = None

    def tabulate(self, deal: Deal) -> None:
        GS = GameStat
        for pos, mystats in enumerate(self.stats):
            self.score[pos] += deal.points[pos]
            mystats[GS.ROUNDS] += 1
            mystats[GS.POINTS] += deal.points[pos]
            if deal.points[pos] == 0:
                mystats[GS.ZERO_ROUNDS] += 1
            taken = deal.points_taken[pos]
            mystats[GS.QUEENS_TAKEN] += len([c for c in taken if c.points > 1])
            mystats[GS.HEARTS_TAKEN] += len([c for c in taken if c.points == 1])
            if DealAttr.SHOOT_MOON in deal.result and deal.shooter == pos:
                mystats[GS.MOONS_SHOT] += 1

    def set_winner(self) -> None:
        ranks = rankdata(self.score, method='min', reverse=False)
        self.winner = [(i, self.players[i]) for i, rank in enumerate(ranks) if rank == 1]
        if not self.winner:
            raise LogicError("Winner not found")

    def is_over(self) -> bool:
        if self.max_rounds and len(self.deals) >= self.max_rounds:
            return True
        return max(self.score) >= GAME_POINTS

    def play(self) -> None:
        for player in self.players:
            player.notify(None, StrategyNotice.GAME_START)

        round_num = 1
        while not self.is_over():
            deal = Deal(self.players, get_deck(), self.score, round_num)
            self.deals.append(deal)

            deal.deal_cards()
            deal.do_passing()
            deal.play_cards()
            self.tabulate(deal)
            log.debug(f"Round {round_num} score: {self.score}")
            round_num += 1

        self.set_winner()

    def print(self, file: TextIO = sys.stdout, verbose: int = 0) -> None:
        """Setting the `verbose` flag (or DEBUG mode) will print out details for
        individual rounds, as well as printing game stats
        """
        verbose = max(verbose, DEBUG)

        print("Players:", file=file)
        for player in self.players:
            print(f"  {player} ({player.strategy})", file=file)

        if verbose:
            for i, deal in enumerate(self.deals):
                print(f"Round #{i + 1}:", file=file)
                if verbose > 1:
                    deal.print(file=file)
                else:
                    deal.print_score(file=file)

        self.print_score(file=file)
        if verbose:
            self.print_stats(file=file)

    def print_score(self, file: TextIO = sys.stdout) -> None:
        print("Game Score:", file=file)
        for i, player in enumerate(self.players):
            print(f"  {player.name}: {self.score[i]}", file=file)

        if not self.winner:
            return

        print("Game Winner:", file=file)
        for _, player in self.winner:
            print(f"  {player.name}", file=file)

    def print_stats(self, file: TextIO = sys.stdout) -> None:
        print("Game Stats:", file=file)
        for i, player in enumerate(self.players):
            mystats = self.stats[i]
            print(f"  {player.name}:", file=file)
            for stat in GameStat:
                print(f"    {stat.value + ':':24} {mystats[stat]:8}", file=file)

########
# main #
########

def main() -> int:
    """Built-in driver to run through a simple/sample game
    """
    players = [Player("Player 0", "smart"),
               Player("Player 1", "smart_aggressive"),
               Player("Player 2", "smart_conservative"),
               Player("Player 3", "smart_no_moon")]

    game = Game(players)
    game.play()
    game.print(verbose=1)

    return 0

if __name__ == '__main__':
    sys.exit(main())
