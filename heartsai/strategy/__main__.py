#!/usr/bin/env python

import sys
import time

from ..core import log, dbg_hand
from ..card import get_deck, set_seed
from ..hearts import HAND_CARDS, NUM_PLAYERS
from ..analysis import MoonAnalysis

def tune_moon_analysis(*args) -> int:
    """Deal a number of random hands (default 100) and evaluate each one for shooting the
    moon, writing the results (with reasons) to the log.  This is used for manual
    inspection to help tune the `MoonAnalysis` parameters and attempt threshold.

    Usage: tune_moon_analysis [<num_deals> [<seed>]]
    """
    num_deals = int(args[0]) if args else 100
    seed = int(args[1]) if len(args) > 1 else int(time.time()) % 1000000
    set_seed(seed)

    log.addHandler(dbg_hand)
    log.info(f"set_seed({seed})")

    attempts = 0
    for _ in range(num_deals):
        deck = get_deck()
        for pos in range(NUM_PLAYERS):
            cards = sorted(deck[pos * HAND_CARDS:(pos + 1) * HAND_CARDS])
            moon_eval = MoonAnalysis(cards).evaluate()
            if moon_eval.should_attempt:
                attempts += 1
                log.info(f"{' '.join(str(c) for c in cards)}: {moon_eval.score:g} "
                         f"({'; '.join(moon_eval.reasons)})")
    log.info(f"Moon attempts: {attempts} of {num_deals * NUM_PLAYERS} hands")
    return 0

########
# main #
########

def main() -> int:
    """Built-in driver to invoke various utility functions for the module

    Usage: strategy <func_name> [<arg> ...]

    Functions/usage:
      - tune_moon_analysis [<num_deals> [<seed>]]
    """
    if len(sys.argv) < 2:
        print("Utility function not specified", file=sys.stderr)
        return -1
    elif sys.argv[1] not in globals():
        print(f"Unknown utility function '{sys.argv[1]}'", file=sys.stderr)
        return -1

    util_func = globals()[sys.argv[1]]
    util_args = sys.argv[2:]
    return util_func(*util_args)

if __name__ == '__main__':
    sys.exit(main())
