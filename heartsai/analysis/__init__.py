# -*- coding: utf-8 -*-

"""This module provides helper classes and functions for the ``strategy`` module.  The
trick analyzer (``trick``) is a set of stateless queries over an in-progress trick;
``HandAnalysis`` provides suit-level views of a hand, and is subclassed by
``MoonAnalysis`` for evaluating a hand for shooting the moon.  ``MoonDetector`` infers
whether another player is attempting to shoot the moon.
"""

from .trick import (penalty_points, highest_rank, is_last_to_play, queen_in_trick,
                    current_winner, players_yet_to_act)
from .hand import HandAnalysis
from .detect import MoonDetector
from .moon import MoonEvaluation, MoonAnalysis
