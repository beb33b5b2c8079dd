# -*- coding: utf-8 -*-

"""This module provides the card scorers used by ``StrategySmart``, one per decision phase
(passing, leading, following, and dumping).  Each scorer returns a list of ``ScoredCard``
candidates; the strategy ranks them (``rank_candidates()``) and plays the top one.  Score
tables are specified in the config file under ``base_scoring_params``.
"""

from .base import ScoredCard, Scorer, rank_candidates
from .passing import PassScorer
from .lead import LeadScorer
from .follow import FollowScorer
from .dump import DumpScorer
