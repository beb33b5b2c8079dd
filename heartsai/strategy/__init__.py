# -*- coding: utf-8 -*-

"""This module provides the classes that implement passing and playing strategies for
players.  Note that ``Strategy`` (abstract base class) can also be subclassed by other
modules for special purpose use.
"""

from .base import Strategy, StrategyNotice
from .smart import StrategySmart, MoonMode, DecisionRecord
# for sphinx
from .__main__ import tune_moon_analysis, main
