# -*- coding: utf-8 -*-

from collections.abc import Iterable, Sequence
from itertools import groupby
from typing import Union, Optional
from numbers import Number
import os.path
import logging

import yaml

#####################
# Config Management #
#####################

DEFAULT_PROFILE = 'default'

class Config:
    """YAML config information, aggregated from one or more files.  Each file is keyed
    by profile, then by section::

      ---
      default:
        base_scoring_params:
          LeadScorer:
            base: 100

      tuning:
        base_scoring_params:
          LeadScorer:
            base: 120  # overrides 'default' when the 'tuning' profile is active

    Files loaded later replace earlier values at the level of the direct children of a
    section (e.g. an entire ``LeadScorer`` entry), there is no deeper merging.  An active
    profile may be specified at construction time, or per ``config()`` call.
    """
    config_dir:   Optional[str]
    profile:      Optional[str]    # active profile (overrides 'default')
    filepaths:    list[str]        # files loaded, in order
    profile_data: dict[str, dict]  # section data indexed by profile

    def __init__(self, files: Union[str, Iterable[str]], config_dir: str = None,
                 profile: str = None):
        """``files`` may be an iterable or a comma-separated string of file names
        """
        if isinstance(files, str):
            files = files.split(',')
        elif not isinstance(files, Iterable):
            raise RuntimeError("Bad argument, 'files' not iterable")

        self.config_dir   = config_dir
        self.profile      = profile
        self.filepaths    = []
        self.profile_data = {}
        for file in files:
            self.load(file)

    def load(self, file: str) -> bool:
        """Additional files may be loaded at any time (e.g. test overrides); returns
        ``False`` if the file was already loaded (no-op)
        """
        if self.config_dir:
            path = os.path.join(self.config_dir, file)
        else:
            path = os.path.realpath(file)
        if path in self.filepaths:
            return False

        with open(path, 'r') as f:
            file_data = yaml.safe_load(f)
        if not file_data:
            raise RuntimeError(f"Could not load from '{file}'")

        for profile, sections in file_data.items():
            merged = self.profile_data.setdefault(profile, {})
            for section, params in (sections or {}).items():
                merged.setdefault(section, {}).update(params or {})

        self.filepaths.append(path)
        return True

    def config(self, section: str, profile: str = None) -> dict:
        """Return parameters for the section (empty if not found), as a shallow copy, so
        callers are free to modify it
        """
        if DEFAULT_PROFILE not in self.profile_data:
            raise RuntimeError(f"Default profile ('{DEFAULT_PROFILE}') never loaded")
        params = dict(self.profile_data[DEFAULT_PROFILE].get(section, {}))

        profile = profile or self.profile
        if profile and profile != DEFAULT_PROFILE:
            if profile not in self.profile_data:
                raise RuntimeError(f"Profile '{profile}' never loaded")
            params.update(self.profile_data[profile].get(section, {}))
        return params

#########################
# Trace logging support #
#########################

TRACE = logging.DEBUG - 5

class TraceLogger(logging.getLoggerClass()):
    """Adds a ``trace()`` level below DEBUG, used for per-candidate scoring detail
    """
    def __init__(self, name, level=logging.NOTSET):
        super().__init__(name, level)
        logging.addLevelName(TRACE, "TRACE")

    def trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

logging.setLoggerClass(TraceLogger)

########
# Misc #
########

def rankdata(a: Sequence[Number], method: str = 'average', reverse: bool = True) -> list[Number]:
    """Rank values in the manner of ``scipy.stats.rankdata``, with ties handled per
    ``method`` ('average' or 'min').  ``reverse=True`` (default) gives the highest value
    a rank of 1; for game standings (lower score is better), call with ``reverse=False``.

    Note that rankings are ``float`` for method='average' and ``int`` for method='min'.
    """
    if method not in ('average', 'min'):
        raise ValueError(f"Unsupported method '{method}'")
    order = sorted(range(len(a)), key=a.__getitem__, reverse=reverse)
    ranks = [0] * len(a)
    pos = 0
    for _, group in groupby(order, key=a.__getitem__):
        members = list(group)
        first = pos + 1
        pos += len(members)
        rank = first if method == 'min' else (first + pos) / 2.0
        for idx in members:
            ranks[idx] = rank
    return ranks
