# -*- coding: utf-8 -*-

from os import environ
import os.path
import logging
import logging.handlers

from . import utils

######################
# Config/Environment #
######################

# later files override earlier ones (see `utils.Config`)
DFLT_CONFIG_FILES = ['base_config.yml',
                     'strategies.yml']

FILE_DIR       = os.path.dirname(os.path.realpath(__file__))
BASE_DIR       = os.path.realpath(os.path.join(FILE_DIR, os.pardir))
CONFIG_DIR     = os.path.join(BASE_DIR, 'config')
CONFIG_FILES   = environ.get('HEARTS_CONFIG_FILES') or DFLT_CONFIG_FILES
CONFIG_PROFILE = environ.get('HEARTS_CONFIG_PROFILE')
cfg            = utils.Config(CONFIG_FILES, CONFIG_DIR, CONFIG_PROFILE)

# 0 = INFO to log file; 1 = DEBUG to log file; 2 = also echo to stderr; 3 = TRACE
DEBUG          = int(environ.get('HEARTS_DEBUG') or 0)

###########
# Logging #
###########

LOGGER_NAME  = 'heartsai'
LOG_DIR      = 'log'
LOG_FILE     = LOGGER_NAME + '.log'
LOG_PATH     = os.path.join(BASE_DIR, LOG_DIR, LOG_FILE)
LOG_FMTR     = logging.Formatter('%(asctime)s %(levelname)s [%(filename)s:%(lineno)s]: %(message)s')
LOG_FILE_MAX = 25000000
LOG_FILE_NUM = 50

os.makedirs(os.path.dirname(LOG_PATH), exist_ok=True)
file_hand = logging.handlers.RotatingFileHandler(LOG_PATH, 'a', LOG_FILE_MAX, LOG_FILE_NUM)
file_hand.setLevel(utils.TRACE)
file_hand.setFormatter(LOG_FMTR)

# stderr echo, also attached on demand by utility functions
dbg_hand = logging.StreamHandler()
dbg_hand.setLevel(logging.DEBUG)
dbg_hand.setFormatter(LOG_FMTR)

log = logging.getLogger(LOGGER_NAME)
log.setLevel(logging.INFO)
log.addHandler(file_hand)
if DEBUG:
    log.setLevel(utils.TRACE if DEBUG > 2 else logging.DEBUG)
    if DEBUG > 1:
        log.addHandler(dbg_hand)

##############
# Exceptions #
##############

class ConfigError(RuntimeError):
    """Missing or bad configuration (unknown strategy, class, or parameter)
    """
    pass

class LogicError(RuntimeError):
    """Bad input from the caller (e.g. empty legal set, malformed trick), or broken
    internal invariant
    """
    pass

class ImplementationError(RuntimeError):
    """A strategy returned an illegal decision to the driver
    """
    pass

##################
# Basedata Setup #
##################

def validate_basedata(basedata, offset: int = 0) -> None:
    """Make sure that the embedded index for base data elements (ranks, suits, cards)
    matches the position within the data structure (failed assert on validation error)
    """
    for elem in basedata:
        assert elem.idx == basedata.index(elem) + offset
