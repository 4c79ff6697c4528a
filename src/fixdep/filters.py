import logging
import os

from .constants import IGNORED_SUFFIXES

logger = logging.getLogger("fixdep.filters")


def str_ends_with(token, suffix):
    return len(token) >= len(suffix) and token[len(token) - len(suffix):] == suffix


def should_ignore(token):
    # autoconf.h is regenerated on every config change; the rest are build
    # outputs, not sources.
    for suffix in IGNORED_SUFFIXES:
        if str_ends_with(token, suffix):
            logger.debug("ignoring %s (matches %s)", os.fsdecode(token), os.fsdecode(suffix))
            return True
    return False
