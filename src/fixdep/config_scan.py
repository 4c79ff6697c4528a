"""Config symbol scanning.

kconfig keeps one empty file per symbol under ``include/config/`` and touches
the ones whose value changed. Depending on those files instead of on
``autoconf.h`` means a config change only rebuilds the objects whose sources
actually mention the changed symbol. Headers are not parsed: any textual
``CONFIG_FOO`` (comments included) counts, which can only add dependencies.
"""
import logging
import os
import re

from .constants import CONFIG_DIR, CONFIG_PREFIX
from .depfile import read_file
from .strset import StringSet

logger = logging.getLogger("fixdep.config_scan")

MODULE_SUFFIX = b"_MODULE"


class ConfigScanner:
    def __init__(self, prefix=CONFIG_PREFIX, config_dir=CONFIG_DIR):
        if isinstance(prefix, str):
            prefix = prefix.encode()
        if isinstance(config_dir, str):
            config_dir = config_dir.encode()
        self.prefix = prefix
        self.config_dir = config_dir
        self.seen = StringSet()
        self._symbol_re = re.compile(
            rb"(?<![A-Za-z0-9_])" + re.escape(prefix) + rb"([A-Za-z0-9_]+)")

    def find_symbols(self, content):
        for match in self._symbol_re.finditer(content):
            name = match.group(1)
            if name.endswith(MODULE_SUFFIX) and len(name) > len(MODULE_SUFFIX):
                name = name[:-len(MODULE_SUFFIX)]
            yield name

    def use_config(self, name):
        """Return the wildcard line for ``name``, or None if already emitted."""
        if self.seen.contains_or_insert(name):
            return None
        return b"    $(wildcard " + self.config_dir + name + b") \\\n"

    def scan(self, path):
        content = read_file(path)
        lines = []
        for name in self.find_symbols(content):
            line = self.use_config(name)
            if line is not None:
                lines.append(line)
        logger.debug("%s: %d new config symbols", os.fsdecode(path), len(lines))
        return lines
