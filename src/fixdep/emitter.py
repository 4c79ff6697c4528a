"""Write the make fragment for one target.

The fragment records the command line, lists the surviving prerequisites and
adds an empty rule for them so a prerequisite that disappeared between builds
is treated as up to date rather than as a missing file::

    savedcmd_foo.o := gcc -c foo.c

    deps_foo.o := \\
      foo.o \\
      foo.c \\
      foo.h \\

    foo.o: $(deps_foo.o)

    $(deps_foo.o):
"""
import logging
import os

from .filters import should_ignore
from .tokenizer import iter_tokens

logger = logging.getLogger("fixdep.emitter")


def _to_bytes(value):
    if isinstance(value, bytes):
        return value
    return os.fsencode(value)


class FragmentWriter:
    def __init__(self, out, target, cmdline):
        self.out = out
        self.target = _to_bytes(target)
        self.cmdline = _to_bytes(cmdline)
        self.count = 0

    def write_header(self):
        self.out.write(b"savedcmd_%s := %s\n\n" % (self.target, self.cmdline))
        self.out.write(b"deps_%s := \\\n" % self.target)

    def write_dep(self, token):
        self.out.write(b"  %s \\\n" % token)
        self.count += 1

    def write_raw(self, line):
        self.out.write(line)

    def write_footer(self):
        self.out.write(b"\n%s: $(deps_%s)\n\n" % (self.target, self.target))
        self.out.write(b"$(deps_%s):\n" % self.target)


def parse_dep_file(buf, target, cmdline, out, config_scanner=None):
    """Turn the dependency file content ``buf`` into a fragment on ``out``.

    ``out`` must accept bytes. When ``config_scanner`` is given, each kept
    token other than the target itself is read and a
    ``$(wildcard include/config/...)`` line is written after it for every
    config symbol not mentioned before. Every token that is not ignored is
    written, the target named before the colon included. Returns the number
    of tokens written.
    """
    writer = FragmentWriter(out, target, cmdline)
    writer.write_header()
    skipped = 0
    for token in iter_tokens(buf):
        if should_ignore(token):
            skipped += 1
            continue
        writer.write_dep(token)
        if config_scanner is not None and token != writer.target:
            for line in config_scanner.scan(token):
                writer.write_raw(line)
    writer.write_footer()
    logger.debug("%s: kept %d prerequisites, dropped %d",
                 os.fsdecode(writer.target), writer.count, skipped)
    return writer.count
