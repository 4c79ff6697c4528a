"""Read back the ``savedcmd_<target>`` line of a generated fragment.

kbuild rebuilds a target when its command line changed since the last build.
The comparison ignores differences in whitespace only.
"""
import logging
import re

logger = logging.getLogger("fixdep.savedcmd")


def savedcmd_re(target):
    return re.compile(r"^savedcmd_" + re.escape(target) + r"[ \t]*:=[ \t]?(.*)$", re.MULTILINE)


def read_savedcmd(text, target):
    match = savedcmd_re(target).search(text)
    if not match:
        return None
    return match.group(1)


def normalize_command(cmdline):
    return " ".join(cmdline.split())


def command_changed(fragment_path, target, cmdline):
    try:
        with open(fragment_path, "r", encoding="utf-8", errors="surrogateescape") as f:
            text = f.read()
    except FileNotFoundError:
        logger.info("%s: no saved fragment at %s", target, fragment_path)
        return True
    saved = read_savedcmd(text, target)
    if saved is None:
        logger.info("%s: no savedcmd line in %s", target, fragment_path)
        return True
    if normalize_command(saved) != normalize_command(cmdline):
        logger.info("%s: command changed", target)
        logger.debug("  was: %s", saved)
        logger.debug("  now: %s", cmdline)
        return True
    return False
