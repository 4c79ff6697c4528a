import os

### CONSTANT VARIABLES ###
LOG_LEVEL     = os.environ.get("FIXDEP_LOG_LEVEL", "WARNING")
CONFIG_PREFIX = os.environ.get("FIXDEP_CONFIG_PREFIX", "CONFIG_")
CONFIG_DIR    = os.environ.get("FIXDEP_CONFIG_DIR", "include/config/")

HASHSZ = 256

IGNORED_SUFFIXES = (
    b"include/generated/autoconf.h",
    b".rlib",
    b".rmeta",
    b".so",
)

USAGE = "Usage: fixdep <depfile> <target> <cmdline>"
CMDCHECK_USAGE = "Usage: fixdep-cmdcheck <fragment> <target> <cmdline>"
