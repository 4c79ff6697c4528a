import logging
import sys

import click

from .config_scan import ConfigScanner
from .constants import CMDCHECK_USAGE, LOG_LEVEL, USAGE
from .depfile import read_file
from .emitter import parse_dep_file
from .errors import FixdepError
from .savedcmd import command_changed

logger = logging.getLogger("fixdep.cli")

EXIT_FAILURE = 1

# Command lines routinely start with or contain dash words; anything click
# does not know is handed through as a positional argument. Only long options
# are defined so that no short flag can be picked out of such a word.
CONTEXT_SETTINGS = {"ignore_unknown_options": True}


def setup_logging(verbose):
    logging.basicConfig(stream=sys.stderr,
                        format="%(name)s: %(levelname)s: %(message)s")
    logging.getLogger("fixdep").setLevel(logging.DEBUG if verbose else LOG_LEVEL.upper())


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option("--scan-config", is_flag=True, envvar="FIXDEP_SCAN_CONFIG",
              help="Add a dependency on include/config/<SYMBOL> for every "
                   "CONFIG_ symbol mentioned in a prerequisite.")
@click.option("--verbose", is_flag=True, help="Log debug output to stderr.")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(ctx, args, scan_config, verbose):
    """Print the make fragment for TARGET built from DEPFILE with CMDLINE.

    Usage: fixdep <depfile> <target> <cmdline>
    """
    if len(args) != 3:
        click.echo(USAGE, err=True)
        ctx.exit(1)
    setup_logging(verbose)
    depfile, target, cmdline = args

    out = sys.stdout.buffer
    scanner = ConfigScanner() if scan_config else None
    try:
        buf = read_file(depfile)
        parse_dep_file(buf, target, cmdline, out, config_scanner=scanner)
        out.flush()
    except FixdepError as e:
        click.echo(f"fixdep: {e}", err=True)
        ctx.exit(EXIT_FAILURE)
    except MemoryError:
        click.echo("fixdep: malloc failure", err=True)
        ctx.exit(EXIT_FAILURE)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Log why the target is out of date.")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cmdcheck(ctx, args, verbose):
    """Exit 0 when FRAGMENT records CMDLINE for TARGET, 1 when it does not.

    Usage: fixdep-cmdcheck <fragment> <target> <cmdline>
    """
    if len(args) != 3:
        click.echo(CMDCHECK_USAGE, err=True)
        ctx.exit(2)
    setup_logging(verbose)
    fragment, target, cmdline = args
    try:
        changed = command_changed(fragment, target, cmdline)
    except OSError as e:
        click.echo(f"fixdep-cmdcheck: {fragment}: {e.strerror}", err=True)
        ctx.exit(2)
    ctx.exit(1 if changed else 0)


if __name__ == "__main__":
    main()
