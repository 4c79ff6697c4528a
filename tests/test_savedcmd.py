from fixdep.savedcmd import command_changed, normalize_command, read_savedcmd

FRAGMENT = (
    "savedcmd_drivers/net/foo.o := gcc -c  -o drivers/net/foo.o drivers/net/foo.c\n"
    "\n"
    "deps_drivers/net/foo.o := \\\n"
    "  drivers/net/foo.c \\\n"
    "\n"
    "drivers/net/foo.o: $(deps_drivers/net/foo.o)\n"
    "\n"
    "$(deps_drivers/net/foo.o):\n"
)


def test_read_savedcmd():
    assert read_savedcmd(FRAGMENT, "drivers/net/foo.o") == \
        "gcc -c  -o drivers/net/foo.o drivers/net/foo.c"


def test_read_savedcmd_other_target():
    assert read_savedcmd(FRAGMENT, "drivers/net/bar.o") is None
    # '.' in the target must not act as a wildcard.
    assert read_savedcmd(FRAGMENT, "drivers/net/fooxo") is None


def test_normalize_command():
    assert normalize_command("  gcc   -c\tfoo.c \n") == "gcc -c foo.c"


def test_unchanged_command(tmp_path):
    cmd_file = tmp_path / ".foo.o.cmd"
    cmd_file.write_text(FRAGMENT)
    assert not command_changed(cmd_file, "drivers/net/foo.o",
                               "gcc -c -o drivers/net/foo.o drivers/net/foo.c")


def test_changed_command(tmp_path):
    cmd_file = tmp_path / ".foo.o.cmd"
    cmd_file.write_text(FRAGMENT)
    assert command_changed(cmd_file, "drivers/net/foo.o",
                           "gcc -O2 -c -o drivers/net/foo.o drivers/net/foo.c")


def test_missing_fragment(tmp_path):
    assert command_changed(tmp_path / "nope.cmd", "foo.o", "gcc -c foo.c")


def test_fragment_without_savedcmd(tmp_path):
    cmd_file = tmp_path / ".foo.o.cmd"
    cmd_file.write_text("deps_foo.o := \\\n\n")
    assert command_changed(cmd_file, "foo.o", "gcc -c foo.c")


def test_savedcmd_does_not_span_lines():
    assert read_savedcmd("savedcmd_foo.o\n:= gcc -c foo.c\n", "foo.o") is None
    assert read_savedcmd("savedcmd_foo.o\t:= gcc -c foo.c\n", "foo.o") == "gcc -c foo.c"
