import re

# A run of anything but whitespace and ':'. A backslash is only part of a
# token when it is not a line continuation.
TOKEN_RE = re.compile(rb"(?:[^\s:\\]|\\(?!\r?\n))+")


def iter_tokens(buf):
    """Yield every path token of a dependency file, in source order.

    Colons are skipped like whitespace, so the target named before the first
    ':' comes out as an ordinary token.
    """
    for match in TOKEN_RE.finditer(buf):
        yield match.group(0)
