import logging
import os

from .errors import DepfileError

logger = logging.getLogger("fixdep.depfile")


def read_file(path):
    """Read ``path`` completely; the result must match the size fstat reports."""
    try:
        f = open(path, "rb")
    except OSError as e:
        raise DepfileError("open", path, e) from e
    with f:
        try:
            size = os.fstat(f.fileno()).st_size
        except OSError as e:
            raise DepfileError("fstat", path, e) from e
        try:
            buf = f.read(size)
        except OSError as e:
            raise DepfileError("read", path, e) from e
    if len(buf) != size:
        raise DepfileError("read", path, f"short read ({len(buf)} of {size} bytes)")
    logger.debug("read %d bytes from %s", size, os.fsdecode(path))
    return buf
