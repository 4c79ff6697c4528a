import os
import types

import pytest

from fixdep.depfile import read_file
from fixdep.errors import DepfileError


def test_read_whole_file(tmp_path):
    path = tmp_path / ".foo.o.d"
    path.write_bytes(b"foo.o: foo.c \\\n foo.h\n")
    assert read_file(path) == b"foo.o: foo.c \\\n foo.h\n"


def test_read_empty_file(tmp_path):
    path = tmp_path / "empty.d"
    path.write_bytes(b"")
    assert read_file(path) == b""


def test_missing_file(tmp_path):
    path = tmp_path / "missing.d"
    with pytest.raises(DepfileError) as excinfo:
        read_file(path)
    err = excinfo.value
    assert err.operation == "open"
    assert err.path == str(path)
    assert isinstance(err.cause, FileNotFoundError)
    assert str(err).startswith("open error: ")


def test_directory_cannot_be_opened(tmp_path):
    with pytest.raises(DepfileError) as excinfo:
        read_file(tmp_path)
    assert excinfo.value.operation == "open"


def test_fstat_failure(tmp_path, monkeypatch):
    path = tmp_path / ".foo.o.d"
    path.write_bytes(b"foo.o: foo.c\n")

    def broken_fstat(fd):
        raise OSError(5, "Input/output error")

    monkeypatch.setattr(os, "fstat", broken_fstat)
    with pytest.raises(DepfileError) as excinfo:
        read_file(path)
    assert excinfo.value.operation == "fstat"
    assert "Input/output error" in str(excinfo.value)


def test_short_read(tmp_path, monkeypatch):
    path = tmp_path / ".foo.o.d"
    path.write_bytes(b"foo.o: foo.c")
    monkeypatch.setattr(os, "fstat", lambda fd: types.SimpleNamespace(st_size=100))
    with pytest.raises(DepfileError) as excinfo:
        read_file(path)
    assert excinfo.value.operation == "read"
    assert str(excinfo.value).endswith("short read (12 of 100 bytes)")
