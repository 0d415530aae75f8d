# Copyright 2021 The ChromiumOS Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""Tests for file_util."""

import io
import sys

from jsonpretty.utils import file_util


def test_open_str_path(tmp_path):
    """Read/write a file by path."""
    path = str(tmp_path / "test.txt")
    with file_util.Open(path, mode="w") as fp:
        fp.write("foo")
    with file_util.Open(path, mode="r") as fp:
        assert fp.read() == "foo"
    assert fp.closed


def test_open_path(tmp_path):
    """Read/write a file by Path, closing it afterwards."""
    path = tmp_path / "test.txt"
    with file_util.Open(path, mode="w") as fp:
        fp.write("foo")
    assert fp.closed
    assert path.read_text() == "foo"


def test_open_handle():
    """Open file objects are used as-is and left open."""
    stream = io.StringIO()
    with file_util.Open(stream, mode="w") as fp:
        fp.write("foo")
    assert fp is stream
    assert not stream.closed
    assert stream.getvalue() == "foo"


def test_read_write_text(tmp_path):
    """Text is UTF-8 regardless of the locale."""
    path = tmp_path / "test.txt"
    file_util.write_text(path, "ßomß")
    assert path.read_bytes() == "ßomß".encode("utf-8")
    assert file_util.read_text(path) == "ßomß"


def test_stdio(monkeypatch, capsys):
    """A dash reads stdin and writes stdout."""
    monkeypatch.setattr(sys, "stdin", io.StringIO("[1]"))
    assert file_util.read_text(file_util.STDIO_PATH) == "[1]"
    file_util.write_text(file_util.STDIO_PATH, "out")
    assert capsys.readouterr().out == "out"
