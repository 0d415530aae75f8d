# Copyright 2022 The ChromiumOS Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""Test the json_pretty script."""

import io
import logging
import sys

import pytest

from jsonpretty.scripts import json_pretty


FORMATTED = '{\n    "a": null,\n    "b": [\n        1,\n        2\n    ]\n}\n'


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


# None means input is already formatted to avoid having to repeat.
@pytest.mark.parametrize(
    "data,exp",
    (
        ("{}", "{}\n"),
        ("[]\n", None),
        (" {}\n", "{}\n"),
        ('{"a":null,"b":[1,2]}', FORMATTED),
        (FORMATTED, None),
        ('"</tag>"', '"</tag>"\n'),
    ),
)
def test_data(data, exp):
    """Verify inputs match expected outputs."""
    if exp is None:
        exp = data
    assert exp == json_pretty.Data(data)


def test_data_compact():
    """Compact output is one line."""
    assert json_pretty.Data(FORMATTED, compact=True) == '{"a":null,"b":[1,2]}\n'


def test_print(tmp_path, capsys):
    """Files are printed to stdout by default."""
    path = tmp_path / "x.json"
    path.write_text('{"a":null,"b":[1,2]}', encoding="utf-8")
    assert json_pretty.main([str(path)]) == 0
    assert capsys.readouterr().out == FORMATTED


def test_stdin(monkeypatch, capsys):
    """With no files, stdin is formatted."""
    monkeypatch.setattr(sys, "stdin", io.StringIO("[1]"))
    assert json_pretty.main([]) == 0
    assert capsys.readouterr().out == "[\n    1\n]\n"


def test_check(tmp_path, capsys):
    """--check reports unformatted files without touching them."""
    good = tmp_path / "good.json"
    good.write_text(FORMATTED, encoding="utf-8")
    bad = tmp_path / "bad.json"
    bad.write_text("[1,2]", encoding="utf-8")

    assert json_pretty.main(["--check", str(good)]) == 0
    assert json_pretty.main(["--check", str(good), str(bad)]) == 1
    assert bad.read_text(encoding="utf-8") == "[1,2]"
    assert capsys.readouterr().out == ""


def test_inplace(tmp_path):
    """--inplace rewrites files."""
    path = tmp_path / "x.json"
    path.write_text('{"a":null,"b":[1,2]}', encoding="utf-8")
    assert json_pretty.main(["--inplace", str(path)]) == 0
    assert path.read_text(encoding="utf-8") == FORMATTED


def test_inplace_stdin():
    """--inplace needs real files."""
    with pytest.raises(SystemExit):
        json_pretty.main(["--inplace"])


def test_check_and_inplace():
    """The modes are exclusive."""
    with pytest.raises(SystemExit):
        json_pretty.main(["--check", "--inplace", "x.json"])


def test_bad_input(tmp_path, capsys):
    """Malformed & missing files fail but do not stop the others."""
    bad = tmp_path / "bad.json"
    bad.write_text("{invalid", encoding="utf-8")
    good = tmp_path / "good.json"
    good.write_text("[]", encoding="utf-8")
    missing = tmp_path / "missing.json"

    assert json_pretty.main([str(bad), str(missing), str(good)]) == 1
    assert capsys.readouterr().out == "[]\n"


def test_inplace_unencodable(tmp_path, capsys):
    """Documents that cannot be written as UTF-8 leave the file intact."""
    path = tmp_path / "x.json"
    path.write_text('{"a":"\\ud800"}', encoding="utf-8")
    assert json_pretty.main(["-i", str(path)]) == 1
    assert path.read_text(encoding="utf-8") == '{"a":"\\ud800"}'

    assert json_pretty.main([str(path)]) == 1
    assert capsys.readouterr().out == ""
