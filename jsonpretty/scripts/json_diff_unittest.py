# Copyright 2022 The ChromiumOS Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""Test the json_diff script."""

import logging

import pytest

from jsonpretty.scripts import json_diff


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_diff_same():
    """Equal documents have no diff."""
    assert json_diff.Diff({"a": [1]}, {"a": [1]}) == ""


def test_diff():
    """Differences are shown in the pretty layout."""
    assert json_diff.Diff({"a": 1, "b": None}, {"a": 2, "b": None}) == (
        "--- a\n"
        "+++ b\n"
        "@@ -1,4 +1,4 @@\n"
        " {\n"
        '-    "a": 1,\n'
        '+    "a": 2,\n'
        '     "b": null\n'
        " }"
    )


def test_diff_type_change():
    """Values that compare equal in Python but not in JSON still differ."""
    assert json_diff.Diff([1], [True])


def test_main_same(tmp_path, capsys):
    """Formatting differences alone are not reported."""
    file1 = tmp_path / "1.json"
    file1.write_text('{"a":[1,2]}', encoding="utf-8")
    file2 = tmp_path / "2.json"
    file2.write_text('{\n  "a": [1, 2]\n}\n', encoding="utf-8")
    assert json_diff.main([str(file1), str(file2)]) == 0
    assert capsys.readouterr().out == ""


def test_main_differ(tmp_path, capsys):
    """Content differences are printed as a unified diff."""
    file1 = tmp_path / "1.json"
    file1.write_text('{"name":"test","envs":null}', encoding="utf-8")
    file2 = tmp_path / "2.json"
    file2.write_text('{"name":"test","envs":{"A":"<b>"}}', encoding="utf-8")
    assert json_diff.main([str(file1), str(file2)]) == 1
    out = capsys.readouterr().out
    assert f"--- a/{file1}\n+++ b/{file2}\n" in out
    assert '-    "envs": null\n' in out
    assert '+    "envs": {\n+        "A": "<b>"\n+    }\n' in out


def test_main_bad_input(tmp_path):
    """Unreadable or malformed files exit 2."""
    good = tmp_path / "good.json"
    good.write_text("{}", encoding="utf-8")
    bad = tmp_path / "bad.json"
    bad.write_text("{invalid", encoding="utf-8")
    assert json_diff.main([str(good), str(bad)]) == 2
    assert json_diff.main([str(good), str(tmp_path / "missing.json")]) == 2
