# Copyright 2020 The ChromiumOS Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""Test suite for pformat.py"""

import collections
import dataclasses
import enum
import fractions
import io
import ipaddress
import json as mod_json
import pathlib
from typing import List, Optional

import pytest

from jsonpretty.utils import pformat


class ShortenCommandLine(enum.Enum):
    """Stand-in for an enum property of a run configuration."""

    NONE = 1
    MANIFEST = 2


class Application:
    """Run configuration with plain instance attributes."""

    def __init__(self, name):
        self.defaults = False
        self.type = "application"
        self.name = name
        self.envs = None
        self.workingDirectory = None
        self.beforeRun = []
        self.shortenCommandLine = None
        self._project = object()


@dataclasses.dataclass
class BuildArtifact:
    """Before-run task as a dataclass."""

    artifactName: Optional[str] = None
    type: str = "buildArtifact"
    tags: List[str] = dataclasses.field(default_factory=list)


class Slotted:
    """Object without a __dict__."""

    __slots__ = ("first", "unset", "_hidden")

    def __init__(self):
        self.first = 1
        self._hidden = 2


@dataclasses.dataclass
class CallableTask:
    """Dataclass that is also callable."""

    name: str

    def __call__(self):
        return self.name


Point = collections.namedtuple("Point", ("x", "y"))


def test_example():
    """The canonical example document."""
    assert pformat.json({"a": None, "b": [1, 2]}) == (
        "{\n"
        '    "a": null,\n'
        '    "b": [\n'
        "        1,\n"
        "        2\n"
        "    ]\n"
        "}"
    )


@pytest.mark.parametrize(
    "obj,exp",
    (
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (-12, "-12"),
        (1.5, "1.5"),
        ("", '""'),
        ([], "[]"),
        ({}, "{}"),
        ({"key": []}, '{\n    "key": []\n}'),
        ({"key": {}}, '{\n    "key": {}\n}'),
        ([[]], "[\n    []\n]"),
        ((1,), "[\n    1\n]"),
        ({1: "a"}, '{\n    "1": "a"\n}'),
        (
            {"a": [{"b": None}]},
            '{\n    "a": [\n        {\n            "b": null\n        }\n    ]\n}',
        ),
    ),
)
def test_layout(obj, exp):
    """Verify indentation & separators."""
    assert exp == pformat.json(obj)


def test_no_trailing_whitespace():
    """Lines end right after their separator."""
    result = pformat.json({"a": [1, {"b": 2}], "c": "d"})
    for line in result.splitlines():
        assert line == line.rstrip()
    assert not result.endswith("\n")


def test_indent_is_four_spaces():
    """Every nesting level adds exactly 4 spaces."""
    result = pformat.json({"l1": {"l2": {"l3": 0}}})
    assert result.splitlines() == [
        "{",
        '    "l1": {',
        '        "l2": {',
        '            "l3": 0',
        "        }",
        "    }",
        "}",
    ]


def test_key_order_preserved():
    """Keys keep insertion order and are never sorted."""
    result = pformat.json({"z": 1, "a": 2, "m": 3})
    assert result == '{\n    "z": 1,\n    "a": 2,\n    "m": 3\n}'


def test_nulls_kept():
    """Null fields are written out rather than dropped."""
    tree = mod_json.loads(pformat.json({"envs": None, "name": "x"}))
    assert tree == {"envs": None, "name": "x"}


def test_html_not_escaped():
    """HTML characters are emitted literally."""
    result = pformat.json({"url": "http://host/a?b=1&c=<d>'"})
    assert result == '{\n    "url": "http://host/a?b=1&c=<d>\'"\n}'


def test_unicode_not_escaped():
    """Non-ASCII characters are emitted literally."""
    assert pformat.json({"z": "カ"}) == '{\n    "z": "カ"\n}'


def test_control_chars_escaped():
    """Characters JSON forbids raw in strings are escaped."""
    assert pformat.json('a"b\\c\nd\te\x01') == '"a\\"b\\\\c\\nd\\te\\u0001"'


def test_line_terminators_escaped():
    """U+2028 & U+2029 are escaped in keys and values."""
    result = pformat.json({"k\u2028": "v\u2029"})
    assert result == '{\n    "k\\u2028": "v\\u2029"\n}'
    assert mod_json.loads(result) == {"k\u2028": "v\u2029"}


def test_compact():
    """Compact output is on one line with no spaces."""
    result = pformat.json({"a": None, "b": [1, "<&>"]}, compact=True)
    assert result == '{"a":null,"b":[1,"<&>"]}'


def test_deterministic():
    """Formatting the same value twice gives identical output."""
    obj = {"b": [1, 2.5, None], "a": {"x": "y"}, "c": Application("test")}
    assert pformat.json(obj) == pformat.json(obj)


@pytest.mark.parametrize(
    "tree",
    (
        {"a": None, "b": [1, 2]},
        [1, "two", 3.0, True, None, {"nested": [[]]}],
        {"unicode": "ßomß", "html": "</script>"},
        "just a string",
    ),
)
def test_round_trip(tree):
    """Parsing the output gives back the same tree."""
    assert mod_json.loads(pformat.json(tree)) == tree


@pytest.mark.parametrize("bad", (float("nan"), float("inf"), [float("-inf")]))
def test_nan_rejected(bad):
    """NaN & infinities have no JSON form."""
    with pytest.raises(ValueError):
        pformat.json(bad)


@pytest.mark.parametrize(
    "bad",
    (
        b"bytes",
        object(),
        {"a": {1, b"x"}},
        {"v": fractions.Fraction(1, 3)},
        ipaddress.IPv4Address("127.0.0.1"),
        len,
        Application,
        pytest,
    ),
)
def test_unsupported_value(bad):
    """Values with no JSON form raise the serializer's error."""
    with pytest.raises(TypeError):
        pformat.json(bad)


def test_unsupported_key():
    """Keys must be JSON scalars."""
    with pytest.raises(TypeError):
        pformat.json({(1, 2): "tuple key"})


def test_writer_setup_failure(monkeypatch):
    """Failing to create the writer is reported as FormatterError."""

    def _broken(**_kwargs):
        raise OSError("no sink")

    monkeypatch.setattr(pformat.mod_json, "JSONEncoder", _broken)
    with pytest.raises(pformat.FormatterError) as excinfo:
        pformat.json({"a": 1})
    assert isinstance(excinfo.value, RuntimeError)
    assert isinstance(excinfo.value.__cause__, OSError)


class TestToTree:
    """Tests pformat.to_tree."""

    def test_plain_object(self):
        """Public attributes in definition order, None included."""
        app = Application("test")
        app.shortenCommandLine = ShortenCommandLine.MANIFEST
        assert pformat.to_tree(app) == {
            "defaults": False,
            "type": "application",
            "name": "test",
            "envs": None,
            "workingDirectory": None,
            "beforeRun": [],
            "shortenCommandLine": "MANIFEST",
        }

    def test_dataclass(self):
        """Dataclass fields in declaration order."""
        assert pformat.to_tree(BuildArtifact("myName")) == {
            "artifactName": "myName",
            "type": "buildArtifact",
            "tags": [],
        }

    def test_callable_dataclass(self):
        """Defining __call__ does not hide the fields."""
        assert pformat.to_tree(CallableTask("make")) == {"name": "make"}

    def test_empty_object(self):
        """An object with no public attributes is an empty object."""
        assert pformat.json(Application.__new__(Application)) == "{}"

    def test_slots(self):
        """Assigned public slots only."""
        assert pformat.to_tree(Slotted()) == {"first": 1}

    def test_namedtuple(self):
        """Named tuples become objects, not arrays."""
        assert pformat.to_tree(Point(1, None)) == {"x": 1, "y": None}

    def test_enum(self):
        """Enum members are written by name."""
        assert pformat.to_tree(ShortenCommandLine.NONE) == "NONE"

    def test_path(self):
        """Paths are written as strings."""
        assert pformat.to_tree(pathlib.PurePosixPath("a/b")) == "a/b"

    def test_set(self):
        """Sets become arrays."""
        assert pformat.to_tree({3}) == [3]
        assert pformat.to_tree(frozenset()) == []

    def test_tree_unchanged(self):
        """A JSON tree converts to an equal tree."""
        tree = {"a": [1, {"b": None}], "c": "d"}
        assert pformat.to_tree(tree) == tree

    def test_nested_objects(self):
        """Objects nested in containers are converted too."""
        app = Application("test")
        app.beforeRun.append(BuildArtifact("myName"))
        assert pformat.json(app) == (
            "{\n"
            '    "defaults": false,\n'
            '    "type": "application",\n'
            '    "name": "test",\n'
            '    "envs": null,\n'
            '    "workingDirectory": null,\n'
            '    "beforeRun": [\n'
            "        {\n"
            '            "artifactName": "myName",\n'
            '            "type": "buildArtifact",\n'
            '            "tags": []\n'
            "        }\n"
            "    ],\n"
            '    "shortenCommandLine": null\n'
            "}"
        )


class TestJsonStr:
    """Tests pformat.json_str."""

    SAMPLES = (
        "{}",
        "[]",
        "null",
        '{"a":null,"b":[1,2]}',
        '{"z": 1, "a": {"nested": ["x", "<y>", 2.5, false]}}',
        '  [ "a/b" ,\n true ]  ',
    )

    @pytest.mark.parametrize("raw", SAMPLES)
    def test_matches_json(self, raw):
        """Both entry points agree."""
        assert pformat.json_str(raw) == pformat.json(mod_json.loads(raw))

    def test_reformat(self):
        """Whitespace is normalized to the pretty layout."""
        assert pformat.json_str('{"key":[ ]}') == '{\n    "key": []\n}'

    def test_numbers_renormalized(self):
        """Number literals are rewritten in Python's own form."""
        assert pformat.json_str("[1e5, 1.50, -0]") == (
            "[\n    100000.0,\n    1.5,\n    0\n]"
        )

    def test_bytes(self):
        """UTF-8 bytes are accepted."""
        raw = '{"a": "カ"}'.encode("utf-8")
        assert pformat.json_str(raw) == '{\n    "a": "カ"\n}'

    def test_escapes_decoded(self):
        """Escaped HTML characters in the input come out literal."""
        assert pformat.json_str('"\\u003cb\\u003e \\u0026 \\/"') == '"<b> & /"'

    @pytest.mark.parametrize("raw", ("{invalid", "", "[1,", "{'a': 1}"))
    def test_malformed(self, raw):
        """Bad input raises a parse error instead of returning."""
        with pytest.raises(ValueError):
            pformat.json_str(raw)

    def test_malformed_error_type(self):
        """The parse error is the json module's own."""
        with pytest.raises(mod_json.JSONDecodeError):
            pformat.json_str("{invalid")


class TestJsonFile:
    """Tests writing through the fp argument."""

    def test_stream(self):
        """Write to an open file object, which stays open."""
        fp = io.StringIO()
        assert pformat.json({"a": None}, fp=fp) is None
        assert fp.getvalue() == '{\n    "a": null\n}\n'
        assert not fp.closed

    def test_str_path(self, tmp_path):
        """Write to a path given as a string."""
        path = tmp_path / "x.json"
        assert pformat.json([1], fp=str(path)) is None
        assert path.read_text(encoding="utf-8") == "[\n    1\n]\n"

    def test_path(self, tmp_path):
        """Write to a pathlib path."""
        path = tmp_path / "x.json"
        assert pformat.json_str('{"a":"カ"}', fp=path) is None
        assert path.read_text(encoding="utf-8") == '{\n    "a": "カ"\n}\n'

    def test_compact(self, tmp_path):
        """Compact files still end in a newline."""
        path = tmp_path / "x.json"
        pformat.json({"a": [1, 2]}, fp=path, compact=True)
        assert path.read_text(encoding="utf-8") == '{"a":[1,2]}\n'
