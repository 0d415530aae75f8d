# Copyright 2020 The ChromiumOS Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""Functions for formatting JSON in a human-readable format.

The output is meant for test assertions and diffs: indented by 4 spaces, keys
in their original order, null values kept, and HTML characters such as <, >
and & left as-is.
"""

import collections.abc
import dataclasses
import enum
import inspect
import io
import json as mod_json
import os
from typing import Any, Optional, TextIO, Union

from jsonpretty.utils import file_util


# Indent of the human-readable form.
INDENT = "    "

# Valid raw inside JSON strings, but not inside JavaScript ones.
_LINE_TERMINATORS = str.maketrans({"\u2028": "\\u2028", "\u2029": "\\u2029"})


class FormatterError(RuntimeError):
    """The JSON writer could not be created."""


def _public_attrs(obj):
    """Yield (name, value) for the public instance attributes of |obj|."""
    seen = set()
    for cls in reversed(type(obj).__mro__):
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name.startswith("_") or name in seen:
                continue
            seen.add(name)
            # Unassigned slots have no value at all, unlike None.
            try:
                yield name, getattr(obj, name)
            except AttributeError:
                pass
    for name, value in getattr(obj, "__dict__", {}).items():
        if not name.startswith("_") and name not in seen:
            yield name, value


def to_tree(obj: Any) -> Any:
    """Convert |obj| into a tree of dicts, lists and JSON scalars.

    Dicts and lists are rebuilt with their members converted.  Objects become
    dicts of their fields in declaration order.  Values with no JSON form are
    returned unchanged so the serializer reports them.

    Args:
        obj: Any value.

    Returns:
        A tree the json module can serialize.
    """
    if isinstance(obj, enum.Enum):
        return obj.name
    if obj is None or isinstance(obj, (str, int, float)):
        return obj
    if isinstance(obj, os.PathLike):
        return os.fspath(obj)
    if isinstance(obj, collections.abc.Mapping):
        return {k: to_tree(v) for k, v in obj.items()}
    if isinstance(obj, tuple) and hasattr(obj, "_asdict"):
        return to_tree(obj._asdict())
    if isinstance(obj, (list, tuple)):
        return [to_tree(x) for x in obj]
    if isinstance(obj, (set, frozenset)):
        return [to_tree(x) for x in obj]
    if (
        inspect.isroutine(obj)
        or inspect.ismodule(obj)
        or isinstance(obj, type)
    ):
        return obj
    if dataclasses.is_dataclass(obj):
        return {
            f.name: to_tree(getattr(obj, f.name))
            for f in dataclasses.fields(obj)
        }
    if hasattr(obj, "__dict__") or hasattr(type(obj), "__slots__"):
        attrs = {name: to_tree(value) for name, value in _public_attrs(obj)}
        # Value types such as Fraction only have private slots.
        if attrs or hasattr(obj, "__dict__"):
            return attrs
    return obj


def _new_writer(compact: bool):
    """Create the encoder & in-memory sink for a single call."""
    try:
        encoder = mod_json.JSONEncoder(
            # Unicode is allowed as-is; only what JSON requires is escaped.
            ensure_ascii=False,
            allow_nan=False,
            indent=None if compact else INDENT,
            separators=(",", ":") if compact else (",", ": "),
        )
        sink = io.StringIO()
    except (OSError, TypeError, ValueError) as e:
        raise FormatterError("Failed to create JSON writer") from e
    return encoder, sink


def json(
    obj,
    fp: Optional[Union[str, os.PathLike, TextIO]] = None,
    compact: bool = False,
) -> Optional[str]:
    """Convert an object to JSON with the right format.

    Args:
        obj: The object to serialize & format.  Either a JSON tree (dicts,
            lists & scalars) or any value to_tree() can convert.
        fp: By default, the JSON string is returned.  The |fp| allows specifying
            a path or a file object (in text mode) to write to instead.
        compact: Whether the output will be compact (flattened to one line), or
            human-readable (spread over multiple lines).

    Returns:
        A string if |fp| is not specified, else None.

    Raises:
        FormatterError: The writer could not be set up.
        TypeError: |obj| holds a value with no JSON form.
        ValueError: |obj| holds NaN or an infinity.
    """
    tree = to_tree(obj)
    encoder, sink = _new_writer(compact)
    for chunk in encoder.iterencode(tree):
        sink.write(chunk)
    ret = sink.getvalue().translate(_LINE_TERMINATORS)

    if fp is None:
        return ret
    with file_util.Open(fp, mode="w", encoding="utf-8") as real_fp:
        real_fp.write(ret + "\n")
    return None


def json_str(
    raw: Union[str, bytes],
    fp: Optional[Union[str, os.PathLike, TextIO]] = None,
    compact: bool = False,
) -> Optional[str]:
    """Parse the JSON document |raw| and reformat it via json().

    Raises:
        json.JSONDecodeError: |raw| is not valid JSON.
    """
    return json(mod_json.loads(raw), fp=fp, compact=compact)
