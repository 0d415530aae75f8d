# Copyright 2021 The ChromiumOS Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""File interaction utilities."""

import contextlib
import os
import sys
from typing import Iterator, TextIO, Union


# Command line spelling of stdin/stdout.
STDIO_PATH = "-"


@contextlib.contextmanager
def Open(
    obj: Union[str, os.PathLike, TextIO], mode: str = "r", **kwargs
) -> Iterator[TextIO]:
    """Convenience ctx that accepts a file path or an already open file object.

    Paths are opened here and closed on exit.  File objects belong to the
    caller and are left open.
    """
    if isinstance(obj, (str, os.PathLike)):
        with open(obj, mode=mode, **kwargs) as f:
            yield f
    else:
        yield obj


def read_text(obj: Union[str, os.PathLike, TextIO]) -> str:
    """Return the UTF-8 text of |obj|, where "-" means stdin."""
    if obj == STDIO_PATH:
        return sys.stdin.read()
    with Open(obj, encoding="utf-8") as fp:
        return fp.read()


def write_text(obj: Union[str, os.PathLike, TextIO], data: str) -> None:
    """Write |data| as UTF-8 to |obj|, where "-" means stdout."""
    if obj == STDIO_PATH:
        sys.stdout.write(data)
        return
    with Open(obj, mode="w", encoding="utf-8") as fp:
        fp.write(data)
