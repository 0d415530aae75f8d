# Copyright 2022 The ChromiumOS Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""Human readable diff two JSON files."""

import difflib
import json
import logging
from pathlib import Path
import sys

from jsonpretty.utils import commandline
from jsonpretty.utils import pformat


def get_parser():
    """Build the argument parser."""
    parser = commandline.ArgumentParser(
        description=__doc__, default_log_level="notice"
    )
    parser.add_argument("files", nargs=2, help="JSON files to diff")
    return parser


def _parse_arguments(argv):
    """Parse and validate arguments."""
    parser = get_parser()
    opts = parser.parse_args(argv)

    opts.files = [Path(x) for x in opts.files]

    return opts


def Diff(obj1, obj2, fromfile: str = "a", tofile: str = "b") -> str:
    """Unified diff of the pretty-printed forms of |obj1| and |obj2|.

    Returns:
        The diff, or an empty string when both format the same.
    """
    lines1 = pformat.json(obj1).splitlines()
    lines2 = pformat.json(obj2).splitlines()
    return "\n".join(
        difflib.unified_diff(
            lines1,
            lines2,
            fromfile=fromfile,
            tofile=tofile,
            lineterm="",
        )
    )


def main(argv):
    opts = _parse_arguments(argv)

    file1, file2 = opts.files

    try:
        json1 = json.loads(file1.read_bytes())
        json2 = json.loads(file2.read_bytes())
    except (OSError, ValueError) as e:
        logging.error("%s", e)
        return 2

    diff = Diff(json1, json2, fromfile=f"a/{file1}", tofile=f"b/{file2}")
    if not diff:
        logging.info("Files are the same")
        return 0

    print(diff)
    return 1


def entry():
    """Console script entry point."""
    sys.exit(main(sys.argv[1:]))
