# Copyright 2022 The ChromiumOS Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""Pretty-print JSON files with 4 space indentation."""

import logging
import sys

from jsonpretty.utils import commandline
from jsonpretty.utils import file_util
from jsonpretty.utils import pformat


def get_parser():
    """Build the argument parser."""
    parser = commandline.ArgumentParser(
        description=__doc__, default_log_level="notice"
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--check",
        action="store_true",
        help="Only report files that are not formatted; exit 1 if any",
    )
    mode.add_argument(
        "-i",
        "--inplace",
        action="store_true",
        help="Rewrite the files instead of printing them",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="Flatten each document to one line",
    )
    parser.add_argument(
        "files",
        nargs="*",
        default=[file_util.STDIO_PATH],
        help="JSON files to format (default: stdin)",
    )
    return parser


def _parse_arguments(argv):
    """Parse and validate arguments."""
    parser = get_parser()
    opts = parser.parse_args(argv)

    if opts.inplace and file_util.STDIO_PATH in opts.files:
        parser.error("--inplace does not work with stdin")

    return opts


def Data(data: str, compact: bool = False) -> str:
    """Format the JSON document |data| the way it is written to files.

    Args:
        data: The file content to format.
        compact: Whether to flatten the document to one line.

    Returns:
        Formatted data.
    """
    return pformat.json_str(data, compact=compact) + "\n"


def main(argv):
    opts = _parse_arguments(argv)

    ret = 0
    for path in opts.files:
        try:
            data = file_util.read_text(path)
            formatted = Data(data, compact=opts.compact)
            # Lone surrogates parse fine but cannot be written back out; fail
            # before any file is truncated.
            formatted.encode("utf-8")
        except (OSError, ValueError) as e:
            logging.error("%s: %s", path, e)
            ret = 1
            continue

        if opts.check:
            if data != formatted:
                logging.notice("%s: needs formatting", path)
                ret = 1
        elif opts.inplace:
            if data != formatted:
                logging.info("Updating %s", path)
                file_util.write_text(path, formatted)
        else:
            file_util.write_text(file_util.STDIO_PATH, formatted)

    return ret


def entry():
    """Console script entry point."""
    sys.exit(main(sys.argv[1:]))
