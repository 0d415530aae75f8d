# Copyright 2022 The ChromiumOS Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""Argument parsing shared by the scripts.

Every script gets the same logging flags:
  --log-level: one of LOG_LEVELS; the default is set per script.
  --debug: alias for --log-level=debug.
"""

import argparse
import logging
import sys

import jsonpretty


LOG_LEVELS = ("debug", "info", "notice", "warning", "error", "critical")

# Records go to stderr so they never mix with JSON on stdout.
LOG_FORMAT = "%(levelname)s: %(message)s"


def SetupLogging(level: str) -> None:
    """Send log records at |level| and above to stderr."""
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    if level == "notice":
        logging.getLogger().setLevel(jsonpretty.NOTICE)
    else:
        logging.getLogger().setLevel(level.upper())


class ArgumentParser(argparse.ArgumentParser):
    """argparse.ArgumentParser that also sets up logging."""

    def __init__(self, *args, default_log_level: str = "notice", **kwargs):
        super().__init__(*args, **kwargs)
        group = self.add_argument_group("Logging options")
        group.add_argument(
            "--log-level",
            choices=LOG_LEVELS,
            default=default_log_level,
            help="Lowest level of messages to show (default: %(default)s)",
        )
        group.add_argument(
            "--debug",
            dest="log_level",
            action="store_const",
            const="debug",
            help="Alias for --log-level=debug",
        )

    def parse_args(self, args=None, namespace=None):
        opts = super().parse_args(args=args, namespace=namespace)
        SetupLogging(opts.log_level)
        return opts
