# Copyright 2022 The ChromiumOS Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""Pretty-printing of JSON for readable test output and diffs."""

import functools
import logging


__version__ = "1.0.0"

# High level progress messages; the default level of the scripts.
NOTICE = 25

logging.addLevelName(NOTICE, "NOTICE")

# Lets scripts call `logging.notice(...)` like the other level helpers.
logging.NOTICE = NOTICE
logging.notice = functools.partial(logging.log, NOTICE)
