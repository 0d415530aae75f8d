# Copyright 2022 The ChromiumOS Authors
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""Tests for commandline."""

import logging

import pytest

import jsonpretty
from jsonpretty.utils import commandline


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_notice_level():
    """The NOTICE level is registered with logging."""
    assert logging.getLevelName(jsonpretty.NOTICE) == "NOTICE"
    assert logging.NOTICE == jsonpretty.NOTICE
    assert callable(logging.notice)


def test_default_level():
    """Scripts log at NOTICE unless told otherwise."""
    opts = commandline.ArgumentParser().parse_args([])
    assert opts.log_level == "notice"
    assert logging.getLogger().level == jsonpretty.NOTICE


def test_custom_default_level():
    """The default level is set per parser."""
    parser = commandline.ArgumentParser(default_log_level="warning")
    assert parser.parse_args([]).log_level == "warning"
    assert logging.getLogger().level == logging.WARNING


@pytest.mark.parametrize(
    "argv,level",
    (
        (["--debug"], logging.DEBUG),
        (["--log-level", "info"], logging.INFO),
        (["--log-level=error"], logging.ERROR),
    ),
)
def test_log_level_flags(argv, level):
    """--log-level and --debug set the root logger level."""
    commandline.ArgumentParser().parse_args(argv)
    assert logging.getLogger().level == level


def test_bad_log_level():
    """Unknown levels are rejected."""
    with pytest.raises(SystemExit):
        commandline.ArgumentParser().parse_args(["--log-level", "loud"])
