# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for env-backed argparse helpers and logging setup."""

import argparse
import logging
import os
from unittest.mock import patch

import pytest

from autoscaler.common.configuration.utils import add_argument, env_or_default
from autoscaler.common.logging import configure_autoscaler_logging

pytestmark = [
    pytest.mark.pre_merge,
    pytest.mark.unit,
]


@pytest.mark.parametrize(
    "value, default, value_type, expected",
    [
        ("3", 1, None, 3),
        ("2.5", 1.0, None, 2.5),
        ("yes", False, None, True),
        ("0", True, None, False),
        ("remote, random", [], None, ["remote", "random"]),
        ("7", None, int, 7),
        ("plain", None, None, "plain"),
    ],
)
def test_env_or_default_converts(value, default, value_type, expected):
    with patch.dict(os.environ, {"AUTOSCALER_TEST_VALUE": value}):
        assert env_or_default("AUTOSCALER_TEST_VALUE", default, value_type) == expected


@pytest.mark.parametrize("value", [None, "", "   "])
def test_env_or_default_unset(value):
    env = {} if value is None else {"AUTOSCALER_TEST_VALUE": value}
    with patch.dict(os.environ, env, clear=True):
        assert env_or_default("AUTOSCALER_TEST_VALUE", 4.0) == 4.0


def test_add_argument_uses_env_and_builds_help():
    parser = argparse.ArgumentParser()
    with patch.dict(os.environ, {"AUTOSCALER_TIMEOUT": "9"}):
        add_argument(
            parser,
            flag_name="--call-timeout",
            env_var="AUTOSCALER_TIMEOUT",
            default=5.0,
            help="Call timeout",
            arg_type=float,
        )

    assert parser.parse_args([]).call_timeout == 9.0
    assert parser.parse_args(["--call-timeout", "1"]).call_timeout == 1.0

    action = parser._option_string_actions["--call-timeout"]
    assert "env var: AUTOSCALER_TIMEOUT | default: 5.0" in action.help


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_is_idempotent(clean_root_logger):
    configure_autoscaler_logging("debug")
    configure_autoscaler_logging("warning")

    named = [h for h in clean_root_logger.handlers if h.get_name() == "autoscaler"]
    assert len(named) == 1
    assert clean_root_logger.level == logging.WARNING


def test_configure_logging_from_env(clean_root_logger):
    with patch.dict(os.environ, {"AUTOSCALER_LOG": "error"}):
        configure_autoscaler_logging()
    assert clean_root_logger.level == logging.ERROR


def test_configure_logging_unknown_level_falls_back_to_info(clean_root_logger):
    configure_autoscaler_logging("chatty")
    assert clean_root_logger.level == logging.INFO
