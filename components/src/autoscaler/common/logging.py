# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Process-wide logging setup for autoscaler components."""

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "AUTOSCALER_LOG"
DEFAULT_LOG_LEVEL = "info"

_HANDLER_NAME = "autoscaler"


def _resolve_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if isinstance(level, int):
        return level
    return logging.INFO


def configure_autoscaler_logging(level: Optional[str] = None) -> None:
    """Install the autoscaler stream handler on the root logger.

    The level comes from ``level`` if given, otherwise from the
    ``AUTOSCALER_LOG`` environment variable. Calling this more than once only
    updates the level.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)

    root = logging.getLogger()
    root.setLevel(_resolve_level(level))

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return

    console_handler = logging.StreamHandler()
    console_handler.set_name(_HANDLER_NAME)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", "%Y-%m-%d %H:%M:%S"
    )
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)
