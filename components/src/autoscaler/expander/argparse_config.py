# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Argument parsing for expander selection."""

import argparse

from autoscaler.common.configuration.utils import add_argument
from autoscaler.expander.defaults import (
    AVAILABLE_EXPANDERS,
    REMOTE_EXPANDER_NAME,
    ExpanderDefaults,
)
from autoscaler.expander.exceptions import UnknownExpanderError


def parse_expander_names(value: str) -> list[str]:
    """Split a comma-separated expander list, e.g. ``remote,random``."""
    return [name.strip() for name in value.split(",") if name.strip()]


def add_expander_args(parser) -> None:
    """Register expander flags on a parser or argument group."""
    add_argument(
        parser,
        flag_name="--expander",
        env_var="AUTOSCALER_EXPANDER",
        default=ExpanderDefaults.expander,
        help=f"Comma-separated expanders applied in order ({', '.join(AVAILABLE_EXPANDERS)})",
    )
    add_argument(
        parser,
        flag_name="--remote-expander-url",
        env_var="AUTOSCALER_REMOTE_EXPANDER_URL",
        default=ExpanderDefaults.remote_expander_url,
        help="Address of the remote expander service (host:port or URL)",
    )
    add_argument(
        parser,
        flag_name="--remote-expander-cert",
        env_var="AUTOSCALER_REMOTE_EXPANDER_CERT",
        default=ExpanderDefaults.remote_expander_cert,
        help="CA certificate for the remote expander; plain HTTP if unset",
    )
    add_argument(
        parser,
        flag_name="--remote-expander-timeout",
        env_var="AUTOSCALER_REMOTE_EXPANDER_TIMEOUT",
        default=ExpanderDefaults.remote_expander_timeout,
        help="Deadline for one remote expander call, in seconds",
        arg_type=float,
    )


def create_expander_parser() -> argparse.ArgumentParser:
    """Create the argument parser for expander configuration.

    Returns:
        argparse.ArgumentParser: Configured argument parser
    """
    parser = argparse.ArgumentParser(
        description="Expander - choose which node group to scale up",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Local random choice only
  --expander=random

  # Ask a remote expander first, then pick randomly among its selection
  --expander=remote,random --remote-expander-url=expander.kube-system:7000

  # Same, over TLS
  --expander=remote --remote-expander-url=expander.kube-system:7000 \\
    --remote-expander-cert=/etc/expander/ca.crt
        """,
    )
    add_expander_args(parser)
    return parser


def validate_expander_args(args: argparse.Namespace) -> None:
    """Check expander flags, raising ValueError on bad combinations.

    Unknown names raise ``UnknownExpanderError``, itself a ValueError.
    """
    names = parse_expander_names(args.expander or "")
    if not names:
        raise ValueError("at least one expander must be configured")

    for name in names:
        if name not in AVAILABLE_EXPANDERS:
            raise UnknownExpanderError(name, AVAILABLE_EXPANDERS)

    if REMOTE_EXPANDER_NAME in names and not args.remote_expander_url:
        raise ValueError("remote-expander-url required when using the remote expander")

    if args.remote_expander_timeout <= 0:
        raise ValueError("remote-expander-timeout must be positive")
