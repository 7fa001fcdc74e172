# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Assembles the configured expanders into a single chain."""

import argparse
import logging
from typing import Optional

from autoscaler.common.logging import configure_autoscaler_logging
from autoscaler.expander.argparse_config import (
    parse_expander_names,
    validate_expander_args,
)
from autoscaler.expander.defaults import (
    AVAILABLE_EXPANDERS,
    RANDOM_EXPANDER_NAME,
    REMOTE_EXPANDER_NAME,
)
from autoscaler.expander.exceptions import UnknownExpanderError
from autoscaler.expander.expander import Filter, NodeInfo, Option, Strategy
from autoscaler.expander.metrics import ExpanderPrometheusMetrics
from autoscaler.expander.random_strategy import RandomStrategy
from autoscaler.expander.remote.strategy import new_remote_filter

configure_autoscaler_logging()
logger = logging.getLogger(__name__)


class ExpanderChain:
    """Runs the filters in order, then lets the strategy pick one option."""

    def __init__(self, filters: list[Filter], strategy: Strategy):
        self.filters = filters
        self.strategy = strategy

    async def best_option(
        self, options: list[Option], node_infos: dict[str, NodeInfo]
    ) -> Optional[Option]:
        for expansion_filter in self.filters:
            options = await expansion_filter.best_options(options, node_infos)
            if not options:
                logger.info(
                    f"{type(expansion_filter).__name__} left no options, skipping scale-up"
                )
                return None
        return self.strategy.best_option(options, node_infos)

    async def close(self):
        for expansion_filter in self.filters:
            await expansion_filter.close()


async def build_expander_chain(
    args: argparse.Namespace,
    metrics: Optional[ExpanderPrometheusMetrics] = None,
) -> ExpanderChain:
    """Build the chain named by ``args.expander``.

    Raises:
        ValueError: The flags are inconsistent, e.g. the remote expander
            without an address or a non-positive call timeout
        UnknownExpanderError: An expander name is not recognised
        ExpanderUnavailableError: The remote expander cannot be set up
    """
    validate_expander_args(args)
    names = parse_expander_names(args.expander)
    filters: list[Filter] = []
    try:
        for name in names:
            if name == RANDOM_EXPANDER_NAME:
                filters.append(RandomStrategy())
            elif name == REMOTE_EXPANDER_NAME:
                filters.append(
                    await new_remote_filter(
                        args.remote_expander_url,
                        cert_file=args.remote_expander_cert,
                        timeout=args.remote_expander_timeout,
                        metrics=metrics,
                    )
                )
            else:
                raise UnknownExpanderError(name, AVAILABLE_EXPANDERS)
    except Exception:
        for built in filters:
            await built.close()
        raise

    logger.info(f"Expander chain: {' -> '.join(names)} -> {RANDOM_EXPANDER_NAME}")
    return ExpanderChain(filters, RandomStrategy())
