# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Expanders decide which node group to grow when a scale-up is needed.

Architecture:
- The control loop builds expansion options, one per node group
- Filters narrow the options in order (remote, random)
- A final random strategy picks the option to act on
- The remote filter degrades to "no filtering" whenever its service fails

Usage:
    chain = await build_expander_chain(args)
    option = await chain.best_option(options, node_infos)
"""

__all__ = [
    "ExpanderChain",
    "Filter",
    "NodeInfo",
    "Option",
    "RandomStrategy",
    "RemoteExpanderFilter",
    "Strategy",
    "build_expander_chain",
]

from autoscaler.expander.expander import Filter, NodeInfo, Option, Strategy
from autoscaler.expander.factory import ExpanderChain, build_expander_chain
from autoscaler.expander.random_strategy import RandomStrategy
from autoscaler.expander.remote.strategy import RemoteExpanderFilter
