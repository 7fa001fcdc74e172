# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Expansion options and the interfaces used to choose between them."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Option:
    """A candidate scale-up of one node group.

    Options compare by identity: a filter must hand back the same objects it
    was given, never copies rebuilt from other data.
    """

    node_group_id: str
    node_count: int
    debug: str = ""
    # Pending pods that motivated this option, in scheduling order.
    pods: list[dict] = field(default_factory=list)


@dataclass
class NodeInfo:
    """Scheduling context for a single node."""

    node: dict
    pods: list[dict] = field(default_factory=list)


class Strategy(ABC):
    """Picks the single option to act on."""

    @abstractmethod
    def best_option(
        self, options: list[Option], node_infos: dict[str, NodeInfo]
    ) -> Optional[Option]:
        pass


class Filter(ABC):
    """Narrows (and possibly reorders) the options for the next stage."""

    @abstractmethod
    async def best_options(
        self, options: list[Option], node_infos: dict[str, NodeInfo]
    ) -> list[Option]:
        pass

    async def close(self):
        """Release resources held by the filter. Default is a no-op."""
