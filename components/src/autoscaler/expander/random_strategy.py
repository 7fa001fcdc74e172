# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
import random
from typing import Optional

from autoscaler.expander.expander import Filter, NodeInfo, Option, Strategy

logger = logging.getLogger(__name__)


class RandomStrategy(Strategy, Filter):
    """Picks one option uniformly at random."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def best_option(
        self, options: list[Option], node_infos: dict[str, NodeInfo]
    ) -> Optional[Option]:
        if not options:
            return None
        option = self.rng.choice(options)
        logger.debug(f"Random expander picked {option.node_group_id}")
        return option

    async def best_options(
        self, options: list[Option], node_infos: dict[str, NodeInfo]
    ) -> list[Option]:
        option = self.best_option(options, node_infos)
        return [option] if option is not None else []
