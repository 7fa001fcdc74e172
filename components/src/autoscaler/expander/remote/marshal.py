# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Conversion between local expansion options and best_options messages."""

import logging
from typing import Optional

from autoscaler.expander.expander import NodeInfo, Option
from autoscaler.expander.remote.protocol import OptionMessage, SelectedOption

logger = logging.getLogger(__name__)


def populate_options_for_remote(
    options: list[Option],
) -> tuple[dict[str, Option], list[OptionMessage]]:
    """Build the outgoing option messages and the id -> option lookup.

    Node group ids are assumed unique within a round.
    """
    option_map: dict[str, Option] = {}
    messages: list[OptionMessage] = []
    for option in options:
        option_map[option.node_group_id] = option
        messages.append(new_option_message(option))
    return option_map, messages


def populate_node_info_for_remote(node_infos: dict[str, NodeInfo]) -> dict[str, dict]:
    """Keep only the node descriptor of each NodeInfo."""
    return {node_name: info.node for node_name, info in node_infos.items()}


def transform_and_sanitize_options(
    selected: list[SelectedOption], option_map: dict[str, Option]
) -> Optional[list[Option]]:
    """Map the server's selection back onto the options that were offered.

    Returns the original Option objects in the server's order, or None if
    any id was never offered. A single unknown id rejects the whole response.
    """
    options = []
    for entry in selected:
        option = option_map.get(entry.node_group_id)
        if option is None:
            logger.error(
                f"Remote expander returned invalid node group id: {entry.node_group_id}"
            )
            return None
        options.append(option)
    return options


def new_option_message(option: Option) -> OptionMessage:
    return OptionMessage(
        node_group_id=option.node_group_id,
        node_count=option.node_count,
        debug=option.debug,
        pods=list(option.pods),
    )
