# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Data structures for the best_options exchange with a remote expander."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class OptionMessage(BaseModel):
    """One expansion option as sent to the remote expander"""

    node_group_id: str
    node_count: int
    debug: str = ""
    pods: List[dict] = Field(default_factory=list)


class BestOptionsRequest(BaseModel):
    """Request asking the remote expander to narrow a set of options"""

    options: List[OptionMessage]

    # Node name -> node descriptor (no pod or resource accounting)
    node_info_map: Dict[str, dict] = Field(default_factory=dict)


class SelectedOption(BaseModel):
    """Reference to an offered option, by node group id only.

    Any other fields the server echoes back are dropped.
    """

    node_group_id: str


class BestOptionsResponse(BaseModel):
    """Response from the remote expander.

    ``options=None`` means the server produced no answer, which is not the
    same as an empty selection.
    """

    options: Optional[List[SelectedOption]] = None
