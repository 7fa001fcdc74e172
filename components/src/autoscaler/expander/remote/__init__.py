# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

__all__ = [
    "RemoteExpanderClient",
    "RemoteExpanderFilter",
    "new_remote_filter",
]

from autoscaler.expander.remote.client import RemoteExpanderClient
from autoscaler.expander.remote.strategy import RemoteExpanderFilter, new_remote_filter
