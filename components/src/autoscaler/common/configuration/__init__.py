# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from autoscaler.common.configuration.utils import add_argument, env_or_default

__all__ = ["add_argument", "env_or_default"]
