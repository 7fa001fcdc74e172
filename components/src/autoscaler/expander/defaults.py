# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

RANDOM_EXPANDER_NAME = "random"
REMOTE_EXPANDER_NAME = "remote"

AVAILABLE_EXPANDERS = [RANDOM_EXPANDER_NAME, REMOTE_EXPANDER_NAME]

# Path appended to the remote expander base URL.
BEST_OPTIONS_PATH = "/best_options"


class ExpanderDefaults:
    expander = RANDOM_EXPANDER_NAME
    remote_expander_url = None
    remote_expander_cert = None
    remote_expander_timeout = 5.0  # seconds
    metrics_prefix = "expander"
