# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from enum import Enum
from typing import Optional

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram

from autoscaler.expander.defaults import ExpanderDefaults


class RemoteCallOutcome(str, Enum):
    """How a remote best_options round ended"""

    SUCCESS = "success"
    TIMEOUT = "timeout"
    TRANSPORT_ERROR = "transport_error"
    DEGENERATE = "degenerate"
    REJECTED = "rejected"
    INVALID_REQUEST = "invalid_request"


class ExpanderPrometheusMetrics:
    """Container for all expander Prometheus metrics."""

    def __init__(
        self,
        prefix: str = ExpanderDefaults.metrics_prefix,
        registry: Optional[CollectorRegistry] = None,
    ):
        registry = registry if registry is not None else REGISTRY

        self.remote_calls = Counter(
            f"{prefix}:remote_calls",
            "Remote expander rounds by outcome",
            ["outcome"],
            registry=registry,
        )
        self.remote_call_duration = Histogram(
            f"{prefix}:remote_call_duration_seconds",
            "Time spent waiting on the remote expander",
            registry=registry,
        )
        self.options_offered = Counter(
            f"{prefix}:options_offered",
            "Expansion options sent to the remote expander",
            registry=registry,
        )
        self.options_selected = Counter(
            f"{prefix}:options_selected",
            "Expansion options kept after a successful remote round",
            registry=registry,
        )

    def record_outcome(self, outcome: RemoteCallOutcome):
        self.remote_calls.labels(outcome=outcome.value).inc()
