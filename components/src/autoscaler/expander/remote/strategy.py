# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Expansion filter that delegates the choice to a remote expander service."""

import logging
import time
from typing import Optional

from pydantic import ValidationError

from autoscaler.expander.defaults import ExpanderDefaults
from autoscaler.expander.exceptions import (
    DegenerateResponseError,
    RemoteExpanderCallError,
    RemoteExpanderTimeoutError,
)
from autoscaler.expander.expander import Filter, NodeInfo, Option
from autoscaler.expander.metrics import ExpanderPrometheusMetrics, RemoteCallOutcome
from autoscaler.expander.remote.client import RemoteExpanderClient
from autoscaler.expander.remote.marshal import (
    populate_node_info_for_remote,
    populate_options_for_remote,
    transform_and_sanitize_options,
)
from autoscaler.expander.remote.protocol import BestOptionsRequest

logger = logging.getLogger(__name__)


class RemoteExpanderFilter(Filter):
    """
    Filter that asks a remote expander which options to keep.

    The caller gets back either the remote selection, made of the same Option
    objects it passed in, or its input unchanged. Failed calls, timeouts,
    empty answers, answers naming unknown node groups and options that
    cannot be encoded all fall into the second case, and none of them
    raise. A closed filter also passes its input through.
    """

    def __init__(
        self,
        client: RemoteExpanderClient,
        metrics: Optional[ExpanderPrometheusMetrics] = None,
    ):
        self.client = client
        self.metrics = metrics

    async def best_options(
        self, options: list[Option], node_infos: dict[str, NodeInfo]
    ) -> list[Option]:
        try:
            option_map, option_messages = populate_options_for_remote(options)
            request = BestOptionsRequest(
                options=option_messages,
                node_info_map=populate_node_info_for_remote(node_infos),
            )
        except ValidationError as e:
            logger.warning(
                f"Unable to encode options for remote expander, "
                f"no options filtered: {e}"
            )
            if self.metrics is not None:
                self.metrics.record_outcome(RemoteCallOutcome.INVALID_REQUEST)
            return options

        logger.info(
            f"Remote call of best options to {self.client.base_url} "
            f"with {len(option_map)} options"
        )
        if self.metrics is not None:
            self.metrics.options_offered.inc(len(option_messages))

        start = time.monotonic()
        try:
            response = await self.client.best_options(request)
        except RemoteExpanderTimeoutError as e:
            logger.info(f"Remote call timed out, no options filtered: {e}")
            self._record(RemoteCallOutcome.TIMEOUT, start)
            return options
        except DegenerateResponseError:
            logger.warning(
                "Remote expander returned nil best options, no options filtered"
            )
            self._record(RemoteCallOutcome.DEGENERATE, start)
            return options
        except RemoteExpanderCallError as e:
            logger.info(f"Remote call failed, no options filtered: {e}")
            self._record(RemoteCallOutcome.TRANSPORT_ERROR, start)
            return options

        selected = transform_and_sanitize_options(response.options, option_map)
        if selected is None:
            logger.warning(
                "Unable to sanitize remote best options, no options filtered"
            )
            self._record(RemoteCallOutcome.REJECTED, start)
            return options

        self._record(RemoteCallOutcome.SUCCESS, start)
        if self.metrics is not None:
            self.metrics.options_selected.inc(len(selected))
        logger.debug(
            f"Remote expander kept {len(selected)} of {len(options)} options: "
            f"{[option.node_group_id for option in selected]}"
        )
        return selected

    def _record(self, outcome: RemoteCallOutcome, start: float):
        if self.metrics is None:
            return
        self.metrics.record_outcome(outcome)
        self.metrics.remote_call_duration.observe(time.monotonic() - start)

    async def close(self):
        await self.client.close()


async def new_remote_filter(
    url: str,
    cert_file: Optional[str] = None,
    timeout: float = ExpanderDefaults.remote_expander_timeout,
    metrics: Optional[ExpanderPrometheusMetrics] = None,
) -> RemoteExpanderFilter:
    """Build a RemoteExpanderFilter with an open client.

    Raises:
        ExpanderUnavailableError: The channel cannot be set up
    """
    client = RemoteExpanderClient(url, cert_file=cert_file, timeout=timeout)
    await client._async_init()
    return RemoteExpanderFilter(client, metrics=metrics)
