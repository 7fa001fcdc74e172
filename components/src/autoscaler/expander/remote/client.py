# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Client for calling a remote expander's best_options endpoint."""

import asyncio
import logging
import ssl
from typing import Optional
from urllib.parse import urlsplit

import aiohttp
from pydantic import ValidationError

from autoscaler.expander.defaults import BEST_OPTIONS_PATH, ExpanderDefaults
from autoscaler.expander.exceptions import (
    DegenerateResponseError,
    ExpanderUnavailableError,
    RemoteExpanderCallError,
    RemoteExpanderTimeoutError,
)
from autoscaler.expander.remote.protocol import BestOptionsRequest, BestOptionsResponse

logger = logging.getLogger(__name__)


def build_base_url(address: str, secure: bool) -> str:
    """Turn ``host:port`` or a full URL into a base URL without trailing slash."""
    address = address.strip()
    if "://" not in address:
        scheme = "https" if secure else "http"
        address = f"{scheme}://{address}"
    parts = urlsplit(address)
    # .port raises ValueError for a non-numeric or out-of-range port
    if parts.scheme not in ("http", "https") or not parts.hostname or parts.port == 0:
        raise ValueError(f"invalid remote expander address '{address}'")
    return address.rstrip("/")


def load_ssl_context(cert_file: str) -> ssl.SSLContext:
    """Create a client TLS context trusting the CA bundle in ``cert_file``."""
    return ssl.create_default_context(cafile=cert_file)


class RemoteExpanderClient:
    """Client for a single remote expander service.

    One attempt per call and no retries. The call is cancelled once
    ``timeout`` seconds have passed.
    """

    def __init__(
        self,
        url: str,
        cert_file: Optional[str] = None,
        timeout: float = ExpanderDefaults.remote_expander_timeout,
    ):
        """
        Set up transport security and the target address.

        Args:
            url: Remote expander address, ``host:port`` or a full URL
            cert_file: Optional CA certificate file. Without it the channel
                is plain HTTP.
            timeout: Deadline for a single best_options call, in seconds

        Raises:
            ExpanderUnavailableError: The address is missing or malformed,
                the timeout is not positive, or the certificate cannot be
                loaded
        """
        if not url:
            raise ExpanderUnavailableError(url, "no address configured")
        if timeout <= 0:
            raise ExpanderUnavailableError(
                url, f"call timeout must be positive, got {timeout}"
            )

        self.cert_file = cert_file
        self.timeout = timeout
        self._ssl_context: Optional[ssl.SSLContext] = None

        if cert_file:
            try:
                self._ssl_context = load_ssl_context(cert_file)
            except (OSError, ssl.SSLError) as e:
                raise ExpanderUnavailableError(
                    url, f"failed to create TLS credentials from {cert_file}: {e}"
                ) from e

        try:
            self.base_url = build_base_url(url, secure=self._ssl_context is not None)
        except ValueError as e:
            raise ExpanderUnavailableError(url, str(e)) from e

        self.url = f"{self.base_url}{BEST_OPTIONS_PATH}"
        self._session: Optional[aiohttp.ClientSession] = None

    async def _async_init(self):
        """Open the HTTP session reused by every call"""
        if self._session is not None:
            return
        logger.info(
            f"Dialing remote expander at {self.base_url} "
            f"({'tls' if self._ssl_context else 'insecure'})"
        )
        try:
            if self._ssl_context is not None:
                connector = aiohttp.TCPConnector(ssl=self._ssl_context)
            else:
                connector = aiohttp.TCPConnector()
            self._session = aiohttp.ClientSession(connector=connector)
        except Exception as e:
            raise ExpanderUnavailableError(self.base_url, str(e)) from e

    async def close(self):
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def _post(self, request: BestOptionsRequest):
        async with self._session.post(
            self.url, json=request.model_dump(mode="json")
        ) as response:
            response.raise_for_status()
            return await response.json(content_type=None)

    async def best_options(self, request: BestOptionsRequest) -> BestOptionsResponse:
        """Send one best_options request and wait at most ``timeout`` seconds.

        Raises:
            RemoteExpanderTimeoutError: The deadline passed first
            DegenerateResponseError: The response has no options list
            RemoteExpanderCallError: Any other transport or decoding failure,
                including a client that is not open
        """
        if self._session is None:
            raise RemoteExpanderCallError(
                "RemoteExpanderClient not initialized or already closed. "
                "Call _async_init() first."
            )

        logger.debug(
            f"Sending best_options request with {len(request.options)} options "
            f"and {len(request.node_info_map)} nodes to {self.url}"
        )

        try:
            response_data = await asyncio.wait_for(
                self._post(request), timeout=self.timeout
            )
        except asyncio.TimeoutError as e:
            raise RemoteExpanderTimeoutError(self.timeout) from e
        except (aiohttp.ClientError, ValueError) as e:
            raise RemoteExpanderCallError(
                f"best_options call to {self.url} failed: {e}"
            ) from e

        if response_data is None:
            raise DegenerateResponseError()

        try:
            response = BestOptionsResponse.model_validate(response_data)
        except ValidationError as e:
            raise RemoteExpanderCallError(
                f"Malformed best_options response from {self.url}: {e}"
            ) from e

        if response.options is None:
            raise DegenerateResponseError()

        return response
