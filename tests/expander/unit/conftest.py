# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for expander unit tests."""

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from autoscaler.expander.defaults import BEST_OPTIONS_PATH
from autoscaler.expander.expander import NodeInfo, Option


@pytest.fixture
def options():
    """Two expansion options, ng-a and ng-b."""
    return [
        Option(
            node_group_id="ng-a",
            node_count=3,
            debug="ng-a fits 3 pods",
            pods=[{"metadata": {"name": "web-0", "namespace": "default"}}],
        ),
        Option(
            node_group_id="ng-b",
            node_count=1,
            debug="ng-b fits 1 pod",
            pods=[{"metadata": {"name": "batch-0", "namespace": "jobs"}}],
        ),
    ]


@pytest.fixture
def node_infos():
    return {
        "node-1": NodeInfo(
            node={
                "metadata": {"name": "node-1", "labels": {"pool": "a"}},
                "status": {"capacity": {"cpu": "4", "memory": "16Gi"}},
            },
            pods=[{"metadata": {"name": "running-0"}}],
        )
    }


@pytest_asyncio.fixture
async def serve_expander():
    """Start in-process remote expanders; returns their base URLs."""
    servers = []

    async def _serve(handler):
        app = web.Application()
        app.router.add_post(BEST_OPTIONS_PATH, handler)
        server = TestServer(app)
        await server.start_server()
        servers.append(server)
        return f"http://{server.host}:{server.port}"

    yield _serve

    for server in servers:
        await server.close()


def _reply_with(payload):
    received = []

    async def handler(request):
        received.append(await request.json())
        return web.json_response(payload)

    handler.received = received
    return handler


@pytest.fixture
def reply_with():
    """Factory for handlers that record request bodies and return a fixed payload."""
    return _reply_with

