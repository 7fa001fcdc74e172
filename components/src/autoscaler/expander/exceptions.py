# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Exception hierarchy for expanders.

Construction errors (``ExpanderUnavailableError``, ``UnknownExpanderError``)
propagate to whoever assembles the expander chain. ``RemoteExpanderCallError``
and its subclasses describe a single failed round and are handled inside the
remote filter.
"""


class ExpanderError(Exception):
    """Base class for expander errors."""


class ExpanderUnavailableError(ExpanderError):
    """The remote expander channel could not be set up."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Remote expander at {url} is unavailable: {reason}")


class UnknownExpanderError(ExpanderError, ValueError):
    def __init__(self, name: str, available: list[str]):
        self.name = name
        super().__init__(
            f"Unknown expander '{name}', expected one of: {', '.join(available)}"
        )


class RemoteExpanderCallError(ExpanderError):
    """A single best_options call failed."""


class RemoteExpanderTimeoutError(RemoteExpanderCallError):
    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"Remote expander did not answer within {timeout}s")


class DegenerateResponseError(RemoteExpanderCallError):
    """The call succeeded but the response carries no options list."""

    def __init__(self):
        super().__init__("Remote expander returned no options list")
