# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocols for the collaborators of the adapter."""

from omnibase_defer.protocols.protocol_completion_sink import ProtocolCompletionSink
from omnibase_defer.protocols.protocol_promise_provider import (
    ProtocolPromiseProvider,
    ProtocolThenable,
    RejectFn,
    ResolveFn,
    SetupFn,
)
from omnibase_defer.protocols.protocol_scheduler import ProtocolScheduler

__all__: list[str] = [
    "ProtocolCompletionSink",
    "ProtocolPromiseProvider",
    "ProtocolScheduler",
    "ProtocolThenable",
    "RejectFn",
    "ResolveFn",
    "SetupFn",
]
