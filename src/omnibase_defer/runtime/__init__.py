# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Adapter runtime.

Responsibilities:
    - signature_dispatcher: callback mode vs promise mode
    - completion_handle: the ``next`` handle passed to original functions
    - invoker: runs original functions and chains returned promise-likes
    - promise_bridge: wires a provider promise to the handle
    - callback_sink: delivers callback-mode outcomes
    - adapter: Deferrer factory and AdaptedFunction
    - provider_registry: process-wide promise provider slot
"""

from omnibase_defer.runtime.adapter import AdaptedFunction, Deferrer
from omnibase_defer.runtime.callback_sink import CallbackSink
from omnibase_defer.runtime.completion_handle import CompletionHandle
from omnibase_defer.runtime.invoker import invoke
from omnibase_defer.runtime.promise_bridge import PromiseBridge
from omnibase_defer.runtime.provider_registry import (
    DEFAULT_PROMISE_PROVIDER,
    configure_promise_provider,
    get_promise_provider,
    reset_promise_provider,
)
from omnibase_defer.runtime.signature_dispatcher import (
    resolve_invocation_mode,
    split_arguments,
)

__all__: list[str] = [
    "DEFAULT_PROMISE_PROVIDER",
    "AdaptedFunction",
    "CallbackSink",
    "CompletionHandle",
    "Deferrer",
    "PromiseBridge",
    "configure_promise_provider",
    "get_promise_provider",
    "invoke",
    "reset_promise_provider",
    "resolve_invocation_mode",
    "split_arguments",
]
