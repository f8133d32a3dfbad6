# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Invoker.

Runs an original function with its leading arguments followed by the
completion handle, and funnels every failure path into ``next.err``:

    raise inside the body            -> next.capture(exc)
    KeyboardInterrupt, SystemExit    -> re-raised, never captured
    raise after an outcome was sent  -> re-raised, it can no longer be delivered
    returned awaitable fails         -> next.capture(exc)
    awaitable refused by the loop    -> next.capture(exc)
    returned awaitable is cancelled  -> next.capture(CancelledError())
    returned thenable rejects        -> next.capture(reason, "rejected")

A returned awaitable or thenable that succeeds reports its value through
``next.ok``, so an original function may ignore the handle entirely and be
written as ``async def``.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable

from omnibase_defer.errors import SchedulerUnavailableError
from omnibase_defer.models import ModelInvocationContext
from omnibase_defer.protocols import ProtocolThenable
from omnibase_defer.runtime.completion_handle import (
    PROPAGATED_EXCEPTIONS,
    CompletionHandle,
)
from omnibase_defer.utils import is_promise_like

logger = logging.getLogger(__name__)


def invoke(
    fn: Callable[..., object],
    context: ModelInvocationContext,
    handle: CompletionHandle,
) -> object:
    """Execute ``fn`` for one invocation.

    Args:
        fn: Original (unbound) function
        context: Invocation context holding arguments and receiver
        handle: Completion handle appended as the last positional argument

    Returns:
        Whatever ``fn`` returned, or None when it raised.
    """
    args = context.args
    if context.receiver is not None:
        args = (context.receiver, *args)

    try:
        result = fn(*args, handle, **context.kwargs)
    except PROPAGATED_EXCEPTIONS:
        raise
    except BaseException as e:
        if handle.settled:
            raise
        handle.capture(e)
        return None

    if is_promise_like(result):
        if inspect.isawaitable(result):
            _chain_awaitable(result, context, handle)
        else:
            _chain_thenable(result, context, handle)
    return result


def _chain_awaitable(
    awaitable: Awaitable[object],
    context: ModelInvocationContext,
    handle: CompletionHandle,
) -> None:
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError as e:
        if inspect.iscoroutine(awaitable):
            awaitable.close()
        error = SchedulerUnavailableError(
            f"{context.operation} returned an awaitable but no event loop is running",
            context=context.error_context(),
        )
        error.__cause__ = e
        handle.capture(error)
        return

    try:
        future = asyncio.ensure_future(awaitable, loop=loop)
    except Exception as e:
        handle.capture(e)
        return
    logger.debug(
        f"Chaining awaitable returned by {context.operation}",
        extra=context.log_extra(),
    )

    def _on_done(done: asyncio.Future[object]) -> None:
        if done.cancelled():
            handle.capture(asyncio.CancelledError())
            return
        exc = done.exception()
        if exc is not None:
            handle.capture(exc)
        else:
            handle.ok(done.result())

    future.add_done_callback(_on_done)


def _chain_thenable(
    thenable: ProtocolThenable,
    context: ModelInvocationContext,
    handle: CompletionHandle,
) -> None:
    logger.debug(
        f"Chaining thenable returned by {context.operation}",
        extra=context.log_extra(),
    )
    try:
        thenable.then(
            handle.ok,
            lambda reason: handle.capture(reason, origin="rejected"),
        )
    except PROPAGATED_EXCEPTIONS:
        raise
    except BaseException as e:
        handle.capture(e)


__all__: list[str] = ["invoke"]
