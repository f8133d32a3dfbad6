# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Completion Handle ("next").

The handle is the last positional argument an original function receives.
It is the single place outcomes are reported through:

    next.ok(*values)      success
    next.err(error)       failure, normalized by errify
    next.wrap(fn)         protect a nested callback, routing raises to err
    next(*values)         overloaded shortcut, see CompletionHandle.__call__

The handle does not guard against being fired twice. At-most-once delivery
is the job of the sink behind it.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable

from omnibase_defer.enums import EnumWrapPolicy
from omnibase_defer.models import ModelInvocationContext
from omnibase_defer.protocols import ProtocolCompletionSink
from omnibase_defer.utils import errify, is_error_kind

logger = logging.getLogger(__name__)

# Process-exit signals, never routed to err.
PROPAGATED_EXCEPTIONS: tuple[type[BaseException], ...] = (KeyboardInterrupt, SystemExit)


class CompletionHandle:
    """Unified success/error entry point for one invocation.

    Attributes:
        context: Invocation context of the owning call
        wrap_policy: Policy applied by ``wrap`` when none is passed explicitly
    """

    def __init__(
        self,
        sink: ProtocolCompletionSink,
        context: ModelInvocationContext,
        wrap_policy: EnumWrapPolicy = EnumWrapPolicy.CATCH_ONLY,
    ) -> None:
        self._sink = sink
        self.context = context
        self.wrap_policy = wrap_policy

    def __call__(self, *values: object) -> Callable[..., object] | None:
        """Overloaded single entry point.

        Dispatches on the first argument, in priority order:

        1. callable -> ``wrap(first)``, the decorated callback is returned
        2. error-kind (exception instance) -> ``err(first)``
        3. anything else, including no argument -> ``ok(*values)``

        Example:
            >>> def read(path, next):
            ...     loop.call_soon(next(lambda: next(Path(path).read_text())))
        """
        if values:
            first = values[0]
            if callable(first):
                return self.wrap(first)
            if is_error_kind(first):
                self.err(first)
                return None
        self.ok(*values)
        return None

    @property
    def settled(self) -> bool:
        """True once the sink behind this handle has delivered an outcome."""
        return self._sink.settled

    def ok(self, *values: object) -> None:
        """Signal success with zero or more result values."""
        self._sink.resolve(*values)

    def err(self, error: object = None) -> None:
        """Signal failure. Non-exception values are wrapped in OperationFailedError."""
        self._fail(error, origin="signalled")

    def capture(self, error: object, origin: str = "raised") -> None:
        """Route an exception caught at an asynchronous boundary to ``err``.

        Args:
            error: Caught exception or rejection reason
            origin: "raised" for caught exceptions, "rejected" for promise-like
                rejections
        """
        self._fail(error, origin=origin)

    def wrap(
        self,
        fn: Callable[..., object],
        policy: EnumWrapPolicy | None = None,
    ) -> Callable[..., object]:
        """Decorate a nested callback so that its failures reach ``err``.

        Anything raised by ``fn`` is routed to ``err``, except
        KeyboardInterrupt and SystemExit. Returning normally has no effect
        on the handle; ``fn`` still has to call
        ``ok`` or ``err`` itself. Once the invocation has settled, raises
        propagate instead, since they can no longer be delivered.

        Args:
            fn: Callback to protect
            policy: CATCH_ONLY or ERROR_FIRST (default: ``self.wrap_policy``).
                ERROR_FIRST treats the first positional argument as an error
                slot: a truthy value goes to ``err`` and ``fn`` is skipped,
                otherwise ``fn`` receives the remaining arguments.

        Returns:
            The decorated callback.
        """
        effective_policy = policy or self.wrap_policy

        @functools.wraps(fn)
        def wrapped(*args: object, **kwargs: object) -> object:
            if effective_policy is EnumWrapPolicy.ERROR_FIRST:
                if args and args[0]:
                    self.err(args[0])
                    return None
                args = args[1:]
            try:
                return fn(*args, **kwargs)
            except PROPAGATED_EXCEPTIONS:
                raise
            except BaseException as e:
                if self.settled:
                    raise
                self.capture(e)
                return None

        return wrapped

    def _fail(self, error: object, origin: str) -> None:
        normalized = errify(error, self.context.error_context())
        logger.debug(
            f"Failure {origin} in {self.context.operation}: {type(normalized).__name__}",
            extra={
                **self.context.log_extra(),
                "origin": origin,
                "error_type": type(normalized).__name__,
            },
        )
        self._sink.reject(normalized)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(operation={self.context.operation!r}, "
            f"mode={self.context.mode.value!r})"
        )


__all__: list[str] = ["PROPAGATED_EXCEPTIONS", "CompletionHandle"]
