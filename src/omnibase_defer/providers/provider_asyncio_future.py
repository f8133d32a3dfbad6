# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Default promise provider backed by ``asyncio.Future``.

The returned future is awaitable and supports ``add_done_callback``, which is
how Python code consumes promise-likes. Multiple resolution values are
collapsed into a single future result:

    resolve()        -> None
    resolve(v)       -> v
    resolve(a, b)    -> (a, b)

Example:
    >>> async def main():
    ...     future = AsyncioFuturePromiseProvider()(lambda ok, err: ok("hi"))
    ...     return await future
    >>> asyncio.run(main())
    'hi'
"""

from __future__ import annotations

import asyncio

from omnibase_defer.errors import SchedulerUnavailableError
from omnibase_defer.protocols import SetupFn


def collapse_resolution_values(values: tuple[object, ...]) -> object:
    """Map ``resolve(*values)`` onto a single future result."""
    if not values:
        return None
    if len(values) == 1:
        return values[0]
    return values


class AsyncioFuturePromiseProvider:
    """Promise provider creating futures on the running event loop.

    Resolve and reject are no-ops once the future is done, so a provider
    future is never settled twice even when used outside the PromiseBridge.
    """

    def __call__(self, setup: SetupFn) -> asyncio.Future[object]:
        """Create a future and hand its settle functions to ``setup``.

        Raises:
            SchedulerUnavailableError: If no event loop is running.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as e:
            raise SchedulerUnavailableError(
                "AsyncioFuturePromiseProvider requires a running event loop"
            ) from e

        future: asyncio.Future[object] = loop.create_future()

        def resolve(*values: object) -> None:
            if future.done():
                return
            future.set_result(collapse_resolution_values(values))

        def reject(error: BaseException) -> None:
            if future.done():
                return
            if isinstance(error, StopIteration):
                # Futures refuse StopIteration; asyncio tasks apply the same conversion.
                converted = RuntimeError(f"StopIteration raised: {error!r}")
                converted.__cause__ = error
                error = converted
            future.set_exception(error)

        setup(resolve, reject)
        return future

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["AsyncioFuturePromiseProvider", "collapse_resolution_values"]
