# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Adapter factory and adapted functions.

A Deferrer turns an original function ``fn(*args, next)`` into an
AdaptedFunction that supports two calling conventions:

    adapted(*args, callback)   callback mode, callback(error, *results)
    adapted(*args)             promise mode, returns the provider's promise-like

Both conventions also have explicit entry points,
``call_with_callback(callback, *args)`` and ``call_for_promise(*args)``.
``__call__`` only decides between them from the last positional argument.

Usage:
    ```python
    from omnibase_defer import defer

    @defer
    def read_settings(path, next):
        loop.call_later(0.01, next.wrap(lambda: next.ok(parse(path))))

    read_settings("app.toml", lambda err, settings: ...)   # callback mode
    settings = await read_settings("app.toml")             # promise mode
    ```

Concurrency Safety:
    Adapted functions hold no per-call state. Each invocation builds its own
    ModelInvocationContext, CompletionHandle and sink.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable

from omnibase_defer.enums import EnumInvocationMode
from omnibase_defer.models import ModelDeferConfig, ModelInvocationContext
from omnibase_defer.protocols import ProtocolPromiseProvider, ProtocolScheduler
from omnibase_defer.providers import call_soon_scheduler
from omnibase_defer.runtime.callback_sink import CallbackSink
from omnibase_defer.runtime.completion_handle import CompletionHandle
from omnibase_defer.runtime.invoker import invoke
from omnibase_defer.runtime.promise_bridge import PromiseBridge
from omnibase_defer.runtime.provider_registry import get_promise_provider
from omnibase_defer.runtime.signature_dispatcher import split_arguments

logger = logging.getLogger(__name__)


class Deferrer:
    """Adapter factory carrying the provider, scheduler and configuration.

    Attributes:
        config: Behavioural configuration applied to every adapted function
        scheduler: Runs promise-mode invocations on the next tick

    Example:
        ```python
        deferrer = Deferrer(promise_provider=AsyncioFuturePromiseProvider())

        @deferrer
        def greet(name, next):
            next.ok(f"hello {name}")
        ```
    """

    def __init__(
        self,
        promise_provider: ProtocolPromiseProvider | None = None,
        scheduler: ProtocolScheduler | None = None,
        config: ModelDeferConfig | None = None,
    ) -> None:
        """Initialize the factory.

        Args:
            promise_provider: Provider used in promise mode. When None, the
                process-wide slot is read at call time.
            scheduler: Deferred-work scheduler (default: ``loop.call_soon``
                on the running loop)
            config: Adapter configuration (default: ModelDeferConfig())
        """
        self._promise_provider = promise_provider
        self.scheduler: ProtocolScheduler = scheduler or call_soon_scheduler
        self.config = config or ModelDeferConfig()

    @classmethod
    def from_env(
        cls,
        promise_provider: ProtocolPromiseProvider | None = None,
        scheduler: ProtocolScheduler | None = None,
    ) -> Deferrer:
        """Build a factory whose configuration comes from DEFER_* variables.

        Raises:
            DeferConfigurationError: If a variable holds an unrecognized value.
        """
        return cls(
            promise_provider=promise_provider,
            scheduler=scheduler,
            config=ModelDeferConfig.from_env(),
        )

    def resolve_promise_provider(self) -> ProtocolPromiseProvider | None:
        """Return the explicit provider, else the current process-wide one."""
        if self._promise_provider is not None:
            return self._promise_provider
        return get_promise_provider()

    def adapt(self, fn: Callable[..., object]) -> AdaptedFunction:
        """Build the dual-mode callable for ``fn``."""
        return AdaptedFunction(fn, self)

    __call__ = adapt

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(promise_provider={self._promise_provider!r}, "
            f"wrap_policy={self.config.wrap_policy.value!r})"
        )


class AdaptedFunction:
    """Dual-mode callable produced by ``Deferrer.adapt``.

    Behaves as a method decorator: accessed through an instance it binds
    that instance as the receiver, and the original function gets it as
    its first argument.
    """

    def __init__(
        self,
        fn: Callable[..., object],
        deferrer: Deferrer,
        receiver: object = None,
    ) -> None:
        functools.update_wrapper(self, fn)
        self._fn = fn
        self._deferrer = deferrer
        self._receiver = receiver

    def __get__(self, instance: object, owner: type | None = None) -> AdaptedFunction:
        if instance is None:
            return self
        return AdaptedFunction(self._fn, self._deferrer, receiver=instance)

    def __call__(self, *args: object, **kwargs: object) -> object:
        """Dispatch on the last positional argument.

        Returns:
            Callback mode: the original function's return value.
            Promise mode: the promise-like built by the provider.
        """
        leading, callback = split_arguments(args)
        if callback is not None:
            return self.call_with_callback(callback, *leading, **kwargs)
        return self.call_for_promise(*leading, **kwargs)

    def call_with_callback(
        self,
        callback: Callable[..., object],
        *args: object,
        **kwargs: object,
    ) -> object:
        """Invoke synchronously, reporting the outcome to ``callback``.

        Returns:
            The original function's return value.
        """
        context = self._build_context(EnumInvocationMode.CALLBACK, args, kwargs)
        sink = CallbackSink(
            callback,
            context,
            warn_on_duplicate=self._deferrer.config.warn_on_duplicate_settlement,
        )
        handle = CompletionHandle(sink, context, self._deferrer.config.wrap_policy)
        logger.debug(
            f"Invoking {context.operation} in callback mode",
            extra=context.log_extra(),
        )
        return invoke(self._fn, context, handle)

    def call_for_promise(self, *args: object, **kwargs: object) -> object:
        """Create a promise and invoke on the next scheduler tick.

        Raises:
            PromiseProviderNotConfiguredError: If no provider is configured.
            SchedulerUnavailableError: If the work cannot be scheduled.

        Returns:
            The promise-like built by the provider.
        """
        context = self._build_context(EnumInvocationMode.PROMISE, args, kwargs)
        bridge = PromiseBridge.create(
            self._deferrer.resolve_promise_provider(),
            context,
            warn_on_duplicate=self._deferrer.config.warn_on_duplicate_settlement,
        )
        handle = CompletionHandle(bridge, context, self._deferrer.config.wrap_policy)
        self._deferrer.scheduler(functools.partial(invoke, self._fn, context, handle))
        logger.debug(
            f"Scheduled {context.operation} in promise mode",
            extra=context.log_extra(),
        )
        return bridge.promise

    def _build_context(
        self,
        mode: EnumInvocationMode,
        args: tuple[object, ...],
        kwargs: dict[str, object],
    ) -> ModelInvocationContext:
        return ModelInvocationContext(
            operation=getattr(self._fn, "__qualname__", repr(self._fn)),
            mode=mode,
            args=args,
            kwargs=kwargs,
            receiver=self._receiver,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {getattr(self._fn, '__qualname__', self._fn)!r}>"


__all__: list[str] = ["AdaptedFunction", "Deferrer"]
