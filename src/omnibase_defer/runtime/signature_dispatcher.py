# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Signature Dispatcher.

Decides the calling convention of an adapted-function call from its
positional arguments alone:

    last positional argument callable  -> CALLBACK, that argument is the callback
    anything else (including no args)  -> PROMISE, all arguments are forwarded

Arity is never inspected and keyword arguments never take part.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from omnibase_defer.enums import EnumInvocationMode


def resolve_invocation_mode(args: Sequence[object]) -> EnumInvocationMode:
    """Return the invocation mode implied by ``args``."""
    if args and callable(args[-1]):
        return EnumInvocationMode.CALLBACK
    return EnumInvocationMode.PROMISE


def split_arguments(
    args: Sequence[object],
) -> tuple[tuple[object, ...], Callable[..., object] | None]:
    """Separate the trailing callback from the leading arguments.

    Returns:
        ``(leading_args, callback)`` in callback mode, ``(all_args, None)``
        in promise mode.
    """
    if resolve_invocation_mode(args) is EnumInvocationMode.CALLBACK:
        return tuple(args[:-1]), args[-1]  # type: ignore[return-value]
    return tuple(args), None


__all__: list[str] = ["resolve_invocation_mode", "split_arguments"]
