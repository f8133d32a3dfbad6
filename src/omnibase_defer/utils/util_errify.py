# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Failure value normalization.

Every failure that crosses the completion channel goes through ``errify`` so
that callers always receive an exception instance, whatever the original
function signalled or raised.

Error-kind values form a closed set: instances of ``BaseException``.
Exception classes are not error-kind; they are callable.

Example:
    >>> from omnibase_defer.utils import errify
    >>> boom = ValueError("boom")
    >>> errify(boom) is boom
    True
    >>> errify("oops").message
    'oops'
"""

from __future__ import annotations

from omnibase_defer.errors import ModelDeferErrorContext, OperationFailedError


def is_error_kind(value: object) -> bool:
    """Return True if ``value`` belongs to the recognized error representations."""
    return isinstance(value, BaseException)


def errify(
    value: object,
    context: ModelDeferErrorContext | None = None,
) -> BaseException:
    """Normalize a failure value into an exception instance.

    Args:
        value: Raised or signalled failure value
        context: Context attached when a new OperationFailedError is built

    Returns:
        ``value`` itself when it is already error-kind (identity preserved),
        otherwise an OperationFailedError carrying ``value``.
    """
    if is_error_kind(value):
        return value  # type: ignore[return-value]
    return OperationFailedError(value, context=context)


__all__: list[str] = ["errify", "is_error_kind"]
