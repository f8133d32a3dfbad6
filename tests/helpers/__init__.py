# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for omnibase_defer unit tests.

Available Utilities:
    Fakes:
        - CallbackRecorder: Records Node-style callback invocations
        - ManualScheduler: Queues deferred work for explicit execution
        - RecordingThenable: Loop-free promise-like recording its settlements
        - RecordingThenableProvider: Promise provider built on RecordingThenable
        - LazyProvider: Provider that violates the setup contract

    Log Helpers:
        - filter_records: Filter captured log records by module and level
        - get_messages: Extract rendered messages from filtered records
"""

from tests.helpers.fakes import (
    CallbackRecorder,
    LazyProvider,
    ManualScheduler,
    RecordingThenable,
    RecordingThenableProvider,
)
from tests.helpers.log_helpers import filter_records, get_messages

__all__ = [
    "CallbackRecorder",
    "LazyProvider",
    "ManualScheduler",
    "RecordingThenable",
    "RecordingThenableProvider",
    "filter_records",
    "get_messages",
]
