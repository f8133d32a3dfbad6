# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Unit tests for adapted functions called in callback mode.

Test Organization:
    - TestCallbackModeOutcomes: success and failure delivery
    - TestCallbackModeArguments: argument forwarding and return values
    - TestCallbackModeSettlement: at-most-once callback invocation
    - TestCallbackModeReceiverBinding: use as a method decorator
    - TestCallbackModeNestedCallbacks: wrap with a real event loop
    - TestDeferrerFromEnv: factories configured from the environment
"""

import asyncio
import logging

import pytest

import omnibase_defer
from omnibase_defer import (
    AdaptedFunction,
    CompletionHandle,
    DeferConfigurationError,
    Deferrer,
    EnumWrapPolicy,
    ModelDeferConfig,
    OperationFailedError,
    defer,
)
from tests.helpers import CallbackRecorder, filter_records

SETTLEMENT_LOGGER = "omnibase_defer.mixins.mixin_single_settlement"


class TestCallbackModeOutcomes:
    """Outcomes reach callback(error, *results)."""

    def test_ok_delivers_none_and_value(self, recorder: CallbackRecorder) -> None:
        greet = defer(lambda next: next.ok("hi"))
        greet(recorder)
        assert recorder.calls == [(None, "hi")]

    def test_raise_delivers_the_same_exception(self, recorder: CallbackRecorder) -> None:
        boom = RuntimeError("boom")

        def explode(next: CompletionHandle) -> None:
            raise boom

        defer(explode)(recorder)

        assert recorder.calls == [(boom,)]
        assert str(recorder.error) == "boom"

    def test_err_with_plain_value_is_normalized(
        self, recorder: CallbackRecorder
    ) -> None:
        defer(lambda next: next.err("oops"))(recorder)

        assert isinstance(recorder.error, OperationFailedError)
        assert str(recorder.error) == "oops"

    def test_overloaded_call_with_exception(self, recorder: CallbackRecorder) -> None:
        error = LookupError("nope")
        defer(lambda next: next(error))(recorder)
        assert recorder.calls == [(error,)]

    def test_overloaded_call_with_value(self, recorder: CallbackRecorder) -> None:
        defer(lambda next: next({"id": 7}))(recorder)
        assert recorder.calls == [(None, {"id": 7})]

    def test_raise_after_ok_propagates_to_caller(
        self, recorder: CallbackRecorder
    ) -> None:
        """A raise that can no longer be delivered is not swallowed."""

        def body(next: CompletionHandle) -> None:
            next.ok("first")
            raise RuntimeError("after ok")

        with pytest.raises(RuntimeError, match="after ok"):
            defer(body)(recorder)
        assert recorder.calls == [(None, "first")]

    def test_callback_exceptions_are_not_captured(self) -> None:
        """A failing caller callback surfaces to whoever fired the handle."""

        def callback(error: object, *results: object) -> None:
            raise AssertionError("caller bug")

        def body(next: CompletionHandle) -> None:
            next.ok()

        with pytest.raises(AssertionError, match="caller bug"):
            defer(body)(callback)


class TestCallbackModeArguments:
    """Leading arguments, keyword arguments and return values."""

    def test_leading_arguments_are_forwarded(self, recorder: CallbackRecorder) -> None:
        def add(a: int, b: int, next: CompletionHandle) -> None:
            next.ok(a + b)

        defer(add)(2, 3, recorder)
        assert recorder.calls == [(None, 5)]

    def test_keyword_arguments_are_forwarded(self, recorder: CallbackRecorder) -> None:
        def scale(value: int, next: CompletionHandle, *, factor: int = 1) -> None:
            next.ok(value * factor)

        defer(scale)(4, recorder, factor=10)
        assert recorder.calls == [(None, 40)]

    def test_return_value_is_passed_back(self, recorder: CallbackRecorder) -> None:
        def legacy(next: CompletionHandle) -> str:
            next.ok()
            return "sync-result"

        assert defer(legacy)(recorder) == "sync-result"

    def test_runs_synchronously(self, recorder: CallbackRecorder) -> None:
        log: list[str] = []

        def body(next: CompletionHandle) -> None:
            log.append("body")
            next.ok()

        defer(body)(recorder)
        log.append("returned")

        assert log == ["body", "returned"]

    def test_explicit_entry_point(self, recorder: CallbackRecorder) -> None:
        def add(a: int, b: int, next: CompletionHandle) -> None:
            next.ok(a + b)

        defer(add).call_with_callback(recorder, 1, 2)
        assert recorder.calls == [(None, 3)]

    def test_explicit_entry_point_allows_callable_arguments(
        self, recorder: CallbackRecorder
    ) -> None:
        """call_with_callback never inspects the leading arguments."""

        def apply(fn: object, next: CompletionHandle) -> None:
            next.ok(fn(3))  # type: ignore[operator]

        defer(apply).call_with_callback(recorder, lambda x: x * 3)
        assert recorder.calls == [(None, 9)]

    def test_adapted_function_keeps_metadata(self) -> None:
        def fetch_user(user_id: int, next: CompletionHandle) -> None:
            """Fetch a user."""

        adapted = defer(fetch_user)
        assert isinstance(adapted, AdaptedFunction)
        assert adapted.__name__ == "fetch_user"
        assert adapted.__doc__ == "Fetch a user."
        assert adapted.__wrapped__ is fetch_user


class TestCallbackModeSettlement:
    """The caller's callback runs at most once per invocation."""

    def test_duplicate_signals_are_dropped_and_logged(
        self, recorder: CallbackRecorder, caplog: pytest.LogCaptureFixture
    ) -> None:
        def body(next: CompletionHandle) -> None:
            next.ok(1)
            next.ok(2)
            next.err("late")

        with caplog.at_level(logging.WARNING, logger=SETTLEMENT_LOGGER):
            defer(body)(recorder)

        assert recorder.calls == [(None, 1)]
        warnings = filter_records(caplog.records, SETTLEMENT_LOGGER)
        assert len(warnings) == 2
        assert "already settled by ok" in warnings[0].getMessage()

    def test_duplicate_warning_can_be_disabled(
        self, recorder: CallbackRecorder, caplog: pytest.LogCaptureFixture
    ) -> None:
        quiet = Deferrer(config=ModelDeferConfig(warn_on_duplicate_settlement=False))

        def body(next: CompletionHandle) -> None:
            next.err("first")
            next.ok()

        with caplog.at_level(logging.WARNING, logger=SETTLEMENT_LOGGER):
            quiet(body)(recorder)

        assert recorder.call_count == 1
        assert filter_records(caplog.records, SETTLEMENT_LOGGER) == []

    def test_each_invocation_settles_independently(
        self, recorder: CallbackRecorder
    ) -> None:
        echo = defer(lambda value, next: next.ok(value))
        echo("a", recorder)
        echo("b", recorder)
        assert recorder.calls == [(None, "a"), (None, "b")]


class Repository:
    """Object using adapted functions as methods."""

    def __init__(self) -> None:
        self.items = {"a": 1}

    @defer
    def get(self, key: str, next: CompletionHandle) -> None:
        next.ok(self.items[key])


class TestCallbackModeReceiverBinding:
    """Adapted functions bind their receiver like plain methods."""

    def test_method_receives_instance(self, recorder: CallbackRecorder) -> None:
        Repository().get("a", recorder)
        assert recorder.calls == [(None, 1)]

    def test_method_raise_is_captured(self, recorder: CallbackRecorder) -> None:
        Repository().get("missing", recorder)
        assert isinstance(recorder.error, KeyError)

    def test_instances_do_not_share_state(self, recorder: CallbackRecorder) -> None:
        first, second = Repository(), Repository()
        second.items["a"] = 2

        first.get("a", recorder)
        second.get("a", recorder)

        assert recorder.calls == [(None, 1), (None, 2)]

    def test_class_access_returns_unbound_adapter(self) -> None:
        assert isinstance(Repository.get, AdaptedFunction)


class TestCallbackModeNestedCallbacks:
    """Nested callbacks scheduled on the loop are protected by wrap."""

    @pytest.mark.asyncio
    async def test_wrapped_timer_failure_reaches_callback(self) -> None:
        loop = asyncio.get_running_loop()
        received: asyncio.Future[object] = loop.create_future()

        def late() -> None:
            raise RuntimeError("late")

        def body(next: CompletionHandle) -> None:
            loop.call_later(0.01, next.wrap(late))

        defer(body)(lambda error, *results: received.set_result(error))

        error = await asyncio.wait_for(received, timeout=1.0)
        assert isinstance(error, RuntimeError)
        assert str(error) == "late"

    @pytest.mark.asyncio
    async def test_wrapped_timer_cancellation_reaches_callback(self) -> None:
        loop = asyncio.get_running_loop()
        received: asyncio.Future[object] = loop.create_future()

        def late() -> None:
            raise asyncio.CancelledError()

        def body(next: CompletionHandle) -> None:
            loop.call_later(0.01, next.wrap(late))

        defer(body)(lambda error, *results: received.set_result(error))

        error = await asyncio.wait_for(received, timeout=1.0)
        assert isinstance(error, asyncio.CancelledError)

    @pytest.mark.asyncio
    async def test_error_first_policy_for_callback_style_apis(self) -> None:
        loop = asyncio.get_running_loop()
        received: asyncio.Future[tuple[object, ...]] = loop.create_future()
        deferrer = Deferrer(config=ModelDeferConfig(wrap_policy=EnumWrapPolicy.ERROR_FIRST))

        def legacy_read(path: str, callback: object) -> None:
            loop.call_soon(callback, None, f"contents of {path}")  # type: ignore[arg-type]

        def body(path: str, next: CompletionHandle) -> None:
            legacy_read(path, next(lambda data: next.ok(data.upper())))

        deferrer(body)("a.txt", lambda *args: received.set_result(args))

        assert await asyncio.wait_for(received, timeout=1.0) == (None, "CONTENTS OF A.TXT")


class TestDeferrerFromEnv:
    """Factories configured from DEFER_* environment variables."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DEFER_WRAP_POLICY", raising=False)
        monkeypatch.delenv("DEFER_WARN_ON_DUPLICATE_SETTLEMENT", raising=False)

    def test_unset_environment_gives_defaults(self) -> None:
        assert Deferrer.from_env().config == ModelDeferConfig()

    def test_environment_policy_reaches_the_handle(
        self, monkeypatch: pytest.MonkeyPatch, recorder: CallbackRecorder
    ) -> None:
        monkeypatch.setenv("DEFER_WRAP_POLICY", "error_first")
        monkeypatch.setenv("DEFER_WARN_ON_DUPLICATE_SETTLEMENT", "false")
        deferrer = Deferrer.from_env()

        def body(next: CompletionHandle) -> None:
            next(lambda data: next.ok(data))("disk full", "ignored")

        deferrer(body)(recorder)

        assert deferrer.config.warn_on_duplicate_settlement is False
        assert isinstance(recorder.error, OperationFailedError)
        assert str(recorder.error) == "disk full"

    def test_invalid_environment_fails_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEFER_WRAP_POLICY", "ignore_errors")
        with pytest.raises(DeferConfigurationError, match="DEFER_WRAP_POLICY"):
            Deferrer.from_env()

    def test_default_deferrer_is_built_from_environment(self) -> None:
        assert isinstance(omnibase_defer.default_deferrer, Deferrer)
        assert omnibase_defer.default_deferrer.config == ModelDeferConfig.from_env()
