# tests/result/test_result.py
"""
Result tests - branching, composition, exception bridge
"""

import pytest

from resultkit import (
    FailedResultError,
    InvariantViolation,
    Nothing,
    ResultKitError,
    Result,
    ResultError,
    Some,
    validate_object_error,
)


class TestState:

    def test_success(self):
        result = Result.success(1)

        assert result.ok is True
        assert result.value == 1
        with pytest.raises(InvariantViolation):
            result.error

    def test_failure(self):
        result = Result.failure("boom")

        assert result.ok is False
        assert result.error == "boom"
        with pytest.raises(InvariantViolation):
            result.value

    def test_invariant_violation_is_not_a_recoverable_error(self):
        assert issubclass(InvariantViolation, AssertionError)
        assert not issubclass(InvariantViolation, ResultKitError)

    def test_equality(self):
        assert Result.success(1) == Result.success(1)
        assert Result.success(1) != Result.failure(1)


class TestCallbacks:

    def test_on_ok_runs_only_on_success(self):
        seen = []

        ok = Result.success(1)
        assert ok.on_ok(seen.append) is ok
        Result.failure("e").on_ok(seen.append)

        assert seen == [1]

    def test_on_error_runs_only_on_failure(self):
        seen = []

        failed = Result.failure("e")
        assert failed.on_error(seen.append) is failed
        Result.success(1).on_error(seen.append)

        assert seen == ["e"]

    def test_on_both_always_runs(self):
        seen = []

        Result.success(1).on_both(lambda: seen.append("ok"))
        Result.failure("e").on_both(lambda: seen.append("failed"))

        assert seen == ["ok", "failed"]

    def test_none_callbacks_are_ignored(self):
        result = Result.success(1)

        assert result.on_ok(None).on_error(None).on_both(None) is result


class TestComposition:

    def test_map(self):
        assert Result.success(2).map(lambda v: v * 10) == Result.success(20)
        assert Result.failure("e").map(lambda v: v * 10) == Result.failure("e")

    def test_bind(self):
        def half(v):
            return Result.success(v // 2) if v % 2 == 0 else Result.failure(f"{v} is odd")

        assert Result.success(4).bind(half) == Result.success(2)
        assert Result.success(3).bind(half) == Result.failure("3 is odd")
        assert Result.failure("e").bind(half) == Result.failure("e")

    def test_to_option(self):
        assert Result.success(1).to_option() == Some(1)
        assert Result.failure("e").to_option() == Nothing()


class TestGetOrThrow:

    def test_success_returns_value(self):
        assert Result.success("v").get_or_throw() == "v"

    def test_frozen_error_raises_message_only(self):
        error = ResultError("outer", {"secret": 1}, "inner").freeze()

        with pytest.raises(FailedResultError) as exc_info:
            Result.failure(error).get_or_throw()

        assert str(exc_info.value) == "outer"

    def test_unfrozen_error_raises_message_only(self):
        error = ResultError("boom", {"secret": "s3cr3t"}, "cause")

        with pytest.raises(FailedResultError) as exc_info:
            Result.failure(error).get_or_throw()

        assert str(exc_info.value) == "boom"
        assert "s3cr3t" not in str(exc_info.value)

    def test_object_error_mapping_fallback(self):
        with pytest.raises(FailedResultError, match="^boom$"):
            Result.failure({"error": "boom", "code": 1}).get_or_throw()

    def test_validated_object_error(self):
        with pytest.raises(FailedResultError, match="^boom$"):
            Result.failure(validate_object_error({"error": "boom"})).get_or_throw()

    def test_message_attribute_fallback(self):
        class Legacy:
            error = "legacy boom"

        with pytest.raises(FailedResultError, match="^legacy boom$"):
            Result.failure(Legacy()).get_or_throw()

    def test_exception_is_raised_as_is(self):
        original = KeyError("k")

        with pytest.raises(KeyError) as exc_info:
            Result.failure(original).get_or_throw()

        assert exc_info.value is original

    def test_anything_else_is_stringified(self):
        with pytest.raises(FailedResultError, match="^404$"):
            Result.failure(404).get_or_throw()

    def test_throw_when_failed(self):
        assert Result.success(1).throw_when_failed() is None
        with pytest.raises(FailedResultError):
            Result.failure("e").throw_when_failed()
