"""Tests for ErrorSignal construction and error kinds."""

import errno

import pytest

from shufflepolicy.core.errors import ErrorKind, ErrorSignal, PushPolicy, kind_of
from tests.helpers import raise_wrapped


class TestKindOf:
    @pytest.mark.parametrize(
        "exc, expected",
        [
            (ConnectionRefusedError("refused"), ErrorKind.CONNECT_FAILURE),
            (OSError(errno.ECONNREFUSED, "Connection refused"), ErrorKind.CONNECT_FAILURE),
            (OSError(errno.EHOSTUNREACH, "No route to host"), ErrorKind.CONNECT_FAILURE),
            (OSError(errno.ENETUNREACH, "Network is unreachable"), ErrorKind.CONNECT_FAILURE),
            (FileNotFoundError("shuffle_0_3_0.data"), ErrorKind.FILE_NOT_FOUND),
            (OSError(errno.ENOENT, "No such file"), ErrorKind.FILE_NOT_FOUND),
            (ConnectionResetError("reset by peer"), ErrorKind.IO),
            (TimeoutError("timed out"), ErrorKind.IO),
            (OSError("generic"), ErrorKind.IO),
            (ValueError("bad"), ErrorKind.OTHER),
        ],
        ids=[
            "refused", "errno-refused", "host-unreachable", "net-unreachable",
            "file-not-found", "errno-enoent", "reset", "timeout", "oserror", "value-error",
        ],
    )
    def test_kind(self, exc: BaseException, expected: ErrorKind) -> None:
        assert kind_of(exc) is expected

    def test_terminal_cause_kinds(self) -> None:
        assert ErrorKind.CONNECT_FAILURE.is_terminal_cause
        assert ErrorKind.FILE_NOT_FOUND.is_terminal_cause
        assert not ErrorKind.IO.is_terminal_cause
        assert not ErrorKind.OTHER.is_terminal_cause


class TestFromException:
    def test_explicit_cause_is_wrapped(self) -> None:
        exc = raise_wrapped(ConnectionRefusedError("Connection refused: shuffle-host/10.0.0.7:7337"))
        signal = ErrorSignal.from_exception(exc)

        assert signal.error_type == "OSError"
        assert signal.message == "Failure while pushing block"
        assert signal.kind is ErrorKind.IO
        assert signal.cause is not None
        assert signal.cause.error_type == "ConnectionRefusedError"
        assert signal.cause_kind is ErrorKind.CONNECT_FAILURE

    def test_trace_text_includes_cause_chain(self) -> None:
        exc = raise_wrapped(FileNotFoundError("shuffle_0_3_0.data"))
        signal = ErrorSignal.from_exception(exc)

        assert "FileNotFoundError: shuffle_0_3_0.data" in signal.full_trace_text
        assert "OSError: Failure while pushing block" in signal.full_trace_text
        assert "direct cause" in signal.full_trace_text

    def test_implicit_context_is_not_a_cause(self) -> None:
        try:
            try:
                raise FileNotFoundError("shuffle_0_3_0.index")
            except FileNotFoundError:
                raise OSError("push failed")
        except OSError as e:
            signal = ErrorSignal.from_exception(e)

        assert signal.cause is None
        assert "shuffle_0_3_0.index" in signal.full_trace_text
        assert PushPolicy().should_retry(signal) is True

    def test_suppressed_context_has_no_cause(self) -> None:
        try:
            try:
                raise FileNotFoundError("shuffle_0_3_0.index")
            except FileNotFoundError:
                raise OSError("push failed") from None
        except OSError as e:
            signal = ErrorSignal.from_exception(e)

        assert signal.cause is None
        assert signal.cause_kind is None

    def test_only_one_cause_level_is_wrapped(self) -> None:
        inner = raise_wrapped(ConnectionRefusedError("refused"), message="middle")
        outer = raise_wrapped(inner, message="outer")
        signal = ErrorSignal.from_exception(outer)

        assert signal.cause is not None
        assert signal.cause.message == "middle"
        assert signal.cause.cause is None
        assert "ConnectionRefusedError" in signal.full_trace_text

    def test_exception_without_traceback(self) -> None:
        signal = ErrorSignal.from_exception(OSError("never raised"))
        assert "OSError: never raised" in signal.full_trace_text
        assert signal.cause is None

    def test_non_builtin_type_name_is_qualified(self) -> None:
        class PushFailure(Exception):
            pass

        signal = ErrorSignal.from_exception(PushFailure("x"))
        assert signal.error_type.endswith("PushFailure")
        assert "." in signal.error_type


class TestFromText:
    def test_message_is_first_line(self) -> None:
        signal = ErrorSignal.from_text("java.io.IOException: reset\n\tat Foo.bar\n")
        assert signal.message == "java.io.IOException: reset"
        assert signal.full_trace_text.startswith("java.io.IOException")

    def test_cause_kind(self) -> None:
        signal = ErrorSignal.from_text("x", cause_kind=ErrorKind.FILE_NOT_FOUND)
        assert signal.cause_kind is ErrorKind.FILE_NOT_FOUND

    def test_empty_text(self) -> None:
        signal = ErrorSignal.from_text("")
        assert signal.message == ""
        assert signal.cause is None


class TestImmutability:
    def test_signal_is_frozen(self) -> None:
        signal = ErrorSignal(full_trace_text="x")
        with pytest.raises(AttributeError):
            signal.full_trace_text = "y"  # type: ignore[misc]

    def test_equal_signals_compare_equal(self) -> None:
        a = ErrorSignal.from_text("trace", cause_kind=ErrorKind.CONNECT_FAILURE)
        b = ErrorSignal.from_text("trace", cause_kind=ErrorKind.CONNECT_FAILURE)
        assert a == b
        assert hash(a) == hash(b)
