import pytest

from core.errors import (
    BodyDecodeError,
    ErrorCode,
    HandlerError,
    InvalidNumberError,
    InvalidRequestError,
    MissingFieldError,
)


def test_default_code_is_internal_error():
    err = HandlerError("boom")
    assert err.code == ErrorCode.INTERNAL_ERROR


@pytest.mark.parametrize(
    "error_cls,code",
    [
        (BodyDecodeError, ErrorCode.INVALID_JSON),
        (MissingFieldError, ErrorCode.MISSING_FIELD),
        (InvalidNumberError, ErrorCode.INVALID_NUMBER),
        (InvalidRequestError, ErrorCode.INVALID_REQUEST),
    ],
)
def test_subclasses_carry_code(error_cls, code):
    err = error_cls("detail", code=code)
    assert isinstance(err, HandlerError)
    assert err.code == code
    assert err.code.value == code.name


def test_message_is_exception_text():
    err = MissingFieldError("Missing required field(s): num2", code=ErrorCode.MISSING_FIELD)
    assert str(err) == "Missing required field(s): num2"
    assert err.message == "Missing required field(s): num2"
