"""Unit tests for response construction."""

import json
from datetime import date

from core.errors import ErrorCode, MissingFieldError
from core.models import SumOperands, SumResult
from core.responses import build_response, echo_response, error_response, sum_response


def test_build_response_compact_by_default():
    response = build_response(200, {"a": 1, "b": [1, 2]})
    assert response == {"statusCode": 200, "body": '{"a":1,"b":[1,2]}'}


def test_build_response_indented():
    response = build_response(200, {"a": 1}, indent=2)
    assert response["body"] == '{\n  "a": 1\n}'


def test_build_response_stringifies_unknown_types():
    body = json.loads(build_response(200, {"value": date(2026, 1, 2)})["body"])
    assert body == {"value": "2026-01-02"}


def test_echo_response():
    event = {"key": "value", "nested": {"list": [1, 2, 3]}}
    response = echo_response(event)
    assert response["statusCode"] == 200
    assert json.loads(response["body"]) == {"message": "Echo response", "input": event}


def test_sum_response():
    result = SumResult(operands=SumOperands(num1="2", num2="3"), total=5)
    response = sum_response(result)
    assert response["statusCode"] == 200
    assert json.loads(response["body"]) == {"message": "The sum of 2 and 3 is 5", "result": 5}


def test_sum_response_nan_result_is_null():
    result = SumResult(operands=SumOperands(num1="abc", num2="3"), total=None)
    assert '"result":null' in sum_response(result)["body"]


def test_error_response_from_handler_error():
    response = error_response(MissingFieldError("Missing required field(s): num1", code=ErrorCode.MISSING_FIELD))
    assert response["statusCode"] == 400
    assert json.loads(response["body"]) == {
        "message": "Error processing request",
        "error": "Missing required field(s): num1",
    }


def test_error_response_from_plain_exception():
    body = json.loads(error_response(ValueError("bad value"))["body"])
    assert body["error"] == "bad value"


def test_error_response_without_text_uses_type_name():
    body = json.loads(error_response(KeyError())["body"])
    assert body["error"] == "KeyError"


def test_build_response_does_not_escape_non_ascii():
    response = build_response(200, {"text": "naïve ✓"})
    assert response["body"] == '{"text":"naïve ✓"}'
