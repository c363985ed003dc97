"""Response construction for the function handlers."""

import json
from typing import Any

from core.errors import HandlerError
from core.models import ErrorBody, LambdaResponse, SumBody, SumResult
from core.services.numbers import unbounded_int_digits

ECHO_MESSAGE = "Echo response"


def build_response(status_code: int, payload: dict[str, Any], indent: int | None = None) -> dict[str, Any]:
    """Serialize ``payload`` as the JSON body of a proxy response.

    Without ``indent`` the body is compact, with no spaces after separators.
    Non-ASCII text is written as is rather than escaped.
    """
    with unbounded_int_digits():
        if indent:
            body = json.dumps(payload, indent=indent, ensure_ascii=False, default=str)
        else:
            body = json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)
    return LambdaResponse(status_code=status_code, body=body).to_dict()


def echo_response(event: Any, indent: int | None = 2) -> dict[str, Any]:
    return build_response(200, {"message": ECHO_MESSAGE, "input": event}, indent=indent)


def sum_response(result: SumResult) -> dict[str, Any]:
    return build_response(200, SumBody(message=result.message, result=result.total).model_dump())


def error_response(error: Exception) -> dict[str, Any]:
    """Turn any failure into a 400 response carrying its description."""
    detail = error.message if isinstance(error, HandlerError) else str(error)
    return build_response(400, ErrorBody(error=detail or type(error).__name__).model_dump())
