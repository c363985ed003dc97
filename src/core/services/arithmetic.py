"""Operand extraction and summation for the sum handler."""

import base64
import binascii
import json
import logging
from collections.abc import Mapping
from typing import Any

from core.errors import BodyDecodeError, ErrorCode, InvalidNumberError, InvalidRequestError, MissingFieldError
from core.models import SumOperands, SumResult
from core.services.numbers import parse_int

logger = logging.getLogger(__name__)

OPERAND_FIELDS = ("num1", "num2")


def decode_body(raw: str, is_base64: bool = False) -> dict[str, Any]:
    """Decode a JSON-encoded request body into a mapping."""
    if is_base64:
        try:
            raw = base64.b64decode(raw, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise BodyDecodeError(f"Invalid base64 body: {e}", code=ErrorCode.INVALID_BODY) from e

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise BodyDecodeError(f"Invalid JSON body: {e}", code=ErrorCode.INVALID_JSON) from e

    if not isinstance(parsed, dict):
        raise BodyDecodeError(
            f"Request body must be a JSON object, got {type(parsed).__name__}",
            code=ErrorCode.INVALID_BODY,
        )
    return parsed


def extract_fields(event: Any) -> Mapping[str, Any]:
    """Return the mapping that carries the operands.

    A string ``body`` is decoded as JSON, a mapping ``body`` is used as is,
    and anything else falls back to the event's own top-level fields.
    """
    if not isinstance(event, Mapping):
        raise InvalidRequestError(
            f"Event must be a JSON object, got {type(event).__name__}",
            code=ErrorCode.INVALID_REQUEST,
        )

    body = event.get("body")
    if isinstance(body, str):
        return decode_body(body, is_base64=event.get("isBase64Encoded") is True)
    if isinstance(body, Mapping):
        return body
    return event


def extract_operands(event: Any) -> SumOperands:
    fields = extract_fields(event)

    missing = [name for name in OPERAND_FIELDS if name not in fields]
    if missing:
        raise MissingFieldError(f"Missing required field(s): {', '.join(missing)}", code=ErrorCode.MISSING_FIELD)

    return SumOperands(num1=fields["num1"], num2=fields["num2"])


def add(operands: SumOperands, strict: bool = False) -> SumResult:
    """Sum the leading integers of both operands.

    A side with no leading integer makes the total None. With ``strict``
    set, that case raises InvalidNumberError instead.
    """
    left = parse_int(operands.num1)
    right = parse_int(operands.num2)

    if strict:
        for name, raw, parsed in (("num1", operands.num1, left), ("num2", operands.num2, right)):
            if parsed is None:
                raise InvalidNumberError(f"Field {name} is not a number: {raw!r}", code=ErrorCode.INVALID_NUMBER)

    result = SumResult(operands=operands, total=None if left is None or right is None else left + right)
    if result.is_nan:
        logger.info("Non-numeric operand: num1=%r num2=%r", operands.num1, operands.num2)

    return result
