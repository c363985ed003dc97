"""Pydantic models for handler responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

ERROR_MESSAGE = "Error processing request"


class LambdaResponse(BaseModel):
    """Proxy-style response: an HTTP status code plus a JSON string body."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_code: int = Field(..., alias="statusCode", ge=100, le=599)
    body: str

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class SumBody(BaseModel):
    message: str
    result: int | None


class ErrorBody(BaseModel):
    message: str = ERROR_MESSAGE
    error: str
