"""Pydantic models for the sum handler's operands and result."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from core.services.numbers import as_text, unbounded_int_digits


class SumOperands(BaseModel):
    """Raw ``num1``/``num2`` values, kept as the caller sent them (rendered as text)."""

    model_config = ConfigDict(frozen=True)

    num1: str
    num2: str

    @field_validator("num1", "num2", mode="before")
    @classmethod
    def render_as_text(cls, value: Any) -> str:
        return as_text(value)


class SumResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    operands: SumOperands
    total: int | None

    @property
    def is_nan(self) -> bool:
        return self.total is None

    @property
    def message(self) -> str:
        if self.is_nan:
            total = "NaN"
        else:
            with unbounded_int_digits():
                total = str(self.total)
        return f"The sum of {self.operands.num1} and {self.operands.num2} is {total}"
