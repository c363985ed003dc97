"""
Pydantic models for the function handlers.
"""

from core.models.operands import SumOperands, SumResult
from core.models.response import ERROR_MESSAGE, ErrorBody, LambdaResponse, SumBody

__all__ = ["SumOperands", "SumResult", "LambdaResponse", "SumBody", "ErrorBody", "ERROR_MESSAGE"]
