"""
Business services for the function handlers.

- numbers.py: leading-prefix integer parsing of loosely typed fields
- arithmetic.py: operand extraction from events and summation
"""

__all__: list[str] = []
