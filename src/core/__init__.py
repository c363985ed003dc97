"""
Core logic package for the function handlers.

Parsing, response building, config and logging live here.
Lambda handlers in src/handlers/ are thin wrappers that call into core/.
"""

__all__: list[str] = []
