"""Classic array, numeric, string, search, stack and dynamic-programming exercises."""

__version__ = "0.1.0"
__all__ = ["arrays", "numeric", "textops", "searching", "stacks", "dynamic"]