"""Panic hooks, Some values, sequence spans, and promise/future shared state."""

__version__ = "1.0.0"
__all__ = ["panic", "some", "span", "future_state", "promise"]