"""Protocol interfaces for dependency injection from the host application."""

from typing import Protocol, Any


class TextProcessor(Protocol):
    """Turns one plain-text fragment into its marker-annotated form."""

    def process(self, text: str) -> str:
        """
        Insert break markers into a plain-text fragment.

        Args:
            text: Text without embedded markup

        Returns:
            str: The text with break markers inserted (or unchanged)
        """
        ...


class Logger(Protocol):
    """Optional structured logging interface."""

    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...


class Meter(Protocol):
    """Optional metrics collection interface."""

    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment a counter metric with optional tags."""
        ...

    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record an observation metric with optional tags."""
        ...
