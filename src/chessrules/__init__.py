"""Chess move generation and application engine."""

__version__ = "0.1.0"
