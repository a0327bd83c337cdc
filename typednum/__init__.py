"""Numbers fixed to one value, checked when read back from plain data or binary."""

__version__ = "0.3.0"
__all__ = ["num", "serde", "bincode"]