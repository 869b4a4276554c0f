"""Number formats with explicit rounding: unbounded binary floats, exact arithmetic and posits."""

__version__ = "0.1.0"

__all__ = ["number", "rfloat", "rounding", "split", "rfloat_context", "real", "ops", "posit"]