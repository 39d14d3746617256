"""Language-aware artwork selection for media libraries."""

__version__ = "0.1.0"
