"""Model class generator for database-backed PHP applications."""

__version__ = "0.1.0"
