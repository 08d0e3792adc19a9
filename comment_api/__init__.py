"""HTTP CRUD backend for comments."""

__version__ = "1.0.0"
