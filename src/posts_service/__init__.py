"""CRUD HTTP service for posts backed by MySQL or SQLite."""

__version__ = "0.1.0"
