"""Models module init."""

from .post import Post

__all__ = ["Post"]
