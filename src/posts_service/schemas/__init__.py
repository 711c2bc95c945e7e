"""Schemas module init."""

from .post import (
    ErrorResponse,
    MessageResponse,
    PostCreate,
    PostDelete,
    PostRead,
    PostUpdate,
)

__all__ = [
    "PostCreate",
    "PostUpdate",
    "PostDelete",
    "PostRead",
    "MessageResponse",
    "ErrorResponse",
]
