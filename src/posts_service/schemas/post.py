"""Post schemas for request/response validation.

Request bodies are strictly typed (``"1"`` is not an int) and missing keys
fall back to zero values, so ``{}`` on update targets id 0. Ids must fit a
signed 64-bit integer, and unpaired UTF-16 surrogates in content are replaced
with U+FFFD so the text always encodes as UTF-8.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def replace_lone_surrogates(value: str) -> str:
    return LONE_SURROGATE.sub("\ufffd", value)


class PostContent(BaseModel):
    model_config = ConfigDict(strict=True)

    content: str = ""

    @field_validator("content")
    @classmethod
    def clean_content(cls, value: str) -> str:
        return replace_lone_surrogates(value)


class PostCreate(PostContent):
    """Schema for creating a post. Any `id` in the body is ignored."""


class PostUpdate(PostContent):
    """Schema for replacing the content of an existing post."""

    id: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX)


class PostDelete(BaseModel):
    """Schema for deleting a post. Any `content` in the body is ignored."""
    model_config = ConfigDict(strict=True)

    id: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX)


class PostRead(BaseModel):
    """Schema for reading a post."""
    id: int
    content: str = Field(default="")


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
