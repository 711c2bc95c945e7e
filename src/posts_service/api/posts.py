"""API endpoints for posts."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.exceptions import StorageError
from ..schemas.post import (
    ErrorResponse,
    MessageResponse,
    PostCreate,
    PostDelete,
    PostRead,
    PostUpdate,
)
from ..storage import PostStorage, get_post_storage
from .body import json_body, request_body_schema

router = APIRouter(
    prefix="/posts",
    tags=["Posts"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)

StorageDep = Annotated[PostStorage, Depends(get_post_storage)]


@router.get(
    "",
    response_model=list[PostRead],
    summary="List Posts",
    description="Fetch every post in storage order",
)
async def list_posts(storage: StorageDep) -> list[PostRead]:
    try:
        return await storage.list_posts()
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post(
    "",
    response_model=PostRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Post",
    description="Insert a post; the id is assigned by the database",
    openapi_extra=request_body_schema(PostCreate),
)
async def create_post(
    post: Annotated[PostCreate, Depends(json_body(PostCreate))],
    storage: StorageDep,
) -> PostRead:
    try:
        return await storage.create_post(post.content)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.put(
    "",
    response_model=MessageResponse,
    summary="Update Post",
    description="Replace the content of the post with the given id",
    openapi_extra=request_body_schema(PostUpdate),
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def update_post(
    post: Annotated[PostUpdate, Depends(json_body(PostUpdate))],
    storage: StorageDep,
) -> MessageResponse:
    try:
        updated = await storage.update_post(post.id, post.content)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))

    if not updated:
        raise HTTPException(status_code=404, detail="No post found to update")
    return MessageResponse(message="Post updated successfully")


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete Post",
    description="Delete the post with the given id",
    openapi_extra=request_body_schema(PostDelete),
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def delete_post(
    post: Annotated[PostDelete, Depends(json_body(PostDelete))],
    storage: StorageDep,
) -> MessageResponse:
    try:
        deleted = await storage.delete_post(post.id)
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))

    if not deleted:
        raise HTTPException(status_code=404, detail="No post found to delete")
    return MessageResponse(message="Post deleted successfully")
