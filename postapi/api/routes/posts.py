"""
Post endpoints: list, get by id, create.

Each handler checks out one connection, runs exactly one query on it and
returns it to the pool before the response is serialized.
"""

from typing import Annotated, Any

from fastapi import APIRouter, HTTPException, Path

from postapi import crud
from postapi.api.deps import PoolDep
from postapi.models import PostDTO, PostRequest, to_dto

router = APIRouter(prefix="/posts", tags=["posts"])

# posts.id is a SERIAL (int4) column
POST_ID_MIN = -(2**31)
POST_ID_MAX = 2**31 - 1


@router.get("", response_model=list[PostDTO])
def get_posts(pool: PoolDep) -> Any:
    """List all posts (unordered). Empty table returns []."""
    with pool.acquire() as session:
        return [to_dto(p) for p in crud.list_posts(session)]


@router.get("/{id}", response_model=list[PostDTO])
def get_post(
    pool: PoolDep,
    id: Annotated[int, Path(ge=POST_ID_MIN, le=POST_ID_MAX)],
) -> Any:
    """
    Get a post by id.

    The response is a one-element list for compatibility with existing clients.
    """
    with pool.acquire() as session:
        post = crud.get_post(session, id)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return [to_dto(post)]


@router.post("", response_model=PostDTO)
def create_post(pool: PoolDep, post_in: PostRequest) -> Any:
    """Create a post. published always starts as false."""
    with pool.acquire() as session:
        post = crud.create_post(session, post_in)
        return to_dto(post)
