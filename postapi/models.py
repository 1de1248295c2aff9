"""
Post entity and its request / response shapes.

The table row (Post) is separate from what clients send (PostRequest) and what
they get back (PostDTO); id and published are never taken from a request.
"""

from sqlalchemy import Column, Text, false
from sqlmodel import Field, SQLModel


class Post(SQLModel, table=True):
    __tablename__ = "posts"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(nullable=False)
    body: str = Field(sa_column=Column(Text, nullable=False))
    published: bool = Field(
        default=False,
        nullable=False,
        sa_column_kwargs={"server_default": false()},
    )


class PostRequest(SQLModel):
    """Body for POST /posts."""

    title: str
    body: str


class PostDTO(SQLModel):
    id: int
    title: str
    body: str
    published: bool


def to_dto(post: Post) -> PostDTO:
    return PostDTO(
        id=post.id,
        title=post.title,
        body=post.body,
        published=post.published,
    )
