import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from postapi.core.errors import QueryError
from postapi.models import Post, PostRequest

logger = logging.getLogger(__name__)


def list_posts(session: Session) -> list[Post]:
    """All posts. No ORDER BY: callers must not rely on row order."""
    try:
        return list(session.exec(select(Post)).all())
    except SQLAlchemyError as e:
        logger.error("Loading posts failed: %s", e)
        raise QueryError(e) from e


def get_post(session: Session, post_id: int) -> Post | None:
    try:
        return session.exec(select(Post).where(Post.id == post_id)).first()
    except SQLAlchemyError as e:
        logger.error("Loading post %s failed: %s", post_id, e)
        raise QueryError(e) from e


def create_post(session: Session, post_in: PostRequest) -> Post:
    """Insert one row; id and published come back from the database."""
    db_obj = Post(title=post_in.title, body=post_in.body)
    try:
        session.add(db_obj)
        session.commit()
        session.refresh(db_obj)
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Saving new post failed: %s", e)
        raise QueryError(e) from e
    return db_obj
