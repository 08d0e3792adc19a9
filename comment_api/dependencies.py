from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from comment_api.config import settings
from comment_api.database import get_db
from comment_api.services.comment_service import CommentService
from comment_api.store import CommentStore, SQLCommentStore


def get_comment_store(db: AsyncSession = Depends(get_db)) -> CommentStore:
    """
    Request-scoped store bound to the request's session.

    The session (and therefore the pooled connection) lives exactly as long
    as the request; ``get_db`` commits on success and rolls back on error.
    """
    return SQLCommentStore(db, query_timeout=settings.QUERY_TIMEOUT_SECONDS)


def get_comment_service(store: CommentStore = Depends(get_comment_store)) -> CommentService:
    return CommentService(store)
