"""
Comment store: persistence adapter for the ``comments`` table.

Design notes
------------
- ``CommentStore`` is the capability set the service depends on.  Its write
  operations raise ``CommentNotImplementedError`` so a read-only backend is
  detectable by callers instead of silently doing nothing.
- ``SQLCommentStore`` runs every query inside ``asyncio.timeout`` so a slow
  database cannot hold the request (and its pooled connection) past the
  configured deadline.  Task cancellation propagates out of the query
  unchanged; partial results are never returned.
- NULL text columns are coerced to ``""`` in ``_row_to_comment`` and nowhere
  else.
- The store flushes but does not commit; the transaction boundary is owned
  by the ``get_db`` dependency in the router layer.
"""
import asyncio
from abc import ABC, abstractmethod

from sqlalchemy import delete, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession

from comment_api.entities import Comment
from comment_api.errors import CommentNotFoundError, CommentNotImplementedError
from comment_api.models import CommentRow, new_comment_id


# ---------------------------------------------------------------------------
# Row translation
# ---------------------------------------------------------------------------

def _text(value: str | None) -> str:
    return "" if value is None else value


def _row_to_comment(row: CommentRow) -> Comment:
    """Translate a storage row into a domain ``Comment``."""
    return Comment(
        id=row.id,
        slug=_text(row.slug),
        body=_text(row.body),
        author=_text(row.author),
    )


# ---------------------------------------------------------------------------
# Capability set
# ---------------------------------------------------------------------------

class CommentStore(ABC):
    @abstractmethod
    async def get_comments(self) -> list[Comment]: ...

    @abstractmethod
    async def get_comment(self, comment_id: str) -> Comment: ...

    async def post_comment(self, draft: Comment) -> Comment:
        raise CommentNotImplementedError("post_comment")

    async def update_comment(self, comment_id: str, values: Comment) -> Comment:
        raise CommentNotImplementedError("update_comment")

    async def delete_comment(self, comment_id: str) -> None:
        raise CommentNotImplementedError("delete_comment")

    @abstractmethod
    async def ping(self) -> None: ...


# ---------------------------------------------------------------------------
# SQLAlchemy implementation
# ---------------------------------------------------------------------------

class SQLCommentStore(CommentStore):
    """``CommentStore`` backed by an ``AsyncSession``.

    *query_timeout* is the per-query deadline in seconds; ``None`` disables
    it.  On expiry the query is cancelled and ``TimeoutError`` is raised.
    """

    def __init__(self, session: AsyncSession, query_timeout: float | None = None) -> None:
        self._session = session
        self._query_timeout = query_timeout

    async def get_comments(self) -> list[Comment]:
        async with asyncio.timeout(self._query_timeout):
            result = await self._session.scalars(select(CommentRow))
            rows = result.all()
        return [_row_to_comment(row) for row in rows]

    async def get_comment(self, comment_id: str) -> Comment:
        q = select(CommentRow).where(CommentRow.id == comment_id)
        async with asyncio.timeout(self._query_timeout):
            row = (await self._session.execute(q)).scalar_one_or_none()
        if row is None:
            raise CommentNotFoundError(comment_id)
        return _row_to_comment(row)

    async def post_comment(self, draft: Comment) -> Comment:
        # Any id on the draft is discarded; the store owns identity.
        row = CommentRow(
            id=new_comment_id(),
            slug=draft.slug,
            body=draft.body,
            author=draft.author,
        )
        self._session.add(row)
        async with asyncio.timeout(self._query_timeout):
            await self._session.flush()
        return _row_to_comment(row)

    async def update_comment(self, comment_id: str, values: Comment) -> Comment:
        stmt = (
            update(CommentRow)
            .where(CommentRow.id == comment_id)
            .values(slug=values.slug, body=values.body, author=values.author)
        )
        async with asyncio.timeout(self._query_timeout):
            result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise CommentNotFoundError(comment_id)
        return values.with_id(comment_id)

    async def delete_comment(self, comment_id: str) -> None:
        stmt = delete(CommentRow).where(CommentRow.id == comment_id)
        async with asyncio.timeout(self._query_timeout):
            result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise CommentNotFoundError(comment_id)

    async def ping(self) -> None:
        async with asyncio.timeout(self._query_timeout):
            await self._session.execute(text("SELECT 1"))
