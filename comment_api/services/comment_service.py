"""
Comment service — the domain-facing contract for the Comment resource.

The service owns no state beyond its collaborators.  Every store failure is
logged with its cause at ERROR and re-raised as a stable domain error so
callers never see storage details.  Two conditions pass through untouched:

- ``CommentNotFoundError`` — the transport needs it to answer 404.
- ``CommentNotImplementedError`` — lets callers detect a store that lacks
  the capability.

``asyncio.CancelledError`` is not an ``Exception`` and therefore always
propagates, so a cancelled request aborts the in-flight query.  No retries
are attempted.
"""
import logging

from comment_api.entities import Comment
from comment_api.errors import (
    CommentDeleteError,
    CommentFetchError,
    CommentNotFoundError,
    CommentNotImplementedError,
    CommentPostError,
    CommentUpdateError,
    StoreUnavailableError,
)
from comment_api.store import CommentStore

_PASS_THROUGH = (CommentNotFoundError, CommentNotImplementedError)


class CommentService:
    def __init__(self, store: CommentStore, logger: logging.Logger | None = None) -> None:
        self.store = store
        self._log = logger or logging.getLogger(__name__)

    async def get_comments(self) -> list[Comment]:
        try:
            return await self.store.get_comments()
        except _PASS_THROUGH:
            raise
        except Exception as exc:
            self._log.error("an error occurred fetching the comments: %s", exc)
            raise CommentFetchError() from exc

    async def get_comment(self, comment_id: str) -> Comment:
        try:
            return await self.store.get_comment(comment_id)
        except _PASS_THROUGH:
            raise
        except Exception as exc:
            self._log.error("an error occurred fetching comment %s: %s", comment_id, exc)
            raise CommentFetchError() from exc

    async def post_comment(self, draft: Comment) -> Comment:
        """Store *draft* as a new comment; its ``id`` is ignored."""
        try:
            return await self.store.post_comment(draft)
        except _PASS_THROUGH:
            raise
        except Exception as exc:
            self._log.error("an error occurred adding the comment: %s", exc)
            raise CommentPostError() from exc

    async def update_comment(self, comment_id: str, new_values: Comment) -> Comment:
        """
        Replace slug, body and author of *comment_id* with *new_values*.

        This is a full replace, not a merge: empty fields on *new_values*
        overwrite stored ones.  The id is never changed.
        """
        try:
            return await self.store.update_comment(comment_id, new_values)
        except _PASS_THROUGH:
            raise
        except Exception as exc:
            self._log.error("an error occurred updating comment %s: %s", comment_id, exc)
            raise CommentUpdateError() from exc

    async def delete_comment(self, comment_id: str) -> None:
        try:
            await self.store.delete_comment(comment_id)
        except _PASS_THROUGH:
            raise
        except Exception as exc:
            self._log.error("an error occurred deleting comment %s: %s", comment_id, exc)
            raise CommentDeleteError() from exc

    async def ready_check(self) -> None:
        try:
            await self.store.ping()
        except Exception as exc:
            self._log.error("comment store failed the readiness check: %s", exc)
            raise StoreUnavailableError() from exc
