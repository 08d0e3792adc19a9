"""
Error taxonomy for the comment domain.

Store failures are caught at the service boundary and re-raised as one of
these.  The message is stable and never carries storage error detail; the
underlying cause is logged by the service and kept on ``__cause__``.
No framework imports allowed here.
"""


class CommentError(Exception):
    """Base error for all comment domain errors."""

    message = "comment operation failed"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class CommentFetchError(CommentError):
    message = "could not fetch comment"


class CommentPostError(CommentError):
    message = "could not post comment"


class CommentUpdateError(CommentError):
    message = "could not update comment"


class CommentDeleteError(CommentError):
    message = "could not delete comment"


class CommentNotFoundError(CommentError):
    """Raised when no stored comment has the requested id."""

    def __init__(self, comment_id: str) -> None:
        super().__init__(f"no comment found with id {comment_id!r}")
        self.comment_id = comment_id


class CommentNotImplementedError(CommentError):
    """Raised by a store that does not provide *operation*."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} is not implemented by this store")
        self.operation = operation


class StoreUnavailableError(CommentError):
    message = "comment store is not reachable"


__all__ = [
    "CommentError",
    "CommentFetchError",
    "CommentPostError",
    "CommentUpdateError",
    "CommentDeleteError",
    "CommentNotFoundError",
    "CommentNotImplementedError",
    "StoreUnavailableError",
]
