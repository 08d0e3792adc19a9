from __future__ import annotations

import uuid
from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from comment_api.database import Base


def new_comment_id() -> str:
    return str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Comment
# ---------------------------------------------------------------------------
class CommentRow(Base):
    """Storage representation of a comment.

    Text columns are nullable: rows written by other tools may leave any of
    them empty.  Translation to the domain ``Comment`` happens in the store.
    """

    __tablename__ = "comments"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_comment_id)
    slug: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    body: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    author: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
