from pydantic import BaseModel, ConfigDict, Field

from comment_api.entities import Comment


# --- Comment ---

class CommentBase(BaseModel):
    slug: str = Field(min_length=1)
    author: str = Field(min_length=1)
    body: str = Field(min_length=1)


class CommentRequest(CommentBase):
    """Body of create and update requests.  A client-supplied ``id`` is ignored."""

    def to_comment(self) -> Comment:
        return Comment(slug=self.slug, body=self.body, author=self.author)


class CommentResponse(BaseModel):
    id: str
    slug: str
    author: str
    body: str
    model_config = ConfigDict(from_attributes=True)


# --- Generic ---

class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    version: str
