"""
Domain entities shared by the service and store layers.

Entities are plain frozen dataclasses with no framework or ORM imports.
"""
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Comment:
    """A piece of authored text attached to a slug.

    Every field is a plain string.  ``id`` is assigned by the store on
    creation and is empty on drafts that have not been persisted yet.
    """

    id: str = ""
    slug: str = ""
    body: str = ""
    author: str = ""

    def with_id(self, comment_id: str) -> "Comment":
        return replace(self, id=comment_id)
