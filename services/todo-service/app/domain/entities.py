"""
Domain entities for todo records.

These entities are framework-agnostic and contain only business logic.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
from uuid import UUID


@dataclass(frozen=True)
class Todo:
    """
    A single todo record.

    Immutable so that values handed out by a repository are snapshots:
    changing a record means building a new one and storing it.

    Attributes:
        id: Repository-assigned identifier, never changes
        title: Non-empty label
        url: Reference to this record, derived from a prefix and the id
        order: Optional client sort hint (absent is not the same as 0)
        completed: Optional completion flag (absent is not the same as False)
    """

    id: UUID
    title: str
    url: str
    order: Optional[int] = None
    completed: Optional[bool] = None

    @staticmethod
    def build_url(url_prefix: str, todo_id: UUID) -> str:
        """Build the reference URL for a todo id."""
        return f"{url_prefix}{todo_id}"

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to a JSON-friendly dict.

        Absent optional fields are left out rather than written as null,
        so a missing ``completed`` stays distinguishable from ``False``.
        """
        data: Dict[str, Any] = {
            "id": str(self.id),
            "title": self.title,
            "url": self.url,
        }
        if self.order is not None:
            data["order"] = self.order
        if self.completed is not None:
            data["completed"] = self.completed
        return data
