"""Base contact search index interface.

Defines the contract callers depend on, independent of the backing search
engine, together with the error taxonomy every implementation raises.

All methods are synchronous; each call is one blocking request to the
search service.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.contact import Contact


class ContactIndex(ABC):
    """Abstract base class for contact search indexes.

    Implementations keep no local state between calls and never retry;
    retry policy belongs to the caller.
    """

    @abstractmethod
    def index(self, contact: Contact) -> None:
        """Upsert the contact's document under its id.

        Raises ``IdentifierMissing`` before any network call when the contact
        has no id, ``IndexingFailed`` when the search service rejects the write.
        """

    @abstractmethod
    def unindex(self, contact: Contact) -> None:
        """Delete the contact's document by id.

        Same precondition as ``index``; a missing document is reported as
        ``IndexingFailed`` with ``not_found`` set.
        """

    @abstractmethod
    def search_contacts(self, query: str, field: str) -> List[Contact]:
        """Full-text search over ``field`` and ``firstname``.

        Returns contacts sorted by surname ascending, ``[]`` when nothing
        matches. Raises ``SearchFailed`` or ``DecodeFailed``.
        """

    @abstractmethod
    def get_contact(self, contact_id: int) -> Optional[Contact]:
        """Fetch one indexed contact by id, ``None`` if absent."""

    @abstractmethod
    def health_check(self) -> bool:
        """Check if the search service is reachable."""


class ContactIndexError(Exception):
    """Base exception for contact search index operations.

    Carries the operation name, the contact id or query involved, and the
    underlying exception as ``cause`` (also chained as ``__cause__``).
    """

    def __init__(
        self,
        message: str,
        operation: str,
        contact_id: Optional[str] = None,
        query: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.contact_id = contact_id
        self.query = query
        self.cause = cause

    def __str__(self) -> str:
        parts = [super().__str__(), f"operation={self.operation}"]
        if self.contact_id is not None:
            parts.append(f"id={self.contact_id}")
        if self.query is not None:
            parts.append(f"query={self.query!r}")
        if self.cause is not None:
            parts.append(f"cause={self.cause}")
        return " ".join(parts)


class IdentifierMissing(ContactIndexError):
    """The contact has no id; nothing was sent to the search service."""


class IndexingFailed(ContactIndexError):
    """The search service failed an upsert or delete."""

    def __init__(self, *args, not_found: bool = False, **kwargs):
        super().__init__(*args, **kwargs)
        self.not_found = not_found


class SearchFailed(ContactIndexError):
    """The search service failed a read request."""


class DecodeFailed(ContactIndexError):
    """A stored document could not be parsed into a ``Contact``."""
