"""Contact data models and validation.

- ``contact``: ``Contact``, ``Address``, ``Position``, ``Note``, ``Tag`` and
  the request/response envelopes used by the API.
- ``validation``: ``validate_contact`` returning a field → reason mapping.
"""

from .contact import (
    Address,
    Contact,
    ContactArgs,
    ContactReply,
    Note,
    Position,
    Search,
    SearchArgs,
    SearchReply,
    Tag,
)
from .validation import validate_contact

__all__ = [
    "Address",
    "Contact",
    "ContactArgs",
    "ContactReply",
    "Note",
    "Position",
    "Search",
    "SearchArgs",
    "SearchReply",
    "Tag",
    "validate_contact",
]
