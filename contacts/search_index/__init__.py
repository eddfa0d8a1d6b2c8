"""Contact search index adapters.

Primary components:
- ``base``: abstract ``ContactIndex`` interface and the error taxonomy.
- ``query``: ``ContactQuery``, the search request as one value.
- ``opensearch``: ``ContactSearchIndex`` backed by an OpenSearch client.
- ``factory``: helpers to build the client and index from config.

Guidance:
- Construct through ``factory.create_contact_index`` in services; inject a
  client directly in tests.
"""

from .base import (
    ContactIndex,
    ContactIndexError,
    DecodeFailed,
    IdentifierMissing,
    IndexingFailed,
    SearchFailed,
)
from .opensearch import ContactSearchIndex
from .query import ContactQuery

__all__ = [
    "ContactIndex",
    "ContactIndexError",
    "ContactQuery",
    "ContactSearchIndex",
    "DecodeFailed",
    "IdentifierMissing",
    "IndexingFailed",
    "SearchFailed",
]
