"""Contacts backend: models, validation and the OpenSearch contact index.

Subpackages:
- ``contacts.models``: contact data models and validation.
- ``contacts.search_index``: index synchronization and contact search.
- ``contacts.common``: configuration, logging and metrics.
- ``contacts.api``: FastAPI application exposing the index operations.

Notes:
- The primary relational store is not part of this package; callers index
  or unindex a contact after their own write or delete succeeds.
"""

__version__ = "0.1.0"
