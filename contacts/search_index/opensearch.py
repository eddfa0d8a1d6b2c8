"""OpenSearch contact index implementation."""

import time
from typing import List, Optional

import structlog
from opensearchpy import OpenSearch, exceptions

from ..common.metrics import MetricsCollector
from ..models.contact import Contact
from .base import (
    ContactIndex,
    DecodeFailed,
    IdentifierMissing,
    IndexingFailed,
    SearchFailed,
)
from .query import ContactQuery

logger = structlog.get_logger("search_index.opensearch")

DEFAULT_INDEX = "contacts"


class ContactSearchIndex(ContactIndex):
    """Keeps the OpenSearch copy of contacts in sync and searches it.

    The client is injected so callers control its hosts, auth and timeouts,
    and tests can pass a stand-in with the same ``index``/``delete``/``get``/
    ``search`` keyword signatures.
    """

    def __init__(
        self,
        client: OpenSearch,
        index_name: str = DEFAULT_INDEX,
        metrics: Optional[MetricsCollector] = None,
    ):
        self.client = client
        self.index_name = index_name
        self.metrics = metrics

    def _require_id(self, contact: Contact, operation: str) -> str:
        doc_id = contact.document_id()
        if not doc_id:
            logger.error("Contact has no id", operation=operation)
            self._record(operation, "rejected")
            raise IdentifierMissing("id is nil", operation=operation)
        return doc_id

    def _record(self, operation: str, status: str) -> None:
        if self.metrics is not None:
            self.metrics.record_index_operation(operation, status)

    def index(self, contact: Contact) -> None:
        """Upsert a contact document keyed by its id."""
        doc_id = self._require_id(contact, "index")

        try:
            self.client.index(
                index=self.index_name,
                id=doc_id,
                body=contact.to_document(),
            )
        except exceptions.OpenSearchException as e:
            logger.critical(
                "Failed to index contact",
                contact_id=doc_id,
                index_name=self.index_name,
                error=str(e),
            )
            self._record("index", "error")
            raise IndexingFailed(
                "index request failed",
                operation="index",
                contact_id=doc_id,
                cause=e,
            ) from e

        self._record("index", "success")
        logger.info("Contact indexed", contact_id=doc_id, index_name=self.index_name)

    def unindex(self, contact: Contact) -> None:
        """Delete a contact document by id.

        A document that is already gone is not treated as success: the
        ``IndexingFailed`` raised has ``not_found`` set so the caller can
        decide.
        """
        doc_id = self._require_id(contact, "unindex")

        try:
            self.client.delete(index=self.index_name, id=doc_id)
        except exceptions.NotFoundError as e:
            logger.warning(
                "Contact not found in index",
                contact_id=doc_id,
                index_name=self.index_name,
            )
            self._record("unindex", "not_found")
            raise IndexingFailed(
                "document not found",
                operation="unindex",
                contact_id=doc_id,
                cause=e,
                not_found=True,
            ) from e
        except exceptions.OpenSearchException as e:
            logger.critical(
                "Failed to unindex contact",
                contact_id=doc_id,
                index_name=self.index_name,
                error=str(e),
            )
            self._record("unindex", "error")
            raise IndexingFailed(
                "delete request failed",
                operation="unindex",
                contact_id=doc_id,
                cause=e,
            ) from e

        self._record("unindex", "success")
        logger.info("Contact unindexed", contact_id=doc_id, index_name=self.index_name)

    def search_contacts(self, query: str, field: str) -> List[Contact]:
        """Search contacts matching every term of ``query``.

        Either the whole decoded page is returned or an error is raised;
        one undecodable hit discards the rest.
        """
        request = ContactQuery(query=query, field=field)
        start_time = time.time()

        try:
            response = self.client.search(index=self.index_name, body=request.to_body())
        except exceptions.OpenSearchException as e:
            logger.critical("Contact search failed", query=query, field=field, error=str(e))
            self._record_search(field, "error", start_time)
            raise SearchFailed(
                "search request failed",
                operation="search_contacts",
                query=query,
                cause=e,
            ) from e

        hits = (response or {}).get("hits")
        if not hits:
            self._record_search(field, "success", start_time)
            return []

        contacts = []
        for hit in hits.get("hits") or []:
            try:
                contacts.append(Contact.from_document(hit.get("_source")))
            except (ValueError, TypeError) as e:
                logger.error(
                    "Failed to decode contact document",
                    query=query,
                    document_id=hit.get("_id"),
                    error=str(e),
                )
                self._record_search(field, "decode_error", start_time)
                raise DecodeFailed(
                    "stored document is not a contact",
                    operation="search_contacts",
                    contact_id=hit.get("_id"),
                    query=query,
                    cause=e,
                ) from e

        self._record_search(field, "success", start_time, len(contacts))
        logger.info(
            "Contact search completed",
            query=query,
            field=field,
            results_count=len(contacts),
        )
        return contacts

    def _record_search(self, field: str, status: str, start_time: float, results: int = 0) -> None:
        if self.metrics is not None:
            self.metrics.record_search(field, status, time.time() - start_time, results)

    def get_contact(self, contact_id: int) -> Optional[Contact]:
        """Get a specific indexed contact."""
        doc_id = str(contact_id)

        try:
            response = self.client.get(index=self.index_name, id=doc_id)
        except exceptions.NotFoundError:
            return None
        except exceptions.OpenSearchException as e:
            logger.error("Failed to get contact", contact_id=doc_id, error=str(e))
            raise SearchFailed(
                "get request failed",
                operation="get_contact",
                contact_id=doc_id,
                cause=e,
            ) from e

        if not response.get("found"):
            return None

        try:
            return Contact.from_document(response.get("_source"))
        except (ValueError, TypeError) as e:
            logger.error("Failed to decode contact document", contact_id=doc_id, error=str(e))
            raise DecodeFailed(
                "stored document is not a contact",
                operation="get_contact",
                contact_id=doc_id,
                cause=e,
            ) from e

    def health_check(self) -> bool:
        """Ping the cluster."""
        try:
            return bool(self.client.ping())
        except exceptions.OpenSearchException as e:
            logger.error("OpenSearch health check failed", error=str(e))
            return False

    def close(self) -> None:
        """Close the OpenSearch client connection."""
        if hasattr(self.client, 'close'):
            self.client.close()
        logger.info("OpenSearch client connection closed")
