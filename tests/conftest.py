"""Shared fixtures: an in-memory stand-in for the OpenSearch client."""

import json
from typing import Any, Dict, List, Optional, Tuple

import pytest
from opensearchpy import exceptions
from prometheus_client import CollectorRegistry

from contacts.common.metrics import MetricsCollector
from contacts.search_index.opensearch import ContactSearchIndex


class FakeIndices:
    """Subset of ``client.indices`` used by the bootstrap script."""

    def __init__(self):
        self.created: Dict[str, Dict[str, Any]] = {}

    def exists(self, index: str) -> bool:
        return index in self.created

    def create(self, index: str, body: Dict[str, Any]) -> Dict[str, Any]:
        self.created[index] = body
        return {"acknowledged": True, "index": index}


class FakeCluster:
    def __init__(self, statuses: Optional[List[str]] = None):
        self.statuses = list(statuses or ["green"])

    def health(self) -> Dict[str, Any]:
        status = self.statuses.pop(0) if len(self.statuses) > 1 else self.statuses[0]
        return {"status": status}


class FakeOpenSearch:
    """Mimics the opensearch-py calls the contact index makes.

    Documents round-trip through JSON like they would over the wire. Every
    call is recorded in ``calls``; set ``fail_with`` to make every call raise.
    Search matches when every query term occurs in one of the searched
    fields, and sorts by surname.
    """

    def __init__(self):
        self.documents: Dict[Tuple[str, str], Dict[str, Any]] = {}
        self.calls: List[Tuple[str, Dict[str, Any]]] = []
        self.fail_with: Optional[Exception] = None
        self.search_response: Optional[Dict[str, Any]] = None
        self.indices = FakeIndices()
        self.cluster = FakeCluster()
        self.closed = False

    def _call(self, name: str, **kwargs: Any) -> None:
        self.calls.append((name, kwargs))
        if self.fail_with is not None:
            raise self.fail_with

    def index(self, index: str, id: str, body: Dict[str, Any], **kwargs: Any) -> Dict[str, Any]:
        self._call("index", index=index, id=id, body=body)
        created = (index, id) not in self.documents
        self.documents[(index, id)] = json.loads(json.dumps(body))
        return {"_index": index, "_id": id, "result": "created" if created else "updated"}

    def delete(self, index: str, id: str, **kwargs: Any) -> Dict[str, Any]:
        self._call("delete", index=index, id=id)
        if (index, id) not in self.documents:
            raise exceptions.NotFoundError(404, "not_found", {"_id": id, "result": "not_found"})
        del self.documents[(index, id)]
        return {"_index": index, "_id": id, "result": "deleted"}

    def get(self, index: str, id: str, **kwargs: Any) -> Dict[str, Any]:
        self._call("get", index=index, id=id)
        if (index, id) not in self.documents:
            raise exceptions.NotFoundError(404, "not_found", {"_id": id, "found": False})
        return {"_index": index, "_id": id, "found": True, "_source": self.documents[(index, id)]}

    def search(self, index: str, body: Dict[str, Any], **kwargs: Any) -> Dict[str, Any]:
        self._call("search", index=index, body=body)
        if self.search_response is not None:
            return self.search_response

        match = body["query"]["multi_match"]
        terms = match["query"].lower().split()
        hits = []
        for (doc_index, doc_id), source in self.documents.items():
            if doc_index != index:
                continue
            values = " ".join(str(source.get(field, "")) for field in match["fields"]).lower().split()
            if all(term in values for term in terms):
                hits.append({"_index": index, "_id": doc_id, "_source": source})

        hits.sort(key=lambda hit: hit["_source"].get("surname", ""))
        return {"hits": {"total": {"value": len(hits)}, "hits": hits}}

    def ping(self) -> bool:
        return self.fail_with is None

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_client() -> FakeOpenSearch:
    return FakeOpenSearch()


@pytest.fixture
def metrics() -> MetricsCollector:
    return MetricsCollector("test-service", registry=CollectorRegistry())


@pytest.fixture
def contact_index(fake_client, metrics) -> ContactSearchIndex:
    return ContactSearchIndex(fake_client, metrics=metrics)
