"""Search request description for contact lookups.

``ContactQuery`` holds every option of a contact search as named fields and
renders the OpenSearch request body in one place.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

SECONDARY_FIELD = "firstname"
# keyword sub-field; sorting on an analyzed text field is rejected
SURNAME_SORT_FIELD = "surname.keyword"


@dataclass(frozen=True)
class ContactQuery:
    """Multi-match query over ``field`` and ``secondary_field``.

    Defaults search every field as one combined field (``cross_fields``),
    require all terms to match (``and``) and sort by surname ascending.
    """

    query: str
    field: str
    secondary_field: str = SECONDARY_FIELD
    match_type: str = "cross_fields"
    operator: str = "and"
    sort_field: str = SURNAME_SORT_FIELD
    sort_ascending: bool = True

    @property
    def fields(self) -> List[str]:
        fields = [self.field]
        if self.secondary_field and self.secondary_field != self.field:
            fields.append(self.secondary_field)
        return fields

    def to_body(self) -> Dict[str, Any]:
        """Render the ``_search`` request body."""
        return {
            "query": {
                "multi_match": {
                    "query": self.query,
                    "fields": self.fields,
                    "type": self.match_type,
                    "operator": self.operator,
                }
            },
            "sort": [
                {self.sort_field: {"order": "asc" if self.sort_ascending else "desc"}}
            ],
        }
