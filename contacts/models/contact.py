"""Contact data models.

The models mirror the primary store's schema field for field. The same
shape is used as the search index document, so optional values are left
out of the serialized form instead of being written as ``null``.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Position(BaseModel):
    """Coordinates of an address: raw projection and geographic."""

    x: Optional[float] = None
    y: Optional[float] = None

    latitude: Optional[float] = None
    longitude: Optional[float] = None


class Address(BaseModel):
    """Postal address of a contact. No cross-field consistency is enforced."""

    id: Optional[int] = None

    house_number: Optional[str] = None
    street: Optional[str] = None
    postal_code: Optional[str] = None
    city: Optional[str] = None
    county: Optional[str] = None  # département
    state: Optional[str] = None  # région
    country: Optional[str] = None
    addition: Optional[str] = None  # complément d'adresse

    polling_station: Optional[str] = None

    position: Optional[Position] = None


class Note(BaseModel):
    id: Optional[int] = None
    content: str = ""
    date: Optional[datetime] = None


class Tag(BaseModel):
    id: Optional[int] = None
    name: str


class Contact(BaseModel):
    """A contact as stored in the primary store and in the search index.

    ``id`` is assigned by the primary store and doubles as the document id
    in the search index. ``None`` and ``0`` both mean "not assigned yet".
    """

    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = None
    firstname: str = ""
    surname: str = ""
    married_name: Optional[str] = None
    gender: Optional[str] = None
    birthdate: Optional[datetime] = None
    mail: Optional[str] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None

    vote: Optional[str] = None
    support: Optional[str] = None

    group_id: Optional[int] = None
    user_id: Optional[int] = None

    address: Optional[Address] = None
    notes: List[Note] = Field(default_factory=list)
    tags: List[Tag] = Field(default_factory=list)

    @field_validator("tags")
    @classmethod
    def _unique_tags(cls, tags: List[Tag]) -> List[Tag]:
        # set semantics keyed on name, first occurrence wins
        seen = set()
        unique = []
        for tag in tags:
            if tag.name in seen:
                continue
            seen.add(tag.name)
            unique.append(tag)
        return unique

    def document_id(self) -> str:
        """Search index document id, or ``""`` when no id is assigned."""
        if not self.id:
            return ""
        return str(self.id)

    def to_document(self) -> Dict[str, Any]:
        """Serialize to the search index document.

        ``None`` values and empty ``notes``/``tags`` collections are omitted.
        """
        document = self.model_dump(mode="json", exclude_none=True)
        for key in ("notes", "tags"):
            if not document.get(key):
                document.pop(key, None)
        return document

    @classmethod
    def from_document(cls, source: Union[str, bytes, Dict[str, Any]]) -> "Contact":
        """Build a contact from a stored document (raw JSON or parsed).

        Raises ``pydantic.ValidationError`` when the document is not valid
        JSON or does not match the schema.
        """
        if isinstance(source, (str, bytes, bytearray)):
            return cls.model_validate_json(source)
        return cls.model_validate(source)

    def validation_errors(self) -> Dict[str, str]:
        """Shortcut for :func:`contacts.models.validation.validate_contact`."""
        from .validation import validate_contact

        return validate_contact(self)


class ContactArgs(BaseModel):
    """Request carrying one contact, scoped to a mission."""

    mission_id: Optional[int] = None
    contact: Contact


class ContactReply(BaseModel):
    contact: Optional[Contact] = None
    contacts: List[Contact] = Field(default_factory=list)


class Search(BaseModel):
    """Free-text query and the field it targets."""

    query: str
    field: str


class SearchArgs(BaseModel):
    search: Search


class SearchReply(BaseModel):
    contacts: List[Contact] = Field(default_factory=list)
