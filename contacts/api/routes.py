"""API routes for the contacts search index."""

from typing import Dict

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field
import structlog

from ..models.contact import ContactArgs, ContactReply, SearchArgs, SearchReply
from ..models.validation import validate_contact
from ..search_index.base import (
    ContactIndex,
    DecodeFailed,
    IdentifierMissing,
    IndexingFailed,
    SearchFailed,
)

logger = structlog.get_logger("contacts_api.routes")

router = APIRouter()


class ValidationReply(BaseModel):
    """Response model for the validate endpoint."""
    valid: bool = Field(..., description="True when no field is invalid")
    errors: Dict[str, str] = Field(default_factory=dict, description="Field name to reason")


def get_contact_index(request: Request) -> ContactIndex:
    """Get the contact index from application state."""
    return request.app.state.contact_index


@router.post("/contacts/index", response_model=ContactReply)
def index_contact(
    args: ContactArgs,
    contact_index: ContactIndex = Depends(get_contact_index),
):
    """Upsert a contact into the search index."""
    try:
        contact_index.index(args.contact)
    except IdentifierMissing as e:
        raise HTTPException(status_code=400, detail=str(e))
    except IndexingFailed as e:
        raise HTTPException(status_code=502, detail=f"Indexing failed: {e}")

    logger.info("Contact index request served", contact_id=args.contact.id, mission_id=args.mission_id)
    return ContactReply(contact=args.contact)


@router.post("/contacts/unindex", response_model=ContactReply)
def unindex_contact(
    args: ContactArgs,
    contact_index: ContactIndex = Depends(get_contact_index),
):
    """Remove a contact from the search index."""
    try:
        contact_index.unindex(args.contact)
    except IdentifierMissing as e:
        raise HTTPException(status_code=400, detail=str(e))
    except IndexingFailed as e:
        if e.not_found:
            raise HTTPException(status_code=404, detail=f"Contact {e.contact_id} is not indexed")
        raise HTTPException(status_code=502, detail=f"Unindexing failed: {e}")

    logger.info("Contact unindex request served", contact_id=args.contact.id, mission_id=args.mission_id)
    return ContactReply(contact=args.contact)


@router.post("/contacts/search", response_model=SearchReply)
def search_contacts(
    args: SearchArgs,
    contact_index: ContactIndex = Depends(get_contact_index),
):
    """Search contacts, sorted by surname."""
    try:
        contacts = contact_index.search_contacts(args.search.query, args.search.field)
    except SearchFailed as e:
        raise HTTPException(status_code=502, detail=f"Search failed: {e}")
    except DecodeFailed as e:
        raise HTTPException(status_code=500, detail=f"Search returned an invalid contact: {e}")

    return SearchReply(contacts=contacts)


@router.post("/contacts/validate", response_model=ValidationReply)
def validate(args: ContactArgs):
    """Check required fields and mail format without touching the index."""
    errors = validate_contact(args.contact)
    return ValidationReply(valid=not errors, errors=errors)
