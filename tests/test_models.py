"""Tests for contact models and validation."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from contacts.models import Address, Contact, Note, Position, Tag, validate_contact


def test_missing_names_are_required():
    """Empty and blank names are reported."""
    errors = validate_contact(Contact(firstname="", surname="   "))
    assert errors == {"firstname": "is required", "surname": "is required"}


def test_invalid_mail():
    """A mail that is not email-shaped is rejected."""
    errors = validate_contact(Contact(firstname="Jack", surname="Banon", mail="not-an-email"))
    assert errors == {"mail": "is not valid"}


@pytest.mark.parametrize("mail", [None, "jack.banon@example.com"])
def test_valid_contact(mail):
    """Names set and mail absent or valid means no errors."""
    contact = Contact(firstname="Jack", surname="Banon", mail=mail)
    assert validate_contact(contact) == {}
    assert contact.validation_errors() == {}


def test_validation_is_repeatable():
    contact = Contact(firstname="Jack", surname="")
    first = validate_contact(contact)
    first["extra"] = "mutated"
    assert validate_contact(contact) == {"surname": "is required"}


def test_document_omits_absent_fields():
    """Optional fields and empty collections are left out, never null."""
    document = Contact(id=7, firstname="Jack", surname="Banon").to_document()
    assert document == {"id": 7, "firstname": "Jack", "surname": "Banon"}


def test_document_keeps_nested_values():
    contact = Contact(
        id=3,
        firstname="Jeanne",
        surname="Martin",
        mail="jeanne@example.com",
        birthdate=datetime(1980, 5, 17),
        address=Address(city="Lyon", position=Position(latitude=45.76, longitude=4.84)),
        notes=[Note(content="called back")],
        tags=[Tag(name="volunteer")],
    )
    document = contact.to_document()

    assert document["birthdate"] == "1980-05-17T00:00:00"
    assert document["address"] == {"city": "Lyon", "position": {"latitude": 45.76, "longitude": 4.84}}
    assert document["notes"] == [{"content": "called back"}]
    assert document["tags"] == [{"name": "volunteer"}]
    assert "married_name" not in document


def test_document_round_trip():
    contact = Contact(
        id=3,
        firstname="Jeanne",
        surname="Martin",
        married_name="Durand",
        birthdate=datetime(1980, 5, 17, 8, 30),
        group_id=12,
        address=Address(street="rue de la Paix", postal_code="75002"),
        notes=[Note(id=1, content="first"), Note(id=2, content="second")],
        tags=[Tag(id=4, name="donor")],
    )
    assert Contact.from_document(contact.to_document()) == contact


def test_tags_are_unique_by_name():
    contact = Contact(
        firstname="Jack",
        surname="Banon",
        tags=[Tag(id=1, name="donor"), Tag(id=2, name="volunteer"), Tag(id=3, name="donor")],
    )
    assert [(tag.id, tag.name) for tag in contact.tags] == [(1, "donor"), (2, "volunteer")]


@pytest.mark.parametrize("contact_id,expected", [(None, ""), (0, ""), (42, "42")])
def test_document_id(contact_id, expected):
    assert Contact(id=contact_id, firstname="a", surname="b").document_id() == expected


def test_from_document_rejects_invalid_json():
    with pytest.raises(ValidationError):
        Contact.from_document('{"firstname": "Jack", ')


def test_from_document_rejects_schema_mismatch():
    with pytest.raises(ValidationError):
        Contact.from_document({"firstname": "Jack", "notes": "not a list"})
