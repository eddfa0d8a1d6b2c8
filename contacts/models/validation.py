"""Field presence and format checks for contacts."""

from typing import Dict

from email_validator import EmailNotValidError, validate_email

from .contact import Contact

REQUIRED = "is required"
INVALID = "is not valid"


def is_email(value: str) -> bool:
    """Syntax-only email check; no DNS lookup."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_contact(contact: Contact) -> Dict[str, str]:
    """Map each invalid field name to the reason it is invalid.

    An empty mapping means the contact is valid. Only ``firstname``,
    ``surname`` and ``mail`` are checked.
    """
    errors: Dict[str, str] = {}

    if not contact.firstname.strip():
        errors["firstname"] = REQUIRED

    if not contact.surname.strip():
        errors["surname"] = REQUIRED

    if contact.mail is not None and not is_email(contact.mail.strip()):
        errors["mail"] = INVALID

    return errors
