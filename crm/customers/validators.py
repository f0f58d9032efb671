"""
Field validators for customer input.

Pure predicates with no I/O; the session and CLI layers decide whether to
re-prompt or exit when one fails.
"""

from typing import Optional

from crm.customers.codec import DELIMITER
from crm.customers.models import CATEGORY_CHOICES, DEFAULT_CATEGORY, Category

MIN_PHONE_LENGTH = 9

_CONFIRMATIONS = {"s", "si", "sí", "y", "yes"}


def is_valid_name(value: str) -> bool:
    return bool(value and value.strip())


def is_valid_email(value: str) -> bool:
    return bool(value) and "@" in value


def is_valid_phone(value: str) -> bool:
    """Length check only; digits are expected but not enforced."""
    return bool(value) and len(value.strip()) >= MIN_PHONE_LENGTH


def has_no_delimiter(value: str, delimiter: str = DELIMITER) -> bool:
    """True when `value` can be written to the backing file as-is."""
    return delimiter not in (value or "")


def is_known_category(value: Optional[str]) -> bool:
    if not value:
        return False
    return value.strip().lower() in {c.value for c in Category}


def parse_category_choice(choice: str, default: Category = DEFAULT_CATEGORY) -> Category:
    """
    Map a fixed-menu answer to a category.

    Blank input keeps `default`; anything unrecognised falls back to
    `particular`.
    """
    choice = (choice or "").strip()
    if not choice:
        return default
    if choice in CATEGORY_CHOICES:
        return CATEGORY_CHOICES[choice]
    if is_known_category(choice):
        return Category(choice.lower())
    return DEFAULT_CATEGORY


def is_confirmation(answer: str) -> bool:
    return (answer or "").strip().lower() in _CONFIRMATIONS


def parse_id(value: str) -> Optional[int]:
    """Parse a customer id typed by the operator; None if not an integer."""
    try:
        return int((value or "").strip())
    except ValueError:
        return None
