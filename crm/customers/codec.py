"""
Line codec for the customer backing file.

One record per line, fields in fixed order:

    id;name;email;phone;company;category

No header, no quoting, no trailing delimiter. Decoding is structural only:
field count and an integer id are checked, business rules are not.
"""

from typing import List

from crm.customers.models import Customer

DELIMITER = ";"
FIELD_COUNT = 6
FIELDS = ("id", "name", "email", "phone", "company", "category")


class CodecError(ValueError):
    """Base error for lines that cannot be encoded or decoded."""


class EncodeError(CodecError):
    """A field value would break the line format."""


class MalformedLineError(CodecError):
    """A stored line is not a valid record."""

    def __init__(self, line: str, reason: str):
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason


def encode(customer: Customer, delimiter: str = DELIMITER) -> str:
    """Serialize one customer to a single line (no newline)."""
    values: List[str] = [str(getattr(customer, name)) for name in FIELDS]
    for name, value in zip(FIELDS, values):
        if delimiter in value or "\n" in value or "\r" in value:
            raise EncodeError(
                f"Customer {customer.id}: {name} contains a delimiter or line break: {value!r}"
            )
    return delimiter.join(values)


def decode(line: str, delimiter: str = DELIMITER) -> Customer:
    """
    Parse one stored line into a customer.

    Raises:
        MalformedLineError: wrong field count or non-integer id
    """
    parts = [p.strip() for p in line.rstrip("\r\n").split(delimiter)]
    if len(parts) != FIELD_COUNT:
        raise MalformedLineError(line, f"expected {FIELD_COUNT} fields, got {len(parts)}")

    try:
        customer_id = int(parts[0])
    except ValueError:
        raise MalformedLineError(line, f"invalid id {parts[0]!r}") from None

    return Customer(
        id=customer_id,
        name=parts[1],
        email=parts[2],
        phone=parts[3],
        company=parts[4],
        category=parts[5],
    )
