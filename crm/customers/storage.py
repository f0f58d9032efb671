"""
File persistence for customer records.

The backing file is read once at startup and rewritten in full after every
change. Failures are logged and reported through return values; they never
raise out of load() or save().
"""

from pathlib import Path
from typing import Iterable, List

from crm.core.logging import get_logger
from crm.core.paths import ensure_directory
from crm.customers.codec import DELIMITER, CodecError, MalformedLineError, decode, encode
from crm.customers.models import Customer

logger = get_logger("crm.customers.storage")


class CustomerFile:
    """Delimited text file holding one customer per line."""

    def __init__(self, path: Path, delimiter: str = DELIMITER):
        if len(delimiter) != 1:
            raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
        self.path = Path(path)
        self.delimiter = delimiter

    def load(self) -> List[Customer]:
        """
        Read every well-formed record in file order.

        Blank lines are ignored; malformed lines and repeated ids are logged
        and skipped. A missing file yields an empty list. On a read error the
        records decoded so far are returned.
        """
        customers: List[Customer] = []
        seen_ids = set()

        if not self.path.exists():
            logger.info("No data file at %s, starting with an empty store", self.path)
            return customers

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                for lineno, line in enumerate(f, start=1):
                    if not line.strip():
                        continue
                    try:
                        customer = decode(line, self.delimiter)
                    except MalformedLineError as exc:
                        logger.warning("Skipping line %d of %s: %s", lineno, self.path, exc)
                        continue
                    if customer.id in seen_ids:
                        logger.warning(
                            "Skipping line %d of %s: duplicate id %d", lineno, self.path, customer.id
                        )
                        continue
                    seen_ids.add(customer.id)
                    customers.append(customer)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Error loading %s: %s", self.path, exc)
            return customers

        logger.info("Loaded %d customers from %s", len(customers), self.path)
        return customers

    def save(self, customers: Iterable[Customer]) -> bool:
        """
        Overwrite the file with `customers`, one line each.

        Writes to a sibling temp file first and swaps it in, so a failed write
        leaves the previous snapshot intact. Returns False on failure.
        """
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            lines = [encode(c, self.delimiter) for c in customers]
            ensure_directory(self.path.parent)
            with open(tmp_path, "w", encoding="utf-8", newline="\n") as f:
                for line in lines:
                    f.write(line + "\n")
            tmp_path.replace(self.path)
        except (OSError, CodecError) as exc:
            logger.error("Error saving %s: %s", self.path, exc)
            if tmp_path.exists():
                tmp_path.unlink()
            return False

        logger.debug("Saved %d customers to %s", len(lines), self.path)
        return True
