"""
In-memory customer store.

Owns the ordered list of customers and the id counter. Every mutation
rewrites the backing file through the attached CustomerFile; the in-memory
list stays authoritative whether or not the save succeeds.
"""

from pathlib import Path
from typing import Iterator, List, Optional

from crm.core.logging import get_logger
from crm.core.paths import get_customers_path
from crm.customers.codec import DELIMITER
from crm.customers.models import (
    Category,
    Customer,
    DEFAULT_CATEGORY,
    NO_COMPANY,
    StoreStatistics,
)
from crm.customers.storage import CustomerFile
from crm.customers.validators import is_known_category, is_valid_email, is_valid_phone

logger = get_logger("crm.customers.store")


class CustomerStore:
    """Ordered customer records plus the next-id counter."""

    def __init__(
        self,
        customers: Optional[List[Customer]] = None,
        storage: Optional[CustomerFile] = None,
    ):
        self._customers: List[Customer] = list(customers or [])
        self._storage = storage
        self._next_id = max((c.id for c in self._customers), default=0) + 1
        self.last_save_ok = True

    @classmethod
    def open(cls, storage: CustomerFile) -> "CustomerStore":
        """Build a store populated from `storage`."""
        return cls(storage.load(), storage=storage)

    @property
    def storage(self) -> Optional[CustomerFile]:
        return self._storage

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._customers)

    def __iter__(self) -> Iterator[Customer]:
        return iter(self._customers)

    def all(self) -> List[Customer]:
        """All customers in insertion order."""
        return list(self._customers)

    def _persist(self) -> bool:
        if self._storage is None:
            self.last_save_ok = True
        else:
            self.last_save_ok = self._storage.save(self._customers)
        return self.last_save_ok

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        for customer in self._customers:
            if customer.id == customer_id:
                return customer
        return None

    def search(self, query: str) -> List[Customer]:
        """
        Case-insensitive substring search over name and email.

        Raises:
            ValueError: if the query is empty or whitespace only
        """
        needle = (query or "").strip().lower()
        if not needle:
            raise ValueError("Search query must not be empty")
        return [
            c for c in self._customers
            if needle in c.name.lower() or needle in c.email.lower()
        ]

    def statistics(self) -> StoreStatistics:
        stats = StoreStatistics(total=len(self._customers))
        for customer in self._customers:
            category = (customer.category or "").strip().lower()
            if category == Category.PARTICULAR.value:
                stats.particular += 1
            elif category == Category.EMPRESA.value:
                stats.empresa += 1
            elif category == Category.VIP.value:
                stats.vip += 1
            else:
                stats.uncategorized += 1

        if stats.uncategorized:
            logger.warning(
                "%d customer(s) have an unrecognised category and are not counted in any bucket",
                stats.uncategorized,
            )
        if self._customers:
            stats.last_assigned_id = self._next_id - 1
        return stats

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def create(
        self,
        name: str,
        email: str,
        phone: str,
        company: Optional[str] = None,
        category: Optional[str] = None,
    ) -> Customer:
        """
        Append a new customer with the next id and save.

        Inputs are expected to be validated by the caller.
        """
        company = (company or "").strip() or NO_COMPANY
        if isinstance(category, Category):
            category = category.value
        category = (category or "").strip().lower() or DEFAULT_CATEGORY.value

        customer = Customer(
            id=self._next_id,
            name=name.strip(),
            email=email.strip(),
            phone=phone.strip(),
            company=company,
            category=category,
        )
        self._customers.append(customer)
        self._next_id += 1
        logger.info("Created customer %d (%s)", customer.id, customer.name)

        self._persist()
        return customer

    def update(
        self,
        customer_id: int,
        name: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        company: Optional[str] = None,
        category: Optional[str] = None,
    ) -> Optional[Customer]:
        """
        Partial update. Blank or missing values keep the current field;
        an email without '@', a short phone, or an unknown category is
        ignored. Returns None if no customer has `customer_id`.
        """
        customer = self.find_by_id(customer_id)
        if customer is None:
            logger.info("Update skipped: no customer with ID %d", customer_id)
            return None

        if name and name.strip():
            customer.name = name.strip()
        if email and email.strip():
            if is_valid_email(email.strip()):
                customer.email = email.strip()
            else:
                logger.info("Ignoring invalid email for customer %d: %r", customer_id, email)
        if phone and phone.strip():
            if is_valid_phone(phone):
                customer.phone = phone.strip()
            else:
                logger.info("Ignoring short phone for customer %d: %r", customer_id, phone)
        if company and company.strip():
            customer.company = company.strip()
        if isinstance(category, Category):
            category = category.value
        if category and category.strip():
            if is_known_category(category):
                customer.category = category.strip().lower()
            else:
                logger.info("Ignoring unknown category for customer %d: %r", customer_id, category)

        logger.info("Updated customer %d", customer_id)
        self._persist()
        return customer

    def delete(self, customer_id: int) -> Optional[Customer]:
        """Remove a customer and save. Returns the removed record, or None."""
        customer = self.find_by_id(customer_id)
        if customer is None:
            logger.info("Delete skipped: no customer with ID %d", customer_id)
            return None

        self._customers.remove(customer)
        logger.info("Deleted customer %d (%s)", customer.id, customer.name)
        self._persist()
        return customer


def open_store(path: Optional[Path] = None) -> CustomerStore:
    """Open the store backed by `path`, or by the configured customers file."""
    storage = CustomerFile(path or get_customers_path(), delimiter=DELIMITER)
    return CustomerStore.open(storage)
