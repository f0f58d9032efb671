"""
Interactive menu session.

Reads operator choices with typer prompts, calls the CustomerStore, and
prints results. Validation loops live here; the predicates they use live in
crm.customers.validators.
"""

from typing import Callable, Dict, Iterable, List, Optional

import typer

from crm.customers.models import CATEGORY_CHOICES, DEFAULT_CATEGORY, Category, Customer
from crm.customers.store import CustomerStore
from crm.customers.validators import (
    MIN_PHONE_LENGTH,
    has_no_delimiter,
    is_confirmation,
    is_known_category,
    is_valid_email,
    is_valid_name,
    is_valid_phone,
    parse_category_choice,
    parse_id,
)

MENU = [
    ("1", "Create a customer"),
    ("2", "List all customers"),
    ("3", "Search customers"),
    ("4", "Update a customer"),
    ("5", "Delete a customer"),
    ("6", "Statistics"),
    ("0", "Exit"),
]

_COLUMNS = [("ID", 4), ("Name", 20), ("Email", 25), ("Phone", 12), ("Company", 15), ("Category", 10)]


def format_customer(c: Customer) -> str:
    values = [c.id, c.name, c.email, c.phone, c.company, c.category]
    return " ".join(f"{str(v):<{width}}" for v, (_, width) in zip(values, _COLUMNS))


def render_customers(customers: Iterable[Customer]) -> List[str]:
    """Table lines (header, rule, one row per customer)."""
    header = " ".join(f"{label:<{width}}" for label, width in _COLUMNS)
    lines = [header, "-" * len(header)]
    lines.extend(format_customer(c) for c in customers)
    return lines


def _ask(text: str) -> str:
    """Prompt that accepts blank input."""
    return typer.prompt(text, default="", show_default=False).strip()


def prompt_field(
    text: str,
    check: Optional[Callable[[str], bool]] = None,
    error: str = "",
) -> str:
    """Prompt until `check` (if any) passes and the value is safe to store."""
    while True:
        value = _ask(text)
        if check is not None and not check(value):
            typer.echo(f"  [!] {error}")
        elif not has_no_delimiter(value):
            typer.echo("  [!] The ';' character is not allowed.")
        else:
            return value


def prompt_category(current: Optional[Category] = None) -> Category:
    """
    Fixed-choice category menu.

    Blank input keeps `current` (or the default category); an invalid
    choice falls back to 'particular'.
    """
    default = current or DEFAULT_CATEGORY
    typer.echo("  Category:")
    for key, category in CATEGORY_CHOICES.items():
        typer.echo(f"    {key}. {category.value}")
    answer = _ask(f"  Option (1-3) [{default.value}]")
    if answer and answer not in CATEGORY_CHOICES and not is_known_category(answer):
        typer.echo(f"  [!] Invalid option, using '{DEFAULT_CATEGORY.value}'.")
    return parse_category_choice(answer, default=default)


class MenuSession:
    """Operator menu loop bound to one CustomerStore."""

    def __init__(self, store: CustomerStore):
        self.store = store
        self._actions: Dict[str, Callable[[], None]] = {
            "1": self.create_customer,
            "2": self.list_customers,
            "3": self.search_customers,
            "4": self.update_customer,
            "5": self.delete_customer,
            "6": self.show_statistics,
        }

    def run(self) -> None:
        typer.echo("\n  CUSTOMER RECORD MANAGER")
        while True:
            typer.echo("")
            typer.echo("  " + "=" * 36)
            for key, label in MENU:
                typer.echo(f"  {key}. {label}")
            typer.echo("  " + "=" * 36)
            choice = _ask("  Choose an option")

            if choice == "0":
                typer.echo("  Goodbye.")
                return
            action = self._actions.get(choice)
            if action is None:
                typer.echo("  [!] Invalid option. Enter a number from 0 to 6.")
                continue
            action()

    def _report_save(self) -> None:
        if not self.store.last_save_ok:
            typer.echo("  [!] Changes could not be saved to disk; they are kept in memory.")

    def _read_id(self, text: str) -> Optional[Customer]:
        raw = _ask(text)
        customer_id = parse_id(raw)
        if customer_id is None:
            typer.echo(f"  [!] '{raw}' is not a valid number.")
            return None
        customer = self.store.find_by_id(customer_id)
        if customer is None:
            typer.echo(f"  [!] No customer found with ID {customer_id}.")
        return customer

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def create_customer(self) -> None:
        typer.echo("\n  NEW CUSTOMER")
        name = prompt_field("  Full name", is_valid_name, "Name cannot be empty.")
        email = prompt_field("  Email", is_valid_email, "Email must contain '@'.")
        phone = prompt_field(
            f"  Phone (min {MIN_PHONE_LENGTH} digits)",
            is_valid_phone,
            f"Phone must have at least {MIN_PHONE_LENGTH} digits.",
        )
        company = prompt_field("  Company (blank if none)")
        category = prompt_category()

        customer = self.store.create(name, email, phone, company, category)
        self._report_save()
        typer.echo(f"\n  [OK] Customer '{customer.name}' created with ID {customer.id}")

    def list_customers(self) -> None:
        customers = self.store.all()
        if not customers:
            typer.echo("  [i] No customers registered.")
            return
        for line in render_customers(customers):
            typer.echo(f"  {line}")
        typer.echo(f"  Total: {len(customers)} customer(s)")

    def search_customers(self) -> None:
        query = _ask("  Text to search (name or email)")
        if not query:
            typer.echo("  [!] Type something to search for.")
            return

        results = self.store.search(query)
        if not results:
            typer.echo(f"  [i] No customers match '{query}'.")
            return
        typer.echo(f"  Found {len(results)} result(s):")
        for line in render_customers(results):
            typer.echo(f"  {line}")

    def update_customer(self) -> None:
        typer.echo("\n  UPDATE CUSTOMER")
        customer = self._read_id("  Customer ID to update")
        if customer is None:
            return

        typer.echo("  Current data:")
        typer.echo(f"  {format_customer(customer)}")
        typer.echo("  (Leave blank to keep the current value)")

        name = _ask(f"  New name [{customer.name}]")
        email = _ask(f"  New email [{customer.email}]")
        phone = _ask(f"  New phone [{customer.phone}]")
        company = _ask(f"  New company [{customer.company}]")
        values = [name, email, phone, company]
        if not all(has_no_delimiter(v) for v in values):
            typer.echo("  [!] The ';' character is not allowed. Update cancelled.")
            return
        if email and not is_valid_email(email):
            typer.echo("  [!] Email must contain '@'; keeping the current email.")
        if phone and not is_valid_phone(phone):
            typer.echo(f"  [!] Phone must have at least {MIN_PHONE_LENGTH} digits; keeping the current phone.")

        current = Category(customer.category.strip().lower()) if is_known_category(customer.category) else None
        category = prompt_category(current)

        self.store.update(
            customer.id,
            name=name,
            email=email,
            phone=phone,
            company=company,
            category=category,
        )
        self._report_save()
        typer.echo(f"\n  [OK] Customer with ID {customer.id} updated.")

    def delete_customer(self) -> None:
        customer = self._read_id("  Customer ID to delete")
        if customer is None:
            return

        typer.echo("  Customer found:")
        typer.echo(f"  {format_customer(customer)}")
        answer = _ask("  Confirm deletion? (y/n)")
        if not is_confirmation(answer):
            typer.echo("  [i] Deletion cancelled.")
            return

        self.store.delete(customer.id)
        self._report_save()
        typer.echo(f"  [OK] Customer '{customer.name}' deleted.")

    def show_statistics(self) -> None:
        stats = self.store.statistics()
        typer.echo("\n  CRM STATISTICS")
        typer.echo(f"  Total customers:   {stats.total}")
        typer.echo("  " + "-" * 28)
        typer.echo(f"  Particular:        {stats.particular}")
        typer.echo(f"  Empresa:           {stats.empresa}")
        typer.echo(f"  VIP:               {stats.vip}")
        if stats.uncategorized:
            typer.echo(f"  Uncategorized:     {stats.uncategorized}")
        if stats.last_assigned_id is None:
            typer.echo("  [i] The CRM is empty. Add customers to see statistics.")
        else:
            typer.echo(f"  [i] Last assigned ID: {stats.last_assigned_id}")
