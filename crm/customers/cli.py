"""
Customer CLI commands.

Usage:
    crm customers list
    crm customers search <text>
    crm customers add [--name ...] [--email ...] [--phone ...]
    crm customers update <id> [--name ...] [--category ...]
    crm customers delete <id> [--yes]
    crm customers stats [--format json]
"""

from typing import List, Optional

import typer

from crm.core.output import OutputFormat, format_result

app = typer.Typer(no_args_is_help=True)


def _validate_new_customer(name: str, email: str, phone: str, company: str) -> List[str]:
    from crm.customers.validators import (
        MIN_PHONE_LENGTH,
        has_no_delimiter,
        is_valid_email,
        is_valid_name,
        is_valid_phone,
    )

    errors = []
    if not is_valid_name(name):
        errors.append("Name cannot be empty.")
    if not is_valid_email(email):
        errors.append("Email must contain '@'.")
    if not is_valid_phone(phone):
        errors.append(f"Phone must have at least {MIN_PHONE_LENGTH} digits.")
    for label, value in (("name", name), ("email", email), ("phone", phone), ("company", company)):
        if not has_no_delimiter(value):
            errors.append(f"The ';' character is not allowed in {label}.")
    return errors


@app.command("list")
def list_customers(
    fmt: OutputFormat = typer.Option(OutputFormat.HUMAN, "--format", "-f", help="Output format"),
):
    """List all customers in creation order."""
    from crm.customers.session import render_customers
    from crm.customers.store import open_store

    customers = open_store().all()

    if fmt == OutputFormat.JSON:
        typer.echo(format_result(customers, fmt=fmt))
        return

    if not customers:
        typer.echo("No customers found.")
        raise typer.Exit()

    for line in render_customers(customers):
        typer.echo(line)
    typer.echo(f"Total: {len(customers)} customer(s)")


@app.command("search")
def search(query: str = typer.Argument(..., help="Text to find in name or email")):
    """Find customers whose name or email contains the text (case-insensitive)."""
    from crm.customers.session import render_customers
    from crm.customers.store import open_store

    if not query.strip():
        typer.echo("Search text cannot be empty.")
        raise typer.Exit(1)

    results = open_store().search(query)
    if not results:
        typer.echo(f"No customers match '{query.strip()}'.")
        raise typer.Exit()

    typer.echo(f"Found {len(results)} result(s):")
    for line in render_customers(results):
        typer.echo(line)


@app.command("add")
def add(
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Full name"),
    email: Optional[str] = typer.Option(None, "--email", "-e", help="Email address"),
    phone: Optional[str] = typer.Option(None, "--phone", "-p", help="Phone (min 9 digits)"),
    company: Optional[str] = typer.Option(None, "--company", "-c", help="Company (blank if none)"),
    category: Optional[str] = typer.Option(None, "--category", help="particular / empresa / vip"),
):
    """Create a customer. Prompts for any field not given as an option."""
    from crm.customers.store import open_store
    from crm.customers.validators import is_known_category

    name = name if name is not None else typer.prompt("Full name")
    email = email if email is not None else typer.prompt("Email")
    phone = phone if phone is not None else typer.prompt("Phone")
    company = company if company is not None else typer.prompt("Company", default="", show_default=False)

    errors = _validate_new_customer(name, email, phone, company)
    if category and not is_known_category(category):
        errors.append(f"Unknown category '{category}' (use particular, empresa or vip).")
    if errors:
        typer.echo("Customer NOT created:")
        for err in errors:
            typer.echo(f"  - {err}")
        raise typer.Exit(1)

    store = open_store()
    customer = store.create(name, email, phone, company, category)
    if not store.last_save_ok:
        typer.echo("WARNING: customer could not be saved to disk.")
        raise typer.Exit(1)
    typer.echo(f"Created: {customer.name} (ID {customer.id})")


@app.command("update")
def update(
    customer_id: int = typer.Argument(..., help="Customer ID"),
    name: Optional[str] = typer.Option(None, "--name", "-n"),
    email: Optional[str] = typer.Option(None, "--email", "-e"),
    phone: Optional[str] = typer.Option(None, "--phone", "-p"),
    company: Optional[str] = typer.Option(None, "--company", "-c"),
    category: Optional[str] = typer.Option(None, "--category"),
):
    """Change the given fields of a customer; omitted fields are kept."""
    from crm.customers.session import format_customer
    from crm.customers.store import open_store
    from crm.customers.validators import (
        MIN_PHONE_LENGTH,
        has_no_delimiter,
        is_known_category,
        is_valid_email,
        is_valid_phone,
    )

    errors = []
    if email and not is_valid_email(email):
        errors.append("Email must contain '@'.")
    if phone and not is_valid_phone(phone):
        errors.append(f"Phone must have at least {MIN_PHONE_LENGTH} digits.")
    if category and not is_known_category(category):
        errors.append(f"Unknown category '{category}' (use particular, empresa or vip).")
    for label, value in (("name", name), ("email", email), ("phone", phone), ("company", company)):
        if not has_no_delimiter(value or ""):
            errors.append(f"The ';' character is not allowed in {label}.")
    if errors:
        typer.echo("Customer NOT updated:")
        for err in errors:
            typer.echo(f"  - {err}")
        raise typer.Exit(1)

    store = open_store()
    customer = store.update(
        customer_id,
        name=name,
        email=email,
        phone=phone,
        company=company,
        category=category,
    )
    if customer is None:
        typer.echo(f"Customer {customer_id} not found.")
        raise typer.Exit(1)
    if not store.last_save_ok:
        typer.echo("WARNING: changes could not be saved to disk.")
        raise typer.Exit(1)

    typer.echo(f"Updated: {format_customer(customer)}")


@app.command("delete")
def delete(
    customer_id: int = typer.Argument(..., help="Customer ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
):
    """Delete a customer after confirmation."""
    from crm.customers.session import format_customer
    from crm.customers.store import open_store

    store = open_store()
    customer = store.find_by_id(customer_id)
    if customer is None:
        typer.echo(f"Customer {customer_id} not found.")
        raise typer.Exit(1)

    typer.echo(format_customer(customer))
    if not yes and not typer.confirm("Delete this customer?"):
        typer.echo("Deletion cancelled.")
        raise typer.Exit()

    store.delete(customer_id)
    if not store.last_save_ok:
        typer.echo("WARNING: deletion could not be saved to disk.")
        raise typer.Exit(1)
    typer.echo(f"Deleted: {customer.name} (ID {customer.id})")


@app.command("stats")
def stats(
    fmt: OutputFormat = typer.Option(OutputFormat.HUMAN, "--format", "-f", help="Output format"),
):
    """Show customer counts per category and the last assigned ID."""
    from crm.customers.store import open_store

    result = open_store().statistics()
    typer.echo(format_result(result, fmt=fmt, title="CRM Statistics"))
