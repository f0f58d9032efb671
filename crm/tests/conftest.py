"""
Shared test fixtures for CRM.

Provides a temporary backing file, a store bound to it, a patched
configured path for CLI commands, and a CLI runner.
"""

import pytest
from unittest.mock import patch

# Import logging users up front so their handlers bind to the real stderr,
# not to a CliRunner stream that is closed after each invoke.
import crm.customers.storage  # noqa: F401
import crm.customers.store  # noqa: F401
from crm.customers.models import Customer
from crm.customers.storage import CustomerFile
from crm.customers.store import CustomerStore


@pytest.fixture
def customers_path(tmp_path):
    """Path of a not-yet-existing backing file inside a fresh directory."""
    return tmp_path / "data" / "clientes.csv"


@pytest.fixture
def customer_file(customers_path):
    return CustomerFile(customers_path)


@pytest.fixture
def store(customer_file):
    """Empty store persisted to the temporary backing file."""
    return CustomerStore.open(customer_file)


@pytest.fixture
def seeded_store(customers_path):
    """Store loaded from a file holding three customers (ids 1, 2, 4)."""
    customers_path.parent.mkdir(parents=True)
    customers_path.write_text(
        "1;Ana Garcia;ana@x.com;600111222;-;particular\n"
        "2;Luis Perez;luis@acme.es;600333444;Acme;empresa\n"
        "4;Marta Ruiz;MARTA@Example.com;600555666;-;vip\n",
        encoding="utf-8",
    )
    return CustomerStore.open(CustomerFile(customers_path))


@pytest.fixture
def mock_customers_path(customers_path):
    """Point the configured customers file at the temporary path."""
    with patch("crm.customers.store.get_customers_path", return_value=customers_path):
        yield customers_path


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()


@pytest.fixture
def make_customer():
    def _make(customer_id=1, name="Ana", email="ana@x.com", phone="600111222",
              company="-", category="particular"):
        return Customer(customer_id, name, email, phone, company, category)
    return _make
