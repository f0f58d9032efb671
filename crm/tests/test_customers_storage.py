"""Tests for the customer backing file."""

import logging

import pytest

from crm.customers.models import Customer
from crm.customers.storage import CustomerFile


def test_missing_file_loads_empty(customer_file):
    assert not customer_file.path.exists()
    assert customer_file.load() == []


def test_save_creates_directory_and_file(customer_file, make_customer):
    assert customer_file.save([make_customer()]) is True
    assert customer_file.path.read_text(encoding="utf-8") == (
        "1;Ana;ana@x.com;600111222;-;particular\n"
    )


def test_save_overwrites_in_full(customer_file, make_customer):
    customer_file.save([make_customer(1), make_customer(2, name="Luis")])
    customer_file.save([make_customer(2, name="Luis")])
    lines = customer_file.path.read_text(encoding="utf-8").splitlines()
    assert lines == ["2;Luis;ana@x.com;600111222;-;particular"]


def test_save_then_load(customer_file, make_customer):
    customers = [make_customer(1), make_customer(5, name="Marta", category="vip")]
    customer_file.save(customers)
    assert customer_file.load() == customers


def test_load_skips_blank_lines(customers_path):
    customers_path.parent.mkdir(parents=True)
    customers_path.write_text(
        "\n1;Ana;ana@x.com;600111222;-;particular\n\n   \n"
        "2;Luis;luis@x.com;600333444;-;empresa\n",
        encoding="utf-8",
    )
    loaded = CustomerFile(customers_path).load()
    assert [c.id for c in loaded] == [1, 2]


def test_load_skips_malformed_lines(customers_path, caplog):
    customers_path.parent.mkdir(parents=True)
    customers_path.write_text(
        "1;Ana;ana@x.com;600111222;-;particular\n"
        "2;Luis;luis@x.com;600333444;empresa\n"
        "x;Bad;bad@x.com;600000000;-;vip\n"
        "3;Marta;marta@x.com;600555666;-;vip\n",
        encoding="utf-8",
    )
    with caplog.at_level(logging.WARNING, logger="crm.customers.storage"):
        loaded = CustomerFile(customers_path).load()

    assert [c.id for c in loaded] == [1, 3]
    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 2
    assert "line 2" in warnings[0]
    assert "line 3" in warnings[1]


def test_load_keeps_file_order(customers_path):
    customers_path.parent.mkdir(parents=True)
    customers_path.write_text(
        "9;Zoe;zoe@x.com;600111222;-;vip\n"
        "2;Ana;ana@x.com;600111222;-;particular\n",
        encoding="utf-8",
    )
    assert [c.id for c in CustomerFile(customers_path).load()] == [9, 2]


def test_load_read_error_returns_empty(tmp_path, caplog):
    # A directory where the file should be makes open() fail
    path = tmp_path / "clientes.csv"
    path.mkdir()
    with caplog.at_level(logging.ERROR, logger="crm.customers.storage"):
        assert CustomerFile(path).load() == []
    assert any("Error loading" in r.getMessage() for r in caplog.records)


def test_save_io_error_returns_false(tmp_path, make_customer, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    storage = CustomerFile(blocker / "clientes.csv")

    with caplog.at_level(logging.ERROR, logger="crm.customers.storage"):
        assert storage.save([make_customer()]) is False
    assert any("Error saving" in r.getMessage() for r in caplog.records)


def test_save_encode_error_keeps_previous_snapshot(customer_file, make_customer):
    customer_file.save([make_customer()])
    ok = customer_file.save([make_customer(), make_customer(2, company="A;B")])
    assert ok is False
    assert customer_file.load() == [make_customer()]
    assert not customer_file.path.with_name("clientes.csv.tmp").exists()


def test_delimiter_must_be_single_char(tmp_path):
    with pytest.raises(ValueError):
        CustomerFile(tmp_path / "x.csv", delimiter=";;")


def test_loaded_category_not_validated(customers_path):
    customers_path.parent.mkdir(parents=True)
    customers_path.write_text("1;Ana;ana@x.com;600111222;-;gold\n", encoding="utf-8")
    assert CustomerFile(customers_path).load() == [
        Customer(1, "Ana", "ana@x.com", "600111222", "-", "gold")
    ]


def test_load_skips_duplicate_ids(customers_path):
    customers_path.parent.mkdir(parents=True)
    customers_path.write_text(
        "1;Ana;ana@x.com;600111222;-;particular\n"
        "1;Copy;copy@x.com;600111222;-;vip\n",
        encoding="utf-8",
    )
    loaded = CustomerFile(customers_path).load()
    assert [c.name for c in loaded] == ["Ana"]
