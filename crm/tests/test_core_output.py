"""Tests for core output formatters."""

import json

from crm.core.output import format_result, OutputFormat
from crm.customers.models import Customer, StoreStatistics


def test_format_human_with_title():
    text = format_result({"key": "val"}, title="Test Title")
    assert "Test Title" in text
    assert "===" in text


def test_format_human_none_as_dash():
    text = format_result(StoreStatistics())
    assert "Last Assigned Id" in text
    assert ": -" in text


def test_format_json_dataclass():
    text = format_result(StoreStatistics(total=3, vip=1, last_assigned_id=4), fmt=OutputFormat.JSON)
    data = json.loads(text)
    assert data["total"] == 3
    assert data["vip"] == 1
    assert data["last_assigned_id"] == 4


def test_format_json_list():
    customers = [Customer(1, "Ana", "ana@x.com", "600111222", "-", "particular")]
    data = json.loads(format_result(customers, fmt=OutputFormat.JSON))
    assert data == [{
        "id": 1, "name": "Ana", "email": "ana@x.com", "phone": "600111222",
        "company": "-", "category": "particular",
    }]


def test_format_markdown():
    text = format_result({"total": 4}, fmt=OutputFormat.MARKDOWN)
    assert "| Field | Value |" in text
    assert "| Total | 4 |" in text


def test_format_list_values():
    text = format_result({"items": ["a", "b"]})
    assert "- a" in text
    assert "- b" in text


def test_format_empty_list():
    text = format_result({"items": []})
    assert "(none)" in text
