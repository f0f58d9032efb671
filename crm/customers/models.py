"""Customer record types."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Category(str, Enum):
    """Customer categories offered by the fixed-choice menu."""
    PARTICULAR = "particular"
    EMPRESA = "empresa"
    VIP = "vip"


DEFAULT_CATEGORY = Category.PARTICULAR

# Menu choice -> category, in display order
CATEGORY_CHOICES = {
    "1": Category.PARTICULAR,
    "2": Category.EMPRESA,
    "3": Category.VIP,
}

# Company placeholder for customers without one
NO_COMPANY = "-"


@dataclass
class Customer:
    """
    One customer record.

    `category` is kept as a plain string: files written by hand may carry
    values outside `Category`, and those must survive a load/save cycle.
    """
    id: int
    name: str
    email: str
    phone: str
    company: str = NO_COMPANY
    category: str = DEFAULT_CATEGORY.value


@dataclass
class StoreStatistics:
    total: int = 0
    particular: int = 0
    empresa: int = 0
    vip: int = 0
    uncategorized: int = 0
    last_assigned_id: Optional[int] = None
