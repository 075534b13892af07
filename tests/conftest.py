"""Pytest configuration and fixtures"""
import os

import pytest

# Set test environment variables
os.environ.setdefault("SHOPCART_LANGUAGE", "pt")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from shopcart.cart import CartLedger, Priority, ProductForm  # noqa: E402


@pytest.fixture
def ledger():
    """Empty cart ledger"""
    return CartLedger()


@pytest.fixture
def filled_ledger():
    """Ledger holding three entries, one per priority"""
    ledger = CartLedger()
    ledger.add_entry("Milk", "R$ 5,00", "green")
    ledger.add_entry("Coffee", "R$ 18,90", Priority.HIGH)
    ledger.add_entry("Rice", "R$ 1.234,56", "yellow")
    return ledger


@pytest.fixture
def form(ledger):
    """Product form bound to the empty ledger"""
    return ProductForm(ledger, lang="pt")
