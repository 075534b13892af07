"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, replace
from decimal import Decimal

from shopcart.services.money import to_decimal, multiply
from .constants import Priority, PRIORITY_COLORS


@dataclass(frozen=True)
class CartEntry:
    """
    Single product line in the cart.

    Frozen: the ledger replaces entries instead of writing to their fields,
    so the running total can only change through ledger operations.
    """
    id: str
    name: str
    unit_value: Decimal
    priority: Priority
    quantity: int = 1

    def __post_init__(self):
        # Normalize numeric fields
        object.__setattr__(self, "unit_value", to_decimal(self.unit_value))
        if not self.unit_value.is_finite() or self.unit_value <= 0:
            raise ValueError("unit_value must be a number greater than zero")
        if not isinstance(self.quantity, int) or self.quantity < 1:
            raise ValueError("quantity must be a positive integer")

    @property
    def line_total(self) -> Decimal:
        """Total price for all units."""
        return multiply(self.unit_value, self.quantity)

    @property
    def color(self) -> str:
        return PRIORITY_COLORS[self.priority]

    def with_quantity(self, quantity: int) -> "CartEntry":
        """Copy of this entry with another quantity."""
        return replace(self, quantity=quantity)
