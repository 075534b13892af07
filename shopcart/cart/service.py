"""Cart ledger: in-memory entries and the running total."""
import math
from decimal import Decimal
from functools import reduce
from itertools import count
from typing import Iterator, Optional, Union

from shopcart.errors import MissingFieldError, InvalidValueError, ERROR_ENTRY_NOT_FOUND
from shopcart.logging import get_logger, loggable
from shopcart.services.money import (
    add,
    format_currency_input,
    format_money,
    multiply,
    parse_currency_display,
    subtract,
    to_decimal,
)
from .constants import Priority, normalize_priority
from .models import CartEntry

logger = get_logger(__name__)


class CartLedger:
    """
    Holds the cart entries of one screen session.

    Features:
    - Insertion-ordered entries, each with quantity >= 1
    - Running total kept incrementally with exact Decimal arithmetic
    - Atomic add: inputs are validated before anything changes
    - Unknown ids on update/delete are ignored (reported by return value)
    """

    format_currency_input = staticmethod(format_currency_input)
    parse_currency_display = staticmethod(parse_currency_display)

    def __init__(self):
        self._entries: list[CartEntry] = []
        self._total = Decimal("0")
        self._ids = count(1)

    @property
    def entries(self) -> tuple[CartEntry, ...]:
        """Entries in display (insertion) order."""
        return tuple(self._entries)

    @property
    def total(self) -> Decimal:
        """Running total."""
        return self._total

    @property
    def subtotal(self) -> Decimal:
        """Total summed from the entries; always equal to `total`."""
        return reduce(add, (entry.line_total for entry in self._entries), Decimal("0"))

    @property
    def total_items(self) -> int:
        """Total number of units in the cart."""
        return sum(entry.quantity for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[CartEntry]:
        return iter(tuple(self._entries))

    def get_entry(self, entry_id: str) -> Optional[CartEntry]:
        """Find an entry by id."""
        return next((entry for entry in self._entries if entry.id == entry_id), None)

    def _index_of(self, entry_id: str) -> Optional[int]:
        return next(
            (i for i, entry in enumerate(self._entries) if entry.id == entry_id),
            None
        )

    def add_entry(
        self,
        name: str,
        display_value: str,
        priority: Union[Priority, str, None]
    ) -> CartEntry:
        """
        Add a product with quantity 1.

        Args:
            name: Product name
            display_value: Price as shown in the field, e.g. "R$ 5,00"
            priority: Priority, or its value, color tag or label

        Returns:
            The created entry

        Raises:
            MissingFieldError: name, value or priority is empty
            InvalidValueError: value is not a number above zero
        """
        normalized = normalize_priority(priority)
        if not name or not display_value or normalized is None:
            missing = next(
                field for field, value in (
                    ("name", name),
                    ("value", display_value),
                    ("priority", normalized),
                ) if not value
            )
            logger.warning(f"Rejected entry: missing {missing}")
            raise MissingFieldError(field=missing)

        value = parse_currency_display(display_value)
        if not math.isfinite(value) or value <= 0:
            logger.warning(f"Rejected entry: invalid value {loggable(display_value)}")
            raise InvalidValueError()

        entry = CartEntry(
            id=str(next(self._ids)),
            name=name,
            unit_value=to_decimal(value),
            priority=normalized,
        )
        new_total = add(self._total, entry.unit_value)

        # Commit: nothing below may raise
        self._entries.append(entry)
        self._total = new_total

        logger.info(f"Added {loggable(name)} ({entry.unit_value}, {normalized.value}) as entry {entry.id}")
        return entry

    def update_quantity(self, entry_id: str, delta: int) -> bool:
        """
        Change an entry's quantity by delta, never below 1.

        Returns:
            False when no entry has this id
        """
        index = self._index_of(entry_id)
        if index is None:
            logger.debug(f"{ERROR_ENTRY_NOT_FOUND}: {loggable(entry_id)}")
            return False

        entry = self._entries[index]
        new_quantity = max(1, entry.quantity + delta)
        if new_quantity != entry.quantity:
            new_total = add(self._total, multiply(entry.unit_value, new_quantity - entry.quantity))
            updated = entry.with_quantity(new_quantity)
            self._entries[index] = updated
            self._total = new_total
            logger.debug(f"Entry {entry.id} quantity {entry.quantity} -> {new_quantity}")
        return True

    def delete_entry(self, entry_id: str) -> bool:
        """
        Remove an entry and retract its line total.

        Returns:
            False when no entry has this id
        """
        index = self._index_of(entry_id)
        if index is None:
            logger.debug(f"{ERROR_ENTRY_NOT_FOUND}: {loggable(entry_id)}")
            return False

        entry = self._entries[index]
        new_total = subtract(self._total, entry.line_total)
        del self._entries[index]
        self._total = new_total
        logger.info(f"Removed entry {entry.id} ({loggable(entry.name)})")
        return True

    def clear(self) -> None:
        """Drop all entries (session teardown)."""
        self._entries.clear()
        self._total = Decimal("0")

    def snapshot(self, lang: Optional[str] = None):
        """Build the CartSnapshot rendered by the presentation layer."""
        from shopcart.i18n import get_text
        from shopcart.models import CartEntryView, CartSnapshot

        items = []
        for entry in self._entries:
            unit_value = format_money(entry.unit_value)
            line_total = format_money(entry.line_total)
            items.append(CartEntryView(
                id=entry.id,
                name=entry.name,
                quantity=entry.quantity,
                priority=entry.priority,
                priority_label=get_text(f"priority.{entry.priority.value}", lang),
                color=entry.color,
                unit_value=unit_value,
                line_total=line_total,
                unit_value_label=get_text("unit_price", lang, amount=unit_value),
                line_total_label=get_text("line_total", lang, amount=line_total),
            ))

        total = format_money(self._total)
        return CartSnapshot(
            items=items,
            total=total,
            total_label=get_text("cart_total", lang, amount=total),
            total_items=self.total_items,
        )
