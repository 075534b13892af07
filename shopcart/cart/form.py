"""Input fields of the cart screen."""
from typing import Optional, Union

from shopcart.errors import CartValidationError
from shopcart.logging import get_logger
from shopcart.services.money import format_currency_input
from .constants import Priority, normalize_priority
from .models import CartEntry
from .service import CartLedger

logger = get_logger(__name__)


class ProductForm:
    """
    Name, price and priority fields feeding a CartLedger.

    The price field is reformatted on every change; a successful submit
    clears all fields, a rejected one keeps them and sets `alert`.
    """

    def __init__(self, ledger: CartLedger, lang: Optional[str] = None):
        self.ledger = ledger
        self.lang = lang
        self.name = ""
        self.value = ""
        self.priority: Optional[Priority] = None
        self.alert = None

    def set_name(self, text: str) -> None:
        self.name = text or ""

    def set_value(self, raw_text: str) -> None:
        """Store the live-formatted price."""
        self.value = format_currency_input(raw_text)

    def select_priority(self, priority: Union[Priority, str, None]) -> None:
        self.priority = normalize_priority(priority)

    def reset(self) -> None:
        self.name = ""
        self.value = ""
        self.priority = None

    def submit(self) -> Optional[CartEntry]:
        """
        Add the product described by the fields.

        Returns:
            The created entry, or None when the ledger rejected the input
            (the reason is in `alert`)
        """
        from shopcart.i18n import get_text
        from shopcart.models import FormAlert

        try:
            entry = self.ledger.add_entry(self.name, self.value, self.priority)
        except CartValidationError as e:
            logger.info(f"Form submit rejected: {e.code}")
            self.alert = FormAlert(
                title=get_text("errors.title", self.lang),
                message=get_text(e.message_key, self.lang),
                code=e.code,
            )
            return None

        self.alert = None
        self.reset()
        return entry
