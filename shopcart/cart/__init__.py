"""Cart package: models, ledger, and input form."""
from shopcart.services.money import format_currency_input, parse_currency_display
from .constants import Priority, PRIORITY_COLORS, PRIORITY_SWATCHES, normalize_priority
from .models import CartEntry
from .service import CartLedger
from .form import ProductForm

__all__ = [
    "CartEntry",
    "CartLedger",
    "Priority",
    "PRIORITY_COLORS",
    "PRIORITY_SWATCHES",
    "ProductForm",
    "format_currency_input",
    "normalize_priority",
    "parse_currency_display",
]
