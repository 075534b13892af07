"""
Cart errors.

Message constants are English and meant for logs and exception text;
user-facing text is looked up in shopcart.i18n by message_key.
"""

# Validation errors
ERROR_MISSING_FIELD = "Name, value and priority are required"
ERROR_INVALID_VALUE = "Value must be a number greater than zero"

# Lookup errors (not raised, reported by return value)
ERROR_ENTRY_NOT_FOUND = "Cart entry not found"


class CartValidationError(ValueError):
    """Input rejected by the cart; the cart was left unchanged."""

    def __init__(self, message: str, code: str, message_key: str) -> None:
        super().__init__(message)
        self.code = code
        self.message_key = message_key


class MissingFieldError(CartValidationError):
    """A required input was empty."""

    def __init__(self, message: str = ERROR_MISSING_FIELD, field: str | None = None) -> None:
        super().__init__(message, code="MISSING_FIELD", message_key="errors.missing_field")
        self.field = field


class InvalidValueError(CartValidationError):
    """Parsed price was not a number or not above zero."""

    def __init__(self, message: str = ERROR_INVALID_VALUE) -> None:
        super().__init__(message, code="INVALID_VALUE", message_key="errors.invalid_value")
