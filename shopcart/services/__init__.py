# Services Module
from .money import format_currency_input, format_money, parse_currency_display

__all__ = ["format_currency_input", "format_money", "parse_currency_display"]
