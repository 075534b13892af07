"""
shopcart

Single-screen shopping cart logic:
- cart: entries, running total, input form
- services.money: BRL formatting and parsing
- models: Pydantic views for the presentation layer
- i18n: user-facing text (pt, en)
"""

__version__ = "0.1.0"
