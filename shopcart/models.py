"""
Pydantic Models - Data Schemas for the presentation layer

Everything the screen renders comes from these models; amounts are
already formatted for display.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from shopcart.cart.constants import Priority


# ============================================================
# Cart
# ============================================================

class CartEntryView(BaseModel):
    """One rendered cart line."""
    id: str = Field(description="Entry id, stable while the entry exists")
    name: str = Field(description="Product name")
    quantity: int = Field(description="Units in the cart", ge=1)
    priority: Priority = Field(description="Urgency tag")
    priority_label: str = Field(description="Translated priority label")
    color: str = Field(description="Marker color for the priority")
    unit_value: str = Field(description="Formatted price per unit")
    line_total: str = Field(description="Formatted unit_value * quantity")
    unit_value_label: str = Field(default="", description='e.g. "Unitário: R$ 5,00"')
    line_total_label: str = Field(default="", description='e.g. "Total: R$ 15,00"')


class CartSnapshot(BaseModel):
    """Rendered state of the whole cart."""
    items: List[CartEntryView] = Field(default_factory=list)
    total: str = Field(description="Formatted running total")
    total_label: str = Field(default="", description='e.g. "Total: R$ 15,00"')
    total_items: int = Field(default=0, ge=0, description="Sum of quantities")

    @property
    def is_empty(self) -> bool:
        return not self.items


# ============================================================
# Form
# ============================================================

class FormAlert(BaseModel):
    """Blocking message shown when a product could not be added."""
    title: str
    message: str
    code: Optional[str] = None
