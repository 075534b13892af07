"""Priority enum, display colors, and aliases."""
from enum import Enum
from typing import Optional, Union


class Priority(str, Enum):
    """
    Urgency tag attached to a cart entry.

    Display colors are kept in the maps below, not in the enum.
    """
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# Tag color shown as the entry's border marker
PRIORITY_COLORS: dict[Priority, str] = {
    Priority.HIGH: "red",
    Priority.MEDIUM: "yellow",
    Priority.LOW: "green",
}

# Background of the priority selector buttons
PRIORITY_SWATCHES: dict[Priority, str] = {
    Priority.HIGH: "red",
    Priority.MEDIUM: "#FFC107",
    Priority.LOW: "green",
}

# Priority aliases (input -> canonical)
PRIORITY_ALIASES: dict[str, Priority] = {
    "high": Priority.HIGH,
    "medium": Priority.MEDIUM,
    "low": Priority.LOW,
    # color tags
    "red": Priority.HIGH,
    "yellow": Priority.MEDIUM,
    "green": Priority.LOW,
    # selector labels
    "alta": Priority.HIGH,
    "média": Priority.MEDIUM,
    "media": Priority.MEDIUM,
    "baixa": Priority.LOW,
}


def normalize_priority(priority: Union[Priority, str, None]) -> Optional[Priority]:
    """
    Normalize a priority given as enum, value, name, color or label.

    Example:
        normalize_priority("green") -> Priority.LOW
        normalize_priority("HIGH") -> Priority.HIGH
        normalize_priority("purple") -> None
    """
    if isinstance(priority, Priority):
        return priority
    if not priority or not isinstance(priority, str):
        return None
    return PRIORITY_ALIASES.get(priority.strip().lower())
