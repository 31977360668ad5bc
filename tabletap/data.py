"""Static catalog data wrapped into domain models."""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, time, timedelta
from decimal import Decimal

from tabletap.constant import (
    BUSINESS_HOURS,
    CUSTOMIZATION_GROUPS,
    CUSTOMIZATIONS_BY_ITEM,
    MENU_CATEGORIES_RAW,
    SAMPLE_ORDERS_RAW,
    SAMPLE_RESERVATIONS_RAW,
)
from tabletap.models import (
    Customization,
    CustomizationOption,
    MenuCategory,
    MenuItem,
    OrderStatus,
    OrderType,
    PlacedOrder,
    Reservation,
    ReservationStatus,
)


def _build_item(raw: dict[str, object]) -> MenuItem:
    return MenuItem(
        id=str(raw["id"]),
        name=str(raw["name"]),
        description=str(raw["description"]),
        price=Decimal(str(raw["price"])),
        image_ref=str(raw.get("image", "")),
    )


MENU_CATEGORIES: list[MenuCategory] = [
    MenuCategory(
        id=str(raw["id"]),
        name=str(raw["name"]),
        items=tuple(_build_item(item) for item in raw["items"]),  # type: ignore[union-attr]
    )
    for raw in MENU_CATEGORIES_RAW
]

MENU_ITEMS_BY_ID: dict[str, MenuItem] = {
    item.id: item for category in MENU_CATEGORIES for item in category.items
}

_CUSTOMIZATION_TEMPLATES: dict[str, Customization] = {
    group_id: Customization(
        id=group_id,
        name=str(group["name"]),
        options=[
            CustomizationOption(id=option_id, name=name, price=Decimal(price))
            for option_id, name, price in group["options"]  # type: ignore[union-attr]
        ],
    )
    for group_id, group in CUSTOMIZATION_GROUPS.items()
}


def menu_item_by_id(item_id: str) -> MenuItem | None:
    return MENU_ITEMS_BY_ID.get(item_id)


def customizations_for_item(item_id: str) -> list[Customization]:
    """Return fresh, unselected customization groups for a menu item."""
    return [
        replace(_CUSTOMIZATION_TEMPLATES[group_id], options=list(_CUSTOMIZATION_TEMPLATES[group_id].options))
        for group_id in CUSTOMIZATIONS_BY_ITEM.get(item_id, [])
        if group_id in _CUSTOMIZATION_TEMPLATES
    ]


def search_menu(query: str, categories: list[MenuCategory] | None = None) -> list[MenuItem]:
    """Case-insensitive substring search over item names."""
    source = MENU_CATEGORIES if categories is None else categories
    items = [item for category in source for item in category.items]
    if not query:
        return items
    q = query.lower()
    return [item for item in items if q in item.name.lower()]


def hours_for(day: date) -> str:
    """Opening hours for the weekday of ``day``."""
    if len(BUSINESS_HOURS) < 7:
        return "Closed"
    return BUSINESS_HOURS[day.weekday()][1]


def sample_orders() -> list[PlacedOrder]:
    return [
        PlacedOrder(
            id=str(raw["id"]),
            order_type=OrderType(str(raw["type"])),
            customer_name=str(raw["customer"]),
            item_count=int(raw["items"]),  # type: ignore[arg-type]
            total=Decimal(str(raw["total"])),
            status=OrderStatus(str(raw["status"])),
            placed_at=str(raw["time"]),
        )
        for raw in SAMPLE_ORDERS_RAW
    ]


def sample_reservations(today: date | None = None) -> list[Reservation]:
    """Seed bookings placed relative to ``today``."""
    today = today or date.today()
    reservations = []
    for idx, raw in enumerate(SAMPLE_RESERVATIONS_RAW):
        day = today + timedelta(days=int(raw["day"]))  # type: ignore[arg-type]
        reservations.append(
            Reservation(
                id=f"sample-{idx + 1}",
                name=str(raw["name"]),
                email="",
                phone_number="",
                starts_at=datetime.combine(day, time.fromisoformat(str(raw["time"]))),
                party_size=int(raw["party"]),  # type: ignore[arg-type]
                special_requests=str(raw["requests"]),
                status=ReservationStatus(str(raw["status"])),
                table_number=int(raw["table"]),  # type: ignore[arg-type]
            )
        )
    return reservations
