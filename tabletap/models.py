"""Domain models for Table Tap."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum


class OrderType(str, Enum):
    PICKUP = "pickup"
    DELIVERY = "delivery"

    @property
    def label(self) -> str:
        return self.value.title()


class OrderStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class ReservationStatus(str, Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"


class Role(str, Enum):
    CUSTOMER = "customer"
    OWNER = "owner"


@dataclass(frozen=True)
class MenuItem:
    """A menu item supplied by the catalog."""

    id: str
    name: str
    description: str
    price: Decimal
    image_ref: str = ""

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"price must be non-negative, got {self.price}")


@dataclass(frozen=True)
class MenuCategory:
    id: str
    name: str
    items: tuple[MenuItem, ...]


@dataclass(frozen=True)
class CustomizationOption:
    id: str
    name: str
    price: Decimal = Decimal("0.00")

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"price must be non-negative, got {self.price}")


@dataclass
class Customization:
    """A named choice group with at most one selected option."""

    id: str
    name: str
    options: list[CustomizationOption]
    selected_option: CustomizationOption | None = None

    @property
    def price(self) -> Decimal:
        if self.selected_option is None:
            return Decimal("0.00")
        return self.selected_option.price

    def select(self, option_id: str | None) -> None:
        """Select an option by id, or clear the selection with None."""
        if option_id is None:
            self.selected_option = None
            return
        for option in self.options:
            if option.id == option_id:
                self.selected_option = option
                return
        raise ValueError(f"unknown option {option_id!r} for customization {self.id!r}")

    def cycle(self) -> None:
        """Step to the next option, wrapping through "no selection"."""
        if self.selected_option is None:
            self.selected_option = self.options[0] if self.options else None
            return
        idx = self.options.index(self.selected_option)
        self.selected_option = self.options[idx + 1] if idx + 1 < len(self.options) else None


@dataclass
class OrderItem:
    """One cart line created by a single add-to-cart action."""

    id: str
    menu_item: MenuItem
    quantity: int
    customizations: list[Customization] = field(default_factory=list)
    special_instructions: str = ""


@dataclass
class CheckoutForm:
    """Transient customer and delivery data for one checkout attempt."""

    customer_name: str = ""
    customer_phone: str = ""
    customer_email: str = ""
    delivery_address: str = ""
    delivery_instructions: str = ""
    pickup_time: datetime = field(default_factory=datetime.now)
    order_type: OrderType = OrderType.PICKUP


def _noon() -> time:
    return time(12, 0)


@dataclass
class ReservationRequest:
    name: str = ""
    email: str = ""
    phone_number: str = ""
    date: date = field(default_factory=date.today)
    time: time = field(default_factory=_noon)
    party_size: int = 2
    special_requests: str = ""


@dataclass(frozen=True)
class Reservation:
    """A reservation accepted by the restaurant."""

    id: str
    name: str
    email: str
    phone_number: str
    starts_at: datetime
    party_size: int
    special_requests: str
    status: ReservationStatus = ReservationStatus.PENDING
    table_number: int | None = None

    @property
    def is_active(self) -> bool:
        return self.status in (ReservationStatus.PENDING, ReservationStatus.CONFIRMED)


@dataclass
class PlacedOrder:
    """A row on the owner order board."""

    id: str
    order_type: OrderType
    customer_name: str
    item_count: int
    total: Decimal
    status: OrderStatus = OrderStatus.PENDING
    placed_at: str = ""


@dataclass(frozen=True)
class Session:
    """Identity handed over by the external identity provider."""

    display_name: str = "Guest"
    email: str = ""
    role: Role = Role.CUSTOMER

    @property
    def is_owner(self) -> bool:
        return self.role is Role.OWNER
