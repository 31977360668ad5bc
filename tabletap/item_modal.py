"""Item detail modal: quantity, customizations and special instructions."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

from rich.text import Text
from textual.widgets import Static

from tabletap.cart import clamp_quantity
from tabletap.data import customizations_for_item
from tabletap.form_modal import ACTION, STEPPER, TEXT, FormModal, FormRow
from tabletap.models import Customization, MenuItem
from tabletap.pricing import ZERO, format_money

AddCallback = Callable[[MenuItem, int, list[Customization], str], None]

_QUANTITY = "quantity"
_INSTRUCTIONS = "instructions"
_ADD = "add"
_CUSTOM_PREFIX = "custom:"


class ItemDetailModal(FormModal[None]):
    """Configure one menu item before it goes into the cart."""

    HELP_TEXT = "↑/↓ move, ←/→ change, type instructions, Enter add, Esc cancel"

    def __init__(self, item: MenuItem, on_add: AddCallback) -> None:
        super().__init__()
        self.item = item
        self.on_add = on_add
        self.quantity = 1
        self.special_instructions = ""
        self.customizations = customizations_for_item(item.id)

    def on_mount(self) -> None:
        self.query_one("#form-title", Static).update(Text(f"{self.item.name}  {format_money(self.item.price)}"))

    def rows(self) -> list[FormRow]:
        rows = [FormRow(_QUANTITY, "Quantity", STEPPER)]
        rows.extend(FormRow(f"{_CUSTOM_PREFIX}{c.id}", c.name, STEPPER) for c in self.customizations)
        rows.append(FormRow(_INSTRUCTIONS, "Special instructions", TEXT))
        rows.append(FormRow(_ADD, f"Add to Order - {format_money(self.line_price())}", ACTION))
        return rows

    def line_price(self) -> Decimal:
        unit = self.item.price + sum((c.price for c in self.customizations), ZERO)
        return unit * self.quantity

    def get_text(self, key: str) -> str:
        return self.special_instructions

    def set_text(self, key: str, value: str) -> None:
        self.special_instructions = value

    def display_value(self, key: str) -> str:
        if key == _QUANTITY:
            return str(self.quantity)
        customization = self._customization(key)
        if customization is not None:
            option = customization.selected_option
            if option is None:
                return "None"
            if option.price:
                return f"{option.name} (+{format_money(option.price)})"
            return option.name
        return self.special_instructions

    def step(self, key: str, delta: int) -> None:
        if key == _QUANTITY:
            self.quantity = clamp_quantity(self.quantity + delta)
            return
        customization = self._customization(key)
        if customization is None:
            return
        if delta > 0:
            customization.cycle()
        else:
            # Walking backwards is cycling forward through the remaining states.
            for _ in range(len(customization.options)):
                customization.cycle()

    def activate(self, key: str) -> None:
        if key != _ADD:
            return
        self.on_add(self.item, self.quantity, self.customizations, self.special_instructions)
        self.dismiss(None)

    def summary(self) -> Text:
        return Text(self.item.description, style="dim")

    def _customization(self, key: str) -> Customization | None:
        if not key.startswith(_CUSTOM_PREFIX):
            return None
        custom_id = key[len(_CUSTOM_PREFIX) :]
        for customization in self.customizations:
            if customization.id == custom_id:
                return customization
        return None
