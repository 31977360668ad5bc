"""Entry point for the Table Tap Textual app."""

from __future__ import annotations

from tabletap.config import SESSION_ROLE
from tabletap.log import configure_logging
from tabletap.models import Role, Session
from tabletap.restaurant_app import RestaurantApp


def session_from_config(role: str = SESSION_ROLE) -> Session:
    """Build the session the identity provider would normally hand over."""
    if role == Role.OWNER.value:
        return Session(display_name="Owner", role=Role.OWNER)
    return Session()


def main() -> None:
    """Run the Textual application."""
    configure_logging()
    RestaurantApp(session=session_from_config()).run()


if __name__ == "__main__":
    main()
