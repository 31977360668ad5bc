"""Editable static restaurant, menu and sample order configuration."""

from __future__ import annotations

RESTAURANT_NAME = "Table Tap"
RESTAURANT_TAGLINE = "Fine Dining & Culinary Excellence"
RESTAURANT_PHONE = "(555) 123-4567"
RESTAURANT_EMAIL = "info@tabletap.com"
RESTAURANT_ADDRESS = "123 Main Street, Anytown, CA 94000"

# Monday first.
BUSINESS_HOURS: list[tuple[str, str]] = [
    ("Monday", "11:00 AM - 9:00 PM"),
    ("Tuesday", "11:00 AM - 9:00 PM"),
    ("Wednesday", "11:00 AM - 9:00 PM"),
    ("Thursday", "11:00 AM - 10:00 PM"),
    ("Friday", "11:00 AM - 11:00 PM"),
    ("Saturday", "10:00 AM - 11:00 PM"),
    ("Sunday", "10:00 AM - 9:00 PM"),
]

# Prices are strings so they load into Decimal without float drift.
MENU_CATEGORIES_RAW: list[dict[str, object]] = [
    {
        "id": "appetizers",
        "name": "Appetizers",
        "items": [
            {
                "id": "mozzarella_sticks",
                "name": "Mozzarella Sticks",
                "description": "Crispy, golden-brown mozzarella sticks served with marinara sauce.",
                "price": "8.99",
                "image": "mozzarella_sticks",
            },
            {
                "id": "spinach_dip",
                "name": "Spinach Artichoke Dip",
                "description": "Creamy spinach and artichoke dip served with tortilla chips.",
                "price": "9.99",
                "image": "spinach_dip",
            },
        ],
    },
    {
        "id": "mains",
        "name": "Main Courses",
        "items": [
            {
                "id": "classic_burger",
                "name": "Classic Burger",
                "description": "Juicy beef patty with lettuce, tomato, and special sauce on a brioche bun.",
                "price": "12.99",
                "image": "burger",
            },
            {
                "id": "margherita_pizza",
                "name": "Margherita Pizza",
                "description": "Traditional pizza with tomato sauce, fresh mozzarella, and basil.",
                "price": "14.99",
                "image": "pizza",
            },
        ],
    },
    {
        "id": "desserts",
        "name": "Desserts",
        "items": [
            {
                "id": "chocolate_cake",
                "name": "Chocolate Cake",
                "description": "Rich, moist chocolate cake with a velvety ganache.",
                "price": "6.99",
                "image": "chocolate_cake",
            },
            {
                "id": "cheesecake",
                "name": "Cheesecake",
                "description": "Creamy New York-style cheesecake with a graham cracker crust.",
                "price": "7.99",
                "image": "cheesecake",
            },
        ],
    },
]

CUSTOMIZATION_GROUPS: dict[str, dict[str, object]] = {
    "dip": {
        "name": "Dipping Sauce",
        "options": [("marinara", "Marinara", "0.00"), ("ranch", "Ranch", "0.50"), ("garlic_aioli", "Garlic Aioli", "0.75")],
    },
    "doneness": {
        "name": "Doneness",
        "options": [("medium_rare", "Medium Rare", "0.00"), ("medium", "Medium", "0.00"), ("well_done", "Well Done", "0.00")],
    },
    "burger_extras": {
        "name": "Extras",
        "options": [("bacon", "Bacon", "1.50"), ("avocado", "Avocado", "1.25"), ("extra_cheese", "Extra Cheese", "0.75")],
    },
    "pizza_size": {
        "name": "Size",
        "options": [("small", "Small 10\"", "0.00"), ("medium", "Medium 12\"", "2.00"), ("large", "Large 14\"", "4.00")],
    },
    "crust": {
        "name": "Crust",
        "options": [("classic", "Classic", "0.00"), ("thin", "Thin", "0.00"), ("gluten_free", "Gluten Free", "2.50")],
    },
    "dessert_topping": {
        "name": "Topping",
        "options": [("whipped_cream", "Whipped Cream", "0.50"), ("berries", "Fresh Berries", "1.50"), ("ice_cream", "Vanilla Ice Cream", "2.00")],
    },
}

CUSTOMIZATIONS_BY_ITEM: dict[str, list[str]] = {
    "mozzarella_sticks": ["dip"],
    "spinach_dip": [],
    "classic_burger": ["doneness", "burger_extras"],
    "margherita_pizza": ["pizza_size", "crust"],
    "chocolate_cake": ["dessert_topping"],
    "cheesecake": ["dessert_topping"],
}

# Sample rows shown on the owner order board before any order is placed.
SAMPLE_ORDERS_RAW: list[dict[str, object]] = [
    {"id": "1234", "type": "delivery", "customer": "John Smith", "items": 3, "total": "42.95", "status": "Pending", "time": "12:15"},
    {"id": "1235", "type": "pickup", "customer": "Sarah Johnson", "items": 2, "total": "28.50", "status": "In Progress", "time": "12:30"},
    {"id": "1236", "type": "delivery", "customer": "David Lee", "items": 4, "total": "53.80", "status": "Completed", "time": "11:45"},
    {"id": "1237", "type": "pickup", "customer": "Emily Chen", "items": 1, "total": "15.99", "status": "Pending", "time": "13:00"},
    {"id": "1238", "type": "delivery", "customer": "Michael Brown", "items": 5, "total": "67.25", "status": "In Progress", "time": "13:15"},
]

# Sample bookings for the owner table screen. "day" is an offset from today.
SAMPLE_RESERVATIONS_RAW: list[dict[str, object]] = [
    {"day": 0, "time": "17:30", "name": "Smith Party", "party": 4, "table": 3, "requests": "Window seat", "status": "Confirmed"},
    {"day": 0, "time": "18:00", "name": "Johnson Party", "party": 2, "table": 7, "requests": "", "status": "Confirmed"},
    {"day": 0, "time": "19:15", "name": "Williams Party", "party": 6, "table": 11, "requests": "Birthday cake at 8", "status": "Confirmed"},
    {"day": 0, "time": "20:30", "name": "Brown Party", "party": 3, "table": 5, "requests": "", "status": "Pending"},
    {"day": 1, "time": "18:45", "name": "Jones Party", "party": 8, "table": 12, "requests": "High chair", "status": "Confirmed"},
    {"day": 2, "time": "19:00", "name": "Miller Party", "party": 2, "table": 1, "requests": "", "status": "Confirmed"},
    {"day": 4, "time": "21:00", "name": "Davis Party", "party": 5, "table": 9, "requests": "Gluten free", "status": "Cancelled"},
]
