"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the catalog's validation rules
(name and category patterns, description length, two-decimal prices) and
match the field names expected by the API's Pydantic request schemas.
"""

import random
import uuid

from faker import Faker

fake = Faker()

CATEGORIES = ["Tools", "Hardware", "Garden", "Home Office", "Arts-Crafts", "Kitchen"]


def product_name() -> str:
    """Unique name within the allowed alphabet: letters, digits, spaces, - _ ."""
    word = fake.word().capitalize()
    return f"{word} {uuid.uuid4().hex[:8].upper()}"


def product_description() -> str:
    """Between 10 and 500 characters."""
    return fake.sentence(nb_words=12)[:500].ljust(10, ".")


def product_price(low: float = 1.0, high: float = 500.0) -> float:
    return round(random.uniform(low, high), 2)


def stock_quantity() -> int:
    """Quantities spread across every stock band, empty shelves included."""
    band = random.choice([(0, 0), (1, 4), (5, 9), (10, 50), (51, 500)])
    return random.randint(*band)


def product_data() -> dict:
    """Generate CreateProductRequest payload matching schema field names."""
    return {
        "name": product_name(),
        "description": product_description(),
        "price": product_price(),
        "quantity": stock_quantity(),
        "category": random.choice(CATEGORIES),
    }


def replacement_data(name: str) -> dict:
    """Full UpdateProductRequest payload keeping the product's name."""
    payload = product_data()
    payload["name"] = name
    return payload


def search_fragment() -> str:
    return fake.word()[:3]
