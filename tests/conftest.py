"""Shared pytest fixtures for recordrules tests."""

import typing
import pytest
import pydantic

from recordrules import (
    fields_match,
    greater_or_equal_field,
    max_length,
    min_length,
    required,
    valid_email,
    with_empty,
)


class Address(pydantic.BaseModel):
    """Test model representing a postal address."""

    city: str
    zip_code: str | None = None


class Signup(pydantic.BaseModel):
    """Test model representing a signup form."""

    name: str
    email: str
    address: Address


@pytest.fixture
def signup_model() -> type[pydantic.BaseModel]:
    """Fixture providing the Signup Pydantic model."""
    return Signup


@pytest.fixture
def signup_rules() -> dict[str, typing.Any]:
    """Fixture providing a rules table for a signup form."""
    return {
        "name": [required(), min_length(2), max_length(20)],
        "email": [required(), with_empty(valid_email())],
        "address.city": required(),
        "password": [required(), min_length(8)],
        "confirm": fields_match("password", "confirm", "Passwords must match"),
        "age.max": greater_or_equal_field("age.min", "Max below min"),
    }


@pytest.fixture
def valid_signup() -> dict[str, typing.Any]:
    """Fixture providing a signup record that passes every rule."""
    return {
        "name": "Alice",
        "email": "alice@example.com",
        "address": {"city": "Oslo"},
        "password": "correct horse",
        "confirm": "correct horse",
        "age": {"min": 18, "max": 30},
    }


@pytest.fixture
def invalid_signup() -> dict[str, typing.Any]:
    """Fixture providing a signup record that breaks several rules."""
    return {
        "name": "A",
        "email": "not-an-email",
        "address": {"city": "   "},
        "password": "short",
        "confirm": "other",
        "age": {"min": 40, "max": "30"},
    }
