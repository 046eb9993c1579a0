"""Shared fixtures for the customer unit tests."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

import pytest

from modules.customers.models import Address, Customer
from modules.customers.repositories.interfaces import ICustomerRepository


class FakeCustomerRepository(ICustomerRepository):
    """In-memory customer repository for testing.

    Stores customers by id and records every call, in order, so tests can
    assert how many times (and in which sequence) each operation ran.
    """

    def __init__(self, *customers: Customer) -> None:
        self.customers: dict[int, Customer] = {c.id: c for c in customers}
        self.calls: list[tuple[str, object]] = []

    def find_by_id(self, id: int) -> Optional[Customer]:
        self.calls.append(("find_by_id", id))
        return self.customers.get(id)

    def save(self, entity: Customer) -> Customer:
        self.calls.append(("save", entity))
        self.customers[entity.id] = entity
        return entity

    def delete(self, entity: Customer) -> None:
        self.calls.append(("delete", entity))
        self.customers.pop(entity.id, None)

    def count(self, operation: str) -> int:
        return sum(1 for name, _ in self.calls if name == operation)


def build_customer(
    first_name: str = "Elio",
    last_name: str = "Fernandes",
    cpf: str = "123456789",
    email: str = "elio@test.com",
    password: str = "12345",
    zip_code: str = "76900000",
    street: str = "Rua Teste",
    income: Decimal = Decimal("1000.0"),
    id: Optional[int] = 1,
) -> Customer:
    """Build an unsaved customer with sane defaults."""
    return Customer(
        first_name=first_name,
        last_name=last_name,
        cpf=cpf,
        email=email,
        password=password,
        address=Address(zip_code=zip_code, street=street),
        income=income,
        id=id,
    )


@pytest.fixture()
def customer_factory():
    return build_customer


@pytest.fixture()
def fake_repo() -> FakeCustomerRepository:
    return FakeCustomerRepository()


@pytest.fixture()
def fake_repo_factory():
    return FakeCustomerRepository
