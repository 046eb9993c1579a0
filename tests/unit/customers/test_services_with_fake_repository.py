"""CustomerService scenarios against the in-memory repository."""

from __future__ import annotations

import pytest

from modules.core.exceptions import BusinessException
from modules.customers.services import CustomerService

pytestmark = pytest.mark.unit


class TestPopulatedRepository:
    def test_find_by_id_returns_stored_customer(
        self, customer_factory, fake_repo_factory
    ):
        elio = customer_factory(id=1)
        repo = fake_repo_factory(elio)
        service = CustomerService(repository=repo)

        actual = service.find_by_id(1)

        assert actual is elio
        assert actual.full_name == "Elio Fernandes"
        assert actual.cpf == "123456789"

    def test_find_by_id_returns_each_stored_customer(
        self, customer_factory, fake_repo_factory
    ):
        customers = [
            customer_factory(id=i, cpf=f"0000000000{i}", email=f"c{i}@test.com")
            for i in range(1, 5)
        ]
        service = CustomerService(repository=fake_repo_factory(*customers))

        for customer in customers:
            assert service.find_by_id(customer.id) is customer

    def test_delete_calls_find_then_delete_once(
        self, customer_factory, fake_repo_factory
    ):
        elio = customer_factory(id=1)
        repo = fake_repo_factory(elio)
        service = CustomerService(repository=repo)

        service.delete(1)

        assert repo.calls == [("find_by_id", 1), ("delete", elio)]
        assert 1 not in repo.customers

    def test_deleted_customer_is_no_longer_found(
        self, customer_factory, fake_repo_factory
    ):
        repo = fake_repo_factory(customer_factory(id=1))
        service = CustomerService(repository=repo)

        service.delete(1)

        with pytest.raises(BusinessException, match="^Id 1 not found$"):
            service.find_by_id(1)


class TestEmptyRepository:
    def test_find_by_id_raises(self, fake_repo):
        service = CustomerService(repository=fake_repo)

        with pytest.raises(BusinessException) as exc_info:
            service.find_by_id(42)

        assert str(exc_info.value) == "Id 42 not found"
        assert fake_repo.count("find_by_id") == 1

    def test_delete_raises_without_deleting(self, fake_repo):
        service = CustomerService(repository=fake_repo)

        with pytest.raises(BusinessException, match="^Id 42 not found$"):
            service.delete(42)

        assert fake_repo.calls == [("find_by_id", 42)]
        assert fake_repo.count("delete") == 0

    def test_save_stores_and_returns_same_instance(self, fake_repo, customer_factory):
        service = CustomerService(repository=fake_repo)
        customer = customer_factory(id=3)

        assert service.save(customer) is customer
        assert fake_repo.calls == [("save", customer)]
        assert service.find_by_id(3) is customer
