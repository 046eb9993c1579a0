"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: ``find_by_id`` returns
``None`` instead of raising, and the Service Layer decides how to
surface a missing entity.
"""

from __future__ import annotations

from typing import Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def find_by_id(self, id: int) -> Optional[Customer]:
        """Retrieve a customer by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return Customer.objects.filter(id=id).first()
        except (TypeError, ValueError, ValidationError):
            return None

    @transaction.atomic
    def save(self, entity: Customer) -> Customer:
        """Persist (create or update) a customer."""
        is_new = entity._state.adding
        entity.save()
        logger.info("customer.persisted", customer_id=entity.id, is_new=is_new)
        return entity

    @transaction.atomic
    def delete(self, entity: Customer) -> None:
        """Hard-delete a customer."""
        customer_id = entity.id
        entity.delete()
        logger.info("customer.removed", customer_id=customer_id)
