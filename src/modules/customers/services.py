"""Customer service layer (Use Cases).

Orchestrates the Customer use-cases, delegating persistence to the
injected ``ICustomerRepository``.

Business rules enforced here:
- A customer that cannot be found raises ``BusinessException``
  with the message ``"Id {id} not found"``.
- Deleting an unknown customer has no side effects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from django.db import transaction

from modules.core.exceptions import BusinessException

if TYPE_CHECKING:
    from modules.customers.models import Customer
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def save(self, customer: Customer) -> Customer:
        """Persist a customer and return the repository's instance."""
        saved = self._repo.save(customer)
        logger.info("customer.saved", customer_id=saved.id)
        return saved

    @transaction.atomic
    def delete(self, id: int) -> None:
        """Delete a customer by id.

        Raises:
            BusinessException: if the customer does not exist; the
                repository's ``delete`` is not called in that case.
        """
        customer = self.find_by_id(id)
        self._repo.delete(customer)
        logger.info("customer.deleted", customer_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_by_id(self, id: int) -> Customer:
        """Retrieve a single customer by id.

        Raises:
            BusinessException: if the customer does not exist.
        """
        customer = self._repo.find_by_id(id)
        if customer is None:
            logger.warning("customer.not_found", customer_id=id)
            raise BusinessException(f"Id {id} not found")
        logger.info("customer.retrieved", customer_id=id)
        return customer
