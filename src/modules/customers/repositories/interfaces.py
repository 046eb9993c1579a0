"""Customer repository interface.

Narrows ``IRepository[Customer]`` to the persistence boundary the
``CustomerService`` consumes: ``save``, ``find_by_id`` and ``delete``.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer entity."""

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[Customer]:
        """Retrieve a customer by id; ``None`` when no such customer exists."""

    @abstractmethod
    def save(self, entity: Customer) -> Customer:
        """Persist a customer and return the persisted instance."""

    @abstractmethod
    def delete(self, entity: Customer) -> None:
        """Remove a customer."""
