"""Customer entity and its embedded Address value.

The address is owned by value: it is stored in the ``customers`` row
(``zip_code`` / ``street``) and handed out as an immutable ``Address``.
Sensitive data (CPF) is masked in ``__str__`` so it never reaches logs.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from django.db import models

from modules.core.models import BaseModel


@dataclass(frozen=True)
class Address:
    """Postal address embedded in a customer."""

    zip_code: str = ""
    street: str = ""


class Customer(BaseModel):
    """Credit applicant.

    ``cpf`` and ``email`` are globally unique.  ``address`` is a
    property, so ``Customer(address=Address(...))`` works at construction.
    """

    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    cpf = models.CharField(max_length=11, unique=True)
    email = models.EmailField(max_length=254, unique=True)
    password = models.CharField(max_length=128)
    income = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0")
    )
    zip_code = models.CharField(max_length=8, blank=True, default="")
    street = models.CharField(max_length=255, blank=True, default="")

    class Meta:
        db_table = "customers"
        ordering = ["id"]

    @property
    def address(self) -> Address:
        return Address(zip_code=self.zip_code, street=self.street)

    @address.setter
    def address(self, value: Address) -> None:
        self.zip_code = value.zip_code
        self.street = value.street

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:
        suffix = self.cpf[-4:] if len(self.cpf) > 4 else "????"
        return f"{self.full_name} (CPF: ***{suffix})"
