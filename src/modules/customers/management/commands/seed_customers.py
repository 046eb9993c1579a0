from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db.models import Q

from modules.customers.models import Address, Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import CustomerService

SEED_CUSTOMERS = [
    ("Ana", "Souza", "39053344705", "ana@example.com", "01310100", "Av. Paulista", "4500.00"),
    ("Bruno", "Lima", "98765432100", "bruno@example.com", "20040002", "Rua da Assembleia", "3200.00"),
    ("Carla", "Mendes", "74125896300", "carla@example.com", "30130010", "Av. Afonso Pena", "7800.00"),
    ("Daniel", "Costa", "36925814700", "daniel@example.com", "40020000", "Rua Chile", "2100.00"),
    ("Elio", "Fernandes", "25814736900", "elio@example.com", "76900000", "Rua Teste", "1000.00"),
]


class Command(BaseCommand):
    help = "Seed database with demo credit applicants."

    def handle(self, *args, **options):
        self.stdout.write("Creating customers...")
        service = CustomerService(repository=CustomerDjangoRepository())

        created = 0
        for first_name, last_name, cpf, email, zip_code, street, income in SEED_CUSTOMERS:
            if Customer.objects.filter(Q(cpf=cpf) | Q(email=email)).exists():
                continue
            service.save(
                Customer(
                    first_name=first_name,
                    last_name=last_name,
                    cpf=cpf,
                    email=email,
                    password="seed12345",
                    income=Decimal(income),
                    address=Address(zip_code=zip_code, street=street),
                )
            )
            created += 1

        self.stdout.write(self.style.SUCCESS(f"Seed completed: customers={created}"))
