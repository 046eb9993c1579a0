import decimal

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Customer",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("first_name", models.CharField(max_length=100)),
                ("last_name", models.CharField(max_length=100)),
                ("cpf", models.CharField(max_length=11, unique=True)),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("password", models.CharField(max_length=128)),
                (
                    "income",
                    models.DecimalField(
                        decimal_places=2, default=decimal.Decimal("0"), max_digits=12
                    ),
                ),
                (
                    "zip_code",
                    models.CharField(blank=True, default="", max_length=8),
                ),
                (
                    "street",
                    models.CharField(blank=True, default="", max_length=255),
                ),
            ],
            options={
                "db_table": "customers",
                "ordering": ["id"],
            },
        ),
    ]
