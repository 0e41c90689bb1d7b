from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("company", "0001_initial"),
        ("customer", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="ClientLoan",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, null=True, blank=True)),
                ("modified_at", models.DateTimeField(auto_now=True, null=True, blank=True)),
                ("company", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="+", to="company.company")),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("modified_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("client_name", models.CharField(max_length=150)),
                ("loan_amount", models.DecimalField(decimal_places=2, max_digits=14)),
                ("currency", models.CharField(default="USD", max_length=3)),
                ("amount_base", models.DecimalField(decimal_places=4, default=0, max_digits=16)),
                ("description", models.TextField(blank=True, default="")),
                ("due_date", models.DateField(blank=True, null=True)),
                ("date", models.DateTimeField(default=django.utils.timezone.now)),
                ("client", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="loans", to="customer.client")),
            ],
            options={
                "ordering": ["-date"],
            },
        ),
        migrations.CreateModel(
            name="ClientPayment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, null=True, blank=True)),
                ("modified_at", models.DateTimeField(auto_now=True, null=True, blank=True)),
                ("company", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="+", to="company.company")),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("modified_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("amount", models.DecimalField(decimal_places=4, max_digits=16)),
                ("method", models.CharField(choices=[("Cash", "Cash"), ("Bank", "Bank"), ("Other", "Other")], default="Cash", max_length=10)),
                ("reference", models.CharField(blank=True, default="", max_length=100)),
                ("payment_date", models.DateTimeField(default=django.utils.timezone.now)),
                ("client", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="payments", to="customer.client")),
            ],
            options={
                "ordering": ["-payment_date"],
            },
        ),
        migrations.CreateModel(
            name="ClientTransaction",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, null=True, blank=True)),
                ("modified_at", models.DateTimeField(auto_now=True, null=True, blank=True)),
                ("company", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="+", to="company.company")),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("modified_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("type", models.CharField(choices=[("Loan", "Loan"), ("Payment", "Payment")], max_length=10)),
                ("amount", models.DecimalField(decimal_places=4, max_digits=16)),
                ("related_id", models.PositiveIntegerField(blank=True, null=True)),
                ("related_type", models.CharField(blank=True, choices=[("loan", "Loan"), ("payment", "Payment"), ("sale", "Sale")], default="", max_length=10)),
                ("description", models.CharField(blank=True, default="", max_length=255)),
                ("date", models.DateTimeField(default=django.utils.timezone.now)),
                ("client", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="transactions", to="customer.client")),
            ],
            options={
                "ordering": ["-date"],
                "indexes": [models.Index(fields=["company", "related_type", "related_id"], name="loans_txn_related_idx")],
            },
        ),
    ]
