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
        ("employee", "0001_initial"),
        ("products", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Sale",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, null=True, blank=True)),
                ("modified_at", models.DateTimeField(auto_now=True, null=True, blank=True)),
                ("company", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="+", to="company.company")),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("modified_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("product_code", models.CharField(max_length=50)),
                ("product_name", models.CharField(max_length=150)),
                ("client_name", models.CharField(blank=True, default="", max_length=150)),
                ("seller_name", models.CharField(blank=True, default="", max_length=150)),
                ("warehouse", models.CharField(blank=True, default="", max_length=150)),
                ("quantity", models.PositiveIntegerField()),
                ("sale_price", models.DecimalField(decimal_places=2, max_digits=12)),
                ("sale_price_currency", models.CharField(default="USD", max_length=3)),
                ("total", models.DecimalField(decimal_places=2, default=0, max_digits=14)),
                ("total_base", models.DecimalField(decimal_places=4, default=0, max_digits=16)),
                ("cost_of_goods_sold", models.DecimalField(decimal_places=4, default=0, max_digits=16)),
                ("gross_profit", models.DecimalField(decimal_places=4, default=0, max_digits=16)),
                ("payment_type", models.CharField(choices=[("Cash", "Cash"), ("Partial", "Partial"), ("Loan", "Loan")], default="Cash", max_length=10)),
                ("date", models.DateTimeField(default=django.utils.timezone.now)),
                ("is_deleted", models.BooleanField(default=False)),
                ("deleted_at", models.DateTimeField(blank=True, null=True)),
                ("client", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="sales", to="customer.client")),
                ("deleted_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("product", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="sales", to="products.product")),
                ("seller", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="sales", to="employee.seller")),
            ],
            options={
                "ordering": ["-date"],
            },
        ),
    ]
