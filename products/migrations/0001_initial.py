from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("company", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, null=True, blank=True)),
                ("modified_at", models.DateTimeField(auto_now=True, null=True, blank=True)),
                ("company", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="+", to="company.company")),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("modified_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("product_code", models.CharField(max_length=50)),
                ("name", models.CharField(max_length=150)),
                ("category", models.CharField(default="Uncategorized", max_length=100)),
                ("quantity", models.PositiveIntegerField(default=0)),
                ("cost", models.DecimalField(decimal_places=4, default=0, max_digits=14)),
                ("purchase_price", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("purchase_price_currency", models.CharField(default="USD", max_length=3)),
                ("purchase_price_base", models.DecimalField(decimal_places=4, default=0, max_digits=14)),
                ("selling_price", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("selling_price_currency", models.CharField(default="USD", max_length=3)),
                ("selling_price_base", models.DecimalField(decimal_places=4, default=0, max_digits=14)),
                ("supplier", models.CharField(blank=True, default="", max_length=150)),
                ("location", models.CharField(blank=True, default="", max_length=150)),
                ("min_stock", models.PositiveIntegerField(default=0)),
                ("low_stock", models.BooleanField(default=False)),
                ("is_deleted", models.BooleanField(default=False)),
                ("deleted_at", models.DateTimeField(blank=True, null=True)),
                ("deleted_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["product_code"],
            },
        ),
        migrations.AddConstraint(
            model_name="product",
            constraint=models.UniqueConstraint(fields=("company", "product_code"), name="unique_product_code_per_company"),
        ),
    ]
