from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Company",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=150)),
                ("user_count", models.PositiveIntegerField(default=1)),
                ("warehouse_capacity", models.PositiveIntegerField(default=0)),
                ("warehouse_capacity_type", models.CharField(choices=[("units", "Units"), ("pallets", "Pallets"), ("sqm", "Square Meters")], default="units", max_length=10)),
                ("base_currency", models.CharField(default="USD", max_length=3)),
                ("created_at", models.DateTimeField(auto_now_add=True, null=True, blank=True)),
                ("modified_at", models.DateTimeField(auto_now=True, null=True, blank=True)),
                ("owner", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="owned_companies", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "verbose_name_plural": "Companies",
            },
        ),
    ]
