from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("company", "0001_initial"),
        ("employee", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="DailyExpense",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, null=True, blank=True)),
                ("modified_at", models.DateTimeField(auto_now=True, null=True, blank=True)),
                ("company", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="+", to="company.company")),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("modified_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="+", to=settings.AUTH_USER_MODEL)),
                ("expense_type", models.CharField(choices=[("rent", "Rent"), ("utilities", "Utilities"), ("supplies", "Supplies"), ("transport", "Transport"), ("salary", "Salary"), ("others", "Others")], max_length=20)),
                ("description", models.TextField(blank=True, default="")),
                ("amount", models.DecimalField(decimal_places=2, max_digits=14)),
                ("currency", models.CharField(default="USD", max_length=3)),
                ("amount_base", models.DecimalField(decimal_places=4, default=0, max_digits=16)),
                ("date", models.DateField(default=django.utils.timezone.now)),
                ("paid_to_seller_name", models.CharField(blank=True, default="", max_length=150)),
                ("employee_name", models.CharField(blank=True, default="", max_length=150)),
                ("employee", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="salary_expenses", to="employee.employee")),
                ("paid_to_seller", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="salary_expenses", to="employee.seller")),
            ],
            options={
                "ordering": ["-date", "-id"],
            },
        ),
    ]
