from decimal import Decimal
from django.conf import settings
from django.db import models
from django.contrib.auth.models import User
from company.models import TenantModel
from company.managers import SoftDeleteManager


def normalize_product_code(code):
    return (code or '').strip().upper()


class Product(TenantModel):
    product_code = models.CharField(max_length=50)
    name = models.CharField(max_length=150)
    category = models.CharField(max_length=100, default='Uncategorized')
    quantity = models.PositiveIntegerField(default=0)
    # weighted-average unit cost, base currency
    cost = models.DecimalField(max_digits=14, decimal_places=4, default=0)
    purchase_price = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    purchase_price_currency = models.CharField(max_length=3, default=settings.BASE_CURRENCY)
    purchase_price_base = models.DecimalField(max_digits=14, decimal_places=4, default=0)
    selling_price = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    selling_price_currency = models.CharField(max_length=3, default=settings.BASE_CURRENCY)
    selling_price_base = models.DecimalField(max_digits=14, decimal_places=4, default=0)
    supplier = models.CharField(max_length=150, blank=True, default='')
    location = models.CharField(max_length=150, blank=True, default='')
    min_stock = models.PositiveIntegerField(default=0)
    low_stock = models.BooleanField(default=False)
    is_deleted = models.BooleanField(default=False)
    deleted_at = models.DateTimeField(null=True, blank=True)
    deleted_by = models.ForeignKey(User, on_delete=models.SET_NULL, null=True,
                                   blank=True, related_name='+')

    objects = SoftDeleteManager()

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=['company', 'product_code'],
                                    name='unique_product_code_per_company')
        ]
        ordering = ['product_code']

    def refresh_low_stock(self):
        self.low_stock = self.quantity <= (self.min_stock or 0)
        return self.low_stock

    @property
    def stock_value(self):
        return (self.cost or Decimal('0')) * self.quantity

    def save(self, *args, **kwargs):
        self.product_code = normalize_product_code(self.product_code)
        self.refresh_low_stock()
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.product_code} - {self.name}"
