from django.db import models
from django.utils import timezone
from company.models import TenantModel
from products.models import Product


class InventoryLog(TenantModel):
    product = models.ForeignKey(Product, on_delete=models.SET_NULL, null=True,
                                blank=True, related_name='inventory_logs')
    product_code = models.CharField(max_length=50)
    change_quantity = models.IntegerField()
    reason = models.CharField(max_length=255, blank=True, default='')
    change_date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-change_date']

    def __str__(self):
        return f"{self.product_code} {self.change_quantity:+d} ({self.reason})"
