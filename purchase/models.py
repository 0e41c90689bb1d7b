from django.db import models
from django.utils import timezone
from company.models import TenantModel
from products.models import Product


class IncomingProductLog(TenantModel):
    product = models.ForeignKey(Product, on_delete=models.SET_NULL, null=True,
                                blank=True, related_name='incoming_logs')
    product_code = models.CharField(max_length=50)
    quantity = models.PositiveIntegerField()
    unit_cost = models.DecimalField(max_digits=14, decimal_places=4)
    total_cost = models.DecimalField(max_digits=16, decimal_places=4, default=0)
    supplier = models.CharField(max_length=150, blank=True, default='')
    date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-date']

    def calculate_totals(self):
        self.total_cost = self.quantity * self.unit_cost

    def save(self, *args, **kwargs):
        self.calculate_totals()
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.quantity}x {self.product_code} @ {self.unit_cost}"
