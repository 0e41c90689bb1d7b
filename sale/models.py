from django.conf import settings
from django.contrib.auth.models import User
from django.db import models
from django.utils import timezone
from company.managers import SoftDeleteManager
from company.models import TenantModel
from customer.models import Client
from employee.models import Seller
from products.models import Product


class Sale(TenantModel):
    PAYMENT_CASH = 'Cash'
    PAYMENT_PARTIAL = 'Partial'
    PAYMENT_LOAN = 'Loan'
    PAYMENT_TYPE_CHOICES = [
        (PAYMENT_CASH, 'Cash'),
        (PAYMENT_PARTIAL, 'Partial'),
        (PAYMENT_LOAN, 'Loan'),
    ]

    product = models.ForeignKey(Product, on_delete=models.SET_NULL, null=True,
                                blank=True, related_name='sales')
    product_code = models.CharField(max_length=50)
    product_name = models.CharField(max_length=150)
    client = models.ForeignKey(Client, on_delete=models.SET_NULL, null=True,
                               blank=True, related_name='sales')
    client_name = models.CharField(max_length=150, blank=True, default='')
    seller = models.ForeignKey(Seller, on_delete=models.SET_NULL, null=True,
                               blank=True, related_name='sales')
    seller_name = models.CharField(max_length=150, blank=True, default='')
    warehouse = models.CharField(max_length=150, blank=True, default='')
    quantity = models.PositiveIntegerField()
    sale_price = models.DecimalField(max_digits=12, decimal_places=2)
    sale_price_currency = models.CharField(max_length=3, default=settings.BASE_CURRENCY)
    total = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    total_base = models.DecimalField(max_digits=16, decimal_places=4, default=0)
    cost_of_goods_sold = models.DecimalField(max_digits=16, decimal_places=4, default=0)
    gross_profit = models.DecimalField(max_digits=16, decimal_places=4, default=0)
    payment_type = models.CharField(max_length=10, choices=PAYMENT_TYPE_CHOICES,
                                    default=PAYMENT_CASH)
    date = models.DateTimeField(default=timezone.now)
    is_deleted = models.BooleanField(default=False)
    deleted_at = models.DateTimeField(null=True, blank=True)
    deleted_by = models.ForeignKey(User, on_delete=models.SET_NULL, null=True,
                                   blank=True, related_name='+')

    objects = SoftDeleteManager()

    class Meta:
        ordering = ['-date']

    @property
    def is_loan(self):
        return self.payment_type == self.PAYMENT_LOAN

    def __str__(self):
        return f"Sale {self.quantity}x {self.product_code} to {self.client_name or '-'}"
