from django.conf import settings
from django.db import models
from django.utils import timezone
from company.models import TenantModel

STATUS_CHOICES = (
    ('active', 'Active'),
    ('inactive', 'Inactive'),
)


class Employee(TenantModel):
    employee_name = models.CharField(max_length=150)
    position = models.CharField(max_length=100, blank=True, default='')
    phone = models.CharField(max_length=30, blank=True, null=True)
    email = models.EmailField(blank=True, null=True)
    salary = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    salary_currency = models.CharField(max_length=3, default=settings.BASE_CURRENCY)
    hire_date = models.DateField(default=timezone.now)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='active')

    class Meta:
        ordering = ['employee_name']

    def __str__(self):
        return self.employee_name


class Seller(TenantModel):
    name = models.CharField(max_length=150)
    contact = models.CharField(max_length=100, blank=True, default='')
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default='active')

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name
