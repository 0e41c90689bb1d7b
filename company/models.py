from django.conf import settings
from django.db import models
from django.contrib.auth.models import User
from company.managers import TenantManager


class Company(models.Model):
    CAPACITY_TYPE_CHOICES = (
        ('units', 'Units'),
        ('pallets', 'Pallets'),
        ('sqm', 'Square Meters'),
    )
    name = models.CharField(max_length=150)
    owner = models.ForeignKey(User, on_delete=models.SET_NULL, null=True,
                              blank=True, related_name='owned_companies')
    user_count = models.PositiveIntegerField(default=1)
    warehouse_capacity = models.PositiveIntegerField(default=0)
    warehouse_capacity_type = models.CharField(max_length=10,
                                               choices=CAPACITY_TYPE_CHOICES,
                                               default='units')
    base_currency = models.CharField(max_length=3,
                                     default=settings.BASE_CURRENCY)
    created_at = models.DateTimeField(auto_now_add=True, null=True, blank=True)
    modified_at = models.DateTimeField(auto_now=True, null=True, blank=True)

    class Meta:
        verbose_name_plural = "Companies"

    def __str__(self):
        return self.name


class TenantModel(models.Model):
    """Shared columns for every company-owned business record."""
    company = models.ForeignKey(Company, on_delete=models.CASCADE, null=True,
                                blank=True, related_name='+')
    created_at = models.DateTimeField(auto_now_add=True, null=True, blank=True)
    modified_at = models.DateTimeField(auto_now=True, null=True, blank=True)
    created_by = models.ForeignKey(User, on_delete=models.SET_NULL, null=True,
                                   blank=True, related_name='+')
    modified_by = models.ForeignKey(User, on_delete=models.SET_NULL, null=True,
                                    blank=True, related_name='+')

    objects = TenantManager()

    class Meta:
        abstract = True
