from django.conf import settings
from django.db import models
from django.utils import timezone
from company.models import TenantModel
from customer.models import Client


class ClientLoan(TenantModel):
    client = models.ForeignKey(Client, on_delete=models.CASCADE,
                               related_name='loans')
    client_name = models.CharField(max_length=150)
    loan_amount = models.DecimalField(max_digits=14, decimal_places=2)
    currency = models.CharField(max_length=3, default=settings.BASE_CURRENCY)
    amount_base = models.DecimalField(max_digits=16, decimal_places=4, default=0)
    description = models.TextField(blank=True, default='')
    due_date = models.DateField(null=True, blank=True)
    date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-date']

    def __str__(self):
        return f"Loan {self.loan_amount} {self.currency} to {self.client_name}"


class ClientPayment(TenantModel):
    METHOD_CHOICES = (
        ('Cash', 'Cash'),
        ('Bank', 'Bank'),
        ('Other', 'Other'),
    )
    client = models.ForeignKey(Client, on_delete=models.CASCADE,
                               related_name='payments')
    # base currency
    amount = models.DecimalField(max_digits=16, decimal_places=4)
    method = models.CharField(max_length=10, choices=METHOD_CHOICES, default='Cash')
    reference = models.CharField(max_length=100, blank=True, default='')
    payment_date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-payment_date']

    def __str__(self):
        return f"Payment {self.amount} from {self.client}"


class ClientTransaction(TenantModel):
    TYPE_LOAN = 'Loan'
    TYPE_PAYMENT = 'Payment'
    TYPE_CHOICES = (
        (TYPE_LOAN, 'Loan'),
        (TYPE_PAYMENT, 'Payment'),
    )
    RELATED_CHOICES = (
        ('loan', 'Loan'),
        ('payment', 'Payment'),
        ('sale', 'Sale'),
    )
    client = models.ForeignKey(Client, on_delete=models.CASCADE,
                               related_name='transactions')
    type = models.CharField(max_length=10, choices=TYPE_CHOICES)
    # signed, base currency: loans positive, payments negative
    amount = models.DecimalField(max_digits=16, decimal_places=4)
    related_id = models.PositiveIntegerField(null=True, blank=True)
    related_type = models.CharField(max_length=10, choices=RELATED_CHOICES,
                                    blank=True, default='')
    description = models.CharField(max_length=255, blank=True, default='')
    date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-date']
        indexes = [models.Index(fields=['company', 'related_type', 'related_id'],
                                name='loans_txn_related_idx')]

    def __str__(self):
        return f"{self.type} {self.amount} ({self.client})"
