from django.conf import settings
from django.db import models
from django.utils import timezone
from company.models import TenantModel
from employee.models import Employee, Seller


class DailyExpense(TenantModel):
    EXPENSE_TYPE_CHOICES = (
        ('rent', 'Rent'),
        ('utilities', 'Utilities'),
        ('supplies', 'Supplies'),
        ('transport', 'Transport'),
        ('salary', 'Salary'),
        ('others', 'Others'),
    )
    expense_type = models.CharField(max_length=20, choices=EXPENSE_TYPE_CHOICES)
    description = models.TextField(blank=True, default='')
    amount = models.DecimalField(max_digits=14, decimal_places=2)
    currency = models.CharField(max_length=3, default=settings.BASE_CURRENCY)
    amount_base = models.DecimalField(max_digits=16, decimal_places=4, default=0)
    date = models.DateField(default=timezone.now)
    paid_to_seller = models.ForeignKey(Seller, on_delete=models.SET_NULL,
                                       null=True, blank=True,
                                       related_name='salary_expenses')
    paid_to_seller_name = models.CharField(max_length=150, blank=True, default='')
    employee = models.ForeignKey(Employee, on_delete=models.SET_NULL, null=True,
                                 blank=True, related_name='salary_expenses')
    employee_name = models.CharField(max_length=150, blank=True, default='')

    class Meta:
        ordering = ['-date', '-id']

    def __str__(self):
        return f"{self.get_expense_type_display()} {self.amount} {self.currency}"
