from django.contrib import admin
from .models import DailyExpense


@admin.register(DailyExpense)
class DailyExpenseAdmin(admin.ModelAdmin):
    list_display = ('expense_type', 'company', 'amount', 'currency',
                    'amount_base', 'date', 'employee_name', 'paid_to_seller_name')
    list_filter = ('expense_type', 'currency', 'company', 'date')
    search_fields = ('description', 'employee_name', 'paid_to_seller_name')
