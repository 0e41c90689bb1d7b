from django.contrib import admin
from .models import Sale


@admin.register(Sale)
class SaleAdmin(admin.ModelAdmin):
    list_display = ('product_code', 'product_name', 'company', 'quantity',
                    'total', 'sale_price_currency', 'total_base',
                    'gross_profit', 'payment_type', 'client_name', 'date',
                    'is_deleted')
    list_filter = ('payment_type', 'is_deleted', 'company', 'date')
    search_fields = ('product_code', 'product_name', 'client_name', 'seller_name')
    ordering = ('-date',)
