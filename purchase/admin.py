from django.contrib import admin
from purchase.models import IncomingProductLog


@admin.register(IncomingProductLog)
class IncomingProductLogAdmin(admin.ModelAdmin):
    list_display = ('product_code', 'company', 'quantity', 'unit_cost',
                    'total_cost', 'supplier', 'date')
    list_filter = ('company', 'date')
    search_fields = ('product_code', 'supplier')
    date_hierarchy = 'date'
