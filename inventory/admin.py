from django.contrib import admin
from inventory.models import InventoryLog


@admin.register(InventoryLog)
class InventoryLogAdmin(admin.ModelAdmin):
    list_display = ('product_code', 'company', 'change_quantity', 'reason',
                    'change_date')
    list_filter = ('company', 'change_date')
    search_fields = ('product_code', 'reason')
    date_hierarchy = 'change_date'
