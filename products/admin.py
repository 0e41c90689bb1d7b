from django.contrib import admin
from products.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ('product_code', 'name', 'company', 'category', 'quantity',
                    'cost', 'min_stock', 'low_stock', 'is_deleted')
    list_filter = ('category', 'low_stock', 'is_deleted', 'company')
    search_fields = ('product_code', 'name', 'supplier')
    ordering = ('product_code',)
