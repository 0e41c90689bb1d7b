from django.contrib import admin
from company.models import Company


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    list_display = ('name', 'owner', 'user_count', 'warehouse_capacity',
                    'warehouse_capacity_type', 'base_currency', 'created_at')
    search_fields = ('name', 'owner__username')
